"""User input handling for the terminal UI."""

from typing import List, Optional

from rich.console import Console

from casual_mahjong.core.tile import Tile
from casual_mahjong.ui.tile_display import hand_display_order


def parse_tile_choice(choice: str, tiles: List[Tile]) -> Optional[Tile]:
    """Map a 1-based position typed by the player to a tile."""
    try:
        idx = int(choice.strip()) - 1
    except ValueError:
        return None
    if 0 <= idx < len(tiles):
        return tiles[idx]
    return None


def get_discard_input(console: Console, tiles: List[Tile],
                      draw_tile: Optional[Tile] = None) -> Tile:
    """Prompt until the player names a tile by its position."""
    display = hand_display_order(tiles, draw_tile)
    prompt = f"  > Choose a tile to discard (1-{len(display)}): "
    while True:
        tile = parse_tile_choice(console.input(prompt), display)
        if tile is not None:
            return tile
        console.print("  [red]No tile selected. Please select a tile to discard[/red]")
