"""Tile display formatting with colors for terminal output."""

from typing import List, Optional

from rich.text import Text

from casual_mahjong.core.tile import Tile, TileSuit


SUIT_PREFIX = {
    TileSuit.BAMBOO: "B",
    TileSuit.CHARACTER: "C",
    TileSuit.DOT: "D",
}

HONOR_NAMES = {
    "east": "E", "south": "S", "west": "W", "north": "N",
    "red": "Rd", "green": "Gn", "white": "Wh",
}

# Color schemes
SUIT_COLORS = {
    TileSuit.BAMBOO: "green",
    TileSuit.CHARACTER: "blue",
    TileSuit.DOT: "dark_orange",
    TileSuit.WIND: "magenta",
    TileSuit.DRAGON: "red",
    TileSuit.FLOWER: "grey50",
}


def tile_to_simple_str(tile: Tile) -> str:
    """Short fixed-width-ish name: B1, C9, D5, E, Rd."""
    if tile.suit in SUIT_PREFIX:
        return f"{SUIT_PREFIX[tile.suit]}{tile.value}"
    return HONOR_NAMES.get(str(tile.value), "?")


def tile_to_rich_text(tile: Tile, highlight: bool = False, selected: bool = False) -> Text:
    """Convert a tile to a Rich Text object with appropriate colors."""
    style = f"bold {SUIT_COLORS[tile.suit]}"
    if highlight:
        style += " on white"
    if selected:
        style += " reverse"
    return Text(f"[{tile_to_simple_str(tile)}]", style=style)


def tiles_to_rich_text(tiles: List[Tile], separator: str = " ") -> Text:
    """Convert a list of tiles to Rich Text."""
    result = Text()
    for i, tile in enumerate(tiles):
        if i > 0:
            result.append(separator)
        result.append_text(tile_to_rich_text(tile))
    return result


def tile_cell_width(tile: Tile) -> int:
    """Display width of a tile cell, brackets included."""
    return len(tile_to_simple_str(tile)) + 2


def hand_display_order(tiles: List[Tile], draw_tile: Optional[Tile]) -> List[Tile]:
    """Hand tiles in display order with the drawn tile moved to the end."""
    display = [t for t in tiles if t != draw_tile]
    if draw_tile is not None and draw_tile in tiles:
        display.append(draw_tile)
    return display
