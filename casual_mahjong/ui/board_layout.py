"""Board layout rendering using Rich."""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from casual_mahjong.engine.game import GameSnapshot, PlayerView
from casual_mahjong.ui.tile_display import (
    tile_to_rich_text, tiles_to_rich_text, tile_cell_width, hand_display_order,
)

COL_WIDTH = 5  # Fixed display column width per tile slot


def render_board(console: Console, snapshot: GameSnapshot, human_seat=0,
                 clear: bool = True):
    """Render the full board state from the human seat's point of view."""
    if clear:
        console.clear()

    header = Text()
    header.append(f"  Difficulty: {snapshot.difficulty.value}")
    header.append(f"   Tiles left: {snapshot.draw_pile_remaining}")
    current = snapshot.current_player
    if current is not None:
        header.append(f"\n  Turn: {current.name}")

    console.print(Panel(header, title="[bold]Mahjong[/bold]", border_style="cyan"))

    for player in snapshot.players:
        _render_player_row(console, player,
                           is_current=(player.seat == snapshot.current_player_index),
                           is_self=(player.seat == human_seat))

    console.print("─" * 60, style="dim")

    if human_seat is not None and snapshot.players:
        _render_player_hand(console, snapshot, snapshot.players[human_seat])


def _render_player_row(console: Console, player: PlayerView, is_current: bool,
                       is_self: bool):
    """Render one player's header + discard pool."""
    if is_self:
        name_display = f"[bold cyan]{player.name}[/bold cyan]"
    else:
        name_display = player.name
    turn_mark = " [bold yellow]<[/bold yellow]" if is_current else ""

    console.print(f"  {name_display} ({len(player.hand)} tiles){turn_mark}")

    if player.discards:
        discard_text = Text("  Discards: ")
        discard_text.append_text(tiles_to_rich_text(list(player.discards)))
        console.print(discard_text)
    else:
        console.print("  Discards: ", style="dim")

    console.print()


def _render_player_hand(console: Console, snapshot: GameSnapshot, player: PlayerView):
    """Render the human hand with position numbers, drawn tile last."""
    console.print("  [bold]Your hand[/bold]")

    draw_tile = snapshot.last_drawn_tile if snapshot.current_player_index == player.seat else None
    tiles = hand_display_order(list(player.hand), draw_tile)

    num_text = Text("  ")
    tile_text = Text("  ")
    for i, tile in enumerate(tiles):
        is_drawn = draw_tile is not None and tile == draw_tile
        if is_drawn:
            num_text.append(" ")
            tile_text.append(" ")

        label = str(i + 1)
        gap = max(COL_WIDTH - tile_cell_width(tile), 1)
        cell_width = tile_cell_width(tile) + gap
        pad_left = (cell_width - len(label)) // 2
        pad_right = cell_width - len(label) - pad_left
        num_text.append(" " * pad_left + label + " " * pad_right,
                        style="dim cyan" if is_drawn else "dim")

        tile_text.append_text(tile_to_rich_text(
            tile, highlight=is_drawn,
            selected=(tile.id == snapshot.selected_tile_id),
        ))
        tile_text.append(" " * gap)

    console.print(num_text)
    console.print(tile_text)
    console.print()


def render_win_screen(console: Console, snapshot: GameSnapshot):
    """Render the winner panel and the winning hand."""
    console.print()
    console.print(Panel(
        f"[bold green]Winner! {snapshot.winner_name} wins![/bold green]",
        border_style="green",
    ))
    winner = next(p for p in snapshot.players if p.player_id == snapshot.winner)
    hand_text = Text("  ")
    hand_text.append_text(tiles_to_rich_text(list(winner.hand)))
    console.print(hand_text)
    console.print()


def render_draw_screen(console: Console):
    """Render the exhaustive draw panel."""
    console.print()
    console.print(Panel("[bold yellow]Game Over: no more tiles to draw. "
                        "Game ends in a draw.[/bold yellow]",
                        border_style="yellow"))
    console.print()


def render_game_end(console: Console, snapshot: GameSnapshot):
    """Render the result panel followed by every player's final hand."""
    if snapshot.winner is not None:
        render_win_screen(console, snapshot)
    else:
        render_draw_screen(console)

    table = Table(title="Final hands", border_style="gold1")
    table.add_column("Player", style="bold")
    table.add_column("Tiles", justify="right")
    table.add_column("Discards", justify="right")
    for p in snapshot.players:
        style = "bold green" if p.player_id == snapshot.winner else ""
        table.add_row(p.name, str(len(p.hand)), str(len(p.discards)), style=style)
    console.print(table)
    console.print()
