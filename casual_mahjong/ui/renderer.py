"""Rich rendering engine - ties together all UI components."""

from rich.console import Console
from rich.text import Text

from casual_mahjong.engine.event import EventBus, EventType, GameEvent
from casual_mahjong.engine.game import GameSnapshot
from casual_mahjong.ui.board_layout import render_board, render_game_end
from casual_mahjong.ui.tile_display import tile_to_rich_text


class Renderer:
    """Main rendering engine that subscribes to game events."""

    def __init__(self, console: Console, event_bus: EventBus,
                 player_names, human_seat=0):
        self.console = console
        self.event_bus = event_bus
        self.player_names = list(player_names)
        self.human_seat = human_seat
        event_bus.subscribe_all({
            EventType.DISCARD: self._on_discard,
            EventType.EXHAUSTIVE_DRAW: self._on_exhaustive_draw,
        })

    def render_snapshot(self, snapshot: GameSnapshot):
        """Render the current board state from the human player's perspective."""
        render_board(self.console, snapshot, self.human_seat)

    def show_result(self, snapshot: GameSnapshot):
        render_game_end(self.console, snapshot)

    def _on_discard(self, event: GameEvent):
        player_idx = event.data["player"]
        if player_idx == self.human_seat:
            return
        line = Text(f"  {self.player_names[player_idx]} discarded ")
        line.append_text(tile_to_rich_text(event.data["tile"]))
        self.console.print(line)

    def _on_exhaustive_draw(self, event: GameEvent):
        self.console.print("  [dim]The draw pile is empty.[/dim]")

