"""Human player - interfaces with terminal UI for input."""

from typing import Optional

from rich.console import Console

from casual_mahjong.core.tile import Tile
from casual_mahjong.player.base import Player, GameView
from casual_mahjong.ui.input_handler import get_discard_input


class HumanPlayer(Player):
    """Human player that picks discards at the terminal."""

    def __init__(self, name: str, console: Console):
        super().__init__(name)
        self.console = console

    def choose_discard(self, game_view: GameView) -> Optional[Tile]:
        if not game_view.my_tiles:
            return None
        return get_discard_input(self.console, game_view.my_tiles, game_view.last_drawn)
