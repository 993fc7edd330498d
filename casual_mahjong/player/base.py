"""Abstract player interface and GameView (read-only information barrier)."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional

from casual_mahjong.core.tile import Tile


@dataclass
class OpponentView:
    """Read-only view of an opponent (no hidden tiles)."""
    seat: int
    name: str
    is_ai: bool
    discard_pool: List[Tile]
    num_tiles: int


@dataclass
class GameView:
    """Read-only view of visible game state for one seat.

    Players only see their own tiles; opponents expose discards and
    hand size.
    """
    my_tiles: List[Tile]
    my_seat: int
    my_discards: List[Tile] = field(default_factory=list)
    opponents: List[OpponentView] = field(default_factory=list)
    remaining_tiles: int = 0
    last_drawn: Optional[Tile] = None


class Player(ABC):
    """Abstract base class for all players."""

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def choose_discard(self, game_view: GameView) -> Optional[Tile]:
        """Choose a tile from ``game_view.my_tiles`` to discard."""
        ...


def build_game_view(player_idx: int, players: List, remaining_tiles: int) -> GameView:
    """Build a GameView for the given seat from a list of PlayerState."""
    me = players[player_idx]

    opponents = []
    for p in players:
        if p.seat == player_idx:
            continue
        opponents.append(OpponentView(
            seat=p.seat,
            name=p.name,
            is_ai=p.is_ai,
            discard_pool=list(p.hand.discard_pool),
            num_tiles=len(p.hand.tiles),
        ))

    return GameView(
        my_tiles=list(me.hand.tiles),
        my_seat=player_idx,
        my_discards=list(me.hand.discard_pool),
        opponents=opponents,
        remaining_tiles=remaining_tiles,
        last_drawn=me.hand.draw_tile,
    )
