"""Player state tracking during a game."""

from typing import List, Optional

from .hand import Hand
from .tile import Tile

DEFAULT_PLAYER_IDS = ["player", "ai1", "ai2", "ai3"]
DEFAULT_PLAYER_NAMES = ["You", "AI Bot 1", "AI Bot 2", "AI Bot 3"]


class PlayerState:
    """Complete state for one seat.

    Attributes:
        seat: Seat index (0-3, fixed)
        player_id: Stable identity reported as the winner
        name: Display name
        is_ai: Whether a scripted opponent controls this seat
        hand: Current hand state (rebuilt on reset)
    """

    def __init__(self, seat: int, player_id: str, name: str, is_ai: bool,
                 tiles: Optional[List[Tile]] = None):
        self.seat = seat
        self.player_id = player_id
        self.name = name
        self.is_ai = is_ai
        self.hand = Hand(tiles)

    def __repr__(self):
        kind = "AI" if self.is_ai else "human"
        return f"PlayerState({self.name}, {kind}, {len(self.hand)} tiles)"
