"""Draw pile (牌山) management and the initial deal."""

import random
from typing import List, Optional

from .tile import Tile, build_shuffled_deck, build_tile_set, sort_tiles

HAND_SIZE = 13


class DrawPile:
    """The face-down stock. Built with all 136 tiles, then dealt from the front.

    There is no dead wall: every undealt tile is drawable.
    """

    def __init__(self, rng: Optional[random.Random] = None, shuffle: bool = True):
        self._build_pile(rng, shuffle)

    def _build_pile(self, rng: Optional[random.Random], shuffle: bool):
        """Build (and optionally shuffle) the full set."""
        if shuffle:
            self.all_tiles = build_shuffled_deck(rng)
        else:
            self.all_tiles = build_tile_set()
        self.tiles = list(self.all_tiles)

    @classmethod
    def from_tiles(cls, tiles: List[Tile]) -> 'DrawPile':
        """Build a pile from a predetermined tile order (for tests and replays)."""
        pile = cls.__new__(cls)
        pile.all_tiles = list(tiles)
        pile.tiles = list(tiles)
        return pile

    @property
    def remaining(self) -> int:
        """Number of tiles left to draw."""
        return len(self.tiles)

    def draw(self) -> Optional[Tile]:
        """Take the front tile, or None when exhausted."""
        if self.tiles:
            return self.tiles.pop(0)
        return None

    def deal(self, num_players: int, hand_size: int = HAND_SIZE) -> List[List[Tile]]:
        """Give consecutive blocks of ``hand_size`` tiles to each player.

        Player 0 gets the first block, player 1 the next, and so on. A short
        pile produces short (possibly empty) hands rather than an error.
        """
        hands = []
        for i in range(num_players):
            block = self.tiles[i * hand_size:(i + 1) * hand_size]
            hands.append(sort_tiles(block))
        self.tiles = self.tiles[num_players * hand_size:]
        return hands
