"""Scripted opponents - difficulty-tiered discard selection.

The selection itself is a pure function of (tiles, difficulty, rng) so it
can be exercised without a running game:

- easy: any tile, uniformly at random
- medium: a random isolated tile, else any tile
- hard: the first isolated tile in hand order, else any tile

Among isolated tiles hard is less random than medium.
"""

import random
from enum import Enum
from typing import List, Optional

from casual_mahjong.core.tile import Tile
from casual_mahjong.player.base import Player, GameView
from casual_mahjong.rules.isolation import find_isolated_tiles


class Difficulty(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, value) -> 'Difficulty':
        """Map user input to a tier. Missing or unknown input means MEDIUM."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        return cls.MEDIUM


def _random_tile(tiles: List[Tile], rng) -> Tile:
    return tiles[rng.randrange(len(tiles))]


def find_strategic_discard(tiles: List[Tile], rng=None) -> Optional[Tile]:
    """Prefer the first isolated tile; otherwise a random one."""
    if not tiles:
        return None
    isolated = find_isolated_tiles(tiles)
    if isolated:
        return isolated[0]
    return _random_tile(tiles, rng or random)


def select_opponent_discard(tiles: List[Tile], difficulty,
                            rng: Optional[random.Random] = None) -> Optional[Tile]:
    """Pick the tile a scripted opponent discards. No side effects."""
    if not tiles:
        return None
    rng = rng or random
    difficulty = Difficulty.parse(difficulty)

    if difficulty == Difficulty.EASY:
        return _random_tile(tiles, rng)

    if difficulty == Difficulty.MEDIUM:
        isolated = find_isolated_tiles(tiles)
        if isolated:
            return _random_tile(isolated, rng)
        return _random_tile(tiles, rng)

    return find_strategic_discard(tiles, rng)


class ScriptedAI(Player):
    """Opponent that discards by difficulty tier."""

    def __init__(self, name: str, difficulty: Difficulty = Difficulty.MEDIUM,
                 rng: Optional[random.Random] = None):
        super().__init__(name)
        self.difficulty = Difficulty.parse(difficulty)
        self.rng = rng or random.Random()

    def choose_discard(self, game_view: GameView) -> Optional[Tile]:
        return select_opponent_discard(game_view.my_tiles, self.difficulty, self.rng)
