"""Win (和了) detection - simplified triplet/pair count.

Runs (顺子) are never credited: only identical faces are grouped. A hand
wins with three or more triplets, or with five or more pairs, where a
triplet also counts as a pair.
"""

from collections import Counter
from typing import Iterable, Tuple

from casual_mahjong.core.tile import Tile

WINNING_HAND_SIZE = 14
MIN_TRIPLETS = 3
MIN_PAIRS = 5


def count_groups(tiles: Iterable[Tile]) -> Tuple[int, int]:
    """Return (pairs, triplets): faces with at least 2 and at least 3 copies."""
    counts = Counter(t.key for t in tiles)
    pairs = sum(1 for c in counts.values() if c >= 2)
    triplets = sum(1 for c in counts.values() if c >= 3)
    return pairs, triplets


def is_agari(tiles) -> bool:
    """Check if a 14-tile hand is a winning hand."""
    tiles = list(tiles)
    if len(tiles) != WINNING_HAND_SIZE:
        return False
    pairs, triplets = count_groups(tiles)
    return triplets >= MIN_TRIPLETS or pairs >= MIN_PAIRS
