"""Isolated (孤张) tile detection.

A numbered tile is isolated when no other tile of its suit lies within two
steps of it. An honor tile is isolated when no other copy of it is in hand.
"""

from typing import List

from casual_mahjong.core.tile import Tile

NEIGHBOR_DISTANCE = 2


def _is_neighbor(tile: Tile, other: Tile) -> bool:
    if tile.suit != other.suit:
        return False
    if tile.is_number_tile:
        return abs(tile.value - other.value) <= NEIGHBOR_DISTANCE
    return tile.value == other.value


def is_isolated(tiles: List[Tile], index: int) -> bool:
    """Check whether ``tiles[index]`` has no neighbor elsewhere in ``tiles``."""
    tile = tiles[index]
    return not any(
        _is_neighbor(tile, other)
        for i, other in enumerate(tiles) if i != index
    )


def find_isolated_tiles(tiles: List[Tile]) -> List[Tile]:
    """Isolated tiles in hand order."""
    return [t for i, t in enumerate(tiles) if is_isolated(tiles, i)]
