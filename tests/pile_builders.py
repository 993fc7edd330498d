"""Predetermined draw piles for engine tests."""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from casual_mahjong.core.tile import build_tile_set, COPIES_PER_TILE
from casual_mahjong.core.wall import DrawPile, HAND_SIZE

NUM_FACES = 34


def tiles_by_face():
    """The unshuffled set grouped as 34 lists of 4 copies."""
    tiles = build_tile_set()
    return [tiles[f * COPIES_PER_TILE:(f + 1) * COPIES_PER_TILE] for f in range(NUM_FACES)]


def no_win_order():
    """Seat p is dealt copy p of faces 0..12, so every hand has 13 distinct faces.

    The rest of the set follows face by face, so the first draws can never
    complete three triplets or five pairs.
    """
    by_face = tiles_by_face()
    order = []
    for seat in range(4):
        order.extend(by_face[f][seat] for f in range(HAND_SIZE))
    dealt = {t.id for t in order}
    order.extend(t for t in build_tile_set() if t.id not in dealt)
    return order


def no_win_pile():
    return DrawPile.from_tiles(no_win_order())


def dealt_only_pile():
    """Exactly enough tiles for the deal; the first draw exhausts the pile."""
    return DrawPile.from_tiles(no_win_order()[:4 * HAND_SIZE])


def winning_pile():
    """Unshuffled set: seat 0 holds three full triplets-plus and wins on its first draw."""
    return DrawPile(shuffle=False)
