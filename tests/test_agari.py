"""Tests for agari.py - simplified win detection"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from casual_mahjong.core.tile import make_tiles_from_string
from casual_mahjong.rules.agari import is_agari, count_groups


def hand(s):
    return make_tiles_from_string(s)


class TestCountGroups:
    def test_triplet_is_also_a_pair(self):
        assert count_groups(hand("111b22c3d")) == (2, 1)

    def test_four_of_a_kind(self):
        assert count_groups(hand("EEEE")) == (1, 1)


class TestIsAgari:
    def test_three_triplets(self):
        tiles = hand("111b222c333d45678b")
        assert len(tiles) == 14
        assert is_agari(tiles)

    def test_five_pairs(self):
        tiles = hand("11b22b33b44b55b1c2c3c4c")
        assert len(tiles) == 14
        assert is_agari(tiles)

    def test_four_pairs_is_not_enough(self):
        tiles = hand("11b22b33b44b579cESN")
        assert len(tiles) == 14
        assert not is_agari(tiles)

    def test_triplets_count_toward_pairs(self):
        tiles = hand("111b222b33c44c55cES")
        assert len(tiles) == 14
        assert count_groups(tiles) == (5, 2)
        assert is_agari(tiles)

    def test_runs_are_not_credited(self):
        tiles = hand("123b456b789b123cEE")
        assert len(tiles) == 14
        assert not is_agari(tiles)

    def test_needs_fourteen_tiles(self):
        tiles = hand("111b222c333d444bE")
        assert len(tiles) == 13
        assert not is_agari(tiles)
