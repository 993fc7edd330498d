"""Tests for tile.py"""

import random
import sys
import os
from collections import Counter
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from casual_mahjong.core.tile import (
    Tile, TileSuit, TOTAL_TILES, NUMBERED_SUITS, WIND_VALUES, DRAGON_VALUES,
    build_tile_set, build_shuffled_deck, compare_tiles, sort_tiles,
    make_tiles_from_string,
)


class TestTileBasic:
    def test_tile_count(self):
        assert TOTAL_TILES == 136
        assert len(build_tile_set()) == 136

    def test_ids_are_unique(self):
        tiles = build_tile_set()
        assert len({t.id for t in tiles}) == 136

    def test_four_copies_of_every_face(self):
        counts = Counter(t.key for t in build_tile_set())
        assert len(counts) == 34
        assert set(counts.values()) == {4}
        for suit in NUMBERED_SUITS:
            for value in range(1, 10):
                assert counts[(suit, value)] == 4
        for wind in WIND_VALUES:
            assert counts[(TileSuit.WIND, wind)] == 4
        for dragon in DRAGON_VALUES:
            assert counts[(TileSuit.DRAGON, dragon)] == 4

    def test_no_flower_tiles(self):
        assert all(t.suit != TileSuit.FLOWER for t in build_tile_set())

    def test_enumeration_order(self):
        tiles = build_tile_set()
        assert tiles[0].id == "bamboo-1-0"
        assert tiles[36].key == (TileSuit.CHARACTER, 1)
        assert tiles[72].key == (TileSuit.DOT, 1)
        assert tiles[108].id == "wind-east-108"
        assert tiles[124].key == (TileSuit.DRAGON, "red")
        assert tiles[135].id == "dragon-white-135"

    def test_suit_labels(self):
        assert TileSuit.BAMBOO.label == "bamboo"
        assert TileSuit.from_label("dragon") == TileSuit.DRAGON


class TestTileValidation:
    def test_number_out_of_range(self):
        with pytest.raises(ValueError):
            Tile("x", TileSuit.BAMBOO, 10)
        with pytest.raises(ValueError):
            Tile("x", TileSuit.DOT, 0)

    def test_bad_honor_value(self):
        with pytest.raises(ValueError):
            Tile("x", TileSuit.WIND, "up")
        with pytest.raises(ValueError):
            Tile("x", TileSuit.DRAGON, 3)

    def test_immutable(self):
        tile = Tile("bamboo-1-0", TileSuit.BAMBOO, 1)
        with pytest.raises(AttributeError):
            tile.value = 2

    def test_equality_uses_id(self):
        a = Tile("bamboo-1-0", TileSuit.BAMBOO, 1)
        b = Tile("bamboo-1-1", TileSuit.BAMBOO, 1)
        assert a != b
        assert a.key == b.key
        assert a == Tile("bamboo-1-0", TileSuit.BAMBOO, 1)
        assert len({a, b, Tile("bamboo-1-0", TileSuit.BAMBOO, 1)}) == 2


class TestShuffle:
    def test_shuffle_keeps_the_set(self):
        deck = build_shuffled_deck(random.Random(1))
        assert sorted(t.id for t in deck) == sorted(t.id for t in build_tile_set())

    def test_seeded_shuffle_is_reproducible(self):
        a = build_shuffled_deck(random.Random(42))
        b = build_shuffled_deck(random.Random(42))
        assert [t.id for t in a] == [t.id for t in b]
        assert [t.id for t in a] != [t.id for t in build_tile_set()]


class TestOrdering:
    def test_suit_rank(self):
        tiles = make_tiles_from_string("9b1c1dEH")
        assert sort_tiles(list(reversed(tiles))) == tiles

    def test_numeric_within_suit(self):
        tiles = make_tiles_from_string("931b")
        assert [t.value for t in sort_tiles(tiles)] == [1, 3, 9]

    def test_honors_compare_by_text(self):
        winds = make_tiles_from_string("ESWN")
        assert [t.value for t in sort_tiles(winds)] == ["east", "north", "south", "west"]
        dragons = make_tiles_from_string("RGH")
        assert [t.value for t in sort_tiles(dragons)] == ["green", "red", "white"]

    def test_flower_sorts_last(self):
        flower = Tile("flower-1", TileSuit.FLOWER, 1)
        dragon = make_tiles_from_string("H")[0]
        assert dragon < flower
        assert compare_tiles(flower, dragon) > 0

    def test_copies_compare_equal(self):
        a, b = make_tiles_from_string("55b")
        assert compare_tiles(a, b) == 0
        assert sort_tiles([b, a]) == [b, a]


class TestMakeTiles:
    def test_parse(self):
        tiles = make_tiles_from_string("123b EE R")
        assert len(tiles) == 6
        assert tiles[0].key == (TileSuit.BAMBOO, 1)
        assert tiles[3].key == (TileSuit.WIND, "east")
        assert tiles[5].key == (TileSuit.DRAGON, "red")
        assert len({t.id for t in tiles}) == 6
