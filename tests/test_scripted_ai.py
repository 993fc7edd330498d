"""Tests for scripted_ai.py"""

import random
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from casual_mahjong.core.tile import make_tiles_from_string
from casual_mahjong.player.base import GameView
from casual_mahjong.player.scripted_ai import (
    Difficulty, ScriptedAI, find_strategic_discard, select_opponent_discard,
)


class TestDifficultyParse:
    def test_known_tiers(self):
        assert Difficulty.parse("easy") == Difficulty.EASY
        assert Difficulty.parse(" HARD ") == Difficulty.HARD
        assert Difficulty.parse(Difficulty.MEDIUM) == Difficulty.MEDIUM

    def test_fallback_is_medium(self):
        assert Difficulty.parse(None) == Difficulty.MEDIUM
        assert Difficulty.parse("impossible") == Difficulty.MEDIUM
        assert Difficulty.parse(3) == Difficulty.MEDIUM


class TestSelectOpponentDiscard:
    def test_empty_hand(self):
        for tier in Difficulty:
            assert select_opponent_discard([], tier) is None

    def test_easy_picks_from_hand(self):
        tiles = make_tiles_from_string("123b456c789dEEE")
        rng = random.Random(5)
        for _ in range(20):
            assert select_opponent_discard(tiles, "easy", rng) in tiles

    def test_easy_is_reproducible_with_seed(self):
        tiles = make_tiles_from_string("123b456c789dEEE")
        a = [select_opponent_discard(tiles, "easy", random.Random(s)) for s in range(10)]
        b = [select_opponent_discard(tiles, "easy", random.Random(s)) for s in range(10)]
        assert a == b

    def test_medium_only_picks_isolated(self):
        tiles = make_tiles_from_string("159b234c")
        isolated = tiles[:3]
        picks = {select_opponent_discard(tiles, Difficulty.MEDIUM, random.Random(s))
                 for s in range(50)}
        assert picks <= set(isolated)
        assert len(picks) > 1

    def test_medium_single_isolated(self):
        tiles = make_tiles_from_string("123bN")
        for s in range(10):
            assert select_opponent_discard(tiles, "medium", random.Random(s)) == tiles[3]

    def test_hard_picks_first_isolated(self):
        tiles = make_tiles_from_string("159b234c")
        for s in range(10):
            assert select_opponent_discard(tiles, "hard", random.Random(s)) == tiles[0]

    def test_fallback_without_isolated(self):
        tiles = make_tiles_from_string("123b456c")
        for tier in ("medium", "hard"):
            assert select_opponent_discard(tiles, tier, random.Random(1)) in tiles

    def test_does_not_modify_hand(self):
        tiles = make_tiles_from_string("159b234cEE")
        before = list(tiles)
        for tier in Difficulty:
            select_opponent_discard(tiles, tier, random.Random(0))
        assert tiles == before

    def test_unknown_difficulty_behaves_as_medium(self):
        tiles = make_tiles_from_string("123bN")
        assert select_opponent_discard(tiles, "bogus", random.Random(0)) == tiles[3]


class TestStrategicDiscard:
    def test_empty(self):
        assert find_strategic_discard([]) is None

    def test_first_isolated(self):
        tiles = make_tiles_from_string("12b 7b E")
        assert find_strategic_discard(tiles) == tiles[2]


class TestScriptedAI:
    def test_choose_discard_uses_view(self):
        tiles = make_tiles_from_string("123bN")
        ai = ScriptedAI("bot", "hard", random.Random(0))
        view = GameView(my_tiles=tiles, my_seat=1)
        assert ai.choose_discard(view) == tiles[3]

    def test_difficulty_parsed(self):
        assert ScriptedAI("bot", "nope").difficulty == Difficulty.MEDIUM
