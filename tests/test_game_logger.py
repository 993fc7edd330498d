"""Tests for game_logger.py"""

import json
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from casual_mahjong.engine.event import EventBus
from casual_mahjong.engine.game import GameConfig, TurnEngine
from casual_mahjong.engine.game_logger import GameLogger

from pile_builders import no_win_pile, winning_pile


def make_logged_engine(log_dir):
    config = GameConfig(think_delay=1.0, draw_delay=0.5, seed=3, log_dir=str(log_dir))
    bus = EventBus()
    game_logger = GameLogger(config.player_names, config.to_dict(), config.log_dir)
    game_logger.subscribe_events(bus)
    return TurnEngine(config, bus), game_logger


class TestGameLogger:
    def test_records_deal(self, tmp_path):
        engine, game_logger = make_logged_engine(tmp_path)
        engine.new_game(pile=no_win_pile())

        assert len(game_logger.games) == 1
        game = game_logger.current_game
        assert len(game["pile"]["tile_ids"]) == 136
        assert set(game["initial_hands"]) == {"You", "AI Bot 1", "AI Bot 2", "AI Bot 3"}
        assert game["initial_hands"]["AI Bot 2"]["seat"] == 2
        assert game["initial_hands"]["AI Bot 2"]["is_ai"]
        assert all(len(h["tiles"]) == 13 for h in game["initial_hands"].values())
        assert game["actions"] == []
        assert game["result"] is None

    def test_records_actions(self, tmp_path):
        engine, game_logger = make_logged_engine(tmp_path)
        engine.new_game(pile=no_win_pile())
        engine.scheduler.advance(0.5)
        tile = engine.snapshot().players[0].hand[0]
        engine.discard(0, tile.id)

        actions = game_logger.current_game["actions"]
        assert [a["action"] for a in actions] == ["draw", "discard"]
        assert actions[0]["player"] == "You"
        assert actions[0]["remaining"] == 83
        assert actions[1]["tile_id"] == tile.id
        assert actions[1]["tile"] == tile.name

    def test_records_win(self, tmp_path):
        engine, game_logger = make_logged_engine(tmp_path)
        engine.new_game(pile=winning_pile())
        engine.scheduler.advance(0.5)

        assert game_logger.current_game is None
        assert game_logger.games[0]["result"] == {
            "is_draw": False, "winner": "You", "remaining": 83,
        }

    def test_reset_marks_game_abandoned(self, tmp_path):
        engine, game_logger = make_logged_engine(tmp_path)
        engine.new_game(pile=no_win_pile())
        engine.reset()

        assert len(game_logger.games) == 2
        assert game_logger.games[0]["result"] == {"abandoned": True}
        assert game_logger.games[1]["result"] is None

    def test_save(self, tmp_path):
        engine, game_logger = make_logged_engine(tmp_path)
        engine.new_game(pile=winning_pile())
        engine.scheduler.advance(0.5)

        path = game_logger.save()
        assert os.path.dirname(path) == str(tmp_path)
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        assert data["session_id"] == game_logger.session_id
        assert data["players"] == ["You", "AI Bot 1", "AI Bot 2", "AI Bot 3"]
        assert data["config"]["difficulty"] == "medium"
        assert data["games"][0]["result"]["winner"] == "You"
