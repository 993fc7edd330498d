"""Game records and diagnostic logging setup.

``GameLogger`` listens on the event bus and keeps one JSON-ready record per
game: the pile order, every opening hand, each draw and discard, and the
result. ``save`` writes the whole session to ``logs/game_<session>.json``.
"""

import json
import logging
import os
import sys
import uuid
from datetime import datetime
from typing import List, Optional

from casual_mahjong.core.tile import Tile
from casual_mahjong.engine.event import EventBus, EventType, GameEvent

LOG_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(
    os.path.abspath(__file__)))), "logs")


def setup_logging(level: str = "INFO") -> None:
    """Configure diagnostic logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _names(tiles) -> List[str]:
    return [t.name for t in tiles]


class GameLogger:
    """Session log: one entry in ``games`` per dealt game."""

    def __init__(self, player_names: List[str], config_info: dict,
                 log_dir: Optional[str] = None):
        self.session_id = uuid.uuid4().hex[:12]
        self.timestamp = datetime.now().isoformat()
        self.player_names = list(player_names)
        self.config_info = config_info
        self.log_dir = log_dir or LOG_DIR

        self.games: List[dict] = []
        self._current_game: Optional[dict] = None

    def subscribe_events(self, event_bus: EventBus):
        event_bus.subscribe_all({
            EventType.DEAL: self._on_deal,
            EventType.DRAW: self._on_draw,
            EventType.DISCARD: self._on_discard,
            EventType.GAME_END: self._on_game_end,
            EventType.RESET: self._on_reset,
        })

    @property
    def current_game(self) -> Optional[dict]:
        """The game still in progress, or None between games."""
        return self._current_game

    def save(self) -> str:
        """Write the session to disk and return the file path."""
        os.makedirs(self.log_dir, exist_ok=True)
        path = os.path.join(self.log_dir, f"game_{self.session_id}.json")
        with open(path, "w", encoding="utf-8") as f:
            json.dump({
                "session_id": self.session_id,
                "timestamp": self.timestamp,
                "config": self.config_info,
                "players": self.player_names,
                "games": self.games,
            }, f, ensure_ascii=False, indent=2)
        return path

    # --- Event handlers ---

    def _on_deal(self, event: GameEvent):
        pile = event.data["pile"]
        game = {
            "game_id": uuid.uuid4().hex[:8],
            "pile": {
                "tile_ids": [t.id for t in pile.all_tiles],
                "tile_names": _names(pile.all_tiles),
            },
            "initial_hands": {
                self.player_names[p.seat]: {
                    "seat": p.seat,
                    "is_ai": p.is_ai,
                    "tiles": _names(p.hand.tiles),
                }
                for p in event.data["players"]
            },
            "actions": [],
            "result": None,
        }
        self.games.append(game)
        self._current_game = game

    def _record(self, action: str, seat: int, tile: Tile, **extra):
        if self._current_game is None:
            return
        entry = {
            "action": action,
            "player": self.player_names[seat],
            "seat": seat,
            "tile": tile.name,
            "tile_id": tile.id,
        }
        entry.update(extra)
        self._current_game["actions"].append(entry)

    def _on_draw(self, event: GameEvent):
        d = event.data
        self._record("draw", d["player"], d["tile"], remaining=d["remaining"])

    def _on_discard(self, event: GameEvent):
        d = event.data
        self._record("discard", d["player"], d["tile"])

    def _finish(self, result: dict):
        if self._current_game is not None:
            self._current_game["result"] = result
            self._current_game = None

    def _on_game_end(self, event: GameEvent):
        d = event.data
        self._finish({
            "is_draw": d["winner"] is None,
            "winner": d["winner_name"],
            "remaining": d["remaining"],
        })

    def _on_reset(self, event: GameEvent):
        self._finish({"abandoned": True})
