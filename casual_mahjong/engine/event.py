"""Engine events and the bus that carries them to the UI and the game log."""

from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List


class EventType(Enum):
    GAME_START = "game_start"
    DEAL = "deal"
    TURN_START = "turn_start"
    DRAW = "draw"
    DISCARD = "discard"
    SELECT = "select"
    WIN = "win"
    EXHAUSTIVE_DRAW = "exhaustive_draw"
    GAME_END = "game_end"
    RESET = "reset"


@dataclass
class GameEvent:
    """Something that happened at the table, with its payload in ``data``."""
    event_type: EventType
    data: Dict[str, Any] = field(default_factory=dict)


Listener = Callable[[GameEvent], None]


class EventBus:
    """Synchronous publish/subscribe.

    Listeners run in subscription order, inside ``emit``.
    """

    def __init__(self):
        self._listeners: Dict[EventType, List[Listener]] = defaultdict(list)

    def subscribe(self, event_type: EventType, callback: Listener):
        self._listeners[event_type].append(callback)

    def subscribe_all(self, handlers: Dict[EventType, Listener]):
        """Subscribe several handlers at once, keyed by event type."""
        for event_type, callback in handlers.items():
            self.subscribe(event_type, callback)

    def emit(self, event: GameEvent):
        # A listener may subscribe more listeners while we iterate
        for callback in tuple(self._listeners[event.event_type]):
            callback(event)
