"""Game management - turn driver, opponent pacing and snapshots."""

import logging
import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from casual_mahjong.core.tile import Tile
from casual_mahjong.core.wall import DrawPile
from casual_mahjong.core.player_state import (
    PlayerState, DEFAULT_PLAYER_IDS, DEFAULT_PLAYER_NAMES,
)
from casual_mahjong.engine.event import EventBus, EventType, GameEvent
from casual_mahjong.engine.round import GamePhase, RoundState
from casual_mahjong.engine.scheduler import Scheduler, ScheduledTask
from casual_mahjong.player.base import build_game_view
from casual_mahjong.player.scripted_ai import Difficulty, ScriptedAI, select_opponent_discard

logger = logging.getLogger(__name__)

NUM_PLAYERS = 4

__all__ = [
    "GameConfig", "GameSnapshot", "PlayerView", "TurnEngine",
    "run_game", "select_opponent_discard",
]


class GameConfig:
    """Game configuration."""

    def __init__(
        self,
        difficulty=Difficulty.MEDIUM,
        think_delay: float = 1.5,   # Scripted opponent "thinking" before a discard
        draw_delay: float = 0.5,    # Pause between a discard and the next draw
        player_names: Optional[List[str]] = None,
        human_seat: Optional[int] = 0,  # None: every seat is scripted
        seed: Optional[int] = None,
        log_dir: Optional[str] = None,
    ):
        self.difficulty = Difficulty.parse(difficulty)
        self.think_delay = think_delay
        self.draw_delay = draw_delay
        self.player_names = list(player_names or DEFAULT_PLAYER_NAMES)
        self.human_seat = human_seat
        self.seed = seed
        self.log_dir = log_dir

        if len(self.player_names) != NUM_PLAYERS:
            raise ValueError(f"need {NUM_PLAYERS} player names, got {len(self.player_names)}")
        if think_delay < 0 or draw_delay < 0:
            raise ValueError("delays must be >= 0")

    def to_dict(self) -> dict:
        return {
            "difficulty": self.difficulty.value,
            "think_delay": self.think_delay,
            "draw_delay": self.draw_delay,
            "player_names": list(self.player_names),
            "human_seat": self.human_seat,
            "seed": self.seed,
            "log_dir": self.log_dir,
        }


@dataclass(frozen=True)
class PlayerView:
    """One seat as the presentation layer sees it."""
    seat: int
    player_id: str
    name: str
    is_ai: bool
    hand: Tuple[Tile, ...]
    discards: Tuple[Tile, ...]


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only state handed to the presentation layer."""
    phase: GamePhase
    difficulty: Difficulty
    players: Tuple[PlayerView, ...]
    draw_pile_remaining: int
    current_player_index: int
    winner: Optional[str] = None
    winner_name: Optional[str] = None
    last_drawn_tile: Optional[Tile] = None
    selected_tile_id: Optional[str] = None

    @property
    def current_player(self) -> Optional[PlayerView]:
        if not self.players:
            return None
        return self.players[self.current_player_index]

    @property
    def is_draw_game(self) -> bool:
        return self.phase == GamePhase.FINISHED and self.winner is None


class TurnEngine:
    """Drives one table: deal, turn order, opponent moves, reset.

    All pacing goes through ``scheduler``; nothing happens until the owner
    advances it. ``new_game`` cancels whatever the previous game left queued.
    """

    def __init__(self, config: Optional[GameConfig] = None,
                 event_bus: Optional[EventBus] = None,
                 scheduler: Optional[Scheduler] = None):
        self.config = config or GameConfig()
        self.event_bus = event_bus or EventBus()
        self.scheduler = scheduler or Scheduler()
        self.rng = random.Random(self.config.seed)
        self.difficulty = self.config.difficulty

        self.round: Optional[RoundState] = None
        self.opponents: Dict[int, ScriptedAI] = {}
        self._draw_task: Optional[ScheduledTask] = None
        self._think_task: Optional[ScheduledTask] = None
        self._game_ended = False

    # --- Lifecycle ---

    @property
    def phase(self) -> GamePhase:
        return self.round.phase if self.round else GamePhase.SETUP

    def new_game(self, difficulty=None, pile: Optional[DrawPile] = None) -> GameSnapshot:
        """Tear down any current game and deal a fresh one.

        The returned snapshot is taken right after the deal; seat 0's opening
        draw is queued on the scheduler like every other draw. ``pile`` fixes
        the tile order (replays, tests); by default a shuffled set is used.
        """
        if self.round is not None:
            self._cancel_pending()
            self.event_bus.emit(GameEvent(EventType.RESET, {}))

        if difficulty is None:
            difficulty = self.config.difficulty
        self.difficulty = Difficulty.parse(difficulty)
        logger.info("Initializing game with difficulty: %s", self.difficulty.value)

        players = self._create_players()
        self.opponents = {
            p.seat: ScriptedAI(p.name, self.difficulty, self.rng)
            for p in players if p.is_ai
        }
        if pile is None:
            pile = DrawPile(self.rng)
        self.round = RoundState(players, pile, self.event_bus)
        self._game_ended = False

        self.event_bus.emit(GameEvent(EventType.GAME_START, {
            "difficulty": self.difficulty.value,
            "players": [(p.player_id, p.name, p.is_ai) for p in players],
        }))
        self.round.deal_tiles()
        self._schedule_draw(self.round.current_player)
        return self.snapshot()

    def reset(self) -> GameSnapshot:
        """Start over with the current difficulty."""
        return self.new_game(self.difficulty)

    def _create_players(self) -> List[PlayerState]:
        players = []
        for seat in range(NUM_PLAYERS):
            players.append(PlayerState(
                seat,
                DEFAULT_PLAYER_IDS[seat],
                self.config.player_names[seat],
                is_ai=(seat != self.config.human_seat),
            ))
        return players

    def _cancel_pending(self):
        self.scheduler.cancel(self._draw_task)
        self.scheduler.cancel(self._think_task)
        self._draw_task = None
        self._think_task = None

    # --- Turn actions ---

    def draw(self, player_index: int) -> GameSnapshot:
        """Draw for a seat. Ends the game on a win or an empty pile."""
        if self.round is None:
            return self.snapshot()
        # A manual draw replaces whatever draw was queued
        self.scheduler.cancel(self._draw_task)
        self._draw_task = None
        self.round.draw(player_index)
        self._after_action()
        return self.snapshot()

    def discard(self, player_index: int, tile_id: str) -> GameSnapshot:
        """Discard a tile and queue the next player's draw.

        Only the current seat may discard, and only after its draw: while a
        draw is still queued the call is ignored.
        """
        if self.round is None or not self._may_discard(player_index):
            return self.snapshot()

        tile = self.round.discard(player_index, tile_id)
        if tile is not None:
            self.scheduler.cancel(self._think_task)
            self._think_task = None
            self._schedule_draw(self.round.current_player)
        return self.snapshot()

    def select_tile(self, tile_id: str) -> GameSnapshot:
        """Toggle the human player's selected tile."""
        if self.round is not None:
            self.round.select(tile_id)
        return self.snapshot()

    def discard_selected(self) -> bool:
        """Discard the selected tile for the current player, if any.

        Returns whether a tile left the hand.
        """
        if self.round is None or self.round.selected_tile_id is None:
            return False
        turn = self.round.turn_count
        self.discard(self.round.current_player, self.round.selected_tile_id)
        return self.round.turn_count != turn

    def _may_discard(self, player_index: int) -> bool:
        return self._draw_task is None and player_index == self.round.current_player

    def _schedule_draw(self, player_index: int):
        round_state = self.round
        self._draw_task = self.scheduler.schedule(
            self.config.draw_delay,
            lambda: self._scheduled_draw(round_state, player_index),
            label=f"draw:{player_index}",
        )

    def _scheduled_draw(self, round_state: RoundState, player_index: int):
        if round_state is not self.round:
            return
        self._draw_task = None
        self.draw(player_index)

    def _after_action(self):
        if self.round.is_finished:
            self._end_game()
        elif self.round.is_playing:
            self._start_turn()

    def _start_turn(self):
        """Announce the turn and queue the opponent's move if it is scripted."""
        seat = self.round.current_player
        player = self.round.players[seat]
        self.event_bus.emit(GameEvent(EventType.TURN_START, {
            "player": seat,
            "is_ai": player.is_ai,
        }))

        self.scheduler.cancel(self._think_task)
        self._think_task = None
        if player.is_ai:
            round_state = self.round
            self._think_task = self.scheduler.schedule(
                self.config.think_delay,
                lambda: self._perform_ai_turn(round_state, seat),
                label=f"think:{seat}",
            )

    def _perform_ai_turn(self, round_state: RoundState, seat: int):
        if round_state is not self.round:
            return
        self._think_task = None
        if not self.round.is_playing or self.round.current_player != seat:
            return

        ai = self.opponents.get(seat)
        if ai is None:
            return
        view = build_game_view(seat, self.round.players, self.round.pile.remaining)
        tile = ai.choose_discard(view)
        if tile is not None:
            self.discard(seat, tile.id)

    def _end_game(self):
        if self._game_ended:
            return
        self._game_ended = True
        self._cancel_pending()

        winner = self.round.winner
        self.event_bus.emit(GameEvent(EventType.GAME_END, {
            "winner": winner.player_id if winner else None,
            "winner_name": winner.name if winner else None,
            "result": self.round.result,
            "remaining": self.round.pile.remaining,
        }))

    # --- Snapshots ---

    def snapshot(self) -> GameSnapshot:
        """Current state as immutable values."""
        if self.round is None:
            return GameSnapshot(
                phase=GamePhase.SETUP,
                difficulty=self.difficulty,
                players=(),
                draw_pile_remaining=0,
                current_player_index=0,
            )

        rs = self.round
        players = tuple(
            PlayerView(
                seat=p.seat,
                player_id=p.player_id,
                name=p.name,
                is_ai=p.is_ai,
                hand=tuple(p.hand.tiles),
                discards=tuple(p.hand.discard_pool),
            )
            for p in rs.players
        )
        winner = rs.winner
        return GameSnapshot(
            phase=rs.phase,
            difficulty=self.difficulty,
            players=players,
            draw_pile_remaining=rs.pile.remaining,
            current_player_index=rs.current_player,
            winner=winner.player_id if winner else None,
            winner_name=winner.name if winner else None,
            last_drawn_tile=rs.last_drawn,
            selected_tile_id=rs.selected_tile_id,
        )


def run_game(config: Optional[GameConfig] = None,
             event_bus: Optional[EventBus] = None) -> GameSnapshot:
    """Play a whole game with every seat scripted and return the final state.

    ``config.human_seat`` is ignored.
    """
    settings = (config or GameConfig()).to_dict()
    settings["human_seat"] = None
    engine = TurnEngine(GameConfig(**settings), event_bus)
    engine.new_game()

    while engine.phase == GamePhase.PLAYING:
        if not engine.scheduler.run_next():
            break

    return engine.snapshot()
