"""Single game state - deal, draw, discard, terminal detection."""

import logging
from enum import Enum
from typing import List, Optional

from casual_mahjong.core.tile import Tile
from casual_mahjong.core.wall import DrawPile, HAND_SIZE
from casual_mahjong.core.player_state import PlayerState
from casual_mahjong.engine.event import EventBus, EventType, GameEvent
from casual_mahjong.rules.agari import is_agari

logger = logging.getLogger(__name__)


class GamePhase(Enum):
    SETUP = "setup"
    PLAYING = "playing"
    FINISHED = "finished"


class RoundResult:
    """Result of a finished game: a winner, or an exhaustive draw."""

    def __init__(self, winner: Optional[int] = None, winning_tile: Optional[Tile] = None):
        self.winner = winner  # Seat index
        self.winning_tile = winning_tile

    @property
    def is_draw(self) -> bool:
        return self.winner is None


class RoundState:
    """Mutable state of one game from deal to finish.

    Only deal, draw and discard move tiles; hands, discards and the pile
    always add up to the full set.
    """

    def __init__(self, players: List[PlayerState], pile: DrawPile, event_bus: EventBus):
        self.players = players
        self.pile = pile
        self.event_bus = event_bus
        self.num_players = len(players)

        self.phase = GamePhase.SETUP
        self.current_player = 0
        self.turn_count = 0
        self.last_drawn: Optional[Tile] = None
        self.selected_tile_id: Optional[str] = None
        self.result: Optional[RoundResult] = None

    @property
    def is_playing(self) -> bool:
        return self.phase == GamePhase.PLAYING

    @property
    def is_finished(self) -> bool:
        return self.phase == GamePhase.FINISHED

    @property
    def winner(self) -> Optional[PlayerState]:
        if self.result is None or self.result.winner is None:
            return None
        return self.players[self.result.winner]

    def tile_count(self) -> int:
        """Tiles held in hands, discard pools and the pile."""
        held = sum(len(p.hand.tiles) + len(p.hand.discard_pool) for p in self.players)
        return held + self.pile.remaining

    def deal_tiles(self):
        """Deal initial hands and start play with seat 0 to move."""
        hands = self.pile.deal(self.num_players, HAND_SIZE)
        for player, tiles in zip(self.players, hands):
            player.hand.tiles = tiles
            player.hand.draw_tile = None

        self.phase = GamePhase.PLAYING
        self.current_player = 0

        self.event_bus.emit(GameEvent(EventType.DEAL, {
            "players": self.players,
            "pile": self.pile,
        }))

    def draw(self, player_idx: int) -> Optional[Tile]:
        """Draw for ``player_idx``. Returns the tile, or None if nothing moved."""
        if not self.is_playing:
            return None

        player = self.players[player_idx]
        tile = self.pile.draw()
        if tile is None:
            self._finish(RoundResult())
            return None

        player.hand.draw(tile)
        self.last_drawn = tile
        logger.debug("%s drew a tile (%d left)", player.name, self.pile.remaining)

        self.event_bus.emit(GameEvent(EventType.DRAW, {
            "player": player_idx,
            "tile": tile,
            "remaining": self.pile.remaining,
        }))

        if is_agari(player.hand.tiles):
            self._finish(RoundResult(winner=player_idx, winning_tile=tile))

        return tile

    def discard(self, player_idx: int, tile_id: str) -> Optional[Tile]:
        """Discard ``tile_id`` from ``player_idx`` and pass the turn on.

        An id not in hand leaves everything untouched and returns None.
        """
        if not self.is_playing:
            return None

        player = self.players[player_idx]
        tile = player.hand.discard(tile_id)
        if tile is None:
            return None

        self.selected_tile_id = None
        self.last_drawn = None
        self.current_player = (player_idx + 1) % self.num_players
        self.turn_count += 1
        logger.debug("%s discarded %s", player.name, tile.name)

        self.event_bus.emit(GameEvent(EventType.DISCARD, {
            "player": player_idx,
            "tile": tile,
            "next_player": self.current_player,
        }))
        return tile

    def select(self, tile_id: str) -> bool:
        """Toggle the human selection. Returns whether anything changed.

        The current seat can only select once it has drawn this turn.
        """
        if not self.is_playing or self.last_drawn is None:
            return False
        player = self.players[self.current_player]
        if player.is_ai or tile_id not in player.hand:
            return False

        if self.selected_tile_id == tile_id:
            self.selected_tile_id = None
        else:
            self.selected_tile_id = tile_id

        self.event_bus.emit(GameEvent(EventType.SELECT, {
            "player": self.current_player,
            "tile_id": self.selected_tile_id,
        }))
        return True

    def _finish(self, result: RoundResult):
        self.phase = GamePhase.FINISHED
        self.result = result

        if result.is_draw:
            logger.info("Draw pile exhausted, game ends in a draw")
            self.event_bus.emit(GameEvent(EventType.EXHAUSTIVE_DRAW, {
                "turn_count": self.turn_count,
            }))
        else:
            winner = self.players[result.winner]
            logger.info("%s wins", winner.name)
            self.event_bus.emit(GameEvent(EventType.WIN, {
                "player": result.winner,
                "tile": result.winning_tile,
                "hand": list(winner.hand.tiles),
            }))
