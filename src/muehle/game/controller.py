"""GameController — the central orchestrator of a Mühle game.

Coordinates: Board, GameState and whichever front-end supplies the moves.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from muehle.core.board import Board
from muehle.core.enums import Player
from muehle.core.types import Point, is_valid_point
from muehle.game.interfaces import (
    GamePhase,
    GameSettings,
    IGameController,
    IMoveSource,
    RejectReason,
)
from muehle.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Player, Point | None, Point], None]  # origin None = placed
InvalidMoveCallback = Callable[[RejectReason], None]
MillCallback = Callable[[Player, Point], None]
RemovalCallback = Callable[[Player, Point], None]  # remover, emptied point
PhaseCallback = Callable[[GamePhase], None]
GameOverCallback = Callable[[Player], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_invalid_move: list[InvalidMoveCallback] = field(default_factory=list)
    on_mill_formed: list[MillCallback] = field(default_factory=list)
    on_stone_removed: list[RemovalCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Orchestrates a full game: validates actions against the board,
    advances phases, switches turns, notifies listeners.

    Actions arrive either pushed one at a time (``place`` / ``move`` /
    ``remove_stone``, as the Qt window does) or pulled from an
    ``IMoveSource`` by ``play``.  A rejected action changes nothing and
    leaves the same player to move.
    """

    __slots__ = ("_board", "_state", "events")

    def __init__(self, settings: GameSettings | None = None) -> None:
        self._board = Board()
        self._state = GameState(settings or GameSettings())
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def settings(self) -> GameSettings:
        return self._state.settings

    def can_fly(self, player: Player) -> bool:
        """Whether *player* may jump to any empty point on their move."""
        if self._state.phase not in (GamePhase.SLIDING, GamePhase.FLYING):
            return False
        return self._board.count_stones(player) <= self.settings.flying_threshold

    def removable_points(self) -> list[Point]:
        """Opposing stones the pending remover may take.

        Stones inside a mill are protected unless every stone is.
        """
        remover = self._state.pending_removal
        if remover is None:
            return []
        stones = self._board.points(remover.opponent)
        free = [x for x in stones if not self._board.is_part_of_mill(x)]
        return free or stones

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(self, settings: GameSettings | None = None) -> None:
        self._board.clear()
        self._state.setup(settings)
        _LOGGER.info("New game: %s", self.settings)
        self._emit_phase(GamePhase.PLACEMENT)

    def place(self, point: Point) -> bool:
        reason = self._check_turn(placing=True)
        if reason is not None:
            return self._reject(reason)

        player = self._state.side_to_move
        if not self._board.place(point, player):
            return self._reject(self._diagnose_place(point))

        self._state.take_from_hand(player)
        self._complete_action(player, None, point)
        return True

    def move(self, origin: Point, dest: Point) -> bool:
        reason = self._check_turn(placing=False)
        if reason is not None:
            return self._reject(reason)

        player = self._state.side_to_move
        flying = self.can_fly(player)
        if flying:
            ok = self._board.jump(origin, dest, player)
        else:
            ok = self._board.slide(origin, dest, player)
        if not ok:
            return self._reject(self._diagnose_move(origin, dest, player, flying))

        self._complete_action(player, origin, dest)
        return True

    def remove_stone(self, point: Point) -> bool:
        if self._state.is_game_over:
            return self._reject(RejectReason.GAME_OVER)
        remover = self._state.pending_removal
        if remover is None:
            return self._reject(RejectReason.NO_REMOVAL_PENDING)
        if not is_valid_point(point):
            return self._reject(RejectReason.INVALID_POINT)
        if self._board.occupant(point) != remover.opponent:
            return self._reject(RejectReason.NOT_OPPONENT_STONE)
        if point not in self.removable_points():
            return self._reject(RejectReason.PROTECTED_BY_MILL)

        self._board.remove(point, remover.opponent)
        self._state.pending_removal = None
        _LOGGER.debug("%s removed the stone on %d", remover, point)

        old_phase = self._state.phase
        self._update_phase()

        for cb in self.events.on_stone_removed:
            cb(remover, point)
        self._emit_transition(old_phase)
        return True

    def play(self, source: IMoveSource) -> Player:
        """Drive the game from *source* until it is finished.

        Returns the winner.  Rejected actions are reported through
        ``on_invalid_move`` and the same player is asked again.
        """
        while not self._state.is_game_over:
            remover = self._state.pending_removal
            if remover is not None:
                self.remove_stone(source.request_removal(remover))
                continue

            player = self._state.side_to_move
            if self._state.phase == GamePhase.PLACEMENT:
                self.place(source.request_placement(player))
            else:
                origin, dest = source.request_slide_or_jump(
                    player, self.can_fly(player)
                )
                self.move(origin, dest)

        return self._state.winner

    # ── Internal helpers ─────────────────────────────────────────────────

    def _check_turn(self, *, placing: bool) -> RejectReason | None:
        if self._state.is_game_over:
            return RejectReason.GAME_OVER
        if self._state.pending_removal is not None:
            return RejectReason.REMOVAL_PENDING
        if placing != (self._state.phase == GamePhase.PLACEMENT):
            return RejectReason.WRONG_PHASE
        return None

    def _diagnose_place(self, point: Point) -> RejectReason:
        if not is_valid_point(point):
            return RejectReason.INVALID_POINT
        return RejectReason.OCCUPIED

    def _diagnose_move(
        self, origin: Point, dest: Point, player: Player, flying: bool
    ) -> RejectReason:
        if not (is_valid_point(origin) and is_valid_point(dest)):
            return RejectReason.INVALID_POINT
        if origin == dest:
            return RejectReason.SAME_POINT
        if self._board.occupant(origin) != player:
            return RejectReason.NOT_OWN_STONE
        if self._board.is_occupied(dest):
            return RejectReason.OCCUPIED
        if not flying and not self._board.is_adjacent(origin, dest):
            return RejectReason.NOT_ADJACENT
        return RejectReason.INVALID_POINT

    def _complete_action(
        self, player: Player, origin: Point | None, dest: Point
    ) -> None:
        """Bookkeeping shared by placements and moves once the board accepted."""
        if origin is None:
            _LOGGER.debug("%s placed a stone on %d", player, dest)
        else:
            _LOGGER.debug("%s moved %d -> %d", player, origin, dest)

        mill = self._board.is_part_of_mill(dest)
        if mill and self._board.count_stones(player.opponent) > 0:
            self._state.pending_removal = player

        old_phase = self._state.phase
        self._update_phase()
        self._state.end_turn()

        for cb in self.events.on_move:
            cb(player, origin, dest)
        if mill:
            _LOGGER.info("%s closed a mill on %d", player, dest)
            for cb in self.events.on_mill_formed:
                cb(player, dest)
        self._emit_transition(old_phase)

    def _update_phase(self) -> None:
        """Re-derive phase and winner from the stone counts."""
        state = self._state
        if state.is_game_over:
            return

        for player in (Player.ONE, Player.TWO):
            remaining = self._board.count_stones(player) + state.stones_in_hand[player]
            if remaining < self.settings.losing_threshold:
                state.finish(player.opponent)
                return

        if state.phase == GamePhase.PLACEMENT and state.all_placed:
            state.phase = GamePhase.SLIDING
        if state.phase == GamePhase.SLIDING and any(
            self._board.count_stones(p) <= self.settings.flying_threshold
            for p in (Player.ONE, Player.TWO)
        ):
            state.phase = GamePhase.FLYING

    def _reject(self, reason: RejectReason) -> bool:
        _LOGGER.debug(
            "Rejected action for %s: %s", self._state.side_to_move, reason.name
        )
        for cb in self.events.on_invalid_move:
            cb(reason)
        return False

    def _emit_transition(self, old_phase: GamePhase) -> None:
        phase = self._state.phase
        if phase == old_phase:
            return
        if phase == GamePhase.FINISHED:
            self._emit_game_over(self._state.winner)
            return
        _LOGGER.info("Phase changed: %s -> %s", old_phase.name, phase.name)
        self._emit_phase(phase)

    def _emit_game_over(self, winner: Player) -> None:
        _LOGGER.info("Game over, winner: %s", winner)
        self._emit_phase(GamePhase.FINISHED)
        for cb in self.events.on_game_over:
            cb(winner)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
