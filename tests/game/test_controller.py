"""Tests for GameController — the orchestrator."""

from __future__ import annotations

from collections.abc import Sequence

from muehle.core.enums import Player
from muehle.core.types import Point
from muehle.game.controller import GameController
from muehle.game.interfaces import GamePhase, GameSettings, IMoveSource, RejectReason

# Nine stones each, interleaved, without ever closing a mill.
_PLACEMENTS = [0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 16, 15, 21, 17]


def _make_controller(stones: int = 9) -> GameController:
    """Helper: fresh game with *stones* per player."""
    ctrl = GameController()
    ctrl.new_game(GameSettings(stones_per_player=stones))
    return ctrl


def _place_all(ctrl: GameController) -> None:
    for x in _PLACEMENTS:
        assert ctrl.place(x), x


def _setup_position(
    ctrl: GameController,
    ones: list[Point],
    twos: list[Point],
    phase: GamePhase = GamePhase.SLIDING,
    side: Player = Player.ONE,
) -> None:
    """Helper: jump straight to a post-placement position."""
    ctrl.board.clear()
    for x in ones:
        ctrl.board.place(x, Player.ONE)
    for x in twos:
        ctrl.board.place(x, Player.TWO)
    ctrl.state.stones_in_hand = {Player.ONE: 0, Player.TWO: 0}
    ctrl.state.phase = phase
    ctrl.state.side_to_move = side


class _ScriptedSource(IMoveSource):
    """Replays canned answers and records who was asked."""

    def __init__(
        self,
        placements: Sequence[Point] = (),
        moves: Sequence[tuple[Point, Point]] = (),
        removals: Sequence[Point] = (),
    ) -> None:
        self.placements = list(placements)
        self.moves = list(moves)
        self.removals = list(removals)
        self.asked: list[tuple[str, Player]] = []
        self.flying: list[bool] = []

    def request_placement(self, player: Player) -> Point:
        self.asked.append(("place", player))
        return self.placements.pop(0)

    def request_slide_or_jump(
        self, player: Player, allow_flying: bool
    ) -> tuple[Point, Point]:
        self.asked.append(("move", player))
        self.flying.append(allow_flying)
        return self.moves.pop(0)

    def request_removal(self, player: Player) -> Point:
        self.asked.append(("remove", player))
        return self.removals.pop(0)


class TestNewGame:
    def test_initial_state(self) -> None:
        ctrl = _make_controller()
        assert ctrl.state.phase == GamePhase.PLACEMENT
        assert ctrl.state.side_to_move == Player.ONE
        assert ctrl.state.winner == Player.NONE
        assert ctrl.board.count_stones(Player.ONE) == 0

    def test_phase_event_fires(self) -> None:
        ctrl = GameController()
        phases: list[GamePhase] = []
        ctrl.events.on_phase_changed.append(phases.append)
        ctrl.new_game()
        assert phases == [GamePhase.PLACEMENT]

    def test_new_game_clears_board(self) -> None:
        ctrl = _make_controller()
        ctrl.place(0)
        ctrl.new_game()
        assert not ctrl.board.is_occupied(0)
        assert ctrl.state.stones_in_hand[Player.ONE] == 9


class TestPlacement:
    def test_place_toggles_turn(self) -> None:
        ctrl = _make_controller()
        assert ctrl.place(0)
        assert ctrl.board.occupant(0) == Player.ONE
        assert ctrl.state.side_to_move == Player.TWO
        assert ctrl.state.stones_in_hand[Player.ONE] == 8

    def test_occupied_rejected_same_player_retries(self) -> None:
        ctrl = _make_controller()
        reasons: list[RejectReason] = []
        ctrl.events.on_invalid_move.append(reasons.append)
        ctrl.place(0)
        assert not ctrl.place(0)
        assert reasons == [RejectReason.OCCUPIED]
        assert ctrl.state.side_to_move == Player.TWO
        assert ctrl.state.stones_in_hand[Player.TWO] == 9

    def test_out_of_range_rejected(self) -> None:
        ctrl = _make_controller()
        reasons: list[RejectReason] = []
        ctrl.events.on_invalid_move.append(reasons.append)
        assert not ctrl.place(24)
        assert reasons == [RejectReason.INVALID_POINT]
        assert ctrl.state.side_to_move == Player.ONE

    def test_move_during_placement_rejected(self) -> None:
        ctrl = _make_controller()
        ctrl.place(0)
        ctrl.place(9)
        reasons: list[RejectReason] = []
        ctrl.events.on_invalid_move.append(reasons.append)
        assert not ctrl.move(0, 1)
        assert reasons == [RejectReason.WRONG_PHASE]

    def test_move_event_fires(self) -> None:
        ctrl = _make_controller()
        moves: list[tuple[Player, Point | None, Point]] = []
        ctrl.events.on_move.append(lambda p, o, d: moves.append((p, o, d)))
        ctrl.place(7)
        assert moves == [(Player.ONE, None, 7)]

    def test_all_placed_switches_to_sliding(self) -> None:
        ctrl = _make_controller()
        phases: list[GamePhase] = []
        ctrl.events.on_phase_changed.append(phases.append)
        _place_all(ctrl)
        assert ctrl.board.count_stones(Player.ONE) == 9
        assert ctrl.board.count_stones(Player.TWO) == 9
        assert ctrl.state.phase == GamePhase.SLIDING
        assert phases == [GamePhase.SLIDING]
        assert ctrl.state.side_to_move == Player.ONE

    def test_place_after_placement_rejected(self) -> None:
        ctrl = _make_controller()
        _place_all(ctrl)
        assert not ctrl.place(23)
        assert not ctrl.board.is_occupied(23)


class TestSliding:
    def test_adjacent_slide(self) -> None:
        ctrl = _make_controller()
        _place_all(ctrl)
        assert ctrl.move(21, 22)
        assert ctrl.board.occupant(22) == Player.ONE
        assert ctrl.state.side_to_move == Player.TWO

    def test_not_adjacent_rejected(self) -> None:
        ctrl = _make_controller()
        _place_all(ctrl)
        reasons: list[RejectReason] = []
        ctrl.events.on_invalid_move.append(reasons.append)
        before = ctrl.board.copy()
        assert not ctrl.move(4, 14)
        assert reasons == [RejectReason.NOT_ADJACENT]
        assert ctrl.board == before
        assert ctrl.state.side_to_move == Player.ONE

    def test_slide_onto_occupied_point_rejected(self) -> None:
        ctrl = _make_controller()
        _place_all(ctrl)
        reasons: list[RejectReason] = []
        ctrl.events.on_invalid_move.append(reasons.append)
        assert not ctrl.move(4, 13)
        assert reasons == [RejectReason.OCCUPIED]

    def test_moving_opponent_stone_rejected(self) -> None:
        ctrl = _make_controller()
        _place_all(ctrl)
        reasons: list[RejectReason] = []
        ctrl.events.on_invalid_move.append(reasons.append)
        assert not ctrl.move(13, 14)
        assert reasons == [RejectReason.NOT_OWN_STONE]
        assert ctrl.board.occupant(13) == Player.TWO

    def test_same_point_rejected(self) -> None:
        ctrl = _make_controller()
        _place_all(ctrl)
        reasons: list[RejectReason] = []
        ctrl.events.on_invalid_move.append(reasons.append)
        assert not ctrl.move(21, 21)
        assert reasons == [RejectReason.SAME_POINT]

    def test_cannot_fly_with_more_stones(self) -> None:
        ctrl = _make_controller()
        _place_all(ctrl)
        assert not ctrl.can_fly(Player.ONE)
        assert not ctrl.move(21, 23)


class TestMillAndRemoval:
    def test_mill_sets_pending_removal(self) -> None:
        ctrl = _make_controller()
        _setup_position(ctrl, ones=[0, 1, 14, 20], twos=[9, 10, 11, 22])
        mills: list[tuple[Player, Point]] = []
        ctrl.events.on_mill_formed.append(lambda p, x: mills.append((p, x)))
        assert ctrl.move(14, 2)
        assert mills == [(Player.ONE, 2)]
        assert ctrl.state.pending_removal == Player.ONE
        # The turn passes even though a removal is owed.
        assert ctrl.state.side_to_move == Player.TWO

    def test_pending_removal_blocks_moves(self) -> None:
        ctrl = _make_controller()
        _setup_position(ctrl, ones=[0, 1, 14, 20], twos=[9, 10, 11, 22])
        ctrl.move(14, 2)
        reasons: list[RejectReason] = []
        ctrl.events.on_invalid_move.append(reasons.append)
        assert not ctrl.move(22, 23)
        assert reasons == [RejectReason.REMOVAL_PENDING]

    def test_stones_in_mill_are_protected(self) -> None:
        ctrl = _make_controller()
        _setup_position(ctrl, ones=[0, 1, 14, 20], twos=[9, 10, 11, 22])
        ctrl.move(14, 2)
        assert ctrl.removable_points() == [22]
        reasons: list[RejectReason] = []
        ctrl.events.on_invalid_move.append(reasons.append)
        assert not ctrl.remove_stone(9)
        assert reasons == [RejectReason.PROTECTED_BY_MILL]
        assert ctrl.board.occupant(9) == Player.TWO

    def test_all_in_mills_may_be_taken(self) -> None:
        ctrl = _make_controller()
        _setup_position(
            ctrl, ones=[0, 1, 14, 20], twos=[9, 10, 11], phase=GamePhase.FLYING
        )
        ctrl.move(14, 2)
        assert ctrl.removable_points() == [9, 10, 11]

    def test_own_stone_cannot_be_removed(self) -> None:
        ctrl = _make_controller()
        _setup_position(ctrl, ones=[0, 1, 14, 20], twos=[9, 10, 11, 22])
        ctrl.move(14, 2)
        reasons: list[RejectReason] = []
        ctrl.events.on_invalid_move.append(reasons.append)
        assert not ctrl.remove_stone(20)
        assert not ctrl.remove_stone(23)
        assert reasons == [
            RejectReason.NOT_OPPONENT_STONE,
            RejectReason.NOT_OPPONENT_STONE,
        ]

    def test_removal_without_mill_rejected(self) -> None:
        ctrl = _make_controller()
        ctrl.place(0)
        reasons: list[RejectReason] = []
        ctrl.events.on_invalid_move.append(reasons.append)
        assert not ctrl.remove_stone(0)
        assert reasons == [RejectReason.NO_REMOVAL_PENDING]

    def test_removal_down_to_three_enables_flying(self) -> None:
        ctrl = _make_controller()
        _setup_position(ctrl, ones=[0, 1, 14, 20], twos=[9, 10, 11, 22])
        phases: list[GamePhase] = []
        removed: list[tuple[Player, Point]] = []
        ctrl.events.on_phase_changed.append(phases.append)
        ctrl.events.on_stone_removed.append(lambda p, x: removed.append((p, x)))
        ctrl.move(14, 2)
        assert ctrl.remove_stone(22)
        assert removed == [(Player.ONE, 22)]
        assert ctrl.state.pending_removal is None
        assert ctrl.state.phase == GamePhase.FLYING
        assert phases == [GamePhase.FLYING]
        assert ctrl.can_fly(Player.TWO)
        assert not ctrl.can_fly(Player.ONE)

    def test_removal_below_three_finishes_game(self) -> None:
        ctrl = _make_controller()
        _setup_position(ctrl, ones=[0, 1, 14, 20], twos=[9, 10, 22])
        winners: list[Player] = []
        ctrl.events.on_game_over.append(winners.append)
        ctrl.move(14, 2)
        assert ctrl.remove_stone(9)
        assert ctrl.board.count_stones(Player.TWO) == 2
        assert ctrl.state.phase == GamePhase.FINISHED
        assert ctrl.state.winner == Player.ONE
        assert winners == [Player.ONE]

    def test_no_actions_after_game_over(self) -> None:
        ctrl = _make_controller()
        _setup_position(ctrl, ones=[0, 1, 14, 20], twos=[9, 10, 22])
        ctrl.move(14, 2)
        ctrl.remove_stone(9)
        reasons: list[RejectReason] = []
        ctrl.events.on_invalid_move.append(reasons.append)
        assert not ctrl.move(10, 11)
        assert not ctrl.remove_stone(10)
        assert reasons == [RejectReason.GAME_OVER, RejectReason.GAME_OVER]

    def test_mill_during_placement_with_short_game(self) -> None:
        ctrl = _make_controller(stones=3)
        for x in (0, 9, 1, 10, 2):
            assert ctrl.place(x)
        assert ctrl.state.pending_removal == Player.ONE
        # Player Two has 2 on the board and 1 in hand: a removal decides it.
        assert ctrl.remove_stone(9)
        assert ctrl.state.winner == Player.ONE


class TestFlying:
    def test_three_stones_may_jump(self) -> None:
        ctrl = _make_controller()
        _setup_position(
            ctrl,
            ones=[0, 4, 21],
            twos=[9, 10, 12, 13, 16],
            phase=GamePhase.FLYING,
        )
        assert ctrl.can_fly(Player.ONE)
        assert ctrl.move(21, 23)
        assert ctrl.board.occupant(23) == Player.ONE

    def test_more_stones_still_slide_in_flying_phase(self) -> None:
        ctrl = _make_controller()
        _setup_position(
            ctrl,
            ones=[0, 4, 21],
            twos=[9, 10, 12, 13, 16],
            phase=GamePhase.FLYING,
            side=Player.TWO,
        )
        assert not ctrl.can_fly(Player.TWO)
        assert not ctrl.move(16, 23)
        assert ctrl.move(16, 19)

    def test_higher_flying_threshold_keeps_flying_down_to_losing(self) -> None:
        ctrl = GameController()
        ctrl.new_game(GameSettings(flying_threshold=4, losing_threshold=3))
        _setup_position(
            ctrl,
            ones=[0, 4, 6, 21],
            twos=[9, 10, 12, 13, 16],
            phase=GamePhase.FLYING,
        )
        assert ctrl.can_fly(Player.ONE)

        ctrl.board.remove(6, Player.ONE)
        assert ctrl.can_fly(Player.ONE)
        assert not ctrl.can_fly(Player.TWO)
        assert ctrl.move(21, 23)

    def test_flying_label_with_higher_threshold(self) -> None:
        ctrl = GameController()
        ctrl.new_game(GameSettings(flying_threshold=4, losing_threshold=3))
        # One closes 0-1-2 and takes a stone; Two is left with four.
        _setup_position(ctrl, ones=[0, 1, 14, 20, 6], twos=[9, 10, 16, 22, 23])
        assert ctrl.move(14, 2)
        assert ctrl.state.phase == GamePhase.SLIDING
        assert ctrl.remove_stone(23)
        assert ctrl.state.phase == GamePhase.FLYING
        assert ctrl.can_fly(Player.TWO)

    def test_no_flying_during_placement(self) -> None:
        ctrl = _make_controller(stones=3)
        ctrl.place(0)
        assert not ctrl.can_fly(Player.ONE)


class TestPlay:
    def test_scripted_short_game(self) -> None:
        ctrl = _make_controller(stones=3)
        source = _ScriptedSource(placements=[0, 9, 1, 0, 10, 2], removals=[0, 9])
        reasons: list[RejectReason] = []
        ctrl.events.on_invalid_move.append(reasons.append)

        winner = ctrl.play(source)

        assert winner == Player.ONE
        assert reasons == [RejectReason.OCCUPIED, RejectReason.NOT_OPPONENT_STONE]
        assert source.asked == [
            ("place", Player.ONE),
            ("place", Player.TWO),
            ("place", Player.ONE),
            ("place", Player.TWO),  # rejected, same player asked again
            ("place", Player.TWO),
            ("place", Player.ONE),
            ("remove", Player.ONE),
            ("remove", Player.ONE),
        ]

    def test_moves_requested_after_placement(self) -> None:
        ctrl = _make_controller(stones=3)
        # Player One: 0, 4, 23; Player Two: 9, 10, 22; then One flies 0 -> 14
        # and Two flies 22 -> 11 closing (9, 10, 11); removing 4 leaves One
        # with two stones.
        source = _ScriptedSource(
            placements=[0, 9, 4, 10, 23, 22],
            moves=[(0, 14), (22, 11)],
            removals=[4],
        )
        winner = ctrl.play(source)
        assert winner == Player.TWO
        assert source.flying == [True, True]
        assert ctrl.state.phase == GamePhase.FINISHED
