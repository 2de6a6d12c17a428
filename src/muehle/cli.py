"""Terminal front-end: reads moves from a text stream, prints the board."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from muehle.core.enums import Player
from muehle.core.notation import parse_move, parse_point, render_board, render_legend
from muehle.core.types import Point
from muehle.game.controller import GameController
from muehle.game.interfaces import GamePhase, GameSettings, IMoveSource, RejectReason
from muehle.i18n import LANGUAGES, set_language, t

_LOGGER = logging.getLogger(__name__)

_QUIT_WORDS = frozenset({"q", "quit", "exit"})


class QuitGame(Exception):
    """The user asked to leave the game."""


class ConsoleFrontend(IMoveSource):
    """Plays a game over a pair of text streams.

    Malformed input (not a number, wrong ``x,y`` format) is handled here and
    never reaches the controller.  Numbers out of range are passed on for
    the board to reject.
    """

    def __init__(
        self,
        controller: GameController,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self._controller = controller
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._connect_game_events()

    # ── IMoveSource impl ─────────────────────────────────────────────────

    def request_placement(self, player: Player) -> Point:
        prompt = t().prompt_place.format(player=t().player_name(player))
        while True:
            try:
                return parse_point(self._ask(prompt))
            except ValueError as exc:
                self._say_invalid_input(exc)

    def request_slide_or_jump(
        self, player: Player, allow_flying: bool
    ) -> tuple[Point, Point]:
        template = t().prompt_jump if allow_flying else t().prompt_move
        prompt = template.format(player=t().player_name(player))
        while True:
            try:
                return parse_move(self._ask(prompt))
            except ValueError as exc:
                self._say_invalid_input(exc)

    def request_removal(self, player: Player) -> Point:
        prompt = t().prompt_remove.format(player=t().player_name(player))
        while True:
            try:
                return parse_point(self._ask(prompt))
            except ValueError as exc:
                self._say_invalid_input(exc)

    # ── Rendering ────────────────────────────────────────────────────────

    def print_board(self) -> None:
        board = self._controller.board
        self._say(t().board_title)
        self._say(render_board(board))
        for player in (Player.ONE, Player.TWO):
            self._say(
                t().stones_on_board.format(
                    player=t().player_name(player),
                    count=board.count_stones(player),
                )
            )

    def print_legend(self) -> None:
        self._say(t().legend_title)
        self._say(render_legend())

    def _connect_game_events(self) -> None:
        ev = self._controller.events
        ev.on_invalid_move.append(self._on_invalid_move)
        ev.on_mill_formed.append(self._on_mill_formed)
        ev.on_stone_removed.append(self._on_stone_removed)
        ev.on_phase_changed.append(self._on_phase_changed)
        ev.on_game_over.append(self._on_game_over)

    def _on_invalid_move(self, reason: RejectReason) -> None:
        self._say("\n" + t().invalid_move.format(reason=t().reason(reason)) + "\n")

    def _on_mill_formed(self, player: Player, point: Point) -> None:
        self._say(t().mill_formed.format(player=t().player_name(player)))

    def _on_stone_removed(self, player: Player, point: Point) -> None:
        self._say(
            t().stone_removed.format(player=t().player_name(player), point=point)
        )

    def _on_phase_changed(self, phase: GamePhase) -> None:
        if phase != GamePhase.FINISHED:
            self._say(t().phase_name(phase))

    def _on_game_over(self, winner: Player) -> None:
        self._say("")
        self.print_board()
        self._say(t().game_finished.format(player=t().player_name(winner)))

    # ── I/O helpers ──────────────────────────────────────────────────────

    def _ask(self, prompt: str) -> str:
        self._say("")
        self.print_board()
        self._say(prompt)
        line = self._in.readline()
        if not line:
            raise EOFError("input closed")
        line = line.strip()
        if line.lower() in _QUIT_WORDS:
            raise QuitGame
        return line

    def _say_invalid_input(self, error: ValueError) -> None:
        self._say("\n" + t().invalid_input.format(error=error) + "\n")

    def _say(self, text: str) -> None:
        print(text, file=self._out)


# ── Entry point ──────────────────────────────────────────────────────────────


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="muehle",
        description="Play Nine Men's Morris (Mühle) for two players in the terminal.",
    )
    parser.add_argument(
        "--stones",
        type=int,
        default=GameSettings.stones_per_player,
        help="stones each player places (default: %(default)s)",
    )
    parser.add_argument(
        "--language",
        choices=LANGUAGES,
        default="English",
        help="language of prompts and messages (default: %(default)s)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log every action to stderr",
    )
    return parser


def main(
    argv: list[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Run a terminal game. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    set_language(args.language)

    try:
        settings = GameSettings(stones_per_player=args.stones)
    except ValueError as exc:
        parser.error(str(exc))

    controller = GameController(settings)
    frontend = ConsoleFrontend(controller, stdin=stdin, stdout=stdout)
    out = stdout if stdout is not None else sys.stdout

    print(t().welcome, file=out)
    print(t().quit_hint, file=out)
    frontend.print_legend()
    controller.new_game(settings)
    try:
        winner = controller.play(frontend)
    except (EOFError, QuitGame):
        _LOGGER.info("Game abandoned at ply %d", controller.state.ply_count)
        print("\n" + t().game_abandoned, file=out)
        return 1

    _LOGGER.info("Winner: %s", winner)
    return 0


if __name__ == "__main__":
    sys.exit(main())
