"""Text notation: point/move parsing and the ASCII board diagram."""

from __future__ import annotations

from typing import TYPE_CHECKING

from muehle.core.enums import Player
from muehle.core.types import POINT_COUNT, Point

if TYPE_CHECKING:
    from muehle.core.board import Board

STONE_SYMBOLS: dict[Player, str] = {
    Player.NONE: ".",
    Player.ONE: "1",
    Player.TWO: "2",
}

_BOARD_TEMPLATE = """\
{}----------{}----------{}
|          |          |
|   {}------{}------{}   |
|   |      |      |   |
|   |   {}--{}--{}   |   |
|   |   |     |   |   |
{}---{}---{}     {}---{}---{}
|   |   |     |   |   |
|   |   {}--{}--{}   |   |
|   |      |      |   |
|   {}------{}------{}   |
|          |          |
{}----------{}----------{}"""


def parse_point(text: str) -> Point:
    """Parse a point index, e.g. ``' 13 '`` → 13.

    Only the syntax is checked; range checking is the board's job.
    """
    token = text.strip()
    if not token or not token.lstrip("-").isdigit():
        raise ValueError(f"Invalid point: {text!r}")
    return int(token)


def parse_move(text: str) -> tuple[Point, Point]:
    """Parse an ``origin,destination`` pair, e.g. ``'0,1'`` → (0, 1)."""
    parts = text.split(",")
    if len(parts) != 2:
        raise ValueError(f"Invalid move {text!r}: format is 'x,y'")
    return parse_point(parts[0]), parse_point(parts[1])


def render_board(board: Board, symbols: dict[Player, str] | None = None) -> str:
    """Multi-line diagram of *board*, one symbol per point."""
    symbols = symbols or STONE_SYMBOLS
    cells = [symbols[board.occupant(x)] for x in range(POINT_COUNT)]
    return _BOARD_TEMPLATE.format(*cells)


def render_legend() -> str:
    """Point indices row by row, top to bottom."""
    cells = [str(x) for x in range(POINT_COUNT)]
    rows = ((0, 3), (3, 6), (6, 9), (9, 15), (15, 18), (18, 21), (21, 24))
    return "\n".join(" ".join(cells[a:b]) for a, b in rows)
