"""Core domain layer — pure Mühle board logic with zero external dependencies.

Quick start::

    from muehle.core import Board, Player

    board = Board()
    board.place(0, Player.ONE)
    board.place(1, Player.ONE)
    board.place(2, Player.ONE)
    assert board.is_part_of_mill(0)
"""

from muehle.core.board import Board
from muehle.core.enums import Occupant, Player
from muehle.core.notation import parse_move, parse_point, render_board
from muehle.core.topology import ADJACENCY, MILLS, POINT_COORDS, verify_topology
from muehle.core.types import POINT_COUNT, Point, is_valid_point

__all__ = [
    # Enums
    "Occupant",
    "Player",
    # Types / helpers
    "POINT_COUNT",
    "Point",
    "is_valid_point",
    # Topology
    "ADJACENCY",
    "MILLS",
    "POINT_COORDS",
    "verify_topology",
    # Domain objects
    "Board",
    # Notation
    "parse_move",
    "parse_point",
    "render_board",
]
