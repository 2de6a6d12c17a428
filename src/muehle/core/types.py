"""Point type alias and index helpers.

Points are numbered row by row, outer square first::

    0----------1----------2
    |          |          |
    |   3------4------5   |
    |   |      |      |   |
    |   |   6--7--8   |   |
    |   |   |     |   |   |
    9---10--11    12--13--14
    |   |   |     |   |   |
    |   |   15-16-17  |   |
    |   |      |      |   |
    |   18-----19-----20  |
    |          |          |
    21---------22---------23
"""

from __future__ import annotations

from typing import TypeAlias

Point: TypeAlias = int  # 0–23

POINT_COUNT = 24


def is_valid_point(x: int) -> bool:
    """Check whether integer is a valid point index."""
    return 0 <= x < POINT_COUNT
