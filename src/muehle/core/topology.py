"""Static board topology: adjacency graph, mills and drawing coordinates.

All tables are built once at import time and shared read-only by every
``Board`` instance.
"""

from __future__ import annotations

from muehle.core.types import POINT_COUNT, Point

MILL_COUNT = 16

# Point -> points reachable by a single slide.
ADJACENCY: tuple[tuple[Point, ...], ...] = (
    (1, 9),  # 0
    (0, 2, 4),  # 1
    (1, 14),  # 2
    (4, 10),  # 3
    (1, 3, 5, 7),  # 4
    (4, 13),  # 5
    (7, 11),  # 6
    (4, 6, 8),  # 7
    (7, 12),  # 8
    (0, 10, 21),  # 9
    (3, 9, 11, 18),  # 10
    (6, 10, 15),  # 11
    (8, 13, 17),  # 12
    (5, 12, 14, 20),  # 13
    (2, 13, 23),  # 14
    (11, 16),  # 15
    (15, 17, 19),  # 16
    (12, 16),  # 17
    (10, 19),  # 18
    (16, 18, 20, 22),  # 19
    (13, 19),  # 20
    (9, 22),  # 21
    (19, 21, 23),  # 22
    (14, 22),  # 23
)

MILLS: tuple[tuple[Point, Point, Point], ...] = (
    # Horizontal lines
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (9, 10, 11),
    (12, 13, 14),
    (15, 16, 17),
    (18, 19, 20),
    (21, 22, 23),
    # Vertical lines
    (0, 9, 21),
    (3, 10, 18),
    (6, 11, 15),
    (1, 4, 7),
    (16, 19, 22),
    (8, 12, 17),
    (5, 13, 20),
    (2, 14, 23),
)

# Point -> the mill triples running through it.
MILLS_BY_POINT: tuple[tuple[tuple[Point, Point, Point], ...], ...] = tuple(
    tuple(mill for mill in MILLS if x in mill) for x in range(POINT_COUNT)
)

# Point -> (column, row) on a 7x7 lattice, (0, 0) top-left.
POINT_COORDS: tuple[tuple[int, int], ...] = (
    (0, 0), (3, 0), (6, 0),
    (1, 1), (3, 1), (5, 1),
    (2, 2), (3, 2), (4, 2),
    (0, 3), (1, 3), (2, 3), (4, 3), (5, 3), (6, 3),
    (2, 4), (3, 4), (4, 4),
    (1, 5), (3, 5), (5, 5),
    (0, 6), (3, 6), (6, 6),
)  # fmt: skip

GRID_SIZE = 7


def lines() -> list[tuple[Point, Point]]:
    """Every board edge once, as ``(low, high)`` point pairs."""
    return [(x, y) for x in range(POINT_COUNT) for y in ADJACENCY[x] if x < y]


def verify_topology(
    adjacency: tuple[tuple[Point, ...], ...] = ADJACENCY,
    mills: tuple[tuple[Point, Point, Point], ...] = MILLS,
) -> None:
    """Raise ``ValueError`` if the tables do not describe a valid board."""
    if len(adjacency) != POINT_COUNT:
        raise ValueError(f"Adjacency must cover {POINT_COUNT} points")
    for x, neighbours in enumerate(adjacency):
        for y in neighbours:
            if x not in adjacency[y]:
                raise ValueError(f"Adjacency is not symmetric: {x} -> {y}")
    if len(mills) != MILL_COUNT:
        raise ValueError(f"Expected {MILL_COUNT} mills, got {len(mills)}")
    covered = {x for mill in mills for x in mill}
    if covered != set(range(POINT_COUNT)):
        missing = sorted(set(range(POINT_COUNT)) - covered)
        raise ValueError(f"Points not covered by any mill: {missing}")


verify_topology()
