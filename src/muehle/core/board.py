"""Board - stone occupancy on the 24 points of the Mühle board."""

from __future__ import annotations

from muehle.core.enums import Occupant, Player
from muehle.core.topology import ADJACENCY, MILLS_BY_POINT
from muehle.core.types import POINT_COUNT, Point, is_valid_point


class Board:
    """Mutable 24-point board.

    Mutating operations are legality gates: they return ``False`` and leave
    the board untouched when the request is illegal.
    """

    __slots__ = ("_stones",)

    def __init__(self) -> None:
        self._stones: list[Occupant] = [Player.NONE] * POINT_COUNT

    # -- Queries ------------------------------------------------------------

    def occupant(self, x: Point) -> Occupant:
        if not is_valid_point(x):
            return Player.NONE
        return self._stones[x]

    def is_occupied(self, x: Point) -> bool:
        return self.occupant(x) != Player.NONE

    def is_adjacent(self, x: Point, y: Point) -> bool:
        """Whether a stone on *x* can slide to *y* in one step."""
        if not is_valid_point(x):
            return False
        return y in ADJACENCY[x]

    def count_stones(self, player: Player) -> int:
        """Number of points currently owned by *player*."""
        return self._stones.count(player)

    def points(self, player: Player) -> list[Point]:
        """Points owned by *player*, ascending."""
        return [x for x, owner in enumerate(self._stones) if owner == player]

    def empty_points(self) -> list[Point]:
        return self.points(Player.NONE)

    def mills_at(self, x: Point) -> list[tuple[Point, Point, Point]]:
        """Complete mills running through *x*."""
        owner = self.occupant(x)
        if owner == Player.NONE:
            return []
        return [
            mill
            for mill in MILLS_BY_POINT[x]
            if all(self._stones[p] == owner for p in mill)
        ]

    def is_part_of_mill(self, x: Point) -> bool:
        """Whether the stone on *x* completes at least one mill."""
        return bool(self.mills_at(x))

    # -- Mutation -----------------------------------------------------------

    def place(self, x: Point, player: Player) -> bool:
        """Put a new stone for *player* on the empty point *x*."""
        if player == Player.NONE or not is_valid_point(x) or self.is_occupied(x):
            return False
        self._stones[x] = player
        return True

    def slide(self, x: Point, y: Point, player: Player) -> bool:
        """Move *player*'s stone from *x* to the adjacent empty point *y*."""
        if not self.is_adjacent(x, y):
            return False
        return self.jump(x, y, player)

    def jump(self, x: Point, y: Point, player: Player) -> bool:
        """Move *player*'s stone from *x* to any empty point *y*."""
        if (
            player == Player.NONE
            or not is_valid_point(x)
            or not is_valid_point(y)
            or x == y
            or self.is_occupied(y)
            or self._stones[x] != player
        ):
            return False

        self._stones[x] = Player.NONE
        self._stones[y] = player
        return True

    def remove(self, x: Point, player: Player) -> bool:
        """Take *player*'s stone off point *x*."""
        if player == Player.NONE or self.occupant(x) != player:
            return False
        self._stones[x] = Player.NONE
        return True

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._stones = self._stones.copy()
        return b

    def clear(self) -> None:
        self._stones = [Player.NONE] * POINT_COUNT

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._stones == other._stones

    def __repr__(self) -> str:
        from muehle.core.notation import render_board

        return render_board(self)
