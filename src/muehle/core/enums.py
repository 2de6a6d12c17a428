"""Core enumerations for the Mühle domain."""

from __future__ import annotations

from enum import IntEnum


class Player(IntEnum):
    """Stone owner. ``NONE`` marks an empty point (and a drawn game)."""

    NONE = 0
    ONE = 1
    TWO = 2

    @property
    def opponent(self) -> Player:
        if self is Player.NONE:
            return Player.NONE
        return Player(3 - self.value)

    def __str__(self) -> str:
        if self is Player.NONE:
            return "None (Draw)"
        return f"Player {self.name.capitalize()}"


# A point's occupant is simply the owning player (or NONE when empty).
Occupant = Player
