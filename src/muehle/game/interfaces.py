"""Abstract interfaces for the game layer.

Follows Dependency Inversion: the GameController depends on these ABCs,
not on a concrete terminal or Qt front-end.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum, auto

from muehle.core.enums import Player
from muehle.core.types import Point

# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a Mühle game."""

    PLACEMENT = auto()
    SLIDING = auto()
    FLYING = auto()  # at least one player is down to the flying threshold
    FINISHED = auto()


class RejectReason(IntEnum):
    """Why the controller refused an action."""

    GAME_OVER = auto()
    REMOVAL_PENDING = auto()
    WRONG_PHASE = auto()
    INVALID_POINT = auto()
    OCCUPIED = auto()
    NOT_OWN_STONE = auto()
    NOT_ADJACENT = auto()
    SAME_POINT = auto()
    NOT_OPPONENT_STONE = auto()
    PROTECTED_BY_MILL = auto()
    NO_REMOVAL_PENDING = auto()


# ── Rule settings ────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class GameSettings:
    """Stone-count constants of the rules.

    Args:
        stones_per_player: Stones each player places in the first phase.
        flying_threshold: A player down to this many stones may fly.
        losing_threshold: A player left with fewer stones loses.
    """

    stones_per_player: int = 9
    flying_threshold: int = 3
    losing_threshold: int = 3

    def __post_init__(self) -> None:
        if self.losing_threshold < 1:
            raise ValueError("losing_threshold must be at least 1")
        if self.flying_threshold < self.losing_threshold:
            raise ValueError("flying_threshold must not be below losing_threshold")
        if self.stones_per_player < self.flying_threshold:
            raise ValueError("stones_per_player must not be below flying_threshold")
        if self.stones_per_player > 12:
            raise ValueError("stones_per_player must not exceed 12")


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IMoveSource(ABC):
    """Where the controller's ``play`` loop gets its actions from.

    Implementations parse raw input themselves and keep asking until they
    can return well-formed values; range and legality checks are left to
    the board.
    """

    @abstractmethod
    def request_placement(self, player: Player) -> Point:
        """Point on which *player* wants to place a stone."""

    @abstractmethod
    def request_slide_or_jump(
        self, player: Player, allow_flying: bool
    ) -> tuple[Point, Point]:
        """``(origin, destination)`` of *player*'s next move."""

    @abstractmethod
    def request_removal(self, player: Player) -> Point:
        """Opposing stone *player* removes after closing a mill."""


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(self, settings: GameSettings | None = None) -> None:
        """Set up a new game."""

    @abstractmethod
    def place(self, point: Point) -> bool:
        """Place a stone for the side to move. Returns True if applied."""

    @abstractmethod
    def move(self, origin: Point, dest: Point) -> bool:
        """Slide or fly a stone of the side to move. Returns True if applied."""

    @abstractmethod
    def remove_stone(self, point: Point) -> bool:
        """Resolve a pending removal. Returns True if applied."""
