"""Game state machine data — phase, turn, winner and unplaced stones."""

from __future__ import annotations

from dataclasses import dataclass, field

from muehle.core.enums import Player
from muehle.game.interfaces import GamePhase, GameSettings


@dataclass
class GameState:
    """Everything about a game except the stones on the board.

    This is a pure data/logic class — no I/O, no callbacks.
    """

    settings: GameSettings = field(default_factory=GameSettings)
    phase: GamePhase = field(default=GamePhase.PLACEMENT, init=False)
    side_to_move: Player = field(default=Player.ONE, init=False)
    winner: Player = field(default=Player.NONE, init=False)
    stones_in_hand: dict[Player, int] = field(default_factory=dict, init=False)
    pending_removal: Player | None = field(default=None, init=False)
    ply_count: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.setup()

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, settings: GameSettings | None = None) -> None:
        """Initialise (or reset) the game."""
        if settings is not None:
            self.settings = settings
        self.phase = GamePhase.PLACEMENT
        self.side_to_move = Player.ONE
        self.winner = Player.NONE
        self.stones_in_hand = {
            Player.ONE: self.settings.stones_per_player,
            Player.TWO: self.settings.stones_per_player,
        }
        self.pending_removal = None
        self.ply_count = 0

    # ── Transitions ──────────────────────────────────────────────────────

    def take_from_hand(self, player: Player) -> None:
        self.stones_in_hand[player] -= 1

    def end_turn(self) -> None:
        """Hand the move to the other player."""
        self.side_to_move = self.side_to_move.opponent
        self.ply_count += 1

    def finish(self, winner: Player) -> None:
        self.winner = winner
        self.phase = GamePhase.FINISHED
        self.pending_removal = None

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.FINISHED

    @property
    def all_placed(self) -> bool:
        """Both players have placed their full allotment."""
        return all(n == 0 for n in self.stones_in_hand.values())
