"""Game management layer — controller, state machine, front-end interfaces.

Quick start::

    from muehle.game import GameController

    ctrl = GameController()
    ctrl.events.on_mill_formed.append(lambda player, point: print(player, point))
    ctrl.place(0)  # Player One
    ctrl.place(9)  # Player Two
"""

from muehle.game.controller import GameController, GameEvents
from muehle.game.interfaces import (
    GamePhase,
    GameSettings,
    IGameController,
    IMoveSource,
    RejectReason,
)
from muehle.game.state import GameState

__all__ = [
    # Interfaces
    "GamePhase",
    "GameSettings",
    "IGameController",
    "IMoveSource",
    "RejectReason",
    # Concrete
    "GameController",
    "GameEvents",
    "GameState",
]
