"""Game management layer: state machine, controller, Qt bridge.

Quick start::

    from chessrules.game import GameController

    ctrl = GameController()
    ctrl.submit_squares("e2", "e4")
    print(ctrl.phase)

The Qt bridge lives in :mod:`chessrules.game.qt_bridge` and is imported
explicitly so the rules layer stays usable without a Qt runtime.
"""

from chessrules.game.controller import GameController, GameEvents
from chessrules.game.interfaces import GamePhase, IGameController
from chessrules.game.settings import GameSettings
from chessrules.game.state import GameState, MoveRecord

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    # Concrete
    "GameController",
    "GameEvents",
    "GameSettings",
    "GameState",
    "MoveRecord",
]
