"""Qt bridge exposing the game controller to a GUI front end."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from chessrules.core.enums import MoveStatus
from chessrules.core.move import Move
from chessrules.game.controller import GameController
from chessrules.game.interfaces import GamePhase
from chessrules.game.settings import GameSettings
from chessrules.game.state import GameState

_LOGGER = logging.getLogger(__name__)


class GameBridge(QObject):
    """Thread-affine adapter turning controller callbacks into Qt signals.

    A board view only needs the square pair of a click-drag; everything else
    (move kind, promotion, legality) is resolved by the engine.
    """

    move_applied = pyqtSignal(object, str)  # move, notation
    move_rejected = pyqtSignal(str)  # MoveStatus name
    phase_changed = pyqtSignal(object)  # GamePhase
    game_over = pyqtSignal(object)  # terminal GamePhase

    def __init__(
        self,
        settings: GameSettings | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._controller = GameController(settings)
        events = self._controller.events
        events.on_move.append(self._on_move)
        events.on_rejected.append(self._on_rejected)
        events.on_phase_changed.append(self._on_phase_changed)
        events.on_game_over.append(self._on_game_over)

    @property
    def controller(self) -> GameController:
        return self._controller

    # ── Slots ────────────────────────────────────────────────────────────

    @pyqtSlot()
    def new_game(self) -> None:
        self._controller.new_game()

    @pyqtSlot(str)
    def new_game_from_fen(self, fen: str) -> None:
        self._controller.new_game(fen)

    @pyqtSlot(int, int, result=bool)
    def submit_squares(self, source: int, destination: int) -> bool:
        """Play the move joining two clicked squares."""
        return self._controller.submit_squares(source, destination)

    @pyqtSlot(result=bool)
    def undo(self) -> bool:
        return self._controller.undo_move()

    def legal_destinations(self, source: int) -> list[int]:
        """Squares to highlight once *source* is selected."""
        return self._controller.legal_destinations(source)

    # ── Controller callbacks ─────────────────────────────────────────────

    def _on_move(self, move: Move, notation: str, _state: GameState) -> None:
        self.move_applied.emit(move, notation)

    def _on_rejected(self, move: Move | None, status: MoveStatus) -> None:
        _LOGGER.debug("Bridge rejected %s (%s)", move, status.name)
        self.move_rejected.emit(status.name)

    def _on_phase_changed(self, phase: GamePhase) -> None:
        self.phase_changed.emit(phase)

    def _on_game_over(self, phase: GamePhase) -> None:
        self.game_over.emit(phase)
