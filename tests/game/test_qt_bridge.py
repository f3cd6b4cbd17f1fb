"""Tests for the Qt game bridge."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal
from PyQt6.QtTest import QSignalSpy

from chessrules.core.types import E2, E4, E5
from chessrules.game.interfaces import GamePhase
from chessrules.game.qt_bridge import GameBridge
from chessrules.game.settings import GameSettings


class _SquareSource(QObject):
    squares_picked = pyqtSignal(int, int)


class TestGameBridge:
    def test_emits_move_applied(self, qapp: object) -> None:
        bridge = GameBridge()
        applied = QSignalSpy(bridge.move_applied)
        phases = QSignalSpy(bridge.phase_changed)

        assert bridge.submit_squares(E2, E4)

        assert len(applied) == 1
        assert applied[0][1] == "e2e4"
        assert len(phases) == 1
        assert phases[0][0] == GamePhase.BLACK_TO_MOVE

    def test_emits_rejection(self, qapp: object) -> None:
        bridge = GameBridge()
        rejected = QSignalSpy(bridge.move_rejected)
        applied = QSignalSpy(bridge.move_applied)

        assert not bridge.submit_squares(E2, E5)

        assert len(rejected) == 1
        assert rejected[0][0] == "ILLEGAL_MOVE"
        assert len(applied) == 0

    def test_emits_game_over(self, qapp: object) -> None:
        bridge = GameBridge()
        game_over = QSignalSpy(bridge.game_over)
        for source, destination in (("f2", "f3"), ("e7", "e5"), ("g2", "g4"), ("d8", "h4")):
            bridge.controller.submit_squares(source, destination)

        assert len(game_over) == 1
        assert game_over[0][0] == GamePhase.WHITE_CHECKMATED

    def test_new_game_from_fen(self, qapp: object) -> None:
        bridge = GameBridge()
        phases = QSignalSpy(bridge.phase_changed)

        bridge.new_game_from_fen("7k/5Q2/6K1/8/8/8/8/8 b - - 0 1")

        assert len(phases) == 1
        assert phases[0][0] == GamePhase.STALEMATE

    def test_undo_and_destinations(self, qapp: object) -> None:
        bridge = GameBridge(GameSettings())
        bridge.submit_squares(E2, E4)
        assert bridge.undo()
        assert E4 in bridge.legal_destinations(E2)
        bridge.new_game()
        assert bridge.controller.state.ply_count == 0

    def test_bad_square_from_signal_is_rejected(self, qapp: object) -> None:
        bridge = GameBridge()
        source = _SquareSource()
        source.squares_picked.connect(bridge.submit_squares)
        rejected = QSignalSpy(bridge.move_rejected)

        source.squares_picked.emit(99, 0)

        assert len(rejected) == 1
        assert rejected[0][0] == "ILLEGAL_MOVE"
        assert bridge.controller.state.ply_count == 0
