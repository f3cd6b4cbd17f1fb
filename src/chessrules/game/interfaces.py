"""Abstract interfaces and state definitions for the game layer.

Follows Dependency Inversion: front ends depend on ``IGameController``,
not on the concrete controller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from chessrules.core.enums import Alliance, PieceType

if TYPE_CHECKING:
    from chessrules.core.board import Board
    from chessrules.core.move import Move
    from chessrules.core.types import Square


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a chess game."""

    WHITE_TO_MOVE = auto()
    BLACK_TO_MOVE = auto()
    WHITE_CHECKMATED = auto()
    BLACK_CHECKMATED = auto()
    STALEMATE = auto()

    @property
    def is_terminal(self) -> bool:
        return self not in (GamePhase.WHITE_TO_MOVE, GamePhase.BLACK_TO_MOVE)

    @classmethod
    def for_board(cls, board: Board) -> GamePhase:
        """Phase implied by the side to move on *board*."""
        player = board.current_player
        if player.is_in_check_mate:
            return (
                cls.WHITE_CHECKMATED
                if player.alliance == Alliance.WHITE
                else cls.BLACK_CHECKMATED
            )
        if player.is_in_stale_mate:
            return cls.STALEMATE
        return cls.WHITE_TO_MOVE if player.alliance == Alliance.WHITE else cls.BLACK_TO_MOVE


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(self, fen: str | None = None) -> None:
        """Set up a new game."""

    @abstractmethod
    def submit_move(self, move: Move) -> bool:
        """Submit a move. Returns True if legal and applied."""

    @abstractmethod
    def submit_squares(
        self,
        source: Square | str,
        destination: Square | str,
        promotion: PieceType | None = None,
    ) -> bool:
        """Submit the move joining two squares. Returns True if applied."""

    @abstractmethod
    def undo_move(self) -> bool:
        """Undo the last move. Returns True on success."""
