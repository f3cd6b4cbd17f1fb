"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import Board, MoveFactory

    board = Board.create_standard_board()
    move = MoveFactory.create_move(board, "e2", "e4")
    transition = board.current_player.make_move(move)
    if transition.is_done:
        board = transition.to_board
"""

from chessrules.core.board import Board, BoardBuilder, Tile
from chessrules.core.enums import Alliance, MoveKind, MoveStatus, PieceType
from chessrules.core.errors import (
    ChessError,
    GameOverError,
    IllegalMove,
    InvalidPosition,
    LeavesPlayerInCheck,
    NoSuchMove,
)
from chessrules.core.fen import STARTING_FEN, board_from_fen, board_to_fen
from chessrules.core.move import Move, MoveFactory, MoveTransition
from chessrules.core.piece import Piece
from chessrules.core.player import Player
from chessrules.core.types import (
    Square,
    algebraic_for,
    file_of,
    is_valid_square,
    make_square,
    rank_of,
    square_index_for,
)

__all__ = [
    # Enums
    "Alliance",
    "MoveKind",
    "MoveStatus",
    "PieceType",
    # Errors
    "ChessError",
    "GameOverError",
    "IllegalMove",
    "InvalidPosition",
    "LeavesPlayerInCheck",
    "NoSuchMove",
    # Types / helpers
    "Square",
    "algebraic_for",
    "file_of",
    "is_valid_square",
    "make_square",
    "rank_of",
    "square_index_for",
    # Domain objects
    "Board",
    "BoardBuilder",
    "Move",
    "MoveFactory",
    "MoveTransition",
    "Piece",
    "Player",
    "Tile",
    # Notation
    "STARTING_FEN",
    "board_from_fen",
    "board_to_fen",
]
