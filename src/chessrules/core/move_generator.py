"""Per-piece pseudo-legal move generation and attack detection.

Each piece type has one generator function; :func:`generate_moves` and
:func:`generate_attacks` dispatch on ``piece.piece_type``.  Generators are
pure functions of ``(piece, board)`` and never filter self-check.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from chessrules.core.enums import MoveKind, PieceType
from chessrules.core.move import Move
from chessrules.core.types import (
    EIGHTH_COLUMN,
    EIGHTH_RANK,
    FIRST_COLUMN,
    FIRST_RANK,
    NUM_TILES_PER_ROW,
    SECOND_COLUMN,
    SECOND_RANK,
    SEVENTH_COLUMN,
    SEVENTH_RANK,
    Square,
    is_valid_square,
)

if TYPE_CHECKING:
    from chessrules.core.board import Board
    from chessrules.core.piece import Piece

    Generator = Callable[[Piece, Board], list[Move]]


KNIGHT_OFFSETS: tuple[int, ...] = (-17, -15, -10, -6, 6, 10, 15, 17)
KING_OFFSETS: tuple[int, ...] = (-9, -8, -7, -1, 1, 7, 8, 9)

BISHOP_DIRS: tuple[int, ...] = (-9, -7, 7, 9)
ROOK_DIRS: tuple[int, ...] = (-8, -1, 1, 8)
QUEEN_DIRS: tuple[int, ...] = BISHOP_DIRS + ROOK_DIRS

PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)

# Offsets that wrap to the opposite edge when taken from a given column.
_COLUMN_EXCLUSIONS: tuple[tuple[tuple[bool, ...], frozenset[int]], ...] = (
    (FIRST_COLUMN, frozenset((-17, -10, -9, -1, 6, 7, 15))),
    (SECOND_COLUMN, frozenset((-10, 6))),
    (SEVENTH_COLUMN, frozenset((-6, 10))),
    (EIGHTH_COLUMN, frozenset((-15, -7, -6, 1, 9, 10, 17))),
)


def is_column_exclusion(sq: Square, offset: int) -> bool:
    """Would stepping *offset* from *sq* wrap around a board edge?"""
    for column, offsets in _COLUMN_EXCLUSIONS:
        if column[sq] and offset in offsets:
            return True
    return False


# -- Sliding pieces --------------------------------------------------------


def _gen_sliding(piece: Piece, board: Board, directions: tuple[int, ...]) -> list[Move]:
    moves: list[Move] = []
    for vector in directions:
        sq = piece.square
        while not is_column_exclusion(sq, vector):
            sq += vector
            if not is_valid_square(sq):
                break
            target = board.piece_at(sq)
            if target is None:
                moves.append(Move(piece, sq))
                continue
            if target.alliance != piece.alliance:
                moves.append(Move(piece, sq, MoveKind.ATTACK, captured=target))
            break
    return moves


def _gen_bishop(piece: Piece, board: Board) -> list[Move]:
    return _gen_sliding(piece, board, BISHOP_DIRS)


def _gen_rook(piece: Piece, board: Board) -> list[Move]:
    return _gen_sliding(piece, board, ROOK_DIRS)


def _gen_queen(piece: Piece, board: Board) -> list[Move]:
    return _gen_sliding(piece, board, QUEEN_DIRS)


# -- Jumping pieces --------------------------------------------------------


def _gen_jumping(piece: Piece, board: Board, offsets: tuple[int, ...]) -> list[Move]:
    moves: list[Move] = []
    for offset in offsets:
        if is_column_exclusion(piece.square, offset):
            continue
        sq = piece.square + offset
        if not is_valid_square(sq):
            continue
        target = board.piece_at(sq)
        if target is None:
            moves.append(Move(piece, sq))
        elif target.alliance != piece.alliance:
            moves.append(Move(piece, sq, MoveKind.ATTACK, captured=target))
    return moves


def _gen_knight(piece: Piece, board: Board) -> list[Move]:
    return _gen_jumping(piece, board, KNIGHT_OFFSETS)


def _gen_king(piece: Piece, board: Board) -> list[Move]:
    return _gen_jumping(piece, board, KING_OFFSETS)


# -- Pawns -----------------------------------------------------------------


def _is_start_rank(piece: Piece) -> bool:
    start = SECOND_RANK if piece.alliance.is_white else SEVENTH_RANK
    return start[piece.square]


def is_promotion_square(piece: Piece, sq: Square) -> bool:
    last = EIGHTH_RANK if piece.alliance.is_white else FIRST_RANK
    return last[sq]


def _pawn_capture_targets(piece: Piece) -> list[Square]:
    """Diagonal squares in front of the pawn, edge wraparound removed."""
    targets: list[Square] = []
    direction = piece.alliance.direction
    for offset in (7, 9):
        step = direction * offset
        if is_column_exclusion(piece.square, step):
            continue
        sq = piece.square + step
        if is_valid_square(sq):
            targets.append(sq)
    return targets


def _append_pawn_move(
    moves: list[Move],
    piece: Piece,
    sq: Square,
    kind: MoveKind,
    captured: Piece | None = None,
) -> None:
    if is_promotion_square(piece, sq):
        for pt in PROMOTION_TYPES:
            moves.append(
                Move(piece, sq, MoveKind.PAWN_PROMOTION, captured=captured, promotion=pt)
            )
    else:
        moves.append(Move(piece, sq, kind, captured=captured))


def _gen_pawn(piece: Piece, board: Board) -> list[Move]:
    moves: list[Move] = []
    step = piece.alliance.direction * NUM_TILES_PER_ROW

    one_step = piece.square + step
    if is_valid_square(one_step) and board.piece_at(one_step) is None:
        _append_pawn_move(moves, piece, one_step, MoveKind.NORMAL)
        two_step = one_step + step
        if (
            piece.is_first_move
            and _is_start_rank(piece)
            and board.piece_at(two_step) is None
        ):
            moves.append(Move(piece, two_step, MoveKind.PAWN_JUMP))

    en_passant_pawn = board.en_passant_pawn
    for cap_sq in _pawn_capture_targets(piece):
        target = board.piece_at(cap_sq)
        if target is not None:
            if target.alliance != piece.alliance:
                _append_pawn_move(moves, piece, cap_sq, MoveKind.ATTACK, target)
        elif (
            en_passant_pawn is not None
            and en_passant_pawn.alliance != piece.alliance
            and en_passant_pawn.square == cap_sq - step
        ):
            moves.append(
                Move(piece, cap_sq, MoveKind.PAWN_EN_PASSANT, captured=en_passant_pawn)
            )
    return moves


def _pawn_attacks(piece: Piece, board: Board) -> list[Move]:
    moves: list[Move] = []
    for sq in _pawn_capture_targets(piece):
        target = board.piece_at(sq)
        if target is None:
            moves.append(Move(piece, sq, MoveKind.ATTACK))
        elif target.alliance != piece.alliance:
            moves.append(Move(piece, sq, MoveKind.ATTACK, captured=target))
    return moves


# -- Dispatch --------------------------------------------------------------

_GENERATORS: dict[PieceType, Generator] = {
    PieceType.PAWN: _gen_pawn,
    PieceType.KNIGHT: _gen_knight,
    PieceType.BISHOP: _gen_bishop,
    PieceType.ROOK: _gen_rook,
    PieceType.QUEEN: _gen_queen,
    PieceType.KING: _gen_king,
}

_ATTACK_GENERATORS: dict[PieceType, Generator] = {
    **_GENERATORS,
    PieceType.PAWN: _pawn_attacks,
}


def generate_moves(piece: Piece, board: Board) -> list[Move]:
    """Pseudo-legal, non-castling moves of *piece* on *board*."""
    return _GENERATORS[piece.piece_type](piece, board)


def generate_attacks(piece: Piece, board: Board) -> list[Move]:
    """Moves onto every square *piece* threatens.

    Same as :func:`generate_moves` except for pawns: pushes are dropped and
    both forward diagonals count whether or not something stands there.
    """
    return _ATTACK_GENERATORS[piece.piece_type](piece, board)
