"""FEN parsing and serialization.

Castling availability is carried on the board as the first-move flags of the
king and rooks, and the en-passant target as the board's ``en_passant_pawn``.
Move clocks are not tracked, so they are accepted on input and written back
as ``0 1``.
"""

from __future__ import annotations

from chessrules.core.board import Board, BoardBuilder
from chessrules.core.enums import Alliance, PieceType
from chessrules.core.errors import ChessError, InvalidPosition
from chessrules.core.piece import Piece
from chessrules.core.types import (
    A1,
    A8,
    E1,
    E8,
    H1,
    H8,
    NUM_TILES_PER_ROW,
    SECOND_RANK,
    SEVENTH_RANK,
    Square,
    algebraic_for,
    rank_of,
    square_index_for,
)

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
_PIECE_CHARS = "PNBRQKpnbrqk"

# castling letter -> (alliance, king square, rook square)
_CASTLING: dict[str, tuple[Alliance, Square, Square]] = {
    "K": (Alliance.WHITE, E1, H1),
    "Q": (Alliance.WHITE, E1, A1),
    "k": (Alliance.BLACK, E8, H8),
    "q": (Alliance.BLACK, E8, A8),
}


def _parse_placement(placement: str, fen: str) -> dict[Square, str]:
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise InvalidPosition(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    chars: dict[Square, str] = {}
    for row, rank_text in enumerate(ranks):
        file = 0
        for ch in rank_text:
            if ch in "12345678":
                file += int(ch)
            elif ch not in _PIECE_CHARS:
                raise InvalidPosition(f"Invalid FEN piece character {ch!r}: {fen!r}")
            else:
                if file >= 8:
                    raise InvalidPosition(f"Invalid FEN rank width: {fen!r}")
                chars[row * NUM_TILES_PER_ROW + file] = ch
                file += 1
            if file > 8:
                raise InvalidPosition(f"Invalid FEN rank width: {fen!r}")
        if file != 8:
            raise InvalidPosition(f"Invalid FEN rank width: {fen!r}")
    return chars


def _first_move_flag(ch: str, sq: Square, unmoved: set[Square]) -> bool:
    ptype = ch.upper()
    if ptype == "P":
        start = SECOND_RANK if ch.isupper() else SEVENTH_RANK
        return start[sq]
    if ptype in ("K", "R"):
        return sq in unmoved
    return True


def board_from_fen(fen: str) -> Board:
    """Parse a FEN string into a :class:`Board`."""
    parts = fen.split()
    if not (4 <= len(parts) <= 6):
        raise InvalidPosition(f"Invalid FEN (need 4-6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part = parts[:4]

    # 1. Piece placement
    chars = _parse_placement(placement, fen)

    # 2. Side to move
    if side_part == "w":
        side = Alliance.WHITE
    elif side_part == "b":
        side = Alliance.BLACK
    else:
        raise InvalidPosition(f"Invalid FEN side-to-move field: {side_part!r}")

    # 3. Castling -> unmoved king and rook squares
    unmoved: set[Square] = set()
    if castling_part != "-":
        seen: set[str] = set()
        for ch in castling_part:
            entry = _CASTLING.get(ch)
            if entry is None or ch in seen:
                raise InvalidPosition(f"Invalid FEN castling field: {castling_part!r}")
            seen.add(ch)
            alliance, king_sq, rook_sq = entry
            king_char, rook_char = ("K", "R") if alliance.is_white else ("k", "r")
            if chars.get(king_sq) != king_char or chars.get(rook_sq) != rook_char:
                raise InvalidPosition(
                    f"FEN castling right {ch!r} without king and rook in place"
                )
            unmoved.update((king_sq, rook_sq))

    builder = BoardBuilder()
    for sq, ch in chars.items():
        builder.set_piece(Piece.from_char(ch, sq, _first_move_flag(ch, sq, unmoved)))
    builder.set_move_maker(side)

    # 4. En passant
    if ep_part != "-":
        target = square_index_for(ep_part)
        expected_rank = 5 if side.is_white else 2
        if rank_of(target) != expected_rank:
            raise InvalidPosition(
                f"Invalid FEN en-passant square for side-to-move: {ep_part!r}"
            )
        pawn_sq = target + side.opposite.direction * NUM_TILES_PER_ROW
        pawn_char = "P" if side.opposite.is_white else "p"
        if chars.get(pawn_sq) != pawn_char:
            raise InvalidPosition(f"No pawn behind en-passant square: {ep_part!r}")
        pawn = Piece(PieceType.PAWN, side.opposite, pawn_sq, is_first_move=False)
        builder.set_piece(pawn)
        builder.set_en_passant_pawn(pawn)

    # 5–6. Clocks
    for field_text in parts[4:]:
        if not field_text.isdigit():
            raise InvalidPosition(f"Invalid FEN clock field: {field_text!r}")

    try:
        return builder.build()
    except ChessError as exc:
        raise InvalidPosition(f"{exc}: {fen!r}") from exc


def board_to_fen(board: Board) -> str:
    """Serialise a :class:`Board` to FEN."""
    # 1. Board
    rows: list[str] = []
    for row_start in range(0, 64, NUM_TILES_PER_ROW):
        empty = 0
        row = ""
        for sq in range(row_start, row_start + NUM_TILES_PER_ROW):
            piece = board.piece_at(sq)
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    board_str = "/".join(rows)

    # 2. Side
    side_str = "w" if board.move_maker.is_white else "b"

    # 3. Castling
    castling_str = ""
    for letter, (alliance, king_sq, rook_sq) in _CASTLING.items():
        king = board.piece_at(king_sq)
        rook = board.piece_at(rook_sq)
        if (
            king is not None
            and king.is_king
            and king.alliance == alliance
            and king.is_first_move
            and rook is not None
            and rook.is_rook
            and rook.alliance == alliance
            and rook.is_first_move
        ):
            castling_str += letter
    if not castling_str:
        castling_str = "-"

    # 4. En passant
    pawn = board.en_passant_pawn
    if pawn is not None:
        target = pawn.square - pawn.alliance.direction * NUM_TILES_PER_ROW
        ep_str = algebraic_for(target)
    else:
        ep_str = "-"

    return f"{board_str} {side_str} {castling_str} {ep_str} 0 1"
