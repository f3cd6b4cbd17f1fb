"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from chessrules.core import move_generator
from chessrules.core.enums import Alliance, PieceType
from chessrules.core.errors import InvalidPosition
from chessrules.core.types import Square, algebraic_for

if TYPE_CHECKING:
    from chessrules.core.board import Board
    from chessrules.core.move import Move

# FEN character ↔ (Alliance, PieceType)
_CHAR_MAP: dict[str, tuple[Alliance, PieceType]] = {
    "P": (Alliance.WHITE, PieceType.PAWN),
    "N": (Alliance.WHITE, PieceType.KNIGHT),
    "B": (Alliance.WHITE, PieceType.BISHOP),
    "R": (Alliance.WHITE, PieceType.ROOK),
    "Q": (Alliance.WHITE, PieceType.QUEEN),
    "K": (Alliance.WHITE, PieceType.KING),
    "p": (Alliance.BLACK, PieceType.PAWN),
    "n": (Alliance.BLACK, PieceType.KNIGHT),
    "b": (Alliance.BLACK, PieceType.BISHOP),
    "r": (Alliance.BLACK, PieceType.ROOK),
    "q": (Alliance.BLACK, PieceType.QUEEN),
    "k": (Alliance.BLACK, PieceType.KING),
}

_FEN_CHARS: dict[tuple[Alliance, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a piece standing on a square.

    ``is_first_move`` only ever changes across a board transition: moving a
    piece yields a new ``Piece`` with the flag cleared on the successor board.
    """

    piece_type: PieceType
    alliance: Alliance
    square: Square
    is_first_move: bool = True

    # ── Move generation ──────────────────────────────────────────────────

    def calculate_legal_moves(self, board: Board) -> list[Move]:
        """Pseudo-legal moves; self-check filtering happens in Player."""
        return move_generator.generate_moves(self, board)

    def calculate_attack_moves(self, board: Board) -> list[Move]:
        """Moves onto every square this piece threatens."""
        return move_generator.generate_attacks(self, board)

    # ── Transitions ──────────────────────────────────────────────────────

    def moved_to(self, square: Square) -> Piece:
        """The same piece after relocating to *square*."""
        return replace(self, square=square, is_first_move=False)

    def promoted_to(self, piece_type: PieceType, square: Square) -> Piece:
        return Piece(piece_type, self.alliance, square, is_first_move=False)

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def is_king(self) -> bool:
        return self.piece_type == PieceType.KING

    @property
    def is_rook(self) -> bool:
        return self.piece_type == PieceType.ROOK

    @property
    def is_pawn(self) -> bool:
        return self.piece_type == PieceType.PAWN

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self.alliance, self.piece_type)]

    def __repr__(self) -> str:
        return f"Piece({self}@{algebraic_for(self.square)})"

    @classmethod
    def from_char(cls, char: str, square: Square, is_first_move: bool = True) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        try:
            alliance, ptype = _CHAR_MAP[char]
        except KeyError:
            raise InvalidPosition(f"Invalid piece character: {char!r}") from None
        return cls(ptype, alliance, square, is_first_move)
