"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Alliance(IntEnum):
    """Side colour."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Alliance:
        return Alliance(1 - self.value)

    @property
    def direction(self) -> int:
        """Square-index step of a pawn advance (rank 8 sits at index 0)."""
        return -1 if self is Alliance.WHITE else 1

    @property
    def is_white(self) -> bool:
        return self is Alliance.WHITE

    @property
    def is_black(self) -> bool:
        return self is Alliance.BLACK

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def letter(self) -> str:
        return _LETTERS[self]


_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}


class MoveKind(IntEnum):
    """Special move classification."""

    NORMAL = 0
    ATTACK = 1
    PAWN_JUMP = 2
    PAWN_PROMOTION = 3
    PAWN_EN_PASSANT = 4
    CASTLE_KINGSIDE = 5
    CASTLE_QUEENSIDE = 6


class MoveStatus(IntEnum):
    """Outcome of submitting a move to a player."""

    DONE = 0
    ILLEGAL_MOVE = 1
    LEAVES_PLAYER_IN_CHECK = 2

    @property
    def is_done(self) -> bool:
        return self is MoveStatus.DONE
