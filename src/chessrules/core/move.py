"""Move value object, move transitions and the move factory."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from chessrules.core.enums import MoveKind, MoveStatus, PieceType
from chessrules.core.errors import IllegalMove, LeavesPlayerInCheck, NoSuchMove
from chessrules.core.types import Square, algebraic_for, to_square

if TYPE_CHECKING:
    from chessrules.core.board import Board
    from chessrules.core.piece import Piece

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}

_CASTLE_KINDS = frozenset((MoveKind.CASTLE_KINGSIDE, MoveKind.CASTLE_QUEENSIDE))


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object describing one ply.

    Equality is structural over the moving piece, its destination, the move
    kind and the promotion piece; captured piece and castling rook are
    carried along for execution but do not take part in comparisons.
    """

    piece: Piece
    destination: Square
    kind: MoveKind = MoveKind.NORMAL
    captured: Piece | None = field(default=None, compare=False)
    rook: Piece | None = field(default=None, compare=False)
    rook_destination: Square | None = field(default=None, compare=False)
    promotion: PieceType | None = None

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def source(self) -> Square:
        return self.piece.square

    @property
    def rook_source(self) -> Square | None:
        return self.rook.square if self.rook is not None else None

    @property
    def is_attack(self) -> bool:
        return self.captured is not None

    @property
    def is_castle(self) -> bool:
        return self.kind in _CASTLE_KINDS

    # ── Execution ────────────────────────────────────────────────────────

    def execute(self, board: Board) -> Board:
        """Build the board that results from playing this move on *board*.

        *board* itself is left untouched.
        """
        from chessrules.core.board import BoardBuilder

        vacated = {self.source}
        if self.captured is not None:
            vacated.add(self.captured.square)
        if self.rook is not None:
            vacated.add(self.rook.square)

        builder = BoardBuilder()
        for piece in board.all_pieces:
            if piece.square not in vacated:
                builder.set_piece(piece)

        if self.kind == MoveKind.PAWN_PROMOTION and self.promotion is not None:
            moved = self.piece.promoted_to(self.promotion, self.destination)
        else:
            moved = self.piece.moved_to(self.destination)
        builder.set_piece(moved)

        if self.rook is not None and self.rook_destination is not None:
            builder.set_piece(self.rook.moved_to(self.rook_destination))

        if self.kind == MoveKind.PAWN_JUMP:
            builder.set_en_passant_pawn(moved)
        builder.set_move_maker(self.piece.alliance.opposite)
        builder.set_transition_move(self)
        return builder.build()

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        if self.kind == MoveKind.CASTLE_KINGSIDE:
            return "O-O"
        if self.kind == MoveKind.CASTLE_QUEENSIDE:
            return "O-O-O"
        base = f"{algebraic_for(self.source)}{algebraic_for(self.destination)}"
        if self.promotion is not None:
            base += _PROMO_CHARS[self.promotion]
        return base


@dataclass(frozen=True, slots=True)
class MoveTransition:
    """Result of submitting a move to a player.

    ``to_board`` is the successor board when ``status`` is DONE and the
    unchanged ``from_board`` otherwise.
    """

    from_board: Board
    to_board: Board
    move: Move
    status: MoveStatus

    @property
    def is_done(self) -> bool:
        return self.status.is_done

    def raise_for_status(self) -> Board:
        """Return the new board, or raise the matching rejection error."""
        if self.status == MoveStatus.ILLEGAL_MOVE:
            raise IllegalMove(f"Illegal move: {self.move}")
        if self.status == MoveStatus.LEAVES_PLAYER_IN_CHECK:
            raise LeavesPlayerInCheck(f"Move leaves king in check: {self.move}")
        return self.to_board


class MoveFactory:
    """Resolve a (source, destination) pair into a concrete move."""

    @staticmethod
    def create_move(
        board: Board,
        source: Square | str,
        destination: Square | str,
        promotion: PieceType = PieceType.QUEEN,
    ) -> Move:
        """Find the current player's move joining *source* and *destination*.

        The move kind is taken from the move set, not from the caller.  When
        a pawn reaches the last rank the *promotion* piece picks between the
        otherwise identical candidates.
        """
        from_sq = to_square(source)
        to_sq = to_square(destination)
        candidates = [
            m
            for m in board.current_player.pseudo_legal_moves
            if m.source == from_sq and m.destination == to_sq
        ]
        if len(candidates) == 1:
            return candidates[0]
        for m in candidates:
            if m.promotion == promotion:
                return m
        raise NoSuchMove(
            f"No move from {algebraic_for(from_sq)} to {algebraic_for(to_sq)}"
        )
