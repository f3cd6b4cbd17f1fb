"""Player - per-alliance view of a board: legal moves, castling, check."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from functools import cached_property
from typing import TYPE_CHECKING

from chessrules.core.enums import Alliance, MoveKind, MoveStatus
from chessrules.core.move import Move, MoveTransition
from chessrules.core.types import (
    A1,
    A8,
    B1,
    B8,
    C1,
    C8,
    D1,
    D8,
    E1,
    E8,
    F1,
    F8,
    G1,
    G8,
    H1,
    H8,
    Square,
)

if TYPE_CHECKING:
    from chessrules.core.board import Board
    from chessrules.core.piece import Piece


@dataclass(frozen=True, slots=True)
class _CastleLayout:
    kind: MoveKind
    king_from: Square
    king_to: Square
    rook_from: Square
    rook_to: Square
    must_be_empty: tuple[Square, ...]
    must_be_safe: tuple[Square, ...]


_CASTLE_LAYOUTS: dict[Alliance, tuple[_CastleLayout, ...]] = {
    Alliance.WHITE: (
        _CastleLayout(MoveKind.CASTLE_KINGSIDE, E1, G1, H1, F1, (F1, G1), (F1, G1)),
        _CastleLayout(MoveKind.CASTLE_QUEENSIDE, E1, C1, A1, D1, (B1, C1, D1), (D1, C1)),
    ),
    Alliance.BLACK: (
        _CastleLayout(MoveKind.CASTLE_KINGSIDE, E8, G8, H8, F8, (F8, G8), (F8, G8)),
        _CastleLayout(MoveKind.CASTLE_QUEENSIDE, E8, C8, A8, D8, (B8, C8, D8), (D8, C8)),
    ),
}


class Player:
    """One side of a board snapshot.

    A player is built from a fixed pair of move sets computed by the board:
    its own pseudo-legal moves and the opponent's attack moves.  Castling and
    check are derived from that pair alone, so building one player never
    asks the other one to recompute anything.

    Args:
        board: The snapshot this player belongs to.
        alliance: Side this player moves.
        own_moves: Pseudo-legal non-castling moves of *alliance*.
        opponent_attacks: Every move the opponent threatens on *board*.
    """

    def __init__(
        self,
        board: Board,
        alliance: Alliance,
        own_moves: tuple[Move, ...],
        opponent_attacks: tuple[Move, ...],
    ) -> None:
        self.board = board
        self.alliance = alliance
        self.king = self._establish_king()
        self.opponent_attacks = opponent_attacks
        self._is_in_check = bool(
            Player.calculate_attacks_on_tile(self.king.square, opponent_attacks)
        )
        self.pseudo_legal_moves: tuple[Move, ...] = own_moves + tuple(
            self.calculate_king_castles(opponent_attacks)
        )
        self._move_set = frozenset(self.pseudo_legal_moves)

    def _establish_king(self) -> Piece:
        return next(p for p in self.active_pieces if p.is_king)

    # ── Basic accessors ──────────────────────────────────────────────────

    @property
    def active_pieces(self) -> tuple[Piece, ...]:
        return self.board.pieces(self.alliance)

    @property
    def opponent(self) -> Player:
        return self.board.player(self.alliance.opposite)

    @cached_property
    def legal_moves(self) -> tuple[Move, ...]:
        """Pseudo-legal moves that keep this player's king safe."""
        return tuple(m for m in self.pseudo_legal_moves if self._keeps_king_safe(m))

    def _keeps_king_safe(self, move: Move) -> bool:
        return not move.execute(self.board).player(self.alliance).is_in_check

    def is_move_legal(self, move: Move) -> bool:
        return move in self._move_set

    # ── Status predicates ────────────────────────────────────────────────

    @property
    def is_in_check(self) -> bool:
        return self._is_in_check

    @property
    def is_in_check_mate(self) -> bool:
        return self._is_in_check and not self.legal_moves

    @property
    def is_in_stale_mate(self) -> bool:
        return not self._is_in_check and not self.legal_moves

    @property
    def is_castled(self) -> bool:
        """Did the move that produced this board castle this player's king?"""
        move = self.board.transition_move
        return move is not None and move.is_castle and move.piece.alliance == self.alliance

    # ── Move submission ──────────────────────────────────────────────────

    def make_move(self, move: Move) -> MoveTransition:
        """Validate and play *move*.

        Returns a transition whose status is ILLEGAL_MOVE when the move is
        not one of this player's moves (or it is not this player's turn),
        LEAVES_PLAYER_IN_CHECK when it would expose the own king, and DONE
        with the successor board otherwise.
        """
        board = self.board
        if board.move_maker != self.alliance or not self.is_move_legal(move):
            return MoveTransition(board, board, move, MoveStatus.ILLEGAL_MOVE)

        transition_board = move.execute(board)
        if transition_board.player(self.alliance).is_in_check:
            return MoveTransition(
                board, board, move, MoveStatus.LEAVES_PLAYER_IN_CHECK
            )
        return MoveTransition(board, transition_board, move, MoveStatus.DONE)

    # ── Castling ─────────────────────────────────────────────────────────

    def calculate_king_castles(
        self,
        opponent_attacks: Iterable[Move],
    ) -> list[Move]:
        """Castle moves available given the opponent's *opponent_attacks*.

        A castle is offered only when the king and the corner rook are both
        unmoved, the squares between them are empty, and neither the king's
        square nor any square it crosses or lands on is attacked.
        """
        castles: list[Move] = []
        king = self.king
        if not king.is_first_move or self._is_in_check:
            return castles

        attacks = tuple(opponent_attacks)
        board = self.board
        for layout in _CASTLE_LAYOUTS[self.alliance]:
            if king.square != layout.king_from:
                continue
            if any(not board.is_empty(sq) for sq in layout.must_be_empty):
                continue
            rook = board.piece_at(layout.rook_from)
            if (
                rook is None
                or not rook.is_rook
                or rook.alliance != self.alliance
                or not rook.is_first_move
            ):
                continue
            if any(
                Player.calculate_attacks_on_tile(sq, attacks)
                for sq in layout.must_be_safe
            ):
                continue
            castles.append(
                Move(
                    king,
                    layout.king_to,
                    layout.kind,
                    rook=rook,
                    rook_destination=layout.rook_to,
                )
            )
        return castles

    @staticmethod
    def calculate_attacks_on_tile(sq: Square, moves: Iterable[Move]) -> list[Move]:
        """Moves from *moves* that land on *sq*."""
        return [m for m in moves if m.destination == sq]

    def __repr__(self) -> str:
        return f"Player({self.alliance})"
