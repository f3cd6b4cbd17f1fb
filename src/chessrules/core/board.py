"""Board - immutable snapshot of 64 tiles plus the side to move."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import TYPE_CHECKING

from chessrules.core.enums import Alliance, PieceType
from chessrules.core.errors import ChessError
from chessrules.core.piece import Piece
from chessrules.core.player import Player
from chessrules.core.types import (
    NUM_TILES,
    NUM_TILES_PER_ROW,
    Square,
    algebraic_for,
    make_square,
    to_square,
)

if TYPE_CHECKING:
    from chessrules.core.move import Move

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


@dataclass(frozen=True, slots=True)
class Tile:
    """A square and whatever stands on it."""

    square: Square
    piece: Piece | None = None

    @property
    def is_occupied(self) -> bool:
        return self.piece is not None

    def __str__(self) -> str:
        return str(self.piece) if self.piece is not None else "."


class Board:
    """Immutable chess board.

    Built once by :class:`BoardBuilder` and never changed afterwards; playing
    a move yields a brand-new board.  Move sets and the two
    :class:`~chessrules.core.player.Player` objects are derived lazily and
    cached for the lifetime of this snapshot only.
    """

    def __init__(self, builder: BoardBuilder) -> None:
        squares: list[Piece | None] = [None] * NUM_TILES
        for sq, piece in builder.config.items():
            squares[sq] = piece
        self._squares: tuple[Piece | None, ...] = tuple(squares)
        self._tiles = tuple(Tile(sq, piece) for sq, piece in enumerate(squares))
        self.move_maker: Alliance = builder.move_maker
        self.en_passant_pawn: Piece | None = builder.en_passant_pawn
        self.transition_move: Move | None = builder.transition_move

        self.white_pieces: tuple[Piece, ...] = self._active_pieces(Alliance.WHITE)
        self.black_pieces: tuple[Piece, ...] = self._active_pieces(Alliance.BLACK)

        for alliance in Alliance:
            kings = [p for p in self.pieces(alliance) if p.is_king]
            if len(kings) != 1:
                raise ChessError(
                    f"Board must hold exactly one {alliance} king, found {len(kings)}"
                )

    def _active_pieces(self, alliance: Alliance) -> tuple[Piece, ...]:
        return tuple(p for p in self._squares if p is not None and p.alliance == alliance)

    # -- Element access -----------------------------------------------------

    def get_tile(self, sq: Square | str) -> Tile:
        return self._tiles[to_square(sq)]

    def piece_at(self, sq: Square) -> Piece | None:
        return self._squares[sq]

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq] is None

    @property
    def tiles(self) -> tuple[Tile, ...]:
        return self._tiles

    def pieces(self, alliance: Alliance) -> tuple[Piece, ...]:
        return self.white_pieces if alliance.is_white else self.black_pieces

    @property
    def all_pieces(self) -> tuple[Piece, ...]:
        return self.white_pieces + self.black_pieces

    # -- Move sets ----------------------------------------------------------

    def standard_moves(self, alliance: Alliance) -> tuple[Move, ...]:
        """Pseudo-legal, non-castling moves of *alliance*."""
        return self._white_standard_moves if alliance.is_white else self._black_standard_moves

    def attack_moves(self, alliance: Alliance) -> tuple[Move, ...]:
        """Moves onto every square *alliance* threatens."""
        return self._white_attacks if alliance.is_white else self._black_attacks

    @cached_property
    def _white_standard_moves(self) -> tuple[Move, ...]:
        return self._calculate_moves(self.white_pieces)

    @cached_property
    def _black_standard_moves(self) -> tuple[Move, ...]:
        return self._calculate_moves(self.black_pieces)

    @cached_property
    def _white_attacks(self) -> tuple[Move, ...]:
        return tuple(m for p in self.white_pieces for m in p.calculate_attack_moves(self))

    @cached_property
    def _black_attacks(self) -> tuple[Move, ...]:
        return tuple(m for p in self.black_pieces for m in p.calculate_attack_moves(self))

    def _calculate_moves(self, pieces: tuple[Piece, ...]) -> tuple[Move, ...]:
        return tuple(m for p in pieces for m in p.calculate_legal_moves(self))

    @property
    def all_legal_moves(self) -> tuple[Move, ...]:
        """Both sides' candidate moves, castles included."""
        return (
            self.white_player.pseudo_legal_moves + self.black_player.pseudo_legal_moves
        )

    # -- Players ------------------------------------------------------------

    @cached_property
    def white_player(self) -> Player:
        return Player(
            self,
            Alliance.WHITE,
            self.standard_moves(Alliance.WHITE),
            self.attack_moves(Alliance.BLACK),
        )

    @cached_property
    def black_player(self) -> Player:
        return Player(
            self,
            Alliance.BLACK,
            self.standard_moves(Alliance.BLACK),
            self.attack_moves(Alliance.WHITE),
        )

    def player(self, alliance: Alliance) -> Player:
        return self.white_player if alliance.is_white else self.black_player

    @property
    def current_player(self) -> Player:
        return self.player(self.move_maker)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def create_standard_board(cls) -> Board:
        """Standard starting position, White to move."""
        builder = BoardBuilder()
        for f, pt in enumerate(_BACK_RANK):
            builder.set_piece(Piece(pt, Alliance.BLACK, make_square(f, 7)))
            builder.set_piece(Piece(PieceType.PAWN, Alliance.BLACK, make_square(f, 6)))
            builder.set_piece(Piece(PieceType.PAWN, Alliance.WHITE, make_square(f, 1)))
            builder.set_piece(Piece(pt, Alliance.WHITE, make_square(f, 0)))
        builder.set_move_maker(Alliance.WHITE)
        return builder.build()

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self._squares == other._squares
            and self.move_maker == other.move_maker
            and self.en_passant_pawn == other.en_passant_pawn
        )

    def __hash__(self) -> int:
        return hash((self._squares, self.move_maker, self.en_passant_pawn))

    def __str__(self) -> str:
        rows: list[str] = []
        for row_start in range(0, NUM_TILES, NUM_TILES_PER_ROW):
            row = " ".join(str(t) for t in self._tiles[row_start : row_start + 8])
            rows.append(f"{algebraic_for(row_start)[1]} {row}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)

    def __repr__(self) -> str:
        return f"Board({self.move_maker} to move)\n{self}"


class BoardBuilder:
    """Collects pieces and metadata, then freezes them into a :class:`Board`."""

    __slots__ = ("config", "move_maker", "en_passant_pawn", "transition_move")

    def __init__(self) -> None:
        self.config: dict[Square, Piece] = {}
        self.move_maker: Alliance = Alliance.WHITE
        self.en_passant_pawn: Piece | None = None
        self.transition_move: Move | None = None

    def set_piece(self, piece: Piece) -> BoardBuilder:
        self.config[piece.square] = piece
        return self

    def set_move_maker(self, alliance: Alliance) -> BoardBuilder:
        self.move_maker = alliance
        return self

    def set_en_passant_pawn(self, pawn: Piece | None) -> BoardBuilder:
        self.en_passant_pawn = pawn
        return self

    def set_transition_move(self, move: Move | None) -> BoardBuilder:
        self.transition_move = move
        return self

    def build(self) -> Board:
        return Board(self)
