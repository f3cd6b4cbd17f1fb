"""Tests for FEN board descriptions."""

import pytest

from chessrules.core.enums import Alliance, PieceType
from chessrules.core.errors import InvalidPosition
from chessrules.core.fen import STARTING_FEN, board_from_fen, board_to_fen
from chessrules.core.types import A1, A8, D5, E1, E8, H1, H8


class TestFenRoundTrip:
    @pytest.mark.parametrize(
        "fen",
        [
            STARTING_FEN,
            "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1",
            "8/2p5/3p4/KP5r/1R3p1k/8/4P1P1/8 w - - 0 1",
            "4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 1",
            "r3k2r/8/8/8/8/8/8/R3K2R b Kq - 0 1",
        ],
    )
    def test_round_trip(self, fen: str) -> None:
        assert board_to_fen(board_from_fen(fen)) == fen

    def test_clock_fields_are_optional(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/8/4K3 b - -")
        assert board.move_maker == Alliance.BLACK
        assert board_to_fen(board) == "4k3/8/8/8/8/8/8/4K3 b - - 0 1"


class TestFenFlags:
    def test_castling_rights_become_first_move_flags(self) -> None:
        board = board_from_fen("r3k2r/8/8/8/8/8/8/R3K2R w Kq - 0 1")
        flags = {sq: board.get_tile(sq).piece.is_first_move for sq in (A1, H1, E1, A8, H8, E8)}  # type: ignore[union-attr]
        assert flags == {A1: False, H1: True, E1: True, A8: True, H8: False, E8: True}

    def test_no_rights_clear_king_flag(self) -> None:
        board = board_from_fen("r3k2r/8/8/8/8/8/8/R3K2R w - - 0 1")
        assert not board.white_player.king.is_first_move
        assert not board.black_player.king.is_first_move

    def test_pawn_flags_follow_start_rank(self) -> None:
        board = board_from_fen("4k3/p7/8/8/8/1P6/P7/4K3 w - - 0 1")
        assert board.get_tile("a7").piece.is_first_move  # type: ignore[union-attr]
        assert board.get_tile("a2").piece.is_first_move  # type: ignore[union-attr]
        assert not board.get_tile("b3").piece.is_first_move  # type: ignore[union-attr]

    def test_en_passant_pawn(self) -> None:
        board = board_from_fen("4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 1")
        pawn = board.en_passant_pawn
        assert pawn is not None
        assert pawn.square == D5
        assert pawn.piece_type == PieceType.PAWN
        assert pawn.alliance == Alliance.BLACK


class TestFenErrors:
    @pytest.mark.parametrize(
        "fen",
        [
            "",
            "8/8/8/8/8/8/8/8 w",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP w KQkq - 0 1",
            "rnbqkbnr/pppppppp/9/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1",
            "rnbqkbnr/pppppppp/7/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR x KQkq - 0 1",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkx - 0 1",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KK - 0 1",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq e4 0 1",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq e6 0 1",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - x 1",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNX w KQkq - 0 1",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBN\u00b2 w KQkq - 0 1",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBN0R w KQkq - 0 1",
        ],
    )
    def test_malformed(self, fen: str) -> None:
        with pytest.raises(InvalidPosition):
            board_from_fen(fen)

    def test_castling_right_without_rook(self) -> None:
        with pytest.raises(InvalidPosition):
            board_from_fen("4k3/8/8/8/8/8/8/4K3 w K - 0 1")

    def test_missing_king(self) -> None:
        with pytest.raises(InvalidPosition):
            board_from_fen("8/8/8/8/8/8/8/4K3 w - - 0 1")
