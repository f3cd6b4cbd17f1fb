"""Tests for GameController: the orchestrator."""

from chessrules.core.enums import Alliance, MoveStatus, PieceType
from chessrules.core.move import Move, MoveFactory
from chessrules.core.types import A8, E2, E3, E4, F3, G1, H3
from chessrules.game.controller import GameController
from chessrules.game.interfaces import GamePhase, IGameController
from chessrules.game.settings import GameSettings

FOOLS_MATE = (("f2", "f3"), ("e7", "e5"), ("g2", "g4"), ("d8", "h4"))


class TestNewGame:
    def test_is_a_controller(self) -> None:
        assert isinstance(GameController(), IGameController)

    def test_default_phase(self) -> None:
        ctrl = GameController()
        assert ctrl.phase == GamePhase.WHITE_TO_MOVE
        assert ctrl.state.side_to_move == Alliance.WHITE

    def test_custom_fen(self) -> None:
        ctrl = GameController()
        ctrl.new_game("rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1")
        assert ctrl.state.side_to_move == Alliance.BLACK

    def test_settings_start_fen(self) -> None:
        ctrl = GameController(GameSettings(start_fen="4k3/8/8/8/8/8/8/4K2R b K - 0 1"))
        assert ctrl.phase == GamePhase.BLACK_TO_MOVE
        ctrl.submit_squares("e8", "d8")
        ctrl.new_game()
        assert ctrl.state.ply_count == 0
        assert ctrl.phase == GamePhase.BLACK_TO_MOVE

    def test_new_game_emits_phase(self) -> None:
        ctrl = GameController()
        phases: list[GamePhase] = []
        ctrl.events.on_phase_changed.append(phases.append)
        ctrl.new_game()
        assert phases == [GamePhase.WHITE_TO_MOVE]


class TestSubmitMove:
    def test_legal_squares_accepted(self) -> None:
        ctrl = GameController()
        assert ctrl.submit_squares("e2", "e4")
        assert ctrl.state.side_to_move == Alliance.BLACK

    def test_move_event_fires(self) -> None:
        ctrl = GameController()
        events: list[str] = []
        ctrl.events.on_move.append(lambda m, notation, st: events.append(notation))
        ctrl.submit_squares(E2, E4)
        assert events == ["e2e4"]

    def test_unknown_squares_rejected(self) -> None:
        ctrl = GameController()
        rejected: list[tuple[Move | None, MoveStatus]] = []
        ctrl.events.on_rejected.append(lambda m, s: rejected.append((m, s)))
        assert not ctrl.submit_squares("e2", "e5")
        assert rejected == [(None, MoveStatus.ILLEGAL_MOVE)]
        assert ctrl.state.side_to_move == Alliance.WHITE

    def test_malformed_squares_rejected(self) -> None:
        ctrl = GameController()
        rejected: list[tuple[Move | None, MoveStatus]] = []
        ctrl.events.on_rejected.append(lambda m, s: rejected.append((m, s)))
        assert not ctrl.submit_squares("z9", "e4")
        assert not ctrl.submit_squares(E2, 99)
        assert rejected == [(None, MoveStatus.ILLEGAL_MOVE)] * 2
        assert ctrl.state.ply_count == 0

    def test_self_check_rejected(self) -> None:
        ctrl = GameController()
        ctrl.new_game("4r1k1/8/8/8/8/8/4B3/4K3 w - - 0 1")
        statuses: list[MoveStatus] = []
        ctrl.events.on_rejected.append(lambda m, s: statuses.append(s))
        assert not ctrl.submit_squares("e2", "d3")
        assert statuses == [MoveStatus.LEAVES_PLAYER_IN_CHECK]
        assert ctrl.state.ply_count == 0

    def test_submit_move_object(self) -> None:
        ctrl = GameController()
        move = MoveFactory.create_move(ctrl.state.board, "g1", "f3")
        assert ctrl.submit_move(move)
        assert not ctrl.submit_move(move)

    def test_game_over_event_on_checkmate(self) -> None:
        ctrl = GameController()
        results: list[GamePhase] = []
        phases: list[GamePhase] = []
        ctrl.events.on_game_over.append(results.append)
        ctrl.events.on_phase_changed.append(phases.append)
        for source, destination in FOOLS_MATE:
            assert ctrl.submit_squares(source, destination)
        assert results == [GamePhase.WHITE_CHECKMATED]
        assert phases[-1] == GamePhase.WHITE_CHECKMATED
        assert len(phases) == 4

    def test_no_moves_after_game_over(self) -> None:
        ctrl = GameController()
        for source, destination in FOOLS_MATE:
            ctrl.submit_squares(source, destination)
        assert not ctrl.submit_squares("a2", "a3")
        move = ctrl.state.board.current_player.pseudo_legal_moves[0]
        assert not ctrl.submit_move(move)

    def test_explicit_promotion(self) -> None:
        ctrl = GameController()
        ctrl.new_game("4k3/P7/8/8/8/8/8/4K3 w - - 0 1")
        assert ctrl.submit_squares("a7", "a8", PieceType.ROOK)
        promoted = ctrl.state.board.piece_at(A8)
        assert promoted is not None and promoted.piece_type == PieceType.ROOK

    def test_default_promotion_setting(self) -> None:
        ctrl = GameController(GameSettings(default_promotion=PieceType.KNIGHT))
        ctrl.new_game("4k3/P7/8/8/8/8/8/4K3 w - - 0 1")
        assert ctrl.submit_squares("a7", "a8")
        promoted = ctrl.state.board.piece_at(A8)
        assert promoted is not None and promoted.piece_type == PieceType.KNIGHT


class TestLegalDestinations:
    def test_pawn(self) -> None:
        assert set(GameController().legal_destinations(E2)) == {E3, E4}

    def test_knight(self) -> None:
        assert set(GameController().legal_destinations(G1)) == {F3, H3}

    def test_pinned_piece_has_none(self) -> None:
        ctrl = GameController()
        ctrl.new_game("4r1k1/8/8/8/8/8/4B3/4K3 w - - 0 1")
        assert ctrl.legal_destinations(E2) == []


class TestUndo:
    def test_undo(self) -> None:
        ctrl = GameController()
        ctrl.submit_squares("e2", "e4")
        assert ctrl.undo_move()
        assert ctrl.state.ply_count == 0
        assert ctrl.phase == GamePhase.WHITE_TO_MOVE

    def test_undo_empty(self) -> None:
        assert not GameController().undo_move()

    def test_undo_disabled(self) -> None:
        ctrl = GameController(GameSettings(allow_undo=False))
        ctrl.submit_squares("e2", "e4")
        assert not ctrl.undo_move()
        assert ctrl.state.ply_count == 1
