"""Game state machine: tracks turn/terminal phases and move history."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from chessrules.core.board import Board
from chessrules.core.enums import Alliance
from chessrules.core.errors import GameOverError
from chessrules.core.fen import board_from_fen
from chessrules.core.move import Move, MoveTransition
from chessrules.core.player import Player
from chessrules.game.interfaces import GamePhase

_LOGGER = logging.getLogger(__name__)


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    notation: str
    board_before: Board
    board_after: Board
    was_check: bool = False
    was_capture: bool = False


@dataclass
class GameState:
    """Manages the game lifecycle: current board, phase and move history.

    Boards are immutable, so the history simply keeps every board that was
    reached and undo restores the previous one.
    """

    board: Board = field(default_factory=Board.create_standard_board, init=False)
    phase: GamePhase = field(default=GamePhase.WHITE_TO_MOVE, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)
    start_fen: str | None = field(default=None, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, fen: str | None = None) -> None:
        """Initialise (or reset) the game."""
        self.start_fen = fen
        self.board = board_from_fen(fen) if fen else Board.create_standard_board()
        self.move_history.clear()
        self._update_phase()

    # ── Move application ─────────────────────────────────────────────────

    def submit(self, move: Move) -> MoveTransition:
        """Hand *move* to the side to move and advance on success.

        Raises:
            GameOverError: the game already ended in checkmate or stalemate.
        """
        if self.is_game_over:
            raise GameOverError(f"Game is over ({self.phase.name})")

        before = self.board
        transition = before.current_player.make_move(move)
        if not transition.is_done:
            _LOGGER.info("Rejected %s: %s", move, transition.status.name)
            return transition

        after = transition.to_board
        opponent = after.current_player
        record = MoveRecord(
            move=move,
            notation=_notation(move, opponent),
            board_before=before,
            board_after=after,
            was_check=opponent.is_in_check,
            was_capture=move.is_attack,
        )
        self.move_history.append(record)
        self.board = after
        self._update_phase()
        return transition

    def undo_last_move(self) -> Move | None:
        """Undo the last move. Returns the undone Move, or None if empty."""
        if not self.move_history:
            return None

        record = self.move_history.pop()
        self.board = record.board_before
        self._update_phase()
        _LOGGER.debug("Undid %s", record.notation)
        return record.move

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def current_player(self) -> Player:
        return self.board.current_player

    @property
    def side_to_move(self) -> Alliance:
        return self.board.move_maker

    @property
    def is_game_over(self) -> bool:
        return self.phase.is_terminal

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    @property
    def last_move(self) -> Move | None:
        return self.move_history[-1].move if self.move_history else None

    def legal_moves(self) -> tuple[Move, ...]:
        """Legal moves in the current position."""
        if self.is_game_over:
            return ()
        return self.board.current_player.legal_moves

    # ── Internal ─────────────────────────────────────────────────────────

    def _update_phase(self) -> None:
        self.phase = GamePhase.for_board(self.board)
        if self.phase.is_terminal:
            _LOGGER.info("Game over: %s", self.phase.name)


def _notation(move: Move, opponent: Player) -> str:
    if opponent.is_in_check_mate:
        return f"{move}#"
    if opponent.is_in_check:
        return f"{move}+"
    return str(move)
