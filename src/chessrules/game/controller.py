"""GameController: the central orchestrator of a chess game.

Coordinates: GameState, GameSettings, MoveFactory.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessrules.core.enums import MoveStatus, PieceType
from chessrules.core.errors import InvalidPosition, NoSuchMove
from chessrules.core.move import Move, MoveFactory
from chessrules.core.types import Square
from chessrules.game.interfaces import GamePhase, IGameController
from chessrules.game.settings import GameSettings
from chessrules.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, str, "GameState"], None]  # move, notation, state
RejectedCallback = Callable[["Move | None", MoveStatus], None]
GameOverCallback = Callable[[GamePhase], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_rejected: list[RejectedCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Orchestrates a full chess game: validates moves, switches turns,
    notifies listeners.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread).
    """

    __slots__ = ("_state", "_settings", "events")

    def __init__(self, settings: GameSettings | None = None) -> None:
        self._settings = settings if settings is not None else GameSettings()
        self._state = GameState()
        self._state.setup(self._settings.start_fen)
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def settings(self) -> GameSettings:
        return self._settings

    @property
    def phase(self) -> GamePhase:
        return self._state.phase

    def legal_destinations(self, source: Square) -> list[Square]:
        """Destinations of the legal moves starting on *source*."""
        return sorted(
            {m.destination for m in self._state.legal_moves() if m.source == source}
        )

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(self, fen: str | None = None) -> None:
        self._state = GameState()
        self._state.setup(fen if fen is not None else self._settings.start_fen)
        self._emit_phase(self._state.phase)

    def submit_move(self, move: Move) -> bool:
        if self._state.is_game_over:
            _LOGGER.info("Ignoring %s: game is over", move)
            return False

        transition = self._state.submit(move)
        if not transition.is_done:
            self._emit_rejected(move, transition.status)
            return False

        record = self._state.move_history[-1]
        self._emit_move(move, record.notation)
        self._emit_phase(self._state.phase)
        if self._state.is_game_over:
            self._emit_game_over(self._state.phase)
        return True

    def submit_squares(
        self,
        source: Square | str,
        destination: Square | str,
        promotion: PieceType | None = None,
    ) -> bool:
        if self._state.is_game_over:
            return False
        try:
            move = MoveFactory.create_move(
                self._state.board,
                source,
                destination,
                promotion or self._settings.default_promotion,
            )
        except (NoSuchMove, InvalidPosition) as exc:
            _LOGGER.info("%s", exc)
            self._emit_rejected(None, MoveStatus.ILLEGAL_MOVE)
            return False
        return self.submit_move(move)

    def undo_move(self) -> bool:
        if not self._settings.allow_undo or not self._state.move_history:
            return False
        self._state.undo_last_move()
        self._emit_phase(self._state.phase)
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_move(self, move: Move, notation: str) -> None:
        for cb in self.events.on_move:
            cb(move, notation, self._state)

    def _emit_rejected(self, move: Move | None, status: MoveStatus) -> None:
        for cb in self.events.on_rejected:
            cb(move, status)

    def _emit_game_over(self, phase: GamePhase) -> None:
        for cb in self.events.on_game_over:
            cb(phase)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
