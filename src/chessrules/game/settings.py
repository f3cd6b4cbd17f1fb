"""Game configuration."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import PieceType


@dataclass
class GameSettings:
    """All caller-configurable game settings."""

    # Position to start from; None means the standard opening position
    start_fen: str | None = None

    # Piece chosen when a square pair reaches the last rank without a choice
    default_promotion: PieceType = PieceType.QUEEN

    allow_undo: bool = True
