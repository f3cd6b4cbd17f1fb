"""Exception taxonomy for the rules engine.

Every error here is recoverable by the caller; none of them leaves a
partially built board behind.
"""

from __future__ import annotations


class ChessError(Exception):
    """Base class for all rules-engine errors."""


class InvalidPosition(ChessError, ValueError):
    """A square label, index or board description is malformed."""


class NoSuchMove(ChessError, LookupError):
    """No candidate move joins the requested source and destination."""


class IllegalMove(ChessError):
    """The move is not a member of the mover's move set."""


class LeavesPlayerInCheck(ChessError):
    """The move would leave the mover's own king attacked."""


class GameOverError(ChessError):
    """A move was submitted after checkmate or stalemate."""
