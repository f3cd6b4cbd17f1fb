"""Chess rules engine: immutable boards, legal moves and turn state."""

__version__ = "0.1.0"
