"""Square type alias, coordinate helpers and edge lookup tables.

Board layout (rank 8 first, as the board is drawn top to bottom):
    a8=0,  b8=1,  ..., h8=7
    a7=8,  b7=9,  ..., h7=15
    ...
    a1=56, b1=57, ..., h1=63
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TypeAlias

from chessrules.core.errors import InvalidPosition

Square: TypeAlias = int  # 0–63

NUM_TILES = 64
NUM_TILES_PER_ROW = 8


# -- Edge tables ------------------------------------------------------------


def _in_column(column: int) -> tuple[bool, ...]:
    table = [False] * NUM_TILES
    sq = column
    while sq < NUM_TILES:
        table[sq] = True
        sq += NUM_TILES_PER_ROW
    return tuple(table)


def _in_row(row_start: int) -> tuple[bool, ...]:
    table = [False] * NUM_TILES
    sq = row_start
    while True:
        table[sq] = True
        sq += 1
        if sq % NUM_TILES_PER_ROW == 0:
            break
    return tuple(table)


# Column membership guards against wraparound (a-file, b-file, g-file, h-file).
FIRST_COLUMN = _in_column(0)
SECOND_COLUMN = _in_column(1)
SEVENTH_COLUMN = _in_column(6)
EIGHTH_COLUMN = _in_column(7)

EIGHTH_RANK = _in_row(0)
SEVENTH_RANK = _in_row(8)
SIXTH_RANK = _in_row(16)
FIFTH_RANK = _in_row(24)
FOURTH_RANK = _in_row(32)
THIRD_RANK = _in_row(40)
SECOND_RANK = _in_row(48)
FIRST_RANK = _in_row(56)


# -- Algebraic notation -----------------------------------------------------

ALGEBRAIC_NOTATION: tuple[str, ...] = tuple(
    f"{file_char}{rank}" for rank in range(8, 0, -1) for file_char in "abcdefgh"
)
POSITION_TO_COORDINATE = MappingProxyType(
    {name: sq for sq, name in enumerate(ALGEBRAIC_NOTATION)}
)


def is_valid_square(sq: int) -> bool:
    """Check whether integer is a valid square index."""
    return 0 <= sq < NUM_TILES


def square_index_for(name: str) -> Square:
    """Parse square name, e.g. 'e4' → 36."""
    try:
        return POSITION_TO_COORDINATE[name]
    except (KeyError, TypeError):
        raise InvalidPosition(f"Invalid square name: {name!r}") from None


def algebraic_for(sq: Square) -> str:
    """Human-readable name, e.g. 0 → 'a8', 63 → 'h1'."""
    if not isinstance(sq, int) or not is_valid_square(sq):
        raise InvalidPosition(f"Square index out of range: {sq!r}")
    return ALGEBRAIC_NOTATION[sq]


def to_square(value: Square | str) -> Square:
    """Accept either an index or an algebraic label."""
    if isinstance(value, str):
        return square_index_for(value)
    if not is_valid_square(value):
        raise InvalidPosition(f"Square index out of range: {value!r}")
    return value


def file_of(sq: Square) -> int:
    """File index 0–7 (a–h)."""
    return sq & 7


def rank_of(sq: Square) -> int:
    """Rank index 0–7 (1–8)."""
    return 7 - (sq >> 3)


def make_square(file: int, rank: int) -> Square:
    """Create square from file (0–7) and rank (0–7)."""
    return (7 - rank) * NUM_TILES_PER_ROW + file


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = range(0, 8)
A7, B7, C7, D7, E7, F7, G7, H7 = range(8, 16)
A6, B6, C6, D6, E6, F6, G6, H6 = range(16, 24)
A5, B5, C5, D5, E5, F5, G5, H5 = range(24, 32)
A4, B4, C4, D4, E4, F4, G4, H4 = range(32, 40)
A3, B3, C3, D3, E3, F3, G3, H3 = range(40, 48)
A2, B2, C2, D2, E2, F2, G2, H2 = range(48, 56)
A1, B1, C1, D1, E1, F1, G1, H1 = range(56, 64)
