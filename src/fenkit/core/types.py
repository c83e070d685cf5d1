"""Square type alias and coordinate helpers.

Squares are numbered a1=0, b1=1, ..., h1=7, a2=8, ..., h8=63. Ranks and
files are 0-based in code; FEN text uses the rank digits 1-8 and the file
letters a-h.
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = int  # 0–63

RANK_COUNT = 8
FILE_COUNT = 8
FILE_NAMES = "abcdefgh"


def file_of(sq: Square) -> int:
    """File index 0–7 (a–h)."""
    return sq & 7


def rank_of(sq: Square) -> int:
    """Rank index 0–7 (1–8)."""
    return sq >> 3


def make_square(file: int, rank: int) -> Square:
    if not (0 <= file < FILE_COUNT and 0 <= rank < RANK_COUNT):
        raise ValueError(f"Square out of range: file={file}, rank={rank}")
    return rank * FILE_COUNT + file


def square_name(sq: Square) -> str:
    """Algebraic name, e.g. 0 → 'a1', 63 → 'h8'."""
    return FILE_NAMES[file_of(sq)] + str(rank_of(sq) + 1)


def parse_square(name: str) -> Square:
    """Parse an algebraic name, e.g. 'e4' → 28."""
    if len(name) != 2 or name[0] not in FILE_NAMES or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return make_square(FILE_NAMES.index(name[0]), int(name[1]) - 1)
