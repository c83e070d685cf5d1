"""Core enumerations and flags for the position record."""

from __future__ import annotations

from enum import IntEnum, IntFlag, auto


class Color(IntEnum):
    """Side color. Only the two real sides; an unset side is ``None``."""

    WHITE = 0
    BLACK = 1

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece kinds."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @classmethod
    def from_char(cls, char: str) -> PieceType | None:
        """Kind named by *char* in either case, or ``None`` if unknown."""
        return _KIND_BY_LETTER.get(char.lower())

    @property
    def letter(self) -> str:
        """Lowercase FEN letter for this kind."""
        return _LETTER_BY_KIND[self]


_LETTER_BY_KIND: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}

_KIND_BY_LETTER: dict[str, PieceType] = {v: k for k, v in _LETTER_BY_KIND.items()}


class CastlingRights(IntFlag):
    """Bitmask for castling availability; every bit is independent."""

    NONE = 0
    WHITE_KINGSIDE = auto()
    WHITE_QUEENSIDE = auto()
    BLACK_KINGSIDE = auto()
    BLACK_QUEENSIDE = auto()

    WHITE_BOTH = WHITE_KINGSIDE | WHITE_QUEENSIDE
    BLACK_BOTH = BLACK_KINGSIDE | BLACK_QUEENSIDE
    ALL = WHITE_BOTH | BLACK_BOTH
