"""Piece value object and the single-character piece codec."""

from __future__ import annotations

from dataclasses import dataclass

from fenkit.core.enums import Color, PieceType

EMPTY_CHAR = " "


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        letter = self.piece_type.letter
        return letter.upper() if self.color == Color.WHITE else letter

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        piece = piece_from_char(char)
        if piece is None:
            raise ValueError(f"Invalid piece character: {char!r}")
        return piece


def piece_from_char(char: str) -> Piece | None:
    """Decode one FEN letter; anything unrecognized decodes to ``None``.

    The caller decides whether an empty result is an error.
    """
    if len(char) != 1:
        return None
    piece_type = PieceType.from_char(char)
    if piece_type is None:
        return None
    color = Color.BLACK if char.islower() else Color.WHITE
    return Piece(color, piece_type)


def piece_to_char(piece: Piece | None) -> str:
    """Inverse of :func:`piece_from_char`; empty squares become a space."""
    return EMPTY_CHAR if piece is None else str(piece)
