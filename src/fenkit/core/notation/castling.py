"""Castling-rights field codec."""

from __future__ import annotations

from fenkit.core.enums import CastlingRights, Color, PieceType
from fenkit.core.errors import FenErrorKind, FenParsingError
from fenkit.core.piece import piece_from_char

NO_CASTLING = "-"

_RIGHTS: dict[tuple[Color, PieceType], CastlingRights] = {
    (Color.WHITE, PieceType.KING): CastlingRights.WHITE_KINGSIDE,
    (Color.WHITE, PieceType.QUEEN): CastlingRights.WHITE_QUEENSIDE,
    (Color.BLACK, PieceType.KING): CastlingRights.BLACK_KINGSIDE,
    (Color.BLACK, PieceType.QUEEN): CastlingRights.BLACK_QUEENSIDE,
}

# Serialization order: K, Q, k, q.
_ORDER: tuple[tuple[CastlingRights, str], ...] = (
    (CastlingRights.WHITE_KINGSIDE, "K"),
    (CastlingRights.WHITE_QUEENSIDE, "Q"),
    (CastlingRights.BLACK_KINGSIDE, "k"),
    (CastlingRights.BLACK_QUEENSIDE, "q"),
)


def parse_castling(field: str) -> CastlingRights:
    """Decode the castling field.

    ``"-"`` means no rights. Otherwise each character is read as a piece
    letter and must name a king (kingside) or a queen (queenside); its case
    picks the side. Repeated characters are ignored.
    """
    if field == NO_CASTLING:
        return CastlingRights.NONE
    # FEN writes "-" for no rights; an empty field only comes from a doubled space.
    if not field:
        raise FenParsingError(FenErrorKind.INVALID_CASTLING_STATUS, field)

    rights = CastlingRights.NONE
    for ch in set(field):
        piece = piece_from_char(ch)
        right = _RIGHTS.get((piece.color, piece.piece_type)) if piece else None
        if right is None:
            raise FenParsingError(FenErrorKind.INVALID_CASTLING_STATUS, field)
        rights |= right
    return rights


def castling_to_string(rights: CastlingRights) -> str:
    """Encode *rights* as ``KQkq`` letters; no rights gives ``""``."""
    return "".join(letter for flag, letter in _ORDER if rights & flag)
