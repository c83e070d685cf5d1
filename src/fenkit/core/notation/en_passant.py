"""En-passant-target field codec."""

from __future__ import annotations

from fenkit.core.errors import FenErrorKind, FenParsingError
from fenkit.core.notation.models import EN_PASSANT_RANKS, EnPassantTarget
from fenkit.core.types import FILE_NAMES

NO_TARGET = "-"

_RANK_DIGITS = {str(rank): rank for rank in EN_PASSANT_RANKS}


def parse_en_passant(field: str) -> EnPassantTarget | None:
    """Decode ``"-"`` or a square on rank 3 or 6, e.g. ``"e3"``."""
    if field == NO_TARGET:
        return None
    if len(field) != 2:
        raise FenParsingError(FenErrorKind.INVALID_EN_PASSANT_TARGET, field)
    file, rank = field[0], _RANK_DIGITS.get(field[1])
    if file not in FILE_NAMES or rank is None:
        raise FenParsingError(FenErrorKind.INVALID_EN_PASSANT_TARGET, field)
    return EnPassantTarget(file, rank)


def en_passant_to_string(target: EnPassantTarget | None) -> str:
    return NO_TARGET if target is None else str(target)
