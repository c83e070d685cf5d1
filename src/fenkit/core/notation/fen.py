"""FEN parsing and serialization."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from fenkit.core.config import DEFAULT_CONFIG, FenConfig
from fenkit.core.enums import Color
from fenkit.core.errors import FenErrorKind, FenParsingError
from fenkit.core.notation.castling import NO_CASTLING, castling_to_string, parse_castling
from fenkit.core.notation.en_passant import en_passant_to_string, parse_en_passant
from fenkit.core.notation.models import Fen
from fenkit.core.notation.placement import parse_placement, placement_to_string

_LOGGER = logging.getLogger(__name__)

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
EMPTY_FEN = "8/8/8/8/8/8/8/8 b - - 0 0"

FIELD_SEPARATOR = " "

_SIDES: dict[str, Color] = {"w": Color.WHITE, "b": Color.BLACK}


def parse_side(field: str) -> Color:
    try:
        return _SIDES[field]
    except KeyError:
        raise FenParsingError(FenErrorKind.INVALID_PLAYER, field) from None


def parse_counter(field: str, config: FenConfig = DEFAULT_CONFIG) -> int:
    """Decode a halfmove/fullmove field as an unsigned decimal integer."""
    if not (field.isascii() and field.isdigit()):
        raise FenParsingError(FenErrorKind.INVALID_NUMERIC_VALUE, field)
    digits = field.lstrip("0") or "0"
    if config.max_counter is not None and len(digits) > len(str(config.max_counter)):
        raise FenParsingError(FenErrorKind.INVALID_NUMERIC_VALUE, field)
    try:
        value = int(digits)
    except ValueError:
        # int() refuses strings past sys.get_int_max_str_digits().
        raise FenParsingError(FenErrorKind.INVALID_NUMERIC_VALUE, field) from None
    if not config.counter_in_range(value):
        raise FenParsingError(FenErrorKind.INVALID_NUMERIC_VALUE, field)
    return value


# Fields in FEN order: (Fen attribute, decoder). Decoders take the raw field
# and the active config.
_FIELD_SLOTS: tuple[tuple[str, Callable[[str, FenConfig], Any]], ...] = (
    ("board", lambda text, _: parse_placement(text)),
    ("side_to_move", lambda text, _: parse_side(text)),
    ("castling", lambda text, _: parse_castling(text)),
    ("en_passant", lambda text, _: parse_en_passant(text)),
    ("halfmove_clock", parse_counter),
    ("fullmove_number", parse_counter),
)


def parse_fen(text: str, config: FenConfig = DEFAULT_CONFIG) -> Fen:
    """Parse FEN *text* into a :class:`Fen` record.

    Surrounding whitespace is ignored and blank input gives the empty record
    ``Fen()``. Otherwise the text must hold exactly six fields separated by
    single spaces. Fields are decoded in order and the first bad one raises
    :class:`FenParsingError`.
    """
    notation = text.strip()
    if not notation:
        return Fen()

    if notation.count(FIELD_SEPARATOR) + 1 != len(_FIELD_SLOTS):
        _LOGGER.debug("Rejected FEN with wrong field count: %r", notation)
        raise FenParsingError(FenErrorKind.INSUFFICIENT_FIELDS, notation)

    values: dict[str, Any] = {}
    for (name, decode), field in zip(
        _FIELD_SLOTS, notation.split(FIELD_SEPARATOR), strict=True
    ):
        try:
            values[name] = decode(field, config)
        except FenParsingError as exc:
            _LOGGER.debug("Rejected FEN %r: %s in %s", notation, exc.kind.name, name)
            exc.with_field(name)
            raise
    return Fen(**values)


def fen_to_string(fen: Fen) -> str:
    """Serialise a :class:`Fen` record.

    Anything other than White to move is written as ``b``, which is how the
    empty record serialises.
    """
    return FIELD_SEPARATOR.join(
        (
            placement_to_string(fen.board),
            "w" if fen.side_to_move == Color.WHITE else "b",
            castling_to_string(fen.castling) or NO_CASTLING,
            en_passant_to_string(fen.en_passant),
            str(fen.halfmove_clock),
            str(fen.fullmove_number),
        )
    )
