"""Notation package: FEN field codecs and the top-level record codec."""

from fenkit.core.notation.castling import castling_to_string, parse_castling
from fenkit.core.notation.en_passant import en_passant_to_string, parse_en_passant
from fenkit.core.notation.fen import (
    EMPTY_FEN,
    STARTING_FEN,
    fen_to_string,
    parse_counter,
    parse_fen,
    parse_side,
)
from fenkit.core.notation.models import EnPassantTarget, Fen
from fenkit.core.notation.placement import parse_placement, placement_to_string

__all__ = [
    "EMPTY_FEN",
    "STARTING_FEN",
    "EnPassantTarget",
    "Fen",
    "parse_fen",
    "fen_to_string",
    "parse_placement",
    "placement_to_string",
    "parse_side",
    "parse_castling",
    "castling_to_string",
    "parse_en_passant",
    "en_passant_to_string",
    "parse_counter",
]
