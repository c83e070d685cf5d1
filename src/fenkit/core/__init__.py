"""Core domain layer: FEN records and codecs with zero external dependencies.

Quick start::

    from fenkit.core import parse_fen, fen_to_string, STARTING_FEN

    fen = parse_fen(STARTING_FEN)
    assert fen_to_string(fen) == STARTING_FEN
"""

from fenkit.core.board import Board
from fenkit.core.config import DEFAULT_CONFIG, FenConfig
from fenkit.core.enums import CastlingRights, Color, PieceType
from fenkit.core.errors import FenErrorKind, FenParsingError
from fenkit.core.notation import (
    EMPTY_FEN,
    STARTING_FEN,
    EnPassantTarget,
    Fen,
    castling_to_string,
    en_passant_to_string,
    fen_to_string,
    parse_castling,
    parse_en_passant,
    parse_fen,
    parse_placement,
    placement_to_string,
)
from fenkit.core.piece import Piece, piece_from_char, piece_to_char
from fenkit.core.types import (
    Square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "PieceType",
    # Types / helpers
    "Square",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "Board",
    "EnPassantTarget",
    "Fen",
    "Piece",
    "piece_from_char",
    "piece_to_char",
    # Configuration / errors
    "DEFAULT_CONFIG",
    "FenConfig",
    "FenErrorKind",
    "FenParsingError",
    # Notation
    "EMPTY_FEN",
    "STARTING_FEN",
    "parse_fen",
    "fen_to_string",
    "parse_placement",
    "placement_to_string",
    "parse_castling",
    "castling_to_string",
    "parse_en_passant",
    "en_passant_to_string",
]
