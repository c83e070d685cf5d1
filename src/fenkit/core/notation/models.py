"""Notation-layer data models: the FEN record and its en passant target."""

from __future__ import annotations

from dataclasses import dataclass, field, fields

from fenkit.core.board import Board
from fenkit.core.config import DEFAULT_CONFIG, FenConfig
from fenkit.core.enums import CastlingRights, Color
from fenkit.core.types import FILE_NAMES, Square, make_square

EN_PASSANT_RANKS = (3, 6)


@dataclass(frozen=True, slots=True)
class EnPassantTarget:
    """Square a pawn would land on when capturing en passant.

    ``rank`` uses FEN numbering (1-8), so it is always 3 or 6.
    """

    file: str
    rank: int

    def __str__(self) -> str:
        return f"{self.file}{self.rank}"

    @property
    def square(self) -> Square:
        return make_square(FILE_NAMES.index(self.file), self.rank - 1)


@dataclass(slots=True)
class Fen:
    """Decoded FEN record.

    ``Fen()`` is the empty record: an empty board with no side to move.
    Every record returned by a successful non-empty parse has
    ``side_to_move`` set.
    """

    board: Board = field(default_factory=Board)
    side_to_move: Color | None = None
    castling: CastlingRights = CastlingRights.NONE
    en_passant: EnPassantTarget | None = None
    halfmove_clock: int = 0
    fullmove_number: int = 0

    @property
    def is_empty(self) -> bool:
        """Whether this is the unpopulated placeholder record."""
        return self.side_to_move is None

    @classmethod
    def parse(cls, text: str, config: FenConfig = DEFAULT_CONFIG) -> Fen:
        from fenkit.core.notation.fen import parse_fen

        fen = parse_fen(text, config)
        if cls is Fen:
            return fen
        return cls(**{f.name: getattr(fen, f.name) for f in fields(fen)})

    def __str__(self) -> str:
        from fenkit.core.notation.fen import fen_to_string

        return fen_to_string(self)
