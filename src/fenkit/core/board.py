"""Board - the 8x8 placement grid."""

from __future__ import annotations

from collections.abc import Iterator

from fenkit.core.enums import Color, PieceType
from fenkit.core.piece import Piece
from fenkit.core.types import FILE_COUNT, FILE_NAMES, RANK_COUNT, Square, make_square

_SQUARE_COUNT = RANK_COUNT * FILE_COUNT

_BACK_RANK = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable grid of exactly 64 squares, each a :class:`Piece` or ``None``."""

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * _SQUARE_COUNT

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._squares[sq] = piece

    def at(self, rank: int, file: int) -> Piece | None:
        """Piece on (*rank*, *file*), both 0-based from White's a1 corner."""
        return self._squares[make_square(file, rank)]

    def put(self, rank: int, file: int, piece: Piece | None) -> None:
        self._squares[make_square(file, rank)] = piece

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq] is None

    def rank(self, rank: int) -> list[Piece | None]:
        """The eight squares of *rank*, files a to h."""
        start = make_square(0, rank)
        return self._squares[start : start + FILE_COUNT]

    def ranks_top_down(self) -> Iterator[list[Piece | None]]:
        """Ranks in FEN order: rank 8 first, rank 1 last."""
        for rank in range(RANK_COUNT - 1, -1, -1):
            yield self.rank(rank)

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        wanted = Piece(color, piece_type)
        return [sq for sq, piece in enumerate(self._squares) if piece == wanted]

    def occupied(self) -> list[Square]:
        return [sq for sq, piece in enumerate(self._squares) if piece is not None]

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    def clear(self) -> None:
        self._squares = [None] * _SQUARE_COUNT

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting placement."""
        b = cls()
        for file, piece_type in enumerate(_BACK_RANK):
            b.put(0, file, Piece(Color.WHITE, piece_type))
            b.put(1, file, Piece(Color.WHITE, PieceType.PAWN))
            b.put(6, file, Piece(Color.BLACK, PieceType.PAWN))
            b.put(7, file, Piece(Color.BLACK, piece_type))
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(RANK_COUNT - 1, -1, -1):
            row = [str(p) if p else "." for p in self.rank(rank)]
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  " + " ".join(FILE_NAMES))
        return "\n".join(rows)
