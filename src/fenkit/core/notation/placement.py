"""Piece-placement field: the rank/file state machine and its inverse.

The field is scanned once, left to right, with two cursors. ``file`` counts
how many squares of the current rank are already described (0..8) and
``rank`` is the 0-based rank being filled, starting at the top (rank 8).
Digits advance ``file`` over empty squares, piece letters fill one square,
and ``/`` moves down one rank. Any cursor overflow fails immediately, so no
rank can describe more or fewer than eight files.
"""

from __future__ import annotations

from fenkit.core.board import Board
from fenkit.core.errors import FenErrorKind, FenParsingError
from fenkit.core.piece import Piece, piece_from_char
from fenkit.core.types import FILE_COUNT, RANK_COUNT

RANK_SEPARATOR = "/"
PIECE_CHARS = frozenset("PNBRQKpnbrqk")
EMPTY_RUN_CHARS = frozenset("123456789")


def parse_placement(field: str) -> Board:
    """Decode the placement field into a :class:`Board`.

    Raises:
        FenParsingError: ``ROW_OVERFLOW`` when a rank runs past the h-file,
            ``INVALID_TOKEN`` for any character that is not a piece, digit
            1-9 or ``/``, and ``INVALID_POSITION`` for a separator that does
            not close a full rank or for the wrong number of ranks.
    """
    board = Board()
    rank = RANK_COUNT - 1
    file = 0

    for ch in field:
        if ch in EMPTY_RUN_CHARS:
            file += int(ch)
            if file > FILE_COUNT:
                raise FenParsingError(FenErrorKind.ROW_OVERFLOW, field)
        elif ch in PIECE_CHARS:
            if file >= FILE_COUNT:
                raise FenParsingError(FenErrorKind.ROW_OVERFLOW, field)
            board.put(rank, file, piece_from_char(ch))
            file += 1
        elif ch == RANK_SEPARATOR:
            if file != FILE_COUNT or rank == 0:
                raise FenParsingError(FenErrorKind.INVALID_POSITION, field)
            rank -= 1
            file = 0
        else:
            raise FenParsingError(FenErrorKind.INVALID_TOKEN, field)

    if file != FILE_COUNT or rank != 0:
        raise FenParsingError(FenErrorKind.INVALID_POSITION, field)
    return board


def _rank_to_string(squares: list[Piece | None]) -> str:
    out: list[str] = []
    empty = 0
    for piece in squares:
        if piece is None:
            empty += 1
            continue
        if empty:
            out.append(str(empty))
            empty = 0
        out.append(str(piece))
    if empty:
        out.append(str(empty))
    return "".join(out)


def placement_to_string(board: Board) -> str:
    """Encode *board* as a placement field, rank 8 first."""
    return RANK_SEPARATOR.join(_rank_to_string(r) for r in board.ranks_top_down())
