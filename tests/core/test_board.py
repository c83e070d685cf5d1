"""Tests for Board."""

import pytest

from fenkit.core.board import Board
from fenkit.core.enums import Color, PieceType
from fenkit.core.piece import Piece
from fenkit.core.types import make_square, parse_square, square_name


class TestBoardInitial:
    def test_kings(self) -> None:
        board = Board.initial()
        assert board[parse_square("e1")] == Piece(Color.WHITE, PieceType.KING)
        assert board[parse_square("e8")] == Piece(Color.BLACK, PieceType.KING)

    def test_pawns(self) -> None:
        board = Board.initial()
        assert len(board.pieces(Color.WHITE, PieceType.PAWN)) == 8
        assert all(8 <= sq < 16 for sq in board.pieces(Color.WHITE, PieceType.PAWN))
        assert all(48 <= sq < 56 for sq in board.pieces(Color.BLACK, PieceType.PAWN))

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for sq in range(16, 48):
            assert board.is_empty(sq)

    def test_occupied_count(self) -> None:
        assert len(Board.initial().occupied()) == 32


class TestBoardOperations:
    def test_always_64_squares(self) -> None:
        board = Board()
        assert all(board[sq] is None for sq in range(64))
        assert sum(len(r) for r in board.ranks_top_down()) == 64

    def test_at_and_put(self) -> None:
        board = Board()
        piece = Piece(Color.BLACK, PieceType.ROOK)
        board.put(7, 0, piece)
        assert board.at(7, 0) == piece
        assert board[parse_square("a8")] == piece

    def test_put_out_of_range_raises(self) -> None:
        with pytest.raises(ValueError, match="out of range"):
            Board().put(8, 0, None)

    def test_ranks_top_down_starts_at_rank_8(self) -> None:
        board = Board.initial()
        first = next(board.ranks_top_down())
        assert str(first[0]) == "r"

    def test_copy_independence(self) -> None:
        board = Board.initial()
        copy = board.copy()
        assert board == copy
        copy[parse_square("e1")] = None
        assert board != copy

    def test_clear(self) -> None:
        board = Board.initial()
        board.clear()
        assert board == Board()

    def test_repr(self) -> None:
        text = repr(Board.initial())
        assert text.splitlines()[0] == "8 r n b q k b n r"
        assert "a b c d e f g h" in text


class TestSquareHelpers:
    def test_square_name_roundtrip(self) -> None:
        for sq in range(64):
            assert parse_square(square_name(sq)) == sq

    def test_make_square(self) -> None:
        assert make_square(4, 3) == parse_square("e4")

    @pytest.mark.parametrize("name", ["i1", "a9", "a", "e44"])
    def test_parse_square_rejects(self, name: str) -> None:
        with pytest.raises(ValueError):
            parse_square(name)
