"""Tests for the board model."""

from __future__ import annotations

import pytest

from archer_shogi.game.board import EMPTY, Board, Piece, Square
from archer_shogi.game.types import NUM_SQUARES, PieceKind, Side


class TestSquare:
    def test_index(self) -> None:
        assert Square(0, 0).index == 0
        assert Square(7, 0).index == 7
        assert Square(0, 7).index == 56
        assert Square(7, 7).index == 63

    def test_from_index_roundtrip(self) -> None:
        for idx in range(NUM_SQUARES):
            assert Square.from_index(idx).index == idx

    def test_out_of_range(self) -> None:
        with pytest.raises(ValueError):
            Square(8, 0)
        with pytest.raises(ValueError):
            Square.from_index(64)

    def test_mirrored(self) -> None:
        assert Square(2, 0).mirrored() == Square(2, 7)
        assert Square(5, 3).mirrored() == Square(5, 4)


class TestPiece:
    def test_empty(self) -> None:
        assert EMPTY.is_empty
        assert EMPTY == Piece(PieceKind.NONE, Side.NONE)

    def test_kind_without_side_is_rejected(self) -> None:
        with pytest.raises(ValueError):
            Piece(PieceKind.KING, Side.NONE)

    def test_side_without_kind_is_rejected(self) -> None:
        with pytest.raises(ValueError):
            Piece(PieceKind.NONE, Side.BLACK)


class TestBoard:
    def test_default_is_empty(self) -> None:
        board = Board()
        assert len(board.squares) == NUM_SQUARES
        assert all(p == EMPTY for p in board.squares)

    def test_set_piece_returns_new_board(self) -> None:
        board = Board()
        king = Piece(PieceKind.KING, Side.BLACK)
        new_board = board.set_piece(Square(4, 0), king)
        assert new_board.piece_at(Square(4, 0)) == king
        assert new_board.piece_at_index(4) == king
        assert board.piece_at(Square(4, 0)) == EMPTY

    def test_wrong_size_rejected(self) -> None:
        with pytest.raises(ValueError):
            Board(squares=(EMPTY,) * 63)

    def test_find(self) -> None:
        board = Board().set_piece(Square(3, 7), Piece(PieceKind.PRINCE, Side.WHITE))
        assert board.find(PieceKind.PRINCE, Side.WHITE) == Square(3, 7)
        assert board.find(PieceKind.PRINCE, Side.BLACK) is None

    def test_pieces_by_side(self) -> None:
        board = (
            Board()
            .set_piece(Square(0, 0), Piece(PieceKind.LIGHT, Side.BLACK))
            .set_piece(Square(1, 1), Piece(PieceKind.HEAVY, Side.WHITE))
        )
        black = list(board.pieces(Side.BLACK))
        assert black == [(Square(0, 0), Piece(PieceKind.LIGHT, Side.BLACK))]
        assert list(board.pieces(Side.NONE)) == []
