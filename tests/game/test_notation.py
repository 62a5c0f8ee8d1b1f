"""Tests for square labels and move notation."""

from __future__ import annotations

import pytest

from archer_shogi.game.board import Square
from archer_shogi.game.mfen import FormatError
from archer_shogi.game.notation import (
    BoardMove,
    DemiseMove,
    DropMove,
    format_move,
    parse_move,
    parse_square,
    square_label,
)
from archer_shogi.game.types import PieceKind, Side


class TestSquareLabel:
    def test_corners(self) -> None:
        assert square_label(Square(0, 0)) == "A1"
        assert square_label(Square(7, 0)) == "H1"
        assert square_label(Square(0, 7)) == "A8"
        assert square_label(Square(7, 7)) == "H8"

    def test_parse(self) -> None:
        assert parse_square("A1") == Square(0, 0)
        assert parse_square("e5") == Square(4, 4)

    def test_all_labels_roundtrip(self) -> None:
        for idx in range(64):
            square = Square.from_index(idx)
            assert parse_square(square_label(square)) == square

    @pytest.mark.parametrize("text", ["", "A", "I1", "A9", "A0", "11", "A10"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(FormatError):
            parse_square(text)


class TestFormatMove:
    def test_board_move(self) -> None:
        assert format_move(BoardMove(Square(0, 0), Square(0, 1))) == "A1A2"

    def test_shot(self) -> None:
        assert format_move(BoardMove(Square(1, 1), Square(1, 4), shoot=True)) == "B2B5S"

    def test_drop(self) -> None:
        assert format_move(DropMove(Square(2, 2), PieceKind.LIGHT, Side.BLACK)) == "C3L"
        assert format_move(DropMove(Square(2, 5), PieceKind.ARROW, Side.WHITE)) == "C6r"

    def test_demise(self) -> None:
        assert format_move(DemiseMove()) == "D"
        assert format_move(BoardMove(Square(0, 0), Square(0, 1), demise=True)) == "A1A2D"


class TestParseMove:
    def test_board_move(self) -> None:
        assert parse_move("A1A2") == BoardMove(Square(0, 0), Square(0, 1))

    def test_shot(self) -> None:
        assert parse_move("B2B5S") == BoardMove(Square(1, 1), Square(1, 4), shoot=True)

    def test_drop(self) -> None:
        assert parse_move("c3n") == DropMove(Square(2, 2), PieceKind.KNIGHT, Side.WHITE)

    def test_supply_drop(self) -> None:
        assert parse_move("D7B") == DropMove(Square(3, 6), PieceKind.ARCHER1, Side.BLACK)

    def test_demise(self) -> None:
        assert parse_move("D") == DemiseMove()
        assert parse_move("C3LD") == DropMove(Square(2, 2), PieceKind.LIGHT, Side.BLACK, demise=True)

    @pytest.mark.parametrize("text", ["", "A1", "A1A2X", "A1K", "A1A", "A1A2A3", "Z9Z8", "DD"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(FormatError):
            parse_move(text)
