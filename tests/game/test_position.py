"""Tests for the position aggregate."""

from __future__ import annotations

import pytest

from archer_shogi.game.board import EMPTY
from archer_shogi.game.hand import Reserve
from archer_shogi.game.mfen import FormatError
from archer_shogi.game.position import Position
from archer_shogi.game.types import PieceKind, Side


class TestPosition:
    def test_default_is_empty(self) -> None:
        position = Position()
        assert all(p == EMPTY for p in position.board.squares)
        assert position.side_to_move == Side.BLACK
        assert position.reserve(Side.BLACK).is_empty
        assert position.reserve(Side.WHITE).is_empty
        assert position.demise == (0, 0)

    def test_load(self) -> None:
        position = Position.load("8/8/8/8/8/8/8/8 w H")
        assert position.side_to_move == Side.WHITE
        assert position.reserve(Side.BLACK).count(PieceKind.HEAVY) == 1

    def test_load_failure(self) -> None:
        with pytest.raises(FormatError):
            Position.load("8/8/8/8/8/8/8/8")

    def test_to_mfen(self) -> None:
        text = "K7/8/8/8/8/8/8/8 b -"
        assert Position.load(text).to_mfen() == text
        assert Position.load(text).to_mfen(extended=True) == text + " 0 0"

    def test_with_reserve(self) -> None:
        position = Position().with_reserve(Side.WHITE, Reserve(((PieceKind.ARROW, 2),)))
        assert position.reserve(Side.WHITE).count(PieceKind.ARROW) == 2
        assert position.reserve(Side.BLACK).is_empty

    def test_with_demise(self) -> None:
        position = Position().with_demise(Side.BLACK, 1)
        assert position.demise_count(Side.BLACK) == 1
        assert position.crowned_kind(Side.BLACK) == PieceKind.PRINCE

    def test_no_side_to_move_rejected(self) -> None:
        with pytest.raises(ValueError):
            Position(side_to_move=Side.NONE)

    def test_negative_demise_rejected(self) -> None:
        with pytest.raises(ValueError):
            Position(demise=(-1, 0))

    def test_reserve_for_none_side(self) -> None:
        with pytest.raises(ValueError):
            Position().reserve(Side.NONE)
