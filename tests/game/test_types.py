"""Tests for archer shogi types."""

from __future__ import annotations

from archer_shogi.game.types import (
    ARCHER_RELOAD,
    KIND_LETTERS,
    LETTER_KINDS,
    NUM_SQUARES,
    RESERVE_KINDS,
    STEP_MOVES,
    PieceKind,
    Side,
)


class TestSide:
    def test_opponent(self) -> None:
        assert Side.BLACK.opponent == Side.WHITE
        assert Side.WHITE.opponent == Side.BLACK
        assert Side.NONE.opponent == Side.NONE

    def test_forward(self) -> None:
        assert Side.BLACK.forward == 1
        assert Side.WHITE.forward == -1
        assert Side.NONE.forward == 0


class TestPieceKind:
    def test_eleven_kinds(self) -> None:
        assert len(PieceKind) == 11

    def test_archers_are_distinct_kinds(self) -> None:
        archers = {PieceKind.ARCHER0, PieceKind.ARCHER1, PieceKind.ARCHER2}
        assert len(archers) == 3

    def test_every_piece_has_a_letter(self) -> None:
        for kind in PieceKind:
            if kind == PieceKind.NONE:
                continue
            assert kind in KIND_LETTERS

    def test_letters_are_unique(self) -> None:
        assert len(LETTER_KINDS) == len(KIND_LETTERS)
        assert set(LETTER_KINDS) == set("LHKPGNRABC")


class TestConstants:
    def test_num_squares(self) -> None:
        assert NUM_SQUARES == 64

    def test_reserve_kinds(self) -> None:
        assert PieceKind.KING not in RESERVE_KINDS
        assert PieceKind.PRINCE not in RESERVE_KINDS
        assert PieceKind.ARCHER0 not in RESERVE_KINDS
        assert PieceKind.ARROW in RESERVE_KINDS

    def test_archer_reload_steps_one(self) -> None:
        assert ARCHER_RELOAD[PieceKind.ARCHER0] == PieceKind.ARCHER1
        assert ARCHER_RELOAD[PieceKind.ARCHER1] == PieceKind.ARCHER2
        assert PieceKind.ARCHER2 not in ARCHER_RELOAD

    def test_general_has_no_backward_diagonal(self) -> None:
        steps = STEP_MOVES[PieceKind.GENERAL]
        assert len(steps) == 6
        assert (1, -1) not in steps
        assert (-1, -1) not in steps
