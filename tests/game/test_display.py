"""Tests for position display."""

from archer_shogi.game.display import PIECE_CHARS, format_position
from archer_shogi.game.mfen import decode
from archer_shogi.game.types import PieceKind


def test_all_piece_chars() -> None:
    assert set(PIECE_CHARS) == {k for k in PieceKind if k != PieceKind.NONE}


def test_empty_board_display() -> None:
    output = format_position(decode("8/8/8/8/8/8/8/8 b -"))
    lines = output.split("\n")

    assert lines[0] == "後手持駒: なし"
    assert "A   B   C" in lines[1]
    assert lines[2].startswith("8 |")
    assert lines[9].startswith("1 |")
    assert lines[10] == "先手持駒: なし"
    assert lines[11] == "手番: 先手"


def test_opening_display() -> None:
    output = format_position(decode("bngkpgnb/llhhhhll/8/8/8/8/LLHHHHLL/BNGPKGNB b -"))
    lines = output.split("\n")

    # 戴冠している玉に印が付く
    assert "V玉" in lines[2]
    assert "v子" in lines[2]
    assert "*玉" in lines[9]
    assert " 子" in lines[9]
    assert " 弓1" in lines[9]


def test_crown_moves_with_demise() -> None:
    output = format_position(decode("8/8/8/8/8/8/8/3PK3 b - 1 0", extended=True))
    last_rank = output.split("\n")[9]
    assert "*子" in last_rank
    assert " 玉" in last_rank


def test_reserve_display() -> None:
    output = format_position(decode("8/8/8/8/8/8/8/8 w L2Hr"))
    lines = output.split("\n")
    assert lines[0] == "後手持駒: 矢"
    assert lines[10] == "先手持駒: 歩2 重"
    assert lines[11] == "手番: 後手"
