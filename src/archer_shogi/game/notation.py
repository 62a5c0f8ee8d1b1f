"""Square labels and move notation.

マスの表記（"A1" = file 0, rank 0）と、サーバへ送る指し手の表記。

  盤上の手:   <from><to>            例: "A1A2"
  射撃:       <from><to>S           例: "B2B5S"
  打ち:       <to><駒文字>          例: "C3L"（大文字=先手、小文字=後手）
  矢の補給:   <to><補給後の弓の文字>  例: 弓0 の上に矢を打つと "C3B"
  demise:     "D"（他の手の末尾に付けて同時に行うこともできる: "A1A2D"）
"""

from __future__ import annotations

from dataclasses import dataclass

from archer_shogi.game.board import Square
from archer_shogi.game.mfen import FormatError, parse_letter, piece_letter
from archer_shogi.game.types import FILES, RANKS, RESERVE_KINDS, PieceKind, Side

# 打ちで指定できる駒種（補給後の弓を含む）
DROP_LETTER_KINDS: frozenset[PieceKind] = frozenset(RESERVE_KINDS) | {
    PieceKind.ARCHER1,
    PieceKind.ARCHER2,
}


@dataclass(frozen=True)
class BoardMove:
    origin: Square
    target: Square
    shoot: bool = False
    demise: bool = False


@dataclass(frozen=True)
class DropMove:
    """A reserve drop. ``kind`` is the piece that ends up on ``target``."""

    target: Square
    kind: PieceKind
    side: Side
    demise: bool = False


@dataclass(frozen=True)
class DemiseMove:
    """Succession on its own."""


Move = BoardMove | DropMove | DemiseMove


def square_label(square: Square) -> str:
    """Square(0, 0) → "A1"。"""
    return f"{chr(ord('A') + square.file)}{square.rank + 1}"


def parse_square(text: str) -> Square:
    """"A1" / "a1" → Square(0, 0)。不正な表記なら FormatError。"""
    if len(text) != 2:
        msg = f"Invalid square: {text!r}"
        raise FormatError(msg)
    file = ord(text[0].upper()) - ord("A")
    rank = ord(text[1]) - ord("1")
    if not (0 <= file < FILES and 0 <= rank < RANKS):
        msg = f"Invalid square: {text!r}"
        raise FormatError(msg)
    return Square(file, rank)


def format_move(move: Move) -> str:
    if isinstance(move, DemiseMove):
        return "D"
    if isinstance(move, BoardMove):
        text = square_label(move.origin) + square_label(move.target)
        if move.shoot:
            text += "S"
    else:
        text = square_label(move.target) + piece_letter(move.kind, move.side)
    if move.demise:
        text += "D"
    return text


def parse_move(text: str) -> Move:
    """Parse move notation.

    長さで種類を判定する: 4（盤上）、5（射撃）、3（打ち）。
    末尾の "D" は demise の同時実行。
    """
    if text == "D":
        return DemiseMove()
    demise = False
    if text.endswith("D"):
        demise = True
        text = text[:-1]

    if len(text) == 4:
        return BoardMove(parse_square(text[:2]), parse_square(text[2:]), demise=demise)
    if len(text) == 5:
        if text[4] != "S":
            msg = f"Invalid move suffix: {text[4]!r}"
            raise FormatError(msg)
        return BoardMove(
            parse_square(text[:2]),
            parse_square(text[2:4]),
            shoot=True,
            demise=demise,
        )
    if len(text) == 3:
        kind, side = parse_letter(text[2])
        if kind not in DROP_LETTER_KINDS:
            msg = f"{kind.name} cannot be dropped: {text!r}"
            raise FormatError(msg)
        return DropMove(parse_square(text[:2]), kind, side, demise=demise)

    msg = f"Invalid move length: {text!r}"
    raise FormatError(msg)
