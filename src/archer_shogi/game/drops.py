"""Drop legality for reserve pieces.

持ち駒を打てるマスの判定。

- 空きマスで、かつ自陣側の範囲（先手 rank <= 4、後手 rank >= 3）なら打てる。
- 例外: 矢は味方の弓0・弓1の上に打てる（補給）。弓0→弓1、弓1→弓2 になる。

合法でないことはエラーではなく False で返す。
"""

from __future__ import annotations

from archer_shogi.game.board import Square
from archer_shogi.game.notation import DropMove
from archer_shogi.game.position import Position
from archer_shogi.game.types import ARCHER_RELOAD, DROP_ZONE, NUM_SQUARES, PieceKind, Side


def is_drop_legal(position: Position, side: Side, kind: PieceKind, square: Square) -> bool:
    """Return True when ``side`` may drop ``kind`` on ``square``."""
    if side == Side.NONE:
        return False
    target = position.board.piece_at(square)

    # 矢の補給（自陣の範囲に関係なく打てる）
    if kind == PieceKind.ARROW and target.side == side and target.kind in ARCHER_RELOAD:
        return True

    if not target.is_empty:
        return False
    low, high = DROP_ZONE[side]
    return low <= square.rank <= high


def drop_destinations(position: Position, side: Side, kind: PieceKind) -> set[Square]:
    """打てるマスをすべて返す。"""
    return {
        Square.from_index(idx)
        for idx in range(NUM_SQUARES)
        if is_drop_legal(position, side, kind, Square.from_index(idx))
    }


def drop_result(position: Position, side: Side, kind: PieceKind, square: Square) -> PieceKind:
    """Kind that ends up on ``square`` after the drop.

    補給なら1段階装填数が増えた弓、それ以外は打った駒そのもの。
    """
    target = position.board.piece_at(square)
    if kind == PieceKind.ARROW and target.side == side and target.kind in ARCHER_RELOAD:
        return ARCHER_RELOAD[target.kind]
    return kind


def drop_move(position: Position, side: Side, kind: PieceKind, square: Square) -> DropMove:
    """サーバへ送る打ちの手を作る（補給なら補給後の弓の文字になる）。"""
    return DropMove(square, drop_result(position, side, kind, square), side)
