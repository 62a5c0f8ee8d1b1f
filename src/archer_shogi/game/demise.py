"""Succession (demise) state.

各手番は demise 回数を持つ（初期値 0）。偶数回なら玉、奇数回なら子が戴冠している。
戴冠していない方の王族の駒が盤上にあるときだけ demise を選べる（自動では起きない）。
"""

from __future__ import annotations

from archer_shogi.game.position import Position
from archer_shogi.game.types import PieceKind, Side


class DemiseError(ValueError):
    """Demise requested when it is not offerable."""


def crowned_kind(position: Position, side: Side) -> PieceKind:
    return position.crowned_kind(side)


def heir_kind(position: Position, side: Side) -> PieceKind:
    """戴冠していない方の王族の駒種。"""
    if crowned_kind(position, side) == PieceKind.KING:
        return PieceKind.PRINCE
    return PieceKind.KING


def can_demise(position: Position, side: Side) -> bool:
    """True when ``side`` has its heir on the board."""
    if side == Side.NONE:
        return False
    return position.board.find(heir_kind(position, side), side) is not None


def demise(position: Position) -> Position:
    """Return the position with the side to move's demise counter incremented.

    公開ヘルパー。クライアントは結果の局面を使わず "D" を送って取り直す。
    """
    side = position.side_to_move
    if not can_demise(position, side):
        msg = f"{side.name} has no {heir_kind(position, side).name} to succeed"
        raise DemiseError(msg)
    return position.with_demise(side, position.demise_count(side) + 1)
