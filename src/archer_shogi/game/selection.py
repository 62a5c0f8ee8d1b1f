"""Ephemeral selection state owned by the UI boundary.

盤面クリックの途中状態（選択中のマス・持ち駒、移動候補、射撃の確認待ち）。
局面 Position とは別物で、手を送ったら捨てる。
"""

from __future__ import annotations

from dataclasses import dataclass

from archer_shogi.game.board import Square
from archer_shogi.game.drops import drop_destinations, drop_move
from archer_shogi.game.moves import destination_counts
from archer_shogi.game.notation import BoardMove, Move
from archer_shogi.game.position import Position
from archer_shogi.game.types import ARMED_ARCHERS, PieceKind, Side


@dataclass(frozen=True)
class Selection:
    """選択状態。origin か reserve_kind のどちらか一方だけが設定される。"""

    origin: Square | None = None
    reserve_kind: PieceKind | None = None
    side: Side = Side.NONE
    candidates: frozenset[Square] = frozenset()
    ambiguous: frozenset[Square] = frozenset()

    @property
    def is_active(self) -> bool:
        return self.origin is not None or self.reserve_kind is not None


@dataclass(frozen=True)
class PendingShot:
    """Move that needs a shoot / no-shoot answer from the player."""

    origin: Square
    target: Square

    def resolve(self, shoot: bool) -> BoardMove:
        return BoardMove(self.origin, self.target, shoot=shoot)


def select_square(position: Position, square: Square) -> Selection:
    """手番側の駒を選ぶ。それ以外のマスなら選択なし。"""
    piece = position.board.piece_at(square)
    if piece.side != position.side_to_move:
        return Selection()
    counts = destination_counts(square, position.board)
    return Selection(
        origin=square,
        side=piece.side,
        candidates=frozenset(counts),
        ambiguous=frozenset(sq for sq, n in counts.items() if n > 1),
    )


def select_reserve(position: Position, side: Side, kind: PieceKind) -> Selection:
    """持ち駒を選ぶ。手番でない、または持っていなければ選択なし。"""
    if side != position.side_to_move or position.reserve(side).count(kind) == 0:
        return Selection()
    return Selection(
        reserve_kind=kind,
        side=side,
        candidates=frozenset(drop_destinations(position, side, kind)),
    )


def choose(
    selection: Selection,
    position: Position,
    target: Square,
) -> Move | PendingShot | None:
    """Turn a click on ``target`` into a move.

    候補外なら None。移動と射撃の両方があり得るマスでは PendingShot を返し、
    UI が確認ダイアログを出す。
    """
    if target not in selection.candidates:
        return None
    if selection.reserve_kind is not None:
        return drop_move(position, selection.side, selection.reserve_kind, target)
    if selection.origin is None:
        return None
    if target in selection.ambiguous:
        return PendingShot(selection.origin, target)
    # 矢を持つ弓が1マス移動以外で届くマスは射撃
    kind = position.board.piece_at(selection.origin).kind
    return BoardMove(selection.origin, target, shoot=kind in ARMED_ARCHERS)
