"""Position: board, side to move, reserves and demise counters.

局面。MFEN のシリアライズ単位であり、指し手生成に渡す単位でもある。
クライアントは局面に手を適用しない。サーバから受け取った MFEN を
デコードして毎回作り直す。
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from archer_shogi.game.board import Board
from archer_shogi.game.hand import Reserve
from archer_shogi.game.types import PieceKind, Side


@dataclass(frozen=True)
class Position:
    """Immutable position.

    reserves: (先手の持ち駒, 後手の持ち駒)
    demise:   (先手の demise 回数, 後手の demise 回数)
    """

    board: Board = field(default_factory=Board)
    side_to_move: Side = Side.BLACK
    reserves: tuple[Reserve, Reserve] = (Reserve(), Reserve())
    demise: tuple[int, int] = (0, 0)

    def __post_init__(self) -> None:
        if self.side_to_move == Side.NONE:
            raise ValueError("Side to move must be BLACK or WHITE")
        if any(n < 0 for n in self.demise):
            msg = f"Demise counters must be non-negative: {self.demise}"
            raise ValueError(msg)

    @classmethod
    def load(cls, mfen: str) -> Position:
        """MFEN 文字列から局面を作る（失敗時は FormatError）。"""
        from archer_shogi.game.mfen import decode

        return decode(mfen)

    def to_mfen(self, extended: bool = False) -> str:
        from archer_shogi.game.mfen import encode

        return encode(self, extended=extended)

    def reserve(self, side: Side) -> Reserve:
        return self.reserves[_slot(side)]

    def demise_count(self, side: Side) -> int:
        return self.demise[_slot(side)]

    def crowned_kind(self, side: Side) -> PieceKind:
        """偶数回なら玉、奇数回なら子が戴冠している。"""
        if self.demise_count(side) % 2 == 0:
            return PieceKind.KING
        return PieceKind.PRINCE

    def with_reserve(self, side: Side, reserve: Reserve) -> Position:
        reserves = list(self.reserves)
        reserves[_slot(side)] = reserve
        return replace(self, reserves=(reserves[0], reserves[1]))

    def with_demise(self, side: Side, count: int) -> Position:
        demise = list(self.demise)
        demise[_slot(side)] = count
        return replace(self, demise=(demise[0], demise[1]))


def _slot(side: Side) -> int:
    if side == Side.BLACK:
        return 0
    if side == Side.WHITE:
        return 1
    msg = f"No reserve for side {side.name}"
    raise ValueError(msg)
