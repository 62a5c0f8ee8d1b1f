"""Types and constants for archer shogi (8x8).

弓将棋（8×8盤）の基本型・定数定義。
駒は10種類。弓は装填数（0〜2本）ごとに別の駒種として扱う。
"""

from __future__ import annotations

from enum import IntEnum, unique

FILES = 8
RANKS = 8
NUM_SQUARES = FILES * RANKS  # 64マス


@unique
class Side(IntEnum):
    """Side identifiers.

    先手（BLACK）は rank が増える方向へ進む（rank 0 → rank 7）。
    後手（WHITE）は rank が減る方向へ進む（rank 7 → rank 0）。
    NONE は空きマス用。
    """

    NONE = 0
    BLACK = 1  # 先手
    WHITE = 2  # 後手

    @property
    def opponent(self) -> Side:
        """相手の手番を返す。NONE はそのまま。"""
        if self == Side.BLACK:
            return Side.WHITE
        if self == Side.WHITE:
            return Side.BLACK
        return Side.NONE

    @property
    def forward(self) -> int:
        """前方向の rank の符号（先手 +1、後手 -1）。"""
        if self == Side.BLACK:
            return 1
        if self == Side.WHITE:
            return -1
        return 0


@unique
class PieceKind(IntEnum):
    """Piece kinds.

    弓の装填数は駒種の一部: ARCHER0（空）、ARCHER1（1本）、ARCHER2（2本）。
    """

    NONE = 0
    LIGHT = 1     # 歩
    HEAVY = 2     # 重
    KING = 3      # 玉
    PRINCE = 4    # 子
    GENERAL = 5   # 将
    KNIGHT = 6    # 騎
    ARROW = 7     # 矢
    ARCHER0 = 8   # 弓（矢なし）
    ARCHER1 = 9   # 弓（矢1本）
    ARCHER2 = 10  # 弓（矢2本）


# MFEN の駒文字（先手=大文字、後手=小文字）
KIND_LETTERS: dict[PieceKind, str] = {
    PieceKind.LIGHT: "L",
    PieceKind.HEAVY: "H",
    PieceKind.KING: "K",
    PieceKind.PRINCE: "P",
    PieceKind.GENERAL: "G",
    PieceKind.KNIGHT: "N",
    PieceKind.ARROW: "R",
    PieceKind.ARCHER0: "A",
    PieceKind.ARCHER1: "B",
    PieceKind.ARCHER2: "C",
}

LETTER_KINDS: dict[str, PieceKind] = {v: k for k, v in KIND_LETTERS.items()}

# 持ち駒になれる駒種（弓・玉・子は持ち駒にならない）
RESERVE_KINDS: tuple[PieceKind, ...] = (
    PieceKind.LIGHT,
    PieceKind.HEAVY,
    PieceKind.GENERAL,
    PieceKind.KNIGHT,
    PieceKind.ARROW,
)

# 矢を補給できる弓 → 補給後の弓
ARCHER_RELOAD: dict[PieceKind, PieceKind] = {
    PieceKind.ARCHER0: PieceKind.ARCHER1,
    PieceKind.ARCHER1: PieceKind.ARCHER2,
}

# 射撃できる（矢を持っている）弓
ARMED_ARCHERS: frozenset[PieceKind] = frozenset({PieceKind.ARCHER1, PieceKind.ARCHER2})

# 王族の駒種。demise カウンタの偶奇で戴冠している方が決まる
ROYAL_KINDS: tuple[PieceKind, PieceKind] = (PieceKind.KING, PieceKind.PRINCE)

# 歩・重が横に動ける rank の境界（先手は rank >= 5、後手は rank <= 2）
SIDEWAYS_ZONE: dict[Side, tuple[int, int]] = {
    Side.BLACK: (5, RANKS - 1),
    Side.WHITE: (0, 2),
}

# 持ち駒を打てる rank の範囲（先手は rank <= 4、後手は rank >= 3）
DROP_ZONE: dict[Side, tuple[int, int]] = {
    Side.BLACK: (0, 4),
    Side.WHITE: (3, RANKS - 1),
}

# 1マス移動の方向定義（先手視点、(dfile, drank)、前 = rank 増加方向）
# 後手の場合は rank 方向を反転して使う
STEP_MOVES: dict[PieceKind, list[tuple[int, int]]] = {
    PieceKind.LIGHT: [(0, 1)],  # 歩: 1マス前（横は境界を越えてから）
    PieceKind.HEAVY: [(0, 1)],  # 重: 1マス前（2マス前・横は別処理）
    PieceKind.KING: [
        (1, 1), (1, 0), (1, -1),
        (0, 1), (0, -1),
        (-1, 1), (-1, 0), (-1, -1),
    ],  # 玉: 全8方向1マス
    PieceKind.PRINCE: [(1, 1), (1, -1), (-1, 1), (-1, -1), (0, 1)],  # 子: 斜め4方向+前
    PieceKind.GENERAL: [(1, 1), (-1, 1), (1, 0), (-1, 0), (0, 1), (0, -1)],  # 将: 6方向
    PieceKind.KNIGHT: [
        (2, 1), (2, -1), (1, 2), (1, -2),
        (-1, 2), (-1, -2), (-2, 1), (-2, -1),
    ],  # 騎: 跳躍8方向
    PieceKind.ARCHER0: [(0, 1), (0, -1), (1, 0), (-1, 0)],  # 弓: 縦横1マス
    PieceKind.ARCHER1: [(0, 1), (0, -1), (1, 0), (-1, 0)],
    PieceKind.ARCHER2: [(0, 1), (0, -1), (1, 0), (-1, 0)],
}

# 横移動（歩・重が境界を越えたとき）
SIDEWAYS_STEPS: list[tuple[int, int]] = [(1, 0), (-1, 0)]

# 遠距離方向（矢を持つ弓の射撃、矢の補給先探索）
ALL_DIRECTIONS: list[tuple[int, int]] = [
    (1, 1), (1, 0), (1, -1),
    (0, 1), (0, -1),
    (-1, 1), (-1, 0), (-1, -1),
]

SLIDE_MOVES: dict[PieceKind, list[tuple[int, int]]] = {
    PieceKind.ARCHER1: ALL_DIRECTIONS,
    PieceKind.ARCHER2: ALL_DIRECTIONS,
}
