"""Board representation for archer shogi (8x8).

8×8盤の盤面データ構造。イミュータブルなデータクラスで、
変更メソッドは新しいオブジェクトを返す。盤面は単なるマス目で、
手番や合法性の判断はここでは行わない。
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from archer_shogi.game.types import FILES, NUM_SQUARES, RANKS, PieceKind, Side


@dataclass(frozen=True, order=True)
class Square:
    """A board coordinate.

    file は 0〜7（A〜H）、rank は 0〜7（1〜8段）。
    線形インデックス rank * 8 + file が保存用のキーになる。
    """

    file: int
    rank: int

    def __post_init__(self) -> None:
        if not (0 <= self.file < FILES and 0 <= self.rank < RANKS):
            msg = f"Square out of range: ({self.file}, {self.rank})"
            raise ValueError(msg)

    @property
    def index(self) -> int:
        return self.rank * FILES + self.file

    @staticmethod
    def from_index(index: int) -> Square:
        if not 0 <= index < NUM_SQUARES:
            msg = f"Square index out of range: {index}"
            raise ValueError(msg)
        return Square(index % FILES, index // FILES)

    @staticmethod
    def in_bounds(file: int, rank: int) -> bool:
        """(file, rank) が盤内なら True。"""
        return 0 <= file < FILES and 0 <= rank < RANKS

    def mirrored(self) -> Square:
        """rank を反転したマス（先手と後手の対称性の確認に使う）。"""
        return Square(self.file, RANKS - 1 - self.rank)


@dataclass(frozen=True)
class Piece:
    """A (kind, side) pair stored on every square.

    空きマスは (NONE, NONE)。駒種と手番の「空」は常に一致する。
    """

    kind: PieceKind
    side: Side

    def __post_init__(self) -> None:
        if (self.kind == PieceKind.NONE) != (self.side == Side.NONE):
            msg = f"Inconsistent piece: kind={self.kind.name}, side={self.side.name}"
            raise ValueError(msg)

    @property
    def is_empty(self) -> bool:
        return self.side == Side.NONE


EMPTY = Piece(PieceKind.NONE, Side.NONE)


@dataclass(frozen=True)
class Board:
    """Immutable 64-square grid.

    squares: 64要素のタプル（rank 優先）。squares[rank * 8 + file] でアクセス。
    """

    squares: tuple[Piece, ...] = field(default_factory=lambda: (EMPTY,) * NUM_SQUARES)

    def __post_init__(self) -> None:
        if len(self.squares) != NUM_SQUARES:
            msg = f"Board needs {NUM_SQUARES} squares, got {len(self.squares)}"
            raise ValueError(msg)

    def piece_at(self, square: Square) -> Piece:
        """マスの駒を返す。空きマスは EMPTY。"""
        return self.squares[square.index]

    def piece_at_index(self, index: int) -> Piece:
        return self.squares[index]

    def set_piece(self, square: Square, piece: Piece) -> Board:
        """マスの駒を変更した新しい Board を返す。"""
        squares = list(self.squares)
        squares[square.index] = piece
        return Board(squares=tuple(squares))

    def pieces(self, side: Side) -> Iterator[tuple[Square, Piece]]:
        """手番 side の駒を (マス, 駒) で列挙する。"""
        for idx, piece in enumerate(self.squares):
            if piece.side == side and side != Side.NONE:
                yield Square.from_index(idx), piece

    def find(self, kind: PieceKind, side: Side) -> Square | None:
        """Return the first square holding (kind, side), or None.

        玉・子の位置を探すのに使う（demise の判定）。
        """
        for idx, piece in enumerate(self.squares):
            if piece.kind == kind and piece.side == side and kind != PieceKind.NONE:
                return Square.from_index(idx)
        return None
