"""Destination generation for archer shogi.

盤上の駒が移動できるマスを求める。盤面だけの純粋関数で、手番や持ち駒は見ない。
王手の判定などはサーバ側のエンジンが行う（ここでは駒の動きの幾何だけ）。

各方向は1回ずつ数える。矢を持つ弓（ARCHER1/ARCHER2）の縦横の隣接マスは
「1マス移動」と「射撃」の両方で届くため、destination_counts() では 2 になる。
この重複数（ambiguous-shot count）が 2 以上のマスでは、UI が射撃するかを
プレイヤーに確認する。
"""

from __future__ import annotations

from collections import Counter

from archer_shogi.game.board import Board, Square
from archer_shogi.game.position import Position
from archer_shogi.game.types import (
    ALL_DIRECTIONS,
    ARCHER_RELOAD,
    SIDEWAYS_STEPS,
    SIDEWAYS_ZONE,
    SLIDE_MOVES,
    STEP_MOVES,
    PieceKind,
    Side,
)


def destinations(origin: Square, board: Board) -> set[Square]:
    """Return every square the piece on ``origin`` can reach.

    駒がなければ空集合。
    """
    return set(destination_counts(origin, board))


def destination_counts(origin: Square, board: Board) -> Counter[Square]:
    """Return destinations as a multiset.

    値はそのマスに届く経路（1マス移動・射撃）の数。
    """
    counts: Counter[Square] = Counter()
    piece = board.piece_at(origin)
    if piece.is_empty:
        return counts

    kind, side = piece.kind, piece.side
    forward = side.forward

    # Step moves（騎の跳躍も含む。跳躍は間の駒を無視する）
    for df, dr in STEP_MOVES.get(kind, []):
        _step(board, origin, side, df, dr * forward, counts)

    # 歩・重: 境界を越えたら横にも動ける
    if kind in (PieceKind.LIGHT, PieceKind.HEAVY) and _in_sideways_zone(side, origin.rank):
        for df, dr in SIDEWAYS_STEPS:
            _step(board, origin, side, df, dr, counts)

    # 重: 前のマスが空いていれば2マス前へ
    if kind == PieceKind.HEAVY and _is_empty(board, origin.file, origin.rank + forward):
        _step(board, origin, side, 0, 2 * forward, counts)

    # Slide moves（矢を持つ弓の射撃）
    for df, dr in SLIDE_MOVES.get(kind, []):
        _ray(board, origin, side, df, dr, counts)

    # 矢: 最初に当たった味方の弓（補給可能なもの）だけが行き先
    if kind == PieceKind.ARROW:
        for df, dr in ALL_DIRECTIONS:
            target = _first_occupied(board, origin, df, dr)
            if target is None:
                continue
            hit = board.piece_at(target)
            if hit.side == side and hit.kind in ARCHER_RELOAD:
                counts[target] += 1

    return counts


def ambiguous_shots(origin: Square, board: Board) -> set[Square]:
    """Squares reached both by a plain step and by a shot.

    ここに指すときは射撃するか（"S" 付きで送るか）をプレイヤーに確認する。
    """
    return {sq for sq, n in destination_counts(origin, board).items() if n > 1}


def movable(position: Position, square: Square) -> set[Square]:
    """局面版の destinations()。UI から呼ばれる。"""
    return destinations(square, position.board)


def aiming_arrows(target: Square, board: Board) -> list[Square]:
    """Return every arrow whose destinations include ``target``.

    同じ弓を狙っている矢が複数あるかを UI が判断するために使う。
    """
    arrows: list[Square] = []
    for side in (Side.BLACK, Side.WHITE):
        for square, piece in board.pieces(side):
            if piece.kind == PieceKind.ARROW and target in destination_counts(square, board):
                arrows.append(square)
    return arrows


def _step(
    board: Board,
    origin: Square,
    side: Side,
    df: int,
    dr: int,
    counts: Counter[Square],
) -> None:
    """盤内で、自分の駒がないマスなら行き先に加える。"""
    nf, nr = origin.file + df, origin.rank + dr
    if not Square.in_bounds(nf, nr):
        return
    target = Square(nf, nr)
    if board.piece_at(target).side != side:
        counts[target] += 1


def _ray(
    board: Board,
    origin: Square,
    side: Side,
    df: int,
    dr: int,
    counts: Counter[Square],
) -> None:
    """同方向に進み、最初の駒で止まる。敵の駒ならそのマスも含む。"""
    nf, nr = origin.file + df, origin.rank + dr
    while Square.in_bounds(nf, nr):
        target = Square(nf, nr)
        occupant = board.piece_at(target)
        if occupant.is_empty:
            counts[target] += 1
        else:
            if occupant.side != side:
                counts[target] += 1
            break  # 駒に当たったら止まる
        nf, nr = nf + df, nr + dr


def _first_occupied(board: Board, origin: Square, df: int, dr: int) -> Square | None:
    j = 1
    while Square.in_bounds(origin.file + df * j, origin.rank + dr * j):
        square = Square(origin.file + df * j, origin.rank + dr * j)
        if not board.piece_at(square).is_empty:
            return square
        j += 1
    return None


def _is_empty(board: Board, file: int, rank: int) -> bool:
    if not Square.in_bounds(file, rank):
        return False
    return board.piece_at(Square(file, rank)).is_empty


def _in_sideways_zone(side: Side, rank: int) -> bool:
    low, high = SIDEWAYS_ZONE[side]
    return low <= rank <= high
