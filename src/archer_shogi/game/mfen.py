"""MFEN codec.

局面の文字列表現 MFEN のエンコード・デコード。

    <rows> <turn> <reserves>
    例: bngkpgnb/llhhhhll/8/8/8/8/LLHHHHLL/BNGPKGNB b -

rows:     8段を "/" で区切る（rank 7 から rank 0 の順）。数字は連続する空きマス数、
          文字は駒（大文字=先手、小文字=後手）。
turn:     "b"（先手番）または "w"（後手番）。
reserves: "-" または 駒文字+枚数（1枚なら省略）の並び。先手のエントリが先。

サーバは末尾に両者の demise 回数を付けた 5 フィールド形式も使う
（extended=True）。
"""

from __future__ import annotations

from archer_shogi.game.board import EMPTY, Board, Piece
from archer_shogi.game.hand import Reserve
from archer_shogi.game.position import Position
from archer_shogi.game.types import (
    FILES,
    KIND_LETTERS,
    LETTER_KINDS,
    NUM_SQUARES,
    RANKS,
    RESERVE_KINDS,
    PieceKind,
    Side,
)

_TURNS: dict[str, Side] = {"b": Side.BLACK, "w": Side.WHITE}


class FormatError(ValueError):
    """Malformed MFEN or move notation."""


def piece_letter(kind: PieceKind, side: Side) -> str:
    """駒文字を返す。先手は大文字、後手は小文字。"""
    letter = KIND_LETTERS[kind]
    return letter if side == Side.BLACK else letter.lower()


def parse_letter(c: str) -> tuple[PieceKind, Side]:
    """駒文字を (駒種, 手番) に変換する。未知の文字なら FormatError。"""
    kind = LETTER_KINDS.get(c.upper())
    if kind is None or not c.isalpha():
        msg = f"Invalid piece letter: {c!r}"
        raise FormatError(msg)
    return kind, Side.BLACK if c.isupper() else Side.WHITE


def decode(text: str, extended: bool = False) -> Position:
    """Decode MFEN text into a Position.

    途中で失敗しても部分的な局面は返さない（FormatError を送出する）。
    """
    fields = text.split(" ")
    expected = 5 if extended else 3
    if len(fields) != expected:
        msg = f"MFEN needs {expected} fields, got {len(fields)}: {text!r}"
        raise FormatError(msg)

    board = _decode_rows(fields[0])

    turn = _TURNS.get(fields[1])
    if turn is None:
        msg = f"Invalid turn: {fields[1]!r}"
        raise FormatError(msg)

    black, white = _decode_reserves(fields[2])

    demise = (0, 0)
    if extended:
        demise = (_decode_count(fields[3]), _decode_count(fields[4]))

    return Position(
        board=board,
        side_to_move=turn,
        reserves=(black, white),
        demise=demise,
    )


def encode(position: Position, extended: bool = False) -> str:
    """Encode a Position as MFEN text (maximal empty runs)."""
    parts = [
        _encode_rows(position.board),
        "b" if position.side_to_move == Side.BLACK else "w",
        _encode_reserves(position.reserves[0], position.reserves[1]),
    ]
    if extended:
        parts.extend(str(n) for n in position.demise)
    return " ".join(parts)


def _decode_rows(field: str) -> Board:
    ranks = field.split("/")
    if len(ranks) != RANKS:
        msg = f"MFEN needs {RANKS} ranks, got {len(ranks)}"
        raise FormatError(msg)

    squares: list[Piece] = [EMPTY] * NUM_SQUARES
    # 先頭の段が rank 7（後手側の端）
    for i, row in enumerate(ranks):
        rank = RANKS - 1 - i
        file = 0
        for c in row:
            if c.isascii() and c.isdigit():
                run = int(c)
                if not 1 <= run <= FILES:
                    msg = f"Invalid empty-run digit: {c!r}"
                    raise FormatError(msg)
                file += run
            else:
                kind, side = parse_letter(c)
                if file < FILES:
                    squares[rank * FILES + file] = Piece(kind, side)
                file += 1
            if file > FILES:
                msg = f"Rank {rank + 1} has more than {FILES} files: {row!r}"
                raise FormatError(msg)
        if file != FILES:
            msg = f"Rank {rank + 1} has {file} files, expected {FILES}: {row!r}"
            raise FormatError(msg)

    return Board(squares=tuple(squares))


def _encode_rows(board: Board) -> str:
    rows: list[str] = []
    for rank in range(RANKS - 1, -1, -1):
        row = ""
        run = 0
        for file in range(FILES):
            piece = board.piece_at_index(rank * FILES + file)
            if piece.is_empty:
                run += 1
                continue
            if run:
                row += str(run)
                run = 0
            row += piece_letter(piece.kind, piece.side)
        if run:
            row += str(run)
        rows.append(row)
    return "/".join(rows)


def _decode_reserves(field: str) -> tuple[Reserve, Reserve]:
    black = Reserve()
    white = Reserve()
    if field == "-":
        return black, white
    if not field:
        raise FormatError("Empty reserve field (use '-')")

    i = 0
    while i < len(field):
        kind, side = parse_letter(field[i])
        if kind not in RESERVE_KINDS:
            msg = f"{kind.name} cannot be held in reserve: {field[i]!r}"
            raise FormatError(msg)
        i += 1

        # 枚数（省略時は 1、明示する場合は 2 以上）
        j = i
        while j < len(field) and field[j].isascii() and field[j].isdigit():
            j += 1
        count = 1
        if j > i:
            count = int(field[i:j])
            if count < 2:
                msg = f"Invalid reserve count: {field[i:j]!r}"
                raise FormatError(msg)
        i = j

        if side == Side.BLACK:
            black = black.add(kind, count)
        else:
            white = white.add(kind, count)

    return black, white


def _encode_reserves(black: Reserve, white: Reserve) -> str:
    if black.is_empty and white.is_empty:
        return "-"
    out = ""
    for side, reserve in ((Side.BLACK, black), (Side.WHITE, white)):
        for kind, count in reserve:
            out += piece_letter(kind, side)
            if count > 1:
                out += str(count)
    return out


def _decode_count(field: str) -> int:
    if not field.isdigit() or not field.isascii():
        msg = f"Invalid demise count: {field!r}"
        raise FormatError(msg)
    return int(field)
