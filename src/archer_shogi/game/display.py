"""Terminal display for archer shogi."""

from __future__ import annotations

from archer_shogi.game.board import Board
from archer_shogi.game.position import Position
from archer_shogi.game.types import FILES, RANKS, PieceKind, Side

# Display characters for pieces
PIECE_CHARS: dict[PieceKind, str] = {
    PieceKind.LIGHT: "歩",
    PieceKind.HEAVY: "重",
    PieceKind.KING: "玉",
    PieceKind.PRINCE: "子",
    PieceKind.GENERAL: "将",
    PieceKind.KNIGHT: "騎",
    PieceKind.ARROW: "矢",
    PieceKind.ARCHER0: "弓0",
    PieceKind.ARCHER1: "弓1",
    PieceKind.ARCHER2: "弓2",
}


def format_position(position: Position) -> str:
    """Format a position for terminal display.

    rank 8 を上に表示する。後手の駒は "v"、戴冠している王族の駒は "*" を前に付ける。
    """
    lines: list[str] = []
    lines.append(f"後手持駒: {_format_reserve(position, Side.WHITE)}")
    lines.append("    " + "   ".join(chr(ord("A") + f) for f in range(FILES)))

    for rank in range(RANKS - 1, -1, -1):
        cells = [_format_cell(position, position.board, rank * FILES + f) for f in range(FILES)]
        lines.append(f"{rank + 1} |" + "|".join(cells) + "|")

    lines.append(f"先手持駒: {_format_reserve(position, Side.BLACK)}")
    turn = "先手" if position.side_to_move == Side.BLACK else "後手"
    lines.append(f"手番: {turn}")
    return "\n".join(lines)


def _format_cell(position: Position, board: Board, index: int) -> str:
    piece = board.piece_at_index(index)
    if piece.is_empty:
        return "   "
    mark = "v" if piece.side == Side.WHITE else " "
    if piece.kind == position.crowned_kind(piece.side):
        mark = "*" if piece.side == Side.BLACK else "V"
    return f"{mark}{PIECE_CHARS[piece.kind]}"


def _format_reserve(position: Position, side: Side) -> str:
    reserve = position.reserve(side)
    if reserve.is_empty:
        return "なし"
    pieces: list[str] = []
    for kind, count in reserve:
        char = PIECE_CHARS[kind]
        pieces.append(char if count == 1 else f"{char}{count}")
    return " ".join(pieces)
