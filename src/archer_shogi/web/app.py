"""FastAPI service exposing the move generator to a UI.

UI が盤面をハイライトするための API。局面は毎回リクエストの MFEN から
デコードし、サーバ側には状態を持たない（手の適用は権威サーバの仕事）。

エンドポイント:
  POST /api/position   局面の内容（盤面・持ち駒・手番・demise）
  POST /api/movable    指定マスの駒の移動先、射撃確認が必要なマス、狙っている矢
  POST /api/drops      持ち駒を打てるマス
  POST /api/demise     demise を選べるか
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from archer_shogi.client import decode_board
from archer_shogi.game.demise import can_demise, crowned_kind
from archer_shogi.game.drops import drop_destinations
from archer_shogi.game.mfen import FormatError, parse_letter
from archer_shogi.game.moves import aiming_arrows, destination_counts
from archer_shogi.game.notation import parse_square, square_label
from archer_shogi.game.position import Position
from archer_shogi.game.types import RESERVE_KINDS, Side

logger = logging.getLogger(__name__)

app = FastAPI(title="Archer Shogi")


class PositionRequest(BaseModel):
    """局面リクエストのスキーマ。"""

    mfen: str  # 3 または 5 フィールドの MFEN


class MovableRequest(BaseModel):
    mfen: str
    square: str  # 例: "E2"


class DropsRequest(BaseModel):
    mfen: str
    piece: str  # 持ち駒の文字（大文字=先手、小文字=後手）


def _load(mfen: str) -> Position:
    try:
        return decode_board(mfen)
    except FormatError as e:
        logger.info("Rejected MFEN %r: %s", mfen, e)
        raise HTTPException(400, str(e)) from e


def _labels(squares: Any) -> list[str]:
    return [square_label(sq) for sq in sorted(squares)]


def _position_to_dict(position: Position) -> dict[str, Any]:
    """Convert a position to a JSON-serializable dict.

    フロントエンドはこの形式を受け取って盤面を描画する。
    """
    squares: list[dict[str, Any] | None] = []
    for piece in position.board.squares:
        if piece.is_empty:
            squares.append(None)
        else:
            squares.append(
                {
                    "kind": piece.kind.name,
                    "side": piece.side.name,
                    "crowned": piece.kind == position.crowned_kind(piece.side),
                }
            )
    reserves = {
        side.name: [[kind.name, count] for kind, count in position.reserve(side)]
        for side in (Side.BLACK, Side.WHITE)
    }
    return {
        "squares": squares,  # 64要素（index = rank * 8 + file）
        "reserves": reserves,
        "turn": position.side_to_move.name,
        "demise": list(position.demise),
        "crowned": {
            side.name: crowned_kind(position, side).name for side in (Side.BLACK, Side.WHITE)
        },
    }


@app.post("/api/position")
async def get_position(req: PositionRequest) -> dict[str, Any]:
    return _position_to_dict(_load(req.mfen))


@app.post("/api/movable")
async def movable(req: MovableRequest) -> dict[str, Any]:
    """移動先を返す。

    ambiguous は移動と射撃のどちらも可能なマス。aimed_by はそのマスを
    行き先に持つ矢（弓なら補給してくれる矢）。
    """
    position = _load(req.mfen)
    try:
        square = parse_square(req.square)
    except FormatError as e:
        raise HTTPException(400, str(e)) from e

    counts = destination_counts(square, position.board)
    return {
        "square": square_label(square),
        "destinations": _labels(counts),
        "ambiguous": _labels(sq for sq, n in counts.items() if n > 1),
        "aimed_by": [square_label(sq) for sq in aiming_arrows(square, position.board)],
    }


@app.post("/api/drops")
async def drops(req: DropsRequest) -> dict[str, Any]:
    position = _load(req.mfen)
    try:
        kind, side = parse_letter(req.piece)
    except FormatError as e:
        raise HTTPException(400, str(e)) from e
    if kind not in RESERVE_KINDS:
        raise HTTPException(400, f"{kind.name} cannot be dropped")

    return {
        "piece": req.piece,
        "in_reserve": position.reserve(side).count(kind),
        "destinations": _labels(drop_destinations(position, side, kind)),
    }


@app.post("/api/demise")
async def demise(req: PositionRequest) -> dict[str, Any]:
    position = _load(req.mfen)
    side = position.side_to_move
    return {
        "side": side.name,
        "offerable": can_demise(position, side),
        "crowned": crowned_kind(position, side).name,
    }


def main() -> None:
    """Run the web server.

    `archer-web` または `python -m archer_shogi.web.app` で起動する。
    """
    import uvicorn

    from archer_shogi.config import setup_logging

    setup_logging()
    uvicorn.run(app, host="127.0.0.1", port=8000)


if __name__ == "__main__":
    main()
