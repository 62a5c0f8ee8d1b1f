"""HTTP client for the authoritative game server.

権威サーバとの通信。クライアントは局面に手を適用せず、
手を送ったら必ず get_board() で局面を取り直す。

  GET  /api/board     現在の局面（MFEN テキスト）
  POST /api/board     {mfen}: 局面をリセット
  POST /api/move      {mfen: 指し手表記}: 手を適用（本文なし）
  POST /api/bestmove  {mfen, time}: 最善手の探索結果（JSON）

Usage:
    client = AuthorityClient(ClientConfig.from_env())
    position = client.get_board()
    client.submit_move("E2E3")
    position = client.get_board()
"""

from __future__ import annotations

import logging
from typing import Any

import requests
from pydantic import BaseModel, field_validator

from archer_shogi.config import ClientConfig
from archer_shogi.game.mfen import decode, encode
from archer_shogi.game.notation import Move, format_move
from archer_shogi.game.position import Position

logger = logging.getLogger(__name__)


class AuthorityError(Exception):
    """Error response from the authoritative server."""

    def __init__(self, status_code: int, detail: Any):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"HTTP {status_code}: {detail}")


class RootMove(BaseModel):
    move: str
    score: int


class BestMove(BaseModel):
    """Search result returned by /api/bestmove.

    mfen は最善手の表記（または探索後の局面）。探索できなければ "resign"。
    root_moves はスコアの降順に並べ直す。
    """

    mfen: str
    value: int = 0
    depth: int = 0
    pv: list[str] | None = None
    root_moves: list[RootMove] | None = None

    @field_validator("root_moves", mode="before")
    @classmethod
    def _pairs_to_moves(cls, value: Any) -> Any:
        # サーバは [手, スコア] の組で返すことがある
        if not isinstance(value, (list, tuple)):
            return value
        moves = []
        for item in value:
            if isinstance(item, (list, tuple)):
                if len(item) != 2:
                    msg = f"root move pair needs 2 items, got {len(item)}"
                    raise ValueError(msg)
                item = {"move": item[0], "score": item[1]}
            moves.append(item)
        return moves

    @field_validator("root_moves")
    @classmethod
    def _sort_by_score(cls, value: list[RootMove] | None) -> list[RootMove] | None:
        if value is None:
            return None
        return sorted(value, key=lambda m: m.score, reverse=True)

    @property
    def is_resign(self) -> bool:
        return self.mfen == "resign"


def _to_mfen(position: Position | str) -> str:
    if isinstance(position, str):
        return position
    # demise 回数があるときはサーバの 5 フィールド形式で送る
    return encode(position, extended=position.demise != (0, 0))


def decode_board(text: str) -> Position:
    """サーバが返す MFEN（3 または 5 フィールド）をデコードする。"""
    text = text.strip()
    return decode(text, extended=len(text.split(" ")) == 5)


class AuthorityClient:
    """HTTP client for the authoritative server.

    局面の取得・リセット・指し手送信・最善手探索をラップする。
    """

    def __init__(self, config: ClientConfig | None = None):
        self.config = config or ClientConfig()
        self.base_url = self.config.base_url.rstrip("/")
        self.timeout = self.config.timeout
        self._session = requests.Session()

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _check(self, resp: requests.Response) -> requests.Response:
        if resp.status_code >= 400:
            logger.warning("Server returned HTTP %d", resp.status_code)
            raise AuthorityError(resp.status_code, resp.text)
        return resp

    def get_board(self) -> Position:
        """現在の局面を取得する。不正な MFEN なら FormatError。"""
        resp = self._check(self._session.get(self._url("/api/board"), timeout=self.timeout))
        logger.debug("GET /api/board -> %s", resp.text)
        return decode_board(resp.text)

    def reset(self, position: Position | str | None = None) -> None:
        """局面をリセットする（省略時は初期配置）。"""
        mfen = self.config.opening if position is None else _to_mfen(position)
        logger.info("Resetting board: %s", mfen)
        self._check(
            self._session.post(
                self._url("/api/board"),
                json={"mfen": mfen},
                timeout=self.timeout,
            )
        )

    def submit_move(self, move: Move | str) -> None:
        """手を送る。結果の局面は get_board() で取り直す。"""
        text = move if isinstance(move, str) else format_move(move)
        logger.info("Submitting move: %s", text)
        self._check(
            self._session.post(
                self._url("/api/move"),
                json={"mfen": text},
                timeout=self.timeout,
            )
        )

    def bestmove(self, position: Position | str, time: float | None = None) -> BestMove:
        """最善手を探索させる。"""
        think = self.config.think_time if time is None else time
        resp = self._check(
            self._session.post(
                self._url("/api/bestmove"),
                json={"mfen": _to_mfen(position), "time": think},
                # 思考時間ぶん待つ
                timeout=self.timeout + think,
            )
        )
        result = BestMove.model_validate(resp.json())
        logger.info("bestmove %s (value=%d, depth=%d)", result.mfen, result.value, result.depth)
        return result
