"""Client configuration.

接続先サーバやタイムアウトなどの設定。環境変数で上書きできる。

  ARCHER_SERVER_URL  サーバの URL（既定: http://127.0.0.1:3001）
  ARCHER_TIMEOUT     HTTP タイムアウト秒
  ARCHER_THINK_TIME  bestmove の思考時間（秒）
  ARCHER_LOG_LEVEL   ログレベル（CLI / Web の起動時）
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

# 初期配置（先手は玉が左、子が右）
OPENING_MFEN = "bngkpgnb/llhhhhll/8/8/8/8/LLHHHHLL/BNGPKGNB b -"


@dataclass(frozen=True)
class ClientConfig:
    """Settings for AuthorityClient.

    Attributes:
        base_url:   権威サーバの URL（/api/... の手前まで）
        timeout:    HTTP リクエストのタイムアウト秒
        think_time: bestmove に渡す思考時間（秒）
        opening:    リセット時に送る初期局面の MFEN
    """

    base_url: str = "http://127.0.0.1:3001"
    timeout: float = 10.0
    think_time: float = 1.0
    opening: str = OPENING_MFEN

    @classmethod
    def from_env(cls) -> ClientConfig:
        defaults = cls()
        return cls(
            base_url=os.environ.get("ARCHER_SERVER_URL", defaults.base_url),
            timeout=float(os.environ.get("ARCHER_TIMEOUT", defaults.timeout)),
            think_time=float(os.environ.get("ARCHER_THINK_TIME", defaults.think_time)),
        )


def setup_logging() -> None:
    """CLI / Web の起動時にルートロガーを設定する。"""
    level = os.environ.get("ARCHER_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
