"""CLI entry point for archer-shogi: position inspector.

コマンドラインで局面を表示し、駒の移動先や持ち駒を打てるマスを調べる。
権威サーバに接続できれば手を送ることもできる。

起動方法: `archer-cli [MFEN]`（MFEN を省略するとサーバから取得する）
"""

from __future__ import annotations

import logging
import sys

import requests

from archer_shogi.client import AuthorityClient, AuthorityError, decode_board
from archer_shogi.config import OPENING_MFEN, ClientConfig, setup_logging
from archer_shogi.game.demise import can_demise
from archer_shogi.game.display import format_position
from archer_shogi.game.drops import drop_destinations
from archer_shogi.game.mfen import FormatError, decode, parse_letter
from archer_shogi.game.moves import destination_counts
from archer_shogi.game.notation import parse_move, parse_square, square_label
from archer_shogi.game.position import Position
from archer_shogi.game.types import RESERVE_KINDS

logger = logging.getLogger(__name__)

HELP = """Commands:
  <square>       移動先を表示（例: E2）
  <letter>       持ち駒を打てるマスを表示（例: L, r）
  send <move>    サーバへ手を送る（例: send E2E3, send D）
  reset          サーバの局面を初期配置に戻す
  quit"""


def describe_square(position: Position, text: str) -> str:
    """Describe the destinations of the piece on a square.

    射撃か移動かを確認が必要なマスには "?" を付ける。
    """
    square = parse_square(text)
    counts = destination_counts(square, position.board)
    if not counts:
        return f"{square_label(square)}: no destinations"
    labels = [
        square_label(sq) + ("?" if counts[sq] > 1 else "")
        for sq in sorted(counts)
    ]
    return f"{square_label(square)}: " + " ".join(labels)


def describe_drop(position: Position, letter: str) -> str:
    kind, side = parse_letter(letter)
    if kind not in RESERVE_KINDS:
        return f"{kind.name} cannot be dropped"
    if position.reserve(side).count(kind) == 0:
        return f"No {kind.name} in {side.name} reserve"
    labels = [square_label(sq) for sq in sorted(drop_destinations(position, side, kind))]
    return f"drop {letter}: " + " ".join(labels)


def _fetch(client: AuthorityClient) -> Position:
    try:
        return client.get_board()
    except (requests.RequestException, AuthorityError) as e:
        logger.warning("Server unavailable (%s); using the opening position", e)
        return decode(OPENING_MFEN)


def main() -> None:
    """Run the inspector loop.

    1. 局面を表示
    2. コマンドを読み、移動先などを表示する
    3. quit まで繰り返す
    """
    setup_logging()
    client = AuthorityClient(ClientConfig.from_env())

    args = sys.argv[1:]
    try:
        position = decode_board(" ".join(args)) if args else _fetch(client)
    except FormatError as e:
        print(f"Invalid MFEN: {e}")
        sys.exit(2)

    while True:
        print(format_position(position))
        if can_demise(position, position.side_to_move):
            print("(demise available: send D)")
        print()

        try:
            line = input("> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            return
        if not line:
            continue
        if line in ("quit", "q"):
            return
        if line in ("help", "?"):
            print(HELP)
            continue

        try:
            if line.startswith("send "):
                client.submit_move(parse_move(line[5:].strip()))
                position = client.get_board()
            elif line == "reset":
                client.reset()
                position = client.get_board()
            elif len(line) == 1:
                print(describe_drop(position, line))
            else:
                print(describe_square(position, line))
        except FormatError as e:
            print(f"Invalid input: {e}")
        except (requests.RequestException, AuthorityError) as e:
            print(f"Server error: {e}")
        print()


if __name__ == "__main__":
    main()
