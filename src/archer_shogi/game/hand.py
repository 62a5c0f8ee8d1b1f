"""Reserve (持ち駒) for one side.

取った駒の枚数を駒種ごとに保持する。UI で持ち駒を番号で選べるように
追加順を保ち、枚数 0 のエントリは残さない。
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from archer_shogi.game.types import RESERVE_KINDS, PieceKind


@dataclass(frozen=True)
class Reserve:
    """Insertion-ordered (kind, count) entries.

    entries: ((PieceKind, 枚数), ...)。枚数は常に 1 以上、駒種は重複しない。
    """

    entries: tuple[tuple[PieceKind, int], ...] = ()

    def __post_init__(self) -> None:
        seen: set[PieceKind] = set()
        for kind, count in self.entries:
            if kind not in RESERVE_KINDS:
                msg = f"{kind.name} cannot be held in reserve"
                raise ValueError(msg)
            if count < 1:
                msg = f"Reserve count must be positive: {kind.name}={count}"
                raise ValueError(msg)
            if kind in seen:
                msg = f"Duplicate reserve entry: {kind.name}"
                raise ValueError(msg)
            seen.add(kind)

    def __iter__(self) -> Iterator[tuple[PieceKind, int]]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def is_empty(self) -> bool:
        return not self.entries

    def count(self, kind: PieceKind) -> int:
        """駒種 kind の枚数。持っていなければ 0。"""
        for k, n in self.entries:
            if k == kind:
                return n
        return 0

    def kinds(self) -> list[PieceKind]:
        return [k for k, _ in self.entries]

    def add(self, kind: PieceKind, count: int = 1) -> Reserve:
        """Add pieces, keeping the entry's original position.

        既にある駒種なら枚数を増やし、なければ末尾に追加する。
        """
        entries = list(self.entries)
        for i, (k, n) in enumerate(entries):
            if k == kind:
                entries[i] = (k, n + count)
                return Reserve(tuple(entries))
        entries.append((kind, count))
        return Reserve(tuple(entries))

    def remove(self, kind: PieceKind) -> Reserve:
        """1枚取り除いた新しい Reserve を返す。0枚になったエントリは消える。"""
        entries = list(self.entries)
        for i, (k, n) in enumerate(entries):
            if k == kind:
                if n == 1:
                    del entries[i]
                else:
                    entries[i] = (k, n - 1)
                return Reserve(tuple(entries))
        msg = f"No {kind.name} in reserve"
        raise ValueError(msg)
