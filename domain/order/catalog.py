"""
商品目录 - 启动时构建、只读共享
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

from domain.common.exceptions import CatalogEntryTypeException


@dataclass(frozen=True)
class MatchResult:
    found: bool
    matches: Tuple[str, ...]


class Catalog:
    """Immutable, ordered set of known item names.

    Built once at server start and handed to every handler by reference.
    Reads need no synchronization since nothing mutates it afterwards.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[str]) -> None:
        entries = tuple(items)
        for index, entry in enumerate(entries):
            if not isinstance(entry, str):
                raise CatalogEntryTypeException(index, entry)
        self._items: Tuple[str, ...] = entries

    @property
    def items(self) -> Tuple[str, ...]:
        return self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Catalog({list(self._items)!r})"

    def match(self, query: str) -> MatchResult:
        """业务规则：大小写敏感的子串包含匹配，按目录顺序返回。

        空查询串匹配全部条目（子串包含对空串恒成立），这是保留的既定行为。
        """
        matches = tuple(entry for entry in self._items if query in entry)
        return MatchResult(found=bool(matches), matches=matches)


__all__ = ["Catalog", "MatchResult"]
