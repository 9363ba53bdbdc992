# src/locale_hub/domain/ordering.py
"""
顺序索引：每个 key 的 `order` 只在源语言展平时分配一次，
之后任何语言对该 key 的写入都从这里复制，导出时按它升序输出。
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import replace
from typing import TypeVar

from .tree import FlatEntry, FlatRecord

R = TypeVar("R", bound=FlatRecord)


def assign_orders(entries: Iterable[FlatEntry], start: int = 0) -> list[FlatEntry]:
    """
    为缺少 `order` 的记录按位置分配从 `start` 开始的顺序。
    调用方显式提供的 `order` 原样保留。
    """
    return [
        entry if entry.order is not None else replace(entry, order=start + position)
        for position, entry in enumerate(entries)
    ]


def sort_by_order(records: Iterable[R]) -> list[R]:
    """按 `order` 稳定升序排序；同序记录保持原有先后。"""
    return sorted(records, key=lambda record: record.order or 0)


class OrderIndex:
    """由源语言记录构建的 key → order 只读索引。"""

    def __init__(self, orders: dict[str, int]):
        self._orders = orders

    @classmethod
    def from_resources(cls, source_records: Iterable[FlatRecord]) -> "OrderIndex":
        orders: dict[str, int] = {}
        for record in source_records:
            orders[record.key] = record.order if record.order is not None else len(orders)
        return cls(orders)

    def __contains__(self, key: object) -> bool:
        return key in self._orders

    def __len__(self) -> int:
        return len(self._orders)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def order_of(self, key: str) -> int:
        """返回 key 的源语言顺序；key 不在源键集中时抛 KeyError。"""
        return self._orders[key]

    def keys(self) -> list[str]:
        """按 `order` 升序返回源键集。"""
        return sorted(self._orders, key=self._orders.__getitem__)

    def sort(self, records: Sequence[R]) -> list[R]:
        """按源语言顺序排列记录；不在索引中的记录被排除。"""
        known = [record for record in records if record.key in self._orders]
        return sorted(known, key=lambda record: self._orders[record.key])
