# src/locale_hub/domain/reconcile.py
"""
对账器：比较已存储的扁平记录与新提交的记录，把每个 key 归类为
新增 / 更新 / 删除 / 未变化（合并模式下还有“跳过”）。

两种模式：
- REPLACE：源语言重新上传。未出现在新数据中的旧 key 被删除；
  新 key 使用上传时的展平顺序；值未变但顺序变化的 key 进入 `to_reorder`，
  由调用方在模块的所有语言上统一修正顺序。
- MERGE：目标语言导入 / 编辑器保存。必须提供源语言 `OrderIndex`；
  不在源键集中的 key 被跳过；新增记录的 `order` 取自索引；不删除任何记录。

本模块是纯函数，不做任何 I/O。
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field, replace
from enum import Enum

from locale_hub.core.exceptions import ValidationError
from locale_hub.core.types import ReconcileSummary, Resource

from .ordering import OrderIndex, assign_orders
from .tree import FlatEntry


class ReconcileMode(str, Enum):
    REPLACE = "replace"
    MERGE = "merge"


@dataclass(frozen=True)
class ResourceUpdate:
    """对已有记录的值更新，`id` 为已有记录的标识。"""

    id: str
    key: str
    value: str


@dataclass(frozen=True)
class OrderRealignment:
    key: str
    order: int


@dataclass
class ReconcilePlan:
    mode: ReconcileMode
    to_add: list[FlatEntry] = field(default_factory=list)
    to_update: list[ResourceUpdate] = field(default_factory=list)
    to_delete: list[Resource] = field(default_factory=list)
    to_reorder: list[OrderRealignment] = field(default_factory=list)
    unchanged: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    # 合并模式下未被访问、原样保留的已有 key
    untouched: list[str] = field(default_factory=list)

    @property
    def has_writes(self) -> bool:
        return bool(self.to_add or self.to_update or self.to_delete or self.to_reorder)

    def summary(self) -> ReconcileSummary:
        return ReconcileSummary(
            added=len(self.to_add),
            updated=len(self.to_update),
            deleted=len(self.to_delete),
            unchanged=len(self.unchanged),
            skipped=len(self.skipped),
            reordered=len(self.to_reorder),
        )


def _ensure_unique_keys(entries: Sequence[FlatEntry]) -> None:
    duplicates = sorted(key for key, n in Counter(e.key for e in entries).items() if n > 1)
    if duplicates:
        raise ValidationError("提交的数据中存在重复的键。", duplicate_keys=duplicates)


def reconcile(
    existing: Iterable[Resource],
    incoming: Iterable[FlatEntry],
    *,
    mode: ReconcileMode = ReconcileMode.REPLACE,
    order_index: OrderIndex | None = None,
) -> ReconcilePlan:
    """
    计算把 `existing` 变为 `incoming` 所需的变更计划。

    保证：
    - 已有 key 恰好出现在 更新 / 删除 / 未变化 / 保留 之一中一次；
    - 提交的 key 恰好出现在 新增 / 更新 / 未变化 / 跳过 之一中一次。
    """
    if mode is ReconcileMode.MERGE and order_index is None:
        raise ValueError("合并模式需要源语言的顺序索引 (order_index)。")

    entries = list(incoming)
    _ensure_unique_keys(entries)
    if mode is ReconcileMode.REPLACE:
        entries = assign_orders(entries)

    existing_records = list(existing)
    lookup = {record.key: record for record in existing_records}
    visited: set[str] = set()
    plan = ReconcilePlan(mode=mode)

    for entry in entries:
        if order_index is not None and mode is ReconcileMode.MERGE:
            if entry.key not in order_index:
                plan.skipped.append(entry.key)
                continue
            order = order_index.order_of(entry.key)
        else:
            order = entry.order if entry.order is not None else 0

        current = lookup.get(entry.key)
        if current is None:
            plan.to_add.append(replace(entry, order=order))
            continue

        visited.add(entry.key)
        if current.value != entry.value:
            plan.to_update.append(
                ResourceUpdate(id=current.id, key=current.key, value=entry.value)
            )
        else:
            plan.unchanged.append(entry.key)
        if current.order != order:
            plan.to_reorder.append(OrderRealignment(key=current.key, order=order))

    for record in existing_records:
        if record.key in visited:
            continue
        if mode is ReconcileMode.REPLACE:
            plan.to_delete.append(record)
        else:
            plan.untouched.append(record.key)

    return plan
