# src/locale_hub/application/services/_writes.py
"""把对账计划落库。调用方负责提供 UoW（即事务边界）。"""

from __future__ import annotations

from typing import TYPE_CHECKING

from locale_hub.core.types import NewResource
from locale_hub.domain import ReconcileMode

if TYPE_CHECKING:
    from locale_hub.core.uow import IUnitOfWork
    from locale_hub.domain import ReconcilePlan


async def apply_plan(
    uow: IUnitOfWork, plan: ReconcilePlan, *, module_id: str, language_id: str
) -> None:
    # 先删后增，避免 (module, language, key) 唯一约束冲突
    if plan.to_delete:
        await uow.resources.delete_many([record.id for record in plan.to_delete])

    await uow.resources.create_many(
        [
            NewResource(
                module_id=module_id,
                language_id=language_id,
                key=entry.key,
                value=entry.value,
                order=entry.order if entry.order is not None else 0,
            )
            for entry in plan.to_add
        ]
    )

    # 源语言重新加入的 key 可能仍有孤立的目标记录，其顺序须跟随新的源顺序
    if plan.mode is ReconcileMode.REPLACE:
        for entry in plan.to_add:
            await uow.resources.realign_order(
                module_id, entry.key, entry.order if entry.order is not None else 0
            )

    for change in plan.to_update:
        await uow.resources.update_value(change.id, change.value)

    # 顺序属于 key 而不是某个语言：同一模块内所有语言一起修正
    for realignment in plan.to_reorder:
        await uow.resources.realign_order(module_id, realignment.key, realignment.order)
