# src/locale_hub/application/services/_source_resources.py
"""
源语言资源的应用服务：上传（以替换模式对账）、列出、逐条编辑与删除。

源语言的键集是权威的：它决定导出时出现哪些 key、以什么顺序出现，
以及完成度的分母。
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

import structlog

from locale_hub.core.exceptions import NotFoundError
from locale_hub.core.types import ReconcileSummary, Resource, SourceValueUpdate
from locale_hub.domain import FlatEntry, ReconcileMode, flatten, reconcile

from ._lookups import require_module_context
from ._writes import apply_plan

if TYPE_CHECKING:
    from locale_hub.infrastructure.uow import UowFactory

logger = structlog.get_logger(__name__)


class SourceResourceService:
    def __init__(self, uow_factory: UowFactory):
        self._uow_factory = uow_factory

    async def upload_source_tree(
        self, module_id: str, tree: Mapping[str, Any]
    ) -> ReconcileSummary:
        """上传嵌套 JSON；结构校验在任何写入之前完成。"""
        entries = flatten(tree)
        return await self.upload_source_entries(module_id, entries)

    async def upload_source_entries(
        self, module_id: str, entries: Sequence[FlatEntry]
    ) -> ReconcileSummary:
        """上传扁平记录；调用方给出的 `order` 原样保留，缺失的按位置分配。"""
        async with self._uow_factory() as uow:
            module, project = await require_module_context(uow, module_id)
            language_id = project.source_language.id
            existing = await uow.resources.list_for(module.id, language_id)
            plan = reconcile(existing, entries, mode=ReconcileMode.REPLACE)
            await apply_plan(uow, plan, module_id=module.id, language_id=language_id)

        summary = plan.summary()
        logger.info(
            "源语言资源已对账",
            module_id=module_id,
            **summary.model_dump(),
        )
        return summary

    async def list_source_resources(self, module_id: str) -> list[Resource]:
        async with self._uow_factory() as uow:
            module, project = await require_module_context(uow, module_id)
            return await uow.resources.list_for(module.id, project.source_language.id)

    async def source_keys(self, module_id: str) -> list[str]:
        """按源语言顺序返回模块的键集。"""
        return [r.key for r in await self.list_source_resources(module_id)]

    async def update_source_values(
        self, module_id: str, updates: Sequence[SourceValueUpdate]
    ) -> list[Resource]:
        async with self._uow_factory() as uow:
            module, project = await require_module_context(uow, module_id)
            language_id = project.source_language.id
            known = {r.id for r in await uow.resources.list_for(module.id, language_id)}
            unknown = [u.id for u in updates if u.id not in known]
            if unknown:
                raise NotFoundError(
                    "资源不属于该模块的源语言。", module_id=module_id, resource_ids=unknown
                )
            for change in updates:
                await uow.resources.update_value(change.id, change.value)
            updated_ids = {u.id for u in updates}
            resources = [
                r
                for r in await uow.resources.list_for(module.id, language_id)
                if r.id in updated_ids
            ]

        logger.info("源语言资源已更新", module_id=module_id, count=len(resources))
        return resources

    async def delete_source_resources(
        self, module_id: str, resource_ids: Sequence[str]
    ) -> int:
        """删除模块源语言下的指定资源；不属于该范围的 id 被忽略。"""
        async with self._uow_factory() as uow:
            module, project = await require_module_context(uow, module_id)
            existing = await uow.resources.list_for(module.id, project.source_language.id)
            wanted = set(resource_ids)
            deleted = await uow.resources.delete_many(
                [r.id for r in existing if r.id in wanted]
            )

        logger.info("源语言资源已删除", module_id=module_id, count=deleted)
        return deleted
