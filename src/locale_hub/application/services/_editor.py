# src/locale_hub/application/services/_editor.py
"""编辑器视图：源文本与目标译文按源语言顺序并列展示，保存时以合并模式对账。"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

import structlog

from locale_hub.core.types import EditorRow, ReconcileSummary
from locale_hub.domain import (
    FlatEntry,
    OrderIndex,
    ReconcileMode,
    reconcile,
    sort_by_order,
)

from ._lookups import require_language, require_module_context, require_target_language
from ._writes import apply_plan

if TYPE_CHECKING:
    from locale_hub.infrastructure.uow import UowFactory

logger = structlog.get_logger(__name__)


class EditorService:
    def __init__(self, uow_factory: UowFactory):
        self._uow_factory = uow_factory

    async def get_editor_rows(self, module_id: str, language_id: str) -> list[EditorRow]:
        async with self._uow_factory() as uow:
            module, project = await require_module_context(uow, module_id)
            language = await require_language(uow, language_id)
            require_target_language(project, language)
            source = await uow.resources.list_for(module.id, project.source_language.id)
            target = await uow.resources.list_for(module.id, language.id)

        translations = {r.key: r.value for r in target}
        return [
            EditorRow(
                key=r.key,
                source_value=r.value,
                value=translations.get(r.key, ""),
                order=r.order,
            )
            for r in sort_by_order(source)
        ]

    async def save_editor_rows(
        self,
        module_id: str,
        language_id: str,
        rows: Sequence[EditorRow | Mapping[str, Any]],
    ) -> ReconcileSummary:
        """
        保存编辑器提交的译文。

        客户端提交的 `order` 被忽略，一律取自源语言；不在源键集中的 key 被跳过。
        """
        entries = [
            FlatEntry(key=row.key, value=row.value)
            if isinstance(row, EditorRow)
            else FlatEntry(key=str(row["key"]), value=str(row.get("value") or ""))
            for row in rows
        ]

        async with self._uow_factory() as uow:
            module, project = await require_module_context(uow, module_id)
            language = await require_language(uow, language_id)
            require_target_language(project, language)
            source = await uow.resources.list_for(module.id, project.source_language.id)
            existing = await uow.resources.list_for(module.id, language.id)
            plan = reconcile(
                existing,
                entries,
                mode=ReconcileMode.MERGE,
                order_index=OrderIndex.from_resources(source),
            )
            await apply_plan(uow, plan, module_id=module.id, language_id=language.id)

        if plan.skipped:
            logger.warning(
                "编辑器提交中存在不属于源键集的 key，已跳过。",
                module_id=module_id,
                skipped_keys=plan.skipped,
            )
        summary = plan.summary()
        logger.info("编辑器译文已保存", module_id=module_id, **summary.model_dump())
        return summary
