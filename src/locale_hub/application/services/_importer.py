# src/locale_hub/application/services/_importer.py
"""
表格导入的应用服务。

导入行的 key 必须属于模块的源键集，否则跳过（计入摘要，不视为错误）；
写入的 `order` 一律取自源语言记录，与行在表格中的位置无关。
`preview_import` 只计算摘要，`import_rows` 在一个事务内落库。
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

import structlog

from locale_hub.core.types import ImportRow, ImportSummary
from locale_hub.domain import (
    OrderIndex,
    ReconcileMode,
    ReconcilePlan,
    parse_csv,
    reconcile,
    rows_to_entries,
    summarize_import,
)

from ._lookups import require_language, require_module_context, require_target_language
from ._writes import apply_plan

if TYPE_CHECKING:
    from locale_hub.config import LocaleHubConfig
    from locale_hub.core.uow import IUnitOfWork
    from locale_hub.infrastructure.uow import UowFactory

logger = structlog.get_logger(__name__)


class ImportService:
    def __init__(self, uow_factory: UowFactory, config: LocaleHubConfig):
        self._uow_factory = uow_factory
        self._config = config

    def parse_table(
        self, content: str | bytes, *, header_rows: int | None = None
    ) -> list[ImportRow]:
        """按导入配置解析 CSV 内容。"""
        settings = self._config.importer
        return parse_csv(
            content,
            header_rows=settings.header_rows if header_rows is None else header_rows,
            delimiter=settings.delimiter,
            encoding=settings.encoding,
        )

    async def _plan(
        self,
        uow: IUnitOfWork,
        module_id: str,
        language_id: str,
        rows: Sequence[ImportRow],
    ) -> tuple[str, ReconcilePlan]:
        module, project = await require_module_context(uow, module_id)
        language = await require_language(uow, language_id)
        require_target_language(project, language)
        source = await uow.resources.list_for(module.id, project.source_language.id)
        existing = await uow.resources.list_for(module.id, language.id)
        plan = reconcile(
            existing,
            rows_to_entries(rows),
            mode=ReconcileMode.MERGE,
            order_index=OrderIndex.from_resources(source),
        )
        if plan.skipped:
            logger.warning(
                "导入行的 key 不在源键集中，已跳过。",
                module_id=module_id,
                language_code=language.code,
                skipped_keys=plan.skipped,
            )
        return module.id, plan

    async def preview_import(
        self, module_id: str, language_id: str, rows: Sequence[ImportRow]
    ) -> ImportSummary:
        async with self._uow_factory() as uow:
            _, plan = await self._plan(uow, module_id, language_id, rows)
        return summarize_import(rows, plan)

    async def import_rows(
        self, module_id: str, language_id: str, rows: Sequence[ImportRow]
    ) -> ImportSummary:
        async with self._uow_factory() as uow:
            resolved_module_id, plan = await self._plan(uow, module_id, language_id, rows)
            await apply_plan(
                uow, plan, module_id=resolved_module_id, language_id=language_id
            )

        summary = summarize_import(rows, plan, committed=True)
        logger.info(
            "表格导入已提交",
            module_id=module_id,
            added=summary.added,
            updated=summary.updated,
            skipped=summary.skipped_rows,
        )
        return summary
