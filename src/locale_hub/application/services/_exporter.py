# src/locale_hub/application/services/_exporter.py
"""导出服务：单模块 JSON 文档，或整个项目打包为 ZIP。"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from locale_hub.core.exceptions import NotFoundError
from locale_hub.core.types import ExportArchive, ExportDocument, Module, Project
from locale_hub.domain import assemble_module, render_json
from locale_hub.infrastructure.archive import build_archive

from ._lookups import require_language, require_module_context, require_project

if TYPE_CHECKING:
    from locale_hub.config import LocaleHubConfig
    from locale_hub.core.types import Language
    from locale_hub.core.uow import IUnitOfWork
    from locale_hub.infrastructure.uow import UowFactory

logger = structlog.get_logger(__name__)


class ExportService:
    def __init__(self, uow_factory: UowFactory, config: LocaleHubConfig):
        self._uow_factory = uow_factory
        self._config = config

    def _render(self, tree: dict) -> bytes:
        settings = self._config.export
        return render_json(
            tree, indent=settings.json_indent, ensure_ascii=settings.ensure_ascii
        )

    async def _assemble(
        self, uow: IUnitOfWork, project: Project, module: Module, language: Language
    ) -> tuple[dict, int]:
        source = await uow.resources.list_for(module.id, project.source_language.id)
        target = (
            source
            if language.id == project.source_language.id
            else await uow.resources.list_for(module.id, language.id)
        )
        return assemble_module(source, target), len(source)

    async def export_module(self, module_id: str, language_id: str) -> ExportDocument:
        async with self._uow_factory() as uow:
            module, project = await require_module_context(uow, module_id)
            language = await require_language(uow, language_id)
            tree, source_count = await self._assemble(uow, project, module, language)

        if source_count == 0:
            raise NotFoundError(
                "该模块没有源语言键，无法导出。", module_id=module_id
            )
        logger.info(
            "模块已导出", module_id=module_id, language_code=language.code,
            key_count=source_count,
        )
        return ExportDocument(
            module_name=module.name,
            language_code=language.code,
            filename=f"{module.name}.json",
            tree=tree,
            content=self._render(tree),
        )

    async def export_project(self, project_id: str, language_id: str) -> ExportArchive:
        """项目中的每个模块产出一个 `{模块名}.json` 条目；没有源键的模块导出为空对象。"""
        entries: dict[str, bytes] = {}
        async with self._uow_factory() as uow:
            project = await require_project(uow, project_id)
            language = await require_language(uow, language_id)
            for module in await uow.modules.list_by_project(project.id):
                tree, _ = await self._assemble(uow, project, module, language)
                entries[f"{module.name}.json"] = self._render(tree)

        logger.info(
            "项目已导出",
            project_id=project_id,
            language_code=language.code,
            module_count=len(entries),
        )
        return ExportArchive(
            filename=f"{project.name}.{language.code}.zip",
            entries=list(entries),
            content=build_archive(entries),
        )
