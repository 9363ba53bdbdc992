# src/locale_hub/application/coordinator.py
"""
Locale Hub 应用服务总协调器。
这是一个高级门面，将调用委托给具体的应用服务；CLI（以及未来的
HTTP 层）只和它打交道。
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from locale_hub.core.types import (
        EditorRow,
        ExportArchive,
        ExportDocument,
        ImportRow,
        ImportSummary,
        Language,
        LanguageProgress,
        Module,
        ModuleListing,
        ModuleProgress,
        Project,
        ProjectListing,
        ReconcileSummary,
        Resource,
        SourceValueUpdate,
    )
    from locale_hub.domain import FlatEntry

    from .services import (
        EditorService,
        ExportService,
        ImportService,
        LanguageService,
        ModuleService,
        ProjectService,
        SourceResourceService,
        StatisticsService,
    )


class Coordinator:
    """高级门面，接收已初始化的服务实例。"""

    def __init__(
        self,
        language_service: LanguageService,
        project_service: ProjectService,
        module_service: ModuleService,
        source_service: SourceResourceService,
        editor_service: EditorService,
        import_service: ImportService,
        export_service: ExportService,
        statistics_service: StatisticsService,
    ):
        self.language_service = language_service
        self.project_service = project_service
        self.module_service = module_service
        self.source_service = source_service
        self.editor_service = editor_service
        self.import_service = import_service
        self.export_service = export_service
        self.statistics_service = statistics_service

    # --- 语言 ---

    async def list_languages(self) -> list[Language]:
        return await self.language_service.list_languages()

    async def get_language(self, language_id: str) -> Language:
        return await self.language_service.get_language(language_id)

    async def create_language(self, name: str, code: str) -> Language:
        return await self.language_service.create_language(name, code)

    # --- 项目 ---

    async def list_projects(self) -> list[ProjectListing]:
        return await self.project_service.list_projects()

    async def get_project(self, project_id: str) -> Project:
        return await self.project_service.get_project(project_id)

    async def create_project(self, **kwargs: Any) -> Project:
        return await self.project_service.create_project(**kwargs)

    async def update_project(self, project_id: str, **kwargs: Any) -> Project:
        return await self.project_service.update_project(project_id, **kwargs)

    async def delete_project(self, project_id: str) -> None:
        await self.project_service.delete_project(project_id)

    # --- 模块 ---

    async def list_modules(self, project_id: str) -> list[ModuleListing]:
        return await self.module_service.list_modules(project_id)

    async def get_module(self, project_id: str, module_id: str) -> Module:
        return await self.module_service.get_module(project_id, module_id)

    async def create_module(
        self, project_id: str, name: str, description: str | None = None
    ) -> Module:
        return await self.module_service.create_module(
            project_id, name=name, description=description
        )

    async def update_module(
        self,
        project_id: str,
        module_id: str,
        name: str,
        description: str | None = None,
    ) -> Module:
        return await self.module_service.update_module(
            project_id, module_id, name=name, description=description
        )

    async def delete_module(self, project_id: str, module_id: str) -> None:
        await self.module_service.delete_module(project_id, module_id)

    # --- 源语言资源 ---

    async def upload_source_tree(
        self, module_id: str, tree: Mapping[str, Any]
    ) -> ReconcileSummary:
        return await self.source_service.upload_source_tree(module_id, tree)

    async def upload_source_entries(
        self, module_id: str, entries: Sequence[FlatEntry]
    ) -> ReconcileSummary:
        return await self.source_service.upload_source_entries(module_id, entries)

    async def list_source_resources(self, module_id: str) -> list[Resource]:
        return await self.source_service.list_source_resources(module_id)

    async def source_keys(self, module_id: str) -> list[str]:
        return await self.source_service.source_keys(module_id)

    async def update_source_values(
        self, module_id: str, updates: Sequence[SourceValueUpdate]
    ) -> list[Resource]:
        return await self.source_service.update_source_values(module_id, updates)

    async def delete_source_resources(
        self, module_id: str, resource_ids: Sequence[str]
    ) -> int:
        return await self.source_service.delete_source_resources(module_id, resource_ids)

    # --- 编辑器 ---

    async def get_editor_rows(self, module_id: str, language_id: str) -> list[EditorRow]:
        return await self.editor_service.get_editor_rows(module_id, language_id)

    async def save_editor_rows(
        self, module_id: str, language_id: str, rows: Sequence[Any]
    ) -> ReconcileSummary:
        return await self.editor_service.save_editor_rows(module_id, language_id, rows)

    # --- 表格导入 ---

    def parse_table(
        self, content: str | bytes, *, header_rows: int | None = None
    ) -> list[ImportRow]:
        return self.import_service.parse_table(content, header_rows=header_rows)

    async def preview_import(
        self, module_id: str, language_id: str, rows: Sequence[ImportRow]
    ) -> ImportSummary:
        return await self.import_service.preview_import(module_id, language_id, rows)

    async def import_rows(
        self, module_id: str, language_id: str, rows: Sequence[ImportRow]
    ) -> ImportSummary:
        return await self.import_service.import_rows(module_id, language_id, rows)

    # --- 导出 ---

    async def export_module(self, module_id: str, language_id: str) -> ExportDocument:
        return await self.export_service.export_module(module_id, language_id)

    async def export_project(self, project_id: str, language_id: str) -> ExportArchive:
        return await self.export_service.export_project(project_id, language_id)

    # --- 进度统计 ---

    async def module_progress(
        self, project_id: str, language_id: str
    ) -> list[ModuleProgress]:
        return await self.statistics_service.module_progress(project_id, language_id)

    async def language_progress(self, project_id: str) -> list[LanguageProgress]:
        return await self.statistics_service.language_progress(project_id)

    # --- 按可读标识解析（CLI 使用） ---

    async def get_language_by_code(self, code: str) -> Language | None:
        return await self.language_service.get_language_by_code(code)

    async def get_project_by_identifier(self, identifier: str) -> Project:
        return await self.project_service.get_project_by_identifier(identifier)

    async def get_module_by_name(self, project_id: str, name: str) -> Module | None:
        return await self.module_service.get_module_by_name(project_id, name)
