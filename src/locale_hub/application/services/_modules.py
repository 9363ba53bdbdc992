# src/locale_hub/application/services/_modules.py
"""模块管理的应用服务。"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from locale_hub.core.exceptions import ValidationError
from locale_hub.core.types import Module, ModuleListing

from ._lookups import require_module, require_project

if TYPE_CHECKING:
    from locale_hub.infrastructure.uow import UowFactory

logger = structlog.get_logger(__name__)

# 模块名会成为导出压缩包中的文件名
_FORBIDDEN_NAME_CHARS = ("/", "\\")


def _clean_name(name: str | None) -> str:
    name = (name or "").strip()
    if not name:
        raise ValidationError("模块名称不能为空。")
    if any(ch in name for ch in _FORBIDDEN_NAME_CHARS):
        raise ValidationError("模块名称不能包含路径分隔符。", name=name)
    return name


class ModuleService:
    def __init__(self, uow_factory: UowFactory):
        self._uow_factory = uow_factory

    async def list_modules(self, project_id: str) -> list[ModuleListing]:
        """列出项目下的模块，附带源语言下非空资源的数量。"""
        async with self._uow_factory() as uow:
            project = await require_project(uow, project_id)
            listings = []
            for module in await uow.modules.list_by_project(project_id):
                count = await uow.resources.count(
                    [module.id], project.source_language.id, exclude_empty=True
                )
                listings.append(ModuleListing(module=module, resource_count=count))
            return listings

    async def get_module(self, project_id: str, module_id: str) -> Module:
        async with self._uow_factory() as uow:
            return await require_module(uow, module_id, project_id)

    async def get_module_by_name(self, project_id: str, name: str) -> Module | None:
        async with self._uow_factory() as uow:
            await require_project(uow, project_id)
            return await uow.modules.get_by_name(project_id, name.strip())

    async def create_module(
        self, project_id: str, *, name: str, description: str | None = None
    ) -> Module:
        name = _clean_name(name)

        async with self._uow_factory() as uow:
            await require_project(uow, project_id)
            if await uow.modules.get_by_name(project_id, name) is not None:
                raise ValidationError(
                    f"模块名 '{name}' 在该项目中已存在。", project_id=project_id
                )
            module = await uow.modules.add(
                project_id=project_id, name=name, description=description
            )

        logger.info("模块已创建", project_id=project_id, module_id=module.id, name=name)
        return module

    async def update_module(
        self,
        project_id: str,
        module_id: str,
        *,
        name: str,
        description: str | None = None,
    ) -> Module:
        name = _clean_name(name)

        async with self._uow_factory() as uow:
            await require_module(uow, module_id, project_id)
            other = await uow.modules.get_by_name(project_id, name)
            if other is not None and other.id != module_id:
                raise ValidationError(
                    f"模块名 '{name}' 在该项目中已存在。", project_id=project_id
                )
            return await uow.modules.update(module_id, name=name, description=description)

    async def delete_module(self, project_id: str, module_id: str) -> None:
        async with self._uow_factory() as uow:
            await require_module(uow, module_id, project_id)
            deleted = await uow.resources.delete_for_modules([module_id])
            await uow.modules.delete(module_id)

        logger.info("模块已删除", module_id=module_id, resource_count=deleted)
