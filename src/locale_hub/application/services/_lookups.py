# src/locale_hub/application/services/_lookups.py
"""各服务共用的实体解析：找不到时抛 NotFoundError，语言角色不符时抛 ValidationError。"""

from __future__ import annotations

from typing import TYPE_CHECKING

from locale_hub.core.exceptions import NotFoundError, ValidationError
from locale_hub.core.types import Language, Module, Project

if TYPE_CHECKING:
    from locale_hub.core.uow import IUnitOfWork


async def require_project(uow: IUnitOfWork, project_id: str) -> Project:
    project = await uow.projects.get(project_id)
    if project is None:
        raise NotFoundError("项目不存在。", project_id=project_id)
    return project


async def require_language(uow: IUnitOfWork, language_id: str) -> Language:
    language = await uow.languages.get(language_id)
    if language is None:
        raise NotFoundError("语言不存在。", language_id=language_id)
    return language


async def require_module(
    uow: IUnitOfWork, module_id: str, project_id: str | None = None
) -> Module:
    """解析模块；给定 `project_id` 时模块必须属于该项目。"""
    module = await uow.modules.get(module_id)
    if module is None or (project_id is not None and module.project_id != project_id):
        raise NotFoundError("模块不存在。", module_id=module_id, project_id=project_id)
    return module


async def require_module_context(
    uow: IUnitOfWork, module_id: str
) -> tuple[Module, Project]:
    module = await require_module(uow, module_id)
    project = await require_project(uow, module.project_id)
    return module, project


def require_target_language(project: Project, language: Language) -> None:
    """目标语言写入 / 读取的前置校验。"""
    if language.id == project.source_language.id:
        raise ValidationError(
            "不能对项目的源语言执行目标语言操作。",
            project_id=project.id,
            language_code=language.code,
        )
    if all(t.language.id != language.id for t in project.target_languages):
        raise ValidationError(
            "该语言不是项目的目标语言。",
            project_id=project.id,
            language_code=language.code,
        )
