# src/locale_hub/application/services/_projects.py
"""
项目管理的应用服务。

项目更新与删除涉及多张表的级联修改，全部在一个 UoW 内完成。
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

import structlog

from locale_hub.core.exceptions import NotFoundError, ValidationError
from locale_hub.core.types import Project, ProjectListing

from ._lookups import require_project

if TYPE_CHECKING:
    from locale_hub.core.uow import IUnitOfWork
    from locale_hub.infrastructure.uow import UowFactory

logger = structlog.get_logger(__name__)


def _required(value: str | None, field: str) -> str:
    cleaned = (value or "").strip()
    if not cleaned:
        raise ValidationError(f"字段 '{field}' 不能为空。", field=field)
    return cleaned


async def _validate_languages(
    uow: IUnitOfWork, source_language_id: str, target_language_ids: Sequence[str]
) -> list[str]:
    """校验源语言与目标语言，返回去重后（保持顺序）的目标语言 id。"""
    targets = list(dict.fromkeys(target_language_ids))
    if not targets:
        raise ValidationError("项目至少需要一个目标语言。")
    if source_language_id in targets:
        raise ValidationError(
            "源语言不能同时作为目标语言。", language_id=source_language_id
        )
    if await uow.languages.get(source_language_id) is None:
        raise NotFoundError("源语言不存在。", language_id=source_language_id)
    found = {lang.id for lang in await uow.languages.get_many(targets)}
    missing = [lang_id for lang_id in targets if lang_id not in found]
    if missing:
        raise NotFoundError("目标语言不存在。", language_ids=missing)
    return targets


class ProjectService:
    def __init__(self, uow_factory: UowFactory):
        self._uow_factory = uow_factory

    async def list_projects(self) -> list[ProjectListing]:
        async with self._uow_factory() as uow:
            listings: list[ProjectListing] = []
            for project in await uow.projects.list_all():
                module_ids = [m.id for m in await uow.modules.list_by_project(project.id)]
                resource_count = await uow.resources.count(
                    module_ids, project.source_language.id, exclude_empty=True
                )
                listings.append(
                    ProjectListing(
                        project=project,
                        resource_count=resource_count,
                        language_count=len(project.target_languages),
                    )
                )
            return listings

    async def get_project(self, project_id: str) -> Project:
        async with self._uow_factory() as uow:
            return await require_project(uow, project_id)

    async def get_project_by_identifier(self, identifier: str) -> Project:
        async with self._uow_factory() as uow:
            project = await uow.projects.get_by_identifier(identifier)
            if project is None:
                raise NotFoundError("项目不存在。", identifier=identifier)
            return project

    async def create_project(
        self,
        *,
        name: str,
        identifier: str,
        source_language_id: str,
        target_language_ids: Sequence[str],
        description: str | None = None,
    ) -> Project:
        name = _required(name, "name")
        identifier = _required(identifier, "identifier")
        source_language_id = _required(source_language_id, "source_language_id")

        async with self._uow_factory() as uow:
            targets = await _validate_languages(
                uow, source_language_id, target_language_ids
            )
            if await uow.projects.get_by_identifier(identifier) is not None:
                raise ValidationError(
                    f"项目标识 '{identifier}' 已被使用。", identifier=identifier
                )
            project_id = await uow.projects.add(
                name=name,
                identifier=identifier,
                description=description,
                source_language_id=source_language_id,
                target_language_ids=targets,
            )
            project = await require_project(uow, project_id)

        logger.info("项目已创建", project_id=project.id, identifier=identifier)
        return project

    async def update_project(
        self,
        project_id: str,
        *,
        name: str,
        identifier: str,
        source_language_id: str,
        target_language_ids: Sequence[str],
        description: str | None = None,
    ) -> Project:
        """
        更新项目信息与语言配置。

        - 目标语言按传入顺序重写为 1..n；
        - 被移除的目标语言，其在本项目各模块下的资源一并删除；
        - 源语言变更时，先删除新源语言下已有的资源，再把旧源语言记录改标为新源语言。
        """
        name = _required(name, "name")
        identifier = _required(identifier, "identifier")
        source_language_id = _required(source_language_id, "source_language_id")

        async with self._uow_factory() as uow:
            current = await require_project(uow, project_id)
            targets = await _validate_languages(
                uow, source_language_id, target_language_ids
            )
            other = await uow.projects.get_by_identifier(identifier)
            if other is not None and other.id != project_id:
                raise ValidationError(
                    f"项目标识 '{identifier}' 已被使用。", identifier=identifier
                )

            module_ids = [m.id for m in await uow.modules.list_by_project(project_id)]
            old_targets = [t.language.id for t in current.target_languages]
            old_source = current.source_language.id

            removed = [
                lang_id
                for lang_id in old_targets
                if lang_id not in targets and lang_id != source_language_id
            ]
            removed_count = await uow.resources.delete_for_modules(module_ids, removed)

            retagged = 0
            if source_language_id != old_source:
                await uow.resources.delete_for_modules(module_ids, [source_language_id])
                retagged = await uow.resources.retag_language(
                    module_ids, old_source, source_language_id
                )

            await uow.projects.update(
                project_id,
                name=name,
                identifier=identifier,
                description=description,
                source_language_id=source_language_id,
            )
            await uow.projects.replace_target_languages(project_id, targets)
            project = await require_project(uow, project_id)

        logger.info(
            "项目已更新",
            project_id=project_id,
            removed_languages=removed,
            removed_resources=removed_count,
            retagged_resources=retagged,
        )
        return project

    async def delete_project(self, project_id: str) -> None:
        async with self._uow_factory() as uow:
            await require_project(uow, project_id)
            module_ids = [m.id for m in await uow.modules.list_by_project(project_id)]
            deleted = await uow.resources.delete_for_modules(module_ids)
            await uow.modules.delete_by_project(project_id)
            await uow.projects.delete(project_id)

        logger.info(
            "项目已删除",
            project_id=project_id,
            module_count=len(module_ids),
            resource_count=deleted,
        )
