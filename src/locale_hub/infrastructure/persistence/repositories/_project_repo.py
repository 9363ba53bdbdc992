# src/locale_hub/infrastructure/persistence/repositories/_project_repo.py
"""项目仓库的 SQLAlchemy 实现。"""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import delete, select, update

from locale_hub.core.exceptions import NotFoundError
from locale_hub.core.types import Language, Project, TargetLanguage
from locale_hub.core.uow import IProjectRepository
from locale_hub.infrastructure.db._schema import (
    LhLanguage,
    LhProject,
    LhProjectLanguage,
)

from ._base_repo import BaseRepository


class SqlAlchemyProjectRepository(BaseRepository, IProjectRepository):
    async def _to_dto(self, row: LhProject) -> Project:
        source = await self._session.get(LhLanguage, row.source_language_id)
        if source is None:
            raise NotFoundError(
                "项目的源语言不存在。", project_id=row.id,
                language_id=row.source_language_id,
            )
        stmt = (
            select(LhLanguage, LhProjectLanguage.order)
            .join(LhProjectLanguage, LhProjectLanguage.language_id == LhLanguage.id)
            .where(LhProjectLanguage.project_id == row.id)
            .order_by(LhProjectLanguage.order)
        )
        targets = [
            TargetLanguage(language=Language.from_orm_model(lang), order=order)
            for lang, order in (await self._session.execute(stmt)).all()
        ]
        return Project(
            id=row.id,
            name=row.name,
            identifier=row.identifier,
            description=row.description,
            source_language=Language.from_orm_model(source),
            target_languages=targets,
        )

    async def list_all(self) -> list[Project]:
        stmt = select(LhProject).order_by(LhProject.created_at, LhProject.name)
        rows = (await self._session.execute(stmt)).scalars().all()
        return [await self._to_dto(row) for row in rows]

    async def get(self, project_id: str) -> Project | None:
        row = await self._session.get(LhProject, project_id)
        return await self._to_dto(row) if row else None

    async def get_by_identifier(self, identifier: str) -> Project | None:
        stmt = select(LhProject).where(LhProject.identifier == identifier)
        row = (await self._session.execute(stmt)).scalar_one_or_none()
        return await self._to_dto(row) if row else None

    async def add(
        self,
        *,
        name: str,
        identifier: str,
        description: str | None,
        source_language_id: str,
        target_language_ids: Sequence[str],
    ) -> str:
        row = LhProject(
            name=name,
            identifier=identifier,
            source_language_id=source_language_id,
            description=description,
        )
        self._session.add(row)
        await self._session.flush()
        await self.replace_target_languages(row.id, target_language_ids)
        return row.id

    async def update(
        self,
        project_id: str,
        *,
        name: str,
        identifier: str,
        description: str | None,
        source_language_id: str,
    ) -> None:
        stmt = (
            update(LhProject)
            .where(LhProject.id == project_id)
            .values(
                name=name,
                identifier=identifier,
                description=description,
                source_language_id=source_language_id,
            )
        )
        await self._session.execute(stmt)

    async def replace_target_languages(
        self, project_id: str, language_ids: Sequence[str]
    ) -> None:
        await self._session.execute(
            delete(LhProjectLanguage).where(LhProjectLanguage.project_id == project_id)
        )
        self._session.add_all(
            LhProjectLanguage(project_id=project_id, language_id=lang_id, order=n)
            for n, lang_id in enumerate(language_ids, start=1)
        )
        await self._session.flush()

    async def delete(self, project_id: str) -> None:
        await self._session.execute(
            delete(LhProjectLanguage).where(LhProjectLanguage.project_id == project_id)
        )
        await self._session.execute(delete(LhProject).where(LhProject.id == project_id))
