# src/locale_hub/infrastructure/persistence/repositories/_module_repo.py
"""模块仓库的 SQLAlchemy 实现。"""

from __future__ import annotations

from sqlalchemy import delete, select

from locale_hub.core.exceptions import NotFoundError
from locale_hub.core.types import Module
from locale_hub.core.uow import IModuleRepository
from locale_hub.infrastructure.db._schema import LhModule

from ._base_repo import BaseRepository


class SqlAlchemyModuleRepository(BaseRepository, IModuleRepository):
    async def list_by_project(self, project_id: str) -> list[Module]:
        stmt = (
            select(LhModule)
            .where(LhModule.project_id == project_id)
            .order_by(LhModule.name)
        )
        rows = (await self._session.execute(stmt)).scalars().all()
        return [Module.from_orm_model(row) for row in rows]

    async def get(self, module_id: str) -> Module | None:
        row = await self._session.get(LhModule, module_id)
        return Module.from_orm_model(row) if row else None

    async def get_by_name(self, project_id: str, name: str) -> Module | None:
        stmt = select(LhModule).where(
            LhModule.project_id == project_id, LhModule.name == name
        )
        row = (await self._session.execute(stmt)).scalar_one_or_none()
        return Module.from_orm_model(row) if row else None

    async def add(
        self, *, project_id: str, name: str, description: str | None
    ) -> Module:
        row = LhModule(project_id=project_id, name=name, description=description)
        self._session.add(row)
        await self._session.flush()
        return Module.from_orm_model(row)

    async def update(
        self, module_id: str, *, name: str, description: str | None
    ) -> Module:
        row = await self._session.get(LhModule, module_id)
        if row is None:
            raise NotFoundError("模块不存在。", module_id=module_id)
        row.name = name
        row.description = description
        await self._session.flush()
        return Module.from_orm_model(row)

    async def delete(self, module_id: str) -> None:
        await self._session.execute(delete(LhModule).where(LhModule.id == module_id))

    async def delete_by_project(self, project_id: str) -> None:
        await self._session.execute(
            delete(LhModule).where(LhModule.project_id == project_id)
        )
