# src/locale_hub/infrastructure/persistence/repositories/_resource_repo.py
"""翻译资源仓库的 SQLAlchemy 实现。"""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import and_, delete, func, select, update
from sqlalchemy.orm import aliased

from locale_hub.core.types import NewResource, Resource
from locale_hub.core.uow import IResourceRepository
from locale_hub.infrastructure.db._schema import LhResource

from ._base_repo import BaseRepository, chunked


class SqlAlchemyResourceRepository(BaseRepository, IResourceRepository):
    async def list_for(self, module_id: str, language_id: str) -> list[Resource]:
        stmt = (
            select(LhResource)
            .where(
                LhResource.module_id == module_id,
                LhResource.language_id == language_id,
            )
            .order_by(LhResource.order, LhResource.key)
        )
        rows = (await self._session.execute(stmt)).scalars().all()
        return [Resource.from_orm_model(row) for row in rows]

    async def count(
        self,
        module_ids: Sequence[str],
        language_id: str,
        *,
        exclude_empty: bool = False,
    ) -> int:
        if not module_ids:
            return 0
        stmt = select(func.count(LhResource.id)).where(
            LhResource.module_id.in_(list(module_ids)),
            LhResource.language_id == language_id,
        )
        if exclude_empty:
            stmt = stmt.where(LhResource.value != "")
        return int((await self._session.execute(stmt)).scalar_one())

    async def count_translated(
        self,
        module_ids: Sequence[str],
        source_language_id: str,
        target_language_id: str,
    ) -> int:
        if not module_ids:
            return 0
        source = aliased(LhResource)
        stmt = (
            select(func.count(LhResource.id))
            .select_from(LhResource)
            .join(
                source,
                and_(
                    source.module_id == LhResource.module_id,
                    source.key == LhResource.key,
                    source.language_id == source_language_id,
                ),
            )
            .where(
                LhResource.module_id.in_(list(module_ids)),
                LhResource.language_id == target_language_id,
                LhResource.value != "",
            )
        )
        return int((await self._session.execute(stmt)).scalar_one())

    async def create_many(self, resources: Sequence[NewResource]) -> int:
        if not resources:
            return 0
        self._session.add_all(
            LhResource(
                module_id=r.module_id,
                language_id=r.language_id,
                key=r.key,
                value=r.value,
                order=r.order,
            )
            for r in resources
        )
        await self._session.flush()
        return len(resources)

    async def update_value(self, resource_id: str, value: str) -> None:
        await self._session.execute(
            update(LhResource)
            .where(LhResource.id == resource_id)
            .values(value=value, updated_at=func.now())
        )

    async def realign_order(self, module_id: str, key: str, order: int) -> int:
        result = await self._session.execute(
            update(LhResource)
            .where(LhResource.module_id == module_id, LhResource.key == key)
            .values(order=order)
        )
        return result.rowcount or 0

    async def delete_many(self, resource_ids: Sequence[str]) -> int:
        deleted = 0
        for chunk in chunked(list(resource_ids)):
            result = await self._session.execute(
                delete(LhResource).where(LhResource.id.in_(list(chunk)))
            )
            deleted += result.rowcount or 0
        return deleted

    async def delete_for_modules(
        self,
        module_ids: Sequence[str],
        language_ids: Sequence[str] | None = None,
    ) -> int:
        if not module_ids:
            return 0
        stmt = delete(LhResource).where(LhResource.module_id.in_(list(module_ids)))
        if language_ids is not None:
            if not language_ids:
                return 0
            stmt = stmt.where(LhResource.language_id.in_(list(language_ids)))
        result = await self._session.execute(stmt)
        return result.rowcount or 0

    async def retag_language(
        self, module_ids: Sequence[str], from_language_id: str, to_language_id: str
    ) -> int:
        if not module_ids:
            return 0
        result = await self._session.execute(
            update(LhResource)
            .where(
                LhResource.module_id.in_(list(module_ids)),
                LhResource.language_id == from_language_id,
            )
            .values(language_id=to_language_id)
        )
        return result.rowcount or 0
