# src/locale_hub/infrastructure/persistence/repositories/_language_repo.py
"""语言仓库的 SQLAlchemy 实现。"""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import select

from locale_hub.core.types import Language
from locale_hub.core.uow import ILanguageRepository
from locale_hub.infrastructure.db._schema import LhLanguage

from ._base_repo import BaseRepository


class SqlAlchemyLanguageRepository(BaseRepository, ILanguageRepository):
    async def list_all(self) -> list[Language]:
        stmt = select(LhLanguage).order_by(LhLanguage.code)
        rows = (await self._session.execute(stmt)).scalars().all()
        return [Language.from_orm_model(row) for row in rows]

    async def get(self, language_id: str) -> Language | None:
        row = await self._session.get(LhLanguage, language_id)
        return Language.from_orm_model(row) if row else None

    async def get_by_code(self, code: str) -> Language | None:
        stmt = select(LhLanguage).where(LhLanguage.code == code)
        row = (await self._session.execute(stmt)).scalar_one_or_none()
        return Language.from_orm_model(row) if row else None

    async def get_many(self, language_ids: Sequence[str]) -> list[Language]:
        """按传入顺序返回存在的语言，不存在的 id 被忽略。"""
        if not language_ids:
            return []
        stmt = select(LhLanguage).where(LhLanguage.id.in_(list(language_ids)))
        found = {
            row.id: Language.from_orm_model(row)
            for row in (await self._session.execute(stmt)).scalars()
        }
        return [found[i] for i in language_ids if i in found]

    async def add(self, *, name: str, code: str) -> Language:
        row = LhLanguage(name=name, code=code)
        self._session.add(row)
        await self._session.flush()
        return Language.from_orm_model(row)
