# src/locale_hub/infrastructure/uow.py
"""
SQLAlchemy 单元工作 (Unit of Work) 的具体实现。

一个 UoW 对应一个事务：正常退出时提交，异常退出时回滚；
底层的 SQLAlchemyError 在回滚之后统一包装为 `StorageError`。
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

import structlog
from sqlalchemy.exc import SQLAlchemyError

from locale_hub.core.exceptions import StorageError
from locale_hub.core.uow import IUnitOfWork

from .persistence.repositories import (
    SqlAlchemyLanguageRepository,
    SqlAlchemyModuleRepository,
    SqlAlchemyProjectRepository,
    SqlAlchemyResourceRepository,
)

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

logger = structlog.get_logger(__name__)


class SqlAlchemyUnitOfWork(IUnitOfWork):
    def __init__(self, sessionmaker: "async_sessionmaker[AsyncSession]"):
        self._sessionmaker = sessionmaker
        self.session: "AsyncSession"

    async def __aenter__(self) -> "SqlAlchemyUnitOfWork":
        self.session = self._sessionmaker()
        self.languages = SqlAlchemyLanguageRepository(self.session)
        self.projects = SqlAlchemyProjectRepository(self.session)
        self.modules = SqlAlchemyModuleRepository(self.session)
        self.resources = SqlAlchemyResourceRepository(self.session)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        try:
            if exc_type is not None:
                await self.rollback()
                if isinstance(exc_val, SQLAlchemyError):
                    logger.error("事务失败，已回滚。", error=str(exc_val))
                    raise StorageError(f"存储操作失败: {exc_val}") from exc_val
                return
            try:
                await self.commit()
            except SQLAlchemyError as e:
                await self.rollback()
                logger.error("提交事务失败，已回滚。", error=str(e))
                raise StorageError(f"提交事务失败: {e}") from e
        finally:
            await self.session.close()

    async def commit(self) -> None:
        await self.session.commit()

    async def rollback(self) -> None:
        await self.session.rollback()


# 类型别名，用于依赖注入
UowFactory = Callable[[], IUnitOfWork]
