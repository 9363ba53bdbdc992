# src/locale_hub/infrastructure/db/__init__.py
"""
数据库公共 API。

仅从本包导入公共函数，不直接引用内部模块路径。
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine

from .base import Base, metadata
from .engine import create_async_db_engine
from .session import create_async_sessionmaker


async def dispose_engine(engine: AsyncEngine) -> None:
    """释放底层连接池资源；在测试 / 进程退出时由上层显式 await。"""
    await engine.dispose()


async def create_schema(engine: AsyncEngine) -> None:
    """直接按 ORM 元数据建表（迁移不可用时的回退路径，以及测试）。"""
    from . import _schema  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)


__all__ = [
    "Base",
    "metadata",
    "create_async_db_engine",
    "create_async_sessionmaker",
    "create_schema",
    "dispose_engine",
]
