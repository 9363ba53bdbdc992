# src/locale_hub/infrastructure/db/engine.py
"""
异步引擎工厂。

- PostgreSQL：映射连接池参数（QueuePool）
- SQLite：NullPool，忽略不适用的池参数，并开启外键约束
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import NullPool

from locale_hub.config import LocaleHubConfig


def _is_sqlite(url: str) -> bool:
    return url.startswith("sqlite+aiosqlite") or url.startswith("sqlite://")


def _enable_sqlite_foreign_keys(dbapi_connection: Any, _record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_async_db_engine(cfg: LocaleHubConfig) -> AsyncEngine:
    """根据配置创建 AsyncEngine。"""
    url = cfg.database.url
    is_sqlite = _is_sqlite(url)

    kwargs: dict[str, Any] = {
        "echo": cfg.database.echo,
        "pool_pre_ping": cfg.db_pool_pre_ping,
    }

    if is_sqlite:
        kwargs["poolclass"] = NullPool
    else:
        if cfg.db_pool_size is not None:
            kwargs["pool_size"] = cfg.db_pool_size
        if cfg.db_max_overflow is not None:
            kwargs["max_overflow"] = cfg.db_max_overflow
        if cfg.db_pool_recycle is not None:
            kwargs["pool_recycle"] = cfg.db_pool_recycle
        kwargs["pool_timeout"] = cfg.db_pool_timeout

    engine = create_async_engine(url, **kwargs)
    if is_sqlite:
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine
