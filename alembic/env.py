# alembic/env.py
"""
Alembic 环境配置（异步引擎）。

- 元数据优先使用 `config.attributes["target_metadata"]`（测试注入），
  否则从 `locale_hub.infrastructure.db._schema` 导入。
- 数据库 URL 优先使用 `sqlalchemy.url`（由 DbService 写入），
  否则回退到 LocaleHubConfig；运行期与迁移共用同一个异步驱动。
"""

from __future__ import annotations

import asyncio
from logging.config import fileConfig

import structlog
from alembic import context
from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine

logger = structlog.get_logger(__name__)

config = context.config

if config.config_file_name is not None and not config.attributes.get(
    "skip_logging_config"
):
    fileConfig(config.config_file_name, disable_existing_loggers=False)

target_metadata = config.attributes.get("target_metadata")
if target_metadata is None:
    from locale_hub.infrastructure.db import _schema  # noqa: F401
    from locale_hub.infrastructure.db.base import metadata as target_metadata


def _database_url() -> str:
    url = config.get_main_option("sqlalchemy.url")
    if url and url.strip():
        return url
    from locale_hub.config import LocaleHubConfig

    return LocaleHubConfig().database.url


def run_migrations_offline() -> None:
    """离线模式：只生成 SQL，不连接数据库。"""
    context.configure(
        url=_database_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        render_as_batch=True,
    )
    with context.begin_transaction():
        context.run_migrations()


def _do_run_migrations(connection: Connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        render_as_batch=connection.dialect.name == "sqlite",
    )
    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    url = _database_url()
    logger.debug("在线迁移", dialect=url.split(":", 1)[0])
    engine = create_async_engine(url, poolclass=pool.NullPool)
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_do_run_migrations)
            await connection.commit()
    finally:
        await engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
