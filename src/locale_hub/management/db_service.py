# src/locale_hub/management/db_service.py
"""
数据库管理服务：Alembic 迁移、按 ORM 元数据直接建表、状态检查。
这是所有数据库运维操作的核心逻辑封装，属于项目的“管理平面”。
"""

from __future__ import annotations

from pathlib import Path

import structlog
from alembic import command
from alembic.config import Config as AlembicConfig
from alembic.util import CommandError
from sqlalchemy import inspect

from locale_hub.config import LocaleHubConfig
from locale_hub.core.exceptions import ConfigurationError, StorageError
from locale_hub.infrastructure.db import (
    create_async_db_engine,
    create_schema,
    dispose_engine,
)

logger = structlog.get_logger(__name__)

EXPECTED_TABLES = ("languages", "projects", "project_languages", "modules", "resources")


def find_alembic_ini(start: Path | None = None) -> Path:
    """从给定目录（默认当前目录）与包所在位置向上查找 alembic.ini。"""
    candidates = [start or Path.cwd(), Path(__file__).resolve().parent]
    for base in candidates:
        for directory in (base, *base.parents):
            ini = directory / "alembic.ini"
            if ini.is_file():
                return ini
    raise ConfigurationError("找不到 alembic.ini。", searched=[str(c) for c in candidates])


class DbService:
    """封装数据库迁移与初始化操作。"""

    def __init__(self, config: LocaleHubConfig, alembic_ini_path: Path | None = None):
        self.config = config
        self.alembic_ini_path = alembic_ini_path

    def _alembic_config(self) -> AlembicConfig:
        ini = self.alembic_ini_path or find_alembic_ini()
        cfg = AlembicConfig(str(ini))
        cfg.set_main_option("sqlalchemy.url", self.config.database.url.replace("%", "%%"))
        cfg.attributes["skip_logging_config"] = True
        return cfg

    def migrate(self, revision: str = "head") -> None:
        """运行 Alembic 迁移（同步调用；env.py 内部自行驱动事件循环）。"""
        try:
            command.upgrade(self._alembic_config(), revision)
        except CommandError as e:
            raise StorageError(f"数据库迁移失败: {e}") from e
        logger.info("数据库迁移完成", revision=revision)

    async def init_schema(self) -> None:
        """不经迁移，直接按 ORM 元数据建表。"""
        engine = create_async_db_engine(self.config)
        try:
            await create_schema(engine)
        finally:
            await dispose_engine(engine)
        logger.info("数据库表已创建")

    async def missing_tables(self) -> list[str]:
        engine = create_async_db_engine(self.config)
        try:
            async with engine.connect() as conn:
                existing = await conn.run_sync(
                    lambda sync_conn: set(inspect(sync_conn).get_table_names())
                )
        finally:
            await dispose_engine(engine)
        return [name for name in EXPECTED_TABLES if name not in existing]
