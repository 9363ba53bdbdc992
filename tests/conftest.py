# tests/conftest.py
"""
Pytest 共享夹具。

核心 Fixtures:
- test_config: 指向临时 SQLite 文件的配置对象。
- app_container: 以 test_config 装配的 DI 容器，数据表已按 ORM 元数据创建。
- uow_factory: 从容器获取的 UoW 工厂，用于在测试中直接检查数据库。
- coordinator: 从容器获取的 Coordinator 实例，用于测试应用服务层。
- seeded: 预置语言、项目与模块的标准测试数据。
"""

from __future__ import annotations

from pathlib import Path
from typing import AsyncGenerator

import pytest
import pytest_asyncio

from locale_hub.application.coordinator import Coordinator
from locale_hub.bootstrap import create_container
from locale_hub.config import DatabaseSettings, LocaleHubConfig
from locale_hub.di.container import AppContainer
from locale_hub.infrastructure.db import create_schema, dispose_engine
from locale_hub.infrastructure.uow import UowFactory
from tests.helpers.factories import Seed, seed_project


def sqlite_url(path: Path) -> str:
    return f"sqlite+aiosqlite:///{path}"


@pytest.fixture
def test_config(tmp_path: Path) -> LocaleHubConfig:
    return LocaleHubConfig(
        database=DatabaseSettings(url=sqlite_url(tmp_path / "locale_hub_test.db"))
    )


@pytest_asyncio.fixture
async def app_container(
    test_config: LocaleHubConfig,
) -> AsyncGenerator[AppContainer, None]:
    container = create_container(test_config)
    engine = container.db_engine()
    await create_schema(engine)
    try:
        yield container
    finally:
        await dispose_engine(engine)


@pytest.fixture
def uow_factory(app_container: AppContainer) -> UowFactory:
    return app_container.uow_factory


@pytest.fixture
def coordinator(app_container: AppContainer) -> Coordinator:
    return app_container.coordinator()


@pytest_asyncio.fixture
async def seeded(coordinator: Coordinator) -> Seed:
    return await seed_project(coordinator)
