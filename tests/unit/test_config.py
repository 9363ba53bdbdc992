# tests/unit/test_config.py
"""测试配置模型与引导程序的配置加载。"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from locale_hub.bootstrap import create_app_config, create_container
from locale_hub.config import DatabaseSettings, LocaleHubConfig
from locale_hub.core.exceptions import ConfigurationError

_ENV_KEYS = (
    "LOCALEHUB_DATABASE__URL",
    "LOCALEHUB_LOGGING__FORMAT",
    "LOCALEHUB_LOGGING__LEVEL",
    "LOCALEHUB_IMPORTER__HEADER_ROWS",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults():
    cfg = LocaleHubConfig()

    assert cfg.database.url == "sqlite+aiosqlite:///localehub.db"
    assert cfg.logging.format == "console"
    assert cfg.export.json_indent == 2
    assert cfg.export.ensure_ascii is False
    assert cfg.importer.header_rows == 2


def test_nested_env_overrides(monkeypatch):
    monkeypatch.setenv("LOCALEHUB_DATABASE__URL", "sqlite+aiosqlite:///other.db")
    monkeypatch.setenv("LOCALEHUB_LOGGING__FORMAT", "json")
    monkeypatch.setenv("LOCALEHUB_IMPORTER__HEADER_ROWS", "1")

    cfg = LocaleHubConfig()

    assert cfg.database.url == "sqlite+aiosqlite:///other.db"
    assert cfg.logging.format == "json"
    assert cfg.importer.header_rows == 1


@pytest.mark.parametrize(
    "url", ["sqlite:///sync.db", "postgresql+psycopg://u@h/db", "not a url"]
)
def test_database_url_requires_async_driver(url):
    with pytest.raises(PydanticValidationError):
        DatabaseSettings(url=url)


def test_postgres_asyncpg_url_is_accepted():
    url = "postgresql+asyncpg://user:pw@localhost:5432/locales"
    assert DatabaseSettings(url=url).url == url


def test_create_app_config_loads_env_test_in_test_mode(tmp_path, monkeypatch):
    # 先经 monkeypatch 登记，测试结束后 dotenv 写入的值会被还原
    monkeypatch.setenv("LOCALEHUB_DATABASE__URL", "sqlite+aiosqlite:///from-env.db")
    (tmp_path / ".env.test").write_text(
        "LOCALEHUB_DATABASE__URL=sqlite+aiosqlite:///from-dotenv.db\n", encoding="utf-8"
    )

    cfg = create_app_config("test", base_dir=tmp_path)

    assert cfg.database.url == "sqlite+aiosqlite:///from-dotenv.db"


def test_create_app_config_prod_mode_ignores_env_test(tmp_path, monkeypatch):
    monkeypatch.setenv("LOCALEHUB_DATABASE__URL", "sqlite+aiosqlite:///from-env.db")
    (tmp_path / ".env.test").write_text(
        "LOCALEHUB_DATABASE__URL=sqlite+aiosqlite:///from-dotenv.db\n", encoding="utf-8"
    )

    cfg = create_app_config("prod", base_dir=tmp_path)

    assert cfg.database.url == "sqlite+aiosqlite:///from-env.db"


def test_create_app_config_wraps_validation_errors(tmp_path, monkeypatch):
    monkeypatch.setenv("LOCALEHUB_DATABASE__URL", "mysql://user@host/db")

    with pytest.raises(ConfigurationError) as exc_info:
        create_app_config(base_dir=tmp_path)

    assert exc_info.value.status_code == 500


def test_create_container_uses_given_config(tmp_path):
    cfg = LocaleHubConfig(
        database=DatabaseSettings(url=f"sqlite+aiosqlite:///{tmp_path / 'c.db'}")
    )

    container = create_container(cfg)

    assert container.config() is cfg
