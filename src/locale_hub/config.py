# src/locale_hub/config.py
"""
Locale Hub 配置（Pydantic v2 + pydantic-settings）。

环境变量统一使用 `LOCALEHUB_` 前缀，嵌套字段以 `__` 分隔，
例如 `LOCALEHUB_DATABASE__URL`、`LOCALEHUB_LOGGING__FORMAT=json`。
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine.url import make_url

ASYNC_DRIVERS = frozenset({"sqlite+aiosqlite", "postgresql+asyncpg"})

# ===================== 子模型 =====================


class DatabaseSettings(BaseModel):
    """主库（运行期异步驱动）"""

    url: str = Field(
        default="sqlite+aiosqlite:///localehub.db",
        description="异步 DSN（sqlite+aiosqlite / postgresql+asyncpg）",
    )
    echo: bool = Field(default=False, description="SQLAlchemy echo（调试）")

    @field_validator("url")
    @classmethod
    def _validate_async_driver(cls, v: str) -> str:
        try:
            drv = make_url(v).drivername.lower()
        except Exception as e:
            raise ValueError(f"非法数据库 URL：{v!r}（{e}）") from e
        if drv not in ASYNC_DRIVERS:
            raise ValueError(
                f"不支持的运行期数据库驱动：{drv!r}，仅允许 {', '.join(sorted(ASYNC_DRIVERS))}"
            )
        return v


class LoggingSettings(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")
    format: Literal["console", "json"] = Field(default="console")


class ExportSettings(BaseModel):
    json_indent: Optional[int] = Field(default=2, ge=0)
    ensure_ascii: bool = Field(default=False)


class ImportSettings(BaseModel):
    header_rows: int = Field(default=2, ge=0, description="表格导入时跳过的表头行数")
    delimiter: str = Field(default=",", min_length=1, max_length=1)
    encoding: str = Field(default="utf-8-sig")


# ===================== 顶层配置 =====================
class LocaleHubConfig(BaseSettings):
    """
    Locale Hub 核心配置模型。
    """

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    export: ExportSettings = Field(default_factory=ExportSettings)
    importer: ImportSettings = Field(default_factory=ImportSettings)

    # --- 连接池高级参数（SQLite 下忽略） ---
    db_pool_size: Optional[int] = None
    db_max_overflow: Optional[int] = None
    db_pool_timeout: int = 30
    db_pool_recycle: Optional[int] = None
    db_pool_pre_ping: bool = True

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        env_prefix="LOCALEHUB_",
        case_sensitive=False,
        extra="ignore",
        env_file_encoding="utf-8",
    )
