# src/locale_hub/bootstrap.py
"""
应用引导程序：加载配置、创建并装配 DI 容器。

本模块是应用的唯一初始化入口，CLI 与测试都从这里获取容器。
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

import structlog
from dotenv import load_dotenv
from pydantic import ValidationError as PydanticValidationError

from locale_hub.config import LocaleHubConfig
from locale_hub.core.exceptions import ConfigurationError
from locale_hub.di.container import AppContainer

logger = structlog.get_logger("locale_hub.bootstrap")

EnvMode = Literal["prod", "dev", "test"]


def _load_dotenv_files(env_mode: EnvMode, base_dir: Path | None = None) -> list[Path]:
    """
    根据环境模式加载 .env 文件：
    - 总是加载 `.env`（不覆盖已存在的环境变量）；
    - dev / test 模式追加 `.env.dev`；test 模式再追加 `.env.test`（允许覆盖）。
    """
    root = base_dir or Path.cwd()
    loaded: list[Path] = []

    base_env = root / ".env"
    if base_env.is_file():
        load_dotenv(base_env, override=False)
        loaded.append(base_env)

    dev_env = root / ".env.dev"
    if env_mode in ("dev", "test") and dev_env.is_file():
        load_dotenv(dev_env, override=True)
        loaded.append(dev_env)

    test_env = root / ".env.test"
    if env_mode == "test" and test_env.is_file():
        load_dotenv(test_env, override=True)
        loaded.append(test_env)

    logger.debug("已加载 dotenv 文件", files=[str(p) for p in loaded])
    return loaded


def create_app_config(
    env_mode: EnvMode = "prod", *, base_dir: Path | None = None
) -> LocaleHubConfig:
    """加载、验证并返回应用配置对象；配置非法时抛 ConfigurationError。"""
    _load_dotenv_files(env_mode, base_dir)
    try:
        return LocaleHubConfig()
    except PydanticValidationError as e:
        raise ConfigurationError(f"配置校验失败: {e}") from e


def create_container(config: LocaleHubConfig) -> AppContainer:
    """创建 DI 容器，并以给定配置对象覆盖默认的配置提供者。"""
    container = AppContainer()
    container.config.override(config)
    return container
