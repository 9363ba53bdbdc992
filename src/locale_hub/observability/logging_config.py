# src/locale_hub/observability/logging_config.py
"""
集中配置项目日志系统：structlog ⇄ 标准 logging，并与 Rich 集成。

两种输出：
- console：开发环境的面板式输出（本地时间，键值对齐，长值折行）。
- json   ：生产环境的结构化日志（ISO-8601 + UTC）。

structlog 通过官方推荐的 ProcessorFormatter 桥接到标准 logging，
因此第三方库（SQLAlchemy、alembic 等）的日志也走同一条渲染链。
"""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import TYPE_CHECKING, Any, Literal

import structlog
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from structlog.typing import Processor

if TYPE_CHECKING:
    from locale_hub.config import LocaleHubConfig

APP_LOGGER_NAME = "locale_hub"

_NOISY_LOGGERS = (
    "asyncio",
    "aiosqlite",
    "sqlalchemy.engine.Engine",
    "alembic.runtime.migration",
)


class PanelRenderer:
    """
    structlog 最终渲染器：把一条事件渲染成 Rich 面板。

    标题为等宽级别标签（可选 logger 名），正文为事件消息，
    附加的键值对以固定宽度的键列排版。
    """

    _LEVEL_STYLES: dict[str, tuple[str, str]] = {
        "debug": ("cyan", "DEBUG   "),
        "info": ("green", "INFO    "),
        "warning": ("yellow", "WARNING "),
        "error": ("bold red", "ERROR   "),
        "critical": ("magenta", "CRITICAL"),
    }

    def __init__(
        self,
        *,
        kv_truncate_at: int = 256,
        show_timestamp: bool = True,
        show_logger_name: bool = True,
        kv_key_width: int = 15,
    ) -> None:
        self._console = Console(stderr=True)
        self._kv_truncate_at = kv_truncate_at
        self._show_timestamp = show_timestamp
        self._show_logger_name = show_logger_name
        self._kv_key_width = kv_key_width

    def __call__(
        self, logger: Any, name: str, event_dict: MutableMapping[str, Any]
    ) -> str:
        event = str(event_dict.pop("event", "")).strip()
        if not event:
            return ""

        timestamp = event_dict.pop("timestamp", "")
        level = str(event_dict.pop("level", "info")).lower()
        logger_name = event_dict.pop("logger", "unknown")
        event_dict.pop("_record", None)
        event_dict.pop("_from_structlog", None)

        style, label = self._LEVEL_STYLES.get(level, ("dim", level.upper()))
        title = f"[{style}]{label}[/]"
        if self._show_logger_name:
            title += f" [cyan dim]({logger_name})[/]"

        body: list[Any] = [Text(event)]
        if event_dict:
            body.append(self._kv_table(event_dict))

        subtitle = (
            Text(str(timestamp), style="dim")
            if self._show_timestamp and timestamp
            else None
        )
        with self._console.capture() as capture:
            self._console.print(
                Panel(
                    Group(*body),
                    title=Text.from_markup(title),
                    title_align="left",
                    subtitle=subtitle,
                    subtitle_align="right",
                    border_style=style,
                    expand=False,
                )
            )
        return capture.get().rstrip()

    def _kv_table(self, kv: MutableMapping[str, Any]) -> Table:
        table = Table(show_header=False, show_edge=False, box=None, padding=(0, 1))
        table.add_column(style="dim", justify="right", width=self._kv_key_width)
        table.add_column(style="bright_white", overflow="fold")
        for key, value in sorted(kv.items()):
            text = repr(value)
            if len(text) > self._kv_truncate_at:
                text = text[: self._kv_truncate_at] + "…"
            table.add_row(f"{key} :", Text(text))
        return table


def setup_logging(
    *,
    log_level: str = "INFO",
    log_format: Literal["json", "console"] = "console",
    service: str | None = None,
    root_level: str | None = None,
    silence_noisy_libs: bool = True,
) -> None:
    """
    配置全局 structlog 日志系统。

    Args:
        log_level: `locale_hub` logger 的最低级别。
        log_format: 'console'（开发）或 'json'（生产）。
        service: 绑定到所有日志的服务名（通过 contextvars 注入）。
        root_level: 根 logger 级别，默认 WARNING 以压低第三方噪声。
        silence_noisy_libs: 是否下调常见噪声 logger 的级别。
    """
    timestamper = (
        structlog.processors.TimeStamper(fmt="iso", utc=True)
        if log_format == "json"
        else structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", utc=False)
    )
    shared: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        timestamper,
    ]

    structlog.configure(
        processors=[
            *shared,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    renderer: Processor = (
        PanelRenderer() if log_format == "console" else structlog.processors.JSONRenderer()
    )
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
        foreign_pre_chain=shared,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel((root_level or "WARNING").upper())

    app_logger = logging.getLogger(APP_LOGGER_NAME)
    app_logger.setLevel(log_level.upper())
    app_logger.propagate = True

    structlog.contextvars.clear_contextvars()
    if service:
        structlog.contextvars.bind_contextvars(service=service)

    if silence_noisy_libs:
        for noisy in _NOISY_LOGGERS:
            logging.getLogger(noisy).setLevel(logging.WARNING)

    structlog.get_logger("locale_hub.logging_config").debug(
        "日志系统已配置完成。",
        log_format=log_format,
        app_log_level=log_level.upper(),
        root_log_level=(root_level or "WARNING").upper(),
    )


def setup_logging_from_config(
    cfg: "LocaleHubConfig", *, service: str = "locale-hub"
) -> None:
    """根据 LocaleHubConfig 一键初始化日志系统。"""
    setup_logging(
        log_level=cfg.logging.level,
        log_format=cfg.logging.format,
        service=service,
    )
