# tests/unit/observability/test_logging_config.py
"""
测试日志配置模块。

主要测试：
1. PanelRenderer 的渲染逻辑
2. setup_logging 对标准 logging 与 structlog 的配置
"""

import json
import logging
from collections.abc import MutableMapping
from typing import Any
from unittest.mock import Mock

import pytest
import structlog

from locale_hub.config import LocaleHubConfig, LoggingSettings
from locale_hub.observability.logging_config import (
    APP_LOGGER_NAME,
    PanelRenderer,
    setup_logging,
    setup_logging_from_config,
)


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logging.getLogger().handlers.clear()
    logging.getLogger().setLevel(logging.WARNING)
    logging.getLogger(APP_LOGGER_NAME).setLevel(logging.NOTSET)
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()


class TestPanelRenderer:
    def test_default_parameters(self):
        renderer = PanelRenderer()
        assert renderer._kv_truncate_at == 256
        assert renderer._show_timestamp is True
        assert renderer._show_logger_name is True
        assert renderer._kv_key_width == 15

    @pytest.mark.parametrize("event_dict", [{}, {"event": ""}, {"event": "   "}])
    def test_empty_event_renders_nothing(self, event_dict):
        assert PanelRenderer()(Mock(), "info", event_dict) == ""

    def test_renders_event_level_logger_and_context(self):
        event_dict: MutableMapping[str, Any] = {
            "event": "模块已创建，正在写入初始资源记录",
            "level": "info",
            "logger": "locale_hub.modules",
            "timestamp": "2026-01-01 12:00:00",
            "module_id": "m-1",
        }

        output = PanelRenderer()(Mock(), "info", event_dict)

        assert "正在写入初始资源记录" in output
        assert "INFO" in output
        assert "locale_hub.modules" in output
        assert "module_id :" in output
        assert "'m-1'" in output
        assert "2026-01-01 12:00:00" in output

    def test_hides_logger_name_and_timestamp_when_disabled(self):
        renderer = PanelRenderer(show_timestamp=False, show_logger_name=False)
        output = renderer(
            Mock(),
            "warning",
            {"event": "x", "level": "warning", "logger": "hidden.name", "timestamp": "T0"},
        )
        assert "hidden.name" not in output
        assert "T0" not in output

    def test_long_values_are_truncated(self):
        renderer = PanelRenderer(kv_truncate_at=10)
        output = renderer(Mock(), "info", {"event": "e", "payload": "x" * 300})
        assert "…" in output
        assert "x" * 20 not in output


class TestSetupLogging:
    def test_installs_single_root_handler_and_levels(self):
        setup_logging(log_level="DEBUG", log_format="console")

        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)
        assert root.level == logging.WARNING
        assert logging.getLogger(APP_LOGGER_NAME).level == logging.DEBUG

    def test_json_format_emits_structured_lines(self, capsys):
        setup_logging(log_level="INFO", log_format="json", service="svc-test")

        structlog.get_logger("locale_hub.test_json").info("你好", project="demo")
        logging.getLogger("some.library").info("不应输出")

        lines = [line for line in capsys.readouterr().err.splitlines() if line.strip()]
        assert len(lines) == 1
        record = json.loads(lines[0])
        assert record["event"] == "你好"
        assert record["project"] == "demo"
        assert record["service"] == "svc-test"
        assert record["level"] == "info"
        assert record["logger"] == "locale_hub.test_json"
        assert "T" in record["timestamp"]

    def test_from_config(self):
        cfg = LocaleHubConfig(logging=LoggingSettings(level="ERROR", format="json"))

        setup_logging_from_config(cfg)

        assert logging.getLogger(APP_LOGGER_NAME).level == logging.ERROR
