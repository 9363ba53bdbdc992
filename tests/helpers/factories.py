# tests/helpers/factories.py
"""
提供用于创建一致、可预测的测试数据的工厂函数。
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Any

from locale_hub.application.coordinator import Coordinator
from locale_hub.core.types import ImportRow, Language, Module, Project, Resource

TEST_SOURCE_LANG = "en"
TEST_TARGET_LANGS = ("zh-CN", "ja")

LANGUAGE_NAMES = {
    "en": "English",
    "zh-CN": "简体中文",
    "ja": "日本語",
    "fr": "Français",
}

SAMPLE_TREE: dict[str, Any] = {
    "greeting": {"hello": "Hello", "bye": "Goodbye"},
    "title": "Locale Hub",
    "menu": {"file": {"open": "Open", "save": "Save"}},
}


@dataclass
class Seed:
    languages: dict[str, Language]
    project: Project
    module: Module

    @property
    def source(self) -> Language:
        return self.languages[TEST_SOURCE_LANG]

    @property
    def zh(self) -> Language:
        return self.languages["zh-CN"]

    @property
    def ja(self) -> Language:
        return self.languages["ja"]

    @property
    def fr(self) -> Language:
        return self.languages["fr"]


async def create_languages(coordinator: Coordinator) -> dict[str, Language]:
    return {
        code: await coordinator.create_language(name, code)
        for code, name in LANGUAGE_NAMES.items()
    }


async def seed_project(
    coordinator: Coordinator,
    *,
    identifier: str | None = None,
    module_name: str = "common",
) -> Seed:
    """创建 en/zh-CN/ja/fr 四种语言、一个 en → [zh-CN, ja] 的项目和一个模块。"""
    languages = await create_languages(coordinator)
    project = await coordinator.create_project(
        name="Demo",
        identifier=identifier or f"demo-{uuid.uuid4().hex[:6]}",
        source_language_id=languages[TEST_SOURCE_LANG].id,
        target_language_ids=[languages[code].id for code in TEST_TARGET_LANGS],
        description="测试项目",
    )
    module = await coordinator.create_module(project.id, module_name)
    return Seed(languages=languages, project=project, module=module)


def import_rows(pairs: dict[str, str]) -> list[ImportRow]:
    return [ImportRow(key=k, source_value="", target_value=v) for k, v in pairs.items()]


def keys_and_orders(resources: list[Resource]) -> list[tuple[str, int]]:
    return [(r.key, r.order) for r in resources]
