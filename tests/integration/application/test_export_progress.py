# tests/integration/application/test_export_progress.py
"""导出（单模块 JSON / 项目 ZIP）与翻译进度统计的集成测试。"""

import io
import json
import zipfile

import pytest

from locale_hub.application.coordinator import Coordinator
from locale_hub.core.exceptions import NotFoundError
from tests.helpers.factories import SAMPLE_TREE, Seed, import_rows

pytestmark = pytest.mark.asyncio


async def _upload_and_translate(coordinator: Coordinator, seeded: Seed) -> None:
    await coordinator.upload_source_tree(seeded.module.id, SAMPLE_TREE)
    await coordinator.import_rows(
        seeded.module.id,
        seeded.zh.id,
        import_rows({"greeting.hello": "你好", "menu.file.save": "保存", "title": ""}),
    )


async def test_export_module_fills_missing_keys_with_empty_strings(
    coordinator: Coordinator, seeded: Seed
):
    await _upload_and_translate(coordinator, seeded)

    document = await coordinator.export_module(seeded.module.id, seeded.zh.id)

    expected = {
        "greeting": {"hello": "你好", "bye": ""},
        "title": "",
        "menu": {"file": {"open": "", "save": "保存"}},
    }
    assert document.tree == expected
    assert document.filename == "common.json"
    assert document.language_code == "zh-CN"
    text = document.content.decode("utf-8")
    assert "你好" in text
    assert json.loads(text) == expected
    assert list(json.loads(text)) == ["greeting", "title", "menu"]


async def test_export_source_language_returns_uploaded_tree(
    coordinator: Coordinator, seeded: Seed
):
    await coordinator.upload_source_tree(seeded.module.id, SAMPLE_TREE)

    document = await coordinator.export_module(seeded.module.id, seeded.source.id)

    assert document.tree == SAMPLE_TREE


async def test_export_module_without_source_keys(coordinator: Coordinator, seeded: Seed):
    with pytest.raises(NotFoundError):
        await coordinator.export_module(seeded.module.id, seeded.zh.id)


async def test_export_project_zips_every_module(coordinator: Coordinator, seeded: Seed):
    await _upload_and_translate(coordinator, seeded)
    await coordinator.create_module(seeded.project.id, "empty")

    archive = await coordinator.export_project(seeded.project.id, seeded.zh.id)

    assert archive.filename == "Demo.zh-CN.zip"
    assert archive.media_type == "application/zip"
    assert sorted(archive.entries) == ["common.json", "empty.json"]
    with zipfile.ZipFile(io.BytesIO(archive.content)) as zf:
        assert sorted(zf.namelist()) == ["common.json", "empty.json"]
        assert json.loads(zf.read("empty.json")) == {}
        common = json.loads(zf.read("common.json"))
    assert common["greeting"]["hello"] == "你好"


async def test_export_project_unknown_project(coordinator: Coordinator, seeded: Seed):
    with pytest.raises(NotFoundError):
        await coordinator.export_project("missing", seeded.zh.id)


async def test_module_progress_counts_only_non_empty_translations(
    coordinator: Coordinator, seeded: Seed
):
    await _upload_and_translate(coordinator, seeded)
    await coordinator.create_module(seeded.project.id, "empty")

    progress = {p.name: p for p in await coordinator.module_progress(seeded.project.id, seeded.zh.id)}

    assert (progress["common"].total_keys, progress["common"].translated_keys) == (5, 2)
    assert progress["common"].translation_ratio == 40.0
    assert progress["empty"].total_keys == 0
    assert progress["empty"].translation_ratio == 0


async def test_orphan_translations_are_not_counted(coordinator: Coordinator, seeded: Seed):
    await _upload_and_translate(coordinator, seeded)
    await coordinator.upload_source_tree(
        seeded.module.id, {"greeting": {"bye": "Goodbye"}, "title": "Locale Hub"}
    )

    [progress] = await coordinator.module_progress(seeded.project.id, seeded.zh.id)

    assert (progress.total_keys, progress.translated_keys) == (2, 0)
    assert progress.translation_ratio == 0


async def test_language_progress_aggregates_in_target_order(
    coordinator: Coordinator, seeded: Seed
):
    await _upload_and_translate(coordinator, seeded)
    second = await coordinator.create_module(seeded.project.id, "extra")
    await coordinator.upload_source_tree(second.id, {"a": "A"})
    await coordinator.import_rows(second.id, seeded.zh.id, import_rows({"a": "甲"}))

    progress = await coordinator.language_progress(seeded.project.id)

    assert [(p.code, p.order) for p in progress] == [("zh-CN", 1), ("ja", 2)]
    zh, ja = progress
    # (2 + 1) / (5 + 1)，而不是两个模块比率的平均值
    assert (zh.total_keys, zh.translated_keys, zh.progress) == (6, 3, 50.0)
    assert (ja.translated_keys, ja.progress) == (0, 0)
