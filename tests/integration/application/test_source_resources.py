# tests/integration/application/test_source_resources.py
"""
源语言资源的集成测试：上传即替换式对账、顺序在所有语言上的一致性、
逐条编辑与删除。
"""

import pytest

from locale_hub.application.coordinator import Coordinator
from locale_hub.core.exceptions import NotFoundError, ValidationError
from locale_hub.core.types import SourceValueUpdate
from locale_hub.domain import FlatEntry
from tests.helpers.factories import SAMPLE_TREE, Seed, import_rows, keys_and_orders

pytestmark = pytest.mark.asyncio


async def test_first_upload_stores_flattened_records_in_order(
    coordinator: Coordinator, seeded: Seed
):
    summary = await coordinator.upload_source_tree(seeded.module.id, SAMPLE_TREE)

    assert summary.added == 5
    assert (summary.updated, summary.deleted, summary.unchanged) == (0, 0, 0)

    resources = await coordinator.list_source_resources(seeded.module.id)
    assert keys_and_orders(resources) == [
        ("greeting.hello", 0),
        ("greeting.bye", 1),
        ("title", 2),
        ("menu.file.open", 3),
        ("menu.file.save", 4),
    ]
    assert {r.language_id for r in resources} == {seeded.source.id}


async def test_reupload_replaces_and_realigns_target_orders(
    coordinator: Coordinator, seeded: Seed, uow_factory
):
    module_id = seeded.module.id
    await coordinator.upload_source_tree(module_id, SAMPLE_TREE)
    await coordinator.import_rows(
        module_id, seeded.zh.id, import_rows({"greeting.hello": "你好"})
    )

    summary = await coordinator.upload_source_tree(
        module_id,
        {"title": "Locale Hub 2", "greeting": {"hello": "Hello"}, "extra": "X"},
    )

    assert (summary.added, summary.updated, summary.deleted) == (1, 1, 3)
    assert (summary.unchanged, summary.reordered) == (1, 2)

    source = await coordinator.list_source_resources(module_id)
    assert keys_and_orders(source) == [("title", 0), ("greeting.hello", 1), ("extra", 2)]
    assert source[0].value == "Locale Hub 2"

    async with uow_factory() as uow:
        target = await uow.resources.list_for(module_id, seeded.zh.id)
    assert keys_and_orders(target) == [("greeting.hello", 1)]


async def test_identical_reupload_changes_nothing(coordinator: Coordinator, seeded: Seed):
    await coordinator.upload_source_tree(seeded.module.id, SAMPLE_TREE)
    before = await coordinator.list_source_resources(seeded.module.id)

    summary = await coordinator.upload_source_tree(seeded.module.id, SAMPLE_TREE)

    assert summary.unchanged == 5
    assert (summary.added, summary.updated, summary.deleted, summary.reordered) == (
        0,
        0,
        0,
        0,
    )
    assert await coordinator.list_source_resources(seeded.module.id) == before


async def test_invalid_tree_is_rejected_before_any_write(
    coordinator: Coordinator, seeded: Seed
):
    await coordinator.upload_source_tree(seeded.module.id, SAMPLE_TREE)

    with pytest.raises(ValidationError):
        await coordinator.upload_source_tree(
            seeded.module.id, {"title": "new", "bad.key": "x"}
        )

    assert len(await coordinator.source_keys(seeded.module.id)) == 5


async def test_upload_to_unknown_module(coordinator: Coordinator, seeded: Seed):
    with pytest.raises(NotFoundError):
        await coordinator.upload_source_tree("no-such-module", SAMPLE_TREE)


async def test_upload_entries_keeps_explicit_orders(coordinator: Coordinator, seeded: Seed):
    await coordinator.upload_source_entries(
        seeded.module.id, [FlatEntry("b", "B", order=10), FlatEntry("a", "A")]
    )

    resources = await coordinator.list_source_resources(seeded.module.id)
    assert keys_and_orders(resources) == [("a", 1), ("b", 10)]


async def test_update_source_values(coordinator: Coordinator, seeded: Seed):
    await coordinator.upload_source_tree(seeded.module.id, SAMPLE_TREE)
    title = next(
        r for r in await coordinator.list_source_resources(seeded.module.id)
        if r.key == "title"
    )

    updated = await coordinator.update_source_values(
        seeded.module.id, [SourceValueUpdate(id=title.id, value="New Title")]
    )

    assert [(r.id, r.value, r.order) for r in updated] == [(title.id, "New Title", 2)]

    with pytest.raises(NotFoundError):
        await coordinator.update_source_values(
            seeded.module.id, [SourceValueUpdate(id="missing", value="x")]
        )


async def test_delete_source_resources_leaves_target_orphans(
    coordinator: Coordinator, seeded: Seed, uow_factory
):
    module_id = seeded.module.id
    await coordinator.upload_source_tree(module_id, SAMPLE_TREE)
    await coordinator.import_rows(module_id, seeded.zh.id, import_rows({"greeting.bye": "再见"}))
    bye = next(
        r for r in await coordinator.list_source_resources(module_id)
        if r.key == "greeting.bye"
    )

    deleted = await coordinator.delete_source_resources(module_id, [bye.id, "unknown-id"])

    assert deleted == 1
    assert "greeting.bye" not in await coordinator.source_keys(module_id)
    async with uow_factory() as uow:
        orphans = await uow.resources.list_for(module_id, seeded.zh.id)
    assert [r.key for r in orphans] == ["greeting.bye"]
    document = await coordinator.export_module(module_id, seeded.zh.id)
    assert "bye" not in document.tree["greeting"]


async def test_readded_key_realigns_orphaned_target_order(
    coordinator: Coordinator, seeded: Seed, uow_factory
):
    module_id = seeded.module.id
    await coordinator.upload_source_tree(module_id, {"a": "A", "b": "B"})
    await coordinator.import_rows(module_id, seeded.zh.id, import_rows({"b": "BB"}))
    b = next(r for r in await coordinator.list_source_resources(module_id) if r.key == "b")
    await coordinator.delete_source_resources(module_id, [b.id])

    summary = await coordinator.upload_source_tree(module_id, {"b": "B", "a": "A"})

    assert (summary.added, summary.reordered) == (1, 1)
    source = await coordinator.list_source_resources(module_id)
    assert keys_and_orders(source) == [("b", 0), ("a", 1)]
    async with uow_factory() as uow:
        target = await uow.resources.list_for(module_id, seeded.zh.id)
    assert keys_and_orders(target) == [("b", 0)]
    document = await coordinator.export_module(module_id, seeded.zh.id)
    assert list(document.tree.items()) == [("b", "BB"), ("a", "")]
