# tests/integration/infrastructure/test_uow.py
"""测试 UoW 的事务语义：成功提交、失败整体回滚、存储异常统一包装。"""

import pytest
from sqlalchemy.exc import IntegrityError

from locale_hub.core.exceptions import NotFoundError, StorageError
from locale_hub.core.types import NewResource
from tests.helpers.factories import Seed

pytestmark = pytest.mark.asyncio


async def test_commit_on_success(uow_factory):
    async with uow_factory() as uow:
        await uow.languages.add(name="English", code="en")

    async with uow_factory() as uow:
        assert [lang.code for lang in await uow.languages.list_all()] == ["en"]


async def test_integrity_error_is_wrapped_and_rolled_back(uow_factory):
    with pytest.raises(StorageError) as exc_info:
        async with uow_factory() as uow:
            await uow.languages.add(name="Deutsch", code="de")
            await uow.languages.add(name="German", code="de")

    assert isinstance(exc_info.value.__cause__, IntegrityError)
    async with uow_factory() as uow:
        assert await uow.languages.list_all() == []


async def test_domain_errors_propagate_unchanged_and_roll_back(uow_factory):
    with pytest.raises(NotFoundError):
        async with uow_factory() as uow:
            await uow.languages.add(name="Français", code="fr")
            raise NotFoundError("boom")

    async with uow_factory() as uow:
        assert await uow.languages.get_by_code("fr") is None


async def test_resource_uniqueness_per_module_language_key(uow_factory, seeded: Seed):
    record = NewResource(
        module_id=seeded.module.id,
        language_id=seeded.source.id,
        key="title",
        value="Title",
        order=0,
    )

    with pytest.raises(StorageError):
        async with uow_factory() as uow:
            await uow.resources.create_many([record, record])


async def test_foreign_keys_are_enforced(uow_factory, seeded: Seed):
    with pytest.raises(StorageError):
        async with uow_factory() as uow:
            await uow.resources.create_many(
                [
                    NewResource(
                        module_id="missing-module",
                        language_id=seeded.source.id,
                        key="k",
                        value="v",
                        order=0,
                    )
                ]
            )


async def test_count_translated_ignores_empty_and_orphan_records(uow_factory, seeded: Seed):
    module_id = seeded.module.id

    def res(language_id: str, key: str, value: str, order: int) -> NewResource:
        return NewResource(
            module_id=module_id, language_id=language_id, key=key, value=value, order=order
        )

    async with uow_factory() as uow:
        await uow.resources.create_many(
            [
                res(seeded.source.id, "a", "A", 0),
                res(seeded.source.id, "b", "", 1),
                res(seeded.zh.id, "a", "甲", 0),
                res(seeded.zh.id, "b", "", 1),
                res(seeded.zh.id, "orphan", "孤", 2),
            ]
        )

    async with uow_factory() as uow:
        assert await uow.resources.count([module_id], seeded.source.id) == 2
        assert (
            await uow.resources.count([module_id], seeded.source.id, exclude_empty=True) == 1
        )
        assert (
            await uow.resources.count_translated([module_id], seeded.source.id, seeded.zh.id)
            == 1
        )
        assert await uow.resources.count([], seeded.source.id) == 0
