# src/locale_hub/domain/export.py
"""
导出组装：以源语言键集为准，为目标语言重建每个模块的嵌套 JSON。

- 每个源 key 都会出现，顺序与源语言 `order` 一致；
- 目标语言缺失的 key 以空串填充；
- 不在源键集中的目标记录（孤儿）被忽略。
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from .ordering import OrderIndex
from .tree import FlatEntry, FlatRecord, build


def fill_entries(
    source_records: Iterable[FlatRecord], target_records: Iterable[FlatRecord]
) -> list[FlatEntry]:
    """按源语言顺序生成导出记录，值取自目标语言，缺失时为空串。"""
    index = OrderIndex.from_resources(source_records)
    translations = {
        record.key: record.value for record in target_records if record.key in index
    }
    return [
        FlatEntry(key=key, value=translations.get(key, ""), order=index.order_of(key))
        for key in index.keys()
    ]


def assemble_module(
    source_records: Iterable[FlatRecord], target_records: Iterable[FlatRecord]
) -> dict[str, Any]:
    return build(fill_entries(source_records, target_records))


def render_json(
    tree: dict[str, Any], *, indent: int | None = 2, ensure_ascii: bool = False
) -> bytes:
    """序列化为 UTF-8 JSON 字节，键顺序保持插入顺序。"""
    return json.dumps(tree, indent=indent, ensure_ascii=ensure_ascii).encode("utf-8")
