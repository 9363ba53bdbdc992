# src/locale_hub/domain/tree.py
"""
嵌套 JSON 树与扁平有序记录之间的相互转换。

内部使用显式的递归和类型表示树：`Leaf`（字符串值）与 `Branch`
（有序的 键 → 节点 映射），`flatten` 与 `build` 都只在这个和类型上工作。

约定：
- 只有映射会被递归；其余所有值都是叶子。字符串原样保留，`null` 视为
  空串（未翻译），数字 / 布尔 / 数组作为不透明叶子，存储其紧凑的 JSON 文本，
  数组永远不会被展开成 `key.0`、`key.1`。
- 路径分隔符为 `.`，因此原始键名中不允许出现 `.` 或空串，
  否则无法无损往返，上传阶段即拒绝。
- `build` 的叶子/容器冲突策略为“先写入者优先”：按 `order` 升序处理，
  与已存在节点形态冲突的后续键被丢弃并报告。
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol, Union

import structlog

from locale_hub.core.exceptions import ValidationError

logger = structlog.get_logger(__name__)

KEY_SEPARATOR = "."


@dataclass(frozen=True)
class Leaf:
    value: str


@dataclass
class Branch:
    children: dict[str, "Node"] = field(default_factory=dict)


Node = Union[Leaf, Branch]


@dataclass(frozen=True)
class FlatEntry:
    """一条扁平记录。`order` 为 None 表示顺序尚未分配。"""

    key: str
    value: str
    order: int | None = None


class FlatRecord(Protocol):
    """`build` 接受的任何记录：FlatEntry、Resource DTO 等。"""

    @property
    def key(self) -> str: ...

    @property
    def value(self) -> str: ...

    @property
    def order(self) -> int | None: ...


def leaf_text(value: Any) -> str:
    """把一个非映射的 JSON 值转成叶子文本。"""
    if isinstance(value, str):
        return value
    if value is None:
        return ""
    try:
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError) as e:
        raise ValidationError(
            f"无法序列化的叶子值: {value!r}", value_type=type(value).__name__
        ) from e


def parse_tree(data: Any) -> Branch:
    """把 `json.load` 得到的数据转换成 `Branch`，根节点必须是对象。"""
    if isinstance(data, Branch):
        return data
    if not isinstance(data, Mapping):
        raise ValidationError(
            "上传内容的根节点必须是 JSON 对象。", got=type(data).__name__
        )
    return _parse_branch(data, ())


def _parse_branch(mapping: Mapping[Any, Any], path: tuple[str, ...]) -> Branch:
    children: dict[str, Node] = {}
    for name, value in mapping.items():
        if not isinstance(name, str) or not name or KEY_SEPARATOR in name:
            raise ValidationError(
                f"非法的键名 {name!r}：键名不能为空，也不能包含 '{KEY_SEPARATOR}'。",
                path=KEY_SEPARATOR.join(path),
            )
        if isinstance(value, Mapping):
            children[name] = _parse_branch(value, (*path, name))
        else:
            children[name] = Leaf(leaf_text(value))
    return Branch(children)


def iter_leaves(tree: Branch) -> Iterator[tuple[str, Leaf]]:
    """深度优先、按映射自身的枚举顺序产出 (点分路径, 叶子)。"""
    yield from _walk(tree, ())


def _walk(branch: Branch, path: tuple[str, ...]) -> Iterator[tuple[str, Leaf]]:
    for name, child in branch.children.items():
        child_path = (*path, name)
        if isinstance(child, Branch):
            yield from _walk(child, child_path)
        else:
            yield KEY_SEPARATOR.join(child_path), child


def flatten(tree: Branch | Mapping[str, Any]) -> list[FlatEntry]:
    """
    把嵌套树展开为扁平记录。

    每个叶子产出一条记录，`order` 从 0 开始按产出顺序单调递增。
    空对象不产出任何记录。
    """
    root = parse_tree(tree)
    entries: list[FlatEntry] = []
    for key, leaf in iter_leaves(root):
        entries.append(FlatEntry(key=key, value=leaf.value, order=len(entries)))
    return entries


def _in_order(records: Iterable[FlatRecord]) -> list[FlatRecord]:
    # 未分配顺序的记录以其位置充当 order；sorted 是稳定排序
    indexed = list(enumerate(records))
    indexed.sort(key=lambda pair: pair[0] if pair[1].order is None else pair[1].order)
    return [record for _, record in indexed]


def build_tree(records: Iterable[FlatRecord]) -> tuple[Branch, list[str]]:
    """
    由扁平记录重建嵌套树，返回 (树, 因冲突被丢弃的键)。

    记录按 `order` 升序写入；先写入者优先。
    """
    root = Branch()
    dropped: list[str] = []

    for record in _in_order(records):
        segments = record.key.split(KEY_SEPARATOR)
        if not all(segments):
            dropped.append(record.key)
            continue

        node = root
        for segment in segments[:-1]:
            child = node.children.get(segment)
            if child is None:
                child = Branch()
                node.children[segment] = child
            elif isinstance(child, Leaf):
                break
            node = child
        else:
            last = segments[-1]
            if last not in node.children:
                node.children[last] = Leaf(record.value)
                continue

        dropped.append(record.key)

    return root, dropped


def to_plain(tree: Branch) -> dict[str, Any]:
    """把 `Branch` 转回普通的 dict（可直接 `json.dumps`）。"""
    return {
        name: to_plain(child) if isinstance(child, Branch) else child.value
        for name, child in tree.children.items()
    }


def build(records: Iterable[FlatRecord]) -> dict[str, Any]:
    """`flatten` 的逆操作，返回普通 dict；冲突被丢弃的键会记录警告日志。"""
    tree, dropped = build_tree(records)
    if dropped:
        logger.warning(
            "重建嵌套结构时丢弃了冲突的键（先写入者优先）。", dropped_keys=dropped
        )
    return to_plain(tree)
