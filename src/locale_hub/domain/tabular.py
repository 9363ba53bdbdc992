# src/locale_hub/domain/tabular.py
"""
表格导入：把三列表格（key、源文本、目标文本）解析为导入行，
并把合并对账的结果整理成提交前的确认摘要。

表格前两行是表头，默认跳过。
"""

from __future__ import annotations

import csv
import io
from collections.abc import Iterable, Sequence

import structlog

from locale_hub.core.exceptions import ValidationError
from locale_hub.core.types import ImportRow, ImportSummary

from .reconcile import ReconcilePlan
from .tree import FlatEntry

logger = structlog.get_logger(__name__)

DEFAULT_HEADER_ROWS = 2


def rows_from_table(
    table: Iterable[Sequence[str]], *, header_rows: int = DEFAULT_HEADER_ROWS
) -> list[ImportRow]:
    """把二维表的行转换成 `ImportRow`，不足三列的补空串，key 为空的行忽略。"""
    rows: list[ImportRow] = []
    for line_no, cells in enumerate(table):
        if line_no < header_rows:
            continue
        padded = [*(str(c) if c is not None else "" for c in cells), "", "", ""]
        key = padded[0].strip()
        if not key:
            continue
        rows.append(ImportRow(key=key, source_value=padded[1], target_value=padded[2]))
    return rows


def parse_csv(
    content: str | bytes,
    *,
    header_rows: int = DEFAULT_HEADER_ROWS,
    delimiter: str = ",",
    encoding: str = "utf-8-sig",
) -> list[ImportRow]:
    """解析 CSV 文本（或字节）为导入行。"""
    try:
        text = content.decode(encoding) if isinstance(content, bytes) else content
        reader = csv.reader(io.StringIO(text, newline=""), delimiter=delimiter)
        rows = rows_from_table(reader, header_rows=header_rows)
    except UnicodeDecodeError as e:
        raise ValidationError("表格内容无法按指定编码解码。", encoding=encoding) from e
    except csv.Error as e:
        raise ValidationError(f"表格格式错误: {e}", delimiter=delimiter) from e
    logger.debug("表格解析完成", row_count=len(rows), header_rows=header_rows)
    return rows


def rows_to_entries(rows: Iterable[ImportRow]) -> list[FlatEntry]:
    """导入行 → 扁平记录；顺序留空，由源语言顺序索引决定。"""
    return [FlatEntry(key=row.key, value=row.target_value) for row in rows]


def summarize_import(
    rows: Sequence[ImportRow], plan: ReconcilePlan, *, committed: bool = False
) -> ImportSummary:
    matched = len(plan.to_add) + len(plan.to_update) + len(plan.unchanged)
    return ImportSummary(
        total_rows=len(rows),
        matched_rows=matched,
        skipped_rows=len(plan.skipped),
        added=len(plan.to_add),
        updated=len(plan.to_update),
        unchanged=len(plan.unchanged),
        skipped_keys=list(plan.skipped),
        committed=committed,
    )
