"""
领域逻辑：树的展平与重建、顺序索引、对账、完成度、表格导入与导出组装。
这里的一切都是纯函数，不做 I/O。
"""

from .completeness import CompletenessStat, aggregate, completeness
from .export import assemble_module, fill_entries, render_json
from .ordering import OrderIndex, assign_orders, sort_by_order
from .reconcile import (
    OrderRealignment,
    ReconcileMode,
    ReconcilePlan,
    ResourceUpdate,
    reconcile,
)
from .tabular import parse_csv, rows_from_table, rows_to_entries, summarize_import
from .tree import Branch, FlatEntry, Leaf, build, build_tree, flatten, parse_tree, to_plain

__all__ = [
    "Leaf", "Branch", "FlatEntry", "parse_tree", "flatten",
    "build", "build_tree", "to_plain",
    "OrderIndex", "assign_orders", "sort_by_order",
    "ReconcileMode", "ReconcilePlan", "ResourceUpdate", "OrderRealignment", "reconcile",
    "CompletenessStat", "completeness", "aggregate",
    "parse_csv", "rows_from_table", "rows_to_entries", "summarize_import",
    "fill_entries", "assemble_module", "render_json",
]
