# src/locale_hub/domain/completeness.py
"""翻译完成度计算。"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

_TWO_PLACES = Decimal("0.01")


@dataclass(frozen=True)
class CompletenessStat:
    total_keys: int
    translated_keys: int

    @property
    def ratio(self) -> float:
        return completeness(self.total_keys, self.translated_keys)


def completeness(total_source_keys: int, translated_target_keys: int) -> float:
    """
    返回百分比形式的完成度，四舍五入保留两位小数。

    `translated_target_keys` 应只统计非空且 key 属于源键集的目标资源。
    源键数为 0 时返回 0.0，而不是报错或 NaN。
    """
    if total_source_keys <= 0:
        return 0.0
    ratio = Decimal(translated_target_keys) * 100 / Decimal(total_source_keys)
    return float(ratio.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))


def aggregate(stats: Iterable[CompletenessStat]) -> CompletenessStat:
    """项目级汇总：分子求和 / 分母求和，而不是各模块比率的平均值。"""
    total = translated = 0
    for stat in stats:
        total += stat.total_keys
        translated += stat.translated_keys
    return CompletenessStat(total_keys=total, translated_keys=translated)
