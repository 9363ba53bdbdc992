# tests/unit/domain/test_completeness.py
import pytest

from locale_hub.domain.completeness import CompletenessStat, aggregate, completeness


@pytest.mark.parametrize(
    ("total", "translated", "expected"),
    [
        (0, 0, 0.0),
        (0, 5, 0.0),
        (4, 4, 100.0),
        (3, 1, 33.33),
        (3, 2, 66.67),
        (800, 1, 0.13),
        (8, 1, 12.5),
    ],
)
def test_completeness_rounds_half_up_to_two_places(total, translated, expected):
    assert completeness(total, translated) == expected


def test_stat_ratio_delegates_to_completeness():
    assert CompletenessStat(total_keys=3, translated_keys=2).ratio == 66.67


def test_aggregate_sums_numerators_and_denominators():
    stat = aggregate(
        [
            CompletenessStat(total_keys=10, translated_keys=5),
            CompletenessStat(total_keys=2, translated_keys=2),
        ]
    )
    assert (stat.total_keys, stat.translated_keys) == (12, 7)
    # 58.33 而不是 (50 + 100) / 2
    assert stat.ratio == 58.33


def test_empty_module_yields_float_zero():
    result = completeness(0, 0)
    assert isinstance(result, float) and result == 0.0


def test_aggregate_of_nothing_is_zero():
    assert aggregate([]).ratio == 0
