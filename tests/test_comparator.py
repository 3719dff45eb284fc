"""Tests for the comparator."""

from __future__ import annotations

import pytest

from tests.fake_tools import make_result
from transpile_bench.benchmarks.comparator import classify_speedup, compare, project_savings
from transpile_bench.core.errors import ComparisonUnavailable
from transpile_bench.core.models import SpeedupTier


def test_speedup_and_time_saved() -> None:
    report = compare(
        make_result("Babel", duration_ms=10_000, memory_delta=40),
        make_result("SWC", duration_ms=1_000, memory_delta=-8),
    )

    assert report.speedup_ratio == 10.0
    assert report.time_saved_ms == 9000
    assert report.memory_efficiency_ratio == 5.0
    assert report.tier is SpeedupTier.REVOLUTIONARY
    assert report.baseline.tool_name == "Babel"
    assert report.candidate.tool_name == "SWC"


def test_projection_scales_linearly() -> None:
    report = compare(
        make_result("Babel", duration_ms=10_000),
        make_result("SWC", duration_ms=1_000),
        runs_per_day=10,
    )

    assert report.projection.daily_ms == 90_000
    assert report.projection.weekly_ms == 450_000
    assert report.projection.monthly_ms == 1_800_000
    assert project_savings(1000, 0).monthly_ms == 0


def test_slower_candidate_gives_ratio_below_one() -> None:
    report = compare(make_result("A", duration_ms=500), make_result("B", duration_ms=1000))

    assert report.speedup_ratio == 0.5
    assert report.time_saved_ms == -500
    assert report.tier is SpeedupTier.MARGINAL


def test_zero_memory_delta_leaves_memory_ratio_undefined() -> None:
    report = compare(
        make_result("A", duration_ms=200, memory_delta=5),
        make_result("B", duration_ms=100, memory_delta=0),
    )

    assert report.memory_efficiency_ratio is None
    assert report.speedup_ratio == 2.0


@pytest.mark.parametrize(
    "a, b",
    [
        (None, make_result("B", duration_ms=100)),
        (make_result("A", duration_ms=100), None),
        (None, None),
        (make_result("A", duration_ms=100), make_result("B", duration_ms=0)),
        (make_result("A", duration_ms=0), make_result("B", duration_ms=100)),
    ],
)
def test_comparison_unavailable_instead_of_division_errors(a, b) -> None:
    with pytest.raises(ComparisonUnavailable):
        compare(a, b)


def test_missing_result_is_named() -> None:
    with pytest.raises(ComparisonUnavailable, match="baseline"):
        compare(None, make_result("B", duration_ms=100))


@pytest.mark.parametrize(
    "ratio, tier",
    [
        (12.0, SpeedupTier.REVOLUTIONARY),
        (10.0, SpeedupTier.REVOLUTIONARY),
        (5.0, SpeedupTier.CLEARLY_NOTICEABLE),
        (2.0, SpeedupTier.IMPROVES_EXPERIENCE),
        (1.9, SpeedupTier.MARGINAL),
    ],
)
def test_classify_speedup(ratio: float, tier: SpeedupTier) -> None:
    assert classify_speedup(ratio) is tier


def test_both_missing_results_are_named() -> None:
    with pytest.raises(ComparisonUnavailable, match="baseline and candidate"):
        compare(None, None)
