"""Relative performance of two benchmark results."""

from __future__ import annotations

from transpile_bench.core.errors import ComparisonUnavailable
from transpile_bench.core.models import (
    BenchmarkResult,
    ComparisonReport,
    SavingsProjection,
    SpeedupTier,
)

WORKING_DAYS_PER_WEEK = 5
WEEKS_PER_MONTH = 4


def classify_speedup(ratio: float) -> SpeedupTier:
    if ratio >= 10:
        return SpeedupTier.REVOLUTIONARY
    if ratio >= 5:
        return SpeedupTier.CLEARLY_NOTICEABLE
    if ratio >= 2:
        return SpeedupTier.IMPROVES_EXPERIENCE
    return SpeedupTier.MARGINAL


def project_savings(time_saved_ms: int, runs_per_day: int) -> SavingsProjection:
    """Scales one run's saving linearly: N runs/day, 5 days/week, 4 weeks/month."""

    daily = int(time_saved_ms) * int(runs_per_day)
    weekly = daily * WORKING_DAYS_PER_WEEK
    return SavingsProjection(
        runs_per_day=int(runs_per_day),
        daily_ms=daily,
        weekly_ms=weekly,
        monthly_ms=weekly * WEEKS_PER_MONTH,
    )


def compare(
    a: BenchmarkResult | None,
    b: BenchmarkResult | None,
    *,
    runs_per_day: int = 10,
) -> ComparisonReport:
    """Compares ``b`` (candidate) against ``a`` (baseline).

    Raises :class:`ComparisonUnavailable` when a result is missing or a
    duration is zero. A zero memory delta on ``b`` leaves the memory ratio
    undefined (``None``) instead of failing the whole comparison.
    """

    if a is None or b is None:
        missing = [label for label, result in (("baseline", a), ("candidate", b)) if result is None]
        raise ComparisonUnavailable(f"missing result for {' and '.join(missing)}")

    if a.duration_ms <= 0 or b.duration_ms <= 0:
        zero = a.tool_name if a.duration_ms <= 0 else b.tool_name
        raise ComparisonUnavailable(f"{zero} reported a zero duration")

    speedup = a.duration_ms / b.duration_ms
    memory_ratio = abs(a.memory_delta) / abs(b.memory_delta) if b.memory_delta != 0 else None
    time_saved = a.duration_ms - b.duration_ms

    return ComparisonReport(
        baseline=a,
        candidate=b,
        speedup_ratio=speedup,
        memory_efficiency_ratio=memory_ratio,
        time_saved_ms=time_saved,
        tier=classify_speedup(speedup),
        projection=project_savings(time_saved, runs_per_day),
    )
