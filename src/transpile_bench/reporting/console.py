"""Human-readable rendering of results and comparisons."""

from __future__ import annotations

from transpile_bench.core.models import (
    BenchmarkResult,
    ComparisonReport,
    SessionReport,
    SpeedupTier,
    ToolFailure,
)

RULE = "=" * 60

_TIER_TEXT = {
    SpeedupTier.REVOLUTIONARY: "a revolutionary difference",
    SpeedupTier.CLEARLY_NOTICEABLE: "a clearly noticeable difference",
    SpeedupTier.IMPROVES_EXPERIENCE: "enough to improve the development experience",
    SpeedupTier.MARGINAL: "marginal, but it adds up over time",
}


def _seconds(ms: int | float) -> str:
    return f"{ms / 1000:.1f}s"


def _minutes(ms: int | float) -> str:
    return f"{ms / 60_000:.1f} min"


def render_result(result: BenchmarkResult) -> str:
    lines = [
        result.tool_name,
        f"   duration:        {_seconds(result.duration_ms)}",
        f"   files processed: {result.files_processed:,}",
        f"   throughput:      {round(result.files_per_second):,} files/s",
        f"   memory start:    {result.start_memory.heap_used_mb} MB heap / {result.start_memory.rss_mb} MB rss",
        f"   memory end:      {result.end_memory.heap_used_mb} MB heap / {result.end_memory.rss_mb} MB rss",
        f"   memory delta:    {result.memory_delta:+d} MB" + (" (memory reclaimed)" if result.gc_expected else ""),
    ]
    if result.peak_tool_rss_mb:
        lines.append(f"   tool peak rss:   {result.peak_tool_rss_mb} MB")
    return "\n".join(lines)


def render_failure(failure: ToolFailure) -> str:
    lines = [failure.tool_name, f"   failed: {failure.reason}"]
    if failure.stderr:
        for line in failure.stderr.splitlines()[-10:]:
            lines.append(f"   | {line}")
    return "\n".join(lines)


def render_comparison(report: ComparisonReport) -> str:
    ratio = report.speedup_ratio
    faster = report.candidate.tool_name if ratio >= 1 else report.baseline.tool_name
    factor = ratio if ratio >= 1 else (1 / ratio)
    memory = (
        f"{report.memory_efficiency_ratio:.2f}x"
        if report.memory_efficiency_ratio is not None
        else "n/a (no memory change)"
    )
    projection = report.projection
    return "\n".join(
        [
            "Comparison",
            f"   speedup:       {faster} is {factor:.1f}x faster",
            f"   memory ratio:  {memory}",
            f"   time saved:    {_seconds(report.time_saved_ms)}",
            f"   verdict:       {ratio:.1f}x is {_TIER_TEXT[report.tier]}",
            "",
            f"Projected savings ({projection.runs_per_day} runs per day)",
            f"   daily:         {_minutes(projection.daily_ms)}",
            f"   weekly:        {_minutes(projection.weekly_ms)}",
            f"   monthly:       {_minutes(projection.monthly_ms)} ({projection.monthly_ms / 3_600_000:.1f} h)",
        ]
    )


def render_session(report: SessionReport) -> str:
    sections: list[str] = [RULE, "Benchmark results", RULE]
    failures = {failure.tool_name: failure for failure in report.failures}

    for name, result in report.results:
        sections.append("")
        if result is not None:
            sections.append(render_result(result))
        elif name in failures:
            sections.append(render_failure(failures[name]))
        else:
            sections.append(f"{name}\n   not run")

    sections.append("")
    if report.comparison is not None:
        sections.append(render_comparison(report.comparison))
    else:
        reason = report.comparison_unavailable_reason or "not enough results"
        sections.append(f"No comparison available: {reason}")

    return "\n".join(sections) + "\n"
