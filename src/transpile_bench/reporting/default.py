"""Default session report export (JSON/Markdown)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List

from transpile_bench.core.models import (
    BenchmarkResult,
    ComparisonReport,
    MemorySample,
    SessionReport,
)
from .exporter import ExportFormat, ReportExporter


class DefaultReportExporter(ReportExporter):
    """Writes session reports as JSON or Markdown files."""

    def export(self, report: SessionReport, destination: Path, fmt: ExportFormat) -> Path:
        destination = Path(destination)
        destination.parent.mkdir(parents=True, exist_ok=True)

        if fmt is ExportFormat.JSON:
            destination.write_text(self.to_json(report), encoding="utf-8")
        elif fmt is ExportFormat.MARKDOWN:
            destination.write_text(self.to_markdown(report), encoding="utf-8")
        else:  # pragma: no cover - future formats
            raise ValueError(f"Unsupported export format: {fmt}")

        return destination

    # ------------------------------------------------------------------
    # JSON
    # ------------------------------------------------------------------

    def to_json(self, report: SessionReport) -> str:
        return json.dumps(self.build_payload(report), ensure_ascii=False, indent=2)

    def build_payload(self, report: SessionReport) -> Dict[str, object]:
        return {
            "created_at": report.created_at,
            "file_count": report.file_count,
            "succeeded": report.succeeded,
            "results": [
                {"tool": name, "result": self._result_to_dict(result) if result else None}
                for name, result in report.results
            ],
            "failures": [
                {"tool": failure.tool_name, "reason": failure.reason, "stderr": failure.stderr}
                for failure in report.failures
            ],
            "comparison": self._comparison_to_dict(report.comparison) if report.comparison else None,
            "comparison_unavailable_reason": report.comparison_unavailable_reason,
        }

    def _result_to_dict(self, result: BenchmarkResult) -> Dict[str, object]:
        return {
            "tool_name": result.tool_name,
            "duration_ms": result.duration_ms,
            "files_processed": result.files_processed,
            "files_per_second": round(result.files_per_second, 2),
            "start_memory": self._memory_to_dict(result.start_memory),
            "end_memory": self._memory_to_dict(result.end_memory),
            "memory_delta_mb": result.memory_delta,
            "gc_expected": result.gc_expected,
            "peak_tool_rss_mb": result.peak_tool_rss_mb,
        }

    @staticmethod
    def _memory_to_dict(sample: MemorySample) -> Dict[str, object]:
        return {
            "rss_mb": sample.rss_mb,
            "heap_used_mb": sample.heap_used_mb,
            "heap_total_mb": sample.heap_total_mb,
            "external_mb": sample.external_mb,
        }

    @staticmethod
    def _comparison_to_dict(comparison: ComparisonReport) -> Dict[str, object]:
        return {
            "baseline": comparison.baseline.tool_name,
            "candidate": comparison.candidate.tool_name,
            "speedup_ratio": comparison.speedup_ratio,
            "memory_efficiency_ratio": comparison.memory_efficiency_ratio,
            "time_saved_ms": comparison.time_saved_ms,
            "tier": comparison.tier.value,
            "projection": {
                "runs_per_day": comparison.projection.runs_per_day,
                "daily_ms": comparison.projection.daily_ms,
                "weekly_ms": comparison.projection.weekly_ms,
                "monthly_ms": comparison.projection.monthly_ms,
            },
        }

    # ------------------------------------------------------------------
    # Markdown
    # ------------------------------------------------------------------

    def to_markdown(self, report: SessionReport) -> str:
        lines: List[str] = ["# Benchmark Report", "", f"Generated: {report.created_at}", ""]
        lines.append(f"Files: {report.file_count}")
        lines.append("")

        failures = {failure.tool_name: failure for failure in report.failures}
        for name, result in report.results:
            lines.append(f"## {name}")
            lines.append("")
            if result is None:
                failure = failures.get(name)
                lines.append("Status: failed" if failure else "Status: not run")
                if failure is not None:
                    lines.append(f"Reason: {failure.reason}")
                lines.append("")
                continue

            lines.append(f"- duration_ms: {result.duration_ms}")
            lines.append(f"- files_processed: {result.files_processed}")
            lines.append(f"- files_per_second: {result.files_per_second:.2f}")
            lines.append(f"- memory_delta_mb: {result.memory_delta}")
            lines.append(f"- peak_tool_rss_mb: {result.peak_tool_rss_mb}")
            lines.append("")

        lines.append("## Comparison")
        lines.append("")
        comparison = report.comparison
        if comparison is None:
            lines.append(f"Not available: {report.comparison_unavailable_reason or 'not enough results'}")
        else:
            memory = comparison.memory_efficiency_ratio
            lines.append(f"- speedup_ratio: {comparison.speedup_ratio:.4f}")
            lines.append(f"- memory_efficiency_ratio: {memory:.4f}" if memory is not None else "- memory_efficiency_ratio: n/a")
            lines.append(f"- time_saved_ms: {comparison.time_saved_ms}")
            lines.append(f"- tier: {comparison.tier.value}")
            lines.append(f"- monthly_saved_ms ({comparison.projection.runs_per_day} runs/day): {comparison.projection.monthly_ms}")

        return "\n".join(lines).rstrip() + "\n"


__all__ = ["DefaultReportExporter"]
