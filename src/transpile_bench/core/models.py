"""Data models shared by the generator, runner, comparator and reporter."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, Optional, Tuple


class SessionState(str, Enum):
    """Lifecycle states of a benchmark session."""

    IDLE = "idle"
    TOOLS_VERIFIED = "tools_verified"
    CORPUS_GENERATED = "corpus_generated"
    FIRST_TOOL_BENCHMARKED = "first_tool_benchmarked"
    SECOND_TOOL_BENCHMARKED = "second_tool_benchmarked"
    REPORTED = "reported"
    CLEANED_UP = "cleaned_up"
    DONE = "done"
    ABORTED = "aborted"


@dataclass(frozen=True, slots=True)
class GeneratedCorpus:
    """Synthetic input files written to ``output_dir``."""

    output_dir: Path
    files: Tuple[Path, ...]
    template_usage: Dict[str, int] = field(default_factory=dict)

    @property
    def file_count(self) -> int:
        return len(self.files)


@dataclass(frozen=True, slots=True)
class ToolInvocationSpec:
    """Everything needed to run one external transformation tool."""

    name: str
    command: Tuple[str, ...]
    config_path: Path
    config_contents: str
    output_dir: Path
    version_command: Tuple[str, ...] = ()
    install_hint: str = ""
    working_dir: Optional[Path] = None


@dataclass(frozen=True, slots=True)
class MemorySample:
    """Process memory snapshot, in whole megabytes."""

    rss_mb: int
    heap_used_mb: int
    heap_total_mb: int
    external_mb: int


@dataclass(frozen=True, slots=True)
class BenchmarkResult:
    """Outcome of one successful tool run."""

    tool_name: str
    duration_ms: int
    files_processed: int
    start_memory: MemorySample
    end_memory: MemorySample
    memory_delta: int
    gc_expected: bool
    peak_tool_rss_mb: int = 0

    @property
    def files_per_second(self) -> float:
        if self.duration_ms <= 0:
            return 0.0
        return self.files_processed / (self.duration_ms / 1000)


@dataclass(frozen=True, slots=True)
class ToolFailure:
    """Recorded in place of a result when a tool run fails."""

    tool_name: str
    reason: str
    stderr: str = ""


class SpeedupTier(str, Enum):
    """Qualitative magnitude of a speedup ratio."""

    REVOLUTIONARY = "revolutionary"
    CLEARLY_NOTICEABLE = "clearly_noticeable"
    IMPROVES_EXPERIENCE = "improves_experience"
    MARGINAL = "marginal"


@dataclass(frozen=True, slots=True)
class SavingsProjection:
    """Time saved, scaled linearly by run frequency."""

    runs_per_day: int
    daily_ms: int
    weekly_ms: int
    monthly_ms: int


@dataclass(frozen=True, slots=True)
class ComparisonReport:
    """Relative performance of ``candidate`` against ``baseline``."""

    baseline: BenchmarkResult
    candidate: BenchmarkResult
    speedup_ratio: float
    memory_efficiency_ratio: Optional[float]
    time_saved_ms: int
    tier: SpeedupTier
    projection: SavingsProjection


@dataclass(frozen=True, slots=True)
class SessionReport:
    """Everything one session measured, in benchmark order."""

    created_at: str
    file_count: int
    results: Tuple[Tuple[str, Optional[BenchmarkResult]], ...]
    failures: Tuple[ToolFailure, ...] = ()
    comparison: Optional[ComparisonReport] = None
    comparison_unavailable_reason: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return not self.failures and all(result is not None for _, result in self.results)
