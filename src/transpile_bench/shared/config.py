"""Benchmark session configuration."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any


@dataclass(frozen=True, slots=True)
class BenchmarkConfig:
    """Immutable settings for one benchmark session.

    Relative directories are resolved against ``working_dir``; the generated
    tool configuration files are written there as well.
    """

    file_count: int = 10_000
    output_dir: Path = Path("benchmark_files")
    babel_output_dir: Path = Path("babel_output")
    swc_output_dir: Path = Path("swc_output")
    working_dir: Path = field(default_factory=Path.cwd)
    file_extension: str = ".tsx"
    progress_every: int = 1000
    sample_interval_seconds: float | None = 5.0
    runs_per_day: int = 10
    tool_timeout_seconds: float | None = None

    def __post_init__(self) -> None:
        if int(self.file_count) <= 0:
            raise ValueError(f"file_count must be positive, got {self.file_count}")
        if int(self.progress_every) <= 0:
            raise ValueError(f"progress_every must be positive, got {self.progress_every}")
        if int(self.runs_per_day) < 0:
            raise ValueError(f"runs_per_day must not be negative, got {self.runs_per_day}")
        if self.sample_interval_seconds is not None and self.sample_interval_seconds <= 0:
            raise ValueError("sample_interval_seconds must be positive or None")
        if self.tool_timeout_seconds is not None and self.tool_timeout_seconds <= 0:
            raise ValueError("tool_timeout_seconds must be positive or None")
        if not self.file_extension.startswith("."):
            raise ValueError(f"file_extension must start with '.', got {self.file_extension!r}")

    @classmethod
    def default(cls) -> "BenchmarkConfig":
        """Creates the default configuration rooted at the current directory."""

        return cls(working_dir=Path.cwd())

    def with_overrides(self, **overrides: Any) -> "BenchmarkConfig":
        """Returns a copy with the given non-``None`` fields replaced."""

        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes) if changes else self

    # ------------------------------------------------------------------
    # Resolved paths
    # ------------------------------------------------------------------

    def resolve(self, path: Path) -> Path:
        path = Path(path)
        return path if path.is_absolute() else Path(self.working_dir) / path

    @property
    def corpus_dir(self) -> Path:
        return self.resolve(self.output_dir)

    @property
    def babel_dir(self) -> Path:
        return self.resolve(self.babel_output_dir)

    @property
    def swc_dir(self) -> Path:
        return self.resolve(self.swc_output_dir)
