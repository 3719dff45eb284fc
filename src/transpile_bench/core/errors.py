"""Error hierarchy of the benchmark harness."""

from __future__ import annotations

from typing import Sequence


class BenchError(RuntimeError):
    """Base class for harness errors."""


class PrerequisiteMissingError(BenchError):
    """A benchmarked tool cannot be invoked at all."""

    def __init__(self, tools: Sequence[str], install_hints: Sequence[str] = ()) -> None:
        self.tools = tuple(tools)
        self.install_hints = tuple(hint for hint in install_hints if hint)
        super().__init__(f"Required tools are not available: {', '.join(self.tools)}")


class CorpusGenerationError(BenchError):
    """Writing the synthetic corpus failed; the partial corpus is invalid."""


class ToolInvocationError(BenchError):
    """A tool subprocess failed to spawn or exited with a non-zero status."""

    def __init__(self, tool: str, message: str, *, exit_code: int | None = None, stderr: str = "") -> None:
        self.tool = tool
        self.exit_code = exit_code
        self.stderr = stderr
        super().__init__(f"{tool}: {message}")


class ToolTimeoutError(ToolInvocationError):
    """A tool subprocess exceeded the configured timeout and was killed."""


class ComparisonUnavailable(BenchError):
    """Two results cannot be compared (missing result or degenerate duration)."""
