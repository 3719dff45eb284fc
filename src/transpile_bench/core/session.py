"""Benchmark session lifecycle: verify, generate, benchmark, compare, report, clean up."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

import structlog

from transpile_bench.benchmarks.comparator import compare
from transpile_bench.benchmarks.runner import ToolRunner, verify_tools
from transpile_bench.benchmarks.tools import babel_invocation, swc_invocation
from transpile_bench.corpus.generator import generate_corpus
from transpile_bench.corpus.templates import DEFAULT_TEMPLATES, Template
from transpile_bench.reporting.console import render_session
from transpile_bench.shared.config import BenchmarkConfig
from transpile_bench.shared.filesystem import remove_path

from .errors import ComparisonUnavailable, ToolInvocationError
from .models import (
    BenchmarkResult,
    ComparisonReport,
    GeneratedCorpus,
    SessionReport,
    SessionState,
    ToolFailure,
    ToolInvocationSpec,
)
from .progress import DefaultProgressReporter, ProgressReporter

ReportSink = Callable[[SessionReport], None]
ToolVerifier = Callable[[Iterable[ToolInvocationSpec]], None]


def print_report(report: SessionReport) -> None:
    print(render_session(report), end="", flush=True)


class BenchmarkSession:
    """Runs one comparison of a baseline tool against a candidate tool.

    Tools run strictly one after another against the same corpus. Cleanup of
    every generated artifact happens on every exit path of :meth:`run`.
    """

    def __init__(
        self,
        config: BenchmarkConfig,
        *,
        baseline: ToolInvocationSpec | None = None,
        candidate: ToolInvocationSpec | None = None,
        runner: ToolRunner | None = None,
        templates: Sequence[Template] = DEFAULT_TEMPLATES,
        progress_reporter: ProgressReporter | None = None,
        report_sink: ReportSink | None = None,
        verifier: ToolVerifier = verify_tools,
    ) -> None:
        self._config = config
        self._baseline = baseline or babel_invocation(config)
        self._candidate = candidate or swc_invocation(config)
        self._progress_reporter = progress_reporter or DefaultProgressReporter()
        self._runner = runner or ToolRunner(
            sample_interval=config.sample_interval_seconds,
            timeout=config.tool_timeout_seconds,
            progress=self._progress_reporter,
        )
        self._templates = tuple(templates)
        self._report_sink = report_sink or print_report
        self._verifier = verifier
        self._logger = structlog.get_logger(__name__)
        self._state = SessionState.IDLE
        self.history: List[SessionState] = [SessionState.IDLE]
        self.corpus: GeneratedCorpus | None = None
        self.report: SessionReport | None = None

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def tools(self) -> Tuple[ToolInvocationSpec, ToolInvocationSpec]:
        return self._baseline, self._candidate

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def run(self) -> SessionReport:
        """Executes the whole session and returns its report.

        Prerequisite and corpus failures propagate after cleanup; tool
        failures are recorded in the report instead.
        """

        if self._state is not SessionState.IDLE:
            raise RuntimeError("A benchmark session can only be run once")

        aborted = True
        try:
            self._verify_tools()
            corpus = self._generate_corpus()
            results, failures = self._benchmark(corpus)
            report = self._build_report(results, failures)
            self._report_sink(report)
            self.report = report
            self._enter(SessionState.REPORTED)
            aborted = False
            return report
        finally:
            self.cleanup()
            self._enter(SessionState.ABORTED if aborted else SessionState.DONE)
            if aborted:
                self._logger.warning("session-aborted")

    def cleanup(self) -> List[Path]:
        """Deletes the corpus, tool output directories and tool config files.

        Absent paths are skipped; deletion errors are logged, never raised.
        Returns the paths that were actually removed.
        """

        removed: List[Path] = []
        for path in self._artifacts():
            try:
                if remove_path(path):
                    removed.append(path)
            except OSError as exc:
                self._logger.warning("cleanup-failed", path=str(path), error=str(exc))

        if removed:
            self._logger.info("cleanup-finished", removed=[str(path) for path in removed])
        if self._state not in (SessionState.CLEANED_UP, SessionState.DONE, SessionState.ABORTED):
            self._enter(SessionState.CLEANED_UP)
        return removed

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    def _verify_tools(self) -> None:
        self._progress("Checking installed tools", percentage=0)
        self._verifier(self.tools)
        self._enter(SessionState.TOOLS_VERIFIED)

    def _generate_corpus(self) -> GeneratedCorpus:
        self._progress(f"Generating {self._config.file_count} synthetic files", percentage=5)
        corpus = generate_corpus(
            self._config.file_count,
            self._config.corpus_dir,
            templates=self._templates,
            extension=self._config.file_extension,
            progress=self._progress_reporter,
            progress_every=self._config.progress_every,
        )
        self.corpus = corpus
        self._enter(SessionState.CORPUS_GENERATED)
        return corpus

    def _benchmark(
        self, corpus: GeneratedCorpus
    ) -> Tuple[List[Tuple[str, Optional[BenchmarkResult]]], List[ToolFailure]]:
        results: List[Tuple[str, Optional[BenchmarkResult]]] = []
        failures: List[ToolFailure] = []
        steps = (
            (self._baseline, SessionState.FIRST_TOOL_BENCHMARKED, 20),
            (self._candidate, SessionState.SECOND_TOOL_BENCHMARKED, 55),
        )

        for spec, state, percentage in steps:
            self._progress(f"Benchmarking {spec.name}", percentage=percentage)
            result: BenchmarkResult | None = None
            try:
                result = self._runner.run(spec, files_processed=corpus.file_count)
            except ToolInvocationError as exc:
                self._logger.error("tool-benchmark-failed", tool=spec.name, error=str(exc), stderr=exc.stderr)
                failures.append(ToolFailure(tool_name=spec.name, reason=str(exc), stderr=exc.stderr))
            results.append((spec.name, result))
            self._enter(state)

        return results, failures

    def _build_report(
        self,
        results: List[Tuple[str, Optional[BenchmarkResult]]],
        failures: List[ToolFailure],
    ) -> SessionReport:
        comparison: ComparisonReport | None = None
        reason: str | None = None
        try:
            comparison = compare(results[0][1], results[1][1], runs_per_day=self._config.runs_per_day)
        except ComparisonUnavailable as exc:
            reason = str(exc)
            self._logger.warning("comparison-unavailable", reason=reason)

        self._progress("Benchmarks finished", percentage=95)
        return SessionReport(
            created_at=datetime.now(timezone.utc).isoformat(),
            file_count=self._config.file_count,
            results=tuple(results),
            failures=tuple(failures),
            comparison=comparison,
            comparison_unavailable_reason=reason,
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _artifacts(self) -> List[Path]:
        return [
            self._config.corpus_dir,
            Path(self._baseline.output_dir),
            Path(self._candidate.output_dir),
            Path(self._baseline.config_path),
            Path(self._candidate.config_path),
        ]

    def _enter(self, state: SessionState) -> None:
        self._state = state
        self.history.append(state)
        self._logger.debug("session-state", state=state.value)

    def _progress(self, message: str, *, percentage: int | None = None) -> None:
        self._progress_reporter.update(message, percentage=percentage)
