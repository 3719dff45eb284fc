"""Runs one external transformation tool and measures it."""

from __future__ import annotations

import subprocess
import time
from pathlib import Path
from typing import Callable, Iterable

import structlog

from transpile_bench.core.errors import (
    PrerequisiteMissingError,
    ToolInvocationError,
    ToolTimeoutError,
)
from transpile_bench.core.models import BenchmarkResult, MemorySample, ToolInvocationSpec
from transpile_bench.core.progress import NullProgressReporter, ProgressReporter
from transpile_bench.shared.filesystem import reset_directory

from .memory import RunMonitor, kill_process_tree, sample_memory

_ERROR_TEXT_LIMIT = 4000
_DRAIN_TIMEOUT = 5.0


def _error_text(stderr: str | None, stdout: str | None) -> str:
    text = (stderr or "").strip() or (stdout or "").strip()
    return text[-_ERROR_TEXT_LIMIT:]


class ToolRunner:
    """Invokes tools as blocking subprocesses, one at a time."""

    def __init__(
        self,
        *,
        sample_interval: float | None = 5.0,
        timeout: float | None = None,
        progress: ProgressReporter | None = None,
        sampler: Callable[[], MemorySample] = sample_memory,
    ) -> None:
        self._sample_interval = sample_interval
        self._timeout = timeout
        self._progress = progress or NullProgressReporter()
        self._sampler = sampler
        self._logger = structlog.get_logger(__name__)

    def run(self, spec: ToolInvocationSpec, *, files_processed: int) -> BenchmarkResult:
        """Runs ``spec`` once and returns its measurements.

        Raises :class:`ToolInvocationError` when the tool cannot be spawned,
        exits non-zero or exceeds the timeout.
        """

        self._prepare(spec)

        self._logger.info("tool-run-started", tool=spec.name, command=" ".join(spec.command))
        start_memory = self._sampler()
        started = time.perf_counter()

        try:
            process = subprocess.Popen(
                list(spec.command),
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
                cwd=spec.working_dir,
            )
        except OSError as exc:
            self._logger.error("tool-spawn-failed", tool=spec.name, error=str(exc))
            raise ToolInvocationError(spec.name, f"failed to start: {exc}", stderr=str(exc)) from exc

        monitor = RunMonitor(
            spec.name,
            pid=process.pid,
            interval=self._sample_interval,
            progress=self._progress,
            sampler=self._sampler,
        )
        with monitor:
            stdout, stderr = self._wait(spec, process)

        finished = time.perf_counter()

        if process.returncode != 0:
            error_text = _error_text(stderr, stdout)
            self._logger.error(
                "tool-run-failed",
                tool=spec.name,
                exit_code=process.returncode,
                stderr=error_text,
            )
            raise ToolInvocationError(
                spec.name,
                f"exited with status {process.returncode}",
                exit_code=process.returncode,
                stderr=error_text,
            )

        end_memory = self._sampler()
        duration_ms = int(round((finished - started) * 1000))
        memory_delta = end_memory.heap_used_mb - start_memory.heap_used_mb

        result = BenchmarkResult(
            tool_name=spec.name,
            duration_ms=duration_ms,
            files_processed=int(files_processed),
            start_memory=start_memory,
            end_memory=end_memory,
            memory_delta=memory_delta,
            gc_expected=memory_delta < 0,
            peak_tool_rss_mb=monitor.peak_tool_rss_mb,
        )
        self._logger.info(
            "tool-run-finished",
            tool=spec.name,
            duration_ms=duration_ms,
            memory_delta_mb=memory_delta,
        )
        return result

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _prepare(self, spec: ToolInvocationSpec) -> None:
        try:
            config_path = Path(spec.config_path)
            config_path.parent.mkdir(parents=True, exist_ok=True)
            config_path.write_text(spec.config_contents, encoding="utf-8")
            reset_directory(spec.output_dir)
        except OSError as exc:
            raise ToolInvocationError(spec.name, f"cannot prepare run: {exc}", stderr=str(exc)) from exc

    def _wait(self, spec: ToolInvocationSpec, process: subprocess.Popen) -> tuple[str, str]:
        try:
            return process.communicate(timeout=self._timeout)
        except subprocess.TimeoutExpired:
            kill_process_tree(process.pid)
            try:
                stdout, stderr = process.communicate(timeout=_DRAIN_TIMEOUT)
            except subprocess.TimeoutExpired:
                process.kill()
                process.wait()
                stdout, stderr = "", ""
            self._logger.error("tool-run-timed-out", tool=spec.name, timeout=self._timeout)
            raise ToolTimeoutError(
                spec.name,
                f"timed out after {self._timeout}s",
                exit_code=process.returncode,
                stderr=_error_text(stderr, stdout),
            ) from None


def probe_tool(spec: ToolInvocationSpec, *, timeout: float | None = 120.0) -> bool:
    """True when the tool's version query exits successfully."""

    if not spec.version_command:
        return True
    try:
        completed = subprocess.run(
            list(spec.version_command),
            stdin=subprocess.DEVNULL,
            capture_output=True,
            text=True,
            timeout=timeout,
            cwd=spec.working_dir,
            check=False,
        )
    except (OSError, subprocess.TimeoutExpired):
        return False
    return completed.returncode == 0


def verify_tools(specs: Iterable[ToolInvocationSpec], *, timeout: float | None = 120.0) -> None:
    """Raises :class:`PrerequisiteMissingError` unless every tool answers its version query."""

    logger = structlog.get_logger(__name__)
    missing: list[ToolInvocationSpec] = []
    for spec in specs:
        if probe_tool(spec, timeout=timeout):
            logger.info("tool-available", tool=spec.name)
        else:
            logger.error("tool-missing", tool=spec.name, command=" ".join(spec.version_command))
            missing.append(spec)

    if missing:
        hints: list[str] = []
        for spec in missing:
            if spec.install_hint and spec.install_hint not in hints:
                hints.append(spec.install_hint)
        raise PrerequisiteMissingError([spec.name for spec in missing], hints)
