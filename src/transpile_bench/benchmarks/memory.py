"""Memory sampling and the periodic run monitor."""

from __future__ import annotations

import threading
import time
from typing import Callable

import psutil
import structlog

from transpile_bench.core.models import MemorySample
from transpile_bench.core.progress import NullProgressReporter, ProgressReporter

_MB = 1024 * 1024

logger = structlog.get_logger(__name__)


def _to_mb(value: int | float) -> int:
    return int(round(value / _MB))


def _tree_rss(process: psutil.Process) -> int:
    total = 0
    try:
        children = process.children(recursive=True)
    except (psutil.NoSuchProcess, psutil.AccessDenied):
        return 0
    for child in children:
        try:
            total += child.memory_info().rss
        except (psutil.NoSuchProcess, psutil.AccessDenied):
            continue
    return total


def sample_memory(process: psutil.Process | None = None) -> MemorySample:
    """Samples the harness process (or ``process``).

    ``heap_used`` is the unique set size, ``heap_total`` the virtual size and
    ``external`` the summed RSS of all child processes.
    """

    process = process or psutil.Process()
    try:
        full = process.memory_full_info()
        rss, vms, uss = full.rss, full.vms, full.uss
    except psutil.AccessDenied:
        info = process.memory_info()
        rss, vms, uss = info.rss, info.vms, info.rss

    return MemorySample(
        rss_mb=_to_mb(rss),
        heap_used_mb=_to_mb(uss),
        heap_total_mb=_to_mb(vms),
        external_mb=_to_mb(_tree_rss(process)),
    )


def process_tree_rss_mb(pid: int) -> int:
    """RSS of ``pid`` plus all its descendants, or 0 once the process is gone."""

    try:
        process = psutil.Process(pid)
        own = process.memory_info().rss
    except (psutil.NoSuchProcess, psutil.AccessDenied):
        return 0
    return _to_mb(own + _tree_rss(process))


def kill_process_tree(pid: int) -> None:
    """Kills ``pid`` and every descendant still alive.

    Descendants are collected before the parent is killed, since orphaned
    grandchildren (``npx`` -> ``sh`` -> ``node``) are reparented.
    """

    try:
        parent = psutil.Process(pid)
        children = parent.children(recursive=True)
    except psutil.NoSuchProcess:
        return

    for process in (*children, parent):
        try:
            process.kill()
        except psutil.NoSuchProcess:
            continue
    psutil.wait_procs(children, timeout=5)


class RunMonitor:
    """Background sampler active while one tool subprocess runs.

    Use as a context manager; leaving the block stops and joins the thread,
    whatever the outcome of the run.
    """

    def __init__(
        self,
        tool_name: str,
        *,
        pid: int | None = None,
        interval: float | None = 5.0,
        progress: ProgressReporter | None = None,
        sampler: Callable[[], MemorySample] = sample_memory,
    ) -> None:
        self._tool_name = tool_name
        self._pid = pid
        self._interval = interval
        self._progress = progress or NullProgressReporter()
        self._sampler = sampler
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None
        self._started_at = 0.0
        self.samples: list[MemorySample] = []
        self.peak_tool_rss_mb = 0

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self._interval is None or self._thread is not None:
            return
        self._started_at = time.perf_counter()
        self._thread = threading.Thread(
            target=self._loop,
            name=f"run-monitor-{self._tool_name}",
            daemon=True,
        )
        self._thread.start()

    def stop(self) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join()

    def __enter__(self) -> "RunMonitor":
        self.start()
        return self

    def __exit__(self, *_exc_info: object) -> None:
        self.stop()

    def _loop(self) -> None:
        assert self._interval is not None
        while not self._stop.wait(self._interval):
            self._tick()

    def _tick(self) -> None:
        elapsed = time.perf_counter() - self._started_at
        try:
            sample = self._sampler()
        except psutil.Error as exc:
            logger.debug("memory-sample-failed", tool=self._tool_name, error=str(exc))
            return

        self.samples.append(sample)
        tool_rss = process_tree_rss_mb(self._pid) if self._pid is not None else sample.external_mb
        self.peak_tool_rss_mb = max(self.peak_tool_rss_mb, tool_rss)
        try:
            self._progress.update(
                f"{self._tool_name} running for {elapsed:.1f}s "
                f"(harness heap {sample.heap_used_mb} MB, tool rss {tool_rss} MB)"
            )
        except Exception as exc:
            logger.warning("progress-update-failed", tool=self._tool_name, error=str(exc))
