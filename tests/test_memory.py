"""Tests for memory sampling and the run monitor."""

from __future__ import annotations

import subprocess
import sys
import time

import psutil
import pytest

from transpile_bench.benchmarks.memory import (
    RunMonitor,
    kill_process_tree,
    process_tree_rss_mb,
    sample_memory,
)
from transpile_bench.core.models import MemorySample

_SAMPLE = MemorySample(rss_mb=10, heap_used_mb=5, heap_total_mb=50, external_mb=3)


def test_sample_memory_reports_whole_megabytes() -> None:
    sample = sample_memory()

    assert isinstance(sample.rss_mb, int)
    assert sample.rss_mb > 0
    assert sample.heap_total_mb >= sample.rss_mb
    assert sample.external_mb >= 0


def test_process_tree_rss_of_missing_process_is_zero() -> None:
    assert process_tree_rss_mb(2**22 + 1) == 0


def test_monitor_collects_samples_and_stops() -> None:
    monitor = RunMonitor("tool", interval=0.01, sampler=lambda: _SAMPLE)

    with monitor:
        time.sleep(0.15)
        assert monitor.running

    assert not monitor.running
    assert monitor.samples
    assert monitor.peak_tool_rss_mb == 3


def test_monitor_stops_when_run_raises() -> None:
    monitor = RunMonitor("tool", interval=0.01, sampler=lambda: _SAMPLE)

    with pytest.raises(RuntimeError):
        with monitor:
            raise RuntimeError("tool crashed")

    assert not monitor.running


def test_monitor_stop_does_not_wait_for_full_interval() -> None:
    monitor = RunMonitor("tool", interval=60, sampler=lambda: _SAMPLE)

    started = time.perf_counter()
    with monitor:
        pass

    assert time.perf_counter() - started < 5
    assert monitor.samples == []


def test_disabled_monitor_never_starts_a_thread() -> None:
    monitor = RunMonitor("tool", interval=None, sampler=lambda: _SAMPLE)

    with monitor:
        assert not monitor.running


def test_monitor_survives_failing_progress_reporter() -> None:
    class Exploding:
        def update(self, message: str, *, percentage: int | None = None) -> None:
            raise ValueError("display closed")

    monitor = RunMonitor("tool", interval=0.01, progress=Exploding(), sampler=lambda: _SAMPLE)

    with monitor:
        time.sleep(0.15)
        assert monitor.running

    assert len(monitor.samples) > 1


def test_kill_process_tree_stops_parent_and_children() -> None:
    parent = subprocess.Popen(
        [
            sys.executable,
            "-c",
            "import subprocess, sys, time; "
            "subprocess.Popen([sys.executable, '-c', 'import time; time.sleep(30)']); "
            "time.sleep(30)",
        ]
    )
    deadline = time.perf_counter() + 10
    children = []
    while not children and time.perf_counter() < deadline:
        children = psutil.Process(parent.pid).children()
        time.sleep(0.05)
    assert children

    kill_process_tree(parent.pid)

    assert parent.wait(timeout=5) != 0
    for child in children:
        try:
            assert child.status() == psutil.STATUS_ZOMBIE
        except psutil.NoSuchProcess:
            pass


def test_kill_process_tree_ignores_missing_process() -> None:
    kill_process_tree(2**22 + 1)
