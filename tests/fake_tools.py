"""Fake transformation tools for tests.

Each tool is a short Python program run with the current interpreter, so the
tests never need Node, Babel or SWC.
"""

from __future__ import annotations

import sys
from pathlib import Path

from transpile_bench.core.models import BenchmarkResult, MemorySample, ToolInvocationSpec

COPY_TREE = "import shutil, sys; shutil.copytree(sys.argv[1], sys.argv[2], dirs_exist_ok=True)"
FAIL = "import sys; sys.stderr.write('SyntaxError: unexpected token\\n'); sys.exit(1)"
SLEEP = "import time; time.sleep(30)"
# Launcher that leaves the real work to a grandchild holding the output pipes, like npx.
SLEEP_IN_GRANDCHILD = (
    "import pathlib, subprocess, sys; "
    "child = subprocess.Popen([sys.executable, '-c', 'import time; time.sleep(30)']); "
    "pathlib.Path(sys.argv[2], 'grandchild.pid').write_text(str(child.pid)); "
    "child.wait()"
)
READ_STDIN = "import sys; sys.exit(0 if sys.stdin.read() == '' else 1)"
VERSION_OK = (sys.executable, "--version")
VERSION_MISSING = (sys.executable, "-c", "import sys; sys.exit(127)")


def fake_tool(
    name: str,
    *,
    script: str,
    corpus_dir: Path,
    output_dir: Path,
    config_path: Path,
    version_command: tuple[str, ...] = VERSION_OK,
) -> ToolInvocationSpec:
    return ToolInvocationSpec(
        name=name,
        command=(sys.executable, "-c", script, str(corpus_dir), str(output_dir)),
        config_path=config_path,
        config_contents='{"fake": true}\n',
        output_dir=output_dir,
        version_command=version_command,
        install_hint=f"install {name}",
        working_dir=config_path.parent,
    )


def make_result(name: str, *, duration_ms: int, memory_delta: int = 0, files: int = 100) -> BenchmarkResult:
    start = MemorySample(rss_mb=100, heap_used_mb=50, heap_total_mb=400, external_mb=0)
    end = MemorySample(
        rss_mb=100 + memory_delta,
        heap_used_mb=50 + memory_delta,
        heap_total_mb=400,
        external_mb=0,
    )
    return BenchmarkResult(
        tool_name=name,
        duration_ms=duration_ms,
        files_processed=files,
        start_memory=start,
        end_memory=end,
        memory_delta=memory_delta,
        gc_expected=memory_delta < 0,
    )
