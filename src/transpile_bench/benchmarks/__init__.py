"""Tool benchmarking.

This package provides:
- memory sampling and a periodic run monitor,
- the subprocess tool runner and prerequisite probe,
- the default Babel/SWC invocation specs,
- the comparator.
"""

from .comparator import classify_speedup, compare, project_savings
from .memory import RunMonitor, sample_memory
from .runner import ToolRunner, probe_tool, verify_tools
from .tools import babel_invocation, swc_invocation

__all__ = [
    "RunMonitor",
    "ToolRunner",
    "babel_invocation",
    "classify_speedup",
    "compare",
    "probe_tool",
    "project_savings",
    "sample_memory",
    "swc_invocation",
    "verify_tools",
]
