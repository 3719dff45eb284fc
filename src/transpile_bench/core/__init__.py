"""Domain models, errors and progress observers.

The session orchestrator lives in :mod:`transpile_bench.core.session`.
"""

from . import errors, models, progress
from .errors import (
	BenchError,
	ComparisonUnavailable,
	CorpusGenerationError,
	PrerequisiteMissingError,
	ToolInvocationError,
	ToolTimeoutError,
)

__all__ = [
	"errors",
	"models",
	"progress",
	"BenchError",
	"ComparisonUnavailable",
	"CorpusGenerationError",
	"PrerequisiteMissingError",
	"ToolInvocationError",
	"ToolTimeoutError",
]
