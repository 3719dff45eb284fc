"""Shared modules: configuration, logging, filesystem helpers, error reports."""

from .config import BenchmarkConfig
from .error_reporting import ErrorReport, get_error_reports_dir, write_error_report
from .filesystem import remove_path, reset_directory
from .logging import configure_logging

__all__ = [
	"BenchmarkConfig",
	"configure_logging",
	"ErrorReport",
	"get_error_reports_dir",
	"remove_path",
	"reset_directory",
	"write_error_report",
]
