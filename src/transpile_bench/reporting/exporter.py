"""Report export interfaces."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Protocol

from transpile_bench.core.models import SessionReport


class ExportFormat(str, Enum):
    """Supported export formats."""

    JSON = "json"
    MARKDOWN = "md"


class ReportExporter(Protocol):
    """Interface for session report exporters."""

    def export(self, report: SessionReport, destination: Path, fmt: ExportFormat) -> Path:
        """Writes the report in the given format and returns the destination."""
