"""Rendering and export of benchmark reports."""

from .console import render_comparison, render_failure, render_result, render_session
from .default import DefaultReportExporter
from .exporter import ExportFormat, ReportExporter

__all__ = [
    "DefaultReportExporter",
    "ExportFormat",
    "ReportExporter",
    "render_comparison",
    "render_failure",
    "render_result",
    "render_session",
]
