"""Output formatting module."""

from textscan.output.report import (
    Report,
    ReportFormat,
    ReportKind,
    build_report,
    default_report_path,
    render_report,
    slugify,
    write_report,
)

__all__ = [
    "Report",
    "ReportFormat",
    "ReportKind",
    "build_report",
    "default_report_path",
    "render_report",
    "slugify",
    "write_report",
]
