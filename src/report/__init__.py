"""Report generation entry points."""

from report.build import build_report, report_from_listing
from report.render import (
    ReportFormat,
    render_json,
    render_report,
    render_text,
    write_report,
)

__all__ = [
    "ReportFormat",
    "build_report",
    "render_json",
    "render_report",
    "render_text",
    "report_from_listing",
    "write_report",
]
