"""Text and JSON renderings of a dependency report."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

import orjson

from contract.listing import (
    MAIN_PACKAGE_MARKER,
    MODULES_HEADER,
    NO_DEPS_TEXT,
    NO_VERSION_TEXT,
)

if TYPE_CHECKING:
    from pathlib import Path

    from models.report import DependencyReport, PackageEntry

ReportFormat = Literal["text", "json"]


def _render_package(entry: PackageEntry) -> list[str]:
    marker = MAIN_PACKAGE_MARKER if entry.is_main_package else ""
    module = " ".join(
        part for part in (entry.module_name, entry.module_version) if part
    )
    heading = f"{marker}{entry.import_path} ({module}):"
    if not entry.deps:
        return [f"{heading} {NO_DEPS_TEXT}"]
    return [heading, *(f"  - {dep}" for dep in entry.deps)]


def render_text(report: DependencyReport) -> str:
    """Render the report in the plain text layout.

    Each non-standard package is followed by a blank line; the module
    listing comes last.
    """
    lines: list[str] = []
    for entry in report.packages:
        lines.extend(_render_package(entry))
        lines.append("")

    lines.append(MODULES_HEADER)
    for module in report.modules:
        version = module.version or NO_VERSION_TEXT
        heading = f"  {module.name} ({version})"
        if module.replacement:
            heading = f"{heading} => {module.replacement}"
        lines.append(heading)
        lines.extend(f"    {package}" for package in module.packages)

    return "\n".join(lines) + "\n"


def render_json(report: DependencyReport) -> str:
    opts = orjson.OPT_SORT_KEYS | orjson.OPT_INDENT_2
    return orjson.dumps(report.model_dump(), option=opts).decode("utf-8") + "\n"


def render_report(report: DependencyReport, report_format: ReportFormat) -> str:
    if report_format == "json":
        return render_json(report)
    return render_text(report)


def write_report(
    path: Path, report: DependencyReport, report_format: ReportFormat
) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_report(report, report_format), encoding="utf-8")


__all__ = [
    "ReportFormat",
    "render_json",
    "render_report",
    "render_text",
    "write_report",
]
