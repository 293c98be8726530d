"""Report models for rendered module reports.

These models are the serialized form of a run: one entry per non-standard
package and one per module, both in deterministic order.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


def _report_schema_version() -> int:
    from contract.listing import REPORT_SCHEMA_VERSION

    return REPORT_SCHEMA_VERSION


class PackageEntry(BaseModel):
    """A non-standard package and its direct non-standard dependencies."""

    import_path: str
    is_main_package: bool = False
    module_name: str = ""
    module_version: str = ""
    deps: list[str] = Field(default_factory=list)


class ModuleEntry(BaseModel):
    """A module, its single version and its member import paths."""

    name: str
    version: str = ""
    replacement: str = ""
    packages: list[str] = Field(default_factory=list)


class DependencyReport(BaseModel):
    """Complete report for one main package."""

    schema_version: int = Field(default_factory=_report_schema_version)
    main_package: str
    packages: list[PackageEntry] = Field(default_factory=list)
    modules: list[ModuleEntry] = Field(default_factory=list)


__all__ = ["DependencyReport", "ModuleEntry", "PackageEntry"]
