"""Report assembly from a registry and its module groups."""

from __future__ import annotations

from typing import TYPE_CHECKING

from graph.modules import aggregate_modules
from graph.registry import build_registry, main_package_of
from models.report import DependencyReport, ModuleEntry, PackageEntry

if TYPE_CHECKING:
    from graph.registry import Registry
    from models.module import ModuleGroup
    from models.package import PackageRecord


def _non_standard_deps(record: PackageRecord, registry: Registry) -> list[str]:
    """Direct dependencies that are listed and not part of the standard library."""
    deps: list[str] = []
    for dep in record.deps:
        dep_record = registry.get(dep)
        if dep_record is None or dep_record.is_standard:
            continue
        deps.append(dep_record.import_path)
    return deps


def _module_replacement(group: ModuleGroup) -> str:
    for member in group.members:
        if member.module_replacement:
            return member.module_replacement
    return ""


def build_report(
    registry: Registry,
    modules: dict[str, ModuleGroup],
) -> DependencyReport:
    """Build the deterministic report model.

    Packages are ordered by import path and modules by name. Dependencies
    keep the order the listing gave them.
    """
    packages = [
        PackageEntry(
            import_path=record.import_path,
            is_main_package=record.is_main_package,
            module_name=record.module_name,
            module_version=record.module_version,
            deps=_non_standard_deps(record, registry),
        )
        for _, record in sorted(registry.items())
        if not record.is_standard
    ]

    module_entries = [
        ModuleEntry(
            name=group.name,
            version=group.version,
            replacement=_module_replacement(group),
            packages=sorted(member.import_path for member in group.members),
        )
        for _, group in sorted(modules.items())
    ]

    return DependencyReport(
        main_package=main_package_of(registry).import_path,
        packages=packages,
        modules=module_entries,
    )


def report_from_listing(
    output: str,
    main_package: str,
    *,
    strict_deps: bool = False,
    strict_module_spec: bool = False,
) -> DependencyReport:
    """Parse a raw listing, check module versions and build the report.

    Any failure raises before a report exists.
    """
    registry = build_registry(
        output,
        main_package,
        strict_deps=strict_deps,
        strict_module_spec=strict_module_spec,
    )
    modules = aggregate_modules(registry)
    return build_report(registry, modules)


__all__ = ["build_report", "report_from_listing"]
