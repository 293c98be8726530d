"""Module aggregation and version consistency checks."""

from __future__ import annotations

from typing import TYPE_CHECKING

from errors import ModuleVersionConflictError
from models.module import ModuleGroup

if TYPE_CHECKING:
    from graph.registry import Registry


def aggregate_modules(registry: Registry) -> dict[str, ModuleGroup]:
    """Group non-standard, module-bearing packages by module name.

    Records are visited in import path order, so the first record of a
    module fixes its version and members come out sorted. The returned
    mapping is ordered by module name.

    Raises:
        ModuleVersionConflictError: If two packages of one module disagree
            on its version.
    """
    modules: dict[str, ModuleGroup] = {}

    for import_path in sorted(registry):
        record = registry[import_path]
        if record.is_standard:
            continue
        if not record.has_module:
            continue

        group = modules.get(record.module_name)
        if group is None:
            group = ModuleGroup(name=record.module_name, version=record.module_version)
            modules[record.module_name] = group
        elif record.module_version != group.version:
            raise ModuleVersionConflictError(
                group.name, group.version, record.module_version
            )
        group.members.append(record)

    return dict(sorted(modules.items()))


__all__ = ["aggregate_modules"]
