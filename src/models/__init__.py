"""Model namespace for gomodreport schemas."""

from models.module import ModuleGroup
from models.package import PackageRecord
from models.report import DependencyReport, ModuleEntry, PackageEntry

__all__ = [
    "DependencyReport",
    "ModuleEntry",
    "ModuleGroup",
    "PackageEntry",
    "PackageRecord",
]
