"""Package record models.

This module contains the typed form of one ``go list`` output line.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class PackageRecord(BaseModel):
    """One package from the listing, keyed by import path."""

    import_path: str
    is_standard: bool
    module_name: str = ""
    module_version: str = ""
    module_replacement: str = ""
    deps: list[str] = Field(default_factory=list)
    is_main_package: bool = False

    @property
    def has_module(self) -> bool:
        return bool(self.module_name)


__all__ = ["PackageRecord"]
