"""Module grouping models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from models.package import PackageRecord  # noqa: TC001


class ModuleGroup(BaseModel):
    """All non-standard packages that belong to one module.

    ``members`` holds the same ``PackageRecord`` objects as the registry.
    """

    name: str
    version: str = ""
    members: list[PackageRecord] = Field(default_factory=list)


__all__ = ["ModuleGroup"]
