"""Registry and module graph construction."""

from graph.modules import aggregate_modules
from graph.registry import Registry, build_registry, find_dangling_deps, main_package_of

__all__ = [
    "Registry",
    "aggregate_modules",
    "build_registry",
    "find_dangling_deps",
    "main_package_of",
]
