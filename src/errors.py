"""Error types raised while building a module report.

Every failure is fatal for the run: library code raises, and only the CLI
decides how to surface it.
"""

from __future__ import annotations


class GoModReportError(Exception):
    """Base class for all gomodreport failures."""


class GoListError(GoModReportError):
    """Raised when the go toolchain cannot be run or exits non-zero."""

    def __init__(self, command: list[str], detail: str) -> None:
        self.command = command
        self.detail = detail
        super().__init__(f"{' '.join(command)}: {detail}")


class ParseError(GoModReportError):
    """Raised when a listing line cannot be parsed into a package record."""

    def __init__(self, line: str, reason: str) -> None:
        self.line = line
        self.reason = reason
        super().__init__(f"{reason}: {line}")


class MainPackageNotFoundError(GoModReportError):
    """Raised when the main package is absent from the parsed listing."""

    def __init__(self, import_path: str) -> None:
        self.import_path = import_path
        super().__init__(f"main package {import_path!r} not found in listing")


class DanglingDependencyError(GoModReportError):
    """Raised in strict mode when a dependency names an unlisted package."""

    def __init__(self, import_path: str, dependency: str) -> None:
        self.import_path = import_path
        self.dependency = dependency
        super().__init__(
            f"package {import_path} depends on {dependency}, "
            "which is not in the listing"
        )


class ModuleVersionConflictError(GoModReportError):
    """Raised when two packages of one module report different versions."""

    def __init__(self, module: str, previous: str, current: str) -> None:
        self.module = module
        self.previous = previous
        self.current = current
        super().__init__(
            f"for module {module}, previously saw version {previous} "
            f"but now seeing version {current}"
        )


class ConfigError(GoModReportError):
    """Raised when the config file exists but cannot be parsed."""


__all__ = [
    "ConfigError",
    "DanglingDependencyError",
    "GoListError",
    "GoModReportError",
    "MainPackageNotFoundError",
    "ModuleVersionConflictError",
    "ParseError",
]
