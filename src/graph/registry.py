"""Package registry assembly from ``go list`` output."""

from __future__ import annotations

import logging

from errors import DanglingDependencyError, MainPackageNotFoundError
from models.package import PackageRecord
from parse.records import parse_package_record

logger = logging.getLogger(__name__)

Registry = dict[str, PackageRecord]


def _iter_record_lines(output: str) -> list[str]:
    """Return the lines before the first empty line."""
    lines: list[str] = []
    for line in output.split("\n"):
        if line == "":
            break
        lines.append(line)
    return lines


def find_dangling_deps(registry: Registry) -> list[tuple[str, str]]:
    """Return sorted ``(package, dependency)`` pairs naming unlisted packages."""
    return sorted(
        (import_path, dep)
        for import_path, record in registry.items()
        for dep in record.deps
        if dep not in registry
    )


def build_registry(
    output: str,
    main_package: str,
    *,
    strict_deps: bool = False,
    strict_module_spec: bool = False,
) -> Registry:
    """Parse a full listing into a registry keyed by import path.

    Parsing stops at the first empty line. The first unparseable line aborts
    the whole build, so a partial registry is never returned.

    Args:
        output: Text produced by ``go list -deps -f <LIST_FORMAT>``.
        main_package: Import path of the package under analysis.
        strict_deps: Raise when a dependency names a package missing from
            the listing instead of ignoring it.
        strict_module_spec: Passed to the record parser.

    Returns:
        Mapping of import path to record, with exactly one record flagged as
        the main package.

    Raises:
        ParseError: If any line is malformed.
        MainPackageNotFoundError: If ``main_package`` was not listed.
        DanglingDependencyError: In strict mode, on the first unlisted dependency.
    """
    registry: Registry = {}
    for line in _iter_record_lines(output):
        record = parse_package_record(line, strict=strict_module_spec)
        if record.import_path in registry:
            logger.debug(
                "duplicate listing for %s, keeping the later one", record.import_path
            )
        registry[record.import_path] = record

    main_record = registry.get(main_package)
    if main_record is None:
        raise MainPackageNotFoundError(main_package)
    main_record.is_main_package = True

    dangling = find_dangling_deps(registry)
    if dangling and strict_deps:
        import_path, dep = dangling[0]
        raise DanglingDependencyError(import_path, dep)
    for import_path, dep in dangling:
        logger.debug("ignoring unlisted dependency %s of %s", dep, import_path)

    logger.info("parsed %d packages, main package %s", len(registry), main_package)
    return registry


def main_package_of(registry: Registry) -> PackageRecord:
    """Return the record flagged as the main package."""
    for record in registry.values():
        if record.is_main_package:
            return record
    msg = "registry has no main package"
    raise LookupError(msg)


__all__ = ["Registry", "build_registry", "find_dangling_deps", "main_package_of"]
