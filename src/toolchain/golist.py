"""Invocation of the ``go list`` commands that feed the report."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from typing import TYPE_CHECKING

from contract.listing import LIST_FORMAT
from errors import GoListError

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_GO_BINARY = "go"


@dataclass(frozen=True)
class GoListing:
    main_package: str
    output: str


def _run_go(root: Path, go_binary: str, *args: str) -> str:
    """Run ``go`` in ``root`` and return stdout, raising on any failure."""
    command = [go_binary, *args]
    logger.debug("running %s in %s", " ".join(command), root)
    try:
        result = subprocess.run(
            command,
            cwd=root,
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as exc:
        raise GoListError(command, str(exc)) from exc

    if result.returncode != 0:
        err = (result.stderr or "").strip()
        raise GoListError(command, err or f"exit status {result.returncode}")

    return result.stdout


def list_packages(root: Path, *, go_binary: str = DEFAULT_GO_BINARY) -> str:
    """Return one formatted record per package in the main package's closure."""
    return _run_go(root, go_binary, "list", "-f", LIST_FORMAT, "-deps")


def prime_package_cache(root: Path, *, go_binary: str = DEFAULT_GO_BINARY) -> None:
    """Run the listing once and discard the output.

    The first listing after a module change may refresh go.mod/go.sum and the
    toolchain's package cache; only a second run is trusted.
    """
    list_packages(root, go_binary=go_binary)


def find_main_package(root: Path, *, go_binary: str = DEFAULT_GO_BINARY) -> str:
    """Return the import path of the package in ``root``."""
    return _run_go(root, go_binary, "list").strip()


def collect_listing(
    root: Path,
    *,
    go_binary: str = DEFAULT_GO_BINARY,
    prime: bool = True,
    main_package: str | None = None,
) -> GoListing:
    """Run the toolchain in the required order and capture its output.

    Precondition: unless ``prime`` is false, the listing runs once before the
    captured run so that the captured output reflects an up-to-date module
    list.
    """
    if prime:
        prime_package_cache(root, go_binary=go_binary)
    if main_package is None:
        main_package = find_main_package(root, go_binary=go_binary)
    output = list_packages(root, go_binary=go_binary)
    logger.info("collected listing for %s", main_package)
    return GoListing(main_package=main_package, output=output)


__all__ = [
    "DEFAULT_GO_BINARY",
    "GoListing",
    "collect_listing",
    "find_main_package",
    "list_packages",
    "prime_package_cache",
]
