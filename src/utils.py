"""Shared logging utilities for gomodreport."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_LOGGING_CONFIGURED = False


def verbosity_to_level(verbosity: int) -> int:
    """Map a ``-v`` count to a logging level.

    Examples:
        >>> verbosity_to_level(0) == logging.WARNING
        True
        >>> verbosity_to_level(2) == logging.DEBUG
        True
    """
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return logging.WARNING


def configure_logging(verbosity: int = 0) -> None:
    """Configure process-wide logging on stderr, once per process."""
    global _LOGGING_CONFIGURED
    level = verbosity_to_level(verbosity)
    if not _LOGGING_CONFIGURED:
        logging.basicConfig(level=level, format=LOG_FORMAT)
        _LOGGING_CONFIGURED = True
    logging.getLogger().setLevel(level)
