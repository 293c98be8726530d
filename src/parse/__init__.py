"""Parsing utilities for go listing records."""

from parse.records import parse_deps, parse_module_spec, parse_package_record

__all__ = [
    "parse_deps",
    "parse_module_spec",
    "parse_package_record",
]
