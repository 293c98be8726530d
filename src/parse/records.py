"""Record parsing for ``go list`` output lines."""

from __future__ import annotations

from contract.listing import (
    DEPS_CLOSE,
    DEPS_OPEN,
    FALSE_TOKEN,
    FIELD_COUNT,
    FIELD_SEPARATOR,
    NO_MODULE_TOKEN,
    RECORD_QUOTE,
    REPLACEMENT_ARROW,
    TRUE_TOKEN,
)
from errors import ParseError
from models.package import PackageRecord


def _strip_affixes(value: str, prefix: str, suffix: str) -> str:
    return value.removeprefix(prefix).removesuffix(suffix)


def _parse_standard_flag(token: str, line: str) -> bool:
    if token == TRUE_TOKEN:
        return True
    if token == FALSE_TOKEN:
        return False
    raise ParseError(line, f"invalid result for Standard: {token!r}")


def parse_module_spec(
    spec: str, *, line: str = "", strict: bool = False
) -> tuple[str, str, str]:
    """Split a rendered ``{{.Module}}`` value into name, version, replacement.

    Examples:
        >>> parse_module_spec("<nil>")
        ('', '', '')
        >>> parse_module_spec("example.com/mod v1.2.3")
        ('example.com/mod', 'v1.2.3', '')
        >>> parse_module_spec("example.com/mod v1.2.3 => ../mod")
        ('example.com/mod', 'v1.2.3', '../mod')

    Tokens after the version that are not a replacement clause are dropped,
    unless ``strict`` is set, in which case they raise ``ParseError``.
    """
    if spec == NO_MODULE_TOKEN:
        return "", "", ""

    tokens = spec.split(" ")
    replacement = ""
    # "name => target" gets an empty version; a bare first-space split yields "=>".
    if REPLACEMENT_ARROW in tokens[1:]:
        arrow = tokens.index(REPLACEMENT_ARROW, 1)
        replacement = " ".join(tokens[arrow + 1 :])
        tokens = tokens[:arrow]

    name = tokens[0]
    version = tokens[1] if len(tokens) > 1 else ""
    if strict and len(tokens) > 2:
        extra = " ".join(tokens[2:])
        raise ParseError(line or spec, f"unexpected data in module spec: {extra!r}")

    return name, version, replacement


def parse_deps(value: str) -> list[str]:
    """Turn a bracketed, space separated list into import paths.

    Examples:
        >>> parse_deps("[]")
        []
        >>> parse_deps("[a b c]")
        ['a', 'b', 'c']
    """
    inner = _strip_affixes(value, DEPS_OPEN, DEPS_CLOSE)
    return [dep for dep in inner.split(" ") if dep]


def parse_package_record(line: str, *, strict: bool = False) -> PackageRecord:
    """Parse one listing line into a ``PackageRecord``.

    Args:
        line: Raw line of the form ``'<bool>#<importPath>#<module>#[deps]'``.
            The wrapping apostrophes are optional.
        strict: Reject module specs carrying unexpected extra tokens.

    Returns:
        The parsed record, with ``is_main_package`` unset.

    Raises:
        ParseError: If the line does not have exactly four fields, or the
            standard flag is neither ``true`` nor ``false``.
    """
    body = _strip_affixes(line, RECORD_QUOTE, RECORD_QUOTE)

    fields = body.split(FIELD_SEPARATOR)
    if len(fields) != FIELD_COUNT:
        raise ParseError(
            line, f"cannot parse line: expected {FIELD_COUNT} fields, got {len(fields)}"
        )

    standard, import_path, module_spec, deps = fields
    is_standard = _parse_standard_flag(standard, line)
    module_name, module_version, module_replacement = parse_module_spec(
        module_spec, line=line, strict=strict
    )

    return PackageRecord(
        import_path=import_path,
        is_standard=is_standard,
        module_name=module_name,
        module_version=module_version,
        module_replacement=module_replacement,
        deps=parse_deps(deps),
    )


__all__ = ["parse_deps", "parse_module_spec", "parse_package_record"]
