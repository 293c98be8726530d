from __future__ import annotations

import pytest

from errors import ParseError
from parse.records import parse_deps, parse_module_spec, parse_package_record


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        (
            "'true#fmt#<nil>#[errors io os]'",
            (True, "fmt", "", "", ["errors", "io", "os"]),
        ),
        (
            "'false#example.com/a#example.com/mod v1.0.0#[fmt]'",
            (False, "example.com/a", "example.com/mod", "v1.0.0", ["fmt"]),
        ),
        (
            "false#example.com/cmd#example.com/cmd#[]",
            (False, "example.com/cmd", "example.com/cmd", "", []),
        ),
    ],
)
def test_parse_package_record_recovers_fields(
    line: str, expected: tuple[bool, str, str, str, list[str]]
) -> None:
    record = parse_package_record(line)

    assert (
        record.is_standard,
        record.import_path,
        record.module_name,
        record.module_version,
        record.deps,
    ) == expected
    assert record.is_main_package is False


def test_parse_deps_empty_list() -> None:
    assert parse_deps("[]") == []


def test_parse_deps_keeps_order() -> None:
    assert parse_deps("[a b c]") == ["a", "b", "c"]


def test_parse_module_spec_nil_sentinel_has_no_module() -> None:
    assert parse_module_spec("<nil>") == ("", "", "")


def test_parse_module_spec_name_and_version() -> None:
    assert parse_module_spec("foo v1.2.3") == ("foo", "v1.2.3", "")


def test_parse_module_spec_captures_replacement() -> None:
    assert parse_module_spec("golang.org/x/text v0.14.0 => ../text") == (
        "golang.org/x/text",
        "v0.14.0",
        "../text",
    )


def test_parse_module_spec_replacement_without_version() -> None:
    assert parse_module_spec("example.com/mod => example.com/fork v1.1.0") == (
        "example.com/mod",
        "",
        "example.com/fork v1.1.0",
    )


def test_parse_module_spec_drops_extra_tokens_by_default() -> None:
    assert parse_module_spec("foo v1.2.3 surplus") == ("foo", "v1.2.3", "")


def test_parse_module_spec_strict_rejects_extra_tokens() -> None:
    with pytest.raises(ParseError, match="unexpected data in module spec"):
        parse_module_spec("foo v1.2.3 surplus", strict=True)


@pytest.mark.parametrize(
    "line",
    [
        "'true#fmt#<nil>'",
        "'true#fmt#<nil>#[]#extra'",
        "",
    ],
)
def test_parse_package_record_rejects_wrong_field_count(line: str) -> None:
    with pytest.raises(ParseError) as exc_info:
        parse_package_record(line)

    assert exc_info.value.line == line
    assert "cannot parse line" in str(exc_info.value)


def test_parse_package_record_rejects_unknown_standard_flag() -> None:
    line = "'yes#fmt#<nil>#[]'"

    with pytest.raises(ParseError, match="invalid result for Standard") as exc_info:
        parse_package_record(line)

    assert exc_info.value.line == line


def test_parse_package_record_strict_module_spec_names_line() -> None:
    line = "'false#example.com/a#example.com/mod v1.0.0 junk#[]'"

    with pytest.raises(ParseError) as exc_info:
        parse_package_record(line, strict=True)

    assert exc_info.value.line == line
