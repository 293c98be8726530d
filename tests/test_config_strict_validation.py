from __future__ import annotations

from pathlib import Path

import pytest

from errors import ConfigError
from settings.config import load_config


def _write_config(repo_root: Path, toml_content: str) -> None:
    (repo_root / "gomodreport.toml").write_text(toml_content, encoding="utf-8")


def test_missing_config_uses_defaults(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert config.go_binary == "go"
    assert config.prime_cache is True
    assert config.strict_deps is False
    assert config.strict_module_spec is False
    assert config.format == "text"


def test_empty_config_accepted(tmp_path: Path) -> None:
    _write_config(tmp_path, "")

    config = load_config(tmp_path)

    assert config.go_binary == "go"


def test_valid_config_accepted(tmp_path: Path) -> None:
    _write_config(
        tmp_path,
        """
go_binary = "/usr/local/go/bin/go"
prime_cache = false
strict_deps = true
format = "json"
""".strip(),
    )

    config = load_config(tmp_path)

    assert config.go_binary == "/usr/local/go/bin/go"
    assert config.prime_cache is False
    assert config.strict_deps is True
    assert config.format == "json"


def test_unknown_top_level_key_rejected(tmp_path: Path) -> None:
    _write_config(tmp_path, "bogus_key = true")

    with pytest.raises(ConfigError, match="Invalid config"):
        load_config(tmp_path)


def test_unknown_format_rejected(tmp_path: Path) -> None:
    _write_config(tmp_path, 'format = "yaml"')

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_invalid_toml_rejected(tmp_path: Path) -> None:
    _write_config(tmp_path, "go_binary = ")

    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_config(tmp_path)
