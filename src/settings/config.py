from __future__ import annotations

import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from errors import ConfigError
from report.render import ReportFormat  # noqa: TC001

CONFIG_FILENAME = "gomodreport.toml"


class GoModReportConfig(BaseModel):
    """Configuration for gomodreport runs."""

    model_config = ConfigDict(extra="forbid")

    go_binary: str = Field(
        default="go",
        description="Go executable used for listings",
    )
    prime_cache: bool = Field(
        default=True,
        description="Run the listing once and discard it before the real run",
    )
    strict_deps: bool = Field(
        default=False,
        description=(
            "Reject dependencies that name packages missing from the listing"
        ),
    )
    strict_module_spec: bool = Field(
        default=False,
        description=(
            "Reject module specs with data beyond name, version and replacement"
        ),
    )
    format: ReportFormat = Field(
        default="text",
        description="Report output format",
    )


def load_config(root: Path) -> GoModReportConfig:
    """Load configuration from gomodreport.toml if it exists."""
    config_path = Path(root) / CONFIG_FILENAME

    if not config_path.is_file():
        return GoModReportConfig()

    try:
        with config_path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {config_path}: {e}"
        raise ConfigError(msg) from e

    try:
        return GoModReportConfig.model_validate(data)
    except ValidationError as e:
        msg = f"Invalid config in {config_path}: {e}"
        raise ConfigError(msg) from e
