"""Configuration loading for gomodreport."""

from settings.config import CONFIG_FILENAME, GoModReportConfig, load_config

__all__ = [
    "CONFIG_FILENAME",
    "GoModReportConfig",
    "load_config",
]
