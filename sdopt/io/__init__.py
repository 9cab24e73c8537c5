"""Parameter input and report output for the command-line front end."""

from .config import (
    ConfigError,
    RunConfig,
    load_config,
    parse_config,
    parse_point,
    prompt_config,
)
from .report import Reporter, render_report, write_report

__all__ = [
    "ConfigError",
    "Reporter",
    "RunConfig",
    "load_config",
    "parse_config",
    "parse_point",
    "prompt_config",
    "render_report",
    "write_report",
]
