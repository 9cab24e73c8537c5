"""sdopt - steepest descent on classic benchmark functions with five-digit truncation."""

__version__ = "0.1.0"

from .io import ConfigError, RunConfig, load_config, parse_config, render_report
from .logging import configure_logging, get_logger, set_log_level
from .optimize import (
    IterationRecord,
    ObjectiveFunction,
    ObjectiveKind,
    OptimizeResult,
    RunParameters,
    Status,
    floor5,
    format5,
    get_objective,
    iter_steepest_descent,
    magnitude,
    steepest_descent,
)

__all__ = [
    "ConfigError",
    "IterationRecord",
    "ObjectiveFunction",
    "ObjectiveKind",
    "OptimizeResult",
    "RunConfig",
    "RunParameters",
    "Status",
    "__version__",
    "configure_logging",
    "floor5",
    "format5",
    "get_logger",
    "get_objective",
    "iter_steepest_descent",
    "load_config",
    "magnitude",
    "parse_config",
    "render_report",
    "set_log_level",
    "steepest_descent",
]
