"""Run configuration from a parameter file or from line-by-line prompts.

The parameter file holds six lines, each optionally followed by a ``//``
comment::

    quadratic          // objective function
    2                  // dimensionality
    100                // iterations
    0.0001             // tolerance
    0.1                // step size
    4.0 4.0            // initial point

Interactive entry asks for the same fields in the same order. Both paths
apply identical validation and raise :class:`ConfigError` with the message
to show the user.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Sequence, Union

import numpy as np

from ..logging import get_logger
from ..optimize.core import RunParameters, check_bounds
from ..optimize.objectives import ObjectiveFunction, get_objective

logger = get_logger(__name__)

COMMENT = "//"

UNKNOWN_FUNCTION = "Error: Unknown objective function."
DIMENSION_MISMATCH = "Error: Initial point dimensionality mismatch."
READ_ERROR = "Error reading the file."

PROMPTS = {
    "function": "Enter the choice of objective function (quadratic or rosenbrock):",
    "dimensionality": "Enter the dimensionality of the problem:",
    "iterations": "Enter the number of iterations:",
    "tolerance": "Enter the tolerance:",
    "step_size": "Enter the step size:",
    "point": "Enter the initial point as {dim} space-separated values:",
}

Ask = Callable[[str], str]


class ConfigError(ValueError):
    """Invalid or unreadable run configuration."""


@dataclass(frozen=True)
class RunConfig:
    """Objective selection plus validated run parameters."""

    objective: ObjectiveFunction
    params: RunParameters

    @property
    def function_name(self) -> str:
        return self.objective.name


def strip_comment(line: str) -> str:
    """Drop a trailing ``//`` comment and surrounding whitespace."""
    return line.split(COMMENT, 1)[0].strip()


def _parse_int(text: str, field: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        raise ConfigError(f"Error: Invalid value for {field}: {text.strip()!r}.") from None


def _parse_float(text: str, field: str) -> float:
    try:
        return float(text.strip())
    except ValueError:
        raise ConfigError(f"Error: Invalid value for {field}: {text.strip()!r}.") from None


def _resolve_function(name: str) -> ObjectiveFunction:
    try:
        return get_objective(name)
    except ValueError:
        raise ConfigError(UNKNOWN_FUNCTION) from None


def parse_point(text: str, dimensionality: int) -> np.ndarray:
    """Parse whitespace-separated coordinates and check their count."""
    tokens = text.split()
    if len(tokens) != dimensionality:
        raise ConfigError(DIMENSION_MISMATCH)
    return np.array(
        [_parse_float(token, "initial point") for token in tokens], dtype=float
    )


def build_config(
    objective: ObjectiveFunction,
    dimensionality: int,
    iterations: int,
    tolerance: float,
    step_size: float,
    point: np.ndarray,
) -> RunConfig:
    """Validate parsed fields and assemble a :class:`RunConfig`."""
    try:
        check_bounds(point, objective.bounds())
    except ValueError as exc:
        raise ConfigError(str(exc)) from None
    if dimensionality < objective.kind.min_dim:
        raise ConfigError(
            f"Error: {objective.name} requires a dimensionality of at least "
            f"{objective.kind.min_dim}."
        )
    try:
        params = RunParameters(
            dimensionality=dimensionality,
            iterations=iterations,
            tolerance=tolerance,
            step_size=step_size,
            initial_point=point,
        )
    except ValueError as exc:
        raise ConfigError(f"Error: {exc}.") from None
    logger.debug("Loaded %s configuration: %s", objective.name, params)
    return RunConfig(objective=objective, params=params)


def _check_dimensionality(dimensionality: int) -> None:
    if dimensionality < 1:
        raise ConfigError("Error: Dimensionality must be a positive integer.")


def parse_config(text: Union[str, Sequence[str]]) -> RunConfig:
    """Parse the six-line parameter format.

    The function name is checked once the numeric header lines are read,
    before the initial point line is looked at.
    """
    lines: List[str] = text.splitlines() if isinstance(text, str) else list(text)
    fields = [strip_comment(line) for line in lines]
    if len(fields) < 6:
        raise ConfigError(
            f"Error: Expected 6 configuration lines, got {len(fields)}."
        )
    name, dim_text, iter_text, tol_text, step_text, point_text = fields[:6]
    dimensionality = _parse_int(dim_text, "dimensionality")
    iterations = _parse_int(iter_text, "iterations")
    tolerance = _parse_float(tol_text, "tolerance")
    step_size = _parse_float(step_text, "step size")
    objective = _resolve_function(name)
    _check_dimensionality(dimensionality)
    point = parse_point(point_text, dimensionality)
    return build_config(objective, dimensionality, iterations, tolerance, step_size, point)


def load_config(path: Union[str, Path]) -> RunConfig:
    """Read and parse a parameter file."""
    try:
        text = Path(path).read_text()
    except OSError as exc:
        logger.debug("Cannot read %s: %s", path, exc)
        raise ConfigError(READ_ERROR) from exc
    return parse_config(text)


def prompt_config(ask: Ask) -> RunConfig:
    """Collect a configuration through ``ask(prompt) -> answer`` calls."""
    name = ask(PROMPTS["function"]).strip()
    dimensionality = _parse_int(ask(PROMPTS["dimensionality"]), "dimensionality")
    iterations = _parse_int(ask(PROMPTS["iterations"]), "iterations")
    tolerance = _parse_float(ask(PROMPTS["tolerance"]), "tolerance")
    step_size = _parse_float(ask(PROMPTS["step_size"]), "step size")
    objective = _resolve_function(name)
    _check_dimensionality(dimensionality)
    point = parse_point(ask(PROMPTS["point"].format(dim=dimensionality)), dimensionality)
    return build_config(objective, dimensionality, iterations, tolerance, step_size, point)


__all__ = [
    "ConfigError",
    "DIMENSION_MISMATCH",
    "PROMPTS",
    "READ_ERROR",
    "RunConfig",
    "UNKNOWN_FUNCTION",
    "build_config",
    "load_config",
    "parse_config",
    "parse_point",
    "prompt_config",
    "strip_comment",
]
