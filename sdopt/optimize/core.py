"""Core interfaces shared by the descent engine and its reporting layer."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence

import numpy as np

from .numeric import Array, format5, plain_str
from .objectives import ObjectiveFunction

CONVERGED_MESSAGE = "Convergence reached after {n} iterations."
EXHAUSTED_MESSAGE = "Maximum iterations reached without satisfying the tolerance."


class Status(Enum):
    """Terminal state of a descent run."""

    CONVERGED = "converged"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class RunParameters:
    """
    Immutable parameters of one steepest-descent run.

    Attributes:
        dimensionality: Problem dimension D.
        iterations: Iteration cap N, counting the initial evaluation.
        tolerance: Gradient-magnitude threshold for convergence.
        step_size: Fixed step size applied to the truncated gradient.
        initial_point: Starting coordinates, stored as a read-only copy.
    """

    dimensionality: int
    iterations: int
    tolerance: float
    step_size: float
    initial_point: Array

    def __post_init__(self) -> None:
        """Validate structural invariants."""
        if self.dimensionality < 1:
            raise ValueError(
                f"dimensionality must be positive, got {self.dimensionality}"
            )
        if self.iterations < 1:
            raise ValueError(f"iterations must be positive, got {self.iterations}")
        for label in ("tolerance", "step_size"):
            if not math.isfinite(getattr(self, label)):
                raise ValueError(f"{label} must be finite, got {getattr(self, label)}")

        point = np.array(self.initial_point, dtype=float)
        if point.ndim != 1 or point.size != self.dimensionality:
            raise ValueError(
                f"initial point has {point.size} coordinates, "
                f"expected {self.dimensionality}"
            )
        if not np.all(np.isfinite(point)):
            raise ValueError("initial point must contain only finite values")
        point.setflags(write=False)
        object.__setattr__(self, "initial_point", point)


@dataclass(frozen=True)
class IterationRecord:
    """Snapshot of one iteration, produced for reporting only."""

    iteration: int
    value: float
    point: Array
    grad_norm: Optional[float] = None

    @property
    def formatted_value(self) -> str:
        return format5(self.value)

    @property
    def formatted_point(self) -> List[str]:
        return [format5(v) for v in self.point]

    @property
    def formatted_grad_norm(self) -> Optional[str]:
        if self.grad_norm is None:
            return None
        return format5(self.grad_norm)


@dataclass
class OptimizeResult:
    """Result object returned by :func:`~sdopt.optimize.steepest_descent`."""

    x: Array
    fun: float
    nit: int
    status: Status
    message: str
    grad_norm: Optional[float]
    nfev: int
    njev: int
    records: List[IterationRecord] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.status is Status.CONVERGED


def verdict_message(status: Status, nit: int) -> str:
    """Human-readable verdict line for a finished run."""
    if status is Status.CONVERGED:
        return CONVERGED_MESSAGE.format(n=nit)
    return EXHAUSTED_MESSAGE


def check_convergence(grad_norm: float, tol: float) -> bool:
    """Return True if the gradient magnitude is strictly below tolerance."""
    return grad_norm < tol


def check_bounds(point: Sequence[float], bounds: tuple[float, float]) -> None:
    """Raise ValueError naming the first coordinate outside ``bounds``."""
    low, high = bounds
    for value in point:
        if value < low or value > high:
            raise ValueError(
                f"Error: Initial point {plain_str(value)} is outside the bounds "
                f"[{plain_str(low)}, {plain_str(high)}]."
            )


def validate_run(objective: ObjectiveFunction, params: RunParameters) -> None:
    """Refuse runs the objective cannot accept before any iteration starts."""
    if params.dimensionality < objective.kind.min_dim:
        raise ValueError(
            f"{objective.name} requires dimensionality >= "
            f"{objective.kind.min_dim}, got {params.dimensionality}"
        )
    check_bounds(params.initial_point, objective.bounds())


__all__ = [
    "CONVERGED_MESSAGE",
    "EXHAUSTED_MESSAGE",
    "IterationRecord",
    "OptimizeResult",
    "RunParameters",
    "Status",
    "check_bounds",
    "check_convergence",
    "validate_run",
    "verdict_message",
]
