"""Benchmark objective functions for steepest descent.

The set of objectives is closed: :class:`ObjectiveKind` enumerates the
quadratic bowl and the Rosenbrock valley, and :class:`ObjectiveFunction`
dispatches value and gradient evaluation on that tag. Every coordinate is
truncated with :func:`~sdopt.optimize.numeric.floor5` before it is used.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Union

import numpy as np

from .numeric import Array, floor5

BOUNDS = (-5.0, 5.0)


class ObjectiveKind(Enum):
    """Available objective functions, valued by their display name."""

    QUADRATIC = "Quadratic"
    ROSENBROCK = "Rosenbrock"

    @property
    def min_dim(self) -> int:
        """Smallest dimensionality the objective is defined for."""
        return 2 if self is ObjectiveKind.ROSENBROCK else 1


def _running_sum(terms: Array) -> float:
    # Left-to-right accumulation; np.sum switches to pairwise summation.
    total = 0.0
    for term in terms:
        total += float(term)
    return total


def _as_point(x: Array) -> Array:
    point = np.asarray(x, dtype=float)
    if point.ndim != 1:
        raise ValueError(f"point must be a 1D vector, got shape {point.shape}")
    return point


def _quadratic_value(x: Array) -> float:
    return _running_sum(np.square(floor5(x)))


def _quadratic_gradient(x: Array) -> Array:
    return 2.0 * floor5(x)


def _require_pairs(x: Array) -> None:
    if x.size < 2:
        raise ValueError(
            f"Rosenbrock requires at least 2 coordinates, got {x.size}"
        )


def _rosenbrock_value(x: Array) -> float:
    _require_pairs(x)
    t = floor5(x)
    x1, x2 = t[:-1], t[1:]
    terms = 100.0 * np.square(x2 - x1 * x1) + np.square(1.0 - x1)
    return _running_sum(terms)


def _rosenbrock_gradient(x: Array) -> Array:
    _require_pairs(x)
    t = floor5(x)
    grad = np.empty_like(t)
    x1, x2 = t[0], t[1]
    grad[0] = -400.0 * x1 * (x2 - x1 * x1) - 2.0 * (1.0 - x1)
    x1, x2 = t[-2], t[-1]
    grad[-1] = 200.0 * (x2 - x1 * x1)
    if t.size > 2:
        x1, x2, x3 = t[:-2], t[1:-1], t[2:]
        grad[1:-1] = (
            200.0 * (x2 - x1 * x1) - 400.0 * x2 * (x3 - x2 * x2) - 2.0 * (1.0 - x2)
        )
    return grad


_VALUE: dict[ObjectiveKind, Callable[[Array], float]] = {
    ObjectiveKind.QUADRATIC: _quadratic_value,
    ObjectiveKind.ROSENBROCK: _rosenbrock_value,
}

_GRADIENT: dict[ObjectiveKind, Callable[[Array], Array]] = {
    ObjectiveKind.QUADRATIC: _quadratic_gradient,
    ObjectiveKind.ROSENBROCK: _rosenbrock_gradient,
}


@dataclass(frozen=True)
class ObjectiveFunction:
    """Stateless objective exposing value, gradient and feasible bounds.

    Diverging points evaluate to inf or nan without floating-point warnings.
    """

    kind: ObjectiveKind

    @property
    def name(self) -> str:
        return self.kind.value

    def value(self, x: Array) -> float:
        """Objective value at ``x`` using truncated coordinates."""
        with np.errstate(over="ignore", invalid="ignore"):
            return _VALUE[self.kind](_as_point(x))

    def gradient(self, x: Array) -> Array:
        """Analytic gradient at ``x`` using truncated coordinates."""
        with np.errstate(over="ignore", invalid="ignore"):
            return _GRADIENT[self.kind](_as_point(x))

    def bounds(self) -> tuple[float, float]:
        """Per-coordinate box used to validate the initial point."""
        return BOUNDS


QUADRATIC = ObjectiveFunction(ObjectiveKind.QUADRATIC)
ROSENBROCK = ObjectiveFunction(ObjectiveKind.ROSENBROCK)

ObjectiveLike = Union[ObjectiveFunction, ObjectiveKind, str]


def get_objective(selector: ObjectiveLike) -> ObjectiveFunction:
    """Resolve an objective from an instance, a kind or a case-insensitive name.

    Raises
    ------
    ValueError
        If ``selector`` names neither ``quadratic`` nor ``rosenbrock``.
    """
    if isinstance(selector, ObjectiveFunction):
        return selector
    if isinstance(selector, ObjectiveKind):
        return ObjectiveFunction(selector)
    key = str(selector).strip().lower()
    for kind in ObjectiveKind:
        if kind.value.lower() == key:
            return ObjectiveFunction(kind)
    raise ValueError(f"Unknown objective function: {selector!r}")


__all__ = [
    "BOUNDS",
    "ObjectiveFunction",
    "ObjectiveKind",
    "ObjectiveLike",
    "QUADRATIC",
    "ROSENBROCK",
    "get_objective",
]
