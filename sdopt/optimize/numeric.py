"""Truncation, formatting and magnitude helpers shared by the optimizer.

Every value that feeds the descent trajectory or the printed report is first
floored to five decimal digits with :func:`floor5`. Applying the truncation
only at print time yields a different trajectory, so callers truncate each
operand immediately before using it.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Iterable, Union, overload

import numpy as np

Array = np.ndarray
ArrayLike = Union[float, Array]

SCALE = 100000.0
DIGITS = 5

# Wide enough for any finite float64 plus the fractional digits.
_CONTEXT = Context(prec=400)


@overload
def floor5(x: float) -> float: ...


@overload
def floor5(x: Array) -> Array: ...


def floor5(x: ArrayLike) -> ArrayLike:
    """Floor ``x`` toward negative infinity at the fifth decimal digit.

    Scalars come back as Python floats, arrays as new float64 arrays.
    Infinities and NaN pass through unchanged.
    """
    if isinstance(x, np.ndarray):
        with np.errstate(over="ignore", invalid="ignore"):
            return np.floor(x.astype(float) * SCALE) / SCALE
    return float(np.floor(float(x) * SCALE) / SCALE)


def next_down(x: ArrayLike) -> ArrayLike:
    """Return the adjacent representable value toward negative infinity."""
    if isinstance(x, np.ndarray):
        return np.nextafter(x, -np.inf)
    return float(np.nextafter(float(x), -np.inf))


def _fixed(value: float, digits: int) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    # Round the shortest decimal repr half-up, so 0.25 shows as 0.3.
    quantum = Decimal(1).scaleb(-digits)
    rounded = Decimal(repr(value)).quantize(
        quantum, rounding=ROUND_HALF_UP, context=_CONTEXT
    )
    return format(rounded, "f")


def plain_str(value: float) -> str:
    """Shortest round-trip text for ``value`` in ``Double.toString`` layout.

    Magnitudes in ``[1e-3, 1e7)`` print in positional form (``6.0``),
    everything else as ``d.dddE<exp>`` (``1.0E7``, ``-2.5E-4``).
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0.0 or 1e-3 <= abs(value) < 1e7:
        return repr(value)
    exact = Decimal(repr(abs(value)))
    digits = "".join(str(d) for d in exact.as_tuple().digits).rstrip("0") or "0"
    sign = "-" if value < 0 else ""
    return f"{sign}{digits[0]}.{digits[1:] or '0'}E{exact.adjusted()}"


def format5(value: float) -> str:
    """Truncate ``value`` with :func:`floor5` and render five decimals."""
    return _fixed(floor5(value), DIGITS)


def format1(value: float) -> str:
    """Truncate ``value`` with :func:`floor5` but render a single decimal.

    Used only for the initial-point line of the parameter banner.
    """
    return _fixed(floor5(value), 1)


def magnitude(vector: Iterable[float]) -> float:
    """Euclidean norm of ``vector``.

    Inputs are used as given (no truncation). Squares are accumulated left to
    right so the result does not depend on NumPy's pairwise summation.
    """
    total = 0.0
    for element in np.asarray(vector, dtype=float).ravel():
        total += float(element) * float(element)
    return math.sqrt(total)


__all__ = [
    "Array",
    "DIGITS",
    "SCALE",
    "floor5",
    "format1",
    "format5",
    "magnitude",
    "next_down",
    "plain_str",
]
