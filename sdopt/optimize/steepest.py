"""Fixed-step steepest descent with five-digit truncation."""

from __future__ import annotations

from typing import Callable, Iterator, Optional

import numpy as np

from ..logging import get_logger
from .core import (
    IterationRecord,
    OptimizeResult,
    RunParameters,
    Status,
    check_convergence,
    validate_run,
    verdict_message,
)
from .numeric import Array, floor5, magnitude, next_down
from .objectives import ObjectiveFunction, ObjectiveKind, ObjectiveLike, get_objective

logger = get_logger(__name__)

Callback = Callable[[IterationRecord], None]


def _step(objective: ObjectiveFunction, x: Array, grad: Array, step_size: float) -> Array:
    """Move ``x`` against ``grad`` in place and return it."""
    with np.errstate(over="ignore", invalid="ignore"):
        x[:] = floor5(x) - step_size * floor5(grad)
    # The quadratic trajectory takes one extra ULP toward -inf per step.
    if objective.kind is ObjectiveKind.QUADRATIC:
        x[:] = next_down(x)
    return x


def iter_steepest_descent(
    objective: ObjectiveLike, params: RunParameters
) -> Iterator[IterationRecord]:
    """Yield one :class:`IterationRecord` per iteration of steepest descent.

    The first record describes the initial point and carries no gradient
    magnitude. Iteration stops after the first record whose gradient
    magnitude is below ``params.tolerance`` or after ``params.iterations``
    records, whichever comes first.

    Raises
    ------
    ValueError
        If the parameters do not suit the objective. Raised on the first
        ``next()`` before any record is produced.
    """
    func = get_objective(objective)
    validate_run(func, params)

    x = params.initial_point.copy()
    yield IterationRecord(iteration=1, value=func.value(x), point=x.copy())

    for n in range(2, params.iterations + 1):
        grad = func.gradient(x)
        _step(func, x, grad, params.step_size)
        grad_norm = magnitude(grad)
        yield IterationRecord(
            iteration=n, value=func.value(x), point=x.copy(), grad_norm=grad_norm
        )
        if check_convergence(grad_norm, params.tolerance):
            return


def steepest_descent(
    objective: ObjectiveLike,
    params: RunParameters,
    callback: Optional[Callback] = None,
    history: bool = False,
) -> OptimizeResult:
    """Run steepest descent to convergence or until the iteration cap.

    Parameters
    ----------
    objective:
        Objective instance, :class:`ObjectiveKind` or case-insensitive name.
    params:
        Run parameters; the initial point is copied, never modified.
    callback:
        Called with every :class:`IterationRecord`, including the first.
    history:
        Keep every record on ``OptimizeResult.records``.
    """
    func = get_objective(objective)
    logger.info(
        "Starting %s descent: dim=%d maxiter=%d tol=%g step=%g",
        func.name,
        params.dimensionality,
        params.iterations,
        params.tolerance,
        params.step_size,
    )
    records: list[IterationRecord] = []

    def emit(record: IterationRecord) -> None:
        logger.debug(
            "iteration %d: value=%s grad_norm=%s",
            record.iteration,
            record.formatted_value,
            record.formatted_grad_norm,
        )
        if callback is not None:
            callback(record)
        if history:
            records.append(record)

    # The first record is always produced once validation passes.
    stream = iter_steepest_descent(func, params)
    last = next(stream)
    emit(last)
    for last in stream:
        emit(last)

    converged = last.grad_norm is not None and check_convergence(
        last.grad_norm, params.tolerance
    )
    status = Status.CONVERGED if converged else Status.EXHAUSTED
    nit = last.iteration if converged else params.iterations
    message = verdict_message(status, nit)
    logger.info(message)

    return OptimizeResult(
        x=np.array(last.point, dtype=float),
        fun=float(last.value),
        nit=nit,
        status=status,
        message=message,
        grad_norm=last.grad_norm,
        nfev=last.iteration,
        njev=last.iteration - 1,
        records=records,
    )


__all__ = ["iter_steepest_descent", "steepest_descent"]
