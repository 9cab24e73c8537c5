"""Plain-text report of a steepest-descent run.

The layout mirrors the classic console transcript: a parameter banner,
one block per iteration, the verdict and a closing line. All numbers are
truncated before formatting.
"""

from __future__ import annotations

import io
from typing import TextIO

from ..optimize.core import IterationRecord, OptimizeResult, RunParameters, validate_run
from ..optimize.numeric import format1, format5
from ..optimize.objectives import ObjectiveFunction, ObjectiveLike, get_objective
from ..optimize.steepest import steepest_descent

COMPLETED = "Optimization process completed."


class Reporter:
    """Write report sections to a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream

    def _line(self, text: str = "") -> None:
        self.stream.write(text + "\n")

    def parameters(self, objective: ObjectiveFunction, params: RunParameters) -> None:
        self._line(f"Objective Function: {objective.name}")
        self._line(f"Dimensionality: {params.dimensionality}")
        self._line("Initial Point:" + "".join(" " + format1(v) for v in params.initial_point))
        self._line(f"Iterations: {params.iterations}")
        self._line(f"Tolerance: {format5(params.tolerance)}")
        self._line(f"Step Size: {format5(params.step_size)}")
        self._line()
        self._line("Optimization process:")

    def iteration(self, record: IterationRecord) -> None:
        self._line(f"Iteration {record.iteration}:")
        self._line(f"Objective Function Value: {record.formatted_value}")
        self._line("x-values:" + "".join(" " + v for v in record.formatted_point))
        if record.formatted_grad_norm is not None:
            self._line(f"Current Tolerance: {record.formatted_grad_norm}")
        self._line()

    def result(self, result: OptimizeResult) -> None:
        self._line(result.message)
        self._line()
        self._line(COMPLETED)


def write_report(
    objective: ObjectiveLike, params: RunParameters, stream: TextIO
) -> OptimizeResult:
    """Run the optimizer and stream the full report to ``stream``.

    Iteration blocks are written as they are produced.
    """
    func = get_objective(objective)
    validate_run(func, params)
    reporter = Reporter(stream)
    reporter.parameters(func, params)
    result = steepest_descent(func, params, callback=reporter.iteration)
    reporter.result(result)
    return result


def render_report(objective: ObjectiveLike, params: RunParameters) -> str:
    """Return the full report as a string."""
    buffer = io.StringIO()
    write_report(objective, params, buffer)
    return buffer.getvalue()


__all__ = ["COMPLETED", "Reporter", "render_report", "write_report"]
