"""Steepest descent on the quadratic bowl and the Rosenbrock valley.

Example
-------
>>> import numpy as np
>>> from sdopt.optimize import RunParameters, steepest_descent
>>> params = RunParameters(
...     dimensionality=2,
...     iterations=100,
...     tolerance=1e-4,
...     step_size=0.1,
...     initial_point=np.array([4.0, 4.0]),
... )
>>> res = steepest_descent("quadratic", params)
>>> res.success
True
"""

from .core import (
    CONVERGED_MESSAGE,
    EXHAUSTED_MESSAGE,
    IterationRecord,
    OptimizeResult,
    RunParameters,
    Status,
    check_bounds,
    check_convergence,
    validate_run,
    verdict_message,
)
from .numeric import floor5, format1, format5, magnitude, next_down, plain_str
from .objectives import (
    BOUNDS,
    QUADRATIC,
    ROSENBROCK,
    ObjectiveFunction,
    ObjectiveKind,
    get_objective,
)
from .steepest import iter_steepest_descent, steepest_descent

__all__ = [
    "BOUNDS",
    "CONVERGED_MESSAGE",
    "EXHAUSTED_MESSAGE",
    "IterationRecord",
    "ObjectiveFunction",
    "ObjectiveKind",
    "OptimizeResult",
    "QUADRATIC",
    "ROSENBROCK",
    "RunParameters",
    "Status",
    "check_bounds",
    "check_convergence",
    "floor5",
    "format1",
    "format5",
    "get_objective",
    "iter_steepest_descent",
    "magnitude",
    "next_down",
    "plain_str",
    "steepest_descent",
    "validate_run",
    "verdict_message",
]
