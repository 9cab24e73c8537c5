"""
Example: Steepest Descent on the Benchmark Functions

Runs the quadratic bowl from (4, 4) to convergence, then shows the
Rosenbrock valley from the classic (-1.2, 1.0) start exhausting a short
iteration budget. Reports are printed exactly as the command-line tool
prints them.
"""

import sys
from pathlib import Path

import numpy as np

from sdopt import RunParameters, load_config, steepest_descent
from sdopt.io import write_report

HERE = Path(__file__).resolve().parent


def example_quadratic_from_config():
    """Example: parameters read from a config file."""
    print("=" * 60)
    print("Example 1: Quadratic bowl from examples/quadratic.txt")
    print("=" * 60)
    cfg = load_config(HERE / "quadratic.txt")
    result = write_report(cfg.objective, cfg.params, sys.stdout)
    print()
    print(f"Status: {result.status.value}, final x = {result.x}")


def example_rosenbrock_budget():
    """Example: a short budget on the Rosenbrock valley."""
    print("=" * 60)
    print("Example 2: Rosenbrock valley with 5 iterations")
    print("=" * 60)
    params = RunParameters(
        dimensionality=2,
        iterations=5,
        tolerance=1e-4,
        step_size=0.001,
        initial_point=np.array([-1.2, 1.0]),
    )
    result = steepest_descent("rosenbrock", params, history=True)
    for record in result.records:
        print(
            f"{record.iteration:>3}  f={record.formatted_value:>12}  "
            f"x={' '.join(record.formatted_point)}"
        )
    print(result.message)


if __name__ == "__main__":
    example_quadratic_from_config()
    print()
    example_rosenbrock_budget()
