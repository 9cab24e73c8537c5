"""Pytest configuration and shared fixtures for sdopt tests.

This module provides:
- A deterministic RNG fixture for property-style checks
- Parameter factories and config-file writers
"""

import logging
import os
from pathlib import Path
from typing import Callable, Generator, Sequence

import numpy as np
import pytest

from sdopt.logging import set_log_level
from sdopt.optimize import RunParameters


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def reset_log_level() -> Generator[None, None, None]:
    """Restore the default package log level after each test."""
    yield
    set_log_level(logging.WARNING)


@pytest.fixture
def make_params() -> Callable[..., RunParameters]:
    """Build RunParameters with the textbook quadratic defaults."""

    def _make(
        point: Sequence[float] = (4.0, 4.0),
        iterations: int = 100,
        tolerance: float = 1e-4,
        step_size: float = 0.1,
    ) -> RunParameters:
        return RunParameters(
            dimensionality=len(point),
            iterations=iterations,
            tolerance=tolerance,
            step_size=step_size,
            initial_point=np.array(point, dtype=float),
        )

    return _make


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Write parameter-file text into a temporary file and return its path."""

    def _write(text: str, name: str = "config.txt") -> Path:
        path = tmp_path / name
        path.write_text(text)
        return path

    return _write


QUADRATIC_CONFIG = (
    "quadratic   // objective function\n"
    "2           // dimensionality\n"
    "100         // iterations\n"
    "0.0001      // tolerance\n"
    "0.1         // step size\n"
    "4.0 4.0     // initial point\n"
)


@pytest.fixture
def quadratic_config() -> str:
    return QUADRATIC_CONFIG
