"""Package loggers for sdopt.

Each ``sdopt.*`` logger owns one stderr handler and does not propagate.
The starting level comes from ``SDOPT_LOG_LEVEL`` (default WARNING).
Report text never goes through these loggers.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional, TextIO

_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def _level_from(value: int | str) -> int:
    if isinstance(value, str):
        return getattr(logging, value.upper(), logging.WARNING)
    return value


_level = _level_from(os.getenv("SDOPT_LOG_LEVEL", "WARNING"))
_loggers: dict[str, logging.Logger] = {}


def _attach(logger: logging.Logger, stream: TextIO) -> None:
    handler = logging.StreamHandler(stream)
    handler.setLevel(_level)
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(_level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the cached ``sdopt`` logger for ``name`` (usually ``__name__``).

    Names outside the package are prefixed with ``sdopt.``.
    """
    name = name or "sdopt"
    if name != "sdopt" and not name.startswith("sdopt."):
        name = f"sdopt.{name}"
    if name not in _loggers:
        logger = logging.getLogger(name)
        if not logger.handlers:
            _attach(logger, sys.stderr)
            logger.propagate = False
        _loggers[name] = logger
    return _loggers[name]


def set_log_level(level: int | str) -> None:
    """Change the level of every package logger and of loggers created later."""
    global _level
    _level = _level_from(level)
    for logger in _loggers.values():
        logger.setLevel(_level)
        for handler in logger.handlers:
            handler.setLevel(_level)


def configure_logging(level: int | str = logging.WARNING, stream: Optional[TextIO] = None) -> None:
    """Set the level and route every package logger to ``stream`` (stderr by default)."""
    global _level
    _level = _level_from(level)
    for logger in _loggers.values():
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        _attach(logger, stream if stream is not None else sys.stderr)


__all__ = ["configure_logging", "get_logger", "set_log_level"]
