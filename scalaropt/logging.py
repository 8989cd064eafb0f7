"""Logging utilities for scalaropt.

Every search routine logs through a package-scoped logger obtained from
:func:`get_logger`. Iterations are logged at DEBUG, finished searches at
INFO and Newton stalls at WARNING. The starting level is read from the
``SCALAROPT_LOG_LEVEL`` environment variable.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional, TextIO

_LEVEL_ENV_VAR = "SCALAROPT_LOG_LEVEL"
_ROOT = "scalaropt"
_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def _resolve_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


# Settings applied to loggers created from now on
_level = _resolve_level(os.getenv(_LEVEL_ENV_VAR, "WARNING"))
_stream: Optional[TextIO] = None
_formatter = logging.Formatter(_FORMAT)

_loggers: dict[str, logging.Logger] = {}


def _install_handler(logger: logging.Logger) -> None:
    """Give ``logger`` a single stream handler built from the current settings."""
    for old in logger.handlers[:]:
        logger.removeHandler(old)
    handler = logging.StreamHandler(_stream if _stream is not None else sys.stderr)
    handler.setLevel(_level)
    handler.setFormatter(_formatter)
    logger.setLevel(_level)
    logger.addHandler(handler)
    logger.propagate = False


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create a logger under the ``scalaropt`` namespace.

    Loggers are cached, so repeated calls never stack handlers. Names outside
    the namespace are prefixed with ``scalaropt.``.

    Args:
        name: Logger name, usually ``__name__``. None gives the package logger.

    Example:
        >>> from scalaropt.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("Narrowing bracket")
    """
    name = name or _ROOT
    if name != _ROOT and not name.startswith(_ROOT + "."):
        name = f"{_ROOT}.{name}"

    logger = _loggers.get(name)
    if logger is None:
        logger = logging.getLogger(name)
        if not logger.handlers:
            _install_handler(logger)
        _loggers[name] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Change the level of every scalaropt logger, existing and future.

    Args:
        level: A ``logging`` constant or its name, e.g. ``"DEBUG"``.
    """
    global _level
    _level = _resolve_level(level)
    for logger in _loggers.values():
        logger.setLevel(_level)
        for handler in logger.handlers:
            handler.setLevel(_level)


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Route all scalaropt logging to ``stream`` with the given level and format.

    Existing loggers get fresh handlers; loggers created later pick up the
    same settings. Passing ``stream=None`` restores ``sys.stderr``.

    Args:
        level: Logging level (default: WARNING).
        format_string: ``logging.Formatter`` format. None keeps the default.
        stream: Text stream to write to.
    """
    global _level, _stream, _formatter
    _level = _resolve_level(level)
    _stream = stream
    _formatter = logging.Formatter(format_string or _FORMAT)
    for logger in _loggers.values():
        _install_handler(logger)


__all__ = ["configure_logging", "get_logger", "set_log_level"]
