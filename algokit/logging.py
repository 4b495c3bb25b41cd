"""Logging helpers for algokit.

Every library module obtains its logger through :func:`get_logger` so that
all output lands under the ``algokit.`` namespace with a single stderr
handler. Nothing in the library prints; diagnostics are DEBUG records.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

# Quiet unless the caller asks for more
_DEFAULT_LEVEL = logging.WARNING

_loggers: dict[str, logging.Logger] = {}


def _coerce_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create the logger for a module.

    Loggers are cached so repeated calls never stack duplicate handlers.

    Args:
        name: Logger name, normally ``__name__``. Names outside the
            ``algokit`` namespace are prefixed with ``algokit.``. If None,
            the package logger is returned.

    Returns:
        Configured logger instance.

    Example:
        >>> from algokit.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("scanning %d edges", 12)
    """
    if name is None:
        name = "algokit"

    if name == "algokit" or name.startswith("algokit."):
        logger_name = name
    else:
        logger_name = f"algokit.{name}"

    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)

    if not logger.handlers:
        logger.setLevel(_DEFAULT_LEVEL)

        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(_DEFAULT_LEVEL)
        handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT))

        logger.addHandler(handler)
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Set the level of every algokit logger, present and future.

    Args:
        level: A ``logging`` level constant or its name (``"DEBUG"``,
            ``"INFO"``, ...). Unknown names fall back to WARNING.
    """
    global _DEFAULT_LEVEL

    level = _coerce_level(level)
    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)

    _DEFAULT_LEVEL = level


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Replace the handlers of all cached algokit loggers.

    Intended to be called once at application startup, e.g. by a script
    that wants MST progress on stdout.

    Args:
        level: Logging level (default: WARNING).
        format_string: Record format. Defaults to ``[LEVEL] name: message``.
        stream: Output stream (default: ``sys.stderr``).
    """
    global _DEFAULT_LEVEL

    level = _coerce_level(level)
    formatter = logging.Formatter(format_string or _DEFAULT_FORMAT)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    _DEFAULT_LEVEL = level
