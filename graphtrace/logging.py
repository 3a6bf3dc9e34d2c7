"""Logging for graphtrace.

Every module logs through ``get_logger(__name__)``, so logger names follow
the package layout. The dispatcher logs under ``graphtrace.engine``: a
run at INFO, a rejected request at WARNING and a crashed algorithm at
ERROR. The algorithm modules listed in ``TRACE_LOGGERS`` mirror each
trace line they record at DEBUG, which makes their loggers a live view of
the step-by-step trace. ``enable_trace_logging`` turns that view on
without making the rest of the package chatty.
"""

from __future__ import annotations

import logging
import sys
from typing import Dict, Optional, TextIO, Tuple

PACKAGE_LOGGER = "graphtrace"

# Loggers that mirror algorithm traces at DEBUG.
TRACE_LOGGERS: Tuple[str, ...] = (
    "graphtrace.graphs.traversal",
    "graphtrace.graphs.shortest",
    "graphtrace.graphs.mst",
)

_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

_level = logging.WARNING
_format = _DEFAULT_FORMAT
_stream: Optional[TextIO] = None
_loggers: Dict[str, logging.Logger] = {}


def _coerce_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def _qualify(name: Optional[str]) -> str:
    if not name or name == PACKAGE_LOGGER:
        return PACKAGE_LOGGER
    if name.startswith(PACKAGE_LOGGER + "."):
        return name
    return f"{PACKAGE_LOGGER}.{name}"


def _attach_handler(logger: logging.Logger, level: int) -> None:
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    handler = logging.StreamHandler(_stream if _stream is not None else sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_format))
    logger.addHandler(handler)
    logger.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the cached graphtrace logger for a module.

    Names outside the package are placed under ``graphtrace.``. Each logger
    gets its own stderr handler and does not propagate, so an application's
    root configuration never sees engine output unless it asks for it.

    Args:
        name: Usually ``__name__``. None gives the package logger.

    Example:
        >>> get_logger("graphtrace.graphs.mst").name
        'graphtrace.graphs.mst'
    """
    qualified = _qualify(name)
    logger = _loggers.get(qualified)
    if logger is None:
        logger = logging.getLogger(qualified)
        if not logger.handlers:
            _attach_handler(logger, _level)
            logger.propagate = False
        _loggers[qualified] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Set the level of every graphtrace logger and of loggers created later.

    Args:
        level: A ``logging`` level or its name, e.g. ``"DEBUG"``.
    """
    global _level
    _level = _coerce_level(level)
    for logger in _loggers.values():
        logger.setLevel(_level)
        for handler in logger.handlers:
            handler.setLevel(_level)


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Route every graphtrace logger to one stream with one format.

    Existing handlers are replaced, so calling this twice does not duplicate
    output. Setting ``level`` to DEBUG also shows every algorithm trace.

    Args:
        level: Level for all loggers (default WARNING).
        format_string: Record format. None restores the default
            ``[LEVEL] name: message``.
        stream: Destination (default ``sys.stderr``).
    """
    global _level, _format, _stream
    _level = _coerce_level(level)
    _format = format_string or _DEFAULT_FORMAT
    _stream = stream
    for logger in _loggers.values():
        _attach_handler(logger, _level)


def enable_trace_logging(enabled: bool = True) -> None:
    """Show or hide algorithm traces as they are recorded.

    Only the ``TRACE_LOGGERS`` change level; the dispatcher keeps the level
    set by ``configure_logging``. Disabling puts them back at that level.

    Example:
        >>> enable_trace_logging()
        >>> run("bfs", [1, 2], [{"source": 1, "target": 2}], source_id=1).success
        True
    """
    level = logging.DEBUG if enabled else _level
    for name in TRACE_LOGGERS:
        logger = get_logger(name)
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)
