"""Result validation switch.

When validation is on, ``run`` passes every successful result through
``assert_valid_result`` before handing it to the editor, and a result that
breaks an invariant is reported as an internal error. The switch starts
from the ``GRAPHTRACE_DEBUG`` environment variable and is off otherwise.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator, Optional

DEBUG_ENV_VAR = "GRAPHTRACE_DEBUG"
_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _env_flag(value: Optional[str]) -> bool:
    return value is not None and value.strip().lower() in _TRUTHY


_validate_results: bool = _env_flag(os.getenv(DEBUG_ENV_VAR))


def is_debug_enabled() -> bool:
    """Return True if ``run`` validates results before returning them."""
    return _validate_results


def set_debug_enabled(enabled: bool) -> None:
    """Turn result validation on or off for the whole process."""
    global _validate_results
    _validate_results = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Validate results (or not) inside a block, then restore the old setting.

    The previous setting comes back even if the block raises, so tests can
    force validation around a single run.

    Example
    -------
    >>> with debug_context(True):
    ...     result = run("bfs", [1, 2], [{"source": 1, "target": 2}], 1)
    """
    global _validate_results
    previous = _validate_results
    _validate_results = bool(enabled)
    try:
        yield
    finally:
        _validate_results = previous
