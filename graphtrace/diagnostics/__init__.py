"""Diagnostics and debugging utilities for graphtrace."""

from .core import (
    assert_complete_node_maps,
    assert_valid_result,
    is_forest,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "assert_complete_node_maps",
    "assert_valid_result",
    "is_forest",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
