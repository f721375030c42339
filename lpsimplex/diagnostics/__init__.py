"""Diagnostics and debugging utilities for lpsimplex."""

from .checks import assert_tableaux_consistent, primal_residual
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "assert_tableaux_consistent",
    "primal_residual",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
