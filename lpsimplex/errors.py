"""
Exception hierarchy for lpsimplex.

These exceptions form the fatal tier: they signal a programming error or a
malformed request and abort the current operation. Expected outcomes of a
solve (infeasible, unbounded, wrong form) are reported through
:class:`lpsimplex.simplex.core.Status` instead and are never raised.
"""

from __future__ import annotations

import numpy as np


class LPSimplexError(Exception):
    """Base class for all errors raised by lpsimplex."""


class DimensionMismatchError(LPSimplexError, ValueError):
    """Operand sizes of a vector or matrix operation disagree."""


class SingularMatrixError(LPSimplexError, np.linalg.LinAlgError):
    """A square matrix is rank deficient where full rank is required."""


class NoSolutionError(LPSimplexError, np.linalg.LinAlgError):
    """Back-substitution met a zero pivot with a non-zero right-hand side."""


class TableauxInvariantError(LPSimplexError, RuntimeError):
    """A simplex tableaux violates one of its structural invariants."""


class PivotError(LPSimplexError, RuntimeError):
    """Pivot selection was requested although no reduced cost is positive."""


class TransformError(LPSimplexError, RuntimeError):
    """A structural LP transform was applied in an invalid state."""


class LPFormatError(LPSimplexError, ValueError):
    """An LP instance source is malformed."""


__all__ = [
    "LPSimplexError",
    "DimensionMismatchError",
    "SingularMatrixError",
    "NoSolutionError",
    "TableauxInvariantError",
    "PivotError",
    "TransformError",
    "LPFormatError",
]
