"""Consistency checks for tableaux and candidate solutions."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from lpsimplex.config import ZERO_TOL
from lpsimplex.errors import TableauxInvariantError
from lpsimplex.linalg.core import subind_matrix

if TYPE_CHECKING:
    from lpsimplex.lp.model import LP
    from lpsimplex.simplex.tableaux import Tableaux


def primal_residual(lp: "LP", x: np.ndarray) -> float:
    """
    Infinity-norm violation of ``x`` for the constraints of ``lp``.

    Equality rows contribute ``|A x - b|``, inequality rows only their excess
    over ``b``. Negative coordinates of ``x`` count as violations as well.
    """
    x = np.asarray(x, dtype=float)
    residual = lp.A @ x - lp.b
    if not lp.equality_form:
        residual = np.maximum(residual, 0.0)
    worst = float(np.max(np.abs(residual), initial=0.0))
    worst_sign = float(np.max(-x, initial=0.0))
    return max(worst, worst_sign)


def assert_tableaux_consistent(tableaux: "Tableaux", tol: float = ZERO_TOL) -> None:
    """
    Verify the structural invariants of a tableaux.

    Checks that ``N`` complements ``B``, that the index tables match the
    indicators, that ``A_B p`` reproduces ``b``, and that ``x`` carries ``p``
    on its basic coordinates and zero elsewhere.

    Raises
    ------
    TableauxInvariantError
        If any invariant fails.
    """
    lp = tableaux.lp
    B = np.asarray(tableaux.B)
    N = np.asarray(tableaux.N)

    if not np.array_equal(N, 1.0 - B):
        raise TableauxInvariantError("non-basis indicator is not the complement of the basis")
    if not np.array_equal(tableaux.indices_B, np.flatnonzero(B)):
        raise TableauxInvariantError("indices_B does not match the basis indicator")
    if not np.array_equal(tableaux.indices_N, np.flatnonzero(N)):
        raise TableauxInvariantError("indices_N does not match the non-basis indicator")

    a_b = subind_matrix(lp.A, B)
    if not np.allclose(a_b @ tableaux.p, lp.b, atol=tol):
        raise TableauxInvariantError("A_B p does not reproduce b")

    x = np.asarray(tableaux.x)
    if not np.allclose(x[tableaux.indices_B], tableaux.p):
        raise TableauxInvariantError("basic coordinates of x differ from p")
    if np.any(x[tableaux.indices_N] != 0):
        raise TableauxInvariantError("non-basic coordinates of x are not zero")
    if np.any(x < -tol):
        raise TableauxInvariantError("basic solution has a negative coordinate")


__all__ = ["primal_residual", "assert_tableaux_consistent"]
