"""
Cross-check against SciPy's HiGHS solver.

SciPy is an optional dependency (``pip install lpsimplex[scipy]``). The
reference solve is used to validate optima found by the simplex engine; it is
not part of the solve path.
"""

from __future__ import annotations

import numpy as np

from lpsimplex.lp.model import LP

from .core import SimplexResult, Status

try:
    from scipy.optimize import linprog as _scipy_linprog

    SCIPY_AVAILABLE = True
except ImportError:  # pragma: no cover - SciPy is optional
    SCIPY_AVAILABLE = False
    _scipy_linprog = None

# scipy.optimize.linprog status codes
_STATUS_MAP = {
    0: Status.SOLVABLE,
    1: Status.MAX_ITER,
    2: Status.INFEASIBLE,
    3: Status.UNBOUNDED,
}


def linprog_reference(lp: LP, maxiter: int = 10_000) -> SimplexResult:
    """
    Solve ``lp`` with ``scipy.optimize.linprog(method="highs")``.

    Rows are treated as equalities when ``lp.equality_form`` is set and as
    ``<=`` constraints otherwise; the objective is maximized.

    Raises:
        RuntimeError: If SciPy is not installed.
    """
    if not SCIPY_AVAILABLE:  # pragma: no cover - depends on SciPy
        raise RuntimeError("SciPy is not available; install lpsimplex[scipy]")

    a_mat = np.asarray(lp.A, dtype=float)
    b_vec = np.asarray(lp.b, dtype=float)
    kwargs = {"A_eq": a_mat, "b_eq": b_vec} if lp.equality_form else {"A_ub": a_mat, "b_ub": b_vec}

    res = _scipy_linprog(
        c=-np.asarray(lp.c, dtype=float),
        bounds=[(0, None)] * lp.n,
        options={"maxiter": maxiter},
        method="highs",
        **kwargs,
    )
    status = _STATUS_MAP.get(res.status, Status.WRONG_FORM)
    solved = status is Status.SOLVABLE
    return SimplexResult(
        x=res.x if solved else None,
        fun=-float(res.fun) if solved else None,
        status=status,
        message=res.message,
        nit=int(res.nit),
    )


__all__ = ["SCIPY_AVAILABLE", "linprog_reference"]
