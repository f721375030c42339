"""
Two-phase revised simplex method.

Problems are taken in equality form

```
    maximize    c^T x
    subject to  A x = b
                x >= 0
```

Phase I appends one artificial variable per row, starts from the
all-artificial basis and maximizes minus their sum. A negative optimum proves
the LP infeasible; otherwise the optimal basis restricted to the original
columns is feasible for the LP. Phase II pivots from that basis until every
reduced cost is non-positive (optimal) or the ratio test finds no leaving row
(unbounded). The tableaux is rebuilt from scratch after every pivot.

Example:
    >>> import numpy as np
    >>> from lpsimplex.simplex.solver import simplex
    >>> A = np.array([[1.0, 1.0], [1.0, -1.0]])
    >>> result = simplex(A, b=np.array([4.0, 0.0]), c=np.array([1.0, 1.0]))
    >>> result.status
    <Status.SOLVABLE: 'solvable'>
    >>> round(result.fun, 6)
    4.0

References:
    - Bertsimas & Tsitsiklis, *Introduction to Linear Optimization*, 1997.
    - Chvatal, *Linear Programming*, 1983.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from lpsimplex.config import (
    DEFAULT_MAX_ITERATIONS,
    FEASIBILITY_EPS,
    ZERO_TOL,
    SolverConfig,
    default_config,
)
from lpsimplex.linalg.core import mask_indices, subind_matrix
from lpsimplex.linalg.qr import qr_decomp, rank_r, solve_system
from lpsimplex.logging import get_logger
from lpsimplex.lp.model import LP, transform_to_equality

from .core import SimplexResult, SolverPhase, Status
from .pivot import PivotRule, get_pivot_rule
from .tableaux import Tableaux

logger = get_logger(__name__)


@dataclass
class _PhaseOutcome:
    status: Status
    x: np.ndarray
    basis: np.ndarray
    objective: float
    iterations: int


def choose_beta(tableaux: Tableaux, alpha: int, tol: float = ZERO_TOL) -> Optional[int]:
    """
    Ratio test for entering position ``alpha``.

    Among rows with ``Q[i, alpha] < -tol`` returns the one maximizing
    ``p[i] / Q[i, alpha]`` (first occurrence on ties), or ``None`` when no row
    limits the entering variable.
    """
    column = tableaux.Q[:, alpha]
    p = tableaux.p
    best_beta = None
    best_value = 0.0
    for i, coeff in enumerate(column):
        if coeff < -tol:
            value = p[i] / coeff
            if best_beta is None or value > best_value:
                best_beta = i
                best_value = value
    return best_beta


def swap_basis(basis: np.ndarray, tableaux: Tableaux, alpha: int, beta: int) -> None:
    """Exchange non-basic position ``alpha`` with basic position ``beta`` in place."""
    basis[tableaux.indices_N[alpha]] = 1.0
    basis[tableaux.indices_B[beta]] = 0.0


def auxiliary_lp(lp: LP) -> Tuple[LP, np.ndarray]:
    """
    Build the phase-I LP and its starting basis.

    The auxiliary LP has matrix ``(A | I_m)`` and costs ``(0, ..., 0, -1, ..., -1)``.
    Rows with a negative right-hand side are negated first, so the
    all-artificial basis is feasible.

    Returns:
        ``(aux, basis)`` where ``basis`` selects the artificial columns.
    """
    m, n = lp.A.shape
    a_mat = np.array(lp.A, dtype=float, copy=True)
    b_vec = np.array(lp.b, dtype=float, copy=True)
    negative = b_vec < 0
    a_mat[negative, :] *= -1
    b_vec[negative] *= -1

    aux = LP(
        A=np.hstack([a_mat, np.eye(m)]),
        b=b_vec,
        c=np.concatenate([np.zeros(n), -np.ones(m)]),
        equality_form=True,
        n_structural=n,
    )
    basis = np.concatenate([np.zeros(n), np.ones(m)])
    return aux, basis


def complete_basis(lp: LP, basis: np.ndarray, tol: float = ZERO_TOL) -> Optional[np.ndarray]:
    """
    Extend a set of independent columns to a basis of ``m`` columns.

    Non-basic columns are tried in ascending order and kept when they raise
    the rank of ``A_B``. Returns ``None`` when the rows of ``A`` are linearly
    dependent and no basis exists.
    """
    completed = np.array(basis, dtype=float, copy=True)
    count = int(np.count_nonzero(completed))
    for j in mask_indices(completed == 0):
        if count == lp.m:
            break
        completed[j] = 1.0
        _, r_mat = qr_decomp(subind_matrix(lp.A, completed), tol)
        if rank_r(r_mat, tol) == count + 1:
            count += 1
        else:
            completed[j] = 0.0
    if count < lp.m:
        return None
    return completed


def _feasibility_threshold(lp: LP) -> float:
    return FEASIBILITY_EPS * max(1.0, float(np.max(np.abs(lp.b), initial=0.0)))


class SimplexSolver:
    """
    Two-phase simplex solver.

    Args:
        config: Solver configuration. Defaults to :func:`default_config`.
        pivot_rule: Overrides ``config.pivot_rule`` with a rule name or a
            :class:`~lpsimplex.simplex.pivot.PivotRule` instance.

    Attributes:
        phase: Current :class:`SolverPhase`, updated as a solve progresses.
    """

    def __init__(
        self,
        config: Optional[SolverConfig] = None,
        pivot_rule: str | PivotRule | None = None,
    ) -> None:
        self.config = config if config is not None else default_config()
        self.rule = get_pivot_rule(pivot_rule if pivot_rule is not None else self.config.pivot_rule)
        self.phase = SolverPhase.IDLE

    @property
    def tol(self) -> float:
        return self.config.zero_tol

    def solve_from_basis(self, lp: LP, basis: np.ndarray) -> _PhaseOutcome:
        """
        Run the pivot loop from a feasible basis.

        Returns an outcome with status ``SOLVABLE`` (``x`` optimal),
        ``UNBOUNDED`` or ``MAX_ITER``.
        """
        basis = np.array(basis, dtype=float, copy=True)
        tableaux = Tableaux(lp, basis, tol=self.tol, check_invariants=self.config.invariants_enabled)
        cap = self.config.max_iterations
        nit = 0

        while not tableaux.is_optimal():
            if cap is not None and nit >= cap:
                logger.warning("iteration cap of %d reached at z0=%.6g", cap, tableaux.z0)
                return _PhaseOutcome(Status.MAX_ITER, np.array(tableaux.x), basis, tableaux.z0, nit)

            alpha = self.rule.choose(tableaux.r, self.tol)
            beta = choose_beta(tableaux, alpha, self.tol)
            entering = int(tableaux.indices_N[alpha])
            if beta is None:
                logger.info("unbounded along x[%d]", entering)
                return _PhaseOutcome(Status.UNBOUNDED, np.array(tableaux.x), basis, tableaux.z0, nit)

            leaving = int(tableaux.indices_B[beta])
            swap_basis(basis, tableaux, alpha, beta)
            tableaux.set(basis)
            nit += 1
            logger.debug(
                "pivot %d: x[%d] enters, x[%d] leaves, z0=%.6g",
                nit,
                entering,
                leaving,
                tableaux.z0,
            )

        return _PhaseOutcome(Status.SOLVABLE, np.array(tableaux.x), basis, tableaux.z0, nit)

    def find_initial_basis(self, lp: LP) -> Tuple[Status, Optional[np.ndarray], int, str]:
        """
        Phase I: find a feasible basis for ``lp``.

        Returns:
            ``(status, basis, nit, message)``. ``basis`` is set only when
            ``status`` is ``SOLVABLE``.
        """
        self.phase = SolverPhase.BUILDING_PHASE1
        aux, aux_basis = auxiliary_lp(lp)
        outcome = self.solve_from_basis(aux, aux_basis)
        self.phase = SolverPhase.SOLVED_PHASE1

        if outcome.status is not Status.SOLVABLE:
            return outcome.status, None, outcome.iterations, f"Phase I stopped: {outcome.status.value}"
        # The phase I optimum must be zero up to round-off, not up to zero_tol.
        threshold = _feasibility_threshold(lp)
        artificial = outcome.x[lp.n :]
        if outcome.objective < -threshold or np.any(artificial > threshold):
            logger.info("phase I optimum %.6g < 0: infeasible", outcome.objective)
            return Status.INFEASIBLE, None, outcome.iterations, "Problem infeasible (phase I objective < 0)"

        basis = outcome.basis[: lp.n].copy()
        if int(np.count_nonzero(basis)) < lp.m:
            logger.warning("artificial variables left in the phase I basis; completing basis")
            basis = complete_basis(lp, basis, self.tol)
            if basis is None:
                return (
                    Status.WRONG_FORM,
                    None,
                    outcome.iterations,
                    "Constraint rows are linearly dependent",
                )

        p = solve_system(subind_matrix(lp.A, basis), lp.b, self.tol)
        if np.any(p < -self.tol):
            row = int(np.argmin(p))
            logger.info(
                "phase I basis gives x[%d] = %.6g: infeasible",
                int(mask_indices(basis)[row]),
                p[row],
            )
            return (
                Status.INFEASIBLE,
                None,
                outcome.iterations,
                "Problem infeasible (phase I basis is not feasible)",
            )

        logger.info("phase I found a feasible basis after %d pivots", outcome.iterations)
        return Status.SOLVABLE, basis, outcome.iterations, "Feasible basis found"

    def solve(self, lp: LP) -> SimplexResult:
        """Solve ``lp`` (read as ``A x = b, x >= 0``) with both phases."""
        if lp.m > lp.n:
            logger.info("rejecting LP with m=%d > n=%d", lp.m, lp.n)
            return SimplexResult(
                x=None,
                fun=None,
                status=Status.WRONG_FORM,
                message=f"More constraints ({lp.m}) than variables ({lp.n})",
                nit=0,
            )

        status, basis, nit1, message = self.find_initial_basis(lp)
        if status is not Status.SOLVABLE:
            self.phase = SolverPhase.DONE
            return SimplexResult(x=None, fun=None, status=status, message=message, nit=nit1)

        self.phase = SolverPhase.BUILDING_PHASE2
        outcome = self.solve_from_basis(lp, basis)
        self.phase = SolverPhase.SOLVED_PHASE2
        nit_total = nit1 + outcome.iterations

        if outcome.status is Status.UNBOUNDED:
            result = SimplexResult(
                x=None,
                fun=None,
                status=Status.UNBOUNDED,
                message="Problem unbounded",
                nit=nit_total,
                basis=outcome.basis,
            )
        elif outcome.status is Status.MAX_ITER:
            result = SimplexResult(
                x=None,
                fun=None,
                status=Status.MAX_ITER,
                message="Maximum iterations exceeded in phase II",
                nit=nit_total,
                basis=outcome.basis,
            )
        else:
            logger.info("optimal value %.6g after %d pivots", outcome.objective, nit_total)
            result = SimplexResult(
                x=outcome.x,
                fun=float(outcome.objective),
                status=Status.SOLVABLE,
                message="Optimal solution found",
                nit=nit_total,
                basis=outcome.basis,
            )
        self.phase = SolverPhase.DONE
        return result


def solve_lp(lp: LP, config: Optional[SolverConfig] = None) -> SimplexResult:
    """Solve an equality-form LP with a fresh :class:`SimplexSolver`."""
    return SimplexSolver(config).solve(lp)


def simplex(
    A: np.ndarray,
    b: np.ndarray,
    c: np.ndarray,
    form: str = "inequality",
    pivot_rule: str = "bland",
    zero_tol: float = ZERO_TOL,
    max_iterations: Optional[int] = DEFAULT_MAX_ITERATIONS,
) -> SimplexResult:
    """
    Maximize ``c^T x`` subject to ``A x <= b`` (or ``A x = b``) and ``x >= 0``.

    Args:
        A, b, c: Problem data; copied, never modified.
        form: ``"inequality"`` adds slack variables first, ``"equality"``
            solves the rows as given.
        pivot_rule: ``"bland"`` or ``"lcr"``.
        zero_tol: Zero tolerance used throughout the solve.
        max_iterations: Pivot cap per phase, ``None`` for no cap.

    Returns:
        A :class:`SimplexResult` whose ``x`` covers only the variables of ``c``.
    """
    if form not in ("inequality", "equality"):
        raise ValueError(f"form must be 'inequality' or 'equality', got {form!r}")

    lp = LP(A=A, b=b, c=c, equality_form=(form == "equality"))
    if form == "inequality":
        transform_to_equality(lp)

    config = SolverConfig(zero_tol=zero_tol, pivot_rule=pivot_rule, max_iterations=max_iterations)
    result = SimplexSolver(config).solve(lp)
    if result.x is not None:
        result.x = result.x[: lp.n_structural]
    return result


__all__ = [
    "SimplexSolver",
    "choose_beta",
    "swap_basis",
    "auxiliary_lp",
    "complete_basis",
    "solve_lp",
    "simplex",
]
