"""
Status codes, solver phases and the result container for simplex solves.

Infeasibility, unboundedness and an unusable constraint shape are ordinary
outcomes of solving an LP. They are reported through :class:`Status` on a
:class:`SimplexResult` rather than raised.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

import numpy as np


class Status(Enum):
    """Outcome of a simplex solve."""

    SOLVABLE = "solvable"
    INFEASIBLE = "infeasible"
    UNBOUNDED = "unbounded"
    WRONG_FORM = "wrong_form"
    MAX_ITER = "max_iter"


class SolverPhase(Enum):
    """States the two-phase solver moves through."""

    IDLE = "idle"
    BUILDING_PHASE1 = "building_phase1"
    SOLVED_PHASE1 = "solved_phase1"
    BUILDING_PHASE2 = "building_phase2"
    SOLVED_PHASE2 = "solved_phase2"
    DONE = "done"


@dataclass
class SimplexResult:
    """
    Solution container returned by the solver.

    Attributes:
        x: Optimal basic feasible solution when ``status`` is ``SOLVABLE``,
            otherwise ``None``.
        fun: Objective value ``c^T x`` at ``x`` (or ``None``).
        status: Outcome of the solve.
        message: Human-readable explanation of the status.
        nit: Number of pivots performed across both phases.
        basis: Final 0/1 basis indicator when one is available.
    """

    x: Optional[np.ndarray]
    fun: Optional[float]
    status: Status
    message: str
    nit: int
    basis: Optional[np.ndarray] = None

    @property
    def success(self) -> bool:
        return self.status is Status.SOLVABLE


__all__ = ["Status", "SolverPhase", "SimplexResult"]
