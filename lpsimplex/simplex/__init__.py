"""
Simplex engine: tableaux, pivot rules and the two-phase solver.

The numerical work is done by :mod:`lpsimplex.linalg`; this subpackage only
manages bases. Outcomes are reported through :class:`Status`.
"""

from . import core, pivot, reference, solver, tableaux
from .core import SimplexResult, SolverPhase, Status
from .pivot import BlandRule, LargestCoefficientRule, PivotRule, get_pivot_rule
from .reference import linprog_reference
from .solver import (
    SimplexSolver,
    auxiliary_lp,
    choose_beta,
    complete_basis,
    simplex,
    solve_lp,
    swap_basis,
)
from .tableaux import Tableaux

__all__ = [
    "core",
    "pivot",
    "reference",
    "solver",
    "tableaux",
    # Core types
    "Status",
    "SolverPhase",
    "SimplexResult",
    "Tableaux",
    # Pivot rules
    "PivotRule",
    "BlandRule",
    "LargestCoefficientRule",
    "get_pivot_rule",
    # Solver
    "SimplexSolver",
    "choose_beta",
    "swap_basis",
    "auxiliary_lp",
    "complete_basis",
    "solve_lp",
    "simplex",
    "linprog_reference",
]
