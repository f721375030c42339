"""lpsimplex - a two-phase revised simplex solver on a QR-based dense kernel."""

__version__ = "0.1.0"

# Configuration
from .config import ZERO_TOL, SolverConfig, default_config

# Diagnostics
from .diagnostics import (
    assert_tableaux_consistent,
    debug_context,
    is_debug_enabled,
    primal_residual,
    set_debug_enabled,
)

# Errors
from .errors import (
    DimensionMismatchError,
    LPFormatError,
    LPSimplexError,
    NoSolutionError,
    PivotError,
    SingularMatrixError,
    TableauxInvariantError,
    TransformError,
)

# Linear algebra
from .linalg import inverse_matrix, qr_decomp, rank, solve_system

# Logging
from .logging import configure_logging, get_logger, set_log_level

# LP model
from .lp import LP, parse_lp, read_lp, transform_to_equality

# Simplex engine
from .simplex import (
    BlandRule,
    LargestCoefficientRule,
    PivotRule,
    SimplexResult,
    SimplexSolver,
    SolverPhase,
    Status,
    Tableaux,
    get_pivot_rule,
    linprog_reference,
    simplex,
    solve_lp,
)

__all__ = [
    "__version__",
    "ZERO_TOL",
    "SolverConfig",
    "default_config",
    "assert_tableaux_consistent",
    "primal_residual",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "LPSimplexError",
    "DimensionMismatchError",
    "SingularMatrixError",
    "NoSolutionError",
    "TableauxInvariantError",
    "PivotError",
    "TransformError",
    "LPFormatError",
    "qr_decomp",
    "rank",
    "solve_system",
    "inverse_matrix",
    "get_logger",
    "set_log_level",
    "configure_logging",
    "LP",
    "transform_to_equality",
    "parse_lp",
    "read_lp",
    "Status",
    "SolverPhase",
    "SimplexResult",
    "Tableaux",
    "PivotRule",
    "BlandRule",
    "LargestCoefficientRule",
    "get_pivot_rule",
    "SimplexSolver",
    "solve_lp",
    "simplex",
    "linprog_reference",
]
