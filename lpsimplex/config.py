"""Solver configuration shared by the tableaux, pivot rules and solver."""

from __future__ import annotations

import os
from dataclasses import dataclass

ZERO_TOL = 1e-3
DEFAULT_MAX_ITERATIONS = 10_000

# Round-off allowance for the phase I objective, relative to max(1, |b|_inf).
FEASIBILITY_EPS = 1e-9

_TOL_ENV_VAR = "LPSIMPLEX_ZERO_TOL"
_PIVOT_ENV_VAR = "LPSIMPLEX_PIVOT_RULE"

# Accepted spellings mapped onto canonical rule names.
PIVOT_RULE_ALIASES = {
    "bland": "bland",
    "lcr": "lcr",
    "largest_coefficient": "lcr",
}


@dataclass(frozen=True)
class SolverConfig:
    """
    Configuration for a simplex solve.

    Args:
        zero_tol: Threshold below which a value counts as zero. Used for the
            diagonal of R, reduced costs and the ratio test alike.
        pivot_rule: Entering-variable policy, ``"bland"`` or ``"lcr"``
            (alias ``"largest_coefficient"``).
        max_iterations: Cap on pivots per phase. ``None`` disables the cap.
        check_invariants: Verify tableaux consistency after every rebuild.
            ``None`` defers to the global debug mode.
    """

    zero_tol: float = ZERO_TOL
    pivot_rule: str = "bland"
    max_iterations: int | None = DEFAULT_MAX_ITERATIONS
    check_invariants: bool | None = None

    def __post_init__(self) -> None:
        """Validate and normalize SolverConfig fields."""
        if not self.zero_tol > 0:
            raise ValueError(f"zero_tol must be positive, got {self.zero_tol}.")

        rule = str(self.pivot_rule).lower()
        if rule not in PIVOT_RULE_ALIASES:
            raise ValueError(
                f"unknown pivot rule {self.pivot_rule!r}; "
                f"expected one of {sorted(PIVOT_RULE_ALIASES)}."
            )
        object.__setattr__(self, "pivot_rule", PIVOT_RULE_ALIASES[rule])

        if self.max_iterations is not None and self.max_iterations < 1:
            raise ValueError(
                f"max_iterations must be >= 1 or None, got {self.max_iterations}."
            )

    @property
    def invariants_enabled(self) -> bool:
        if self.check_invariants is None:
            from lpsimplex.diagnostics.debug_mode import is_debug_enabled

            return is_debug_enabled()
        return self.check_invariants


def default_config() -> SolverConfig:
    """Build a SolverConfig from the environment, falling back to defaults."""
    tol = float(os.environ.get(_TOL_ENV_VAR, ZERO_TOL))
    rule = os.environ.get(_PIVOT_ENV_VAR, "bland")
    return SolverConfig(zero_tol=tol, pivot_rule=rule)


__all__ = [
    "ZERO_TOL",
    "DEFAULT_MAX_ITERATIONS",
    "FEASIBILITY_EPS",
    "PIVOT_RULE_ALIASES",
    "SolverConfig",
    "default_config",
]
