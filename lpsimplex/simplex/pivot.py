"""
Entering-variable selection rules.

A rule receives the reduced-cost vector ``r`` of a tableaux and returns the
position ``alpha`` (in non-basic order) of the variable that enters the basis.
Only call a rule when the optimality test failed, i.e. some ``r[alpha]``
exceeds the tolerance.

Ties in :class:`LargestCoefficientRule` go to the first occurrence. That rule
carries no anti-cycling guarantee, so degenerate instances may cycle; the
solver's iteration cap bounds such runs.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from lpsimplex.config import PIVOT_RULE_ALIASES, ZERO_TOL
from lpsimplex.errors import PivotError


class PivotRule(ABC):
    """Policy choosing the entering column among positive reduced costs."""

    name: str = ""

    @abstractmethod
    def choose(self, r: np.ndarray, tol: float = ZERO_TOL) -> int:
        """Return the non-basic position of the entering variable."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class BlandRule(PivotRule):
    """Smallest non-basic position with a positive reduced cost.

    Guarantees finite termination at the cost of slower convergence.
    """

    name = "bland"

    def choose(self, r: np.ndarray, tol: float = ZERO_TOL) -> int:
        for alpha, value in enumerate(r):
            if value > tol:
                return alpha
        raise PivotError("bland: no positive reduced cost to pivot on")


class LargestCoefficientRule(PivotRule):
    """Strictly largest positive reduced cost, first occurrence on ties."""

    name = "lcr"

    def choose(self, r: np.ndarray, tol: float = ZERO_TOL) -> int:
        best_alpha = -1
        largest = tol
        for alpha, value in enumerate(r):
            if value > largest:
                best_alpha = alpha
                largest = value
        if best_alpha < 0:
            raise PivotError("lcr: no positive reduced cost to pivot on")
        return best_alpha


_RULES: dict[str, type[PivotRule]] = {
    BlandRule.name: BlandRule,
    LargestCoefficientRule.name: LargestCoefficientRule,
}


def get_pivot_rule(rule: str | PivotRule) -> PivotRule:
    """Resolve a rule name (or pass through a rule instance)."""
    if isinstance(rule, PivotRule):
        return rule
    key = PIVOT_RULE_ALIASES.get(str(rule).lower())
    if key is None:
        raise ValueError(
            f"unknown pivot rule {rule!r}; expected one of {sorted(PIVOT_RULE_ALIASES)}"
        )
    return _RULES[key]()


__all__ = ["PivotRule", "BlandRule", "LargestCoefficientRule", "get_pivot_rule"]
