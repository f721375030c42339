"""
Simplex tableaux for a fixed basis.

For an LP ``A x = b, x >= 0`` and a 0/1 basis indicator ``B`` with ``m`` ones,
the tableaux expresses the basic variables through the non-basic ones::

    x_B = p + Q x_N,    c^T x = z0 + r^T x_N

with

    p  = A_B^{-1} b
    Q  = -A_B^{-1} A_N
    r  = c_N + Q^T c_B
    z0 = c_B^T p

``indices_B`` and ``indices_N`` map positions in ``p``/rows of ``Q`` and
positions in ``r``/columns of ``Q`` back to real column indices of ``A``.

A basis change never patches the derived quantities: :meth:`Tableaux.set`
computes a fresh state and drops the previous one.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from lpsimplex.config import ZERO_TOL
from lpsimplex.diagnostics.checks import assert_tableaux_consistent
from lpsimplex.errors import DimensionMismatchError, TableauxInvariantError
from lpsimplex.linalg.core import (
    add,
    complement_mask,
    inner_product,
    is_nonpositive,
    mask_indices,
    multiply,
    readonly,
    scale,
    subind_matrix,
    subind_vector,
    transpose,
    zero_vector,
)
from lpsimplex.linalg.qr import inverse_matrix
from lpsimplex.lp.model import LP


@dataclass(frozen=True)
class _TableauxState:
    B: np.ndarray
    N: np.ndarray
    indices_B: np.ndarray
    indices_N: np.ndarray
    A_B_inv: np.ndarray
    p: np.ndarray
    Q: np.ndarray
    r: np.ndarray
    z0: float
    x: np.ndarray


def _compute_state(lp: LP, basis: np.ndarray, tol: float) -> _TableauxState:
    B = (np.asarray(basis) != 0).astype(float)
    N = complement_mask(B)

    a_b = subind_matrix(lp.A, B)
    a_n = subind_matrix(lp.A, N)
    a_b_inv = inverse_matrix(a_b, tol)

    p = multiply(a_b_inv, lp.b)
    q_mat = scale(multiply(a_b_inv, a_n), -1.0)
    c_b = subind_vector(lp.c, B)
    c_n = subind_vector(lp.c, N)
    r = add(c_n, multiply(transpose(q_mat), c_b))
    z0 = inner_product(c_b, p)

    indices_B = mask_indices(B)
    indices_N = mask_indices(N)

    if np.any(p < -tol):
        row = int(np.argmin(p))
        raise TableauxInvariantError(
            f"basic variable x[{indices_B[row]}] = {p[row]:.6g} is negative; "
            "the basis is not feasible"
        )

    x = zero_vector(lp.n)
    x[indices_B] = p

    return _TableauxState(
        B=B,
        N=N,
        indices_B=indices_B,
        indices_N=indices_N,
        A_B_inv=a_b_inv,
        p=p,
        Q=q_mat,
        r=r,
        z0=z0,
        x=x,
    )


class Tableaux:
    """
    Derived view of an LP for one basis.

    The tableaux keeps a reference to its LP, which must outlive it, and owns
    every derived array. All array accessors return read-only views.

    Args:
        lp: LP in equality form.
        basis: 0/1 vector of length ``n`` with exactly ``m`` ones.
        tol: Zero tolerance for the basis inverse and the feasibility check.
        check_invariants: Run the full consistency check after each rebuild.

    Raises:
        DimensionMismatchError: If ``basis`` does not have length ``n``.
        TableauxInvariantError: If ``basis`` does not select ``m`` columns or
            the resulting basic solution is negative.
        SingularMatrixError: If the selected columns are linearly dependent.
    """

    def __init__(
        self,
        lp: LP,
        basis: np.ndarray,
        tol: float = ZERO_TOL,
        check_invariants: bool = False,
    ) -> None:
        self.lp = lp
        self.tol = tol
        self.check_invariants = check_invariants
        self._state: _TableauxState | None = None
        self.set(basis)

    def set(self, basis: np.ndarray) -> None:
        """Recompute every derived quantity for ``basis``."""
        basis = np.asarray(basis)
        if basis.shape != (self.lp.n,):
            raise DimensionMismatchError(
                f"basis must have length {self.lp.n}, got shape {basis.shape}"
            )
        count = int(np.count_nonzero(basis))
        if count != self.lp.m:
            raise TableauxInvariantError(
                f"basis selects {count} columns, expected {self.lp.m}"
            )

        self._state = None
        self._state = _compute_state(self.lp, basis, self.tol)

        if self.check_invariants:
            assert_tableaux_consistent(self, tol=self.tol)

    def is_optimal(self) -> bool:
        """True when no reduced cost exceeds the tolerance."""
        return is_nonpositive(self._state.r, self.tol)

    @property
    def B(self) -> np.ndarray:
        return readonly(self._state.B)

    @property
    def N(self) -> np.ndarray:
        return readonly(self._state.N)

    @property
    def indices_B(self) -> np.ndarray:
        return readonly(self._state.indices_B)

    @property
    def indices_N(self) -> np.ndarray:
        return readonly(self._state.indices_N)

    @property
    def A_B_inv(self) -> np.ndarray:
        return readonly(self._state.A_B_inv)

    @property
    def p(self) -> np.ndarray:
        return readonly(self._state.p)

    @property
    def Q(self) -> np.ndarray:
        return readonly(self._state.Q)

    @property
    def r(self) -> np.ndarray:
        return readonly(self._state.r)

    @property
    def z0(self) -> float:
        return self._state.z0

    @property
    def x(self) -> np.ndarray:
        return readonly(self._state.x)

    def __repr__(self) -> str:
        return (
            f"Tableaux(m={self.lp.m}, n={self.lp.n}, "
            f"basis={self._state.indices_B.tolist()}, z0={self._state.z0:.6g})"
        )


__all__ = ["Tableaux"]
