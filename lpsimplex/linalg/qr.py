"""
QR decomposition and the direct solvers built on it.

The factorization uses Gram-Schmidt orthogonalization. A column whose residual
norm after projection falls below the zero tolerance is treated as linearly
dependent: its diagonal entry in ``R`` is set to exactly zero and the
corresponding column of ``Q`` stays zero. Rank detection therefore reduces to
counting the non-zero diagonal entries of ``R``.

Example:
    >>> import numpy as np
    >>> from lpsimplex.linalg.qr import qr_decomp, solve_system
    >>> A = np.array([[2.0, 1.0], [1.0, 3.0]])
    >>> Q, R = qr_decomp(A)
    >>> np.allclose(Q @ R, A)
    True
    >>> np.allclose(solve_system(A, np.array([3.0, 4.0])), [1.0, 1.0])
    True

References:
    - Trefethen & Bau, *Numerical Linear Algebra*, Lectures 7-8, 1997.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

from lpsimplex.config import ZERO_TOL
from lpsimplex.errors import DimensionMismatchError, NoSolutionError, SingularMatrixError

from .core import inner_product, is_zero, multiply, norm, transpose, zero_matrix, zero_vector


def _require_square(matrix: np.ndarray, op: str) -> int:
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        raise DimensionMismatchError(f"{op}: matrix should be square, got {matrix.shape}")
    return matrix.shape[0]


def qr_decomp(a_mat: np.ndarray, tol: float = ZERO_TOL) -> Tuple[np.ndarray, np.ndarray]:
    """
    Factor an ``m x n`` matrix as ``A = Q R``.

    Args:
        a_mat: Matrix to factor.
        tol: Residual norms below this value mark a column as dependent.

    Returns:
        ``(Q, R)`` with ``Q`` of shape ``(m, n)`` and upper triangular ``R`` of
        shape ``(n, n)``. ``Q`` has orthonormal columns when ``A`` has full
        column rank.
    """
    if a_mat.ndim != 2:
        raise DimensionMismatchError("qr_decomp: operand must be a matrix")
    m, n = a_mat.shape
    q_mat = zero_matrix(m, n)
    r_mat = zero_matrix(n, n)

    for i in range(n):
        q = np.array(a_mat[:, i], dtype=float, copy=True)
        for j in range(i):
            r_mat[j, i] = inner_product(q_mat[:, j], q)
            q -= r_mat[j, i] * q_mat[:, j]
        length = norm(q)
        if is_zero(length, tol):
            r_mat[i, i] = 0.0
        else:
            r_mat[i, i] = length
            q_mat[:, i] = q / length
    return q_mat, r_mat


def rank_r(r_mat: np.ndarray, tol: float = ZERO_TOL) -> int:
    """Number of diagonal entries of ``R`` that are not zero within ``tol``."""
    return sum(1 for value in np.diag(r_mat) if not is_zero(value, tol))


def rank(a_mat: np.ndarray, tol: float = ZERO_TOL) -> int:
    """Rank of a square matrix via its QR decomposition."""
    _require_square(a_mat, "rank")
    _, r_mat = qr_decomp(a_mat, tol)
    return rank_r(r_mat, tol)


def solve_system_qr(
    q_mat: np.ndarray,
    r_mat: np.ndarray,
    b_vec: np.ndarray,
    tol: float = ZERO_TOL,
) -> np.ndarray:
    """
    Solve ``R x = Q^T b`` by back-substitution.

    A coordinate whose remaining right-hand side is exactly zero is set to
    zero even when its pivot vanishes.

    Raises:
        NoSolutionError: If a vanishing pivot meets a non-zero right-hand side.
    """
    if q_mat.shape[1] != r_mat.shape[0]:
        raise DimensionMismatchError("solve_system_qr: Q, R dimension mismatch")
    qtb = multiply(transpose(q_mat), b_vec)

    size = r_mat.shape[1]
    x = zero_vector(size)
    for i in range(size - 1, -1, -1):
        val = qtb[i]
        for j in range(size - 1, i, -1):
            val -= x[j] * r_mat[i, j]
        if val == 0:
            x[i] = 0.0
            continue
        if is_zero(r_mat[i, i], tol):
            raise NoSolutionError(f"solve_system_qr: no solution along coordinate {i}")
        x[i] = val / r_mat[i, i]
    return x


def solve_system(a_mat: np.ndarray, b_vec: np.ndarray, tol: float = ZERO_TOL) -> np.ndarray:
    """Solve the square, full-rank system ``A x = b``."""
    n = _require_square(a_mat, "solve_system")
    if b_vec.shape != (n,):
        raise DimensionMismatchError(
            f"solve_system: incompatible sizes {a_mat.shape} and {b_vec.shape}"
        )
    q_mat, r_mat = qr_decomp(a_mat, tol)
    if rank_r(r_mat, tol) < n:
        raise SingularMatrixError("solve_system: matrix should be of full rank")
    return solve_system_qr(q_mat, r_mat, b_vec, tol)


def inverse_matrix(a_mat: np.ndarray, tol: float = ZERO_TOL) -> np.ndarray:
    """
    Invert a square matrix column by column.

    Solves ``A x = e_i`` for every standard basis vector against a single
    QR factorization.

    Raises:
        SingularMatrixError: If ``A`` is rank deficient.
    """
    n = _require_square(a_mat, "inverse_matrix")
    q_mat, r_mat = qr_decomp(a_mat, tol)
    if rank_r(r_mat, tol) < n:
        raise SingularMatrixError("inverse_matrix: matrix singular")

    inverse = zero_matrix(n, n)
    for i in range(n):
        unit = zero_vector(n)
        unit[i] = 1.0
        inverse[:, i] = solve_system_qr(q_mat, r_mat, unit, tol)
    return inverse


__all__ = [
    "qr_decomp",
    "rank_r",
    "rank",
    "solve_system_qr",
    "solve_system",
    "inverse_matrix",
]
