"""
Dense vector and matrix primitives.

Vectors are one-dimensional ``float`` arrays and matrices two-dimensional
``float`` arrays. Every binary operation checks operand sizes up front and
raises :class:`~lpsimplex.errors.DimensionMismatchError` on disagreement;
results are always freshly allocated so callers own what they receive.

Sub-indexing uses 0/1 masks: ``subind_vector(v, mask)`` keeps the entries of
``v`` whose mask entry is non-zero, and ``subind_matrix(M, mask)`` keeps the
corresponding columns of ``M``, both in ascending index order.
"""

from __future__ import annotations

import numpy as np

from lpsimplex.config import ZERO_TOL
from lpsimplex.errors import DimensionMismatchError


def as_vector(values, name: str = "vector") -> np.ndarray:
    """Copy ``values`` into a new 1-D float array."""
    arr = np.array(values, dtype=float, copy=True)
    if arr.ndim == 0:
        arr = arr.reshape(1)
    if arr.ndim != 1:
        raise DimensionMismatchError(f"{name} must be 1-D, got shape {arr.shape}")
    return arr


def as_matrix(values, name: str = "matrix") -> np.ndarray:
    """Copy ``values`` into a new 2-D float array."""
    arr = np.array(values, dtype=float, copy=True)
    if arr.ndim != 2:
        raise DimensionMismatchError(f"{name} must be 2-D, got shape {arr.shape}")
    return arr


def readonly(arr: np.ndarray) -> np.ndarray:
    """Return a non-writeable view of ``arr``."""
    view = arr.view()
    view.flags.writeable = False
    return view


def zero_vector(size: int) -> np.ndarray:
    if size < 0:
        raise ValueError(f"vector size must be non-negative, got {size}")
    return np.zeros(size, dtype=float)


def zero_matrix(rows: int, cols: int) -> np.ndarray:
    if rows < 0 or cols < 0:
        raise ValueError(f"matrix shape must be non-negative, got ({rows}, {cols})")
    return np.zeros((rows, cols), dtype=float)


def _check_same_shape(a: np.ndarray, b: np.ndarray, op: str) -> None:
    if a.shape != b.shape:
        raise DimensionMismatchError(
            f"{op}: operands of unequal size {a.shape} and {b.shape}"
        )


def add(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Elementwise sum of two vectors or two matrices."""
    _check_same_shape(a, b, "add")
    return a + b


def sub(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Elementwise difference of two vectors or two matrices."""
    _check_same_shape(a, b, "sub")
    return a - b


def scale(a: np.ndarray, factor: float) -> np.ndarray:
    return a * float(factor)


def inner_product(a: np.ndarray, b: np.ndarray) -> float:
    if a.ndim != 1 or b.ndim != 1:
        raise DimensionMismatchError("inner_product: operands must be vectors")
    _check_same_shape(a, b, "inner_product")
    return float(np.dot(a, b))


def norm(v: np.ndarray) -> float:
    """Euclidean norm, ``sqrt(<v, v>)``."""
    return float(np.sqrt(inner_product(v, v)))


def transpose(matrix: np.ndarray) -> np.ndarray:
    if matrix.ndim != 2:
        raise DimensionMismatchError("transpose: operand must be a matrix")
    return np.array(matrix.T, dtype=float, copy=True)


def multiply(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """
    Matrix product ``a @ b``.

    ``a`` must be a matrix; ``b`` may be a matrix or a vector, in which case
    the result is a vector.
    """
    if a.ndim != 2 or b.ndim not in (1, 2):
        raise DimensionMismatchError(
            f"multiply: unsupported operand ranks {a.ndim} and {b.ndim}"
        )
    if a.shape[1] != b.shape[0]:
        raise DimensionMismatchError(
            f"multiply: incompatible sizes {a.shape} and {b.shape}"
        )
    return a @ b


def mask_indices(mask: np.ndarray) -> np.ndarray:
    """Ascending positions where ``mask`` is non-zero."""
    return np.flatnonzero(np.asarray(mask) != 0)


def complement_mask(mask: np.ndarray) -> np.ndarray:
    """Swap zero and non-zero entries: 1 where ``mask`` is 0, else 0."""
    return (np.asarray(mask) == 0).astype(float)


def subind_vector(vector: np.ndarray, mask: np.ndarray) -> np.ndarray:
    if vector.shape != np.shape(mask):
        raise DimensionMismatchError(
            "subind_vector: mask should be of same size as vector"
        )
    return vector[mask_indices(mask)].copy()


def subind_matrix(matrix: np.ndarray, mask: np.ndarray) -> np.ndarray:
    if matrix.ndim != 2 or matrix.shape[1] != np.size(mask):
        raise DimensionMismatchError(
            "subind_matrix: mask should have an entry for each column of matrix"
        )
    return matrix[:, mask_indices(mask)].copy()


def is_zero(value: float, tol: float = ZERO_TOL) -> bool:
    return abs(value) < tol


def is_nonpositive(vector: np.ndarray, tol: float = ZERO_TOL) -> bool:
    """True when no entry of ``vector`` exceeds ``tol``."""
    return not bool(np.any(vector > tol))


__all__ = [
    "as_vector",
    "as_matrix",
    "readonly",
    "zero_vector",
    "zero_matrix",
    "add",
    "sub",
    "scale",
    "inner_product",
    "norm",
    "transpose",
    "multiply",
    "mask_indices",
    "complement_mask",
    "subind_vector",
    "subind_matrix",
    "is_zero",
    "is_nonpositive",
]
