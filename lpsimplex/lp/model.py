"""
Linear program container and the equality-form transform.

An :class:`LP` describes

```
    maximize    c^T x
    subject to  A x <= b      (inequality form)
           or   A x  = b      (equality form)
                x >= 0
```

The arrays are copied on construction and frozen, so views handed out to
callers cannot mutate solver state. :func:`transform_to_equality` is the only
operation that changes an LP; it swaps in new, larger arrays.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from lpsimplex.errors import DimensionMismatchError, TransformError
from lpsimplex.linalg.core import as_matrix, as_vector


def _frozen(arr: np.ndarray) -> np.ndarray:
    arr.flags.writeable = False
    return arr


@dataclass
class LP:
    """
    Linear program ``max c^T x`` over ``x >= 0``.

    Attributes:
        A: Constraint matrix of shape ``(m, n)``.
        b: Right-hand side of length ``m``.
        c: Objective coefficients of length ``n``.
        equality_form: Whether the rows of ``A`` are equalities.
        n_structural: Number of leading columns that belong to the caller's
            variables (excludes slack columns added by the transform).
    """

    A: np.ndarray
    b: np.ndarray
    c: np.ndarray
    equality_form: bool = False
    n_structural: int = field(default=-1)

    def __post_init__(self) -> None:
        self.A = _frozen(as_matrix(self.A, "A"))
        self.b = _frozen(as_vector(self.b, "b"))
        self.c = _frozen(as_vector(self.c, "c"))
        m, n = self.A.shape
        if self.b.shape[0] != m:
            raise DimensionMismatchError(
                f"b has {self.b.shape[0]} entries but A has {m} rows"
            )
        if self.c.shape[0] != n:
            raise DimensionMismatchError(
                f"c has {self.c.shape[0]} entries but A has {n} columns"
            )
        if self.n_structural < 0:
            self.n_structural = n

    @property
    def m(self) -> int:
        return self.A.shape[0]

    @property
    def n(self) -> int:
        return self.A.shape[1]

    def copy(self) -> "LP":
        return LP(
            A=self.A,
            b=self.b,
            c=self.c,
            equality_form=self.equality_form,
            n_structural=self.n_structural,
        )


def transform_to_equality(lp: LP) -> LP:
    """
    Rewrite ``A x <= b`` as ``(A | I_m) (x, s) = b`` in place.

    Appends one slack column per row with zero cost, then negates every row
    with ``b_i < 0`` (slack entries included) so that ``b >= 0`` afterwards.

    Returns:
        The same LP, for chaining.

    Raises:
        TransformError: If the LP is already in equality form.
    """
    if lp.equality_form:
        raise TransformError("transform_to_equality: LP is already in equality form")

    m, n = lp.A.shape
    a_new = np.hstack([lp.A, np.eye(m)])
    c_new = np.concatenate([lp.c, np.zeros(m)])
    b_new = np.array(lp.b, dtype=float, copy=True)

    negative = b_new < 0
    a_new[negative, :] *= -1
    b_new[negative] *= -1

    lp.A = _frozen(a_new)
    lp.b = _frozen(b_new)
    lp.c = _frozen(c_new)
    lp.n_structural = n
    lp.equality_form = True
    return lp


__all__ = ["LP", "transform_to_equality"]
