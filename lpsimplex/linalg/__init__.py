"""Dense linear-algebra kernel: primitives, QR decomposition and solvers."""

from . import core, qr
from .core import (
    add,
    as_matrix,
    as_vector,
    complement_mask,
    inner_product,
    is_nonpositive,
    is_zero,
    mask_indices,
    multiply,
    norm,
    readonly,
    scale,
    sub,
    subind_matrix,
    subind_vector,
    transpose,
    zero_matrix,
    zero_vector,
)
from .qr import inverse_matrix, qr_decomp, rank, rank_r, solve_system, solve_system_qr

__all__ = [
    "core",
    "qr",
    # Primitives
    "zero_vector",
    "zero_matrix",
    "as_vector",
    "as_matrix",
    "readonly",
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
    # QR and solvers
    "qr_decomp",
    "rank",
    "rank_r",
    "solve_system_qr",
    "solve_system",
    "inverse_matrix",
]
