"""
Reader for LP instance files.

The text format is whitespace separated::

    m n
    c_1 ... c_n
    b_1 ... b_m
    A_11 ... A_1n
    ...
    A_m1 ... A_mn

Line breaks carry no meaning. A malformed source raises
:class:`~lpsimplex.errors.LPFormatError`; a partially populated LP is never
returned.
"""

from __future__ import annotations

from pathlib import Path

import numpy as np

from lpsimplex.errors import LPFormatError
from lpsimplex.logging import get_logger

from .model import LP

logger = get_logger(__name__)


def _parse_int(token: str, what: str) -> int:
    try:
        value = int(token)
    except ValueError as exc:
        raise LPFormatError(f"{what} must be an integer, got {token!r}") from exc
    if value <= 0:
        raise LPFormatError(f"{what} must be positive, got {value}")
    return value


def parse_lp(text: str) -> LP:
    """Parse an LP instance from its text representation."""
    tokens = text.split()
    if len(tokens) < 2:
        raise LPFormatError("missing header 'm n'")

    m = _parse_int(tokens[0], "row count m")
    n = _parse_int(tokens[1], "column count n")

    expected = n + m + m * n
    body = tokens[2:]
    if len(body) != expected:
        raise LPFormatError(
            f"expected {expected} numbers for m={m}, n={n}, found {len(body)}"
        )
    try:
        values = np.array([float(tok) for tok in body], dtype=float)
    except ValueError as exc:
        raise LPFormatError(f"non-numeric entry in LP body: {exc}") from exc
    if not np.all(np.isfinite(values)):
        raise LPFormatError("LP entries must be finite")

    c = values[:n]
    b = values[n : n + m]
    a_mat = values[n + m :].reshape(m, n)
    return LP(A=a_mat, b=b, c=c)


def read_lp(path: str | Path) -> LP:
    """Read an LP instance file."""
    source = Path(path).expanduser()
    with source.open("r", encoding="utf-8") as handle:
        text = handle.read()
    try:
        lp = parse_lp(text)
    except LPFormatError as exc:
        raise LPFormatError(f"{source}: {exc}") from exc
    logger.debug("read LP with m=%d, n=%d from %s", lp.m, lp.n, source)
    return lp


__all__ = ["parse_lp", "read_lp"]
