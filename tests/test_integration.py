"""
Integration tests for the lpsimplex package.

Tests that the public API is reachable from the top-level package and that
the pieces work together: reader, transform, solver and diagnostics.
"""

import numpy as np
import pytest

import lpsimplex
from lpsimplex import (
    LP,
    SimplexResult,
    SimplexSolver,
    Status,
    parse_lp,
    primal_residual,
    simplex,
    solve_lp,
    transform_to_equality,
)


def test_main_package_imports():
    """Test that the solver APIs are accessible from the main package."""
    for name in lpsimplex.__all__:
        assert getattr(lpsimplex, name) is not None
    assert lpsimplex.__version__ == "0.1.0"


def test_read_transform_solve_pipeline():
    lp = parse_lp("2 2\n1 1\n4 0\n1 1\n1 -1\n")
    original = lp.copy()
    transform_to_equality(lp)
    result = solve_lp(lp)
    assert isinstance(result, SimplexResult)
    assert result.status == Status.SOLVABLE
    x = result.x[: lp.n_structural]
    assert np.allclose(x, [2.0, 2.0])
    assert primal_residual(original, x) < 1e-9
    assert primal_residual(lp, result.x) < 1e-9


def test_solver_instance_is_reusable():
    solver = SimplexSolver()
    first = solver.solve(transform_to_equality(LP(A=[[1.0]], b=[2.0], c=[1.0])))
    second = solver.solve(transform_to_equality(LP(A=[[1.0]], b=[-1.0], c=[1.0])))
    assert first.status == Status.SOLVABLE
    assert first.fun == pytest.approx(2.0)
    assert second.status == Status.INFEASIBLE


def test_simplex_does_not_modify_inputs():
    A = np.array([[1.0, 1.0], [-1.0, 0.0]])
    b = np.array([3.0, -1.0])
    c = np.array([1.0, 2.0])
    result = simplex(A, b, c)
    assert result.status == Status.SOLVABLE
    assert np.allclose(A, [[1.0, 1.0], [-1.0, 0.0]])
    assert np.allclose(b, [3.0, -1.0])
    assert result.x.shape == (2,)
    assert result.fun == pytest.approx(float(np.dot(c, result.x)))
    assert result.fun == pytest.approx(5.0)
