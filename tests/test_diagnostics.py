from types import SimpleNamespace

import numpy as np
import pytest

from lpsimplex.diagnostics import (
    assert_tableaux_consistent,
    debug_context,
    is_debug_enabled,
    primal_residual,
    set_debug_enabled,
)
from lpsimplex.errors import TableauxInvariantError
from lpsimplex.lp.model import LP, transform_to_equality
from lpsimplex.simplex.tableaux import Tableaux


def test_debug_context_restores_previous_state():
    set_debug_enabled(False)
    with debug_context(True):
        assert is_debug_enabled()
    assert not is_debug_enabled()


def test_primal_residual_inequality_and_equality():
    lp = LP(A=[[1.0, 1.0]], b=[2.0], c=[1.0, 1.0])
    assert primal_residual(lp, np.array([1.0, 0.5])) == 0.0
    assert primal_residual(lp, np.array([2.0, 1.0])) == pytest.approx(1.0)
    assert primal_residual(lp, np.array([-0.5, 0.0])) == pytest.approx(0.5)

    eq = LP(A=[[1.0, 1.0]], b=[2.0], c=[1.0, 1.0], equality_form=True)
    assert primal_residual(eq, np.array([1.0, 0.5])) == pytest.approx(0.5)


def test_assert_tableaux_consistent_accepts_valid_tableaux():
    lp = transform_to_equality(LP(A=[[1.0, 1.0], [1.0, -1.0]], b=[4.0, 0.0], c=[1.0, 1.0]))
    T = Tableaux(lp, np.array([1.0, 1.0, 0.0, 0.0]))
    assert_tableaux_consistent(T)


def _tableaux_fields(T, **overrides):
    fields = {name: np.array(getattr(T, name)) for name in ("B", "N", "indices_B", "indices_N", "p", "x")}
    fields["lp"] = T.lp
    fields.update(overrides)
    return SimpleNamespace(**fields)


@pytest.fixture
def optimal_tableaux():
    lp = transform_to_equality(LP(A=[[1.0, 1.0], [1.0, -1.0]], b=[4.0, 0.0], c=[1.0, 1.0]))
    return Tableaux(lp, np.array([1.0, 1.0, 0.0, 0.0]))


@pytest.mark.parametrize(
    "overrides, match",
    [
        ({"N": np.array([0.0, 1.0, 1.0, 1.0])}, "complement"),
        ({"indices_B": np.array([1, 0])}, "indices_B"),
        ({"indices_N": np.array([3, 2])}, "indices_N"),
        ({"p": np.array([2.0, 1.0])}, "reproduce b"),
        ({"x": np.array([2.0, 1.0, 0.0, 0.0])}, "differ from p"),
        ({"x": np.array([2.0, 2.0, 0.5, 0.0])}, "not zero"),
    ],
)
def test_assert_tableaux_consistent_rejects_corruption(optimal_tableaux, overrides, match):
    corrupted = _tableaux_fields(optimal_tableaux, **overrides)
    with pytest.raises(TableauxInvariantError, match=match):
        assert_tableaux_consistent(corrupted)


def test_assert_tableaux_consistent_rejects_negative_solution():
    lp = LP(A=[[1.0, 0.0], [0.0, 1.0]], b=[1.0, -1.0], c=[0.0, 0.0], equality_form=True)
    infeasible = SimpleNamespace(
        lp=lp,
        B=np.array([1.0, 1.0]),
        N=np.array([0.0, 0.0]),
        indices_B=np.array([0, 1]),
        indices_N=np.array([], dtype=np.int64),
        p=np.array([1.0, -1.0]),
        x=np.array([1.0, -1.0]),
    )
    with pytest.raises(TableauxInvariantError, match="negative"):
        assert_tableaux_consistent(infeasible)
