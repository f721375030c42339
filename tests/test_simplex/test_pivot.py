import numpy as np
import pytest

from lpsimplex.errors import PivotError
from lpsimplex.simplex.pivot import BlandRule, LargestCoefficientRule, get_pivot_rule


def test_bland_picks_first_positive_reduced_cost():
    rule = BlandRule()
    assert rule.choose(np.array([-1.0, 0.5, 2.0])) == 1
    assert rule.choose(np.array([3.0, 0.5, 2.0])) == 0


def test_bland_ignores_values_within_tolerance():
    rule = BlandRule()
    assert rule.choose(np.array([5e-4, 0.5])) == 1
    assert rule.choose(np.array([5e-4, 0.5]), tol=1e-6) == 0


def test_largest_coefficient_picks_maximum_first_on_ties():
    rule = LargestCoefficientRule()
    assert rule.choose(np.array([-1.0, 0.5, 2.0, 2.0])) == 2
    assert rule.choose(np.array([0.1, 0.2])) == 1


@pytest.mark.parametrize("rule", [BlandRule(), LargestCoefficientRule()])
def test_rules_fail_on_optimal_reduced_costs(rule):
    with pytest.raises(PivotError):
        rule.choose(np.array([-1.0, 0.0, 5e-4]))


def test_get_pivot_rule_resolves_names_and_instances():
    assert isinstance(get_pivot_rule("bland"), BlandRule)
    assert isinstance(get_pivot_rule("LCR"), LargestCoefficientRule)
    assert isinstance(get_pivot_rule("largest_coefficient"), LargestCoefficientRule)
    rule = BlandRule()
    assert get_pivot_rule(rule) is rule
    with pytest.raises(ValueError):
        get_pivot_rule("steepest_edge")
