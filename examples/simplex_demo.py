"""
Example: Solving linear programs with lpsimplex

Walks through the solver outcomes: an optimal solution, an infeasible
system, an unbounded objective, and a constraint matrix with more rows than
columns. The last example drives the solver step by step from an instance
in the text format read by ``lpsimplex.read_lp``.
"""

import numpy as np

from lpsimplex import (
    SimplexSolver,
    SolverConfig,
    Status,
    Tableaux,
    parse_lp,
    simplex,
    transform_to_equality,
)


def example_production_plan():
    """Example: Production plan with resource limits."""
    print("=" * 60)
    print("Example 1: Production plan")
    print("=" * 60)

    # Maximize profit: 3x + 5y
    # Subject to: x + 2y <= 4, 3x + 2y <= 6, x >= 0, y >= 0
    A = np.array([[1.0, 2.0], [3.0, 2.0]])
    b = np.array([4.0, 6.0])
    c = np.array([3.0, 5.0])

    for rule in ("bland", "lcr"):
        result = simplex(A, b, c, pivot_rule=rule)
        print(f"Pivot rule: {rule}")
        print(f"  Status: {result.status.value}")
        if result.status == Status.SOLVABLE:
            print(f"  Optimal solution: x = {result.x}")
            print(f"  Optimal value: {result.fun:.4g}")
            print(f"  Pivots: {result.nit}")
    print()


def example_outcomes():
    """Example: Infeasible, unbounded and wrong-form problems."""
    print("=" * 60)
    print("Example 2: Other outcomes")
    print("=" * 60)

    infeasible = simplex(np.array([[1.0]]), np.array([-1.0]), np.array([1.0]))
    print(f"x <= -1, x >= 0:        {infeasible.status.value}")

    unbounded = simplex(np.array([[1.0, -1.0]]), np.array([0.0]), np.array([1.0, 1.0]))
    print(f"x1 - x2 <= 0, max x1+x2: {unbounded.status.value}")

    tall = simplex(np.ones((3, 2)), np.ones(3), np.ones(2), form="equality")
    print(f"3 equalities, 2 vars:    {tall.status.value}")
    print()


def example_step_by_step():
    """Example: Inspecting the tableaux along the way."""
    print("=" * 60)
    print("Example 3: Step by step")
    print("=" * 60)

    lp = parse_lp(
        """
        2 2
        1 1
        4 0
        1 1
        1 -1
        """
    )
    transform_to_equality(lp)

    solver = SimplexSolver(SolverConfig(pivot_rule="bland"))
    status, basis, nit, message = solver.find_initial_basis(lp)
    print(f"Phase I: {message} ({nit} pivots)")
    if status == Status.SOLVABLE:
        tableaux = Tableaux(lp, basis)
        print(f"  Basic columns: {tableaux.indices_B.tolist()}")
        print(f"  Basic solution: {tableaux.x}")
        print(f"  Reduced costs: {tableaux.r}")
        print(f"  Optimal already: {tableaux.is_optimal()}")

    result = solver.solve(lp)
    print(f"Optimal value: {result.fun:.4g}")
    print()


if __name__ == "__main__":
    print("\n" + "=" * 60)
    print("lpsimplex - Simplex Examples")
    print("=" * 60 + "\n")

    example_production_plan()
    example_outcomes()
    example_step_by_step()

    print("=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)
