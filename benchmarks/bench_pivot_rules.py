"""Benchmark Bland's rule against the largest-coefficient rule."""

import time
from typing import Dict

import numpy as np

from lpsimplex import LP, SimplexSolver, SolverConfig, Status, transform_to_equality


def random_lp(m: int, n: int, rng: np.random.Generator):
    """Random LP with x = 0 feasible and a bounded feasible region."""
    A = rng.uniform(0.1, 1.0, size=(m, n))
    b = rng.uniform(1.0, 2.0, size=m)
    c = rng.uniform(0.1, 1.0, size=n)
    return A, b, c


def benchmark_pivot_rule(
    rule: str,
    m: int,
    n: int,
    n_problems: int = 20,
    seed: int = 0,
) -> Dict[str, float]:
    """Benchmark one pivot rule.

    Args:
        rule: Pivot rule name.
        m: Number of inequality constraints.
        n: Number of variables.
        n_problems: Number of random LPs to solve.
        seed: RNG seed, shared across rules so both see the same problems.

    Returns:
        Dictionary with timing and iteration results.
    """
    config = SolverConfig(pivot_rule=rule)
    rng = np.random.default_rng(seed)
    problems = [random_lp(m, n, rng) for _ in range(n_problems)]

    pivots = 0
    start = time.perf_counter()
    solver = SimplexSolver(config)
    for A, b, c in problems:
        result = solver.solve(transform_to_equality(LP(A=A, b=b, c=c)))
        if result.status != Status.SOLVABLE:
            raise RuntimeError(f"unexpected status {result.status} for rule {rule}")
        pivots += result.nit
    end = time.perf_counter()

    total_time = end - start
    return {
        "m": m,
        "n": n,
        "total_time_sec": total_time,
        "time_per_solve_sec": total_time / n_problems,
        "mean_pivots": pivots / n_problems,
    }


if __name__ == "__main__":
    print("Benchmarking pivot rules...")
    for m, n in [(5, 5), (10, 10), (15, 20)]:
        for rule in ("bland", "lcr"):
            results = benchmark_pivot_rule(rule, m, n)
            print(f"{rule:>5} (m={m}, n={n}):")
            print(f"  Time per solve: {results['time_per_solve_sec']*1e3:.2f} ms")
            print(f"  Mean pivots: {results['mean_pivots']:.1f}")
