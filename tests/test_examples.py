"""Smoke tests for example scripts.

These tests ensure that the example scripts can be run end to end without
raising exceptions.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

# Determine the repo root
ROOT = Path(__file__).resolve().parents[1]


def test_simplex_demo_runs() -> None:
    """Test that examples/simplex_demo.py runs successfully."""
    script = ROOT / "examples" / "simplex_demo.py"
    assert script.exists(), f"Example script not found: {script}"

    result = subprocess.run(
        [sys.executable, str(script)],
        capture_output=True,
        text=True,
        check=False,
        timeout=30,  # Should complete in seconds
    )

    assert result.returncode == 0, (
        f"Example script failed with return code {result.returncode}.\n"
        f"STDOUT:\n{result.stdout}\n"
        f"STDERR:\n{result.stderr}"
    )

    assert "Optimal value: 10.5" in result.stdout
    assert "infeasible" in result.stdout
    assert "unbounded" in result.stdout
    assert "wrong_form" in result.stdout
    assert "All examples completed successfully!" in result.stdout


def test_pivot_rule_benchmark_runs() -> None:
    """Test that the pivot-rule benchmark solves through a configured solver."""
    code = (
        "from benchmarks.bench_pivot_rules import benchmark_pivot_rule\n"
        "for rule in ('bland', 'largest_coefficient'):\n"
        "    r = benchmark_pivot_rule(rule, 3, 3, n_problems=3)\n"
        "    print(rule, r['mean_pivots'] > 0)\n"
    )
    result = subprocess.run(
        [sys.executable, "-c", code],
        cwd=ROOT,
        capture_output=True,
        text=True,
        check=False,
        timeout=30,
    )

    assert result.returncode == 0, f"STDERR:\n{result.stderr}"
    assert "bland True" in result.stdout
    assert "largest_coefficient True" in result.stdout
