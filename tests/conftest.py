"""Pytest configuration and shared fixtures for lpsimplex tests.

This module provides:
- A deterministic numpy RNG fixture
- Autouse fixtures resetting global seeds and debug mode between tests
"""

import os

import numpy as np
import pytest

from lpsimplex.diagnostics.debug_mode import debug_context


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def set_random_seeds() -> None:
    """Auto-use fixture to set the global numpy seed for reproducibility."""
    np.random.seed(int(os.environ.get("TEST_RNG_SEED", "0")))


@pytest.fixture(scope="function", autouse=True)
def debug_checks():
    """Run every test with tableaux consistency checks enabled."""
    with debug_context(True):
        yield
