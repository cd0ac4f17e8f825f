"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def well_conditioned(rng):
    """4x4 diagonally dominant matrix (safely invertible) as nested lists."""
    A = rng.uniform(-1.0, 1.0, size=(4, 4)) + 5.0 * np.eye(4)
    return A.tolist()


@pytest.fixture
def singular_3x3():
    """Third row is the sum of the first two."""
    return [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0], [5.0, 7.0, 9.0]]
