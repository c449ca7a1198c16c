"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def two_by_two_system():
    """x1 + 2 x2 = 3, 4 x1 + 5 x2 = 6  ->  x = (-1, 2)."""
    return Matrix.from_array([[1, 2, 3], [4, 5, 6]])


@pytest.fixture
def three_by_three_system():
    """x + y + z = 6, 2y + 5z = -4, 2x + 5y - z = 27  ->  (5, 3, -2)."""
    return Matrix.from_array([
        [1, 1, 1, 6],
        [0, 2, 5, -4],
        [2, 5, -1, 27],
    ])


@pytest.fixture
def inconsistent_system():
    """x1 = 1, 0 = 5."""
    return Matrix.from_array([[1, 0, 1], [0, 0, 5]])


@pytest.fixture
def well_conditioned(rng):
    """Random 4x4 matrix with a dominant diagonal."""
    A = rng.uniform(-1.0, 1.0, size=(4, 4)) + 5.0 * np.eye(4)
    return Matrix.from_array(A)
