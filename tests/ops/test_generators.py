"""
Tests for vector and matrix generators.
"""

import numpy as np
import pytest

from pylistalg.core.exceptions import DimensionError, ValidationError
from pylistalg.generators import (
    diag,
    eye,
    identity,
    ones,
    random,
    sequential,
    zeros,
)


class TestVectorForms:

    def test_zeros(self):
        assert zeros(3) == [0.0, 0.0, 0.0]

    def test_ones(self):
        assert ones(2) == [1.0, 1.0]

    def test_sequential(self):
        assert sequential(4) == [1, 2, 3, 4]

    def test_random_range(self, rng):
        v = random(100, rng=rng)
        assert len(v) == 100
        assert all(0.0 <= x < 1.0 for x in v)
        assert all(isinstance(x, float) for x in v)

    @pytest.mark.parametrize("generator", [zeros, ones, sequential, random])
    def test_zero_length_is_zero_column_matrix(self, generator):
        """A zero-length vector request yields [[]], not []."""
        assert generator(0) == [[]]


class TestMatrixForms:

    def test_zeros(self):
        assert zeros(2, 3) == [[0.0, 0.0, 0.0], [0.0, 0.0, 0.0]]

    def test_ones(self):
        assert ones(1, 2) == [[1.0, 1.0]]

    def test_sequential_row_major(self):
        M = sequential(2, 3)
        assert M == [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]
        assert all(isinstance(x, float) for r in M for x in r)

    def test_random_shape(self, rng):
        M = random(3, 2, rng=rng)
        assert len(M) == 3
        assert all(len(r) == 2 for r in M)
        assert all(0.0 <= x < 1.0 for r in M for x in r)

    def test_random_seed_reproducible(self):
        assert random(2, 2, rng=7) == random(2, 2, rng=7)

    def test_random_generator_advances(self):
        gen = np.random.default_rng(0)
        assert random(3, rng=gen) != random(3, rng=gen)

    def test_negative_dimension(self):
        with pytest.raises(ValidationError, match="rows"):
            zeros(-1)
        with pytest.raises(ValidationError, match="cols"):
            ones(2, -3)

    def test_non_integer_dimension(self):
        with pytest.raises(ValidationError):
            zeros(2.5)


class TestIdentityAndEye:

    def test_identity(self):
        assert identity(3) == [
            [1.0, 0.0, 0.0],
            [0.0, 1.0, 0.0],
            [0.0, 0.0, 1.0],
        ]

    def test_identity_zero(self):
        assert identity(0) == [[]]

    def test_eye_square_matches_identity(self):
        for n in range(1, 5):
            assert eye(n) == identity(n)

    def test_eye_rectangular(self):
        assert eye(2, 3) == [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0]]
        assert eye(3, 2) == [[1.0, 0.0], [0.0, 1.0], [0.0, 0.0]]

    def test_eye_zero(self):
        assert eye(0) == [[]]

    def test_eye_zero_sides_match_zeros(self):
        assert eye(0, 3) == zeros(0, 3) == []
        assert eye(3, 0) == zeros(3, 0) == [[], [], []]


class TestDiag:

    def test_vector_to_matrix(self):
        assert diag([1, 2, 3]) == [[1, 0, 0], [0, 2, 0], [0, 0, 3]]

    def test_matrix_to_vector(self):
        assert diag([[1, 2], [3, 4]]) == [1, 4]

    def test_round_trip(self):
        assert diag(diag([1, 2, 3])) == [1, 2, 3]

    def test_rectangular_matrix(self):
        assert diag([[1, 2, 3], [4, 5, 6]]) == [1, 5]
        assert diag([[1, 2], [3, 4], [5, 6]]) == [1, 4]

    def test_scalar_rejected(self):
        with pytest.raises(DimensionError):
            diag(5)

    def test_does_not_alias_input(self):
        v = [1.0, 2.0]
        M = diag(v)
        M[0][0] = 99.0
        assert v == [1.0, 2.0]
