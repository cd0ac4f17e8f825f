"""
Tests for matmul().
"""

import numpy as np
import pytest

from pylistalg.core.exceptions import ShapeMismatchError, ValidationError
from pylistalg.core.shape import NA
from pylistalg.generators import identity, sequential
from pylistalg.products import matmul


class TestMatmul:

    def test_two_by_two(self):
        assert matmul([[1, 2], [3, 4]], [[5, 6], [7, 8]]) == [[19, 22], [43, 50]]

    def test_rectangular(self):
        A = sequential(2, 3)
        B = sequential(3, 2)
        expected = (np.array(A) @ np.array(B)).tolist()
        assert matmul(A, B) == expected

    def test_matches_numpy(self, rng):
        A = rng.standard_normal((4, 3))
        B = rng.standard_normal((3, 5))
        np.testing.assert_allclose(matmul(A.tolist(), B.tolist()), A @ B, rtol=1e-12)

    def test_left_identity(self, rng):
        M = rng.standard_normal((3, 4)).tolist()
        assert matmul(identity(3), M) == M

    def test_right_identity(self):
        M = sequential(2, 3)
        assert matmul(M, identity(3)) == M

    def test_row_times_column(self):
        assert matmul([[1, 2, 3]], [[1], [1], [1]]) == [[6]]

    def test_zero_column_result(self):
        assert matmul([[1, 2]], [[], []]) == [[]]

    def test_dimension_mismatch(self):
        with pytest.raises(ShapeMismatchError) as exc_info:
            matmul(sequential(2, 3), sequential(2, 3))
        assert exc_info.value.left_shape == (2, 3)
        assert exc_info.value.right_shape == (2, 3)
        assert exc_info.value.operation == "matmul"

    def test_vector_operand_rejected(self):
        with pytest.raises(ValidationError):
            matmul([1, 2], [[1], [2]])

    def test_na_rejected(self):
        with pytest.raises(ValidationError, match="NA"):
            matmul([[1, NA]], [[1], [2]])

    def test_inputs_not_mutated(self):
        A = [[1, 2], [3, 4]]
        B = [[5, 6], [7, 8]]
        matmul(A, B)
        assert A == [[1, 2], [3, 4]]
        assert B == [[5, 6], [7, 8]]
