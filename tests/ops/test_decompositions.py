"""
Tests for the LAPACK-backed decompositions: qr(), svd(), roots().

Each factorization is checked by reconstruction rather than against
specific factor values, since signs of singular/orthogonal vectors are
not unique.
"""

import numpy as np
import pytest

from pylistalg.core.compute.linalg import QRResult, SVDResult, qr, roots, svd
from pylistalg.core.exceptions import DimensionError, MalformedMatrixError, ValidationError
from pylistalg.core.shape import NA


# ═══════════════════════════════════════════════════════════════════════
# QR
# ═══════════════════════════════════════════════════════════════════════


class TestQR:

    def test_unpacks(self, well_conditioned):
        Q, R = qr(well_conditioned)
        assert isinstance(Q, list) and isinstance(R, list)

    def test_reconstruction(self, rng):
        A = rng.standard_normal((5, 3))
        result = qr(A.tolist())
        assert isinstance(result, QRResult)
        np.testing.assert_allclose(np.array(result.Q) @ np.array(result.R), A, atol=1e-12)

    def test_shapes_reduced(self, rng):
        A = rng.standard_normal((5, 3)).tolist()
        Q, R = qr(A)
        assert np.array(Q).shape == (5, 3)
        assert np.array(R).shape == (3, 3)

    def test_orthonormal_columns(self, rng):
        Q, _ = qr(rng.standard_normal((4, 4)).tolist())
        Q = np.array(Q)
        np.testing.assert_allclose(Q.T @ Q, np.eye(4), atol=1e-12)

    def test_upper_triangular(self, rng):
        _, R = qr(rng.standard_normal((4, 4)).tolist())
        R = np.array(R)
        np.testing.assert_allclose(np.tril(R, -1), 0.0, atol=1e-14)

    def test_full_rank(self, well_conditioned):
        assert qr(well_conditioned).rank == 4

    def test_rank_deficient(self):
        assert qr([[1.0, 0.0], [2.0, 0.0], [3.0, 0.0]]).rank == 1

    def test_python_floats(self):
        Q, R = qr([[1, 2], [3, 4]])
        assert all(type(x) is float for r in Q for x in r)

    def test_jagged_rejected(self):
        with pytest.raises(MalformedMatrixError):
            qr([[1, 2], [3]])

    def test_zero_columns_rejected(self):
        with pytest.raises(DimensionError):
            qr([[]])


# ═══════════════════════════════════════════════════════════════════════
# SVD
# ═══════════════════════════════════════════════════════════════════════


class TestSVD:

    def test_reconstruction(self, rng):
        A = rng.standard_normal((4, 3))
        U, S, V = svd(A.tolist())
        np.testing.assert_allclose(np.array(U) @ np.array(S) @ np.array(V).T, A, atol=1e-12)

    def test_shapes(self, rng):
        result = svd(rng.standard_normal((4, 3)).tolist())
        assert isinstance(result, SVDResult)
        assert np.array(result.U).shape == (4, 3)
        assert np.array(result.S).shape == (3, 3)
        assert np.array(result.V).shape == (3, 3)

    def test_singular_values_descending(self, rng):
        A = rng.standard_normal((5, 5))
        s = svd(A.tolist()).singular_values
        np.testing.assert_allclose(s, np.linalg.svd(A, compute_uv=False), rtol=1e-12)
        assert s == sorted(s, reverse=True)

    def test_diagonal_matrix(self):
        U, S, V = svd([[3.0, 0.0], [0.0, 2.0]])
        np.testing.assert_allclose(np.diag(S), [3.0, 2.0])

    def test_na_rejected(self):
        with pytest.raises(ValidationError, match="NA"):
            svd([[1.0, NA]])


# ═══════════════════════════════════════════════════════════════════════
# Polynomial roots
# ═══════════════════════════════════════════════════════════════════════


class TestRoots:

    def test_real_roots(self):
        r = roots([1, -3, 2])
        assert all(isinstance(x, float) for x in r)
        np.testing.assert_allclose(sorted(r), [1.0, 2.0], rtol=1e-12)

    def test_complex_roots(self):
        r = roots([1, 0, 1])
        assert all(isinstance(x, complex) for x in r)
        np.testing.assert_allclose(sorted(x.imag for x in r), [-1.0, 1.0], rtol=1e-12)

    def test_linear(self):
        np.testing.assert_allclose(roots([2, -4]), [2.0])

    def test_constant_has_no_roots(self):
        assert roots([5]) == []

    def test_empty(self):
        assert roots([]) == []

    def test_matrix_rejected(self):
        with pytest.raises(DimensionError):
            roots([[1, 2]])
