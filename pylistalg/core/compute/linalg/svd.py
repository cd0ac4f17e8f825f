"""
Singular value decomposition.

Computes M = U S V^T with LAPACK (via SciPy) and returns the factors as
nested lists.
"""

from typing import NamedTuple

import numpy as np
import scipy.linalg

from pylistalg.core.compute.linalg._arrays import from_array, to_array
from pylistalg.core.exceptions import NumericalError


class SVDResult(NamedTuple):
    """
    Result of singular value decomposition.

    Unpacks as U, S, V = svd(M), with M == U S V^T up to rounding.

    Attributes:
        U: Left singular vectors as columns (m x k, k = min(m, n))
        S: Diagonal matrix of singular values in descending order (k x k)
        V: Right singular vectors as columns (n x k)
    """
    U: list
    S: list
    V: list

    @property
    def singular_values(self) -> list:
        return [self.S[k][k] for k in range(len(self.S))]


def svd(M) -> SVDResult:
    """
    Economy singular value decomposition.

    Args:
        M: m x n matrix

    Returns:
        SVDResult with U (m x k), S (k x k) and V (n x k)

    Raises:
        NumericalError: If the LAPACK routine does not converge
    """
    X = to_array(M, 'M')
    try:
        U, s, Vt = scipy.linalg.svd(X, full_matrices=False)
    except np.linalg.LinAlgError as e:
        raise NumericalError(f"svd did not converge: {e}") from e
    return SVDResult(U=from_array(U), S=from_array(np.diag(s)), V=from_array(Vt.T))
