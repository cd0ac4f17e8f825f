"""
QR decomposition.

Computes M = QR with LAPACK (via NumPy) and returns the factors as nested
lists, like every other value in the library.
"""

from typing import NamedTuple

import numpy as np

from pylistalg.core.compute.linalg._arrays import from_array, to_array


class QRResult(NamedTuple):
    """
    Result of QR decomposition.

    Unpacks as Q, R = qr(M).

    Attributes:
        Q: Matrix with orthonormal columns (m x k where k = min(m, n))
        R: Upper triangular matrix (k x n)
    """
    Q: list
    R: list

    @property
    def rank(self) -> int:
        """Numerical rank determined from the R diagonal."""
        R = np.asarray(self.R, dtype=np.float64)
        diag_R = np.abs(np.diag(R))
        if len(diag_R) > 0 and diag_R[0] > 0:
            # Tolerance based on matrix size and machine epsilon
            tol = max(len(self.Q), R.shape[1]) * np.finfo(R.dtype).eps * diag_R[0]
            return int(np.sum(diag_R > tol))
        return 0


def qr(M) -> QRResult:
    """
    Reduced QR decomposition.

    Args:
        M: m x n matrix

    Returns:
        QRResult with Q (m x k) and R (k x n), k = min(m, n)

    Examples:
        >>> Q, R = qr([[3, 0], [4, 5]])
        >>> round(abs(R[0][0]), 12)
        5.0
    """
    X = to_array(M, 'M')
    Q, R = np.linalg.qr(X, mode='reduced')
    return QRResult(Q=from_array(Q), R=from_array(R))
