"""
Matrix inverse and linear solve.

inv() uses closed forms for 1x1 and 2x2 matrices and the adjugate
formula inv(M) = adjugate(M) / det(M) otherwise. A matrix whose
determinant is within the noise floor of zero is reported as singular.
"""

from __future__ import annotations

import logging
from typing import Any

from pylistalg.core.exceptions import SingularMatrixError
from pylistalg.core.shape import Rank, rank_of
from pylistalg.core.tolerances import resolve_epsilon
from pylistalg.core.validation import check_vector
from pylistalg.determinant import adjugate, det
from pylistalg.elementwise import divide
from pylistalg.products import matmul

logger = logging.getLogger(__name__)


def inv(M: Any, *, eps: float | None = None) -> list:
    """
    Inverse of a square matrix.

    Args:
        M: n x n matrix
        eps: Near-zero threshold for the determinant, defaults to the
             configured noise floor. The test is absolute, so it depends
             on the scale of M: inv(1e-5 * identity(3)) has |det| = 1e-15
             and is reported singular unless eps is lowered.

    Returns:
        n x n inverse

    Raises:
        SingularMatrixError: If |det(M)| < eps
        DimensionError: If M is not square
        DimensionTooLargeError: If n exceeds the configured
            max_cofactor_size

    Examples:
        >>> inv([[1, 2], [3, 4]])
        [[-2.0, 1.0], [1.5, -0.5]]
    """
    tol = resolve_epsilon(eps)
    d = det(M)
    if abs(d) < tol:
        logger.debug("inv(): determinant %r within tolerance %r of zero", d, tol)
        raise SingularMatrixError(
            f"matrix is singular: |det| = {abs(d)!r} < {tol!r}",
            matrix_name='M',
            determinant=d,
            tolerance=tol,
        )
    n = len(M)
    if n == 1:
        return [[1.0 / M[0][0]]]
    if n == 2:
        (a, b), (c, e) = M
        return [[e / d, -b / d], [-c / d, a / d]]
    return divide(adjugate(M), d, eps=tol)


def solve(X: Any, B: Any, *, eps: float | None = None) -> list:
    """
    Solve X A = B for A, computed as inv(X) B.

    Args:
        X: n x n coefficient matrix
        B: n x k right-hand side matrix, or a length-n vector treated as
           a single column
        eps: Near-zero threshold passed to inv()

    Returns:
        n x k solution matrix, or a length-n vector if B is a vector

    Raises:
        SingularMatrixError: If X is singular
        ShapeMismatchError: If B does not have n rows
    """
    X_inv = inv(X, eps=eps)
    if rank_of(B, 'B') is Rank.VECTOR:
        check_vector(B, 'B')
        return [r[0] for r in matmul(X_inv, [[b] for b in B])]
    return matmul(X_inv, B)
