"""
Determinants by cofactor (Laplace) expansion.

det() expands along the first row:

    det(M) = sum_j (-1)^j * M[0][j] * det(M without row 0 and column j)

with closed forms for 1x1 and 2x2 matrices. The expansion costs O(n!)
and does no pivoting; matrices larger than the configured
max_cofactor_size are rejected before any work is done.
"""

from __future__ import annotations

import logging
from typing import Any

from pylistalg.core.exceptions import DimensionError, DimensionTooLargeError
from pylistalg.core.tolerances import get_config
from pylistalg.core.validation import check_matrix, check_square
from pylistalg.elementwise import mul
from pylistalg.structure import transpose

logger = logging.getLogger(__name__)


def det(M: Any) -> float:
    """
    Determinant of a square matrix.

    Args:
        M: n x n matrix

    Returns:
        Determinant

    Raises:
        DimensionError: If M is not square (including [[]])
        DimensionTooLargeError: If n exceeds the configured
            max_cofactor_size

    Examples:
        >>> det([[1, 2], [3, 4]])
        -2
    """
    n = _check_expandable(M, 'M')
    config = get_config()
    if n >= config.cofactor_warn_size:
        logger.warning(
            "det(): cofactor expansion of a %dx%d matrix is O(n!) and may be slow",
            n, n,
        )
    return _laplace(M)


def minors(M: Any) -> list:
    """
    Matrix of minors.

    Entry (i, j) is the determinant of M with row i and column j removed.

    Args:
        M: n x n matrix with n >= 2
    """
    n = _check_expandable(M, 'M')
    if n < 2:
        raise DimensionError(f"M: minors need at least a 2x2 matrix, got {n}x{n}")
    return [
        [_laplace(_minor([r for k, r in enumerate(M) if k != i], j)) for j in range(n)]
        for i in range(n)
    ]


def cofactors(M: Any) -> list:
    """
    Checkerboard sign matrix with the shape of M.

    Entry (i, j), counting from 0, is (-1)^i * (-1)^j. Only the shape of
    M is used, not its values.
    """
    check_matrix(M, 'M', allow_na=True)
    nrows, ncols = len(M), len(M[0])
    return [[_sign(i) * _sign(j) for j in range(ncols)] for i in range(nrows)]


def adjugate(M: Any) -> list:
    """
    Adjugate: the transpose of the signed matrix of minors.

    For an invertible matrix, inv(M) == adjugate(M) / det(M).
    """
    return transpose(mul(minors(M), cofactors(M)))


def _laplace(M) -> float:
    n = len(M)
    if n == 1:
        return M[0][0]
    if n == 2:
        (a, b), (c, d) = M
        return a * d - b * c
    rest = M[1:]
    total = 0
    for j, x in enumerate(M[0]):
        if x == 0:
            continue
        total += _sign(j) * x * _laplace(_minor(rest, j))
    return total


def _minor(rows, j: int) -> list:
    # rows are already validated; drop 0-based column j without re-checking
    return [r[:j] + r[j + 1:] for r in rows]


def _sign(k: int) -> float:
    return 1.0 if k % 2 == 0 else -1.0


def _check_expandable(M, name: str) -> int:
    n = check_square(M, name)
    limit = get_config().max_cofactor_size
    if n > limit:
        raise DimensionTooLargeError(
            f"{name}: {n}x{n} exceeds max_cofactor_size={limit} "
            f"for cofactor expansion",
            size=n,
            limit=limit,
        )
    return n
