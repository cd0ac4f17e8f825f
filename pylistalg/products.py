"""
Matrix multiplication.
"""

from __future__ import annotations

from typing import Any

from pylistalg.core.exceptions import ShapeMismatchError
from pylistalg.core.validation import check_matrix
from pylistalg.reductions import outer
from pylistalg.structure import transpose


def matmul(A: Any, B: Any) -> list:
    """
    Matrix product A B.

    B is transposed once; each output row is the dot product of a row of
    A against every column of B.

    Args:
        A: m x k matrix
        B: k x n matrix

    Returns:
        m x n matrix

    Raises:
        ShapeMismatchError: If the column count of A differs from the row
            count of B
        ValidationError: If either matrix contains NA

    Examples:
        >>> matmul([[1, 2], [3, 4]], [[5, 6], [7, 8]])
        [[19, 22], [43, 50]]
    """
    check_matrix(A, 'A')
    check_matrix(B, 'B')
    inner_a, inner_b = len(A[0]), len(B)
    if inner_a != inner_b:
        raise ShapeMismatchError(
            f"matmul: A has {inner_a} columns but B has {inner_b} rows",
            left_shape=(len(A), inner_a),
            right_shape=(inner_b, len(B[0])),
            operation='matmul',
        )
    columns = transpose(B)
    if not columns:
        # B has no columns: each row of the product is empty
        return [[] for _ in A]
    return [outer(r, columns) for r in A]
