"""
Structural transforms: transpose and row/column/cell access.

All indices are 1-based. row() and col() also accept a negative index,
meaning "every row (column) except this one"; without_row() and
without_column() are the explicit forms of that deletion.
"""

from __future__ import annotations

from typing import Any

from pylistalg.core.validation import check_index, check_matrix


def transpose(M: Any) -> list:
    """
    Transpose a matrix.

    An m x n matrix becomes n x m. A matrix with no columns (such as [[]])
    and the empty sequence [] both transpose to [].

    Examples:
        >>> transpose([[1, 2, 3], [4, 5, 6]])
        [[1, 4], [2, 5], [3, 6]]
        >>> transpose([[]])
        []
    """
    if isinstance(M, (list, tuple)) and not M:
        return []
    check_matrix(M, 'M', allow_na=True)
    return [list(column) for column in zip(*M)]


def row(i: int, M: Any) -> list:
    """
    Select or delete a row.

    Args:
        i: 1-based row index. i > 0 selects row i as a one-row matrix;
           i < 0 returns M without row -i.
        M: Matrix

    Raises:
        ValidationError: If i is 0 or not an integer
        DimensionError: If |i| exceeds the row count
    """
    check_matrix(M, 'M', allow_na=True)
    i = check_index(i, len(M), 'i', allow_negative=True)
    if i < 0:
        return without_row(-i, M)
    return [list(M[i - 1])]


def col(j: int, M: Any) -> list:
    """
    Select or delete a column.

    Args:
        j: 1-based column index. j > 0 selects column j as a one-column
           matrix; j < 0 returns M without column -j.
        M: Matrix
    """
    check_matrix(M, 'M', allow_na=True)
    j = check_index(j, len(M[0]), 'j', allow_negative=True)
    if j < 0:
        return without_column(-j, M)
    return transpose(row(j, transpose(M)))


def cell(i: int, j: int, M: Any) -> Any:
    """Element at 1-based row i, column j."""
    check_matrix(M, 'M', allow_na=True)
    i = check_index(i, len(M), 'i')
    j = check_index(j, len(M[0]), 'j')
    return row(i, M)[0][j - 1]


def without_row(i: int, M: Any) -> list:
    """
    Copy of M with the 1-based row i removed.

    Removing the only row of a matrix gives [].
    """
    check_matrix(M, 'M', allow_na=True)
    i = check_index(i, len(M), 'i')
    return [list(r) for k, r in enumerate(M, start=1) if k != i]


def without_column(j: int, M: Any) -> list:
    """
    Copy of M with the 1-based column j removed.

    Removing the only column leaves one empty row per original row.
    """
    check_matrix(M, 'M', allow_na=True)
    j = check_index(j, len(M[0]), 'j')
    return [list(r[:j - 1]) + list(r[j:]) for r in M]
