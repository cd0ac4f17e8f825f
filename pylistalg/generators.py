"""
Vector and matrix generators.

Each generator takes a row count and an optional column count. With one
argument it produces a Vector, with two a Matrix:

    zeros(3)       -> [0.0, 0.0, 0.0]
    zeros(2, 2)    -> [[0.0, 0.0], [0.0, 0.0]]

A zero-length vector request returns the zero-column matrix [[]], the
canonical empty value of this library, rather than [].
"""

from __future__ import annotations

from typing import Any

import numpy as np

from pylistalg.core.exceptions import DimensionError
from pylistalg.core.shape import Rank, rank_of
from pylistalg.core.validation import check_dimension, check_matrix, check_vector


RandomSource = np.random.Generator | int | None


def zeros(rows: int, cols: int | None = None) -> list:
    """Vector or matrix of 0.0."""
    return _fill(rows, cols, lambda r, c, ncols: 0.0)


def ones(rows: int, cols: int | None = None) -> list:
    """Vector or matrix of 1.0."""
    return _fill(rows, cols, lambda r, c, ncols: 1.0)


def sequential(rows: int, cols: int | None = None) -> list:
    """
    Ascending values starting at 1.

    The vector form holds the integers 1..n. The matrix form fills row by
    row with (r - 1) * cols + c, stored as floats.
    """
    if cols is None:
        return _fill(rows, None, lambda r, c, ncols: c)
    return _fill(rows, cols, lambda r, c, ncols: float((r - 1) * ncols + c))


def random(rows: int, cols: int | None = None, *, rng: RandomSource = None) -> list:
    """
    Uniform [0, 1) draws.

    Args:
        rows: Vector length, or matrix row count
        cols: Matrix column count; omit for a vector
        rng: numpy Generator, integer seed, or None for a fresh
             default_rng()

    Returns:
        Vector or matrix of floats in [0, 1)
    """
    gen = rng if isinstance(rng, np.random.Generator) else np.random.default_rng(rng)
    return _fill(rows, cols, lambda r, c, ncols: float(gen.random()))


def eye(n: int, m: int | None = None) -> list:
    """
    n x m matrix with 1.0 where the row index equals the column index.

    m defaults to n, in which case eye(n) equals identity(n). Zero sizes
    follow zeros(): eye(0) is [[]], eye(0, m) is [] and eye(n, 0) is n
    empty rows.
    """
    if m is None:
        n = check_dimension(n, 'n')
        if n == 0:
            return [[]]
        m = n
    return _fill(n, m, lambda r, c, ncols: 1.0 if r == c else 0.0)


def identity(n: int) -> list:
    """n x n identity matrix, built as diag(ones(n))."""
    n = check_dimension(n, 'n')
    if n == 0:
        return [[]]
    return diag(ones(n))


def diag(x: Any) -> list:
    """
    Build a diagonal matrix, or extract a diagonal.

    Given a Vector, returns the square matrix with the vector on its
    diagonal and 0.0 elsewhere. Given a Matrix, returns its diagonal as a
    Vector of length min(rows, cols).

    Examples:
        >>> diag([1, 2])
        [[1, 0.0], [0.0, 2]]
        >>> diag([[1, 2], [3, 4]])
        [1, 4]
    """
    rank = rank_of(x, 'x')
    if rank is Rank.VECTOR:
        check_vector(x, 'x')
        n = len(x)
        return [[x[r] if r == c else 0.0 for c in range(n)] for r in range(n)]
    if rank is Rank.MATRIX:
        check_matrix(x, 'x')
        return [x[k][k] for k in range(min(len(x), len(x[0])))]
    raise DimensionError('x: expected vector or matrix, got scalar')


def _fill(rows: int, cols: int | None, value) -> list:
    # value(r, c, ncols) with 1-based r, c
    rows = check_dimension(rows, 'rows')
    if cols is None:
        if rows == 0:
            return [[]]
        return [value(1, c, rows) for c in range(1, rows + 1)]
    cols = check_dimension(cols, 'cols')
    return [[value(r, c, cols) for c in range(1, cols + 1)] for r in range(1, rows + 1)]
