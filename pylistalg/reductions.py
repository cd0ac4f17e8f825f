"""
Reductions: sum, norm and dot products.
"""

from __future__ import annotations

import math
from typing import Any, Iterator

from pylistalg.core.exceptions import ShapeMismatchError, ValidationError
from pylistalg.core.shape import NA, Rank, is_number, rank_of
from pylistalg.core.validation import check_matrix, check_vector
from pylistalg.elementwise import pow


def dot(u: Any, v: Any) -> float:
    """
    Dot product of two vectors of equal length.

    Args:
        u: Vector
        v: Vector

    Returns:
        Sum of pairwise products (0 for two empty vectors)

    Raises:
        ShapeMismatchError: If the vectors differ in length
        ValidationError: If either vector contains NA
    """
    check_vector(u, 'u')
    check_vector(v, 'v')
    if len(u) != len(v):
        raise ShapeMismatchError(
            f"dot: vector lengths differ ({len(u)} and {len(v)})",
            left_shape=(len(u),),
            right_shape=(len(v),),
            operation='dot',
        )
    total = 0
    for x, y in zip(u, v):
        total += x * y
    return total


def inner(u: Any, v: Any) -> float:
    """Inner product; same as dot()."""
    return dot(u, v)


def outer(row: Any, cols: Any) -> list:
    """
    Dot product of one row against each of several columns.

    Args:
        row: Vector
        cols: Sequence of vectors, each the length of row (for example the
              rows of a transposed matrix)

    Returns:
        Vector with one entry per column
    """
    if not isinstance(cols, (list, tuple)):
        raise ValidationError(
            f"cols: expected a sequence of vectors, got {type(cols).__name__}"
        )
    return [dot(row, c) for c in cols]


def sum(x: Any) -> Any:
    """
    Sum every number in a value of any nesting depth.

    sum([]) is 0. If any element is NA the result is NA.

    Examples:
        >>> sum([[1, 2], [3, 4]])
        10
        >>> sum([])
        0
    """
    total = 0
    for value in _flatten(x):
        if value is NA:
            return NA
        total += value
    return total


def norm(x: Any) -> Any:
    """
    Euclidean norm.

    A scalar is returned unchanged; a vector gives sqrt(sum(x ** 2)); a
    matrix gives the Frobenius norm over all of its elements.
    """
    rank = rank_of(x, 'x')
    if rank is Rank.SCALAR:
        return x
    if rank is Rank.MATRIX:
        check_matrix(x, 'x', allow_na=True)
        x = list(_flatten(x))
        if not x:
            return 0.0
    squares = sum(pow(x, 2))
    if squares is NA:
        return NA
    return math.sqrt(squares)


def _flatten(x: Any) -> Iterator[Any]:
    if x is NA or is_number(x):
        yield x
    elif isinstance(x, (list, tuple)):
        for item in x:
            yield from _flatten(item)
    else:
        raise ValidationError(
            f"x: cannot sum element of type {type(x).__name__}"
        )
