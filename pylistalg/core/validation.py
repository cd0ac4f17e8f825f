"""
Input validation utilities for PyListAlg.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers
from typing import Any

from pylistalg.core.exceptions import (
    DimensionError,
    MalformedMatrixError,
    ValidationError,
)
from pylistalg.core.shape import NA, Rank, is_number, rank_of


def check_scalar(x: Any, name: str, allow_na: bool = False) -> None:
    """
    Verify value is a real number.

    Args:
        x: Value to check
        name: Parameter name for error messages
        allow_na: Whether the NA sentinel is acceptable

    Raises:
        ValidationError: If x is not a real number (or is NA when not allowed)
    """
    if x is NA:
        if not allow_na:
            raise ValidationError(f"{name}: is NA")
        return
    if not is_number(x):
        raise ValidationError(
            f"{name}: expected a real number, got {type(x).__name__}"
        )


def check_vector(v: Any, name: str, allow_na: bool = False) -> None:
    """
    Verify value is a vector of real numbers.

    Args:
        v: Value to check
        name: Parameter name for error messages
        allow_na: Whether NA elements are acceptable

    Raises:
        DimensionError: If v is a scalar or a matrix
        ValidationError: If an element is not a real number
    """
    rank = rank_of(v, name)
    if rank is not Rank.VECTOR:
        raise DimensionError(f"{name}: expected vector, got {rank.name.lower()}")
    for k, x in enumerate(v, start=1):
        check_scalar(x, f"{name}[{k}]", allow_na=allow_na)


def check_matrix(M: Any, name: str, allow_na: bool = False) -> None:
    """
    Verify value is a rectangular matrix of real numbers.

    Every row must be a list/tuple of the same length as the first row.
    The zero-column matrix [[]] is valid.

    Args:
        M: Value to check
        name: Parameter name for error messages
        allow_na: Whether NA elements are acceptable

    Raises:
        DimensionError: If M is a scalar or a vector
        MalformedMatrixError: If rows are jagged or elements are not numbers
        ValidationError: If M contains NA and allow_na is False
    """
    rank = rank_of(M, name)
    if rank is not Rank.MATRIX:
        raise DimensionError(f"{name}: expected matrix, got {rank.name.lower()}")

    ncols = len(M[0])
    for i, row in enumerate(M, start=1):
        if not isinstance(row, (list, tuple)):
            raise MalformedMatrixError(
                f"{name}: row {i} is {type(row).__name__}, expected a sequence",
                row=i,
            )
        if len(row) != ncols:
            raise MalformedMatrixError(
                f"{name}: jagged matrix, row {i} has {len(row)} columns, "
                f"expected {ncols}",
                row=i,
                expected=ncols,
                actual=len(row),
            )
        for j, x in enumerate(row, start=1):
            if x is NA:
                if not allow_na:
                    raise ValidationError(f"{name}: element ({i}, {j}) is NA")
            elif not is_number(x):
                raise MalformedMatrixError(
                    f"{name}: element ({i}, {j}) is {type(x).__name__}, "
                    f"expected a real number",
                    row=i,
                )


def check_square(M: Any, name: str) -> int:
    """
    Verify value is a square matrix without NA elements.

    Args:
        M: Value to check
        name: Parameter name for error messages

    Returns:
        Order n of the n x n matrix

    Raises:
        DimensionError: If M is not square
    """
    check_matrix(M, name)
    nrows, ncols = len(M), len(M[0])
    if nrows != ncols:
        raise DimensionError(
            f"{name}: expected square matrix, got {nrows}x{ncols}"
        )
    return nrows


def check_dimension(n: Any, name: str) -> int:
    """
    Verify value is a non-negative integer dimension.

    Args:
        n: Value to check
        name: Parameter name for error messages

    Returns:
        n as a Python int

    Raises:
        ValidationError: If n is not an integer or is negative
    """
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise ValidationError(
            f"{name}: expected a non-negative integer, got {type(n).__name__}"
        )
    if n < 0:
        raise ValidationError(f"{name}: must be non-negative, got {n}")
    return int(n)


def check_index(i: Any, size: int, name: str, allow_negative: bool = False) -> int:
    """
    Verify value is a valid 1-based index into a sequence of given size.

    Args:
        i: Index to check
        size: Length of the indexed sequence
        name: Parameter name for error messages
        allow_negative: Whether -size..-1 are accepted (deletion indices)

    Returns:
        i as a Python int

    Raises:
        ValidationError: If i is not an integer, is 0, or is negative when
            negative indices are not allowed
        DimensionError: If |i| exceeds size
    """
    if isinstance(i, bool) or not isinstance(i, numbers.Integral):
        raise ValidationError(
            f"{name}: expected an integer index, got {type(i).__name__}"
        )
    i = int(i)
    if i == 0:
        raise ValidationError(f"{name}: indices are 1-based, got 0")
    if i < 0 and not allow_negative:
        raise ValidationError(f"{name}: expected a positive index, got {i}")
    if abs(i) > size:
        raise DimensionError(f"{name}: index {i} out of range for size {size}")
    return i
