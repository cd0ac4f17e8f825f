"""
Shape model: rank inference for nested-sequence values.

Values carry no rank tag. A value is classified structurally each time it
is used:
    Scalar  any real number (bool excluded), or the NA sentinel
    Vector  a list/tuple whose first element is a Scalar, or an empty one
    Matrix  a list/tuple whose first element is itself a list/tuple

rank_of() returns an explicit Rank that the elementwise engine and the
validators dispatch on. It inspects only the leading elements; full
structural checks (rectangularity, element types) are done by
pylistalg.core.validation.
"""

from __future__ import annotations

import numbers
from enum import IntEnum
from typing import Any

from pylistalg.core.exceptions import ValidationError


class _NAType:
    """Type of the NA sentinel (result of division by a near-zero value)."""

    _instance: _NAType | None = None

    def __new__(cls) -> _NAType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'NA'

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_NAType, ())


NA = _NAType()


class Rank(IntEnum):
    SCALAR = 0
    VECTOR = 1
    MATRIX = 2


def is_number(x: Any) -> bool:
    """True for real numbers, excluding bool and NA."""
    return isinstance(x, numbers.Real) and not isinstance(x, bool)


def is_na(x: Any) -> bool:
    return x is NA


def rank_of(x: Any, name: str = 'value') -> Rank:
    """
    Classify a value as Scalar, Vector or Matrix.

    Args:
        x: Value to classify
        name: Parameter name for error messages

    Returns:
        Rank of the value

    Raises:
        ValidationError: If x is none of the three kinds
    """
    if x is NA or is_number(x):
        return Rank.SCALAR
    if isinstance(x, (list, tuple)):
        if not x:
            return Rank.VECTOR
        first = x[0]
        if first is NA or is_number(first):
            return Rank.VECTOR
        if isinstance(first, (list, tuple)):
            if first and isinstance(first[0], (list, tuple)):
                raise ValidationError(
                    f"{name}: nesting deeper than a matrix is not supported"
                )
            return Rank.MATRIX
        raise ValidationError(
            f"{name}: unsupported element type {type(first).__name__}"
        )
    raise ValidationError(
        f"{name}: expected scalar, vector or matrix, got {type(x).__name__}"
    )


def shape(x: Any) -> tuple[int, ...]:
    """
    Infer the shape of a value.

    Returns () for a Scalar, (n,) for a Vector and (rows, cols) for a
    Matrix. The column count is read from the first row.

    Examples:
        >>> shape(3.0)
        ()
        >>> shape([1, 2, 3])
        (3,)
        >>> shape([[1, 2, 3], [4, 5, 6]])
        (2, 3)
        >>> shape([[]])
        (1, 0)
    """
    rank = rank_of(x)
    if rank is Rank.SCALAR:
        return ()
    if rank is Rank.VECTOR:
        return (len(x),)
    return (len(x), len(x[0]))


def is_scalar(x: Any) -> bool:
    return x is NA or is_number(x)


def is_vector(x: Any) -> bool:
    try:
        return rank_of(x) is Rank.VECTOR
    except ValidationError:
        return False


def is_matrix(x: Any) -> bool:
    try:
        return rank_of(x) is Rank.MATRIX
    except ValidationError:
        return False
