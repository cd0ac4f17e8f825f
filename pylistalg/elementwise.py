"""
Elementwise broadcast engine.

apply1() maps a scalar function over every element of a Scalar, Vector or
Matrix. apply2() combines two operands of any rank:

    Scalar (x) Scalar   f(a, b)
    Scalar (x) Vector   scalar paired with every element (either side)
    Vector (x) Vector   paired by position, lengths must match
    Scalar (x) Matrix   scalar paired with every cell (either side)
    Matrix (x) Matrix   paired cell by cell, shapes must match

Vector (x) Matrix is not defined. apply2_truncated() keeps the older
pairing rule where mismatched vectors and matrices are cut to the shorter
operand instead of raising.

NA elements are never passed to f: any pairing that involves NA yields NA.
"""

from __future__ import annotations

import logging
import math
import operator
from typing import Any, Callable

from pylistalg.core.exceptions import NumericalError, ShapeMismatchError
from pylistalg.core.shape import NA, Rank, rank_of, shape
from pylistalg.core.tolerances import resolve_epsilon
from pylistalg.core.validation import check_matrix, check_vector

logger = logging.getLogger(__name__)


def apply1(value: Any, f: Callable[[float], Any]) -> Any:
    """
    Apply a scalar function to every element of a value.

    Args:
        value: Scalar, Vector or Matrix
        f: Function of one real number

    Returns:
        Value of the same shape holding f of each element
    """
    rank = _checked_rank(value, 'value')
    if rank is Rank.SCALAR:
        return _call1(f, value)
    if rank is Rank.VECTOR:
        return [_call1(f, x) for x in value]
    return [[_call1(f, x) for x in row] for row in value]


def apply2(a: Any, b: Any, f: Callable[[float, float], Any]) -> Any:
    """
    Combine two values elementwise with scalar broadcasting.

    Args:
        a: Left operand (Scalar, Vector or Matrix)
        b: Right operand (Scalar, Vector or Matrix)
        f: Function of two real numbers

    Returns:
        Value of the higher-rank operand's shape

    Raises:
        ShapeMismatchError: If two vectors differ in length, two matrices
            differ in shape, or a vector is paired with a matrix
    """
    ra, rb = _checked_rank(a, 'a'), _checked_rank(b, 'b')
    if ra is not Rank.SCALAR and rb is not Rank.SCALAR:
        if ra is not rb or shape(a) != shape(b):
            raise ShapeMismatchError(
                f"cannot combine shapes {shape(a)} and {shape(b)} elementwise",
                left_shape=shape(a),
                right_shape=shape(b),
                operation=getattr(f, '__name__', None),
            )
    return _broadcast(a, ra, b, rb, f)


def apply2_truncated(a: Any, b: Any, f: Callable[[float, float], Any]) -> Any:
    """
    Combine two values elementwise, truncating to the shorter operand.

    Vectors of different length are paired up to the shorter length;
    matrices are paired up to the smaller row count and, within each row
    pair, up to the shorter row. Scalar broadcasting is as in apply2().

    Raises:
        ShapeMismatchError: If a vector is paired with a matrix
    """
    ra, rb = _checked_rank(a, 'a'), _checked_rank(b, 'b')
    if ra is not Rank.SCALAR and rb is not Rank.SCALAR:
        if ra is not rb:
            raise ShapeMismatchError(
                f"cannot combine shapes {shape(a)} and {shape(b)} elementwise",
                left_shape=shape(a),
                right_shape=shape(b),
                operation=getattr(f, '__name__', None),
            )
        if shape(a) != shape(b):
            logger.debug(
                "truncating elementwise %s: shapes %s and %s",
                getattr(f, '__name__', 'operation'), shape(a), shape(b),
            )
    return _broadcast(a, ra, b, rb, f)


def add(a: Any, b: Any, *, truncate: bool = False) -> Any:
    return _binary(a, b, operator.add, truncate)


def sub(a: Any, b: Any, *, truncate: bool = False) -> Any:
    return _binary(a, b, operator.sub, truncate)


def mul(a: Any, b: Any, *, truncate: bool = False) -> Any:
    return _binary(a, b, operator.mul, truncate)


def pow(a: Any, b: Any, *, truncate: bool = False) -> Any:
    """Elementwise a ** b as a float (math.pow semantics)."""
    return _binary(a, b, _guarded(math.pow, 'pow'), truncate)


def divide(a: Any, b: Any, *, eps: float | None = None, truncate: bool = False) -> Any:
    """
    Elementwise a / b.

    Where the divisor is within eps of zero the result element is NA;
    division never raises for a zero divisor.

    Args:
        a: Numerator (Scalar, Vector or Matrix)
        b: Denominator (Scalar, Vector or Matrix)
        eps: Near-zero threshold, defaults to the configured noise floor
        truncate: Use the truncating pairing rule

    Returns:
        Quotient with NA where the divisor is near zero

    Examples:
        >>> divide([1, 2], 4)
        [0.25, 0.5]
        >>> divide(1, 0)
        NA
    """
    tol = resolve_epsilon(eps)

    def _div(x, y):
        if abs(y) < tol:
            return NA
        return x / y

    return _binary(a, b, _div, truncate)


def exp(x: Any) -> Any:
    return apply1(x, _guarded(math.exp, 'exp'))


def log(x: Any) -> Any:
    """Elementwise natural logarithm; non-positive input raises NumericalError."""
    return apply1(x, _guarded(math.log, 'log'))


def sqrt(x: Any) -> Any:
    return apply1(x, _guarded(math.sqrt, 'sqrt'))


def epsilon(x: Any, *, eps: float | None = None) -> Any:
    """
    Clamp values within the noise floor to zero.

    Elements with |x| < eps become 0.0; others are unchanged.
    """
    tol = resolve_epsilon(eps)
    return apply1(x, lambda v: 0.0 if abs(v) < tol else v)


def _binary(a, b, f, truncate: bool):
    if truncate:
        return apply2_truncated(a, b, f)
    return apply2(a, b, f)


def _broadcast(a, ra: Rank, b, rb: Rank, f):
    if ra is Rank.SCALAR and rb is Rank.SCALAR:
        return _call2(f, a, b)
    if ra is Rank.SCALAR:
        if rb is Rank.VECTOR:
            return [_call2(f, a, y) for y in b]
        return [[_call2(f, a, y) for y in row] for row in b]
    if rb is Rank.SCALAR:
        if ra is Rank.VECTOR:
            return [_call2(f, x, b) for x in a]
        return [[_call2(f, x, b) for x in row] for row in a]
    if ra is Rank.VECTOR:
        return [_call2(f, x, y) for x, y in zip(a, b)]
    return [
        [_call2(f, x, y) for x, y in zip(row_a, row_b)]
        for row_a, row_b in zip(a, b)
    ]


def _checked_rank(x, name: str) -> Rank:
    rank = rank_of(x, name)
    if rank is Rank.VECTOR:
        check_vector(x, name, allow_na=True)
    elif rank is Rank.MATRIX:
        check_matrix(x, name, allow_na=True)
    return rank


def _call1(f, x):
    if x is NA:
        return NA
    return f(x)


def _call2(f, x, y):
    if x is NA or y is NA:
        return NA
    return f(x, y)


def _guarded(fn, name: str):
    """Wrap a math function so domain and range errors raise NumericalError."""

    def wrapper(*args):
        try:
            return fn(*args)
        except (ValueError, OverflowError, ZeroDivisionError) as e:
            shown = ', '.join(repr(x) for x in args)
            raise NumericalError(f"{name}({shown}): {e}") from e

    wrapper.__name__ = name
    return wrapper
