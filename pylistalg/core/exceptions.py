"""
Exception hierarchy for PyListAlg.

All exceptions inherit from PyListAlgError to allow catching any
library-specific error. Operation-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyListAlgError(Exception):
    """Base exception for all PyListAlg errors."""
    pass


class ValidationError(PyListAlgError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks: values that
    are not scalars, vectors or matrices, invalid indices, negative
    dimensions, or NA values passed to a linear-algebra operation.
    """
    pass


class MalformedMatrixError(ValidationError):
    """
    Matrix structure is invalid.

    Raised when a nested sequence cannot be a matrix: rows of unequal
    length (jagged) or elements that are not scalars.

    Attributes:
        row: 1-based index of the first offending row, if known
        expected: Expected row length
        actual: Actual length of the offending row
    """

    def __init__(
        self,
        message: str,
        row: int | None = None,
        expected: int | None = None,
        actual: int | None = None
    ):
        super().__init__(message)
        self.row = row
        self.expected = expected
        self.actual = actual


class DimensionError(ValidationError):
    """
    Value dimensions are incorrect.

    Raised when a value has the wrong rank or shape for an operation,
    e.g. a non-square matrix passed to det().
    """
    pass


class ShapeMismatchError(DimensionError):
    """
    Operand shapes are incompatible.

    Raised when two operands cannot be combined: vectors of different
    length in dot() or strict broadcasting, or matmul() where the column
    count of the left matrix differs from the row count of the right one.

    Attributes:
        left_shape: Shape of the left operand
        right_shape: Shape of the right operand
        operation: Name of the operation that failed
    """

    def __init__(
        self,
        message: str,
        left_shape: tuple[int, ...] | None = None,
        right_shape: tuple[int, ...] | None = None,
        operation: str | None = None
    ):
        super().__init__(message)
        self.left_shape = left_shape
        self.right_shape = right_shape
        self.operation = operation


class DimensionTooLargeError(DimensionError):
    """
    Matrix is too large for cofactor expansion.

    Laplace expansion costs O(n!) time. Raised before any work is done
    when a matrix exceeds the configured ceiling.

    Attributes:
        size: Order of the offending square matrix
        limit: Configured maximum order
    """

    def __init__(self, message: str, size: int, limit: int):
        super().__init__(message)
        self.size = size
        self.limit = limit


class NumericalError(PyListAlgError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation,
    such as math domain errors (log of a negative number) or overflow.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised when an operation requires invertibility but the determinant
    is within the noise floor of zero.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        determinant: Determinant that failed the check, if computed
        tolerance: Near-zero tolerance the determinant was compared against
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        determinant: float | None = None,
        tolerance: float | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.determinant = determinant
        self.tolerance = tolerance
