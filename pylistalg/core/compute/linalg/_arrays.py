"""
Conversion between nested-list values and NumPy arrays.
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pylistalg.core.exceptions import DimensionError
from pylistalg.core.validation import check_matrix, check_vector


def to_array(M: Any, name: str) -> NDArray[np.float64]:
    """
    Validate a matrix and convert it to a float64 array.

    Raises:
        DimensionError: If M has no columns
        MalformedMatrixError: If M is jagged
        ValidationError: If M contains NA
    """
    check_matrix(M, name)
    if len(M[0]) == 0:
        raise DimensionError(f"{name}: matrix has no columns")
    return np.asarray(M, dtype=np.float64)


def vector_to_array(v: Any, name: str) -> NDArray[np.float64]:
    check_vector(v, name)
    return np.asarray(v, dtype=np.float64)


def from_array(A: NDArray[Any]) -> list:
    """Convert an array to nested lists of Python floats."""
    return np.asarray(A, dtype=np.float64).tolist()
