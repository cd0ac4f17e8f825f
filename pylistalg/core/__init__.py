"""
Core infrastructure for PyListAlg.

This module provides the shape model, validation, tolerances and the
exception hierarchy shared by every operation module.

Key components:
    shape: Rank inference and the NA sentinel
    exceptions: Exception hierarchy
    validation: Input validators
    tolerances: Noise floor and cofactor-size configuration
    compute: LAPACK-backed decompositions
"""

from pylistalg.core.exceptions import (
    PyListAlgError,
    ValidationError,
    MalformedMatrixError,
    DimensionError,
    ShapeMismatchError,
    DimensionTooLargeError,
    NumericalError,
    SingularMatrixError,
)
from pylistalg.core.shape import NA, Rank, rank_of, shape
from pylistalg.core.tolerances import (
    LinalgConfig,
    config_context,
    get_config,
    set_config,
)

__all__ = [
    # Shape model
    "NA",
    "Rank",
    "rank_of",
    "shape",
    # Configuration
    "LinalgConfig",
    "get_config",
    "set_config",
    "config_context",
    # Exceptions
    "PyListAlgError",
    "ValidationError",
    "MalformedMatrixError",
    "DimensionError",
    "ShapeMismatchError",
    "DimensionTooLargeError",
    "NumericalError",
    "SingularMatrixError",
]
