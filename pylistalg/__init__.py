"""
PyListAlg: linear algebra on nested Python lists.

Scalars are numbers, vectors are lists of numbers and matrices are lists
of equal-length rows. Rank is inferred from structure at every call, and
every operation returns a new value.

Submodules:
    generators: zeros, ones, sequential, random, identity, eye, diag
    elementwise: Broadcasting arithmetic and unary functions
    structure: transpose and row/column/cell access
    reductions: sum, norm, dot, inner, outer
    products: matmul
    determinant: det, minors, cofactors, adjugate
    inverse: inv, solve
    core.compute.linalg: qr, svd, roots
"""

import logging as _logging

__version__ = "0.1.0"

from pylistalg.core import (
    NA,
    Rank,
    rank_of,
    shape,
    LinalgConfig,
    get_config,
    set_config,
    config_context,
    PyListAlgError,
    ValidationError,
    MalformedMatrixError,
    DimensionError,
    ShapeMismatchError,
    DimensionTooLargeError,
    NumericalError,
    SingularMatrixError,
)
from pylistalg.core.compute.linalg import qr, roots, svd
from pylistalg.determinant import adjugate, cofactors, det, minors
from pylistalg.elementwise import (
    add,
    apply1,
    apply2,
    apply2_truncated,
    divide,
    epsilon,
    exp,
    log,
    mul,
    pow,
    sqrt,
    sub,
)
from pylistalg.generators import diag, eye, identity, ones, random, sequential, zeros
from pylistalg.inverse import inv, solve
from pylistalg.products import matmul
from pylistalg.reductions import dot, inner, norm, outer, sum
from pylistalg.structure import cell, col, row, transpose, without_column, without_row

# Library logging stays silent unless the application configures it
_logging.getLogger(__name__).addHandler(_logging.NullHandler())

__all__ = [
    "__version__",
    # Shape model
    "NA",
    "Rank",
    "rank_of",
    "shape",
    # Generators
    "zeros",
    "ones",
    "sequential",
    "random",
    "identity",
    "eye",
    "diag",
    # Structure
    "transpose",
    "row",
    "col",
    "cell",
    "without_row",
    "without_column",
    # Elementwise
    "apply1",
    "apply2",
    "apply2_truncated",
    "add",
    "sub",
    "mul",
    "divide",
    "pow",
    "exp",
    "log",
    "sqrt",
    "epsilon",
    # Reductions
    "sum",
    "norm",
    "dot",
    "inner",
    "outer",
    # Linear algebra
    "matmul",
    "det",
    "minors",
    "cofactors",
    "adjugate",
    "inv",
    "solve",
    "qr",
    "svd",
    "roots",
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
