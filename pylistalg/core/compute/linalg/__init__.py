"""
Decomposition kernels for PyListAlg.

These routines delegate to LAPACK and convert between nested lists and
NumPy arrays at the boundary. The rest of the library does its arithmetic
on plain Python numbers.

All functions follow these conventions:
    - Inputs are validated matrices/vectors without NA
    - Outputs are nested lists of Python floats
    - Multi-factor results are NamedTuples, so they unpack like tuples

Submodules:
    qr: QR decomposition (NumPy)
    svd: Singular value decomposition (SciPy)
    roots: Polynomial roots (NumPy)
"""

from pylistalg.core.compute.linalg.qr import QRResult, qr
from pylistalg.core.compute.linalg.roots import roots
from pylistalg.core.compute.linalg.svd import SVDResult, svd

__all__ = [
    "QRResult",
    "qr",
    "SVDResult",
    "svd",
    "roots",
]
