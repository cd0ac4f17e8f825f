"""
Polynomial roots.

Roots are the eigenvalues of the companion matrix (numpy.roots).
"""

import numpy as np

from pylistalg.core.compute.linalg._arrays import vector_to_array
from pylistalg.core.tolerances import resolve_epsilon


def roots(coeffs, *, eps: float | None = None) -> list:
    """
    Roots of a polynomial.

    Args:
        coeffs: Coefficients, highest degree first ([1, -3, 2] is
                x^2 - 3x + 2)
        eps: Imaginary parts below this are treated as zero, defaults to
             the configured noise floor

    Returns:
        Vector of roots. Floats when every root is real, otherwise
        complex numbers. A constant polynomial has no roots.

    Examples:
        >>> [round(x, 12) for x in sorted(roots([1, -3, 2]))]
        [1.0, 2.0]
    """
    tol = resolve_epsilon(eps)
    p = vector_to_array(coeffs, 'coeffs')
    r = np.roots(p) if p.size else np.array([])
    if np.all(np.abs(np.imag(r)) < tol):
        return [float(x) for x in np.real(r)]
    return [complex(x) for x in r]
