"""
Shared compute infrastructure for PyListAlg.

Submodules:
    linalg: LAPACK-backed decompositions (QR, SVD, polynomial roots)
"""
