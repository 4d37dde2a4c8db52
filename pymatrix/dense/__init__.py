"""
Dense matrix module.

Public API:
    Matrix              - Owned dense float64 storage
    equals(A, B)        - Tolerance-based equality (1e-7)
    add / sub           - Elementwise sum and difference
    scalar_multiply     - Multiplication by a number
    multiply            - Matrix product
    transpose           - Transpose
    minor(A, i, j)      - Submatrix without row i and column j
    triangulate(A)      - Upper-triangular factor (Result envelope)
    determinant(A)      - Determinant
    cofactor_matrix(A)  - Matrix of algebraic complements
    inverse(A)          - Inverse via the adjugate
"""

from pymatrix.dense.storage import Matrix
from pymatrix.dense.elementwise import (
    equals,
    add,
    sub,
    scalar_multiply,
    transpose,
    multiply,
)
from pymatrix.dense._minor import minor
from pymatrix.dense.solvers import (
    TriangulationParams,
    triangulate,
    determinant,
    cofactor_matrix,
    inverse,
)

__all__ = [
    "Matrix",
    "equals",
    "add",
    "sub",
    "scalar_multiply",
    "transpose",
    "multiply",
    "minor",
    "TriangulationParams",
    "triangulate",
    "determinant",
    "cofactor_matrix",
    "inverse",
]
