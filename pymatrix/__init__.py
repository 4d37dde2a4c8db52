"""
pymatrix: dense matrix arithmetic over double-precision reals.

Basic linear-algebra primitives without a full numerical package:
construction and release, tolerance-based equality, elementwise
arithmetic, products, transpose, determinant, cofactor matrix and inverse.

Submodules:
    dense: Matrix storage and operations
    core: Exceptions, validation, Result envelope, tolerances
    testing: Assertion helpers for test suites
"""

__version__ = "0.1.0"

from pymatrix.core.exceptions import (
    ResultCode,
    PyMatrixError,
    ValidationError,
    InvalidDimensionsError,
    CalculationError,
    ShapeMismatchError,
    NumericalOverflowError,
    SingularMatrixError,
    OutOfMemoryError,
)
from pymatrix.dense import (
    Matrix,
    equals,
    add,
    sub,
    scalar_multiply,
    transpose,
    multiply,
    minor,
    triangulate,
    determinant,
    cofactor_matrix,
    inverse,
)

__all__ = [
    "__version__",
    # Storage
    "Matrix",
    # Operations
    "equals",
    "add",
    "sub",
    "scalar_multiply",
    "transpose",
    "multiply",
    "minor",
    "triangulate",
    "determinant",
    "cofactor_matrix",
    "inverse",
    # Errors
    "ResultCode",
    "PyMatrixError",
    "ValidationError",
    "InvalidDimensionsError",
    "CalculationError",
    "ShapeMismatchError",
    "NumericalOverflowError",
    "SingularMatrixError",
    "OutOfMemoryError",
]
