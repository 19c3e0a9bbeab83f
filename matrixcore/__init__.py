"""
matrixcore — dense matrix/vector algebra core.

Rectangular float64 matrices, basic vector algebra and reduction to
row-echelon form by Gaussian elimination with an epsilon/NaN-aware
equality model.
"""

from matrixcore.core.domain import (
    Column,
    DimensionMismatchError,
    IndexOutOfBoundsError,
    JaggedInputError,
    Matrix,
    MatrixError,
    Row,
    Vector,
    new_matrix,
    new_zero_matrix,
)
from matrixcore.core.math import (
    DEFAULT_EPSILON,
    ReductionConfig,
    ReductionStep,
    equals,
    equals_with_epsilon,
    gaussian_reduce,
    gaussian_reduce_steps,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_EPSILON",
    "equals",
    "equals_with_epsilon",
    "Vector",
    "Row",
    "Column",
    "Matrix",
    "new_matrix",
    "new_zero_matrix",
    "ReductionConfig",
    "ReductionStep",
    "gaussian_reduce",
    "gaussian_reduce_steps",
    "MatrixError",
    "DimensionMismatchError",
    "JaggedInputError",
    "IndexOutOfBoundsError",
]
