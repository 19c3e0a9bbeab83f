"""
Domain models and value objects.

Contains Vector, Matrix and the error taxonomy shared by both.
"""

from matrixcore.core.domain.errors import (
    DimensionMismatchError,
    IndexOutOfBoundsError,
    JaggedInputError,
    MatrixError,
)
from matrixcore.core.domain.matrix import Matrix, new_matrix, new_zero_matrix
from matrixcore.core.domain.vector import Column, Row, Vector

__all__ = [
    # Errors
    "MatrixError",
    "DimensionMismatchError",
    "JaggedInputError",
    "IndexOutOfBoundsError",
    # Vector
    "Vector",
    "Row",
    "Column",
    # Matrix
    "Matrix",
    "new_matrix",
    "new_zero_matrix",
]
