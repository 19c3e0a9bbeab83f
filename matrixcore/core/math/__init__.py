"""
Core math modules для matrixcore

Модель равенства скаляров и метод Гаусса.
"""

# Scalar Comparison
from matrixcore.core.math.comparison import (
    # Epsilon constants
    DEFAULT_EPSILON,
    # Comparisons
    equals,
    equals_with_epsilon,
    is_zero,
    # Validation
    validate_epsilon,
)

# Gaussian Reduction
from matrixcore.core.math.reduction import (
    ReductionConfig,
    ReductionStep,
    find_pivot_row,
    gaussian_reduce,
    gaussian_reduce_steps,
)

__all__ = [
    # Scalar Comparison — Epsilon constants
    "DEFAULT_EPSILON",
    # Scalar Comparison — Comparisons
    "equals",
    "equals_with_epsilon",
    "is_zero",
    # Scalar Comparison — Validation
    "validate_epsilon",
    # Gaussian Reduction — Types
    "ReductionConfig",
    "ReductionStep",
    # Gaussian Reduction — Functions
    "find_pivot_row",
    "gaussian_reduce",
    "gaussian_reduce_steps",
]
