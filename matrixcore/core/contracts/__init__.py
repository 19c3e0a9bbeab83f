"""
Contract Validation Module

Pydantic модель и JSON Schema контракт словарного представления матрицы.
"""

from .models import MatrixPayload
from .validators import (
    MATRIX_SCHEMA,
    SCHEMA_DIR,
    MatrixContractValidator,
    load_schema,
    validate_matrix_payload,
)

__all__ = [
    # Models
    "MatrixPayload",
    # Schema
    "SCHEMA_DIR",
    "MATRIX_SCHEMA",
    "load_schema",
    # Validation
    "MatrixContractValidator",
    "validate_matrix_payload",
]
