"""
Domain models.

Contains the dense Matrix type and its error taxonomy.
"""

from src.core.domain.matrix import Matrix, multiply
from src.core.errors import (
    STAGE_MULTIPLICATION,
    STAGE_SUMMATION,
    ArithmeticOverflow,
    DimensionMismatch,
    IndexOutOfRange,
    InvalidDimensions,
    MatrixError,
    MultiplicationFailed,
    ResultSizeOverflow,
    ShapeMismatch,
)

__all__ = [
    # Matrix
    "Matrix",
    "multiply",
    # Errors
    "MatrixError",
    "InvalidDimensions",
    "ShapeMismatch",
    "IndexOutOfRange",
    "DimensionMismatch",
    "ResultSizeOverflow",
    "ArithmeticOverflow",
    "MultiplicationFailed",
    "STAGE_MULTIPLICATION",
    "STAGE_SUMMATION",
]
