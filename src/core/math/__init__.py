"""
Core math modules

Численные проверки, на которых построено умножение матриц.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Constants
    SIZE_MAX,
    # Validation
    is_valid_float,
    validate_in_range,
    # Overflow guards
    check_result_size,
    checked_accumulate,
    checked_product,
)

__all__ = [
    # Numerical Safeguards - Constants
    "SIZE_MAX",
    # Numerical Safeguards - Validation
    "is_valid_float",
    "validate_in_range",
    # Numerical Safeguards - Overflow guards
    "check_result_size",
    "checked_accumulate",
    "checked_product",
]
