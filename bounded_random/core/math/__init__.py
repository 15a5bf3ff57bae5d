"""
Core math modules для bounded-random

Границы числовых доменов и валидация аргументов.
"""

from bounded_random.core.math.numeric_limits import (
    # Domain limits
    DOUBLE_MAX,
    FLOAT_MAX,
    INT_MAX,
    LONG_MAX,
    # Exceptions
    InvalidArgument,
    # Type checks
    is_strict_int,
    is_valid_float,
    require_float,
    require_int,
    # Validation
    validate_at_most,
    validate_non_negative,
    validate_ordered_range,
    # Utilities
    clamp,
    float32_ceil,
    float32_floor,
    to_float32,
)

__all__ = [
    # Numeric Limits — Domain limits
    "DOUBLE_MAX",
    "FLOAT_MAX",
    "INT_MAX",
    "LONG_MAX",
    # Numeric Limits — Exceptions
    "InvalidArgument",
    # Numeric Limits — Type checks
    "is_strict_int",
    "is_valid_float",
    "require_float",
    "require_int",
    # Numeric Limits — Validation
    "validate_at_most",
    "validate_non_negative",
    "validate_ordered_range",
    # Numeric Limits — Utilities
    "clamp",
    "float32_ceil",
    "float32_floor",
    "to_float32",
]
