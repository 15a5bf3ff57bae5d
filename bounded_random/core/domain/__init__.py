"""
Domain models and value objects.

Contains the BoundedRange value object and its numeric kinds.
"""

from bounded_random.core.domain.bounded_range import BoundedRange, NumericKind

__all__ = [
    "BoundedRange",
    "NumericKind",
]
