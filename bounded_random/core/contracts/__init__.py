"""
Contract Validation Module

Модуль для валидации JSON контрактов запросов генерации.
"""

from .validators import (
    ContractValidator,
    RandomRequestValidator,
    SchemaLoader,
    validate_random_request,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "RandomRequestValidator",
    # Functions
    "validate_random_request",
]
