"""Generator — генератор ограниченных случайных значений.

- RandomUtils: операции над источником случайности
- GeneratorConfig: выбор источника (seed / SystemRandom)
- функции уровня модуля над генератором по умолчанию
"""

from .random_utils import (
    GeneratorConfig,
    RandomUtils,
    generate,
    get_default_generator,
    next_boolean,
    next_bytes,
    next_double,
    next_float,
    next_int,
    next_long,
    set_default_generator,
)

__all__ = [
    "GeneratorConfig",
    "RandomUtils",
    "generate",
    "get_default_generator",
    "next_boolean",
    "next_bytes",
    "next_double",
    "next_float",
    "next_int",
    "next_long",
    "set_default_generator",
]
