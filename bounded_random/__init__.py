"""
bounded-random — ограниченные случайные значения

Генерация случайных int32, int64, float32, float64, boolean и байт
в диапазонах, заданных вызывающим кодом:
- целочисленные диапазоны полуоткрыты [min, max)
- вещественные диапазоны закрыты [min, max]
- min == max возвращает ровно min
"""

from bounded_random.core.math import InvalidArgument
from bounded_random.generator import (
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

__version__ = "0.1.0"

__all__ = [
    "InvalidArgument",
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
