"""
RandomUtils — генератор ограниченных случайных значений

Операции:
- next_bytes(count): count случайных байт
- next_int / next_long(min, max): целое v, min <= v < max
- next_float / next_double(min, max): вещественное v, min <= v <= max
- next_boolean(): True/False
- generate(request): диспетчер сериализованного запроса (JSON контракт)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Целочисленные диапазоны полуоткрыты [min, max)
2. Вещественные диапазоны закрыты [min, max]
3. min == max → ровно min (для всех числовых типов)
4. min > max, отрицательные границы, отрицательный count → InvalidArgument
5. Единственное состояние — источник случайности (random.Random)
"""

import logging
import random
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from jsonschema import ValidationError

from bounded_random.core.contracts import RandomRequestValidator
from bounded_random.core.domain import BoundedRange, NumericKind
from bounded_random.core.math import (
    DOUBLE_MAX,
    FLOAT_MAX,
    INT_MAX,
    LONG_MAX,
    InvalidArgument,
    clamp,
    require_int,
    to_float32,
    validate_non_negative,
)

logger = logging.getLogger(__name__)


# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================


@dataclass(frozen=True)
class GeneratorConfig:
    """Конфигурация источника случайности.

    - seed задан: random.Random(seed), воспроизводимая последовательность
    - seed не задан, secure=True: random.SystemRandom (энтропия ОС)
    - иначе: random.Random() без seed
    """

    seed: Optional[int] = None
    secure: bool = False

    def build_source(self) -> random.Random:
        """Создание источника случайности по конфигурации."""
        if self.seed is not None:
            return random.Random(self.seed)
        if self.secure:
            return random.SystemRandom()
        return random.Random()


# =============================================================================
# GENERATOR
# =============================================================================


class RandomUtils:
    """Генератор случайных значений в ограниченных диапазонах.

    Все операции stateless, кроме потребления энтропии из источника.
    Потокобезопасность определяется источником (random.Random).
    """

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        source: Optional[random.Random] = None,
    ):
        """
        Args:
            config: конфигурация источника (игнорируется, если задан source)
            source: готовый источник случайности
        """
        self.config = config or GeneratorConfig()
        self._source = source if source is not None else self.config.build_source()
        self._request_validator: Optional[RandomRequestValidator] = None

        logger.debug(
            "RandomUtils source=%s seeded=%s",
            type(self._source).__name__,
            source is None and self.config.seed is not None,
        )

    @property
    def source(self) -> random.Random:
        return self._source

    # -------------------------------------------------------------------------
    # Байты и boolean
    # -------------------------------------------------------------------------

    def next_bytes(self, count: int) -> bytes:
        """Последовательность из count случайных байт.

        Raises:
            InvalidArgument: count не int или count < 0
        """
        require_int(count, "count")
        validate_non_negative(count, "count")
        if count == 0:
            return b""
        return self._source.randbytes(count)

    def next_boolean(self) -> bool:
        return self._source.getrandbits(1) == 1

    # -------------------------------------------------------------------------
    # Целочисленные диапазоны [min, max)
    # -------------------------------------------------------------------------

    def next_int(self, start: int = 0, end: int = INT_MAX) -> int:
        """Случайное int32 v: start <= v < end (start == end → start).

        Raises:
            InvalidArgument: start > end, отрицательная граница, end > INT_MAX
        """
        return self._next_integral(BoundedRange.of(NumericKind.INT, start, end))

    def next_long(self, start: int = 0, end: int = LONG_MAX) -> int:
        """Случайное int64 v: start <= v < end (start == end → start).

        Raises:
            InvalidArgument: start > end, отрицательная граница, end > LONG_MAX
        """
        return self._next_integral(BoundedRange.of(NumericKind.LONG, start, end))

    def _next_integral(self, bounds: BoundedRange) -> int:
        if bounds.is_degenerate:
            return bounds.start
        return self._source.randrange(bounds.start, bounds.end)

    # -------------------------------------------------------------------------
    # Вещественные диапазоны [min, max]
    # -------------------------------------------------------------------------

    def next_float(self, start: float = 0.0, end: float = FLOAT_MAX) -> float:
        """Случайное single precision v: start <= v <= end.

        Границы сужаются до float32 внутрь [start, end] (start вверх, end вниз).
        start == end или нет float32 внутри диапазона → ближайшее к start float32.

        Raises:
            InvalidArgument: start > end, отрицательная граница, NaN/Inf, end > FLOAT_MAX
        """
        bounds = BoundedRange.of(NumericKind.FLOAT, start, end)
        # Границы float32, поэтому округление результата не выходит за них
        return to_float32(self._next_continuous(bounds))

    def next_double(self, start: float = 0.0, end: float = DOUBLE_MAX) -> float:
        """Случайное double v: start <= v <= end (start == end → start).

        Raises:
            InvalidArgument: start > end, отрицательная граница, NaN/Inf
        """
        return self._next_continuous(BoundedRange.of(NumericKind.DOUBLE, start, end))

    def _next_continuous(self, bounds: BoundedRange) -> float:
        if bounds.is_degenerate:
            return bounds.start
        value = bounds.start + bounds.span * self._source.random()
        return clamp(value, bounds.start, bounds.end)

    # -------------------------------------------------------------------------
    # Сериализованный запрос
    # -------------------------------------------------------------------------

    def generate(self, request: Dict[str, Any]) -> Union[int, float, bool, bytes]:
        """Генерация значения по запросу random_request.

        Args:
            request: dict, например {"kind": "int", "min": 0, "max": 10}

        Returns:
            Значение запрошенного типа

        Raises:
            InvalidArgument: запрос не соответствует контракту или
                нарушены инварианты диапазона
        """
        if self._request_validator is None:
            self._request_validator = RandomRequestValidator()

        try:
            self._request_validator.validate(request)
        except ValidationError as e:
            raise InvalidArgument(f"Invalid random_request: {e.message}") from e

        kind = request["kind"]
        logger.debug("generate kind=%s", kind)

        if kind == "bytes":
            return self.next_bytes(request["count"])
        if kind == "boolean":
            return self.next_boolean()

        operation = {
            NumericKind.INT: self.next_int,
            NumericKind.LONG: self.next_long,
            NumericKind.FLOAT: self.next_float,
            NumericKind.DOUBLE: self.next_double,
        }[NumericKind(kind)]
        return operation(request["min"], request["max"])


# =============================================================================
# DEFAULT INSTANCE
# =============================================================================

_default_generator = RandomUtils()


def set_default_generator(
    generator: Union[RandomUtils, GeneratorConfig, None] = None,
) -> RandomUtils:
    """Замена генератора по умолчанию (None → новый unseeded)."""
    global _default_generator
    if isinstance(generator, RandomUtils):
        _default_generator = generator
    else:
        _default_generator = RandomUtils(config=generator)
    return _default_generator


def get_default_generator() -> RandomUtils:
    return _default_generator


def next_bytes(count: int) -> bytes:
    return _default_generator.next_bytes(count)


def next_boolean() -> bool:
    return _default_generator.next_boolean()


def next_int(start: int = 0, end: int = INT_MAX) -> int:
    return _default_generator.next_int(start, end)


def next_long(start: int = 0, end: int = LONG_MAX) -> int:
    return _default_generator.next_long(start, end)


def next_float(start: float = 0.0, end: float = FLOAT_MAX) -> float:
    return _default_generator.next_float(start, end)


def next_double(start: float = 0.0, end: float = DOUBLE_MAX) -> float:
    return _default_generator.next_double(start, end)


def generate(request: Dict[str, Any]) -> Union[int, float, bool, bytes]:
    return _default_generator.generate(request)
