"""
BoundedRange — Ограниченный диапазон генерации

Immutable Pydantic модель, описывающая диапазон [start, end) или [start, end]
в зависимости от типа числа:
- INT, LONG: полуоткрытый диапазон [start, end)
- FLOAT, DOUBLE: закрытый диапазон [start, end]
- start == end: вырожденный диапазон, единственное значение start

Диапазон создаётся и используется в пределах одного вызова генератора.
"""

from enum import Enum
from typing import Any, Union

from pydantic import BaseModel, Field, ValidationError, model_validator

from bounded_random.core.math.numeric_limits import (
    FLOAT_MAX,
    INT_MAX,
    LONG_MAX,
    InvalidArgument,
    float32_ceil,
    float32_floor,
    require_float,
    require_int,
    to_float32,
    validate_at_most,
    validate_non_negative,
    validate_ordered_range,
)


# =============================================================================
# ENUMS
# =============================================================================


class NumericKind(str, Enum):
    """Числовой домен диапазона."""

    INT = "int"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"

    @property
    def is_integral(self) -> bool:
        """INT и LONG — целочисленные домены (верхняя граница исключена)."""
        return self in (NumericKind.INT, NumericKind.LONG)


# Верхняя граница каждого домена
_DOMAIN_MAX: dict[NumericKind, Union[int, float]] = {
    NumericKind.INT: INT_MAX,
    NumericKind.LONG: LONG_MAX,
    NumericKind.FLOAT: FLOAT_MAX,
}


def _narrow_to_float32(start: float, end: float) -> tuple[float, float]:
    """Сужение границ FLOAT внутрь исходного диапазона.

    start округляется вверх, end вниз, так что [start32, end32] лежит
    внутри [start, end]. Если float32 внутри диапазона нет (или start == end),
    диапазон вырождается в ближайшее к start значение float32.
    """
    if start == end:
        nearest = to_float32(start)
        return nearest, nearest

    start32 = float32_ceil(start)
    end32 = float32_floor(end)
    if start32 > end32:
        nearest = to_float32(start)
        return nearest, nearest
    return start32, end32


# =============================================================================
# BOUNDED RANGE MODEL
# =============================================================================


class BoundedRange(BaseModel):
    """
    Диапазон генерации случайного значения.

    Инварианты (проверяются при создании):
    - 0 <= start <= end
    - для INT/LONG: границы — int, end не превышает INT_MAX/LONG_MAX
    - для FLOAT/DOUBLE: границы конечны, для FLOAT сужены до single precision
    """

    kind: NumericKind = Field(..., description="Числовой домен")
    start: Union[int, float] = Field(..., description="Нижняя граница (включена)")
    end: Union[int, float] = Field(
        ..., description="Верхняя граница (исключена для INT/LONG, включена для FLOAT/DOUBLE)"
    )

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def normalize_bounds(cls, data: Any) -> Any:
        """Приведение границ к типу домена и проверка инвариантов."""
        if not isinstance(data, dict):
            return data

        kind = NumericKind(data.get("kind"))
        start = data.get("start")
        end = data.get("end")

        if kind.is_integral:
            start = require_int(start, "start")
            end = require_int(end, "end")
        else:
            start = require_float(start, "start")
            end = require_float(end, "end")

        validate_ordered_range(start, end)
        validate_non_negative(start, "start")
        validate_non_negative(end, "end")

        if kind in _DOMAIN_MAX:
            validate_at_most(end, "end", _DOMAIN_MAX[kind])

        if kind is NumericKind.FLOAT:
            start, end = _narrow_to_float32(start, end)

        return {"kind": kind, "start": start, "end": end}

    @classmethod
    def of(
        cls, kind: NumericKind, start: Union[int, float], end: Union[int, float]
    ) -> "BoundedRange":
        """
        Создание диапазона с единой ошибкой InvalidArgument.

        Args:
            kind: Числовой домен
            start: Нижняя граница
            end: Верхняя граница

        Returns:
            Валидный BoundedRange

        Raises:
            InvalidArgument: Если нарушен любой инвариант
        """
        try:
            return cls(kind=kind, start=start, end=end)
        except ValidationError as e:
            # Pydantic оборачивает InvalidArgument из валидатора
            errors = e.errors()
            message = errors[0]["msg"] if errors else str(e)
            raise InvalidArgument(message.removeprefix("Value error, ")) from e

    @property
    def is_degenerate(self) -> bool:
        """Диапазон из одного значения (start == end)."""
        return self.start == self.end

    @property
    def upper_inclusive(self) -> bool:
        """Включена ли верхняя граница."""
        return not self.kind.is_integral

    @property
    def span(self) -> Union[int, float]:
        """Ширина диапазона end - start."""
        return self.end - self.start

    def contains(self, value: Union[int, float]) -> bool:
        """
        Проверка принадлежности значения диапазону.

        Args:
            value: Проверяемое значение

        Returns:
            True если value в диапазоне с учётом включённости верхней границы.
            Вырожденный диапазон содержит ровно start.
        """
        if self.is_degenerate:
            return value == self.start
        if self.upper_inclusive:
            return self.start <= value <= self.end
        return self.start <= value < self.end
