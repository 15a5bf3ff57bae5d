"""
Numeric Limits — границы числовых доменов и валидация аргументов

Модуль задаёт численные домены генератора и проверки аргументов:
- Границы доменов (int32, int64, float32, float64)
- Единственный тип ошибки InvalidArgument
- Валидация неотрицательности, конечности и порядка границ
- Сужение double → float (single precision)
- clamp для удержания результата в закрытом диапазоне

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Невалидный аргумент никогда не проходит молча (всегда InvalidArgument)
2. NaN/Inf не допускаются в границах диапазона
3. Отрицательные границы и счётчики отклоняются
4. Сужение до float32 не выходит за FLOAT_MAX
"""

import math
import struct
from typing import Final

# =============================================================================
# ГРАНИЦЫ ДОМЕНОВ
# =============================================================================

# 32-битное знаковое целое
INT_MAX: Final[int] = 2**31 - 1

# 64-битное знаковое целое (long)
LONG_MAX: Final[int] = 2**63 - 1

# Максимальное конечное значение IEEE-754 binary32
FLOAT_MAX: Final[float] = struct.unpack("<f", b"\xff\xff\x7f\x7f")[0]

# Максимальное конечное значение IEEE-754 binary64
DOUBLE_MAX: Final[float] = 1.7976931348623157e308


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidArgument(ValueError):
    """
    Невалидный аргумент генератора.

    Возникает синхронно и сразу:
    - min > max
    - отрицательная граница или отрицательный count
    - NaN/Inf или значение вне домена типа
    - нарушение контракта запроса

    Это ошибка программиста: повторов и частичных результатов нет.
    """

    pass


# =============================================================================
# ПРОВЕРКИ ТИПОВ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное
    """
    return math.isfinite(value)


def is_strict_int(value: object) -> bool:
    """Целое число, но не bool."""
    return isinstance(value, int) and not isinstance(value, bool)


def require_int(value: object, name: str) -> int:
    """
    Валидация, что значение — целое число (bool не допускается).

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        InvalidArgument: Если value не int
    """
    if not is_strict_int(value):
        raise InvalidArgument(
            f"{name} must be an integer, got {type(value).__name__} {value!r}"
        )
    return value


def require_float(value: object, name: str) -> float:
    """
    Приведение к float с проверкой конечности.

    Args:
        value: int или float
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        float(value)

    Raises:
        InvalidArgument: Если value не число или NaN/Inf
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidArgument(
            f"{name} must be a number, got {type(value).__name__} {value!r}"
        )

    try:
        result = float(value)
    except OverflowError as e:
        raise InvalidArgument(f"{name} is out of double range, got {value}") from e

    if not is_valid_float(result):
        raise InvalidArgument(f"{name} must be a valid float (not NaN/Inf), got {value}")

    return result


# =============================================================================
# ВАЛИДАЦИЯ И ПРОВЕРКИ
# =============================================================================


def validate_non_negative(value: float, name: str) -> None:
    """
    Валидация, что значение неотрицательное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        InvalidArgument: Если value < 0
    """
    if value < 0:
        raise InvalidArgument(f"{name} must be non-negative, got {value}")


def validate_at_most(value: float, name: str, max_value: float) -> None:
    """
    Валидация верхней границы домена.

    Raises:
        InvalidArgument: Если value > max_value
    """
    if value > max_value:
        raise InvalidArgument(f"{name} must be <= {max_value}, got {value}")


def validate_ordered_range(start: float, end: float) -> None:
    """
    Валидация порядка границ диапазона.

    Равенство допустимо (вырожденный диапазон из одного значения).

    Args:
        start: Нижняя граница
        end: Верхняя граница

    Raises:
        InvalidArgument: Если start > end
    """
    if start > end:
        raise InvalidArgument(
            f"start value must be smaller or equal to end value, got start={start}, end={end}"
        )


# =============================================================================
# SINGLE PRECISION
# =============================================================================


def to_float32(value: float) -> float:
    """
    Сужение double → float (IEEE-754 binary32, round-half-even).

    Args:
        value: Конечное значение double

    Returns:
        Ближайшее значение, представимое в single precision

    Raises:
        InvalidArgument: Если |value| вне домена float32

    Examples:
        >>> to_float32(0.5)
        0.5
        >>> to_float32(42.1)
        42.099998474121094
    """
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError as e:
        raise InvalidArgument(f"value must be <= {FLOAT_MAX}, got {value}") from e


def _float32_bits(value: float) -> int:
    return struct.unpack("<I", struct.pack("<f", value))[0]


def _float32_from_bits(bits: int) -> float:
    return struct.unpack("<f", struct.pack("<I", bits))[0]


def float32_ceil(value: float) -> float:
    """
    Наименьшее float32 >= value (для неотрицательных value).

    Для value >= 0 порядок битов float32 совпадает с порядком значений,
    поэтому соседнее значение сверху — bits + 1.

    Examples:
        >>> float32_ceil(42.1)
        42.10000228881836
        >>> float32_ceil(1e-50)  # наименьшее субнормальное float32
        1.401298464324817e-45
    """
    result = to_float32(value)
    if result < value:
        result = _float32_from_bits(_float32_bits(result) + 1)
    return result


def float32_floor(value: float) -> float:
    """
    Наибольшее float32 <= value (для неотрицательных value).

    Examples:
        >>> float32_floor(1.0000001)
        1.0
        >>> float32_floor(42.1)
        42.099998474121094
    """
    result = to_float32(value)
    if result > value:
        result = _float32_from_bits(_float32_bits(result) - 1)
    return result


# =============================================================================
# УТИЛИТЫ
# =============================================================================


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Ограничение значения в заданном диапазоне.

    Args:
        value: Исходное значение
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Returns:
        Значение, ограниченное диапазоном [min_value, max_value]

    Examples:
        >>> clamp(5.0, 0.0, 10.0)
        5.0
        >>> clamp(15.0, 0.0, 10.0)
        10.0
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result
