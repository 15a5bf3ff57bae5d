"""
Тесты для модуля Numeric Limits

Проверяет:
1. Границы доменов
2. Проверки типов (int / float, NaN/Inf)
3. Валидацию неотрицательности и порядка границ
4. Сужение до single precision
5. clamp
"""

import math
import sys

import pytest

from bounded_random.core.math.numeric_limits import (
    DOUBLE_MAX,
    FLOAT_MAX,
    INT_MAX,
    LONG_MAX,
    InvalidArgument,
    clamp,
    float32_ceil,
    float32_floor,
    is_strict_int,
    is_valid_float,
    require_float,
    require_int,
    to_float32,
    validate_at_most,
    validate_non_negative,
    validate_ordered_range,
)

# =============================================================================
# ГРАНИЦЫ ДОМЕНОВ
# =============================================================================


class TestDomainLimits:
    """Тесты констант доменов"""

    def test_int_max(self) -> None:
        """INT_MAX — максимум int32"""
        assert INT_MAX == 2_147_483_647

    def test_long_max(self) -> None:
        """LONG_MAX — максимум int64"""
        assert LONG_MAX == 9_223_372_036_854_775_807

    def test_float_max(self) -> None:
        """FLOAT_MAX — максимум binary32"""
        assert FLOAT_MAX == pytest.approx(3.4028234663852886e38)
        assert to_float32(FLOAT_MAX) == FLOAT_MAX

    def test_double_max(self) -> None:
        """DOUBLE_MAX совпадает с sys.float_info.max"""
        assert DOUBLE_MAX == sys.float_info.max

    def test_invalid_argument_is_value_error(self) -> None:
        """InvalidArgument совместим с ValueError"""
        assert issubclass(InvalidArgument, ValueError)


# =============================================================================
# ПРОВЕРКИ ТИПОВ
# =============================================================================


class TestTypeChecks:
    """Тесты is_strict_int / require_int / require_float"""

    def test_strict_int(self) -> None:
        """bool не считается целым"""
        assert is_strict_int(5)
        assert is_strict_int(0)
        assert not is_strict_int(True)
        assert not is_strict_int(5.0)
        assert not is_strict_int("5")

    def test_require_int_passes_value(self) -> None:
        """Целое возвращается без изменений"""
        assert require_int(42, "start") == 42

    def test_require_int_rejects_float(self) -> None:
        """float отклоняется с именем параметра"""
        with pytest.raises(InvalidArgument, match="start must be an integer"):
            require_int(1.5, "start")

    def test_require_float_converts_int(self) -> None:
        """int приводится к float"""
        result = require_float(3, "end")
        assert result == 3.0
        assert isinstance(result, float)

    def test_require_float_rejects_nan_inf(self) -> None:
        """NaN/Inf отклоняются"""
        with pytest.raises(InvalidArgument, match="not NaN/Inf"):
            require_float(float("nan"), "start")

        with pytest.raises(InvalidArgument, match="not NaN/Inf"):
            require_float(float("inf"), "end")

    def test_require_float_rejects_huge_int(self) -> None:
        """int вне домена double отклоняется"""
        with pytest.raises(InvalidArgument, match="out of double range"):
            require_float(10**400, "end")

    def test_require_float_rejects_non_number(self) -> None:
        """Строки и bool отклоняются"""
        with pytest.raises(InvalidArgument, match="must be a number"):
            require_float("1.0", "start")

        with pytest.raises(InvalidArgument, match="must be a number"):
            require_float(False, "start")

    def test_is_valid_float(self) -> None:
        """Только конечные значения валидны"""
        assert is_valid_float(0.0)
        assert is_valid_float(DOUBLE_MAX)
        assert not is_valid_float(math.nan)
        assert not is_valid_float(-math.inf)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


class TestValidation:
    """Тесты validate_*"""

    def test_non_negative_accepts_zero(self) -> None:
        """Ноль допустим"""
        validate_non_negative(0, "count")
        validate_non_negative(0.0, "start")

    def test_non_negative_rejects_negative(self) -> None:
        """Отрицательное значение вызывает ошибку"""
        with pytest.raises(InvalidArgument, match="count must be non-negative, got -1"):
            validate_non_negative(-1, "count")

    def test_at_most(self) -> None:
        """Верхняя граница домена включена"""
        validate_at_most(INT_MAX, "end", INT_MAX)

        with pytest.raises(InvalidArgument, match="end must be <="):
            validate_at_most(INT_MAX + 1, "end", INT_MAX)

    def test_ordered_range_accepts_equal(self) -> None:
        """start == end допустимо"""
        validate_ordered_range(42, 42)
        validate_ordered_range(1.0, 2.0)

    def test_ordered_range_rejects_reversed(self) -> None:
        """start > end вызывает ошибку"""
        with pytest.raises(InvalidArgument, match="start value must be smaller or equal"):
            validate_ordered_range(2, 1)


# =============================================================================
# SINGLE PRECISION
# =============================================================================


class TestToFloat32:
    """Тесты сужения double → float"""

    def test_exact_values_unchanged(self) -> None:
        """Представимые значения не меняются"""
        assert to_float32(0.0) == 0.0
        assert to_float32(0.5) == 0.5
        assert to_float32(33.0) == 33.0

    def test_rounding(self) -> None:
        """Непредставимые значения округляются"""
        result = to_float32(42.1)
        assert result != 42.1
        assert result == pytest.approx(42.1, abs=1e-5)

    def test_overflow_raises(self) -> None:
        """Значения за FLOAT_MAX вызывают ошибку"""
        with pytest.raises(InvalidArgument):
            to_float32(1e39)

        with pytest.raises(InvalidArgument):
            to_float32(DOUBLE_MAX)


class TestFloat32DirectedRounding:
    """Тесты float32_ceil / float32_floor"""

    def test_exact_values_unchanged(self) -> None:
        """Представимые значения не меняются"""
        assert float32_ceil(1.0) == 1.0
        assert float32_floor(1.0) == 1.0
        assert float32_ceil(0.0) == 0.0
        assert float32_floor(FLOAT_MAX) == FLOAT_MAX

    def test_ceil_not_below_value(self) -> None:
        """ceil >= value и лежит на сетке float32"""
        for value in (42.1, 1.0000001, 0.1, 1e-50, 3.3e38):
            result = float32_ceil(value)
            assert result >= value
            assert to_float32(result) == result

    def test_floor_not_above_value(self) -> None:
        """floor <= value и лежит на сетке float32"""
        for value in (42.1, 1.0000001, 0.1, 1e-50, 3.3e38):
            result = float32_floor(value)
            assert result <= value
            assert to_float32(result) == result

    def test_adjacent_grid_points(self) -> None:
        """Для непредставимого value ceil и floor — соседние float32"""
        assert float32_floor(42.1) == to_float32(42.1)
        assert float32_ceil(42.1) > float32_floor(42.1)
        assert float32_floor(1.0000001) == 1.0
        assert float32_ceil(1.0000001) == to_float32(1.0000001)

    def test_subnormal(self) -> None:
        """Значение ниже наименьшего субнормального"""
        assert float32_floor(1e-50) == 0.0
        assert float32_ceil(1e-50) == 2.0**-149


# =============================================================================
# CLAMP
# =============================================================================


class TestClamp:
    """Тесты для clamp"""

    def test_within_range(self) -> None:
        assert clamp(5.0, 0.0, 10.0) == 5.0

    def test_below_and_above(self) -> None:
        assert clamp(-1.0, 0.0, 10.0) == 0.0
        assert clamp(15.0, 0.0, 10.0) == 10.0

    def test_open_bounds(self) -> None:
        """None означает отсутствие границы"""
        assert clamp(15.0, min_value=0.0) == 15.0
        assert clamp(-15.0, max_value=0.0) == -15.0
