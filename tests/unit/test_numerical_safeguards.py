"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Валидность float и валидацию диапазонов
2. Защиту от переполнения размера результата
3. Проверку произведения обратным делением
4. Проверку накопления суммы на согласованность знака
5. Граничные случаи и детерминизм
"""

import sys

import pytest

from src.core.errors import (
    STAGE_MULTIPLICATION,
    STAGE_SUMMATION,
    ArithmeticOverflow,
    MatrixError,
    ResultSizeOverflow,
)
from src.core.math.numerical_safeguards import (
    SIZE_MAX,
    check_result_size,
    checked_accumulate,
    checked_product,
    is_valid_float,
    validate_in_range,
)


class Int8(int):
    """Целое со знаком, заворачивающееся как 8-битный регистр."""

    def __add__(self, other: int) -> "Int8":
        return Int8((int(self) + int(other) + 128) % 256 - 128)


# =============================================================================
# ТЕСТЫ ВАЛИДНОСТИ FLOAT
# =============================================================================


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_normal_values_valid(self) -> None:
        """Обычные значения валидны"""
        assert is_valid_float(0.0)
        assert is_valid_float(1.0)
        assert is_valid_float(-1.0)
        assert is_valid_float(1e100)
        assert is_valid_float(-1e-10)

    def test_nan_invalid(self) -> None:
        """NaN невалиден"""
        assert not is_valid_float(float("nan"))

    def test_inf_invalid(self) -> None:
        """Inf невалиден"""
        assert not is_valid_float(float("inf"))
        assert not is_valid_float(float("-inf"))


class TestValidateInRange:
    """Тесты для validate_in_range"""

    def test_value_within_range_passes(self) -> None:
        """Значение в диапазоне проходит"""
        validate_in_range(5.0, "test", min_value=0.0, max_value=10.0)

    def test_bounds_are_inclusive(self) -> None:
        """Границы диапазона включительны"""
        validate_in_range(1, "rows", min_value=1, max_value=100)
        validate_in_range(100, "rows", min_value=1, max_value=100)
        validate_in_range(-1e100, "value", min_value=-1e100, max_value=1e100)

    def test_value_below_min_fails(self) -> None:
        """Значение ниже минимума не проходит"""
        with pytest.raises(ValueError, match="test must be >= 0.0"):
            validate_in_range(-1.0, "test", min_value=0.0, max_value=10.0)

    def test_value_above_max_fails(self) -> None:
        """Значение выше максимума не проходит"""
        with pytest.raises(ValueError, match="test must be <= 10.0"):
            validate_in_range(15.0, "test", min_value=0.0, max_value=10.0)

    def test_only_min_check(self) -> None:
        """Только проверка минимума"""
        validate_in_range(5.0, "test", min_value=0.0)
        with pytest.raises(ValueError, match="test must be >= 0.0"):
            validate_in_range(-1.0, "test", min_value=0.0)

    def test_nan_fails(self) -> None:
        """NaN не проходит"""
        with pytest.raises(ValueError, match="test must be a valid float"):
            validate_in_range(float("nan"), "test", min_value=0.0, max_value=10.0)


# =============================================================================
# ТЕСТЫ РАЗМЕРА РЕЗУЛЬТАТА
# =============================================================================


class TestCheckResultSize:
    """Тесты для check_result_size"""

    def test_small_sizes_pass(self) -> None:
        """Обычные размеры проходят и возвращают число элементов"""
        assert check_result_size(2, 3) == 6
        assert check_result_size(1, 1) == 1
        assert check_result_size(100, 100) == 10_000

    def test_exact_limit_passes(self) -> None:
        """Ровно size_max элементов - допустимо"""
        assert check_result_size(10, 10, size_max=100) == 100
        assert check_result_size(SIZE_MAX, 1) == SIZE_MAX

    def test_above_limit_raises(self) -> None:
        """Больше size_max элементов - ResultSizeOverflow"""
        with pytest.raises(ResultSizeOverflow, match="Possible overflow"):
            check_result_size(11, 10, size_max=100)

    def test_platform_limit(self) -> None:
        """Граница по умолчанию - sys.maxsize"""
        assert SIZE_MAX == sys.maxsize
        with pytest.raises(ResultSizeOverflow):
            check_result_size(sys.maxsize, 2)
        with pytest.raises(ResultSizeOverflow):
            check_result_size(2 ** 32, 2 ** 32)

    def test_is_overflow_error(self) -> None:
        """ResultSizeOverflow ловится как OverflowError и MatrixError"""
        with pytest.raises(OverflowError):
            check_result_size(11, 10, size_max=100)
        with pytest.raises(MatrixError):
            check_result_size(11, 10, size_max=100)


# =============================================================================
# ТЕСТЫ ПРОИЗВЕДЕНИЯ
# =============================================================================


class TestCheckedProduct:
    """Тесты для checked_product"""

    def test_integral_values(self) -> None:
        """Целочисленные значения перемножаются точно"""
        assert checked_product(3.0, 4.0) == 12.0
        assert checked_product(-7.0, 9.0) == -63.0
        assert checked_product(2.0 ** 500, 2.0 ** 500) == 2.0 ** 1000

    def test_zero_factor(self) -> None:
        """Ноль в любом множителе не проверяется делением"""
        assert checked_product(0.0, 1e308) == 0.0
        assert checked_product(1e308, 0.0) == 0.0
        assert checked_product(0.0, 0.0) == 0.0

    def test_overflow_to_inf_raises(self) -> None:
        """Переполнение до Inf обнаруживается"""
        with pytest.raises(ArithmeticOverflow, match="Overflow while multiplying") as exc_info:
            checked_product(1e308, 1e308)
        assert exc_info.value.stage == STAGE_MULTIPLICATION

    def test_negative_overflow_raises(self) -> None:
        """Переполнение до -Inf обнаруживается"""
        with pytest.raises(ArithmeticOverflow):
            checked_product(-1e308, 1e308)

    def test_underflow_to_zero_raises(self) -> None:
        """Потеря значения при underflow тоже считается переполнением"""
        with pytest.raises(ArithmeticOverflow):
            checked_product(1e-200, 1e-200)

    def test_nan_factor_raises(self) -> None:
        """NaN во множителе не восстанавливается делением"""
        with pytest.raises(ArithmeticOverflow):
            checked_product(float("nan"), 2.0)

    def test_deterministic(self) -> None:
        """Повторный вызов даёт тот же результат"""
        assert checked_product(123456.0, 789.0) == checked_product(123456.0, 789.0)


# =============================================================================
# ТЕСТЫ НАКОПЛЕНИЯ СУММЫ
# =============================================================================


class TestCheckedAccumulate:
    """Тесты для checked_accumulate"""

    def test_normal_accumulation(self) -> None:
        """Обычное накопление"""
        assert checked_accumulate(0.0, 5.0) == 5.0
        assert checked_accumulate(5.0, -2.0) == 3.0
        assert checked_accumulate(-1.0, -1.0) == -2.0

    def test_zero_product(self) -> None:
        """Нулевое слагаемое не меняет сумму"""
        assert checked_accumulate(42.0, 0.0) == 42.0

    def test_large_float_sum_saturates_without_error(self) -> None:
        """Float-сумма насыщается до Inf монотонно, знак не нарушается"""
        assert checked_accumulate(1e308, 1e308) == float("inf")

    def test_positive_wraparound_raises(self) -> None:
        """Положительное слагаемое, уменьшившее сумму, - переполнение"""
        with pytest.raises(ArithmeticOverflow, match="Overflow while summing") as exc_info:
            checked_accumulate(Int8(100), Int8(100))
        assert exc_info.value.stage == STAGE_SUMMATION

    def test_negative_wraparound_raises(self) -> None:
        """Отрицательное слагаемое, увеличившее сумму, - переполнение"""
        with pytest.raises(ArithmeticOverflow):
            checked_accumulate(Int8(-100), Int8(-100))

    def test_wrapping_type_without_wrap_passes(self) -> None:
        """Без заворачивания проверка не срабатывает"""
        assert checked_accumulate(Int8(100), Int8(27)) == 127
