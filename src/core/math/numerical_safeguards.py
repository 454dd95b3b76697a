"""
Numerical Safeguards - Overflow Guards для матричного умножения

Модуль содержит примитивы, которыми ядро проверяет корректность
вычислений с плавающей точкой:
- Проверка валидности float (не NaN/Inf)
- Валидация диапазонов входных значений
- Защита от переполнения размера результата (m * p > SIZE_MAX)
- Проверка произведения обратным делением
- Проверка накопления суммы на согласованность знака

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Проверка размера выполняется ДО выделения памяти под результат
2. Произведение a * b принимается только если делением на каждый
   ненулевой множитель восстанавливается другой множитель
3. Сумма не может уменьшиться при добавлении положительного слагаемого
   и не может вырасти при добавлении отрицательного
4. Все проверки детерминированы и не изменяют входные значения

ВАЖНО: это эвристики для величин, представляющих целые или ограниченные
количества. Они не являются полноценным детектором потери точности
IEEE-754: безобидное округление (например, 0.1 * 0.3) тоже может
считаться переполнением.
"""

import math
import sys
from typing import Final

from src.core.errors import (
    STAGE_MULTIPLICATION,
    STAGE_SUMMATION,
    ArithmeticOverflow,
    ResultSizeOverflow,
)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Максимальное количество элементов, которое может адресовать платформа
# (аналог size_t max для счётчиков размера контейнеров)
SIZE_MAX: Final[int] = sys.maxsize


# =============================================================================
# ВАЛИДНОСТЬ FLOAT
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def validate_in_range(
    value: float,
    name: str,
    min_value: float | None = None,
    max_value: float | None = None,
) -> None:
    """
    Валидация, что значение в заданном диапазоне (границы включительно).

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Raises:
        ValueError: Если value вне диапазона или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if min_value is not None and value < min_value:
        raise ValueError(f"{name} must be >= {min_value}, got {value}")

    if max_value is not None and value > max_value:
        raise ValueError(f"{name} must be <= {max_value}, got {value}")


# =============================================================================
# РАЗМЕР РЕЗУЛЬТАТА
# =============================================================================


def check_result_size(rows: int, cols: int, size_max: int = SIZE_MAX) -> int:
    """
    Проверка, что rows * cols не превышает size_max.

    Сравнение выполняется делением, без вычисления самого произведения:
    rows > size_max // cols  <=>  rows * cols > size_max.

    Args:
        rows: Количество строк результата (>= 1)
        cols: Количество столбцов результата (>= 1)
        size_max: Верхняя граница количества элементов (default: SIZE_MAX)

    Returns:
        rows * cols

    Raises:
        ResultSizeOverflow: Если произведение размеров переполняет size_max

    Examples:
        >>> check_result_size(2, 3)
        6
        >>> check_result_size(10, 10, size_max=50)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        ResultSizeOverflow: ...
    """
    if rows > size_max // cols:
        raise ResultSizeOverflow(
            f"Possible overflow while creating the result matrix: "
            f"{rows}x{cols} exceeds {size_max} elements"
        )
    return rows * cols


# =============================================================================
# ПРОВЕРКИ АРИФМЕТИКИ
# =============================================================================


def checked_product(a: float, b: float) -> float:
    """
    Произведение двух элементов с проверкой обратным делением.

    Алгоритм:
        product = a * b
        a != 0 and product / a != b  -> переполнение
        b != 0 and product / b != a  -> переполнение

    Args:
        a: Элемент A[i][k]
        b: Элемент B[k][j]

    Returns:
        a * b

    Raises:
        ArithmeticOverflow: stage=STAGE_MULTIPLICATION

    Examples:
        >>> checked_product(3.0, 4.0)
        12.0
        >>> checked_product(0.0, 1e308)
        0.0
    """
    product = a * b
    if (a != 0.0 and product / a != b) or (b != 0.0 and product / b != a):
        raise ArithmeticOverflow(
            f"Overflow while multiplying elements: {a!r} * {b!r} = {product!r}",
            stage=STAGE_MULTIPLICATION,
        )
    return product


def checked_accumulate(total: float, product: float) -> float:
    """
    Добавление слагаемого к накопленной сумме с проверкой знака.

    Положительное слагаемое не может уменьшить сумму,
    отрицательное - не может её увеличить.

    Args:
        total: Текущая накопленная сумма
        product: Добавляемое слагаемое

    Returns:
        total + product

    Raises:
        ArithmeticOverflow: stage=STAGE_SUMMATION
    """
    new_total = total + product
    if (product > 0 and new_total < total) or (product < 0 and new_total > total):
        raise ArithmeticOverflow(
            f"Overflow while summing elements: {total!r} + {product!r} = {new_total!r}",
            stage=STAGE_SUMMATION,
        )
    return new_total
