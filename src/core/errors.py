"""
Matrix Errors - Иерархия исключений ядра

Каждый вид ошибки наследуется от MatrixError и одновременно от подходящего
встроенного исключения (ValueError, IndexError, OverflowError, RuntimeError),
чтобы внешний код мог ловить их как стандартные ошибки Python.

Политика распространения:
1. Ошибки конструирования и индексации пробрасываются сразу (fail-fast)
2. DimensionMismatch и ResultSizeOverflow возникают до начала вычислений
3. ArithmeticOverflow внутри цикла умножения всегда оборачивается
   в MultiplicationFailed на границе multiply()
"""

from typing import Final

# Стадии, на которых может сработать ArithmeticOverflow
STAGE_MULTIPLICATION: Final[str] = "multiplication"
STAGE_SUMMATION: Final[str] = "summation"


class MatrixError(Exception):
    """Базовое исключение для всех ошибок матричного ядра."""


class InvalidDimensions(MatrixError, ValueError):
    """Количество строк или столбцов меньше 1 при создании матрицы."""


class ShapeMismatch(MatrixError, ValueError):
    """Переданная сетка значений не совпадает с объявленной формой."""


class IndexOutOfRange(MatrixError, IndexError):
    """Обращение к элементу вне [0, rows) x [0, cols)."""


class DimensionMismatch(MatrixError, ValueError):
    """Число столбцов A не равно числу строк B."""


class ResultSizeOverflow(MatrixError, OverflowError):
    """Размер результирующей матрицы (m * p) не помещается в SIZE_MAX."""


class ArithmeticOverflow(MatrixError, OverflowError):
    """
    Переполнение при умножении элементов или при суммировании.

    Attributes:
        stage: STAGE_MULTIPLICATION или STAGE_SUMMATION
    """

    def __init__(self, message: str, stage: str):
        super().__init__(message)
        self.stage = stage


class MultiplicationFailed(MatrixError, RuntimeError):
    """
    Ошибка внутри цикла умножения, обёрнутая на границе multiply().

    Attributes:
        cause: исходное исключение (обычно ArithmeticOverflow)
    """

    def __init__(self, cause: Exception):
        super().__init__(f"Matrix multiplication failed: {cause}")
        self.cause = cause
