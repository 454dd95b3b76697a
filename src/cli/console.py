"""
Console - Ввод матриц с повторным запросом при ошибках

Консоль отвечает за всё, что ядро не проверяет само:
- Разбор чисел из текстовой строки
- Ограничение размеров [dim_min, dim_max] и значений [-value_limit, value_limit]
- Повторный запрос при нечисловом вводе или выходе за диапазон

В ядро попадают только уже проверенные размеры и значения.
Конец ввода (EOFError) пробрасывается вызывающему коду.
"""

import sys
from collections.abc import Callable
from typing import Final, TextIO

from src.cli.settings import ConsoleSettings
from src.core.domain.matrix import Matrix
from src.core.math.numerical_safeguards import is_valid_float, validate_in_range

MODE_EXAMPLE: Final[str] = "example"
MODE_MANUAL: Final[str] = "manual"

INVALID_NUMBER_MESSAGE: Final[str] = "Error: enter a valid number.\n"


class Console:
    """Интерактивный ввод режима работы и матриц."""

    def __init__(
        self,
        settings: ConsoleSettings | None = None,
        input_func: Callable[[], str] = input,
        output: TextIO | None = None,
    ):
        """
        Args:
            settings: ограничения ввода (default: ConsoleSettings())
            input_func: источник строк ввода (default: input)
            output: поток для приглашений и результатов (default: sys.stdout)
        """
        self.settings = settings or ConsoleSettings()
        self._input = input_func
        self._output = output or sys.stdout

    def write(self, text: str) -> None:
        self._output.write(text)
        self._output.flush()

    def _read_line(self, prompt: str) -> str:
        if prompt:
            self.write(prompt)
        return self._input()

    def _read_number(
        self,
        prompt: str,
        parse: Callable[[str], float],
        min_value: float,
        max_value: float,
    ) -> float:
        while True:
            raw = self._read_line(prompt).strip()

            try:
                value = parse(raw)
            except ValueError:
                self.write(INVALID_NUMBER_MESSAGE)
                continue

            try:
                if not is_valid_float(value):
                    self.write(INVALID_NUMBER_MESSAGE)
                    continue
                validate_in_range(value, "value", min_value, max_value)
            except (ValueError, OverflowError):
                # OverflowError: целое не представимо в float, заведомо вне диапазона
                self.write(
                    f"Error: the number must be in the range from "
                    f"{min_value:g} to {max_value:g}.\n"
                )
                continue

            return value

    def read_int(self, prompt: str, min_value: int, max_value: int) -> int:
        """Целое число в [min_value, max_value] с повторным запросом."""
        return int(self._read_number(prompt, int, min_value, max_value))

    def read_float(self, prompt: str, min_value: float, max_value: float) -> float:
        """Вещественное число в [min_value, max_value] с повторным запросом."""
        return float(self._read_number(prompt, float, min_value, max_value))

    def choose_mode(self) -> str:
        """
        Выбор режима: пример (e/E) или ручной ввод (всё остальное).

        Returns:
            MODE_EXAMPLE или MODE_MANUAL
        """
        answer = self._read_line(
            "Use the example (e) or enter matrices manually (m)? [e/m]: "
        ).strip()
        if answer[:1] in ("e", "E"):
            return MODE_EXAMPLE
        return MODE_MANUAL

    def read_matrix(self, name: str) -> Matrix:
        """
        Ввод матрицы: размеры, затем элементы построчно.

        Args:
            name: метка матрицы для приглашений ("A", "B")

        Returns:
            Заполненная матрица
        """
        settings = self.settings
        self.write(f"\n=== Input of matrix {name} ===\n")

        rows = self.read_int("Enter the number of rows: ", settings.dim_min, settings.dim_max)
        cols = self.read_int(
            "Enter the number of columns: ", settings.dim_min, settings.dim_max
        )

        matrix = Matrix(rows, cols)

        self.write("Enter the matrix elements row by row:\n")
        for i in range(rows):
            self.write(f"Row {i + 1}:\n")
            for j in range(cols):
                matrix[i, j] = self.read_float(
                    f"Element [{i + 1}][{j + 1}]: ",
                    -settings.value_limit,
                    settings.value_limit,
                )

        return matrix
