"""
Matrix - Плотная двумерная матрица с контролем переполнения при умножении

Матрица владеет своим хранилищем (список строк float, row-major).
Изменение возможно только через индексированное присваивание;
умножение всегда создаёт новую матрицу и не изменяет операнды.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. rows >= 1 и cols >= 1 на всё время жизни экземпляра
2. Ровно rows строк, каждая ровно из cols элементов
3. Доступ к элементу только для 0 <= i < rows, 0 <= j < cols
   (отрицательные индексы - ошибка, без wraparound)
4. multiply() обходит (i, j) построчно, k по возрастанию
"""

import logging
from collections.abc import Sequence

from src.core.errors import (
    DimensionMismatch,
    IndexOutOfRange,
    InvalidDimensions,
    MatrixError,
    MultiplicationFailed,
    ShapeMismatch,
)
from src.core.math.numerical_safeguards import (
    checked_accumulate,
    checked_product,
    check_result_size,
)

logger = logging.getLogger(__name__)


class Matrix:
    """
    Плотная матрица rows x cols из чисел двойной точности.

    Examples:
        >>> a = Matrix(2, 3, [[1, 2, 3], [4, 5, 6]])
        >>> b = Matrix(3, 2, [[7, 8], [9, 10], [11, 12]])
        >>> (a * b).to_list()
        [[58.0, 64.0], [139.0, 154.0]]
    """

    __slots__ = ("_rows", "_cols", "_data")

    def __init__(
        self,
        rows: int,
        cols: int,
        values: Sequence[Sequence[float]] | None = None,
    ):
        """
        Args:
            rows: Количество строк (>= 1)
            cols: Количество столбцов (>= 1)
            values: Сетка значений rows x cols; если не задана - нули

        Raises:
            InvalidDimensions: Если rows < 1 или cols < 1
            ShapeMismatch: Если values не совпадает с формой rows x cols
        """
        if rows < 1 or cols < 1:
            raise InvalidDimensions(
                f"Matrix dimensions must be positive, got {rows}x{cols}"
            )

        self._rows = rows
        self._cols = cols

        if values is None:
            self._data = [[0.0] * cols for _ in range(rows)]
            return

        if len(values) != rows:
            raise ShapeMismatch(
                f"Shape mismatch on initialization: expected {rows} rows, "
                f"got {len(values)}"
            )
        # Проверяется каждая строка, а не только первая
        for i, row in enumerate(values):
            if len(row) != cols:
                raise ShapeMismatch(
                    f"Shape mismatch on initialization: row {i} has "
                    f"{len(row)} columns, expected {cols}"
                )

        # Копия: матрица не разделяет хранилище с вызывающим кодом
        self._data = [[float(v) for v in row] for row in values]

    # -------------------------------------------------------------------------
    # Альтернативные конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_rows(cls, values: Sequence[Sequence[float]]) -> "Matrix":
        """Матрица с формой, выведенной из сетки значений."""
        rows = len(values)
        cols = len(values[0]) if rows else 0
        return cls(rows, cols, values)

    @classmethod
    def identity(cls, size: int) -> "Matrix":
        """Единичная матрица size x size."""
        result = cls(size, size)
        for i in range(size):
            result._data[i][i] = 1.0
        return result

    # -------------------------------------------------------------------------
    # Размеры
    # -------------------------------------------------------------------------

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        return self._rows, self._cols

    # -------------------------------------------------------------------------
    # Доступ к элементам
    # -------------------------------------------------------------------------

    def _check_index(self, i: int, j: int) -> None:
        if not (0 <= i < self._rows and 0 <= j < self._cols):
            raise IndexOutOfRange(
                f"Index ({i}, {j}) is out of matrix bounds "
                f"{self._rows}x{self._cols}"
            )

    def get(self, i: int, j: int) -> float:
        """
        Элемент в строке i, столбце j.

        Raises:
            IndexOutOfRange: Если индекс вне [0, rows) x [0, cols)
        """
        self._check_index(i, j)
        return self._data[i][j]

    def set(self, i: int, j: int, value: float) -> None:
        """
        Присваивание элемента в строке i, столбце j.

        Raises:
            IndexOutOfRange: Если индекс вне [0, rows) x [0, cols)
        """
        self._check_index(i, j)
        self._data[i][j] = float(value)

    def __getitem__(self, index: tuple[int, int]) -> float:
        i, j = index
        return self.get(i, j)

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        i, j = index
        self.set(i, j, value)

    def to_list(self) -> list[list[float]]:
        """Копия элементов в виде списка строк."""
        return [list(row) for row in self._data]

    # -------------------------------------------------------------------------
    # Отображение
    # -------------------------------------------------------------------------

    def render(self) -> str:
        """
        Текстовое представление матрицы.

        Заголовок с размерами, затем по одной строке на строку матрицы;
        каждый элемент (формат %g) завершается символом табуляции:

            Matrix 1x2:
            1.5<TAB>2<TAB>
        """
        lines = [f"Matrix {self._rows}x{self._cols}:"]
        for row in self._data:
            lines.append("".join(f"{value:g}\t" for value in row))
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Matrix({self._rows}, {self._cols}, {self._data!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self._data == other._data

    # Изменяемый объект
    __hash__ = None

    # -------------------------------------------------------------------------
    # Умножение
    # -------------------------------------------------------------------------

    @staticmethod
    def multiply(a: "Matrix", b: "Matrix") -> "Matrix":
        """
        Произведение C = A * B с контролем переполнения.

        Порядок проверок:
        1. a.cols == b.rows, иначе DimensionMismatch
        2. m * p <= SIZE_MAX, иначе ResultSizeOverflow (до выделения памяти)
        3. Каждое произведение A[i][k] * B[k][j] - checked_product
        4. Каждое накопление суммы - checked_accumulate
        5. Ошибки шагов 3-4 оборачиваются в MultiplicationFailed

        Args:
            a: Матрица m x n
            b: Матрица n x p

        Returns:
            Новая матрица m x p

        Raises:
            DimensionMismatch: Если a.cols != b.rows
            ResultSizeOverflow: Если m * p переполняет SIZE_MAX
            MultiplicationFailed: При переполнении внутри цикла
        """
        if a.cols != b.rows:
            raise DimensionMismatch(
                f"The number of columns of the first matrix ({a.cols}) must "
                f"equal the number of rows of the second matrix ({b.rows})"
            )

        m, n, p = a.rows, a.cols, b.cols
        check_result_size(m, p)

        logger.debug("Multiplying %dx%d by %dx%d", m, n, n, p)

        result = Matrix(m, p)
        a_data, b_data, c_data = a._data, b._data, result._data

        try:
            for i in range(m):
                for j in range(p):
                    total = 0.0
                    for k in range(n):
                        product = checked_product(a_data[i][k], b_data[k][j])
                        total = checked_accumulate(total, product)
                    c_data[i][j] = total
        except MatrixError as e:
            logger.warning("Multiplication of %dx%d by %dx%d failed: %s", m, n, n, p, e)
            raise MultiplicationFailed(e) from e

        return result

    def __mul__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return Matrix.multiply(self, other)

    __matmul__ = __mul__


multiply = Matrix.multiply
