"""
Matrix Multiplication CLI - точка входа

Два режима работы:
- example: умножение встроенных матриц 2x3 и 3x2; любые ошибки ядра
  выводятся в stderr, процесс завершается с кодом 0
- manual: ввод матриц с консоли; ошибки ядра пробрасываются наверх,
  выводятся с префиксом вида ошибки, код завершения failure_exit_code

Коды завершения:
    0   - успех (или восстановленная ошибка в режиме example)
    1   - ошибка в режиме manual (настраивается)
    130 - прерывание пользователем или конец ввода
"""

import argparse
import contextlib
import logging
import sys
from collections.abc import Callable, Sequence
from typing import Final, TextIO

from pydantic import ValidationError

from src.cli.console import MODE_EXAMPLE, MODE_MANUAL, Console
from src.cli.settings import ConsoleSettings
from src.core.domain.matrix import Matrix
from src.core.errors import MatrixError

logger = logging.getLogger(__name__)

EXIT_OK: Final[int] = 0
EXIT_INTERRUPTED: Final[int] = 130

EXAMPLE_A: Final[tuple[tuple[float, ...], ...]] = ((1, 2, 3), (4, 5, 6))
EXAMPLE_B: Final[tuple[tuple[float, ...], ...]] = ((7, 8), (9, 10), (11, 12))

# Порядок важен: первый совпавший тип определяет префикс
ERROR_PREFIXES: Final[tuple[tuple[type[Exception], str], ...]] = (
    (ValueError, "Argument error"),
    (IndexError, "Range error"),
    (OverflowError, "Overflow error"),
    (RuntimeError, "Runtime error"),
)


def error_prefix(error: Exception) -> str:
    """Префикс сообщения по виду ошибки ядра."""
    for error_type, prefix in ERROR_PREFIXES:
        if isinstance(error, error_type):
            return prefix
    return "Unknown error"


def run_example(console: Console, errors: TextIO) -> int:
    """
    Демонстрация на встроенных матрицах.

    Любые ошибки перехватываются здесь же и не прерывают программу.
    """
    console.write("\n=== Matrix multiplication example ===\n")

    try:
        a = Matrix(2, 3, EXAMPLE_A)
        b = Matrix(3, 2, EXAMPLE_B)

        console.write("Matrix A:\n")
        console.write(a.render())

        console.write("\nMatrix B:\n")
        console.write(b.render())

        c = Matrix.multiply(a, b)

        console.write("\nResult of A * B:\n")
        console.write(c.render())
    except Exception as e:
        print(f"Error: {e}", file=errors)

    return EXIT_OK


def run_manual(console: Console) -> Matrix:
    """
    Ручной ввод двух матриц и их умножение.

    Returns:
        Результат A * B

    Raises:
        MatrixError: любые ошибки ядра пробрасываются без изменений
        EOFError: если ввод закончился раньше времени
    """
    a = console.read_matrix("A")
    b = console.read_matrix("B")

    console.write("\n=== Entered matrices ===\n")
    console.write("Matrix A:\n")
    console.write(a.render())

    console.write("\nMatrix B:\n")
    console.write(b.render())

    console.write("\n=== Matrix multiplication ===\n")
    c = a * b

    console.write("Result of A * B:\n")
    console.write(c.render())
    return c


def build_parser() -> argparse.ArgumentParser:
    defaults = ConsoleSettings()
    parser = argparse.ArgumentParser(
        prog="matmul",
        description="Multiply two matrices with overflow-checked arithmetic.",
    )
    parser.add_argument(
        "--mode",
        choices=[MODE_EXAMPLE, MODE_MANUAL],
        default=None,
        help="Skip the interactive mode prompt.",
    )
    parser.add_argument(
        "--max-dim",
        type=int,
        default=defaults.dim_max,
        help=f"Maximum number of rows/columns (default: {defaults.dim_max}).",
    )
    parser.add_argument(
        "--value-limit",
        type=float,
        default=defaults.value_limit,
        help=f"Maximum absolute element value (default: {defaults.value_limit:g}).",
    )
    parser.add_argument(
        "--pause",
        action="store_true",
        help="Wait for Enter before exiting.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


def main(
    argv: Sequence[str] | None = None,
    input_func: Callable[[], str] = input,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """
    Запуск программы.

    Args:
        argv: аргументы командной строки (default: sys.argv[1:])
        input_func: источник строк ввода
        stdout: поток вывода (default: sys.stdout)
        stderr: поток диагностики (default: sys.stderr)

    Returns:
        Код завершения
    """
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = ConsoleSettings(dim_max=args.max_dim, value_limit=args.value_limit)
    except ValidationError as e:
        parser.error(f"invalid settings: {e}")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        stream=stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    console = Console(settings=settings, input_func=input_func, output=stdout)
    console.write("Matrix multiplication program\n")

    try:
        mode = args.mode or console.choose_mode()
        logger.debug("Selected mode: %s", mode)

        if mode == MODE_EXAMPLE:
            exit_code = run_example(console, stderr)
        else:
            try:
                run_manual(console)
            except MatrixError as e:
                print(f"{error_prefix(e)}: {e}", file=stderr)
                return settings.failure_exit_code
            exit_code = EXIT_OK
    except (EOFError, KeyboardInterrupt):
        print("\nInput interrupted.", file=stderr)
        return EXIT_INTERRUPTED

    if args.pause:
        console.write("\nPress Enter to exit...")
        with contextlib.suppress(EOFError):
            input_func()

    return exit_code
