"""
Консольный интерфейс умножения матриц.

Тонкий слой ввода/вывода поверх ядра: выбор режима, ввод размеров
и элементов с повторным запросом, вывод результата и кодов завершения.
"""

from src.cli.app import main
from src.cli.console import MODE_EXAMPLE, MODE_MANUAL, Console
from src.cli.settings import ConsoleSettings

__all__ = [
    "main",
    "Console",
    "ConsoleSettings",
    "MODE_EXAMPLE",
    "MODE_MANUAL",
]
