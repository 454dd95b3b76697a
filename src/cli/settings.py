"""
ConsoleSettings - Настройки консольного ввода

Immutable Pydantic модель с ограничениями, которые консоль применяет
к вводу до передачи значений в ядро.
"""

from pydantic import BaseModel, Field, ValidationInfo, field_validator


class ConsoleSettings(BaseModel):
    """
    Ограничения ввода и коды завершения.

    Immutable модель (frozen=True).
    """

    # Размеры матриц
    dim_min: int = Field(default=1, ge=1, description="Минимальное число строк/столбцов")
    dim_max: int = Field(default=100, ge=1, description="Максимальное число строк/столбцов")

    # Значения элементов: [-value_limit, value_limit]
    value_limit: float = Field(
        default=1e100, gt=0, allow_inf_nan=False, description="Максимальный модуль элемента"
    )

    # Коды завершения
    failure_exit_code: int = Field(
        default=1, ge=1, le=255, description="Код завершения при ошибке ручного ввода"
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("dim_max")
    @classmethod
    def validate_dim_range(cls, v: int, info: ValidationInfo) -> int:
        """Проверка, что dim_max не меньше dim_min"""
        if "dim_min" in info.data:
            dim_min = info.data["dim_min"]
            if v < dim_min:
                raise ValueError(f"dim_max {v} must be >= dim_min {dim_min}")
        return v
