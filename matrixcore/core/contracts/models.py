"""
MatrixPayload — Pydantic модель словарного представления матрицы

Immutable Pydantic модель (frozen=True) с явно заявленной формой.
Используется как валидатор на этапе построения: отклоняет наборы строк
разной длины и расхождение строк с заявленной формой.
"""

from pydantic import BaseModel, Field, model_validator


class MatrixPayload(BaseModel):
    """
    Словарное представление матрицы.

    NaN и бесконечности допустимы как значения элементов.
    """

    n_rows: int = Field(..., ge=0, description="Число строк")
    n_cols: int = Field(..., ge=0, description="Число столбцов")
    rows: list[list[float]] = Field(default_factory=list, description="Строки матрицы")

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_shape(self) -> "MatrixPayload":
        """Строки должны совпадать с заявленной формой n_rows x n_cols."""
        if len(self.rows) != self.n_rows:
            raise ValueError(
                f"rows has {len(self.rows)} entries, but n_rows is {self.n_rows}"
            )

        for index, row in enumerate(self.rows):
            if len(row) != self.n_cols:
                raise ValueError(
                    f"row {index} has length {len(row)}, but n_cols is {self.n_cols} "
                    f"(jagged rows are not supported)"
                )

        return self

    def shape(self) -> tuple[int, int]:
        return self.n_rows, self.n_cols
