"""
Matrix — Прямоугольная матрица float64

Матрица хранит n_rows строк (Vector) одинаковой длины n_cols.
Строки и столбцы индексируются с нуля: первая строка имеет индекс 0,
третий столбец — индекс 2.

ИНВАРИАНТЫ:
1. Все строки одной длины — проверяется при построении (JaggedInputError)
2. Матрица владеет своими строками: на входе строки копируются,
   наружу отдаются только копии
3. Мутируют только set, set_row и swap_rows; остальные операции чистые
4. Матрица из нуля строк имеет n_cols = 0, если не создана через
   Matrix.zero(0, n_cols)
"""

from typing import Any, Iterable, Mapping, Optional, Union

from matrixcore.core.contracts.models import MatrixPayload
from matrixcore.core.contracts.validators import validate_matrix_payload
from matrixcore.core.domain.errors import DimensionMismatchError, JaggedInputError
from matrixcore.core.domain.vector import Column, Row, Vector, check_index


class Matrix:
    """
    Прямоугольная матрица со строками-векторами.

    Не потокобезопасна: set / set_row / swap_rows на одном экземпляре
    требуют внешней синхронизации.
    """

    __slots__ = ("_rows", "_n_cols")

    def __init__(self, rows: Iterable[Iterable[float]] = ()):
        """
        Args:
            rows: Строки матрицы (Vector или любые итерируемые числа).
                Каждая строка копируется.

        Raises:
            JaggedInputError: Если строки разной длины
        """
        rows_copy = [Vector(row) for row in rows]

        n_cols = len(rows_copy[0]) if rows_copy else 0
        for index, row in enumerate(rows_copy):
            if len(row) != n_cols:
                raise JaggedInputError(
                    f"Matrix does not support jagged rows: row {index} has length "
                    f"{len(row)}, expected {n_cols}"
                )

        self._rows: list[Vector] = rows_copy
        self._n_cols: int = n_cols

    @classmethod
    def zero(cls, n_rows: int, n_cols: int) -> "Matrix":
        """
        Нулевая матрица заданной формы.

        В отличие от Matrix([]), Matrix.zero(0, n_cols) сохраняет n_cols.

        Raises:
            ValueError: Если размерность отрицательная
        """
        if n_rows < 0 or n_cols < 0:
            raise ValueError(f"Matrix dimensions must be non-negative, got {n_rows}x{n_cols}")

        matrix = cls([[0.0] * n_cols for _ in range(n_rows)])
        matrix._n_cols = n_cols
        return matrix

    # -------------------------------------------------------------------------
    # Размеры и представление
    # -------------------------------------------------------------------------

    @property
    def n_rows(self) -> int:
        return len(self._rows)

    @property
    def n_cols(self) -> int:
        return self._n_cols

    @property
    def rows(self) -> list[Row]:
        """Копии всех строк."""
        return [row.copy() for row in self._rows]

    def size(self) -> tuple[int, int]:
        """Возвращает (число строк, число столбцов)."""
        return self.n_rows, self.n_cols

    def to_list(self) -> list[list[float]]:
        return [row.to_list() for row in self._rows]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix({self.n_rows}x{self.n_cols}, {self.to_list()!r})"

    def __str__(self) -> str:
        if not self._rows:
            return f"[] ({self.n_rows}x{self.n_cols})"
        return "\n".join(str(row) for row in self._rows)

    # -------------------------------------------------------------------------
    # Чистые операции
    # -------------------------------------------------------------------------

    def copy(self) -> "Matrix":
        """Глубокая копия: строки копии не разделяются с оригиналом."""
        matrix_copy = Matrix(self._rows)
        matrix_copy._n_cols = self._n_cols
        return matrix_copy

    def equals(self, other: "Matrix") -> bool:
        """
        Сравнение матриц: сначала размеры, затем построчно Vector.equals.

        Raises:
            TypeError: Если other не Matrix
        """
        if not isinstance(other, Matrix):
            raise TypeError(f"Cannot compare Matrix and {type(other).__name__}")

        if self.size() != other.size():
            return False

        return all(row.equals(other_row) for row, other_row in zip(self._rows, other._rows))

    def get_row(self, row: int) -> Row:
        """
        Копия строки с индексом row.

        Raises:
            IndexOutOfBoundsError: Если row вне [0, n_rows)
        """
        check_index(row, self.n_rows, "row index")
        return self._rows[row].copy()

    def get_column(self, col: int) -> Column:
        """
        Столбец с индексом col, собранный по одному элементу из каждой строки.

        Raises:
            IndexOutOfBoundsError: Если col вне [0, n_cols)
        """
        check_index(col, self.n_cols, "column index")
        return Column(row[col] for row in self._rows)

    def get(self, row: int, col: int) -> float:
        """
        Эквивалент m.rows[row][col] с проверкой границ.

        Raises:
            IndexOutOfBoundsError: Если row или col вне диапазона
        """
        check_index(row, self.n_rows, "row index")
        check_index(col, self.n_cols, "column index")
        return self._rows[row][col]

    def transpose(self) -> "Matrix":
        """
        Новая матрица, строки которой — столбцы исходной по порядку.

        Форма сохраняется и для вырожденных случаев: 0x3 → 3x0 → 0x3.
        """
        transposed = Matrix(self.get_column(col) for col in range(self.n_cols))
        transposed._n_cols = self.n_rows
        return transposed

    # -------------------------------------------------------------------------
    # Мутирующие операции
    # -------------------------------------------------------------------------

    def set(self, value: float, row: int, col: int) -> None:
        """
        Эквивалент m.rows[row][col] = value с проверкой границ.

        Raises:
            IndexOutOfBoundsError: Если row или col вне диапазона
        """
        check_index(row, self.n_rows, "row index")
        check_index(col, self.n_cols, "column index")
        self._rows[row][col] = value

    def set_row(self, row: Iterable[float], index: int) -> None:
        """
        Замена строки index копией row.

        Raises:
            IndexOutOfBoundsError: Если index вне [0, n_rows)
            DimensionMismatchError: Если длина row не равна n_cols
        """
        check_index(index, self.n_rows, "row index")

        new_row = Vector(row)
        if len(new_row) != self.n_cols:
            raise DimensionMismatchError(
                f"Row length {len(new_row)} does not match matrix width {self.n_cols}"
            )

        self._rows[index] = new_row

    def swap_rows(self, r1: int, r2: int) -> None:
        """
        Обмен двух строк местами (in-place).

        При r1 == r2 ничего не делает.

        Raises:
            IndexOutOfBoundsError: Если хотя бы один индекс вне [0, n_rows)
        """
        check_index(r1, self.n_rows, "row index")
        check_index(r2, self.n_rows, "row index")

        if r1 == r2:
            return

        self._rows[r1], self._rows[r2] = self._rows[r2], self._rows[r1]

    # -------------------------------------------------------------------------
    # Приведение к ступенчатому виду
    # -------------------------------------------------------------------------

    def gaussian_reduce(self) -> "Matrix":
        """
        Ступенчатый вид (row-echelon form) методом Гаусса.

        См. matrixcore.core.math.reduction.gaussian_reduce.
        """
        from matrixcore.core.math.reduction import gaussian_reduce

        return gaussian_reduce(self)

    # -------------------------------------------------------------------------
    # Сериализация
    # -------------------------------------------------------------------------

    def to_payload(self) -> MatrixPayload:
        """Pydantic-представление матрицы (форма + строки)."""
        return MatrixPayload(n_rows=self.n_rows, n_cols=self.n_cols, rows=self.to_list())

    @classmethod
    def from_payload(cls, payload: Union[MatrixPayload, Mapping[str, Any]]) -> "Matrix":
        """
        Построение матрицы из MatrixPayload или словаря той же структуры.

        Словарь сначала проверяется по JSON Schema (лишние ключи запрещены),
        затем по модели (согласованность формы и строк).

        Raises:
            jsonschema.ValidationError: Если словарь не соответствует matrix.json
            pydantic.ValidationError: Если словарь не проходит валидацию модели
        """
        if not isinstance(payload, MatrixPayload):
            validate_matrix_payload(payload)
            payload = MatrixPayload.model_validate(dict(payload))

        if payload.n_rows == 0:
            return cls.zero(0, payload.n_cols)

        return cls(payload.rows)


# =============================================================================
# ФУНКЦИОНАЛЬНЫЙ ИНТЕРФЕЙС
# =============================================================================


def new_matrix(rows: Optional[Iterable[Iterable[float]]] = None) -> Matrix:
    """
    Построение матрицы из строк.

    Пустой набор строк даёт матрицу 0x0. Для матрицы из нуля строк
    с ненулевым числом столбцов используйте new_zero_matrix(0, n_cols).

    Raises:
        JaggedInputError: Если строки разной длины
    """
    return Matrix(rows if rows is not None else ())


def new_zero_matrix(n_rows: int, n_cols: int) -> Matrix:
    """Нулевая матрица n_rows x n_cols."""
    return Matrix.zero(n_rows, n_cols)
