"""
Vector — Вектор фиксированной длины над float64

Упорядоченная последовательность скаляров фиксированной длины.
Корректно обрабатывает math.inf и NaN: арифметика следует стандарту
IEEE-754 (inf * 0 = nan, inf * -1 = -inf), а сравнение — модели
равенства из matrixcore.core.math.comparison.

ИНВАРИАНТЫ:
1. Длина неизменна после создания
2. copy / scalar_mult / add возвращают новый вектор, исходный не меняется
3. Копия — полностью независимый экземпляр (value-семантика)
"""

import math
from typing import Iterable, Iterator

from matrixcore.core.domain.errors import DimensionMismatchError, IndexOutOfBoundsError
from matrixcore.core.math.comparison import equals


def check_index(index: int, length: int, name: str = "index") -> None:
    """
    Проверка индекса на попадание в [0, length).

    Raises:
        TypeError: Если index не целое число
        IndexOutOfBoundsError: Если index < 0 или index >= length
    """
    if isinstance(index, bool) or not isinstance(index, int):
        raise TypeError(f"{name} must be an int, got {type(index).__name__}")

    if index < 0 or index >= length:
        raise IndexOutOfBoundsError(f"{name} {index} is outside of bounds [0, {length})")


def _check_operand(other: object, operation: str) -> None:
    if not isinstance(other, Vector):
        raise TypeError(f"Cannot {operation} Vector and {type(other).__name__}")


class Vector:
    """
    Математический вектор со скалярами float64.

    Поддерживает len(), итерацию и индексирование. Присваивание
    элемента по индексу допустимо, но длину не меняет.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[float] = ()):
        self._values: list[float] = [float(v) for v in values]

    # -------------------------------------------------------------------------
    # Протокол последовательности
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[float]:
        return iter(self._values)

    def __getitem__(self, index: int) -> float:
        check_index(index, len(self._values))
        return self._values[index]

    def __setitem__(self, index: int, value: float) -> None:
        check_index(index, len(self._values))
        self._values[index] = float(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.equals(other)

    # Равенство по epsilon не транзитивно
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Vector({self._values!r})"

    def __str__(self) -> str:
        return "[" + " ".join(repr(v) for v in self._values) + "]"

    # -------------------------------------------------------------------------
    # Операции
    # -------------------------------------------------------------------------

    def copy(self) -> "Vector":
        """Независимая копия вектора."""
        return Vector(self._values)

    def to_list(self) -> list[float]:
        return list(self._values)

    def scalar_mult(self, c: float) -> "Vector":
        """
        Поэлементное умножение на скаляр.

        Без насыщения: inf * 0 = nan, inf * -1 = -inf.

        Args:
            c: Множитель

        Returns:
            Новый вектор той же длины
        """
        return Vector(v * c for v in self._values)

    def equals(self, other: "Vector") -> bool:
        """
        Поэлементное сравнение с DEFAULT_EPSILON.

        Вектора разной длины никогда не равны.

        Raises:
            TypeError: Если other не Vector
        """
        _check_operand(other, "compare")
        if len(self) != len(other):
            return False

        return all(equals(a, b) for a, b in zip(self._values, other._values))

    def magnitude(self) -> float:
        """
        Евклидова норма: sqrt(sum(v_i^2)).

        Для пустого вектора возвращает 0.0.
        """
        sum_of_squares = 0.0
        for v in self._values:
            sum_of_squares += v * v
        return math.sqrt(sum_of_squares)

    def add(self, other: "Vector") -> "Vector":
        """
        Поэлементная сумма.

        Raises:
            TypeError: Если other не Vector
            DimensionMismatchError: Если длины различаются
        """
        _check_operand(other, "add")
        if len(self) != len(other):
            raise DimensionMismatchError(
                f"Cannot add vectors of different length: {len(self)} != {len(other)}"
            )

        return Vector(a + b for a, b in zip(self._values, other._values))

    def dot(self, other: "Vector") -> float:
        """
        Скалярное произведение: sum(a_i * b_i).

        Raises:
            TypeError: Если other не Vector
            DimensionMismatchError: Если длины различаются
        """
        _check_operand(other, "take dot product of")
        if len(self) != len(other):
            raise DimensionMismatchError(
                f"Cannot take dot product of vectors of different length: "
                f"{len(self)} != {len(other)}"
            )

        total = 0.0
        for a, b in zip(self._values, other._values):
            total += a * b
        return total


# Строка и столбец матрицы — тот же вектор
Row = Vector
Column = Vector
