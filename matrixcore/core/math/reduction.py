"""
Gaussian Reduction — Приведение матрицы к ступенчатому виду

Метод Гаусса с частичным выбором опорного элемента ("первый ненулевой"):
- Поиск опорной строки в текущем столбце, начиная с текущей строки
- Перестановка строк, нормировка опорной строки (опорный элемент → 1)
- Исключение элементов текущего столбца во всех строках ниже опорной

Результат — row-echelon form, а не reduced row-echelon form:
элементы выше опорных не обнуляются.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Входная матрица не изменяется (работа идёт на копии)
2. gaussian_reduce никогда не выбрасывает исключений на корректной матрице
3. Столбец без опорного элемента пропускается, строка при этом НЕ продвигается
4. Когда столбцы закончились, оставшиеся строки не изменяются
5. "Ноль" определяется через is_zero с epsilon из ReductionConfig

СЛОЖНОСТЬ:
    O(n_rows * n_cols) просмотров столбцов, O(n_rows^2 * n_cols) на исключение
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from matrixcore.core.math.comparison import DEFAULT_EPSILON, is_zero, validate_epsilon

if TYPE_CHECKING:
    from matrixcore.core.domain.matrix import Matrix

logger = logging.getLogger(__name__)


# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================


@dataclass(frozen=True)
class ReductionConfig:
    """Конфигурация приведения к ступенчатому виду.

    epsilon — толерантность, ниже которой элемент считается нулём
    при поиске опорного элемента. По умолчанию DEFAULT_EPSILON (1e-10).
    """

    epsilon: float = DEFAULT_EPSILON

    def __post_init__(self) -> None:
        validate_epsilon(self.epsilon)


@dataclass(frozen=True)
class ReductionStep:
    """Один шаг метода Гаусса (для диагностики).

    pivot_row и pivot_value равны None, если столбец column
    пропущен из-за отсутствия опорного элемента.
    """

    row: int
    column: int
    pivot_row: Optional[int]
    pivot_value: Optional[float]

    @property
    def skipped(self) -> bool:
        return self.pivot_row is None


# =============================================================================
# ПОИСК ОПОРНОГО ЭЛЕМЕНТА
# =============================================================================


def find_pivot_row(
    matrix: "Matrix",
    start_row: int,
    column: int,
    epsilon: float = DEFAULT_EPSILON,
) -> Optional[int]:
    """
    Первая строка >= start_row с ненулевым элементом в столбце column.

    Args:
        matrix: Матрица
        start_row: Строка, с которой начинается поиск
        column: Столбец поиска
        epsilon: Толерантность для сравнения с нулём

    Returns:
        Индекс опорной строки или None, если все элементы нулевые
    """
    values = matrix.get_column(column)

    for index in range(start_row, matrix.n_rows):
        if not is_zero(values[index], epsilon):
            return index

    return None


# =============================================================================
# МЕТОД ГАУССА
# =============================================================================


def _reduce(
    matrix: "Matrix",
    config: ReductionConfig,
    steps: Optional[list[ReductionStep]] = None,
) -> "Matrix":
    reduced = matrix.copy()
    n_rows, n_cols = reduced.size()

    if n_rows == 0 or n_cols == 0:
        return reduced

    current_column = 0
    for r in range(n_rows):
        # Столбец без опорного элемента пропускаем, оставаясь на строке r
        pivot_row = None
        while current_column < n_cols:
            pivot_row = find_pivot_row(reduced, r, current_column, config.epsilon)
            if pivot_row is not None:
                break

            logger.debug(f"No pivot in column {current_column} from row {r}, skipping column")
            if steps is not None:
                steps.append(ReductionStep(r, current_column, None, None))
            current_column += 1

        if pivot_row is None:
            logger.debug(f"Columns exhausted at row {r}, remaining rows left unchanged")
            break

        reduced.swap_rows(r, pivot_row)

        pivot_value = reduced.get(r, current_column)
        logger.debug(
            f"Pivot {pivot_value!r} at row {pivot_row}, column {current_column} -> row {r}"
        )
        if steps is not None:
            steps.append(ReductionStep(r, current_column, pivot_row, pivot_value))

        # Нормировка: опорный элемент становится 1.0
        reduced.set_row(reduced.get_row(r).scalar_mult(1.0 / pivot_value), r)

        # Исключение столбца во всех строках ниже опорной
        pivot_vector = reduced.get_row(r)
        normalized_pivot = pivot_vector[current_column]
        for r2 in range(r + 1, n_rows):
            negation_factor = -reduced.get(r2, current_column) / normalized_pivot
            negation_row = pivot_vector.scalar_mult(negation_factor)
            reduced.set_row(reduced.get_row(r2).add(negation_row), r2)

        current_column += 1

    logger.debug(f"Reduced {n_rows}x{n_cols} matrix to row-echelon form")
    return reduced


def gaussian_reduce(matrix: "Matrix", config: Optional[ReductionConfig] = None) -> "Matrix":
    """
    Приведение матрицы к ступенчатому виду методом Гаусса.

    Алгоритм (на копии матрицы):
        1. Пустая матрица (0 строк или 0 столбцов) возвращается как есть
        2. Для каждой строки r, начиная со столбца current_column:
           a. Ищем первую строку >= r с ненулевым элементом в столбце
           b. Нет такой — current_column += 1 и повторяем для той же r
           c. Меняем строку r с опорной
           d. Делим строку r на опорный элемент
           e. Вычитаем кратное строки r из всех строк ниже
           f. current_column += 1
        3. Возвращаем копию

    NaN и бесконечности в опорном элементе распространяются по строке
    согласно стандартной арифметике float.

    Args:
        matrix: Исходная матрица (не изменяется)
        config: Конфигурация (default: ReductionConfig())

    Returns:
        Новая матрица в ступенчатом виде

    Examples:
        >>> from matrixcore import Matrix
        >>> gaussian_reduce(Matrix([[2.0, -4.0, 1.5], [6.0, -4.0, 0.0]])).to_list()
        [[1.0, -2.0, 0.75], [0.0, 1.0, -0.5625]]
    """
    return _reduce(matrix, config or ReductionConfig())


def gaussian_reduce_steps(
    matrix: "Matrix",
    config: Optional[ReductionConfig] = None,
) -> tuple["Matrix", list[ReductionStep]]:
    """
    То же, что gaussian_reduce, но дополнительно возвращает журнал шагов.

    Returns:
        (матрица в ступенчатом виде, список ReductionStep по порядку)
    """
    steps: list[ReductionStep] = []
    reduced = _reduce(matrix, config or ReductionConfig(), steps)
    return reduced, steps
