"""
Иерархия исключений matrixcore.

Все ошибки детерминированы и исправляются вызывающим кодом
(корректные индексы или формы). Повторов внутри библиотеки нет.
"""


class MatrixError(Exception):
    """Базовое исключение для всех ошибок матрично-векторной алгебры."""

    pass


class DimensionMismatchError(MatrixError, ValueError):
    """
    Несовпадение длин операндов.

    Возникает при Vector.add / Vector.dot на векторах разной длины
    и при Matrix.set_row со строкой неверной длины.
    """

    pass


class JaggedInputError(DimensionMismatchError):
    """
    Строки разной длины при построении матрицы.

    Матрица всегда прямоугольная: вместо усечения или дополнения
    строк построение отклоняется целиком.
    """

    pass


class IndexOutOfBoundsError(MatrixError, IndexError):
    """
    Индекс вне диапазона [0, размерность).

    Отрицательные индексы также отклоняются (без Python-семантики
    отсчёта с конца).
    """

    pass
