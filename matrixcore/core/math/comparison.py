"""
Scalar Comparison — Epsilon/NaN-aware сравнение скаляров

Модуль определяет модель равенства float, на которой построены
Vector.equals, Matrix.equals и выбор опорного элемента в gaussian_reduce:
- Сравнение по абсолютной толерантности |a - b| <= epsilon
- NaN равен NaN (намеренное отступление от IEEE-754)
- Бесконечности одного знака равны друг другу

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. equals_with_epsilon — тотальная функция: определена для любых float
2. NaN == NaN → True; NaN == число → False
3. +Inf == +Inf и -Inf == -Inf → True, хотя Inf - Inf = NaN
4. Все операции чистые и детерминированные
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Толерантность по умолчанию для сравнения скаляров.
# 2^-32 ~= 2.33e-10, поэтому 1e-10 — разумная практическая точность float64.
DEFAULT_EPSILON: Final[float] = 1e-10


# =============================================================================
# СРАВНЕНИЕ СКАЛЯРОВ
# =============================================================================


def equals_with_epsilon(a: float, b: float, epsilon: float) -> bool:
    """
    Сравнение двух скаляров с заданной толерантностью.

    Алгоритм:
        1. Оба NaN → True; ровно один NaN → False
        2. Обе бесконечности одного знака → True
        3. Иначе → abs(a - b) <= epsilon (бесконечность против
           конечного числа даёт inf и равна только при epsilon = inf)

    Args:
        a: Первое значение
        b: Второе значение
        epsilon: Абсолютная толерантность (не валидируется)

    Returns:
        True если значения считаются равными

    Examples:
        >>> equals_with_epsilon(1.0, 1.05, 0.1)
        True
        >>> equals_with_epsilon(float('nan'), float('nan'), 0.0)
        True
        >>> equals_with_epsilon(float('inf'), float('inf'), 1e-10)
        True
        >>> equals_with_epsilon(float('inf'), float('-inf'), 1e-10)
        False
    """
    if math.isnan(a):
        return math.isnan(b)

    # a — число (возможно бесконечное)
    if math.isnan(b):
        return False

    # Inf - Inf даёт NaN
    if math.isinf(a) and a == b:
        return True

    return abs(a - b) <= epsilon


def equals(a: float, b: float) -> bool:
    """
    Сравнение двух скаляров с DEFAULT_EPSILON.

    Examples:
        >>> equals(1.0, 1.0 + 1e-12)
        True
        >>> equals(float('nan'), 0.0)
        False
    """
    return equals_with_epsilon(a, b, DEFAULT_EPSILON)


def is_zero(value: float, epsilon: float = DEFAULT_EPSILON) -> bool:
    """
    Проверка, равно ли значение нулю с учётом толерантности.

    NaN нулём не считается никогда, бесконечность — при конечном epsilon.
    """
    return equals_with_epsilon(value, 0.0, epsilon)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_epsilon(epsilon: float) -> None:
    """
    Валидация толерантности, задаваемой вызывающим кодом.

    Args:
        epsilon: Проверяемая толерантность

    Raises:
        ValueError: Если epsilon отрицательный или NaN
    """
    if math.isnan(epsilon):
        raise ValueError(f"epsilon must not be NaN, got {epsilon}")

    if epsilon < 0:
        raise ValueError(f"epsilon must be non-negative, got {epsilon}")
