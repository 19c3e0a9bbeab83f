"""
Тесты для Gaussian Reduction

Проверяет:
1. Эталонные приведения к ступенчатому виду
2. Пропуск столбца без опорного элемента (строка не продвигается)
3. Вырожденные формы: 0x0, 0xN, Nx0, больше строк/столбцов
4. Распространение NaN/Inf через опорный элемент
5. Конфигурацию epsilon, журнал шагов и логирование
"""

import dataclasses
import logging

import pytest

from matrixcore.core.domain import Matrix
from matrixcore.core.math.reduction import (
    ReductionConfig,
    ReductionStep,
    find_pivot_row,
    gaussian_reduce,
    gaussian_reduce_steps,
)

NAN = float("nan")
INF = float("inf")


def assert_row_echelon(m: Matrix) -> None:
    """Опорные элементы равны 1, сдвигаются вправо, под ними нули."""
    last_pivot_col = -1
    for r in range(m.n_rows):
        row = m.get_row(r)
        nonzero = [c for c in range(m.n_cols) if abs(row[c]) > 1e-10]
        if not nonzero:
            continue
        pivot_col = nonzero[0]
        assert pivot_col > last_pivot_col
        assert row[pivot_col] == pytest.approx(1.0)
        for r2 in range(r + 1, m.n_rows):
            assert abs(m.get(r2, pivot_col)) <= 1e-10
        last_pivot_col = pivot_col


# =============================================================================
# ЭТАЛОННЫЕ ПРИВЕДЕНИЯ
# =============================================================================


class TestReferenceReductions:
    """Известные результаты приведения"""

    def test_single_row_unchanged(self) -> None:
        m = Matrix([[1.0, 2.5, -3.0]])
        assert gaussian_reduce(m).equals(m)

    def test_two_by_three(self) -> None:
        m = Matrix([[2.0, -4.0, 1.5], [6.0, -4.0, 0.0]])
        expected = Matrix([[1.0, -2.0, 0.75], [0.0, 1.0, -0.5625]])
        assert gaussian_reduce(m).equals(expected)

    def test_duplicate_and_zero_rows(self) -> None:
        m = Matrix([[1, 2, 3], [1, 2, 3], [2, 2, 4]])
        expected = Matrix([[1, 2, 3], [0, 1, 1], [0, 0, 0]])
        assert gaussian_reduce(m).equals(expected)

    def test_full_rank_square(self) -> None:
        m = Matrix([[2, 1, -1], [-3, -1, 2], [-2, 1, 2]])
        expected = Matrix([[1, 0.5, -0.5], [0, 1, 1], [0, 0, 1]])
        result = gaussian_reduce(m)
        assert result.equals(expected)
        assert_row_echelon(result)

    def test_pivot_found_below_is_swapped_up(self) -> None:
        m = Matrix([[0, 2], [3, 6]])
        expected = Matrix([[1, 2], [0, 1]])
        assert gaussian_reduce(m).equals(expected)

    def test_entries_above_pivot_are_kept(self) -> None:
        """Ступенчатый, а не приведённый ступенчатый вид"""
        result = gaussian_reduce(Matrix([[1, 1], [1, 2]]))
        assert result.equals(Matrix([[1, 1], [0, 1]]))
        assert result.get(0, 1) == pytest.approx(1.0)

    def test_identity_unchanged(self) -> None:
        identity = Matrix([[1, 0, 0], [0, 1, 0], [0, 0, 1]])
        assert gaussian_reduce(identity).equals(identity)

    def test_input_untouched(self) -> None:
        m = Matrix([[2.0, -4.0, 1.5], [6.0, -4.0, 0.0]])
        before = m.copy()
        gaussian_reduce(m)
        assert m.equals(before)

    def test_result_is_new_instance(self) -> None:
        m = Matrix([[1.0, 0.0], [0.0, 1.0]])
        result = gaussian_reduce(m)
        assert result is not m
        result.set(9.0, 0, 0)
        assert m.get(0, 0) == 1.0

    def test_method_delegates(self) -> None:
        m = Matrix([[1, 2, 3], [1, 2, 3], [2, 2, 4]])
        assert m.gaussian_reduce().equals(gaussian_reduce(m))


# =============================================================================
# ПРОПУСК СТОЛБЦОВ
# =============================================================================


class TestColumnSkipping:
    """Столбец без опорного элемента пропускается для той же строки"""

    def test_skip_column_retries_same_row(self) -> None:
        """
        Первый столбец нулевой: строка 0 получает опорный элемент
        из столбца 1, а строка 1 обнуляется.
        """
        m = Matrix([[0, 1], [0, 2]])
        expected = Matrix([[0, 1], [0, 0]])
        assert gaussian_reduce(m).equals(expected)

    def test_several_leading_zero_columns(self) -> None:
        m = Matrix([[0, 0, 1, 2], [0, 0, 3, 4]])
        expected = Matrix([[0, 0, 1, 2], [0, 0, 0, 1]])
        assert gaussian_reduce(m).equals(expected)

    def test_zero_matrix_unchanged(self) -> None:
        m = Matrix.zero(3, 2)
        assert gaussian_reduce(m).equals(m)

    def test_values_below_epsilon_are_zero(self) -> None:
        m = Matrix([[1e-12, 1.0], [1.0, 1.0]])
        expected = Matrix([[1.0, 1.0], [0.0, 1.0]])
        assert gaussian_reduce(m).equals(expected)


# =============================================================================
# ВЫРОЖДЕННЫЕ ФОРМЫ
# =============================================================================


class TestDegenerateShapes:
    """Пустые и неквадратные матрицы"""

    def test_empty(self) -> None:
        result = gaussian_reduce(Matrix([]))
        assert result.size() == (0, 0)

    def test_zero_rows_with_columns(self) -> None:
        result = gaussian_reduce(Matrix.zero(0, 3))
        assert result.size() == (0, 3)

    def test_rows_without_columns(self) -> None:
        result = gaussian_reduce(Matrix([[], []]))
        assert result.size() == (2, 0)

    def test_single_element(self) -> None:
        assert gaussian_reduce(Matrix([[4.0]])).equals(Matrix([[1.0]]))
        assert gaussian_reduce(Matrix([[0.0]])).equals(Matrix([[0.0]]))

    def test_more_rows_than_columns(self) -> None:
        """После исчерпания столбцов оставшиеся строки не меняются"""
        m = Matrix([[1], [2], [3]])
        expected = Matrix([[1], [0], [0]])
        assert gaussian_reduce(m).equals(expected)

    def test_single_column_with_leading_zero(self) -> None:
        m = Matrix([[0], [5], [10]])
        expected = Matrix([[1], [0], [0]])
        assert gaussian_reduce(m).equals(expected)

    def test_more_columns_than_rows(self) -> None:
        """Столбцы справа от последнего опорного не приводятся"""
        m = Matrix([[1, 2, 3, 4]])
        assert gaussian_reduce(m).equals(m)


# =============================================================================
# NaN / INF
# =============================================================================


class TestIrregularValues:
    """Распространение NaN и бесконечностей"""

    def test_nan_pivot_propagates(self) -> None:
        m = Matrix([[NAN, 1.0], [1.0, 1.0]])
        expected = Matrix([[NAN, NAN], [NAN, NAN]])
        assert gaussian_reduce(m).equals(expected)

    def test_infinite_pivot(self) -> None:
        """1 / inf = 0, inf * 0 = nan"""
        m = Matrix([[INF, 1.0]])
        expected = Matrix([[NAN, 0.0]])
        assert gaussian_reduce(m).equals(expected)

    def test_reduction_is_deterministic_with_nan(self) -> None:
        m = Matrix([[1.0, NAN], [2.0, 3.0]])
        assert gaussian_reduce(m).equals(gaussian_reduce(m))


# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================


class TestReductionConfig:
    """Тесты для ReductionConfig"""

    def test_default_epsilon(self) -> None:
        assert ReductionConfig().epsilon == 1e-10

    def test_negative_epsilon_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            ReductionConfig(epsilon=-1.0)

    def test_nan_epsilon_rejected(self) -> None:
        with pytest.raises(ValueError, match="NaN"):
            ReductionConfig(epsilon=NAN)

    def test_frozen(self) -> None:
        config = ReductionConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.epsilon = 1.0  # type: ignore[misc]

    def test_zero_epsilon_uses_tiny_pivot(self) -> None:
        m = Matrix([[1e-12, 1.0], [1.0, 1.0]])
        result = gaussian_reduce(m, ReductionConfig(epsilon=0.0))
        assert result.get(0, 0) == pytest.approx(1.0)
        assert result.get(0, 1) == pytest.approx(1e12)
        assert result.get(1, 0) == pytest.approx(0.0, abs=1e-12)
        assert result.get(1, 1) == pytest.approx(1.0)

    def test_large_epsilon_treats_small_values_as_zero(self) -> None:
        m = Matrix([[0.5, 1.0], [0.0, 0.25]])
        result = gaussian_reduce(m, ReductionConfig(epsilon=0.6))
        # Столбец 0 считается нулевым, опорный элемент ищется в столбце 1
        assert result.equals(Matrix([[0.5, 1.0], [-0.125, 0.0]]))


# =============================================================================
# ПОИСК ОПОРНОГО ЭЛЕМЕНТА И ЖУРНАЛ ШАГОВ
# =============================================================================


class TestFindPivotRow:
    """Тесты для find_pivot_row"""

    def test_first_nonzero_from_start(self) -> None:
        m = Matrix([[1], [0], [2], [3]])
        assert find_pivot_row(m, 0, 0) == 0
        assert find_pivot_row(m, 1, 0) == 2

    def test_none_when_all_zero(self) -> None:
        m = Matrix([[1], [0], [1e-11]])
        assert find_pivot_row(m, 1, 0) is None

    def test_nan_is_a_pivot(self) -> None:
        m = Matrix([[0], [NAN]])
        assert find_pivot_row(m, 0, 0) == 1


class TestReductionSteps:
    """Тесты для gaussian_reduce_steps"""

    def test_result_matches_gaussian_reduce(self) -> None:
        m = Matrix([[1, 2, 3], [1, 2, 3], [2, 2, 4]])
        reduced, _ = gaussian_reduce_steps(m)
        assert reduced.equals(gaussian_reduce(m))

    def test_steps_record_pivots_and_skips(self) -> None:
        m = Matrix([[1, 2, 3], [1, 2, 3], [2, 2, 4]])
        _, steps = gaussian_reduce_steps(m)
        assert steps == [
            ReductionStep(row=0, column=0, pivot_row=0, pivot_value=1.0),
            ReductionStep(row=1, column=1, pivot_row=2, pivot_value=-2.0),
            ReductionStep(row=2, column=2, pivot_row=None, pivot_value=None),
        ]
        assert [s.skipped for s in steps] == [False, False, True]

    def test_skip_keeps_row_index(self) -> None:
        _, steps = gaussian_reduce_steps(Matrix([[0, 1], [0, 2]]))
        assert steps == [
            ReductionStep(row=0, column=0, pivot_row=None, pivot_value=None),
            ReductionStep(row=0, column=1, pivot_row=0, pivot_value=1.0),
        ]

    def test_empty_matrix_has_no_steps(self) -> None:
        _, steps = gaussian_reduce_steps(Matrix([]))
        assert steps == []


class TestLogging:
    """Диагностика через logging, без print"""

    def test_debug_messages(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="matrixcore.core.math.reduction")
        gaussian_reduce(Matrix([[0, 1], [0, 2]]))
        messages = [record.getMessage() for record in caplog.records]
        assert any("skipping column" in message for message in messages)
        assert any("row-echelon form" in message for message in messages)

    def test_no_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        gaussian_reduce(Matrix([[2.0, -4.0, 1.5], [6.0, -4.0, 0.0]]))
        assert capsys.readouterr().out == ""
