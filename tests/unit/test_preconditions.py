"""
Тесты для Preconditions — проверок предусловий и иерархии ошибок

Проверяет:
1. Границы require_index / require_position / require_bounds
2. Отсутствие wraparound для отрицательных индексов
3. Иерархию исключений (PreconditionViolation + стандартные базовые классы)
"""

import pytest

from src.prelude.contracts import (
    EmptySequenceError,
    IndexOutOfRange,
    PreconditionViolation,
    WrongAlternativeError,
    require_bounds,
    require_count,
    require_index,
    require_non_empty,
    require_position,
)


class TestRequireIndex:
    """Тесты require_index: 0 <= index < length"""

    def test_valid_indices(self) -> None:
        assert require_index(0, 3) == 0
        assert require_index(2, 3) == 2

    @pytest.mark.parametrize("index", [-1, 3, 100])
    def test_invalid_indices(self, index: int) -> None:
        with pytest.raises(IndexOutOfRange, match=r"\[0, 3\)"):
            require_index(index, 3)

    def test_empty_length(self) -> None:
        with pytest.raises(IndexOutOfRange):
            require_index(0, 0)

    def test_bool_rejected(self) -> None:
        """bool не является позицией, хотя это подкласс int"""
        with pytest.raises(TypeError, match="bool"):
            require_index(True, 2)
        with pytest.raises(TypeError):
            require_position(False, 2)
        with pytest.raises(TypeError):
            require_count(True)


class TestRequirePosition:
    """Тесты require_position: 0 <= index <= length"""

    def test_end_position_valid(self) -> None:
        assert require_position(3, 3) == 3
        assert require_position(0, 0) == 0

    def test_past_end_invalid(self) -> None:
        with pytest.raises(IndexOutOfRange, match=r"\[0, 3\]"):
            require_position(4, 3)


class TestRequireBounds:
    """Тесты require_bounds: 0 <= start <= end <= length"""

    def test_valid(self) -> None:
        assert require_bounds(0, 3, 3) == (0, 3)
        assert require_bounds(2, 2, 3) == (2, 2)

    def test_inverted_range(self) -> None:
        with pytest.raises(IndexOutOfRange):
            require_bounds(2, 1, 3)

    def test_end_past_length(self) -> None:
        with pytest.raises(IndexOutOfRange):
            require_bounds(0, 4, 3)


class TestRequireOthers:
    """Тесты require_non_empty / require_count"""

    def test_non_empty(self) -> None:
        require_non_empty(1, "pop")
        with pytest.raises(EmptySequenceError) as exc_info:
            require_non_empty(0, "pop")
        assert exc_info.value.operation == "pop"

    def test_count(self) -> None:
        assert require_count(0) == 0
        with pytest.raises(ValueError):
            require_count(-3)


class TestHierarchy:
    """Тесты иерархии исключений"""

    def test_index_out_of_range(self) -> None:
        err = IndexOutOfRange(5, 2, "[0, 2)")
        assert isinstance(err, PreconditionViolation)
        assert isinstance(err, IndexError)

    def test_wrong_alternative(self) -> None:
        err = WrongAlternativeError(int, str)
        assert isinstance(err, PreconditionViolation)
        assert isinstance(err, TypeError)
        assert err.requested is int
        assert err.active is str
        assert "int" in str(err) and "str" in str(err)
