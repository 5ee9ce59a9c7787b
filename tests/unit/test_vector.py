"""
Тесты для Vector — числового вектора

Проверяет:
1. Конструкторы (new, from_value, from_range) и clone
2. Поэлементную арифметику со смещением
3. Редукции (sum, product, dot, magnitude)
4. Округление
"""

import pytest

from src.core.domain import Vector


# =============================================================================
# КОНСТРУКТОРЫ
# =============================================================================


class TestConstructors:
    """Тесты для конструкторов Vector"""

    def test_new(self) -> None:
        v = Vector.new(1, 2, 3)
        assert v.elements == [1, 2, 3]
        assert len(v) == 3
        assert v[1] == 2
        assert list(v) == [1, 2, 3]

    def test_new_empty(self) -> None:
        assert len(Vector.new()) == 0

    def test_from_value(self) -> None:
        assert Vector.from_value(0, 3).elements == [0, 0, 0]
        assert Vector.from_value(1.5, 2).elements == [1.5, 1.5]
        assert Vector.from_value(7, 0).elements == []

    def test_from_value_negative_count_raises(self) -> None:
        with pytest.raises(ValueError, match="count must be non-negative"):
            Vector.from_value(1, -1)

    def test_from_range(self) -> None:
        assert Vector.from_range(0, 1, 3).elements == [0.0, 0.25, 0.5, 0.75, 1.0]

    def test_from_range_without_steps(self) -> None:
        v = Vector.from_range(2, 5, 0)
        assert v.elements == [2.0, 5.0]
        assert all(isinstance(value, float) for value in v)

    def test_from_range_descending(self) -> None:
        assert Vector.from_range(1, -1, 1).elements == [1.0, 0.0, -1.0]

    def test_clone_is_independent(self) -> None:
        original = Vector.new(1, 2, 3)
        clone = original.clone()
        clone.scale(10)
        assert original.elements == [1, 2, 3]
        assert clone.elements == [10, 20, 30]


# =============================================================================
# ПОЭЛЕМЕНТНАЯ АРИФМЕТИКА
# =============================================================================


class TestElementwise:
    """Тесты для add/subtract/multiply/divide"""

    def test_add(self) -> None:
        v = Vector.new(1, 2, 3).add(Vector.new(10, 20, 30))
        assert v.elements == [11, 22, 33]

    def test_add_in_place_returns_self(self) -> None:
        v = Vector.new(1, 2, 3)
        assert v.add(Vector.new(1, 1, 1)) is v
        assert v.elements == [2, 3, 4]

    def test_add_with_offset(self) -> None:
        """other[0] складывается с self[offset], лишние элементы игнорируются"""
        v = Vector.new(1, 2, 3, 4).add(Vector.new(10, 20, 30), offset=2)
        assert v.elements == [1, 2, 13, 24]

    def test_add_shorter_other(self) -> None:
        v = Vector.new(1, 2, 3).add(Vector.new(10))
        assert v.elements == [11, 2, 3]

    @pytest.mark.parametrize("offset", [-1, 3, 10])
    def test_out_of_range_offset_is_noop(self, offset: int) -> None:
        v = Vector.new(1, 2, 3).add(Vector.new(10, 20, 30), offset=offset)
        assert v.elements == [1, 2, 3]

    def test_subtract(self) -> None:
        other = Vector.new(1, 1, 1)
        v = Vector.new(5, 5, 5).subtract(other, offset=1)
        assert v.elements == [5, 4, 4]
        assert other.elements == [1, 1, 1]

    def test_multiply(self) -> None:
        v = Vector.new(1, 2, 3).multiply(Vector.new(2, 3, 4))
        assert v.elements == [2, 6, 12]

    def test_divide(self) -> None:
        v = Vector.new(2, 9).divide(Vector.new(2, 2))
        assert v.elements == [1.0, 4.5]

    def test_divide_by_zero_raises(self) -> None:
        with pytest.raises(ZeroDivisionError):
            Vector.new(1, 2).divide(Vector.new(1, 0))

    def test_scale(self) -> None:
        assert Vector.new(1, -2, 3).scale(-2).elements == [-2, 4, -6]

    def test_chaining(self) -> None:
        v = Vector.new(1, 2, 3).scale(2).add(Vector.new(1, 1, 1)).multiply(Vector.new(1, 0, 1))
        assert v.elements == [3, 0, 7]


# =============================================================================
# РЕДУКЦИИ И ОКРУГЛЕНИЕ
# =============================================================================


class TestReductions:
    """Тесты для sum/product/dot/magnitude/round"""

    def test_sum(self) -> None:
        assert Vector.new(1, 2, 3).sum() == 6
        assert Vector.new().sum() == 0

    def test_product(self) -> None:
        assert Vector.new(2, 3, 4).product() == 24
        assert Vector.new().product() == 1

    def test_dot(self) -> None:
        assert Vector.new(1, 2, 3).dot(Vector.new(4, 5, 6)) == 32

    def test_dot_length_mismatch_raises(self) -> None:
        with pytest.raises(ValueError, match="Vector length mismatch"):
            Vector.new(1, 2).dot(Vector.new(1, 2, 3))

    def test_magnitude(self) -> None:
        assert Vector.new(3, 4).magnitude() == 5.0
        assert Vector.new().magnitude() == 0.0

    def test_round(self) -> None:
        v = Vector.new(2.3456, 0.125, -0.125).round(2)
        assert v.elements == [2.35, 0.13, -0.13]

    def test_round_leaves_ints(self) -> None:
        v = Vector.new(1, 2).round(1)
        assert v.elements == [1, 2]
        assert all(isinstance(value, int) for value in v)

    def test_round_negative_precision_raises(self) -> None:
        with pytest.raises(ValueError, match="precision must be non-negative"):
            Vector.new(1.0).round(-1)
