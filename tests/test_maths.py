"""
Tests for numeric helpers.
"""

import math

from funkit.maths import (
    average,
    divide_by,
    get_range,
    is_even,
    is_odd,
    modulo_by,
    range_step,
    subtract_by,
)


class TestFlippedArithmetic:
    """Test argument-flipped arithmetic."""

    def test_divide_by(self):
        assert divide_by(2)(10) == 5

    def test_modulo_by(self):
        assert modulo_by(3, 10) == 1

    def test_subtract_by(self):
        assert subtract_by(3)(10) == 7


class TestStatistics:
    """Test average and range."""

    def test_average(self):
        assert average([1, 2, 3, 4]) == 2.5

    def test_average_empty(self):
        assert math.isnan(average([]))

    def test_get_range(self):
        assert get_range([3, 1, 7, 2]) == [1, 7]

    def test_get_range_empty(self):
        assert get_range([]) == [math.inf, -math.inf]


class TestParity:
    """Test parity checks."""

    def test_is_odd(self):
        assert is_odd(3)
        assert is_odd(-3)
        assert not is_odd(4)

    def test_is_even(self):
        assert is_even(0)
        assert not is_even(7)


class TestRangeStep:
    """Test stepped ranges."""

    def test_ascending(self):
        assert range_step(2, 2, 8) == [2, 4, 6, 8]

    def test_descending(self):
        assert range_step(10, -3, 1) == [10, 7, 4, 1]

    def test_stop_not_on_step(self):
        assert range_step(0, 3, 10) == [0, 3, 6, 9]

    def test_stop_behind_start(self):
        assert range_step(5, 1, 0) == []

    def test_zero_step(self):
        assert range_step(0, 0, 5) == []
