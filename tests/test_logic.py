"""
Tests for truthiness helpers.
"""

import math

from funkit.logic import count_if, is_falsy, is_truthy


class TestTruthiness:
    """Test truthiness helpers."""

    def test_nan_is_falsy(self):
        assert not is_truthy(math.nan)
        assert is_falsy(math.nan)

    def test_regular_values(self):
        assert is_truthy(1)
        assert is_truthy("a")
        assert is_falsy(0)
        assert is_falsy("")
        assert is_falsy(None)
        assert is_falsy([])

    def test_count_if(self):
        assert count_if(is_truthy, [None, 1, 0, True]) == 2
        assert count_if(is_truthy)([]) == 0
