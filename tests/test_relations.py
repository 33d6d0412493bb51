"""
Tests for relation helpers.
"""

import operator

from funkit.relations import (
    compare_length,
    id_equals,
    id_prop_eq,
    id_prop_ne,
    is_not_equals,
    length_eq,
    length_gt,
    length_gte,
    length_lt,
    length_lte,
)


class ObjectId:
    """Minimal id type with an equals method."""

    def __init__(self, value):
        self.value = value

    def equals(self, other):
        return str(self) == str(other)

    def __str__(self):
        return self.value


class TestEquality:
    """Test identifier equality."""

    def test_is_not_equals(self):
        assert is_not_equals(1, 2)
        assert not is_not_equals(1, 1)
        assert not is_not_equals(None, 2)

    def test_id_equals_plain_values(self):
        assert id_equals(1, 1)
        assert not id_equals(1, 2)

    def test_id_equals_string_form(self):
        assert id_equals("12", 12)
        assert id_equals(12, "12")
        assert not id_equals("12", None)

    def test_id_equals_uses_equals_method(self):
        assert id_equals(ObjectId("abc"), "abc")
        assert id_equals("abc", ObjectId("abc"))
        assert not id_equals(ObjectId("abc"), "abd")

    def test_id_prop_eq(self):
        obj = {"id": ObjectId("abc")}
        assert id_prop_eq("id", "abc", obj)
        assert not id_prop_ne("id", "abc", obj)
        assert id_prop_ne("id", "xyz")(obj)


class TestLength:
    """Test length relations, read as relation(n, len(items))."""

    def test_length_eq(self):
        assert length_eq(2, [1, 2])
        assert not length_eq(1, [1, 2])

    def test_length_gt(self):
        assert length_gt(3, [1, 2])
        assert not length_gt(2, [1, 2])

    def test_length_gte(self):
        assert length_gte(2, [1, 2])

    def test_length_lt(self):
        assert length_lt(1, [1, 2])

    def test_length_lte(self):
        assert length_lte(2, "ab")

    def test_compare_length_curries(self):
        is_pair = compare_length(operator.eq)(2)
        assert is_pair(("a", "b"))
        assert not is_pair(("a",))
