"""
Tests for type and value predicates.
"""

import asyncio
import math
from collections import OrderedDict

import pytest

from funkit.predicates import (
    has_not,
    is_array,
    is_empty,
    is_finite,
    is_float,
    is_function,
    is_hex,
    is_id_like,
    is_integer,
    is_nan,
    is_not_empty,
    is_not_nil,
    is_not_number,
    is_null,
    is_number,
    is_obj,
    is_obj_like,
    is_object,
    is_object_id,
    is_plain_obj,
    is_promise,
    is_string,
    is_valid,
)


OBJECT_ID = "507f1f77bcf86cd799439011"


class TestEmptiness:
    """Test emptiness and nil checks."""

    @pytest.mark.parametrize("value", ["", [], {}, ()])
    def test_empty_values(self, value):
        assert is_empty(value)
        assert not is_not_empty(value)

    @pytest.mark.parametrize("value", [None, 0, "a", [0]])
    def test_non_empty_values(self, value):
        assert not is_empty(value)

    def test_nil(self):
        assert is_null(None)
        assert not is_not_nil(None)
        assert is_not_nil(0)

    def test_has_not(self):
        assert has_not("b", {"a": 1})
        assert not has_not("a", {"a": 1})
        assert has_not(3, [1, 2])


class TestNumbers:
    """Test numeric predicates."""

    def test_is_number_excludes_bool(self):
        assert is_number(1)
        assert is_number(1.5)
        assert is_number(math.nan)
        assert not is_number(True)
        assert not is_number("1")
        assert is_not_number("1")

    def test_is_integer(self):
        assert is_integer(3)
        assert is_integer(3.0)
        assert not is_integer(3.5)
        assert not is_integer(math.inf)

    def test_is_nan(self):
        assert is_nan(math.nan)
        assert not is_nan(1)
        assert not is_nan("nan")

    def test_is_finite(self):
        assert is_finite(1.0)
        assert not is_finite(math.inf)

    def test_is_float(self):
        assert is_float(1.5)
        assert not is_float(1.0)
        assert not is_float(math.nan)


class TestShapes:
    """Test shape predicates."""

    def test_is_string(self):
        assert is_string("a")
        assert not is_string(b"a")

    def test_is_array(self):
        assert is_array([1])
        assert is_array((1,))
        assert not is_array("ab")

    def test_is_object(self):
        assert is_object({})
        assert is_object(OrderedDict())
        assert not is_object([])

    def test_is_plain_obj(self):
        assert is_plain_obj({})
        assert not is_plain_obj(OrderedDict())

    def test_is_obj(self):
        assert is_obj([])
        assert is_obj(print)
        assert not is_obj(None)
        assert not is_obj("a")
        assert not is_obj(1)

    def test_is_obj_like(self):
        assert is_obj_like({})
        assert not is_obj_like(print)

    def test_is_function(self):
        assert is_function(len)
        assert not is_function(1)

    def test_is_valid(self):
        assert is_valid(0)
        assert not is_valid(None)
        assert not is_valid("")
        assert not is_valid(math.nan)

    def test_is_promise(self):
        async def work():
            return 1

        coroutine = work()
        assert is_promise(coroutine)
        assert not is_promise(1)
        asyncio.run(coroutine)


class TestIdentifiers:
    """Test identifier predicates."""

    def test_is_hex(self):
        assert is_hex("deadBEEF")
        assert not is_hex("xyz")
        assert not is_hex(12)

    def test_is_object_id(self):
        assert is_object_id(OBJECT_ID)
        assert not is_object_id(OBJECT_ID[:-1])

    def test_is_id_like(self):
        assert is_id_like(12)
        assert is_id_like("abc")
        assert not is_id_like(None)
        assert not is_id_like(1.5)
