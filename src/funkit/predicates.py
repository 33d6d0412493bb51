"""
Type and value predicates.

Unary checks plus their complements, built with toolz.complement.
"""

import inspect
import math
import numbers
import re
from typing import Any

from toolz import complement, curry

from funkit.kinds import ContainerKind, container_kind, has_child


__all__ = [
    "has_not",
    "is_array",
    "is_empty",
    "is_finite",
    "is_float",
    "is_function",
    "is_hex",
    "is_id_like",
    "is_integer",
    "is_nan",
    "is_not_array",
    "is_not_empty",
    "is_not_finite",
    "is_not_float",
    "is_not_integer",
    "is_not_nan",
    "is_not_nil",
    "is_not_null",
    "is_not_number",
    "is_not_object",
    "is_not_string",
    "is_null",
    "is_number",
    "is_obj",
    "is_obj_like",
    "is_object",
    "is_object_id",
    "is_plain_obj",
    "is_promise",
    "is_string",
    "is_valid",
]


_HEX_RE = re.compile(r"^[0-9A-F]+$", re.IGNORECASE)
_OBJECT_ID_LENGTH = 24
_PRIMITIVES = (str, bytes, bool, numbers.Number)


@curry
def has_not(prop: Any, obj: Any) -> bool:
    if container_kind(obj) is ContainerKind.SCALAR:
        return not (isinstance(prop, str) and hasattr(obj, prop))
    return not has_child(obj, prop)


def is_empty(value: Any) -> bool:
    """True for empty strings and containers. None and 0 are not empty."""
    return value is not None and hasattr(value, "__len__") and len(value) == 0


def is_null(value: Any) -> bool:
    return value is None


is_not_nil = complement(is_null)
is_not_null = complement(is_null)
is_not_empty = complement(is_empty)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_number(value: Any) -> bool:
    """Real numbers, NaN and infinities included; booleans excluded."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def is_integer(value: Any) -> bool:
    """Integral numbers, including floats with no fractional part (3.0)."""
    if not is_number(value):
        return False
    if isinstance(value, numbers.Integral):
        return True
    return math.isfinite(value) and float(value).is_integer()


def is_nan(value: Any) -> bool:
    return is_number(value) and math.isnan(value)


def is_finite(value: Any) -> bool:
    return is_number(value) and math.isfinite(value)


def is_float(value: Any) -> bool:
    """Finite numbers with a fractional part."""
    return is_finite(value) and not is_integer(value)


def is_object(value: Any) -> bool:
    return container_kind(value) is ContainerKind.MAPPING


is_not_string = complement(is_string)
is_not_array = complement(is_array)
is_not_number = complement(is_number)
is_not_integer = complement(is_integer)
is_not_nan = complement(is_nan)
is_not_finite = complement(is_finite)
is_not_float = complement(is_float)
is_not_object = complement(is_object)


def is_valid(value: Any) -> bool:
    """Not None, not empty and not NaN."""
    return not (value is None or is_empty(value) or is_nan(value))


def is_hex(value: Any) -> bool:
    return isinstance(value, str) and _HEX_RE.match(value) is not None


def is_object_id(value: Any) -> bool:
    """Looks like a 24-character hexadecimal document id."""
    return is_hex(value) and len(value) == _OBJECT_ID_LENGTH


def is_id_like(value: Any) -> bool:
    """An integer, a string or anything whose string form is an object id."""
    return value is not None and (is_integer(value) or is_string(value) or is_object_id(str(value)))


def is_function(value: Any) -> bool:
    return callable(value)


def is_obj(value: Any) -> bool:
    """Anything but None and primitive values (strings, bytes, numbers, booleans)."""
    return value is not None and not isinstance(value, _PRIMITIVES)


def is_obj_like(value: Any) -> bool:
    """Like is_obj, but functions do not count."""
    return is_obj(value) and not callable(value)


def is_plain_obj(value: Any) -> bool:
    """Exactly a dict, not a subclass or another mapping type."""
    return type(value) is dict


def is_promise(value: Any) -> bool:
    """Awaitable objects (coroutines, tasks, futures)."""
    return inspect.isawaitable(value)
