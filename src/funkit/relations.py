"""
Relation helpers: identifier equality and length comparisons.

Length helpers follow relation(n, len(items)) argument order, so
length_gt(2, items) reads as "2 > len(items)".
"""

import operator
from typing import Any, Callable, Sized

from toolz import curry

from funkit.kinds import get_child


__all__ = [
    "compare_length",
    "id_equals",
    "id_prop_eq",
    "id_prop_ne",
    "is_not_equals",
    "length_eq",
    "length_gt",
    "length_gte",
    "length_lt",
    "length_lte",
]


@curry
def is_not_equals(a: Any, b: Any) -> bool:
    """`a` is not None and differs from `b`."""
    return a is not None and a != b


@curry
def id_equals(a: Any, b: Any) -> bool:
    """
    Compare identifiers that may be id objects or their string form.

    An `equals` method on either side takes precedence. Otherwise a string
    id equals a non-string id whose str() is the same string.
    """
    if callable(getattr(a, "equals", None)):
        return bool(a.equals(b))
    if callable(getattr(b, "equals", None)):
        return bool(b.equals(a))
    if a == b:
        return True
    if isinstance(a, str) and b is not None and not isinstance(b, str):
        return a == str(b)
    if isinstance(b, str) and a is not None and not isinstance(a, str):
        return b == str(a)
    return False


@curry
def id_prop_eq(name: Any, value: Any, obj: Any) -> bool:
    """Whether obj[name] is the same id as `value`."""
    return id_equals(value, get_child(obj, name, None))


@curry
def id_prop_ne(name: Any, value: Any, obj: Any) -> bool:
    return not id_prop_eq(name, value, obj)


def compare_length(relation: Callable[[Any, int], bool]) -> Callable:
    """Lift a binary relation into relation(n, len(items))."""
    @curry
    def compare(n: Any, items: Sized) -> bool:
        return relation(n, len(items))
    return compare


length_eq = compare_length(operator.eq)
length_gt = compare_length(operator.gt)
length_gte = compare_length(operator.ge)
length_lt = compare_length(operator.lt)
length_lte = compare_length(operator.le)
