"""Truthiness helpers."""

import math
from typing import Any, Callable, Iterable

from toolz import curry


__all__ = ["count_if", "is_falsy", "is_truthy"]


def is_truthy(value: Any) -> bool:
    """
    Python truthiness, except that NaN is falsy.

    Falsy values: False, None, 0, "", empty containers and NaN.
    """
    if isinstance(value, float) and math.isnan(value):
        return False
    return bool(value)


def is_falsy(value: Any) -> bool:
    return not is_truthy(value)


@curry
def count_if(predicate: Callable, items: Iterable) -> int:
    """Number of values satisfying `predicate`: count_if(is_truthy, [None, 1, 0, True]) == 2."""
    return sum(1 for item in items if predicate(item))
