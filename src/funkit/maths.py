"""
Numeric helpers.

Argument-flipped arithmetic for use in pipelines, parity checks,
stepped ranges and simple statistics.
"""

import math
from typing import Iterable, List, Sequence

from toolz import curry


__all__ = [
    "average",
    "divide_by",
    "get_range",
    "is_even",
    "is_odd",
    "modulo_by",
    "range_step",
    "subtract_by",
]


@curry
def divide_by(divisor, value):
    """divide_by(2)(10) == 5"""
    return value / divisor


@curry
def modulo_by(divisor, value):
    return value % divisor


@curry
def subtract_by(amount, value):
    return value - amount


def average(numbers: Sequence) -> float:
    """Arithmetic mean; nan for an empty sequence."""
    numbers = list(numbers)
    if not numbers:
        return math.nan
    return sum(numbers) / len(numbers)


def is_odd(n: int) -> bool:
    return n % 2 != 0


def is_even(n: int) -> bool:
    return n % 2 == 0


def range_step(start, step, stop) -> List:
    """
    Inclusive arithmetic progression from `start` towards `stop`.

    Example:
        range_step(2, 2, 8)    # [2, 4, 6, 8]
        range_step(10, -3, 1)  # [10, 7, 4, 1]

    Returns an empty list when `stop` lies behind `start` relative to `step`.
    """
    if step == 0:
        return []
    steps = math.floor(1 + (stop - start) / step)
    return [start + step * n for n in range(max(steps, 0))]


def get_range(numbers: Iterable) -> List:
    """[min, max] of the given numbers; [inf, -inf] for empty input."""
    numbers = list(numbers)
    return [min(numbers, default=math.inf), max(numbers, default=-math.inf)]
