"""Function-level combinators."""

from typing import Any, Callable, Iterable, List, Sequence

from toolz import compose, curry, identity

from funkit.objects import assoc_path_with


__all__ = ["apply_n", "apply_path", "knit", "noop"]


def noop(*args, **kwargs) -> None:
    """Accept anything, do nothing."""


def apply_n(fn: Callable, n: int) -> Callable:
    """
    Compose `fn` with itself `n` times.

    Example:
        apply_n(lambda x: x * x, 4)(2)  # 65536 (2 -> 4 -> 16 -> 256 -> 65536)
    """
    if n <= 0:
        return identity
    return compose(*[fn] * n)


@curry
def apply_path(path: Sequence, fn: Callable, obj: Any) -> Any:
    """
    Apply `fn` to the value at the end of `path`.

    Missing levels are created as dicts and `fn` receives None for a missing
    leaf.

    Example:
        apply_path(["a", "b", "c"], lambda x: x + 1, {"a": {"b": {"c": 3}}})
        # {"a": {"b": {"c": 4}}}
    """
    return assoc_path_with(fn, path, obj)


def knit(fns: Sequence[Callable]) -> Callable[[Iterable], List]:
    """
    Zip a tuple of functions against each record of a sequence.

    Example:
        pairs = [("key1", "VAL1"), ("key2", "VAL2")]
        knit([str.upper, str.lower])(pairs)
        # [["KEY1", "val1"], ["KEY2", "val2"]]
    """
    def apply_all(records: Iterable) -> List:
        return [[fn(value) for fn, value in zip(fns, record)] for record in records]
    return apply_all
