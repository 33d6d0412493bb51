"""
List helpers.

Sequence-level operations: table reshaping (pivot/unpivot), grouping,
membership tests, index-aware mapping, ordering and shuffling.

ARCHITECTURAL RULE:
    Inputs are never mutated. Every helper returns a fresh list
    (or dict, for grouping helpers).
"""

import functools
import itertools
import math
import re
from random import random as default_random
from typing import Any, Callable, Dict, Iterable, List, Sequence

import toolz
from toolz import curry

from funkit.kinds import ContainerKind, container_kind, get_child
from funkit.logic import is_truthy


__all__ = [
    "SwapIndexError",
    "as_array",
    "compact",
    "compare_props",
    "constant",
    "count",
    "duplicate",
    "find_by_id",
    "find_by_prop",
    "flat_map",
    "group_by_multiple",
    "includes",
    "includes_all",
    "includes_any",
    "includes_none",
    "list_of",
    "map_at",
    "map_indexed",
    "match",
    "overhead",
    "pick_from",
    "pick_indexes",
    "pivot",
    "pivot_with",
    "reduce_indexed",
    "replicate",
    "separate",
    "separate_by",
    "shuffle",
    "shuffler",
    "some",
    "sort_by_props",
    "swap",
    "uniq_lists",
    "uniques_for",
    "unpivot",
    "unpivot_rest",
]


_SORT_PREFIX_RE = re.compile(r"^[-+]")


class SwapIndexError(IndexError):
    """Raised when swap() is given an index outside the list."""
    pass


# =========================================================================
# Aliases
# =========================================================================

@curry
def flat_map(fn: Callable, items: Iterable) -> List:
    """Map `fn` over `items` and concatenate the resulting iterables."""
    return list(toolz.mapcat(fn, items))


@curry
def map_at(index: int, fn: Callable, items: Sequence) -> List:
    """Apply `fn` to the element at `index`. Out-of-range indexes are a no-op."""
    result = list(items)
    if -len(result) <= index < len(result):
        result[index] = fn(result[index])
    return result


def constant(value: Any) -> Callable:
    """Return a function that ignores its arguments and returns `value`."""
    return lambda *args, **kwargs: value


@curry
def some(predicate: Callable, items: Iterable) -> bool:
    return any(predicate(item) for item in items)


def match(pairs: Sequence) -> Callable:
    """
    Build a dispatcher from (predicate, transform) pairs.

    The returned function calls the transform of the first pair whose
    predicate accepts the arguments, or returns None if none does.

    Example:
        classify = match([
            (lambda n: n < 0, constant("negative")),
            (lambda n: n == 0, constant("zero")),
            (lambda n: True, constant("positive")),
        ])
        classify(-3)  # "negative"
    """
    def dispatch(*args, **kwargs):
        for predicate, transform in pairs:
            if predicate(*args, **kwargs):
                return transform(*args, **kwargs)
        return None
    return dispatch


@curry
def includes(value: Any, items: Iterable) -> bool:
    return value in items


# =========================================================================
# Grouping and membership
# =========================================================================

@curry
def group_by_multiple(key_fns: Sequence, data: Iterable) -> Dict:
    """
    Group by several keys into nested dicts, outermost key first.

    Each key may be a callable or a field name (as accepted by toolz.groupby).

    Example:
        group_by_multiple([itemgetter("a"), itemgetter("b")], rows)
        # {a1: {b1: [...], b2: [...]}, a2: {...}}
    """
    if not key_fns:
        return list(data)
    first, *rest = key_fns
    groups = toolz.groupby(first, data)
    if not rest:
        return groups
    return {key: group_by_multiple(rest, members) for key, members in groups.items()}


@curry
def includes_any(values: Iterable, items: Sequence) -> bool:
    """Do any of `values` appear in `items`?"""
    return any(value in items for value in values)


@curry
def includes_all(values: Iterable, items: Sequence) -> bool:
    """Do all of `values` appear in `items`?"""
    return all(value in items for value in values)


@curry
def includes_none(values: Iterable, items: Sequence) -> bool:
    """Does none of `values` appear in `items`?"""
    return not includes_any(values, items)


def _flatten(values: Iterable) -> List:
    flat = []
    for value in values:
        if isinstance(value, (list, tuple)):
            flat.extend(_flatten(value))
        else:
            flat.append(value)
    return flat


def list_of(*values: Any) -> List:
    """Collect the arguments into a single flat list: list_of(1, [2, [3]]) == [1, 2, 3]."""
    return _flatten(values)


def as_array(value: Any) -> List:
    """Wrap `value` in a list unless it already is one."""
    if isinstance(value, list):
        return value
    return [value]


@curry
def replicate(n: int, value: Any) -> List:
    return [value] * n


duplicate = replicate(2)


def compact(items: Iterable) -> List:
    """Drop falsy scalars (False, None, 0, "", NaN). Empty lists and dicts are kept."""
    return [item for item in items if is_truthy(item) or container_kind(item) is not ContainerKind.SCALAR]


# =========================================================================
# Index-aware helpers
# =========================================================================

@curry
def map_indexed(fn: Callable, items: Sequence) -> List:
    """Map with fn(value, index, items)."""
    return [fn(value, index, items) for index, value in enumerate(items)]


@curry
def reduce_indexed(fn: Callable, initial: Any, items: Sequence) -> Any:
    """Reduce with fn(accumulator, value, index, items)."""
    accumulator = initial
    for index, value in enumerate(items):
        accumulator = fn(accumulator, value, index, items)
    return accumulator


@curry
def pick_indexes(indexes: Iterable[int], items: Sequence) -> List:
    """Pick values by index; indexes outside the list yield None."""
    return [items[index] if 0 <= index < len(items) else None for index in indexes]


@curry
def pick_from(key: Any, value: Any, rows: Iterable) -> Dict:
    """
    Build a dict from a list of records by picking a key and a value field.

    Example:
        pick_from("id", "val", [{"id": "a", "val": 1000}, {"id": "b", "val": 2000}])
        # {"a": 1000, "b": 2000}
    """
    return {row.get(key): row.get(value) for row in rows}


@curry
def count(predicate: Callable, items: Iterable) -> int:
    """Number of members of `items` satisfying `predicate`."""
    return sum(1 for item in items if predicate(item))


@curry
def overhead(fn: Callable, items: Sequence) -> List:
    """Apply `fn` to the first element only: overhead(str.upper, ["foo", "bar"]) == ["FOO", "bar"]."""
    if not items:
        return list(items)
    return [fn(items[0]), *items[1:]]


@curry
def find_by_prop(prop: Any, value: Any, rows: Iterable) -> Any:
    for row in rows:
        if get_child(row, prop) == value:
            return row
    return None


@curry
def find_by_id(id_: Any, rows: Iterable) -> Any:
    return find_by_prop("id", id_, rows)


# =========================================================================
# Table reshaping
# =========================================================================

def _omit_keys(row: Dict, keys: Iterable) -> Dict:
    return {key: value for key, value in row.items() if key not in keys}


def _keep_first(existing: Any, incoming: Any) -> Any:
    return existing


@curry
def pivot_with(fn: Callable, attribute_column: Any, value_column: Any, rows: Iterable[Dict]) -> List[Dict]:
    """
    Pivot a long table into a wide one, resolving conflicts with `fn`.

    Rows are grouped while consecutive rows agree on every field other than
    `attribute_column` and `value_column`. Each group becomes one record
    holding the shared fields plus one field per distinct attribute.

    When two rows of a group populate the same field, the field becomes
    fn(existing, incoming).

    Example:
        pivot_with(min, "attribute", "value", [
            {"key": "key1", "attribute": "attribute1", "value": 1},
            {"key": "key1", "attribute": "attribute3", "value": 3},
            {"key": "key2", "attribute": "attribute1", "value": 2},
            {"key": "key2", "attribute": "attribute1", "value": 8},
            {"key": "key2", "attribute": "attribute2", "value": 4},
        ])
        # [{"key": "key1", "attribute1": 1, "attribute3": 3},
        #  {"key": "key2", "attribute1": 2, "attribute2": 4}]

    IMPORTANT:
        Only adjacent rows are merged. Rows of the same logical group that
        are separated by another group produce separate records.

        Rows lacking either column contribute no pivoted field.
    """
    pivot_columns = (attribute_column, value_column)
    pivoted = []
    for _, group in itertools.groupby(rows, key=lambda row: _omit_keys(row, pivot_columns)):
        group = list(group)
        record = _omit_keys(group[0], pivot_columns)
        for row in group:
            if attribute_column not in row or value_column not in row:
                continue
            column = row[attribute_column]
            if column in record:
                record[column] = fn(record[column], row[value_column])
            else:
                record[column] = row[value_column]
        pivoted.append(record)
    return pivoted


@curry
def pivot(attribute_column: Any, value_column: Any, rows: Iterable[Dict]) -> List[Dict]:
    """
    Pivot a long table into a wide one; the first value seen wins.

    Example:
        pivot("attribute", "value", [
            {"key": "key1", "attribute": "attribute1", "value": 1},
            {"key": "key1", "attribute": "attribute3", "value": 3},
        ])
        # [{"key": "key1", "attribute1": 1, "attribute3": 3}]
    """
    return pivot_with(_keep_first, attribute_column, value_column, rows)


@curry
def unpivot(columns: Sequence, attribute_column: Any, value_column: Any, rows: Iterable[Dict]) -> List[Dict]:
    """
    Unpivot the listed columns of a wide table into attribute/value rows.

    Every field not listed in `columns` is copied into each emitted row.
    None and absent values emit nothing.

    Example:
        unpivot(["attribute1", "attribute2", "attribute3"], "attribute", "value",
                [{"key": "key1", "attribute1": 1, "attribute2": None, "attribute3": 3}])
        # [{"attribute": "attribute1", "value": 1, "key": "key1"},
        #  {"attribute": "attribute3", "value": 3, "key": "key1"}]
    """
    unpivoted = []
    for row in rows:
        rest = _omit_keys(row, columns)
        for column in columns:
            value = row.get(column)
            if value is None:
                continue
            unpivoted.append({attribute_column: column, value_column: value, **rest})
    return unpivoted


@curry
def unpivot_rest(columns: Sequence, attribute_column: Any, value_column: Any, rows: Iterable[Dict]) -> List[Dict]:
    """
    Keep the listed columns verbatim and unpivot every other one.

    Example:
        unpivot_rest(["key"], "attribute", "value",
                     [{"key": "key1", "attribute1": 1, "attribute2": None, "attribute3": 3}])
        # [{"attribute": "attribute1", "value": 1, "key": "key1"},
        #  {"attribute": "attribute3", "value": 3, "key": "key1"}]
    """
    unpivoted = []
    for row in rows:
        kept = {column: row[column] for column in columns if column in row}
        for column, value in row.items():
            if column in columns or value is None:
                continue
            unpivoted.append({attribute_column: column, value_column: value, **kept})
    return unpivoted


# =========================================================================
# Partitioning and ordering
# =========================================================================

@curry
def separate(n: int, items: Sequence) -> List[List]:
    """
    Split a list into `n` contiguous parts of near-equal size.

    Example:
        separate(2, ["a", "b", "c", "d", "e"])  # [["a", "b", "c"], ["d", "e"]]
    """
    length = len(items)
    parts: Dict[int, List] = {}
    for index, item in enumerate(items):
        parts.setdefault(index * n // length, []).append(item)
    return list(parts.values())


@curry
def separate_by(key: Callable, n: int, items: Iterable) -> List[List]:
    """Sort by `key`, then separate into `n` parts."""
    return separate(n, sorted(items, key=key))


def _compare(relation: Callable, left: Any, right: Any) -> int:
    # Absent values compare as equal to anything, as do unorderable pairs.
    if left is None or right is None:
        return 0
    if relation(left, right):
        return -1
    if relation(right, left):
        return 1
    return 0


@curry
def sort_by_props(props: Sequence, rows: Iterable) -> List:
    """
    Sort records in descending order of `props`, using later props as tie-breakers.

    Example:
        sort_by_props(["a", "b"], [{"a": 1, "b": 2}, {"a": 10, "b": 6}, {"a": 10, "b": 10}])
        # [{"a": 10, "b": 10}, {"a": 10, "b": 6}, {"a": 1, "b": 2}]
    """
    def compare(a, b):
        for prop in props:
            result = _compare(lambda x, y: x > y, get_child(a, prop, None), get_child(b, prop, None))
            if result:
                return result
        return 0
    return sorted(rows, key=functools.cmp_to_key(compare))


@curry
def compare_props(props: Sequence[str], a: Any, b: Any) -> int:
    """
    Multi-key comparator for functools.cmp_to_key.

    Each prop may be prefixed with '+' (ascending, the default) or '-'
    (descending). The first prop on which the records differ decides.

    Example:
        sorted(rows, key=functools.cmp_to_key(compare_props(["-d", "+s", "n"])))
    """
    for prop in props:
        name = _SORT_PREFIX_RE.sub("", prop)
        left, right = get_child(a, name, None), get_child(b, name, None)
        if left == right:
            continue
        if prop.startswith("-"):
            return _compare(lambda x, y: x > y, left, right)
        return _compare(lambda x, y: x < y, left, right)
    return 0


def swap(old_index: int, new_index: int, items: Sequence) -> List:
    """
    Swap two elements of a list.

    Raises:
        SwapIndexError: If either index is outside the list
    """
    length = len(items)
    if not (-length <= old_index < length and -length <= new_index < length):
        raise SwapIndexError(
            f"Can not swap items outside of the list: {old_index} <-> {new_index}. List length: {length}."
        )
    result = list(items)
    result[old_index], result[new_index] = items[new_index], items[old_index]
    return result


def uniques_for(*lists: Iterable) -> List:
    """Elements that are unique throughout a group of lists, in first-seen order."""
    return list(toolz.unique(toolz.concat(lists)))


def uniq_lists(lists: Iterable[Iterable]) -> List[List]:
    """
    Remove from each list the values already present in earlier lists.

    Example:
        uniq_lists([["a", "b", "c"], ["b", "c", "d"], ["a", "d", "e"]])
        # [["a", "b", "c"], ["d"], ["e"]]
    """
    seen = []
    result = []
    for values in lists:
        kept = [value for value in values if value not in seen]
        result.append(kept)
        seen.extend(kept)
    return result


# =========================================================================
# Shuffling
# =========================================================================

@curry
def shuffler(random: Callable[[], float], items: Iterable) -> List:
    """
    Return a shuffled copy of `items` (out-of-place Fisher-Yates).

    Args:
        random: Zero-argument callable returning floats in [0, 1)
        items: Values to permute

    A deterministic `random` makes the permutation reproducible.
    """
    items = list(items)
    result = [None] * len(items)
    for index, item in enumerate(items):
        position = math.floor((index + 1) * random())
        result[index] = result[position]
        result[position] = item
    return result


shuffle = shuffler(default_random)
