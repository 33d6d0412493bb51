"""
Object (mapping) helpers.

Covers three families:
    - Shallow reshaping of flat mappings (rename, invert, filter, diff)
    - Path-based access and immutable update of nested mappings/lists
    - Recursive structural operations (omit_recursively, where_all)

ARCHITECTURAL RULE:
    Inputs are never mutated. Updates clone only the containers along the
    touched path; untouched siblings are shared by reference.

    Recursive helpers have no cycle guard. Callers must pass acyclic data.
"""

import copy
import functools
import warnings
from typing import Any, Callable, Dict, Iterable, List, Sequence

from toolz import curry

from funkit.kinds import (
    MISSING,
    ContainerKind,
    as_index,
    container_kind,
    get_child,
    has_child,
)
from funkit.logic import is_truthy
from funkit.predicates import is_plain_obj


__all__ = [
    "array_as_object",
    "assign_all",
    "assoc_dot_path",
    "assoc_path",
    "assoc_path_with",
    "assoc_with",
    "diff_objs",
    "dissoc_path",
    "dissoc_paths",
    "dot_path",
    "dot_path_eq",
    "filter_with_keys",
    "find_key_of_value",
    "flatten_obj",
    "has_dot_path",
    "has_path",
    "invert_map",
    "is_plain_object",
    "map_keys",
    "map_keys_and_values",
    "map_keys_with_value",
    "merge_deep_all",
    "merge_deep_right",
    "method_names",
    "obj_of_array",
    "obj_size",
    "object_as_array",
    "omit_recursively",
    "omit_when",
    "opt_obj_of",
    "pick_path",
    "property_list",
    "props_path",
    "rename_keys",
    "rename_keys_by",
    "set_dot_path",
    "set_path",
    "sort_keys",
    "spread",
    "subtract_object",
    "where_all",
]


is_plain_object = is_plain_obj


def _split_dot_path(path: str) -> List[str]:
    return path.split(".")


def _split_dot_path_indexed(path: str) -> List[Any]:
    """Dot path where digit segments become list indexes."""
    return [int(segment) if segment.isdigit() else segment for segment in path.split(".")]


def _copy_mapping(obj) -> Dict:
    if isinstance(obj, dict):
        return copy.copy(obj)
    return dict(obj)


def _rebuild_sequence(original: Sequence, items: List) -> Sequence:
    """Rebuild a list/tuple of the same type as `original` from `items`."""
    if isinstance(original, list):
        return type(original)(items)
    if hasattr(original, "_fields"):
        return type(original)(*items)
    return type(original)(items)


# =========================================================================
# Merging and comparison
# =========================================================================

@curry
def merge_deep_right(left: Any, right: Any) -> Any:
    """Recursively merge two mappings; on conflicting non-mapping values `right` wins."""
    if container_kind(left) is ContainerKind.MAPPING and container_kind(right) is ContainerKind.MAPPING:
        merged = dict(left)
        for key, value in right.items():
            merged[key] = merge_deep_right(merged[key], value) if key in merged else value
        return merged
    return right


def merge_deep_all(objs: Iterable[Dict]) -> Dict:
    return functools.reduce(merge_deep_right, objs, {})


def assign_all(*objs: Dict) -> Dict:
    """Deep-merge deep copies of the given mappings, skipping None."""
    return merge_deep_all([copy.deepcopy(obj) for obj in objs if obj is not None])


@curry
def subtract_object(base: Dict, obj: Dict) -> Dict:
    """
    Copy of `obj` without the fields whose value equals the same field of `base`.

    Example:
        subtract_object({"foo": 1, "bar": 2}, {"foo": 1, "bar": "not 2", "baz": 3})
        # {"bar": "not 2", "baz": 3}
    """
    return {key: value for key, value in obj.items() if not (key in base and base[key] == value)}


@curry
def diff_objs(left: Dict, right: Dict) -> Dict[str, Dict]:
    """
    Difference of two mappings.

    Returns:
        Dict with four groups:
            common: fields equal on both sides
            diff: fields present on both sides with different values,
                  each as {"left": ..., "right": ...}
            only_on_left / only_on_right: fields present on one side only

    Example:
        diff_objs({"a": 1, "c": 5, "d": 4}, {"a": 1, "b": 2, "d": 7})
        # {"common": {"a": 1},
        #  "diff": {"d": {"left": 4, "right": 7}},
        #  "only_on_left": {"c": 5},
        #  "only_on_right": {"b": 2}}
    """
    result: Dict[str, Dict] = {"common": {}, "diff": {}, "only_on_left": {}, "only_on_right": {}}
    for key in {**left, **right}:
        if key in left and key in right:
            if left[key] == right[key]:
                result["common"][key] = left[key]
            else:
                result["diff"][key] = {"left": left[key], "right": right[key]}
        elif key in left:
            result["only_on_left"][key] = left[key]
        else:
            result["only_on_right"][key] = right[key]
    return result


# =========================================================================
# Flat reshaping
# =========================================================================

def array_as_object(entries: Iterable) -> Dict:
    """Mapping from (key, value) pairs; later pairs win."""
    return {key: value for key, value in entries}


@curry
def object_as_array(keys: Sequence, obj: Dict) -> List[Dict]:
    """
    Convert a mapping into a list of records, one per (key, value) pair.

    Example:
        object_as_array(["key", "value"], {"I": 2, "it": 4})
        # [{"key": "I", "value": 2}, {"key": "it", "value": 4}]
    """
    return [dict(zip(keys, pair)) for pair in obj.items()]


@curry
def filter_with_keys(predicate: Callable, obj: Dict) -> Dict:
    """Keep fields for which predicate(key, value) is truthy."""
    return {key: value for key, value in obj.items() if predicate(key, value)}


@curry
def find_key_of_value(value: Any, obj: Dict) -> Any:
    """First key holding `value`, or None."""
    for key, candidate in obj.items():
        if candidate == value:
            return key
    return None


def _entries(container: Any):
    if container_kind(container) is ContainerKind.MAPPING:
        return container.items()
    return enumerate(container)


def flatten_obj(obj: Any) -> Dict[str, Any]:
    """
    Flatten nested mappings and lists into dot-separated keys.

    Example:
        flatten_obj({"a": 1, "b": {"c": 3}, "d": {"g": [{"h": 8}, 0]}})
        # {"a": 1, "b.c": 3, "d.g.0.h": 8, "d.g.1": 0}
    """
    flat = {}
    for key, value in _entries(obj):
        if container_kind(value) is ContainerKind.SCALAR:
            flat[str(key)] = value
        else:
            for sub_key, sub_value in flatten_obj(value).items():
                flat[f"{key}.{sub_key}"] = sub_value
    return flat


@curry
def map_keys(fn: Callable, obj: Dict) -> Dict:
    return {fn(key): value for key, value in obj.items()}


@curry
def map_keys_and_values(fn: Callable, obj: Dict) -> Dict:
    """Map each (key, value) pair through `fn`, which returns the new pair."""
    return dict(fn(pair) for pair in obj.items())


@curry
def map_keys_with_value(fn: Callable, obj: Dict) -> Dict:
    """New key is fn(key, value); values are kept."""
    return {fn(key, value): value for key, value in obj.items()}


@curry
def obj_of_array(fn: Callable, items: Iterable) -> Dict:
    """
    Example:
        obj_of_array(lambda s: s[::-1], ["abc", "def"])  # {"abc": "cba", "def": "fed"}
    """
    return {str(item): fn(item) for item in items}


@curry
def opt_obj_of(key: Any, value: Any) -> Dict:
    """{key: value}, or {} when value is None."""
    if value is None:
        return {}
    return {key: value}


def obj_size(value: Any) -> int:
    """
    Size of an arbitrary value.

    Mappings, sequences and strings: their length. Numbers: digits of their
    string form. Booleans: 1 for True, 0 for False. None and other values: 0.
    """
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return len(str(value))
    if hasattr(value, "__len__"):
        return len(value)
    return 0


@curry
def omit_when(predicate: Callable, keys: Iterable, obj: Dict) -> Dict:
    """
    Remove the listed keys whose values satisfy `predicate`.

    Example:
        omit_when(lambda v: v == 2, ["a", "c"], {"a": 1, "b": 1, "c": 2, "d": 2})
        # {"a": 1, "b": 1, "d": 2}
    """
    keys = set(keys)
    return {key: value for key, value in obj.items() if not (key in keys and predicate(value))}


def method_names(obj: Any) -> List[str]:
    """
    Names of callable members.

    For mappings these are the keys holding callables, otherwise the public
    callable attributes.
    """
    if container_kind(obj) is ContainerKind.MAPPING:
        return [key for key, value in obj.items() if callable(value)]
    return [name for name in dir(obj) if not name.startswith("_") and callable(getattr(obj, name))]


def property_list(table: Sequence[Sequence]) -> List[Dict]:
    """
    Convert header-first rows into records.

    Example:
        property_list([["name", "age"], ["john", 23], ["maggie", 45]])
        # [{"name": "john", "age": 23}, {"name": "maggie", "age": 45}]
    """
    if not table:
        return []
    header, *rows = table
    return [dict(zip(header, row)) for row in rows]


def _rename(obj: Dict, rename: Callable) -> Dict:
    renamed = {}
    for key, value in obj.items():
        target = rename(key)
        if target in renamed:
            warnings.warn(f"Renaming '{key}' collides with existing key '{target}'", UserWarning)
        renamed[target] = value
    return renamed


@curry
def rename_keys(keys_map: Dict, obj: Dict) -> Dict:
    """
    Rename keys according to `keys_map` ({old: new}); unmapped keys pass through.

    When two keys end up with the same name the later one wins and a
    UserWarning is emitted.
    """
    return _rename(obj, lambda key: keys_map.get(key, key))


@curry
def rename_keys_by(fn: Callable, obj: Dict) -> Dict:
    return _rename(obj, fn)


def invert_map(obj: Dict) -> Dict:
    """Swap keys and values. Duplicate values warn and keep the later key."""
    inverted = {}
    for key, value in obj.items():
        if value in inverted:
            warnings.warn(f"Value {value!r} is shared by several keys; keeping '{key}'", UserWarning)
        inverted[value] = key
    return inverted


def sort_keys(obj: Dict) -> Dict:
    return dict(sorted(obj.items(), key=lambda pair: pair[0]))


@curry
def spread(key: Any, obj: Dict) -> Dict:
    """
    Replace a nested mapping by its own fields.

    Example:
        spread("b", {"a": 1, "b": {"c": 3, "d": 4}})  # {"a": 1, "c": 3, "d": 4}
    """
    rest = {k: v for k, v in obj.items() if k != key}
    return {**rest, **(obj.get(key) or {})}


# =========================================================================
# Path access and update
# =========================================================================

def _get_path(path: Iterable, obj: Any) -> Any:
    current = obj
    for segment in path:
        current = get_child(current, segment)
        if current is MISSING:
            break
    return current


@curry
def has_path(path: Sequence, obj: Any) -> bool:
    """
    Whether a value exists at exactly `path`.

    An empty path is always False. Traversal stops at the first missing
    segment or non-container value.

    Example:
        has_path(["a", "b"], {"a": {"b": 1}})  # True
        has_path([0], [1, 2])                 # True
    """
    if not path or container_kind(obj) is ContainerKind.SCALAR:
        return False
    head, *rest = path
    if not rest:
        return has_child(obj, head)
    return has_path(rest, get_child(obj, head))


@curry
def has_dot_path(path: str, obj: Any) -> bool:
    return has_path(_split_dot_path(path), obj)


@curry
def dot_path(path: str, obj: Any) -> Any:
    """Value at a dot-separated path, or None: dot_path("a.b", {"a": {"b": 2}}) == 2."""
    value = _get_path(_split_dot_path(path), obj)
    return None if value is MISSING else value


@curry
def dot_path_eq(path: str, value: Any, obj: Any) -> bool:
    return _get_path(_split_dot_path(path), obj) == value


@curry
def props_path(paths: Iterable[str], obj: Any) -> List:
    return [dot_path(path, obj) for path in paths]


def _creates_sequence(segment: Any) -> bool:
    return isinstance(segment, int) and not isinstance(segment, bool) and segment >= 0


@curry
def assoc_with(fn: Callable, key: Any, obj: Any) -> Any:
    """
    Shallow copy of `obj` with `key` set to fn(previous value).

    `previous` is None when the key is absent. Lists stay lists (indexes past
    the end are padded with None, in-range negative indexes count from the
    end); mappings keep their type. A list addressed by any other key is
    turned into a dict keyed by position. A missing or
    scalar `obj` is replaced by a new list for non-negative integer keys and
    by a new dict otherwise.

    Example:
        assoc_with(lambda x: x + 1, "b", {"a": 1, "b": 2})  # {"a": 1, "b": 3}
    """
    kind = container_kind(obj)

    if kind is ContainerKind.MAPPING:
        result = _copy_mapping(obj)
        result[key] = fn(obj.get(key))
        return result

    if kind is ContainerKind.SEQUENCE:
        index = as_index(key)
        if index is None or index < -len(obj):
            result = dict(enumerate(obj))
            result[key] = fn(None)
            return result
        items = list(obj)
        if index >= len(items):
            items.extend([None] * (index + 1 - len(items)))
        items[index] = fn(items[index])
        return _rebuild_sequence(obj, items)

    if _creates_sequence(key):
        items = [None] * (key + 1)
        items[key] = fn(None)
        return items
    return {key: fn(None)}


@curry
def assoc_path_with(fn: Callable, path: Sequence, obj: Any) -> Any:
    """
    Apply `fn` at the end of `path`, cloning every level along the way.

    Missing or scalar intermediate levels are replaced by new containers
    (a list for non-negative integer segments, a dict otherwise). With an
    empty path the whole input is passed to `fn`.

    Example:
        assoc_path_with(lambda x: x + 1, ["a", "b", "c"], {"a": {"b": {"c": 3}}})
        # {"a": {"b": {"c": 4}}}
        assoc_path_with(lambda _: 42, ["a", "b", "c"], {"a": 5})
        # {"a": {"b": {"c": 42}}}
        assoc_path_with(lambda _: 42, [], {"a": 5})
        # 42

    IMPORTANT:
        Only the containers on the path are copied. Siblings are shared
        with the input by reference.
    """
    if not path:
        return fn(obj)
    head, *rest = path
    if not rest:
        return assoc_with(fn, head, obj)
    return assoc_with(lambda child: assoc_path_with(fn, rest, child), head, obj)


@curry
def assoc_path(path: Sequence, value: Any, obj: Any) -> Any:
    """Set `value` at `path`, creating intermediate containers as needed."""
    return assoc_path_with(lambda _: value, path, obj)


set_path = assoc_path


@curry
def assoc_dot_path(path: str, value: Any, obj: Any) -> Any:
    """
    Set a value at a dot-separated path.

    Digit segments index into existing lists; missing levels become dicts.
    """
    return assoc_path(_split_dot_path(path), value, obj)


@curry
def set_dot_path(path: str, value: Any, obj: Any) -> Any:
    """
    Like assoc_dot_path, but digit segments create lists for missing levels.

    Example:
        set_dot_path("a.0.b", "hi", {"a": [{"b": "hey"}]})  # {"a": [{"b": "hi"}]}
        set_dot_path("x.1", "hi", {})                      # {"x": [None, "hi"]}
    """
    return assoc_path(_split_dot_path_indexed(path), value, obj)


@curry
def dissoc_path(path: Sequence, obj: Any) -> Any:
    """Remove the value at `path`. Missing paths return the input unchanged."""
    if not path or not has_child(obj, path[0]):
        return obj
    head, *rest = path
    if rest:
        return assoc_with(lambda child: dissoc_path(rest, child), head, obj)
    if container_kind(obj) is ContainerKind.SEQUENCE:
        index = as_index(head)
        items = list(obj)
        del items[index]
        return _rebuild_sequence(obj, items)
    result = _copy_mapping(obj)
    del result[head]
    return result


@curry
def dissoc_paths(paths: Iterable[str], obj: Any) -> Any:
    """Remove several dot-separated paths."""
    for path in paths:
        obj = dissoc_path(_split_dot_path(path), obj)
    return obj


@curry
def pick_path(paths: Iterable[str], obj: Any) -> Dict:
    """
    Build a new nested mapping containing only the given dot paths.

    Example:
        pick_path(["a.b", "c"], {"a": {"b": 1, "x": 2}, "c": 3, "d": 4})
        # {"a": {"b": 1}, "c": 3}

    Paths missing from `obj` are skipped.
    """
    picked: Dict = {}
    for path in paths:
        segments = _split_dot_path(path)
        value = _get_path(segments, obj)
        if value is not MISSING:
            picked = assoc_path(segments, value, picked)
    return picked


# =========================================================================
# Recursive structural operations
# =========================================================================

@curry
def omit_recursively(keys: Iterable, value: Any) -> Any:
    """
    Remove the given keys from every mapping at every depth.

    Lists and tuples are traversed element-wise. Container types are
    preserved (a dict stays a dict, a tuple stays a tuple).

    Example:
        omit_recursively(["x"], {"x": 1, "a": [{"x": 2, "b": 3}]})
        # {"a": [{"b": 3}]}
    """
    keys = set(keys)
    kind = container_kind(value)

    if kind is ContainerKind.MAPPING:
        result = _copy_mapping(value)
        for key in list(result):
            if key in keys:
                del result[key]
            else:
                result[key] = omit_recursively(keys, result[key])
        return result

    if kind is ContainerKind.SEQUENCE:
        return _rebuild_sequence(value, [omit_recursively(keys, item) for item in value])

    return value


def _matches(spec: Any, data: Any) -> bool:
    if data is MISSING:
        return spec is False
    if spec is None:
        return True
    if spec is False:
        return False
    if spec is True:
        return True
    if callable(spec):
        return is_truthy(spec(data))

    kind = container_kind(spec)
    if kind is ContainerKind.MAPPING:
        return all(_matches(value, get_child(data, key)) for key, value in spec.items())
    if kind is ContainerKind.SEQUENCE:
        return all(_matches(value, get_child(data, index)) for index, value in enumerate(spec))
    return isinstance(data, bool) is isinstance(spec, bool) and data == spec


@curry
def where_all(spec: Any, data: Any) -> bool:
    """
    Check `data` against a nested pattern of expectations.

    Spec values, in order of precedence:
        - absent data matches only a spec of exactly False
        - None: anything present matches
        - False: the field must be absent
        - True: the field must be present
        - callable: called with the data, must return a truthy value
        - mapping / list: every entry must match (recursively)
        - anything else: must equal the data

    Example:
        where_all({"a": True, "b": False, "c": None}, {"a": 1, "c": 99})  # True
        where_all({"a": 1}, {"a": 2})                                   # False
        where_all({"user": {"age": lambda n: n >= 18}}, {"user": {"age": 30}})  # True
    """
    return _matches(spec, data)
