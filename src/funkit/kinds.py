"""
Container kinds for structural traversal.

Every helper that walks a nested value (paths, recursive omit, structural
matching, flattening) classifies each node into one of a small closed set of
kinds and branches on that, rather than sprinkling isinstance checks.

ARCHITECTURAL RULE:
    Only three kinds exist. Anything that is not a mapping or a
    list/tuple is a leaf, including strings and bytes.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any


__all__ = [
    "MISSING",
    "ContainerKind",
    "as_index",
    "container_kind",
    "get_child",
    "has_child",
]


class ContainerKind(Enum):
    """Shape of a node inside a nested value."""

    MAPPING = "mapping"
    SEQUENCE = "sequence"
    SCALAR = "scalar"


class _Missing:
    """Marker for an absent value, distinct from None."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


def container_kind(value: Any) -> ContainerKind:
    if isinstance(value, Mapping):
        return ContainerKind.MAPPING
    if isinstance(value, (list, tuple)):
        return ContainerKind.SEQUENCE
    return ContainerKind.SCALAR


def as_index(segment: Any):
    """
    Interpret a path segment as a sequence index.

    Returns an int for ints and digit strings (bools excluded), else None.
    """
    if isinstance(segment, bool):
        return None
    if isinstance(segment, int):
        return segment
    if isinstance(segment, str) and segment.isdigit():
        return int(segment)
    return None


def get_child(container: Any, segment: Any, default: Any = MISSING) -> Any:
    """
    Take a single step into a container.

    Args:
        container: Any value
        segment: Mapping key or sequence index
        default: Returned when the step cannot be taken

    Returns:
        The child value, or `default` if absent
    """
    kind = container_kind(container)
    if kind is ContainerKind.MAPPING:
        if segment in container:
            return container[segment]
        return default
    if kind is ContainerKind.SEQUENCE:
        index = as_index(segment)
        if index is not None and -len(container) <= index < len(container):
            return container[index]
        return default
    return default


def has_child(container: Any, segment: Any) -> bool:
    return get_child(container, segment) is not MISSING
