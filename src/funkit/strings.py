"""
String helpers: dot-path splitting, loose parsing of string flags,
prefix/suffix tests and case conversion.

Case conversion works on words obtained by splitting on any run of
non-alphanumeric characters and then before every capital letter:

    "  hello -/ world/ "  -> ["hello", "world"]
    "helloWorld"          -> ["hello", "World"]
"""

import re
from typing import Any, List

from toolz import curry, mapcat


__all__ = [
    "camel_case",
    "capitalize",
    "dot_case",
    "kebab_case",
    "lower_first",
    "parse_bool",
    "parse_nil",
    "pascal_case",
    "prefix_with",
    "reg_exp",
    "snake_case",
    "split_alphameric",
    "split_capital",
    "split_capital_alphameric",
    "split_head",
    "split_or_array",
    "split_tail",
    "suffix_with",
    "truncate",
    "upper_first",
]


_NON_ALPHANUMERIC_RE = re.compile(r"[^a-zA-Z0-9]+")
_BEFORE_CAPITAL_RE = re.compile(r"(?=[A-Z])")

# Strings treated as "no value" when parsing loosely typed input
_NIL_STRINGS = frozenset({"null", "undefined", "0", "false", "NaN"})
_FALSE_STRINGS = _NIL_STRINGS | {""}

# JavaScript-style regex flag letters; "g" has no Python counterpart
_REGEX_FLAGS = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "g": 0,
}

ELLIPSIS = "…"


def split_head(path: str) -> str:
    """First segment of a dot path: split_head("a.b.c") == "a"."""
    return path.split(".")[0]


def split_tail(path: str) -> str:
    """Everything after the first segment: split_tail("a.b.c") == "b.c"."""
    return ".".join(path.split(".")[1:])


def split_or_array(value: Any) -> List:
    """
    Always get a list out of a loosely typed value.

    Strings are split on commas, lists are returned as they are and any
    other value is wrapped in a list.
    """
    if isinstance(value, str):
        return value.split(",")
    if isinstance(value, list):
        return value
    return [value]


def parse_nil(value: Any) -> Any:
    """Map "null", "undefined", "0", "false" and "NaN" to None; pass anything else through."""
    if isinstance(value, str) and value in _NIL_STRINGS:
        return None
    return value


def parse_bool(value: Any) -> bool:
    if isinstance(value, str) and value in _FALSE_STRINGS:
        return False
    return bool(value)


@curry
def truncate(length: int, text: str) -> str:
    """truncate(5, "hello world") == "hello…"."""
    if len(text) > length:
        return text[:length] + ELLIPSIS
    return text


def reg_exp(pattern: str, flags: str = "") -> "re.Pattern":
    """
    Compile a pattern with JavaScript-style flag letters.

    Example:
        reg_exp("end$", "gi").search("in the END")  # match

    Raises:
        ValueError: On an unknown flag letter
    """
    compiled_flags = 0
    for letter in flags:
        if letter not in _REGEX_FLAGS:
            raise ValueError(f"Unsupported regular expression flag: {letter!r}")
        compiled_flags |= _REGEX_FLAGS[letter]
    return re.compile(pattern, compiled_flags)


@curry
def prefix_with(prefix: str, text: str) -> bool:
    """Case-insensitive startswith: prefix_with("HELL", "hello") is True."""
    return text.casefold().startswith(prefix.casefold())


@curry
def suffix_with(suffix: str, text: str) -> bool:
    """Case-insensitive endswith."""
    return text.casefold().endswith(suffix.casefold())


def split_alphameric(text: str) -> List[str]:
    """split_alphameric("Hello    world/1") == ["Hello", "world", "1"]"""
    return [part for part in _NON_ALPHANUMERIC_RE.split(text) if part]


def split_capital(text: str) -> List[str]:
    """split_capital("helloWorld") == ["hello", "World"]"""
    return [part for part in _BEFORE_CAPITAL_RE.split(text) if part]


def split_capital_alphameric(text: str) -> List[str]:
    return list(mapcat(split_capital, split_alphameric(text)))


def lower_first(text: str) -> str:
    """lower_first("HELLO WORLD") == "hELLO WORLD"."""
    return text[:1].lower() + text[1:]


def upper_first(text: str) -> str:
    """upper_first("hello world") == "Hello world"."""
    return text[:1].upper() + text[1:]


capitalize = upper_first


def _join_lower(separator: str, text: str) -> str:
    return separator.join(word.lower() for word in split_capital_alphameric(text))


def dot_case(text: str) -> str:
    """dot_case("helloWorld/ ") == "hello.world"."""
    return _join_lower(".", text)


def kebab_case(text: str) -> str:
    """kebab_case("  hello-/ world/ ") == "hello-world"."""
    return _join_lower("-", text)


def snake_case(text: str) -> str:
    """snake_case("HelloWorld/ ") == "hello_world"."""
    return _join_lower("_", text)


def pascal_case(text: str) -> str:
    """pascal_case("hello- world") == "HelloWorld"."""
    return "".join(upper_first(word) for word in split_capital_alphameric(text))


def camel_case(text: str) -> str:
    """camel_case("HelloWorld/ ") == "helloWorld"."""
    return lower_first(pascal_case(text))
