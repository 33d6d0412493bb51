"""
Adapters between `returns` containers and plain values.

Maybe (Some / Nothing) and Result (Success / Failure) are used where
absence or failure is expected. These helpers are the exit points: they
either extract the wrapped value or raise.
"""

from typing import Any, Iterable, List, Optional

from returns.maybe import Maybe
from returns.pipeline import is_successful
from returns.result import Result
from toolz import curry


__all__ = [
    "UnwrapError",
    "cat_maybes",
    "cat_successes",
    "explode_maybe",
    "explode_result",
]


NOTHING_MESSAGE = "Expected Some, but got Nothing."


class UnwrapError(ValueError):
    """Raised when an empty Maybe or a Failure is forced open."""
    pass


@curry
def explode_maybe(error_message: str, maybe: Maybe) -> Any:
    """
    Value of a Some, or raise on Nothing.

    Raises:
        UnwrapError: With `error_message` when `maybe` is Nothing
    """
    if is_successful(maybe):
        return maybe.unwrap()
    raise UnwrapError(error_message)


@curry
def explode_result(error_message: Optional[str], result: Result) -> Any:
    """
    Value of a Success, or raise on Failure.

    Args:
        error_message: Message for the raised error. If None, the message
            names the failure value.
        result: Result container

    Raises:
        UnwrapError: When `result` is a Failure
    """
    if is_successful(result):
        return result.unwrap()
    failure = result.failure()
    if error_message is None:
        error_message = f"Expected Success, but got Failure({failure!r})."
    raise UnwrapError(error_message)


def cat_maybes(maybes: Iterable[Maybe]) -> List:
    """Values of the Some entries, in order."""
    return [explode_maybe(NOTHING_MESSAGE, maybe) for maybe in maybes if is_successful(maybe)]


def cat_successes(results: Iterable[Result]) -> List:
    """Values of the Success entries, in order."""
    return [explode_result(None, result) for result in results if is_successful(result)]
