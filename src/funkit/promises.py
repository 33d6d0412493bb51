"""
Thin asyncio wrappers.

These add no scheduling of their own. Ordering, cancellation and
timeouts are whatever asyncio provides.
"""

import asyncio
from typing import Any, Awaitable, Callable, Iterable, List

from toolz import curry


__all__ = ["all_p", "delay", "reject_with_code", "tap_p"]


def tap_p(coro_fn: Callable[[Any], Awaitable]) -> Callable[[Any], Awaitable]:
    """
    Tap for coroutine functions.

    Returns a coroutine function that awaits coro_fn(arg) for its effect and
    then returns `arg` itself.
    """
    async def tapped(arg: Any) -> Any:
        await coro_fn(arg)
        return arg
    return tapped


@curry
async def reject_with_code(code: Any, error: BaseException) -> None:
    """Attach `code` as `error.error_code` and raise the error."""
    error.error_code = code
    raise error


async def all_p(awaitables: Iterable[Awaitable]) -> List:
    """Await all, returning their results in order."""
    return list(await asyncio.gather(*awaitables))


async def delay(ms: float) -> None:
    """Sleep for `ms` milliseconds."""
    await asyncio.sleep(ms / 1000)
