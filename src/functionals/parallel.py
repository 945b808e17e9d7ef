"""
Async map and fold that run independent calls concurrently.

These are opt-in companions to the sequential functionals, meant for
expensive async functions (remote calls, model queries). Results keep
position order; only the timing of the calls differs.

Usage:
    results = await map_async(items, fetch, limit=8)
    total = await reduce_async(chunks, merge)
"""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, TypeVar

from .binding import bind
from .errors import EmptyInputError
from .logger import logger
from .pluck import MISSING
from .sequences import elements, wrap

T = TypeVar("T")

AsyncFunc = Callable[..., Awaitable[T]]


async def map_async(x: Any, f: AsyncFunc[T], *args: Any, limit: int | None = None, **kwargs: Any) -> list[T] | dict:
    """
    Await ``f`` for every element concurrently.

    Args:
        x: Input sequence; named input gives a dict result.
        f: Async function of one element (plus constants).
        limit: Maximum number of calls in flight, unbounded when None.
    """
    values, names = elements(x)
    fn = bind(f, 1, args, kwargs, "map_async")

    if limit is not None and limit < 1:
        raise ValueError("limit must be at least one")
    semaphore = asyncio.Semaphore(limit) if limit is not None else None

    # fn is only called inside its task, so a failing call leaves no
    # earlier coroutine unawaited
    async def call(value: Any) -> T:
        if semaphore is None:
            return await fn(value)
        async with semaphore:
            return await fn(value)

    results = await asyncio.gather(*[call(v) for v in values])
    return wrap(list(results), names)


async def reduce_async(x: Any, f: AsyncFunc[T], *args: Any, initial: Any = MISSING, **kwargs: Any) -> T:
    """
    Tree-shaped fold: combine adjacent pairs level by level.

    Operands stay adjacent and in order, so ``f`` must be associative but
    need not be commutative. Depth is log2(n) rounds of concurrent calls.

    Raises:
        EmptyInputError: if ``x`` is empty and no initial value was given.
    """
    values, _ = elements(x)
    if initial is not MISSING:
        values = [initial, *values]
    if not values:
        raise EmptyInputError("reduce_async: cannot reduce an empty sequence without an initial value")

    fn = bind(f, 2, args, kwargs, "reduce_async")

    async def combine(left: Any, right: Any) -> T:
        return await fn(left, right)

    level = values
    rounds = 0
    while len(level) > 1:
        pairs = [combine(level[i], level[i + 1]) for i in range(0, len(level) - 1, 2)]
        combined = list(await asyncio.gather(*pairs))
        if len(level) % 2:
            combined.append(level[-1])
        level = combined
        rounds += 1

    logger.debug("reduce_async: %d elements in %d rounds", len(values), rounds)
    return level[0]
