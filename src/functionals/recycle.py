"""Length reconciliation for parallel inputs."""

from __future__ import annotations

from typing import Any, Iterator, Sequence

from .errors import RecycleError
from .logger import logger


def recycle_lengths(lengths: Sequence[int], name: str = "map2") -> int:
    """
    Target length for parallel inputs of the given lengths.

    The target is the longest length. Every shorter input must divide it
    evenly; an empty input only recycles against other empty inputs.

    Raises:
        RecycleError: if some shorter length does not divide the longest.
    """
    target = max(lengths, default=0)
    for length in lengths:
        if length == target:
            continue
        if length == 0 or target % length:
            raise RecycleError(
                f"{name}: cannot recycle input of length {length} to length {target}",
                lengths=tuple(lengths),
            )
    if len(set(lengths)) > 1:
        logger.debug("%s: recycling lengths %s to %d", name, tuple(lengths), target)
    return target


def recycled(values: Sequence[Any], n: int) -> Iterator[Any]:
    """Yield ``n`` values, repeating ``values`` cyclically."""
    size = len(values)
    for i in range(n):
        yield values[i % size]
