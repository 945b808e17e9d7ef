"""
Left and right folds.

``reduce`` combines a sequence into one value with a binary function,
strictly in order and without assuming associativity. ``accumulate``
returns every intermediate value of the same recurrence.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable

from .binding import bind
from .errors import EmptyInputError, ShapeError
from .logger import logger
from .pluck import MISSING
from .sequences import elements


class Direction(str, Enum):
    FORWARD = "forward"
    BACKWARD = "backward"


def _fold(
    values: list[Any],
    fn: Callable[..., Any],
    initial: Any,
    direction: Direction,
    name: str,
) -> list[Any]:
    if not values and initial is MISSING:
        raise EmptyInputError(f"{name}: cannot reduce an empty sequence without an initial value")

    logger.debug("%s: folding %d elements %s", name, len(values), direction.value)
    if direction is Direction.BACKWARD:
        values = values[::-1]

    if initial is MISSING:
        acc, rest = values[0], values[1:]
    else:
        acc, rest = initial, values

    steps = [acc]
    for value in rest:
        if direction is Direction.FORWARD:
            acc = fn(acc, value)
        else:
            acc = fn(value, acc)
        steps.append(acc)

    if direction is Direction.BACKWARD:
        steps.reverse()
    return steps


def reduce(
    x: Any,
    f: Any,
    *args: Any,
    initial: Any = MISSING,
    direction: Direction | str = Direction.FORWARD,
    **kwargs: Any,
) -> Any:
    """
    Fold ``x`` into a single value.

    Forward: ``f(f(f(x[0], x[1]), x[2]), ...)``, seeded with ``initial``
    when given. Backward: ``f(x[0], f(x[1], ... f(x[n-2], x[n-1])))``.

    Example:
        reduce([1, 2, 3], operator.add)  # -> 6
        reduce([], operator.add, initial=0)  # -> 0

    Raises:
        EmptyInputError: if ``x`` is empty and no initial value was given.
    """
    values, _ = elements(x)
    fn = bind(f, 2, args, kwargs, "reduce")
    steps = _fold(values, fn, initial, Direction(direction), "reduce")
    return steps[0] if Direction(direction) is Direction.BACKWARD else steps[-1]


def accumulate(
    x: Any,
    f: Any,
    *args: Any,
    initial: Any = MISSING,
    direction: Direction | str = Direction.FORWARD,
    **kwargs: Any,
) -> list[Any]:
    """
    Like ``reduce`` but returns every intermediate value.

    The result has ``len(x)`` values, one more when ``initial`` is given.
    Forward results end with the final value; backward results start with
    it.

    Example:
        accumulate([1, 2, 3], operator.add)  # -> [1, 3, 6]
    """
    values, _ = elements(x)
    fn = bind(f, 2, args, kwargs, "accumulate")
    return _fold(values, fn, initial, Direction(direction), "accumulate")


def _fold2(
    x: Any, y: Any, fn: Callable[..., Any], initial: Any, name: str
) -> list[Any]:
    x_values, _ = elements(x)
    y_values, _ = elements(y)
    expected = len(x_values) if initial is not MISSING else len(x_values) - 1
    if not x_values and initial is MISSING:
        raise EmptyInputError(f"{name}: cannot reduce an empty sequence without an initial value")
    if len(y_values) != expected:
        raise ShapeError(f"{name}: second input must have length {expected}, not {len(y_values)}")

    if initial is MISSING:
        acc, rest = x_values[0], x_values[1:]
    else:
        acc, rest = initial, x_values

    steps = [acc]
    for value, extra in zip(rest, y_values):
        acc = fn(acc, value, extra)
        steps.append(acc)
    return steps


def reduce2(x: Any, y: Any, f: Any, *args: Any, initial: Any = MISSING, **kwargs: Any) -> Any:
    """Fold ``x`` with ``f(acc, x[i], y[j])``, reading ``y`` alongside each step."""
    fn = bind(f, 3, args, kwargs, "reduce2")
    return _fold2(x, y, fn, initial, "reduce2")[-1]


def accumulate2(x: Any, y: Any, f: Any, *args: Any, initial: Any = MISSING, **kwargs: Any) -> list[Any]:
    fn = bind(f, 3, args, kwargs, "accumulate2")
    return _fold2(x, y, fn, initial, "accumulate2")
