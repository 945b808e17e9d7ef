"""
Predicate functionals.

Searches (``some``, ``every``, ``none``, ``detect``, ``detect_index``)
walk explicit positions and stop at the first decisive element, so a
predicate with side effects is never called past that point.

Predicates must return a bool. In the default strict mode anything else
raises ``PredicateTypeError``; in truthy mode the result is coerced with
``bool()``.
"""

from __future__ import annotations

from typing import Any, Callable, Hashable

import numpy as np

from . import config
from .binding import bind
from .config import PredicateMode
from .errors import PredicateTypeError
from .folding import Direction
from .sequences import Names, elements, materialize, rebuild, subset, wrap


def _verdict(result: Any, index: Hashable, mode: PredicateMode) -> bool:
    if isinstance(result, (bool, np.bool_)):
        return bool(result)
    if mode is PredicateMode.TRUTHY:
        return bool(result)
    raise PredicateTypeError(
        f"predicate must return a bool, got {type(result).__name__} at {index!r}",
        index=index,
        value=result,
    )


def _predicate(
    p: Any, args: tuple, kwargs: dict, mode: PredicateMode | str | None, name: str
) -> Callable[[Any, Hashable], bool]:
    fn = bind(p, 1, args, kwargs, name)
    resolved = config.settings.predicate_mode if mode is None else PredicateMode(mode)

    def check(value: Any, index: Hashable) -> bool:
        return _verdict(fn(value), index, resolved)

    return check


def _positions(n: int, direction: Direction | str) -> range:
    if Direction(direction) is Direction.BACKWARD:
        return range(n - 1, -1, -1)
    return range(n)


def some(x: Any, p: Any, *args: Any, mode: PredicateMode | str | None = None, **kwargs: Any) -> bool:
    """True if ``p`` holds for at least one element; stops at the first match."""
    values, _ = elements(x)
    check = _predicate(p, args, kwargs, mode, "some")
    for i in range(len(values)):
        if check(values[i], i):
            return True
    return False


def every(x: Any, p: Any, *args: Any, mode: PredicateMode | str | None = None, **kwargs: Any) -> bool:
    """True if ``p`` holds for all elements; stops at the first failure."""
    values, _ = elements(x)
    check = _predicate(p, args, kwargs, mode, "every")
    for i in range(len(values)):
        if not check(values[i], i):
            return False
    return True


def none(x: Any, p: Any, *args: Any, mode: PredicateMode | str | None = None, **kwargs: Any) -> bool:
    """True if ``p`` holds for no element; stops at the first match."""
    values, _ = elements(x)
    check = _predicate(p, args, kwargs, mode, "none")
    for i in range(len(values)):
        if check(values[i], i):
            return False
    return True


def detect(
    x: Any,
    p: Any,
    *args: Any,
    default: Any = None,
    direction: Direction | str = Direction.FORWARD,
    mode: PredicateMode | str | None = None,
    **kwargs: Any,
) -> Any:
    """First element for which ``p`` holds, or ``default`` if none does."""
    values, _ = elements(x)
    check = _predicate(p, args, kwargs, mode, "detect")
    for i in _positions(len(values), direction):
        if check(values[i], i):
            return values[i]
    return default


def detect_index(
    x: Any,
    p: Any,
    *args: Any,
    direction: Direction | str = Direction.FORWARD,
    mode: PredicateMode | str | None = None,
    **kwargs: Any,
) -> int:
    """Zero-based position of the first element for which ``p`` holds, or -1."""
    values, _ = elements(x)
    check = _predicate(p, args, kwargs, mode, "detect_index")
    for i in _positions(len(values), direction):
        if check(values[i], i):
            return i
    return -1


def _matches(
    values: list[Any], names: Names, p: Any, args: tuple, kwargs: dict, mode: Any, name: str
) -> list[bool]:
    check = _predicate(p, args, kwargs, mode, name)
    return [check(v, names[i] if names is not None else i) for i, v in enumerate(values)]


def keep(x: Any, p: Any, *args: Any, mode: PredicateMode | str | None = None, **kwargs: Any) -> Any:
    """
    Elements for which ``p`` holds, in their original order.

    Names of a named input and the container type are kept.

    Example:
        keep([1, 2, 3, 4], lambda v: v % 2 == 0)  # -> [2, 4]
    """
    x = materialize(x)
    values, names = elements(x)
    flags = _matches(values, names, p, args, kwargs, mode, "keep")
    return subset(x, values, [i for i, flag in enumerate(flags) if flag])


def discard(x: Any, p: Any, *args: Any, mode: PredicateMode | str | None = None, **kwargs: Any) -> Any:
    """Elements for which ``p`` does not hold; the complement of ``keep``."""
    x = materialize(x)
    values, names = elements(x)
    flags = _matches(values, names, p, args, kwargs, mode, "discard")
    return subset(x, values, [i for i, flag in enumerate(flags) if not flag])


def _map_if(
    values: list[Any],
    names: Names,
    p: Any,
    f: Any,
    otherwise: Any,
    args: tuple,
    kwargs: dict,
    mode: Any,
    name: str,
) -> list[Any]:
    check = _predicate(p, (), {}, mode, name)
    fn = bind(f, 1, args, kwargs, name)
    alt = bind(otherwise, 1, args, kwargs, name) if otherwise is not None else None

    out = []
    for i, value in enumerate(values):
        if check(value, names[i] if names is not None else i):
            out.append(fn(value))
        elif alt is not None:
            out.append(alt(value))
        else:
            out.append(value)
    return out


def map_if(
    x: Any,
    p: Any,
    f: Any,
    *args: Any,
    otherwise: Any = None,
    mode: PredicateMode | str | None = None,
    **kwargs: Any,
) -> list[Any] | dict[Hashable, Any]:
    """
    Apply ``f`` where ``p`` holds; other elements pass through unchanged,
    or through ``otherwise`` when given.

    The predicate is called without the constant arguments; they only go
    to ``f`` and ``otherwise``.
    """
    values, names = elements(x)
    return wrap(_map_if(values, names, p, f, otherwise, args, kwargs, mode, "map_if"), names)


def modify_if(
    x: Any,
    p: Any,
    f: Any,
    *args: Any,
    otherwise: Any = None,
    mode: PredicateMode | str | None = None,
    **kwargs: Any,
) -> Any:
    x = materialize(x)
    values, names = elements(x)
    return rebuild(x, _map_if(values, names, p, f, otherwise, args, kwargs, mode, "modify_if"))
