"""Keyed and positional extraction, and the mapper shorthand built on it."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Hashable

from .errors import ArityError, KeyNotFoundError

MISSING: Any = object()


def _step(value: Any, key: Hashable) -> Any:
    if isinstance(value, Mapping):
        if key in value:
            return value[key]
        raise KeyNotFoundError(f"name {key!r} not found", key=key)

    if isinstance(key, int) and not isinstance(key, bool):
        try:
            return value[key]
        except (IndexError, TypeError):
            raise KeyNotFoundError(f"position {key} not found", key=key) from None

    if isinstance(key, str) and hasattr(value, key):
        return getattr(value, key)
    raise KeyNotFoundError(f"name {key!r} not found", key=key)


def pluck(x: Any, *path: Hashable, default: Any = MISSING) -> Any:
    """
    Extract a nested element by names and positions.

    Mappings are read by key, sequences by position, and other objects by
    attribute name.

    Example:
        pluck({"a": [10, {"b": 2}]}, "a", 1, "b")  # -> 2

    Raises:
        KeyNotFoundError: if a step is absent and no default was given.
    """
    value = x
    for key in path:
        try:
            value = _step(value, key)
        except KeyNotFoundError:
            if default is MISSING:
                raise
            return default
    return value


def as_mapper(f: Any, default: Any = MISSING) -> Callable[..., Any]:
    """Turn ``f`` into a callable.

    Callables are returned as is. A name, a position or a list/tuple path
    becomes a function extracting that element from its first argument.
    """
    if callable(f):
        return f

    if isinstance(f, (str, int)) and not isinstance(f, bool):
        path: tuple[Hashable, ...] = (f,)
    elif isinstance(f, (list, tuple)) and all(
        isinstance(p, (str, int)) and not isinstance(p, bool) for p in f
    ):
        path = tuple(f)
    else:
        raise ArityError(f"cannot convert {type(f).__name__} to a function")

    def extract(value: Any) -> Any:
        return pluck(value, *path, default=default)

    extract.__name__ = f"pluck[{', '.join(map(repr, path))}]"
    return extract
