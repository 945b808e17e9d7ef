"""
Mapper family: apply a function per element and collect the results.

Every mapper visits positions strictly in order 0..n-1 and calls the
function exactly once per position. Constant arguments given after the
function are appended to every call.

    map(x, f)            list (or dict for named input) of f(x[i])
    map_int(x, f)        int64 ndarray; ShapeError names the bad position
    modify(x, f)         same container type as x
    walk(x, f)           calls f for its side effects, returns x
    map2(x, y, f)        f(x[i], y[i]) with recycling of the shorter input
    imap(x, f)           f(x[i], name or position)
    pmap(table, f)       f(*row) or f(**row) for each row of equal columns
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Hashable, Iterable, Iterator, Sequence

import numpy as np

from . import config
from .binding import bind, bind_named
from .errors import ArityError, KeyNotFoundError, RecycleError, ShapeError
from .kinds import ResultKind, as_kind
from .logger import logger
from .recycle import recycle_lengths, recycled
from .sequences import Names, elements, keys_or_indices, materialize, rebuild, wrap


def _typed(results: Iterator[Any], kind: ResultKind | str, names: Names) -> np.ndarray:
    # coerce as results arrive so a bad one aborts the traversal
    kind = as_kind(kind)
    values = []
    for i, value in enumerate(results):
        values.append(kind.coerce(value, names[i] if names is not None else i))
    return np.array(values, dtype=kind.dtype)


def _calls(fn: Callable[..., Any], rows: Iterable[tuple]) -> Iterator[Any]:
    for row in rows:
        yield fn(*row)


def _consume(results: Iterator[Any]) -> None:
    for _ in results:
        pass


# -- single input ---------------------------------------------------------


def _map1(x: Any, f: Any, args: tuple, kwargs: dict, name: str) -> tuple[Iterator[Any], Names]:
    values, names = elements(x)
    fn = bind(f, 1, args, kwargs, name)
    return _calls(fn, ((v,) for v in values)), names


def map(x: Any, f: Any, *args: Any, **kwargs: Any) -> list[Any] | dict[Hashable, Any]:
    """Apply ``f`` to each element; returns a list, or a dict for named input."""
    results, names = _map1(x, f, args, kwargs, "map")
    return wrap(list(results), names)


def map_kind(x: Any, f: Any, kind: ResultKind | str, *args: Any, **kwargs: Any) -> np.ndarray:
    """Apply ``f`` to each element and pack the scalars into a typed vector."""
    results, names = _map1(x, f, args, kwargs, "map_kind")
    return _typed(results, kind, names)


def map_lgl(x: Any, f: Any, *args: Any, **kwargs: Any) -> np.ndarray:
    return map_kind(x, f, ResultKind.LOGICAL, *args, **kwargs)


def map_int(x: Any, f: Any, *args: Any, **kwargs: Any) -> np.ndarray:
    return map_kind(x, f, ResultKind.INTEGER, *args, **kwargs)


def map_dbl(x: Any, f: Any, *args: Any, **kwargs: Any) -> np.ndarray:
    return map_kind(x, f, ResultKind.DOUBLE, *args, **kwargs)


def map_chr(x: Any, f: Any, *args: Any, **kwargs: Any) -> np.ndarray:
    return map_kind(x, f, ResultKind.CHARACTER, *args, **kwargs)


def modify(x: Any, f: Any, *args: Any, **kwargs: Any) -> Any:
    """Like ``map`` but the result has the same container type as ``x``."""
    x = materialize(x)
    results, _ = _map1(x, f, args, kwargs, "modify")
    return rebuild(x, list(results))


def walk(x: Any, f: Any, *args: Any, **kwargs: Any) -> Any:
    """Call ``f`` on each element for its side effects and return ``x``."""
    results, _ = _map1(x, f, args, kwargs, "walk")
    _consume(results)
    return x


def _at_positions(values: list[Any], names: Names, at: Any, name: str) -> set[int]:
    if isinstance(at, (str, int)) and not isinstance(at, bool):
        at = [at]

    positions = set()
    for key in at:
        if isinstance(key, int) and not isinstance(key, bool):
            if not -len(values) <= key < len(values):
                raise KeyNotFoundError(f"{name}: position {key} out of range", key=key)
            positions.add(key % len(values))
        elif names is not None and key in names:
            positions.add(names.index(key))
        else:
            raise KeyNotFoundError(f"{name}: name {key!r} not found", key=key)
    return positions


def _map_at(
    values: list[Any], names: Names, at: Any, f: Any, args: tuple, kwargs: dict, name: str
) -> list[Any]:
    positions = _at_positions(values, names, at, name)
    fn = bind(f, 1, args, kwargs, name)
    return [fn(v) if i in positions else v for i, v in enumerate(values)]


def map_at(x: Any, at: Any, f: Any, *args: Any, **kwargs: Any) -> list[Any] | dict[Hashable, Any]:
    """Apply ``f`` only at the positions or names in ``at``; others pass through."""
    values, names = elements(x)
    return wrap(_map_at(values, names, at, f, args, kwargs, "map_at"), names)


def modify_at(x: Any, at: Any, f: Any, *args: Any, **kwargs: Any) -> Any:
    x = materialize(x)
    values, names = elements(x)
    return rebuild(x, _map_at(values, names, at, f, args, kwargs, "modify_at"))


# -- two inputs -----------------------------------------------------------


def _map2(
    x: Any, y: Any, f: Any, args: tuple, kwargs: dict, name: str
) -> tuple[Iterator[Any], Names, int]:
    x_values, x_names = elements(x)
    y_values, _ = elements(y)
    n = recycle_lengths([len(x_values), len(y_values)], name)
    fn = bind(f, 2, args, kwargs, name)
    names = x_names if x_names is not None and len(x_values) == n else None
    rows = zip(recycled(x_values, n), recycled(y_values, n))
    return _calls(fn, rows), names, n


def map2(x: Any, y: Any, f: Any, *args: Any, **kwargs: Any) -> list[Any] | dict[Hashable, Any]:
    """
    Apply ``f`` to ``x[i]`` and ``y[i]`` pairwise.

    The shorter input is recycled; its length must divide the longer one.

    Example:
        map2([1, 2, 3, 4], [10, 20], operator.add)  # -> [11, 22, 13, 24]

    Raises:
        RecycleError: if the lengths cannot be recycled.
    """
    results, names, _ = _map2(x, y, f, args, kwargs, "map2")
    return wrap(list(results), names)


def map2_kind(x: Any, y: Any, f: Any, kind: ResultKind | str, *args: Any, **kwargs: Any) -> np.ndarray:
    results, names, _ = _map2(x, y, f, args, kwargs, "map2_kind")
    return _typed(results, kind, names)


def map2_lgl(x: Any, y: Any, f: Any, *args: Any, **kwargs: Any) -> np.ndarray:
    return map2_kind(x, y, f, ResultKind.LOGICAL, *args, **kwargs)


def map2_int(x: Any, y: Any, f: Any, *args: Any, **kwargs: Any) -> np.ndarray:
    return map2_kind(x, y, f, ResultKind.INTEGER, *args, **kwargs)


def map2_dbl(x: Any, y: Any, f: Any, *args: Any, **kwargs: Any) -> np.ndarray:
    return map2_kind(x, y, f, ResultKind.DOUBLE, *args, **kwargs)


def map2_chr(x: Any, y: Any, f: Any, *args: Any, **kwargs: Any) -> np.ndarray:
    return map2_kind(x, y, f, ResultKind.CHARACTER, *args, **kwargs)


def modify2(x: Any, y: Any, f: Any, *args: Any, **kwargs: Any) -> Any:
    """Like ``map2`` but shaped like ``x``; ``y`` must recycle to ``len(x)``."""
    x = materialize(x)
    y = materialize(y)
    x_len = len(elements(x)[0])
    y_len = len(elements(y)[0])
    if y_len > x_len:
        raise RecycleError(
            f"modify2: input of length {y_len} is longer than the modified one ({x_len})",
            lengths=(x_len, y_len),
        )
    results, _, _ = _map2(x, y, f, args, kwargs, "modify2")
    return rebuild(x, list(results))


def walk2(x: Any, y: Any, f: Any, *args: Any, **kwargs: Any) -> Any:
    """Call ``f(x[i], y[i])`` for its side effects and return ``x``."""
    results, _, _ = _map2(x, y, f, args, kwargs, "walk2")
    _consume(results)
    return x


# -- indexed --------------------------------------------------------------


def _keyed(x: Any, start: int | None) -> tuple[Any, list[Hashable]]:
    x = materialize(x)
    if start is None:
        start = config.settings.index_base
    return x, keys_or_indices(x, start)


def imap(x: Any, f: Any, *args: Any, start: int | None = None, **kwargs: Any) -> list[Any] | dict[Hashable, Any]:
    """
    Apply ``f(element, key)`` to each element.

    The key is the element's name for named input, else its position
    counted from ``start`` (the ``index_base`` setting, 0 by default).
    """
    x, keys = _keyed(x, start)
    return map2(x, keys, f, *args, **kwargs)


def imap_kind(
    x: Any, f: Any, kind: ResultKind | str, *args: Any, start: int | None = None, **kwargs: Any
) -> np.ndarray:
    x, keys = _keyed(x, start)
    return map2_kind(x, keys, f, kind, *args, **kwargs)


def imap_lgl(x: Any, f: Any, *args: Any, start: int | None = None, **kwargs: Any) -> np.ndarray:
    return imap_kind(x, f, ResultKind.LOGICAL, *args, start=start, **kwargs)


def imap_int(x: Any, f: Any, *args: Any, start: int | None = None, **kwargs: Any) -> np.ndarray:
    return imap_kind(x, f, ResultKind.INTEGER, *args, start=start, **kwargs)


def imap_dbl(x: Any, f: Any, *args: Any, start: int | None = None, **kwargs: Any) -> np.ndarray:
    return imap_kind(x, f, ResultKind.DOUBLE, *args, start=start, **kwargs)


def imap_chr(x: Any, f: Any, *args: Any, start: int | None = None, **kwargs: Any) -> np.ndarray:
    return imap_kind(x, f, ResultKind.CHARACTER, *args, start=start, **kwargs)


def imodify(x: Any, f: Any, *args: Any, start: int | None = None, **kwargs: Any) -> Any:
    x, keys = _keyed(x, start)
    return modify2(x, keys, f, *args, **kwargs)


def iwalk(x: Any, f: Any, *args: Any, start: int | None = None, **kwargs: Any) -> Any:
    x, keys = _keyed(x, start)
    return walk2(x, keys, f, *args, **kwargs)


# -- row-aligned table ----------------------------------------------------


def _pmap(table: Any, f: Any, args: tuple, kwargs: dict, name: str) -> tuple[Iterator[Any], Names]:
    if isinstance(table, Mapping):
        columns = list(table.values())
        column_names = list(table.keys())
        bad = [c for c in column_names if not isinstance(c, str)]
        if bad:
            raise ArityError(f"{name}: column names must be strings to pass by name, got {bad}")
    else:
        columns = list(table)
        column_names = None

    if not columns:
        return iter(()), None

    read = [elements(c) for c in columns]
    column_values = [values for values, _ in read]
    lengths = [len(c) for c in column_values]
    if len(set(lengths)) > 1:
        raise ShapeError(f"{name}: all columns must have the same length, got {lengths}")
    n = lengths[0]
    logger.debug("%s: %d rows over %d columns", name, n, len(columns))

    names = read[0][1]
    if column_names is None:
        fn = bind(f, len(columns), args, kwargs, name)
        rows = (tuple(c[i] for c in column_values) for i in range(n))
        return _calls(fn, rows), names

    fn = bind_named(f, column_names, args, kwargs, name)
    return (fn(**{k: c[i] for k, c in zip(column_names, column_values)}) for i in range(n)), names


def pmap(table: Mapping[str, Sequence[Any]] | Sequence[Sequence[Any]], f: Any, *args: Any, **kwargs: Any) -> list[Any] | dict[Hashable, Any]:
    """
    Call ``f`` once per row of equal-length columns.

    Columns of a mapping are passed by name, columns of a sequence by
    position. No recycling is done.

    Example:
        pmap({"x": [1, 2], "y": [10, 20]}, lambda x, y: x + y)  # -> [11, 22]

    Raises:
        ShapeError: if the columns differ in length.
    """
    results, names = _pmap(table, f, args, kwargs, "pmap")
    return wrap(list(results), names)


def pmap_kind(table: Any, f: Any, kind: ResultKind | str, *args: Any, **kwargs: Any) -> np.ndarray:
    results, names = _pmap(table, f, args, kwargs, "pmap_kind")
    return _typed(results, kind, names)


def pmap_lgl(table: Any, f: Any, *args: Any, **kwargs: Any) -> np.ndarray:
    return pmap_kind(table, f, ResultKind.LOGICAL, *args, **kwargs)


def pmap_int(table: Any, f: Any, *args: Any, **kwargs: Any) -> np.ndarray:
    return pmap_kind(table, f, ResultKind.INTEGER, *args, **kwargs)


def pmap_dbl(table: Any, f: Any, *args: Any, **kwargs: Any) -> np.ndarray:
    return pmap_kind(table, f, ResultKind.DOUBLE, *args, **kwargs)


def pmap_chr(table: Any, f: Any, *args: Any, **kwargs: Any) -> np.ndarray:
    return pmap_kind(table, f, ResultKind.CHARACTER, *args, **kwargs)


def pwalk(table: Any, f: Any, *args: Any, **kwargs: Any) -> Any:
    """Call ``f`` per row for its side effects and return ``table``."""
    results, _ = _pmap(table, f, args, kwargs, "pwalk")
    _consume(results)
    return table
