"""Reading inputs as (values, names) and building result containers."""

from __future__ import annotations

import copy
from collections.abc import Mapping, MutableSequence
from typing import Any, Hashable, Iterable, Sequence

import numpy as np

from .kinds import ResultKind, build_vector, kind_of_dtype

Names = list[Hashable] | None


def materialize(x: Iterable[Any]) -> Any:
    """Return ``x``, or a list of its values if it can only be iterated once."""
    if isinstance(x, (Mapping, Sequence, np.ndarray)):
        return x
    return list(x)


def elements(x: Iterable[Any]) -> tuple[list[Any], Names]:
    """Split an input into its positional values and its names, if named."""
    if isinstance(x, Mapping):
        return list(x.values()), list(x.keys())
    if isinstance(x, np.ndarray):
        if x.ndim != 1:
            raise TypeError(f"expected a 1-D array, got {x.ndim} dimensions")
        return list(x), None
    return list(x), None


def wrap(values: list[Any], names: Names) -> list[Any] | dict[Hashable, Any]:
    """Generic result container: a dict when named, a list otherwise."""
    if names is None:
        return values
    return dict(zip(names, values))


def rebuild(x: Any, values: list[Any]) -> Any:
    """Result container of the same concrete type as ``x``."""
    if isinstance(x, Mapping):
        out = copy.copy(x)
        for key, value in zip(list(x.keys()), values):
            out[key] = value
        return out
    if isinstance(x, np.ndarray):
        kind = kind_of_dtype(x.dtype)
        if kind is None:
            return np.array(values, dtype=x.dtype)
        vector = build_vector(values, kind)
        if kind is ResultKind.CHARACTER:
            # fixed-width input dtype would truncate longer strings
            return vector
        return vector.astype(x.dtype, copy=False)
    if isinstance(x, tuple):
        if hasattr(x, "_make"):
            return x._make(values)
        return tuple(values)
    if isinstance(x, str):
        return "".join(ResultKind.CHARACTER.coerce(v, i) for i, v in enumerate(values))
    if type(x) is list or not isinstance(x, MutableSequence):
        return values
    try:
        return type(x)(values)
    except TypeError:
        return values


def subset(x: Any, values: list[Any], positions: Sequence[int]) -> Any:
    """Elements at ``positions``, in the shape of ``x``.

    ``values`` are the already-read values of ``x``.
    """
    if isinstance(x, Mapping):
        keys = list(x.keys())
        wanted = {keys[i] for i in positions}
        out = copy.copy(x)
        for key in keys:
            if key not in wanted:
                del out[key]
        return out
    if isinstance(x, np.ndarray):
        return x[np.asarray(positions, dtype=np.intp)]
    picked = [values[i] for i in positions]
    if isinstance(x, tuple) and not hasattr(x, "_make"):
        return tuple(picked)
    if isinstance(x, str):
        return "".join(picked)
    return picked


def keys_or_indices(x: Any, start: int = 0) -> list[Hashable]:
    """Names of a named input, otherwise positions counted from ``start``."""
    values, names = elements(x)
    if names is not None:
        return names
    return list(range(start, start + len(values)))
