"""Binding of constant arguments after the varying ones."""

from __future__ import annotations

import inspect
from typing import Any, Callable

from .errors import ArityError
from .pluck import as_mapper

_PLACEHOLDER = object()


def check_arity(fn: Callable[..., Any], n_varying: int, args: tuple, kwargs: dict, name: str) -> None:
    """Raise ArityError if ``fn`` cannot take ``n_varying`` values plus the constants."""
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        # builtins without an introspectable signature
        return

    try:
        signature.bind(*([_PLACEHOLDER] * n_varying), *args, **kwargs)
    except TypeError as exc:
        fn_name = getattr(fn, "__name__", type(fn).__name__)
        raise ArityError(
            f"{name}: {fn_name}{signature} cannot be called with "
            f"{n_varying} varying argument(s), {len(args)} extra positional and "
            f"{sorted(kwargs)} keyword constant(s): {exc}"
        ) from exc


def bind(
    f: Any,
    n_varying: int,
    args: tuple = (),
    kwargs: dict | None = None,
    name: str = "map",
) -> Callable[..., Any]:
    """
    Resolve ``f`` and return a callable of the varying values only.

    Every call appends ``args`` after the varying values and passes
    ``kwargs`` by name, identically for every element.
    """
    kwargs = kwargs or {}
    fn = as_mapper(f)
    check_arity(fn, n_varying, args, kwargs, name)

    if not args and not kwargs:
        return fn

    def bound(*varying: Any) -> Any:
        return fn(*varying, *args, **kwargs)

    return bound


def bind_named(
    f: Any,
    names: list[str],
    args: tuple = (),
    kwargs: dict | None = None,
    name: str = "pmap",
) -> Callable[..., Any]:
    """Like ``bind`` for row values passed by name (pmap over named columns)."""
    kwargs = kwargs or {}
    fn = as_mapper(f)
    if args:
        raise ArityError(f"{name}: positional constants cannot follow named columns")
    overlap = set(names) & set(kwargs)
    if overlap:
        raise ArityError(f"{name}: constants {sorted(overlap)} clash with column names")

    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        signature = None
    if signature is not None:
        try:
            signature.bind(**{n: _PLACEHOLDER for n in names}, **kwargs)
        except TypeError as exc:
            raise ArityError(
                f"{name}: {getattr(fn, '__name__', fn)}{signature} cannot take "
                f"columns {names}: {exc}"
            ) from exc

    def bound(**row: Any) -> Any:
        return fn(**row, **kwargs)

    return bound
