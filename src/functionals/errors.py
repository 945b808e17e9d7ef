"""Structured error types raised by the functionals themselves.

Exceptions raised by user-supplied functions are never wrapped; they reach
the caller unchanged.
"""

from __future__ import annotations

from typing import Any, Hashable


class FunctionalsError(Exception):
    """Base class for errors detected by a functional."""


class ArityError(FunctionalsError, TypeError):
    """Function cannot be called with the argument shape of the functional."""


class ShapeError(FunctionalsError, ValueError):
    """Result or input does not have the shape the functional requires."""

    def __init__(
        self,
        message: str,
        *,
        index: Hashable | None = None,
        kind: Any = None,
    ):
        super().__init__(message)
        self.index = index
        self.kind = kind


class RecycleError(FunctionalsError, ValueError):
    """Parallel inputs have lengths that cannot be recycled to a common one."""

    def __init__(self, message: str, *, lengths: tuple[int, ...] = ()):
        super().__init__(message)
        self.lengths = lengths


class EmptyInputError(FunctionalsError, ValueError):
    """Reduction of an empty sequence without an initial value."""


class PredicateTypeError(FunctionalsError, TypeError):
    """Predicate returned something other than a single bool."""

    def __init__(self, message: str, *, index: Hashable | None = None, value: Any = None):
        super().__init__(message)
        self.index = index
        self.value = value


class KeyNotFoundError(FunctionalsError, LookupError):
    """Extraction asked for a name or position the element does not have."""

    def __init__(self, message: str, *, key: Any = None):
        super().__init__(message)
        self.key = key


__all__ = [
    "FunctionalsError",
    "ArityError",
    "ShapeError",
    "RecycleError",
    "EmptyInputError",
    "PredicateTypeError",
    "KeyNotFoundError",
]
