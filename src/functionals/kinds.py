"""Result kinds for typed (homogeneous) output vectors."""

from __future__ import annotations

import numbers
from enum import Enum
from typing import Any, Hashable, Sequence

import numpy as np

from .errors import ShapeError


class ResultKind(str, Enum):
    LOGICAL = "logical"
    INTEGER = "integer"
    DOUBLE = "double"
    CHARACTER = "character"

    @property
    def dtype(self) -> np.dtype:
        return _DTYPES[self]

    def coerce(self, value: Any, index: Hashable | None = None) -> Any:
        """Reduce ``value`` to exactly one scalar of this kind.

        Raises:
            ShapeError: if ``value`` is not a single scalar of this kind.
        """
        scalar = _unwrap(value, self, index)

        if self is ResultKind.LOGICAL:
            if isinstance(scalar, (bool, np.bool_)):
                return bool(scalar)
        elif self is ResultKind.INTEGER:
            if isinstance(scalar, (bool, np.bool_)):
                return int(scalar)
            if isinstance(scalar, numbers.Integral):
                return int(scalar)
            if isinstance(scalar, numbers.Real) and float(scalar).is_integer():
                return int(scalar)
        elif self is ResultKind.DOUBLE:
            if isinstance(scalar, (bool, np.bool_, numbers.Real)):
                return float(scalar)
        elif isinstance(scalar, str):
            return str(scalar)

        raise ShapeError(
            f"result {_where(index)} must be a single {self.value}, "
            f"not {type(scalar).__name__}",
            index=index,
            kind=self,
        )


_DTYPES = {
    ResultKind.LOGICAL: np.dtype(bool),
    ResultKind.INTEGER: np.dtype(np.int64),
    ResultKind.DOUBLE: np.dtype(np.float64),
    ResultKind.CHARACTER: np.dtype(str),
}


def _where(index: Hashable | None) -> str:
    if index is None:
        return ""
    return f"at {index!r}"


def _unwrap(value: Any, kind: ResultKind, index: Hashable | None) -> Any:
    if isinstance(value, np.ndarray):
        if value.size != 1:
            raise ShapeError(
                f"result {_where(index)} must have length 1, not {value.size}",
                index=index,
                kind=kind,
            )
        return value.reshape(()).item()
    if isinstance(value, (list, tuple)):
        if len(value) != 1:
            raise ShapeError(
                f"result {_where(index)} must have length 1, not {len(value)}",
                index=index,
                kind=kind,
            )
        return _unwrap(value[0], kind, index)
    if isinstance(value, np.generic):
        return value.item()
    return value


def kind_of_dtype(dtype: np.dtype) -> ResultKind | None:
    """Map a numpy dtype to the matching result kind, if any."""
    dtype = np.dtype(dtype)
    if dtype.kind == "b":
        return ResultKind.LOGICAL
    if dtype.kind in "iu":
        return ResultKind.INTEGER
    if dtype.kind == "f":
        return ResultKind.DOUBLE
    if dtype.kind == "U":
        return ResultKind.CHARACTER
    return None


def as_kind(kind: ResultKind | str) -> ResultKind:
    if isinstance(kind, ResultKind):
        return kind
    try:
        return ResultKind(kind)
    except ValueError:
        choices = ", ".join(k.value for k in ResultKind)
        raise ValueError(f"unknown result kind {kind!r}; expected one of {choices}") from None


def build_vector(
    values: Sequence[Any],
    kind: ResultKind | str,
    names: Sequence[Hashable] | None = None,
) -> np.ndarray:
    """Validate every value against ``kind`` and pack them into an ndarray."""
    kind = as_kind(kind)
    coerced = [
        kind.coerce(value, names[i] if names is not None else i)
        for i, value in enumerate(values)
    ]
    return np.array(coerced, dtype=kind.dtype)
