"""Split-apply: group values by a parallel vector of labels."""

from __future__ import annotations

from typing import Any, Hashable

import numpy as np

from .binding import bind
from .errors import ShapeError
from .kinds import ResultKind, build_vector
from .sequences import elements


def split(x: Any, by: Any) -> dict[Hashable, list[Any]]:
    """
    Group the values of ``x`` by the label at the same position in ``by``.

    Groups appear in the order their label is first seen.

    Example:
        split([1, 2, 3, 4], ["a", "b", "a", "b"])  # -> {"a": [1, 3], "b": [2, 4]}
    """
    values, _ = elements(x)
    labels, _ = elements(by)
    if len(labels) != len(values):
        raise ShapeError(f"split: got {len(labels)} labels for {len(values)} values")

    groups: dict[Hashable, list[Any]] = {}
    for value, label in zip(values, labels):
        groups.setdefault(label, []).append(value)
    return groups


def split_map(x: Any, by: Any, f: Any, *args: Any, **kwargs: Any) -> dict[Hashable, Any]:
    """Apply ``f`` to each group of ``split(x, by)``, keyed by label."""
    groups = split(x, by)
    fn = bind(f, 1, args, kwargs, "split_map")
    return {label: fn(group) for label, group in groups.items()}


def split_map_kind(
    x: Any, by: Any, f: Any, kind: ResultKind | str, *args: Any, **kwargs: Any
) -> tuple[list[Hashable], np.ndarray]:
    """Like ``split_map`` but returns the labels and a typed vector of results."""
    results = split_map(x, by, f, *args, **kwargs)
    labels = list(results.keys())
    return labels, build_vector(list(results.values()), kind, labels)
