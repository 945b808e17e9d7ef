"""
Functionals: higher-order functions that take a function and return a vector.

Provides map, map2, imap, pmap, walk, modify, reduce, accumulate and
predicate functionals (some, every, detect, keep, discard, map_if) as
alternatives to writing explicit loops.

Usage:
    from functionals import map, map_int, map2, reduce, accumulate, keep

    # Elementwise, with a typed result
    lengths = map_int(["a", "bb", "ccc"], len)

    # Pairwise, recycling the shorter input
    sums = map2([1, 2, 3, 4], [10, 20], operator.add)

    # Left fold and its intermediate values
    total = reduce([1, 2, 3], operator.add)
    running = accumulate([1, 2, 3], operator.add)

    # Predicate filter
    evens = keep([1, 2, 3, 4], lambda v: v % 2 == 0)
"""

from .config import PredicateMode, Settings, override_settings
from .errors import (
    ArityError,
    EmptyInputError,
    FunctionalsError,
    KeyNotFoundError,
    PredicateTypeError,
    RecycleError,
    ShapeError,
)
from .folding import Direction, accumulate, accumulate2, reduce, reduce2
from .grouping import split, split_map, split_map_kind
from .kinds import ResultKind
from .mapping import (
    imap,
    imap_chr,
    imap_dbl,
    imap_int,
    imap_kind,
    imap_lgl,
    imodify,
    iwalk,
    map,
    map2,
    map2_chr,
    map2_dbl,
    map2_int,
    map2_kind,
    map2_lgl,
    map_at,
    map_chr,
    map_dbl,
    map_int,
    map_kind,
    map_lgl,
    modify,
    modify2,
    modify_at,
    pmap,
    pmap_chr,
    pmap_dbl,
    pmap_int,
    pmap_kind,
    pmap_lgl,
    pwalk,
    walk,
    walk2,
)
from .parallel import map_async, reduce_async
from .pluck import MISSING, as_mapper, pluck
from .predicates import (
    detect,
    detect_index,
    discard,
    every,
    keep,
    map_if,
    modify_if,
    none,
    some,
)

__version__ = "0.1.0"
__all__ = [
    # Mappers
    "map",
    "map_kind",
    "map_lgl",
    "map_int",
    "map_dbl",
    "map_chr",
    "modify",
    "walk",
    "map_at",
    "modify_at",
    "map2",
    "map2_kind",
    "map2_lgl",
    "map2_int",
    "map2_dbl",
    "map2_chr",
    "modify2",
    "walk2",
    "imap",
    "imap_kind",
    "imap_lgl",
    "imap_int",
    "imap_dbl",
    "imap_chr",
    "imodify",
    "iwalk",
    "pmap",
    "pmap_kind",
    "pmap_lgl",
    "pmap_int",
    "pmap_dbl",
    "pmap_chr",
    "pwalk",
    # Folds
    "reduce",
    "accumulate",
    "reduce2",
    "accumulate2",
    "Direction",
    # Predicates
    "some",
    "every",
    "none",
    "detect",
    "detect_index",
    "keep",
    "discard",
    "map_if",
    "modify_if",
    # Grouping
    "split",
    "split_map",
    "split_map_kind",
    # Extraction
    "pluck",
    "as_mapper",
    "MISSING",
    # Async (opt-in)
    "map_async",
    "reduce_async",
    # Types, settings and errors
    "ResultKind",
    "PredicateMode",
    "Settings",
    "override_settings",
    "FunctionalsError",
    "ArityError",
    "ShapeError",
    "RecycleError",
    "EmptyInputError",
    "PredicateTypeError",
    "KeyNotFoundError",
]
