"""Tests for result kinds and keyed extraction."""

from collections import namedtuple

import numpy as np
import pytest
from functionals import ArityError, KeyNotFoundError, ResultKind, ShapeError, as_mapper, pluck
from functionals.kinds import as_kind, build_vector, kind_of_dtype

Point = namedtuple("Point", ["x", "y"])


class TestResultKind:
    def test_integer(self):
        assert ResultKind.INTEGER.coerce(2.0) == 2
        assert ResultKind.INTEGER.coerce(True) == 1
        assert ResultKind.INTEGER.coerce(np.int32(5)) == 5

    def test_integer_rejects_fraction(self):
        with pytest.raises(ShapeError) as info:
            ResultKind.INTEGER.coerce(2.5, 3)
        assert info.value.index == 3
        assert info.value.kind is ResultKind.INTEGER

    def test_logical(self):
        assert ResultKind.LOGICAL.coerce(np.bool_(True)) is True
        with pytest.raises(ShapeError):
            ResultKind.LOGICAL.coerce(1)

    def test_double(self):
        assert ResultKind.DOUBLE.coerce(True) == 1.0
        assert ResultKind.DOUBLE.coerce(3) == 3.0

    def test_character(self):
        assert ResultKind.CHARACTER.coerce(["x"]) == "x"
        with pytest.raises(ShapeError):
            ResultKind.CHARACTER.coerce(1)

    def test_unwraps_size_one_array(self):
        assert ResultKind.DOUBLE.coerce(np.array([1.5])) == 1.5

    def test_rejects_longer_array(self):
        with pytest.raises(ShapeError):
            ResultKind.DOUBLE.coerce(np.array([1.0, 2.0]))

    def test_rejects_empty_list(self):
        with pytest.raises(ShapeError):
            ResultKind.INTEGER.coerce([])

    def test_as_kind(self):
        assert as_kind("integer") is ResultKind.INTEGER
        with pytest.raises(ValueError):
            as_kind("nope")

    def test_kind_of_dtype(self):
        assert kind_of_dtype(np.dtype(np.int8)) is ResultKind.INTEGER
        assert kind_of_dtype(np.dtype(bool)) is ResultKind.LOGICAL
        assert kind_of_dtype(np.dtype(object)) is None

    def test_build_vector_names_offender(self):
        with pytest.raises(ShapeError) as info:
            build_vector([1, "x"], ResultKind.INTEGER, ["a", "b"])
        assert info.value.index == "b"


class TestPluck:
    def test_nested_path(self):
        assert pluck({"a": [10, {"b": 2}]}, "a", 1, "b") == 2

    def test_attribute(self):
        assert pluck(Point(1, 2), "y") == 2

    def test_missing_raises(self):
        with pytest.raises(KeyNotFoundError) as info:
            pluck({"a": []}, "a", 0)
        assert info.value.key == 0

    def test_default(self):
        assert pluck({"a": 1}, "b", default=None) is None

    def test_as_mapper_keeps_callables(self):
        assert as_mapper(len) is len

    def test_as_mapper_path(self):
        assert as_mapper(["a", 0])({"a": ["first"]}) == "first"

    def test_as_mapper_default(self):
        assert as_mapper("missing", default=0)({}) == 0

    def test_as_mapper_rejects_other_values(self):
        with pytest.raises(ArityError):
            as_mapper(3.5)
