"""Tests for split-apply."""

import pytest
from functionals import ShapeError, split, split_map, split_map_kind


class TestSplit:
    def test_first_appearance_order(self):
        assert split([1, 2, 3, 4], ["b", "a", "b", "a"]) == {"b": [1, 3], "a": [2, 4]}

    def test_length_mismatch(self):
        with pytest.raises(ShapeError):
            split([1, 2], ["a"])

    def test_split_map(self):
        assert split_map([1, 2, 3, 4], ["a", "b", "a", "b"], sum) == {"a": 4, "b": 6}

    def test_split_map_constants(self):
        result = split_map([1, 2, 3], ["a", "a", "b"], lambda g, scale: len(g) * scale, 10)
        assert result == {"a": 20, "b": 10}

    def test_split_map_kind(self):
        labels, means = split_map_kind(
            [1.0, 2.0, 4.0], ["x", "y", "y"], lambda g: sum(g) / len(g), "double"
        )
        assert labels == ["x", "y"]
        assert means.tolist() == [1.0, 3.0]
