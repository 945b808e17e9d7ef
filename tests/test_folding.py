"""Tests for reduce, accumulate and their two-input variants."""

import operator

import pytest
from functionals import (
    ArityError,
    Direction,
    EmptyInputError,
    ShapeError,
    accumulate,
    accumulate2,
    reduce,
    reduce2,
)


def add_op(acc, v, op):
    return acc + v if op == "+" else acc - v


class TestReduce:
    def test_sum(self):
        assert reduce([1, 2, 3], operator.add) == 6

    def test_empty_without_initial(self):
        with pytest.raises(EmptyInputError):
            reduce([], operator.add)

    def test_empty_with_initial(self):
        assert reduce([], operator.add, initial=0) == 0

    def test_single_element_is_not_combined(self):
        assert reduce([7], lambda a, b: pytest.fail("should not be called")) == 7

    def test_left_to_right(self):
        assert reduce([10, 3, 2], operator.sub) == 5

    def test_initial_seeds_accumulator(self):
        assert reduce([1, 2], lambda acc, v: acc + [v], initial=[]) == [1, 2]

    def test_non_commutative_order(self):
        assert reduce(["a", "b", "c"], lambda acc, v: f"({acc}{v})") == "((ab)c)"

    def test_backward(self):
        result = reduce(["a", "b", "c"], lambda v, acc: f"({v}{acc})", direction="backward")
        assert result == "(a(bc))"

    def test_backward_with_initial(self):
        assert reduce([1, 2], lambda v, acc: acc + [v], initial=[], direction=Direction.BACKWARD) == [2, 1]

    def test_constants(self):
        assert reduce([1, 2, 3], lambda acc, v, w: acc + v * w, 10) == 51

    def test_named_input_uses_values(self):
        assert reduce({"a": 1, "b": 2}, operator.add) == 3

    def test_arity(self):
        with pytest.raises(ArityError):
            reduce([1, 2], operator.neg)


class TestAccumulate:
    def test_running_sum(self):
        assert accumulate([1, 2, 3], operator.add) == [1, 3, 6]

    def test_with_initial(self):
        assert accumulate([1, 2, 3], operator.add, initial=10) == [10, 11, 13, 16]

    def test_last_equals_reduce(self):
        values = [4, 8, 15, 16, 23, 42]
        assert accumulate(values, operator.sub)[-1] == reduce(values, operator.sub)

    def test_backward_final_first(self):
        assert accumulate([1, 2, 3], operator.add, direction="backward") == [6, 5, 3]

    def test_backward_with_initial_ends_with_initial(self):
        assert accumulate([1, 2], operator.add, initial=10, direction="backward") == [13, 12, 10]

    def test_empty_with_initial(self):
        assert accumulate([], operator.add, initial=0) == [0]

    def test_empty_without_initial(self):
        with pytest.raises(EmptyInputError):
            accumulate([], operator.add)


class TestReduce2:
    def test_without_initial(self):
        assert reduce2([1, 2, 3], ["+", "-"], add_op) == 0

    def test_with_initial(self):
        assert reduce2([1, 2], [1, 1], lambda acc, v, w: acc + v * w, initial=0) == 3

    def test_length_mismatch(self):
        with pytest.raises(ShapeError):
            reduce2([1, 2, 3], ["+"], add_op)

    def test_empty(self):
        with pytest.raises(EmptyInputError):
            reduce2([], [], add_op)

    def test_accumulate2(self):
        assert accumulate2([1, 2, 3], ["+", "-"], add_op) == [1, 3, 0]
