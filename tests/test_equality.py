"""Tests for the equality helpers used as memoization comparators."""

import pytest

from pyselectx import are_equal, are_same_reference, command, received


class TestAreSameReference:
    def test_identity(self) -> None:
        items = [1]
        assert are_same_reference(items, items)
        assert not are_same_reference(items, [1])


class TestAreEqual:
    @pytest.mark.parametrize(
        "a,b",
        [
            (1, 1),
            ("one", "one"),
            ([1, 2], [1, 2]),
            ({"a": (1, 2)}, {"a": (1, 2)}),
            (received("one"), received("one")),
            (command([{"type": "fetch"}]), command([{"type": "fetch"}])),
        ],
    )
    def test_equal_values(self, a, b) -> None:
        assert are_equal(a, b)

    @pytest.mark.parametrize(
        "a,b",
        [
            (1, True),
            (1, 1.0),
            ([1], [True]),
            ((1,), [1]),
            ({"a": 1}, {"a": 1.0}),
            ({"a": 1}, {"b": 1}),
            (received(1), received(True)),
            (command([1]), command([1.0])),
            (received(1), command([1])),
        ],
    )
    def test_values_of_different_types_differ(self, a, b) -> None:
        assert not are_equal(a, b)

    def test_comparison_error_counts_as_different(self) -> None:
        class Exploding:
            def __eq__(self, other):
                raise RuntimeError("cannot compare")

        assert not are_equal(Exploding(), Exploding())
