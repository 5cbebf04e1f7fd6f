"""Shared pytest fixtures for pyselectx tests."""

from typing import Any, Dict

import pytest

from pyselectx import received


class CallCounter:
    """Wraps a combinator and counts how many times it ran."""

    def __init__(self, fn):
        self.fn = fn
        self.calls = 0
        self.__name__ = getattr(fn, "__name__", "counted")

    def __call__(self, *args: Any) -> Any:
        self.calls += 1
        return self.fn(*args)


@pytest.fixture
def counter():
    """Factory for call-counting combinators."""
    return CallCounter


@pytest.fixture
def plain_state() -> Dict[str, Any]:
    return {"version": 1, "num": 2, "str": "one"}


@pytest.fixture
def async_state() -> Dict[str, Any]:
    return {"version": 1, "num": received(2), "str": received("one"), "bool": False}
