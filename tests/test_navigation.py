"""Tests for jumptree.navigation module."""

from pathlib import Path

from jumptree.navigation import Location, LocationStack


class TestLocationStack:
    def test_starts_empty(self):
        stack = LocationStack()
        assert stack.is_empty()
        assert len(stack) == 0
        assert stack.pop() is None
        assert stack.peek() is None

    def test_pop_is_lifo(self):
        stack = LocationStack()
        first = Location(Path("a.py"), 1, "a")
        second = Location(Path("b.py"), 7, "b")
        stack.push(first)
        stack.push(second)
        assert stack.peek() is second
        assert stack.pop() is second
        assert stack.pop() is first
        assert stack.is_empty()

    def test_clear(self):
        stack = LocationStack()
        stack.push(Location(Path("a.py"), 1))
        stack.clear()
        assert len(stack) == 0


class TestLocation:
    def test_symbol_optional(self):
        assert Location(Path("a.py"), 3).symbol is None

    def test_value_equality(self):
        assert Location(Path("a.py"), 3, "x") == Location(Path("a.py"), 3, "x")
