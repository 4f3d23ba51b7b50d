"""Tests for integer ranges."""

import dataclasses

import pytest

from identifier_codec.numeric.range import Range


class TestRangeStructure:
    """Tests for range bounds computed without traversal."""

    def test_ascending_bounds(self):
        """Test start, end, minimum and maximum of an ascending range."""
        values = Range(10, 20)

        assert values.start == 10
        assert values.end == 30
        assert values.count == 20
        assert values.minimum == 10
        assert values.maximum == 29
        assert values.ascending is True

    def test_descending_bounds(self):
        """Test start, end, minimum and maximum of a descending range."""
        values = Range(29, -20)

        assert values.start == 29
        assert values.end == 9
        assert values.count == -20
        assert values.minimum == 10
        assert values.maximum == 29
        assert values.ascending is False

    def test_empty_range(self):
        """Test that a zero count range is ascending and empty."""
        values = Range(5, 0)

        assert values.ascending is True
        assert values.minimum == 5
        assert values.maximum == 4
        assert list(values) == []
        assert len(values) == 0

    def test_large_values(self):
        """Test bounds beyond machine integer range."""
        start = 10 ** 30
        values = Range(start, 3)

        assert list(values) == [start, start + 1, start + 2]
        assert values.maximum == start + 2

    def test_immutable(self):
        """Test that a range cannot be modified."""
        values = Range(0, 10)

        with pytest.raises(dataclasses.FrozenInstanceError):
            values.start = 5  # type: ignore[misc]


class TestRangeIteration:
    """Tests for lazy, restartable traversal."""

    def test_ascending_iteration(self):
        """Test ascending values."""
        assert list(Range(10, 20)) == list(range(10, 30))

    def test_descending_iteration(self):
        """Test descending values."""
        assert list(Range(29, -20)) == list(range(29, 9, -1))

    def test_repeat_iteration(self):
        """Test that traversal can be repeated without state leakage."""
        values = Range(10, 20)

        first = list(values)
        second = list(values)

        assert first == second
        assert len(first) == 20

    def test_independent_iterators(self):
        """Test that concurrent iterators do not share position."""
        values = Range(0, 5)

        first = iter(values)
        second = iter(values)

        assert next(first) == 0
        assert next(first) == 1
        assert next(second) == 0

    def test_len_and_contains(self):
        """Test length and arithmetic membership."""
        values = Range(29, -20)

        assert len(values) == 20
        assert 10 in values
        assert 29 in values
        assert 9 not in values
        assert 30 not in values
        assert "10" not in values

    def test_equality(self):
        """Test value equality."""
        assert Range(1, 2) == Range(1, 2)
        assert Range(1, 2) != Range(1, -2)
        assert hash(Range(1, 2)) == hash(Range(1, 2))
