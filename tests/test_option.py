"""Tests for the Option type returned by Outcome.to_optional()."""

import pytest

from resulttype import InvalidArgumentError, Nothing, NothingType, Some


class TestSome:
    """Tests for Some."""

    def test_some_holds_value(self):
        """Some wraps a present value."""
        assert Some(3).unwrap() == 3
        assert Some(3).is_some() is True
        assert Some(3).is_none() is False

    def test_some_rejects_none(self):
        """Some(None) is not representable."""
        with pytest.raises(InvalidArgumentError):
            Some(None)

    def test_some_unwrap_or(self):
        """Some.unwrap_or() ignores the default."""
        assert Some(3).unwrap_or(0) == 3

    def test_some_map(self):
        """Some.map() transforms the value."""
        assert Some(3).map(lambda x: x + 1) == Some(4)

    def test_some_repr(self):
        """Some renders its payload repr."""
        assert repr(Some('a')) == "Some('a')"


class TestNothing:
    """Tests for Nothing."""

    def test_nothing_flags(self):
        """Nothing reports absence."""
        assert Nothing.is_none() is True
        assert Nothing.is_some() is False
        assert isinstance(Nothing, NothingType)

    def test_nothing_unwrap_raises(self):
        """Nothing.unwrap() raises RuntimeError."""
        with pytest.raises(RuntimeError, match='Called unwrap on Nothing'):
            Nothing.unwrap()

    def test_nothing_unwrap_or(self):
        """Nothing.unwrap_or() returns the default."""
        assert Nothing.unwrap_or(0) == 0

    def test_nothing_map(self):
        """Nothing.map() returns Nothing without calling the mapper."""
        calls = []
        assert Nothing.map(calls.append) is Nothing
        assert calls == []

    def test_nothing_repr(self):
        """Nothing renders as Nothing."""
        assert repr(Nothing) == 'Nothing'
