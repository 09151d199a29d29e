"""Pytest configuration and shared fixtures for resulttype tests."""

import pytest


@pytest.fixture
def counter():
    """A computation that counts how many times it has been run."""

    class Counter:
        def __init__(self) -> None:
            self.calls = 0

        def __call__(self) -> int:
            self.calls += 1
            return self.calls

    return Counter()
