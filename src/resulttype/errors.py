"""Contract-violation errors raised before any Outcome is produced."""

from __future__ import annotations

from typing import Any

__all__ = [
    'InvalidArgumentError',
    'require_callable',
    'require_present',
]


class InvalidArgumentError(ValueError):
    """An API precondition was violated - absent payload or function.

    Never wrapped in an Outcome: it signals a bug in the calling code, not a
    modeled failure.
    """

    def __init__(self, argument: str, reason: str = 'cannot be None') -> None:
        self.argument = argument
        self.reason = reason
        super().__init__(f'{argument} {reason}')


def require_present[T](value: T | None, argument: str) -> T:
    """Return value unchanged, raising InvalidArgumentError if it is None."""
    if value is None:
        raise InvalidArgumentError(argument)
    return value


def require_callable(value: Any, argument: str) -> Any:
    """Return value unchanged if it is callable.

    Raises:
        InvalidArgumentError: If value is None or not callable.
    """
    require_present(value, argument)
    if not callable(value):
        raise InvalidArgumentError(argument, f'must be callable, got {type(value).__name__}')
    return value
