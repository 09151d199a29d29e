"""Outcome type: Success[T] | Failure[E] for explicit error handling."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import NoReturn, TypeIs

import msgspec

from resulttype.errors import InvalidArgumentError, require_callable, require_present
from resulttype.types.option import Nothing, NothingType, Some

__all__ = [
    'Failure',
    'Outcome',
    'Success',
    'collect',
    'combine',
    'failure',
    'success',
]


class Success[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Outcome containing a value of type T.

    The value is never None; construction with None raises
    InvalidArgumentError.

    Examples:
        >>> Success(42).get_data()
        42
        >>> Success(5).map(lambda x: x * 2)
        Success(10)
        >>> str(Success('done'))
        'Success(done)'
    """

    value: T

    def __post_init__(self) -> None:
        require_present(self.value, 'success value')

    def __repr__(self) -> str:
        return f'Success({self.value!r})'

    def __str__(self) -> str:
        return f'Success({self.value})'

    def is_success(self) -> TypeIs[Success[T]]:
        """Return True since this is Success.

        This method provides type narrowing - after checking is_success(),
        the type checker knows the outcome is Success[T].
        """
        return True

    def is_failure(self) -> TypeIs[Failure[object]]:
        """Return False since this is Success."""
        return False

    def get_data(self) -> T:
        """Return the success value."""
        return self.value

    def get_error(self) -> None:
        """Return None since a Success carries no error."""
        return None

    def to_optional(self) -> Some[T]:
        """Return Some(value)."""
        return Some(self.value)

    def map[U](self, f: Callable[[T], U]) -> Success[U]:
        """Apply a function to the contained value.

        Exceptions raised by f are not caught here; only DeferredOutcome
        translates exceptions.

        Args:
            f: Function to apply to the success value.

        Returns:
            Success containing the result of applying f to the value.
        """
        require_callable(f, 'mapper')
        return Success(f(self.value))

    def flat_map[U, E](self, f: Callable[[T], Success[U] | Failure[E]]) -> Success[U] | Failure[E]:
        """Apply a function that returns an Outcome to the contained value.

        Also known as bind. The Outcome returned by f is passed through
        verbatim, so a Failure from f propagates as-is.
        """
        require_callable(f, 'mapper')
        return f(self.value)

    def map_error[F](self, f: Callable[[object], F]) -> Success[T]:
        """Return self unchanged since this is Success."""
        require_callable(f, 'mapper')
        return self

    def or_else(self, default: T) -> T:  # noqa: ARG002
        """Return the success value, ignoring the default."""
        return self.value

    def or_else_raise(self, f: Callable[[object], BaseException]) -> T:
        """Return the success value; f is never called."""
        require_callable(f, 'exception_mapper')
        return self.value

    def if_success(self, action: Callable[[T], object]) -> Success[T]:
        """Call action with the value and return self for chaining."""
        require_callable(action, 'action')
        action(self.value)
        return self

    def if_failure(self, action: Callable[[object], object]) -> Success[T]:
        """Return self without calling action."""
        require_callable(action, 'action')
        return self

    def recover(self, f: Callable[[object], T]) -> Success[T]:
        """Return self unchanged since there is nothing to recover from."""
        require_callable(f, 'recovery')
        return self


class Failure[E](msgspec.Struct, frozen=True, gc=False):
    """Failure variant of Outcome containing an error of type E.

    The error is a modeled, already-translated value. It is returned,
    mapped, combined and recovered from; never raised by this type.

    Examples:
        >>> Failure('boom').is_success()
        False
        >>> Failure('boom').or_else(0)
        0
    """

    error: E

    def __post_init__(self) -> None:
        require_present(self.error, 'failure error')

    def __repr__(self) -> str:
        return f'Failure({self.error!r})'

    def __str__(self) -> str:
        return f'Failure({self.error})'

    def is_success(self) -> TypeIs[Success[object]]:
        """Return False since this is Failure."""
        return False

    def is_failure(self) -> TypeIs[Failure[E]]:
        """Return True since this is Failure.

        This method provides type narrowing - after checking is_failure(),
        the type checker knows the outcome is Failure[E].
        """
        return True

    def get_data(self) -> None:
        """Return None since a Failure carries no value."""
        return None

    def get_error(self) -> E:
        """Return the error value."""
        return self.error

    def to_optional(self) -> NothingType:
        """Return Nothing."""
        return Nothing

    def map[T, U](self, f: Callable[[T], U]) -> Failure[E]:
        """Return self unchanged; f is never called."""
        require_callable(f, 'mapper')
        return self

    def flat_map[T, U](self, f: Callable[[T], Success[U] | Failure[E]]) -> Failure[E]:
        """Return self unchanged; f is never called."""
        require_callable(f, 'mapper')
        return self

    def map_error[F](self, f: Callable[[E], F]) -> Failure[F]:
        """Apply a function to the contained error.

        Args:
            f: Function to apply to the error value.

        Returns:
            Failure containing the transformed error.
        """
        require_callable(f, 'mapper')
        return Failure(f(self.error))

    def or_else[T](self, default: T) -> T:
        """Return the default value since this is Failure."""
        return default

    def or_else_raise(self, f: Callable[[E], BaseException]) -> NoReturn:
        """Raise the exception built from the error.

        Args:
            f: Function turning the error into an exception instance.

        Raises:
            BaseException: Whatever f returns. Exceptions raised inside f
                itself propagate unchanged.
        """
        require_callable(f, 'exception_mapper')
        raise f(self.error)

    def if_success(self, action: Callable[[object], object]) -> Failure[E]:
        """Return self without calling action."""
        require_callable(action, 'action')
        return self

    def if_failure(self, action: Callable[[E], object]) -> Failure[E]:
        """Call action with the error and return self for chaining."""
        require_callable(action, 'action')
        action(self.error)
        return self

    def recover[T](self, f: Callable[[E], T]) -> Success[T]:
        """Turn the failure into a success using the recovery function.

        Args:
            f: Function producing a substitute value from the error.

        Returns:
            Success containing f(error).
        """
        require_callable(f, 'recovery')
        return Success(f(self.error))


type Outcome[T, E] = Success[T] | Failure[E]


def success[T](value: T) -> Success[T]:
    """Create an Outcome in the success state.

    Raises:
        InvalidArgumentError: If value is None.
    """
    return Success(value)


def failure[E](error: E) -> Failure[E]:
    """Create an Outcome in the failure state.

    Raises:
        InvalidArgumentError: If error is None.
    """
    return Failure(error)


def _require_outcome(value: object, argument: str) -> None:
    require_present(value, argument)
    if not isinstance(value, Success | Failure):
        raise InvalidArgumentError(argument, f'must be an Outcome, got {type(value).__name__}')


def combine[T1, T2, E, R](
    first: Success[T1] | Failure[E],
    second: Success[T2] | Failure[E],
    combiner: Callable[[T1, T2], R],
) -> Success[R] | Failure[E]:
    """Combine two Outcomes with a function of both success values.

    Left-biased: if both failed, the first error wins.

    Examples:
        >>> combine(Success(5), Success(10), lambda a, b: a + b)
        Success(15)
        >>> combine(Failure('a'), Failure('b'), lambda a, b: a + b)
        Failure('a')
    """
    _require_outcome(first, 'first')
    _require_outcome(second, 'second')
    require_callable(combiner, 'combiner')
    if isinstance(first, Failure):
        return first
    if isinstance(second, Failure):
        return second
    return Success(combiner(first.value, second.value))


def collect[T, E](outcomes: Iterable[Success[T] | Failure[E]]) -> Success[list[T]] | Failure[E]:
    """Collect an iterable of Outcomes into an Outcome of list.

    Short-circuits on the first Failure encountered.

    Examples:
        >>> collect([Success(1), Success(2), Success(3)])
        Success([1, 2, 3])
        >>> collect([Success(1), Failure('fail'), Success(3)])
        Failure('fail')
    """
    require_present(outcomes, 'outcomes')
    values: list[T] = []
    for outcome in outcomes:
        _require_outcome(outcome, 'outcome')
        if isinstance(outcome, Failure):
            return outcome
        values.append(outcome.value)
    return Success(values)
