"""DeferredOutcome: a recipe that produces an Outcome each time it is forced."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, overload

from resulttype._logging import get_logger
from resulttype.errors import InvalidArgumentError, require_callable
from resulttype.types.outcome import Failure, Success

__all__ = ['DeferredOutcome']

_logger = get_logger(__name__)
_UNSET: Any = object()


def _then[A, B, C](first: Callable[[A], B], second: Callable[[B], C]) -> Callable[[A], C]:
    def composed(arg: A) -> C:
        return second(first(arg))

    return composed


class DeferredOutcome[T, E]:
    """A deferred computation that produces an Outcome when evaluated.

    Wraps a zero-argument computation that may raise and a translator that
    turns the raised exception into an error value. Nothing runs until
    `evaluate()` is called, and every call runs the whole composed chain
    again: results are never cached.

    Combinators (map, flat_map, peek, ...) return new DeferredOutcome
    instances; the original is never modified. Exceptions raised anywhere in
    the composed chain are caught by the single boundary in `evaluate()` and
    handed to the translator once. Exceptions raised by the translator
    itself propagate to the caller.

    Examples:
        >>> lazy = DeferredOutcome.create(lambda: 5, lambda ex: 'Error')
        >>> lazy.map(lambda i: i * 2).map(lambda i: i + 3).evaluate()
        Success(13)
        >>> DeferredOutcome.create(lambda: 1 // 0, lambda ex: type(ex).__name__).evaluate()
        Failure('ZeroDivisionError')
    """

    __slots__ = ('_computation', '_translator')

    def __init__(
        self,
        computation: Callable[[], T],
        translator: Callable[[Exception], E],
    ) -> None:
        """Create a DeferredOutcome.

        Args:
            computation: Zero-argument function producing the success value.
            translator: Function mapping a raised exception to an error value.

        Raises:
            InvalidArgumentError: If either argument is None or not callable.
        """
        self._computation = require_callable(computation, 'computation')
        self._translator = require_callable(translator, 'translator')

    @classmethod
    def create(
        cls,
        computation: Callable[[], T],
        translator: Callable[[Exception], E],
    ) -> DeferredOutcome[T, E]:
        """Wrap a computation and its exception translator.

        Example:
            ```python
            user = DeferredOutcome.create(
                lambda: repository.find(user_id),
                lambda ex: f'lookup failed: {ex}',
            )
            ```
        """
        return cls(computation, translator)

    def __repr__(self) -> str:
        name = getattr(self._computation, '__qualname__', type(self._computation).__name__)
        return f'DeferredOutcome({name})'

    def evaluate(self) -> Success[T] | Failure[E]:
        """Run the computation and return its Outcome.

        A computation that returns None cannot produce a Success; the
        resulting InvalidArgumentError is translated like any other fault.

        Returns:
            Success(value) if the computation returned normally, otherwise
            Failure(translator(exc)).

        Raises:
            InvalidArgumentError: If the translator returned None.
        """
        try:
            value = self._computation()
            if value is None:
                raise InvalidArgumentError('computation result')
            return Success(value)
        except Exception as exc:
            _logger.debug('deferred_outcome.fault_translated', fault_type=type(exc).__name__)
            return Failure(self._translator(exc))

    @overload
    def map[X](self, f: Callable[[T], X]) -> DeferredOutcome[X, E]: ...

    @overload
    def map[X, F](
        self, f: Callable[[T], X], error_mapper: Callable[[E], F]
    ) -> DeferredOutcome[X, F]: ...

    def map(self, f: Callable[[T], Any], error_mapper: Any = _UNSET) -> DeferredOutcome[Any, Any]:
        """Transform the success value, and optionally the error.

        f runs inside the composed computation, so an exception it raises is
        translated exactly like one from the original computation.

        Args:
            f: Function applied to the success value.
            error_mapper: Function applied to the translated error. When
                given, the new translator is the original one followed by it.

        Returns:
            A new DeferredOutcome with the transformation applied.
        """
        require_callable(f, 'mapper')
        source = self._computation

        def mapped() -> Any:
            return f(source())

        if error_mapper is _UNSET:
            return DeferredOutcome(mapped, self._translator)
        require_callable(error_mapper, 'error_mapper')
        return DeferredOutcome(mapped, _then(self._translator, error_mapper))

    def map_error[F](self, error_mapper: Callable[[E], F]) -> DeferredOutcome[T, F]:
        """Transform the error; the computation is kept as is."""
        require_callable(error_mapper, 'error_mapper')
        return DeferredOutcome(self._computation, _then(self._translator, error_mapper))

    def flat_map[X](self, f: Callable[[T], DeferredOutcome[X, Any]]) -> DeferredOutcome[X, E]:
        """Sequence a dependent DeferredOutcome.

        The new computation runs this computation, passes the value to f and
        runs the computation of the DeferredOutcome f returns. Only this
        (outer) translator is ever consulted: an exception from either step
        is translated by it, and the inner translator is ignored. The inner
        one matters only when that DeferredOutcome is evaluated on its own.

        Example:
            ```python
            account = user.flat_map(
                lambda u: DeferredOutcome.create(lambda: accounts.find(u.id), str)
            )
            ```
        """
        require_callable(f, 'mapper')
        source = self._computation

        def bound() -> X:
            inner = f(source())
            if not isinstance(inner, DeferredOutcome):
                msg = f'flat_map mapper must return a DeferredOutcome, got {type(inner).__name__}'
                raise TypeError(msg)
            return inner._computation()

        return DeferredOutcome(bound, self._translator)

    def peek(self, action: Callable[[T], object]) -> DeferredOutcome[T, E]:
        """Run a side effect on the success value, passing it through unchanged.

        The action is skipped when the computation raises. An exception from
        the action itself is translated like a computation exception.
        """
        require_callable(action, 'action')
        source = self._computation

        def peeked() -> T:
            value = source()
            action(value)
            return value

        return DeferredOutcome(peeked, self._translator)

    def recover(self, f: Callable[[E], T]) -> DeferredOutcome[T, E]:
        """Substitute a value computed from the error when the computation raises.

        The exception is translated with this translator and the result is
        passed to f. The handler does not re-catch exceptions raised by f.
        """
        require_callable(f, 'recovery')
        source = self._computation
        translator = self._translator

        def recovered() -> T:
            try:
                return source()
            except Exception as exc:
                return f(translator(exc))

        return DeferredOutcome(recovered, translator)
