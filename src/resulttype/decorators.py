"""@deferred decorator: turn a function into a DeferredOutcome factory."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, overload

import wrapt

from resulttype.deferred import DeferredOutcome
from resulttype.errors import require_callable

__all__ = ['deferred']


def _identity(exc: Exception) -> Exception:
    return exc


@overload
def deferred[**P, T](
    func: Callable[P, T],
) -> Callable[P, DeferredOutcome[T, Exception]]: ...


@overload
def deferred[E](
    func: None = None,
    *,
    translator: Callable[[Exception], E],
) -> Callable[[Callable[..., Any]], Callable[..., DeferredOutcome[Any, E]]]: ...


def deferred(
    func: Callable[..., Any] | None = None,
    *,
    translator: Callable[[Exception], Any] | None = None,
) -> Any:
    """Decorator that defers a function call into a DeferredOutcome.

    Calling the decorated function does not run it. It returns a
    DeferredOutcome whose computation calls the original function with the
    same arguments; every `evaluate()` runs it again.

    Can be used with or without arguments:
        @deferred
        def load(): ...

        @deferred(translator=lambda ex: f'load failed: {ex}')
        def load(): ...

    Args:
        func: The function to wrap (when used without parentheses).
        translator: Maps a raised exception to the error value. Defaults to
            the exception object itself.

    Raises:
        InvalidArgumentError: If translator is given but not callable.

    Example:
        ```python
        @deferred(translator=str)
        def divide(a: int, b: int) -> float:
            return a / b

        divide(10, 2).evaluate()
        # Success(5.0)
        divide(10, 0).evaluate()
        # Failure('division by zero')
        ```
    """
    translate = _identity if translator is None else require_callable(translator, 'translator')

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> DeferredOutcome[Any, Any]:
        return DeferredOutcome.create(lambda: wrapped(*args, **kwargs), translate)

    if func is not None:
        return wrapper(func)
    return wrapper
