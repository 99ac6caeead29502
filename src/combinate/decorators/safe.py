"""@safe and @nullable decorators for adapting ordinary functions.

These are the boundary between raising / None-returning code and the in-band
Result and Option types.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, overload

import wrapt

from combinate._logging import _emit, get_logger
from combinate.option import Option, from_nullable
from combinate.result import Err, Ok

__all__ = ['nullable', 'safe']

logger = get_logger(__name__)


@overload
def safe[**P, T](
    func: Callable[P, T],
) -> Callable[P, Ok[T] | Err[Exception]]: ...


@overload
def safe[**P, T, E: BaseException](
    *,
    exceptions: tuple[type[E], ...],
) -> Callable[[Callable[P, T]], Callable[P, Ok[T] | Err[E]]]: ...


def safe[**P, T](
    func: Callable[P, T] | None = None,
    *,
    exceptions: tuple[type[Any], ...] | None = None,
) -> Any:
    """Decorator that catches exceptions and returns Err.

    Wraps a function so that it returns Ok(value) on success and
    Err(exception) if one of the given exceptions is raised. Other
    exceptions propagate unchanged.

    Can be used with or without arguments:
        @safe
        def risky(): ...

        @safe(exceptions=(ValueError, TypeError))
        def specific(): ...

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Tuple of exception types to catch. Defaults to (Exception,).

    Returns:
        A wrapped function that returns Result[T, E] instead of T.

    Example:
        ```python
        @safe
        def divide(a: int, b: int) -> float:
            return a / b
        divide(10, 2)
        # Ok(value=5.0)
        divide(10, 0)
        # Err(error=ZeroDivisionError('division by zero'))
        ```
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Ok[T] | Err[Any]:
        try:
            return Ok(wrapped(*args, **kwargs))
        except catch as e:
            _emit(logger, 'debug', 'safe.caught', function=getattr(wrapped, '__qualname__', repr(wrapped)), error=repr(e))
            return Err(e)

    if func is not None:
        return wrapper(func)
    return wrapper


def nullable[**P, T](func: Callable[P, T | None]) -> Callable[P, Option[T]]:
    """Decorator that turns a None-returning function into an Option-returning one.

    Example:
        ```python
        @nullable
        def find(users: dict[str, int], name: str) -> int | None:
            return users.get(name)
        find({'ada': 1}, 'ada')
        # Some(value=1)
        find({'ada': 1}, 'bob')
        # Nothing
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T | None],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Option[T]:
        return from_nullable(wrapped(*args, **kwargs))

    return wrapper(func)  # type: ignore[return-value]
