"""pipe() and its fixed-arity variants for threading a value through functions."""

from __future__ import annotations

from collections.abc import Callable, Iterable

__all__ = ['pipe', 'pipe2', 'pipe3', 'pipe4']


def pipe[T](value: T, fns: Iterable[Callable[[T], T]]) -> T:
    """Thread a value through a sequence of same-typed functions, left to right.

    An empty sequence returns the value unchanged.

    Args:
        value: The initial value.
        fns: Functions to apply in order.

    Returns:
        The value after applying every function.

    Example:
        ```python
        pipe(5, [lambda x: x + 1, lambda x: x * 2, lambda x: x - 3])
        # 9
        ```
    """
    current = value
    for fn in fns:
        current = fn(current)
    return current


def pipe2[A, B, C](value: A, fn1: Callable[[A], B], fn2: Callable[[B], C], /) -> C:
    """Apply two functions in order: fn2(fn1(value))."""
    return fn2(fn1(value))


def pipe3[A, B, C, D](
    value: A,
    fn1: Callable[[A], B],
    fn2: Callable[[B], C],
    fn3: Callable[[C], D],
    /,
) -> D:
    """Apply three functions in order, each stage with its own type."""
    return fn3(fn2(fn1(value)))


def pipe4[A, B, C, D, E](
    value: A,
    fn1: Callable[[A], B],
    fn2: Callable[[B], C],
    fn3: Callable[[C], D],
    fn4: Callable[[D], E],
    /,
) -> E:
    """Apply four functions in order, each stage with its own type.

    Example:
        ```python
        from combinate import option

        pipe4(
            '42',
            option.from_nullable,
            lambda o: option.map(o, int),
            lambda o: option.filter(o, lambda n: n > 0),
            lambda o: option.unwrap_or(o, 0),
        )
        # 42
        ```
    """
    return fn4(fn3(fn2(fn1(value))))
