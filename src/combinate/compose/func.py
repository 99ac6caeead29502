"""Function combinators: compose, curry, flip and friends.

Each combinator that returns a function returns a closure over its
arguments; nothing here holds state of its own.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

__all__ = [
    'apply',
    'compose',
    'constant',
    'curry',
    'flip',
    'identity',
    'tap',
    'uncurry',
]


def compose[A, B, C](f: Callable[[B], C], g: Callable[[A], B]) -> Callable[[A], C]:
    """Return the composition x -> f(g(x)); g is applied first.

    Example:
        ```python
        inc_then_double = compose(lambda x: x * 2, lambda x: x + 1)
        inc_then_double(3)  # 8
        ```
    """

    def composed(x: A) -> C:
        return f(g(x))

    return composed


def curry[A, B, C](f: Callable[[A, B], C]) -> Callable[[A], Callable[[B], C]]:
    """Turn a two-argument function into a function returning a function.

    `curry(f)(a)(b) == f(a, b)`.
    """

    def curried(a: A) -> Callable[[B], C]:
        def bound(b: B) -> C:
            return f(a, b)

        return bound

    return curried


def uncurry[A, B, C](f: Callable[[A], Callable[[B], C]]) -> Callable[[A, B], C]:
    """Inverse of `curry`: `uncurry(g)(a, b) == g(a)(b)`."""

    def uncurried(a: A, b: B) -> C:
        return f(a)(b)

    return uncurried


def identity[T](x: T) -> T:
    """Return x unchanged."""
    return x


def constant[T](x: T) -> Callable[..., T]:
    """Return a function that ignores its arguments and always returns x."""

    def const(*_args: Any, **_kwargs: Any) -> T:
        return x

    return const


def tap[T](x: T, f: Callable[[T], Any]) -> T:
    """Call f(x) for its side effect and return x.

    Whatever f returns is discarded; exceptions raised by f propagate.
    """
    f(x)
    return x


def flip[A, B, C](f: Callable[[A, B], C]) -> Callable[[B, A], C]:
    """Return a function taking f's two arguments in reverse order.

    `flip(flip(f))` behaves like f for every argument pair.
    """

    def flipped(b: B, a: A) -> C:
        return f(a, b)

    return flipped


def apply[T, U](x: T, f: Callable[[T], U]) -> U:
    """Return f(x)."""
    return f(x)
