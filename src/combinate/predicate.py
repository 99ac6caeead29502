"""Boolean combinators over predicates.

`and_` and `or_` evaluate left to right with the usual short-circuit: the
second predicate is not called once the first one decides the outcome.
"""

from __future__ import annotations

import operator
from collections.abc import Callable

from combinate.compose import compose

__all__ = ['and_', 'not_', 'or_']

type Predicate[T] = Callable[[T], bool]


def not_[T](p: Predicate[T]) -> Predicate[T]:
    """Negate a predicate."""
    return compose(operator.not_, p)


def and_[T](p: Predicate[T], q: Predicate[T]) -> Predicate[T]:
    """Return a predicate true when both p and q hold; q is skipped when p fails."""

    def both(x: T) -> bool:
        return bool(p(x)) and bool(q(x))

    return both


def or_[T](p: Predicate[T], q: Predicate[T]) -> Predicate[T]:
    """Return a predicate true when p or q holds; q is skipped when p holds."""

    def either(x: T) -> bool:
        return bool(p(x)) or bool(q(x))

    return either
