"""Sequence combinators over finite iterables.

All functions accept any iterable, never mutate it, process elements strictly
left to right, and return a new list (or a bool for the quantifiers).

Example:
    ```python
    from combinate import sequence

    sequence.chunk([1, 2, 3, 4, 5], 2)  # [[1, 2], [3, 4], [5]]
    sequence.uniq([1, 2, 2, 3, 1, 4])  # [1, 2, 3, 4]
    sequence.flat_map(['ab', 'c'], list)  # ['a', 'b', 'c']
    ```
"""

from __future__ import annotations

import builtins
import itertools
from collections.abc import Callable, Hashable, Iterable

__all__ = [
    'all',
    'any',
    'chunk',
    'filter',
    'flat_map',
    'uniq',
]


def flat_map[T, U](seq: Iterable[T], f: Callable[[T], Iterable[U]]) -> list[U]:
    """Map each element to an iterable and concatenate the results in order.

    Args:
        seq: The input elements.
        f: Function returning an iterable for each element.

    Returns:
        list[U]: The concatenated results; empty for empty input.
    """
    return list(itertools.chain.from_iterable(f(x) for x in seq))


def chunk[T](seq: Iterable[T], size: int) -> list[list[T]]:
    """Split into consecutive groups of `size` elements.

    The final group may be shorter. A non-positive size yields an empty list
    rather than an error.

    Args:
        seq: The input elements.
        size: Number of elements per group.

    Returns:
        list[list[T]]: The groups in order.

    Examples:
        >>> chunk([1, 2, 3, 4, 5], 2)
        [[1, 2], [3, 4], [5]]
        >>> chunk([1, 2, 3], 0)
        []
    """
    if size <= 0:
        return []
    return [list(group) for group in itertools.batched(seq, size)]


def uniq[T](seq: Iterable[T]) -> list[T]:
    """Drop later duplicates, keeping the order of first occurrence.

    Equality is `==`. Hashable elements are tracked in a set; unhashable ones
    (lists, dicts) fall back to a linear scan.

    Examples:
        >>> uniq([1, 2, 2, 3, 1, 4])
        [1, 2, 3, 4]
    """
    seen: set[Hashable] = set()
    seen_unhashable: list[T] = []
    out: list[T] = []
    for x in seq:
        if isinstance(x, Hashable):
            try:
                if x in seen:
                    continue
                seen.add(x)
            except TypeError:
                # tuples and frozen structs holding unhashable members
                if x in seen_unhashable:
                    continue
                seen_unhashable.append(x)
        else:
            if x in seen_unhashable:
                continue
            seen_unhashable.append(x)
        out.append(x)
    return out


def any[T](seq: Iterable[T], pred: Callable[[T], bool]) -> bool:
    """Return True if pred holds for some element.

    Stops at the first element satisfying pred. False for empty input.
    """
    return builtins.any(pred(x) for x in seq)


def all[T](seq: Iterable[T], pred: Callable[[T], bool]) -> bool:
    """Return True if pred holds for every element.

    Stops at the first element failing pred. True for empty input.
    """
    return builtins.all(pred(x) for x in seq)


def filter[T](seq: Iterable[T], pred: Callable[[T], bool]) -> list[T]:
    """Keep the elements satisfying pred, in order."""
    return [x for x in seq if pred(x)]
