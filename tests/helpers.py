"""Test doubles shared across the combinate test suite."""

from typing import Any


class CallCounter:
    """Callable that records every invocation and returns a fixed value.

    Used to assert that short-circuiting combinators never call the
    transformer of the branch they are not on.
    """

    def __init__(self, returns: Any = None) -> None:
        self.returns = returns
        self.calls: list[tuple[Any, ...]] = []

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        return self.returns

    @property
    def count(self) -> int:
        return len(self.calls)
