"""Exception types for the raising escape hatches of combinate.

The combinators themselves never raise: absence and failure travel in-band as
`Nothing` and `Err`. Only `unwrap` and `expect` leave that world, and they do
so with the exceptions defined here.
"""

from __future__ import annotations

__all__ = [
    'CombinateError',
    'UnwrapError',
]


class CombinateError(Exception):
    """Base exception class for combinate errors.

    Attributes:
        message (str): A human-readable description of the error.
        code (str | None): An optional error code for programmatic error handling.

    Example:
        ```python
        from combinate import CombinateError, Nothing, option

        try:
            option.unwrap(Nothing)
        except CombinateError as e:
            print(e.code)  # UNWRAP_NOTHING
        ```
    """

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message: str = message
        self.code: str | None = code

    def __str__(self) -> str:
        """Return a string representation of the error."""
        if self.code:
            return f'[{self.code}] {self.message}'
        return self.message


class UnwrapError(CombinateError):
    """Raised when `unwrap` or `expect` is called on `Nothing` or `Err`."""

    def __init__(self, message: str, code: str = 'UNWRAP') -> None:
        super().__init__(message, code=code)
