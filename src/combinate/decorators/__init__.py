"""Decorators: @safe and @nullable."""

from combinate.decorators.safe import nullable, safe

__all__ = [
    'nullable',
    'safe',
]
