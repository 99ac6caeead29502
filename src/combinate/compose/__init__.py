"""Composition utilities: function combinators and pipe()."""

from combinate.compose.func import (
    apply,
    compose,
    constant,
    curry,
    flip,
    identity,
    tap,
    uncurry,
)
from combinate.compose.pipe import pipe, pipe2, pipe3, pipe4

__all__ = [
    'apply',
    'compose',
    'constant',
    'curry',
    'flip',
    'identity',
    'pipe',
    'pipe2',
    'pipe3',
    'pipe4',
    'tap',
    'uncurry',
]
