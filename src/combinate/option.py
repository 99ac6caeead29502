"""Option type: Some[T] | Nothing, and the combinators over it.

Every operation exists twice: as a method on the two variants and as a free
function taking the option as its first argument, so that options fit both
method chains and `pipe` style pipelines.

Example:
    ```python
    from combinate import option
    from combinate.option import Nothing, Some

    option.map(Some(2), lambda x: x * 10)  # Some(value=20)
    option.unwrap_or(Nothing, 0)  # 0
    option.zip_with(Some(5), Some(3), operator.add)  # Some(value=8)
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from combinate.errors import UnwrapError

if TYPE_CHECKING:
    from combinate.result import Err, Ok, Result

__all__ = [
    'Nothing',
    'NothingType',
    'Option',
    'Some',
    'and_then',
    'expect',
    'filter',
    'flatten',
    'from_nullable',
    'from_result',
    'is_none',
    'is_some',
    'map',
    'map_or',
    'or_',
    'or_else',
    'sequence',
    'some',
    'tap_none',
    'tap_some',
    'to_nullable',
    'to_result',
    'to_result_else',
    'unwrap',
    'unwrap_or',
    'unwrap_or_else',
    'when',
    'zip',
    'zip_with',
]


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """Some variant of Option containing a value of type T.

    `Some(None)` is a present value; only `Nothing` is absent.

    Examples:
        >>> Some(42).map(lambda x: x * 2)
        Some(value=84)
        >>> Some(3).filter(lambda x: x > 5)
        Nothing
    """

    value: T

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True since this is Some."""
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Some value.

        Returns:
            Some containing the result of applying f to the value.
        """
        return Some(f(self.value))

    def map_or[U](self, _default: U, f: Callable[[T], U]) -> U:
        """Apply f to the value, ignoring the default."""
        return f(self.value)

    def and_then[U](self, f: Callable[[T], Some[U] | NothingType]) -> Some[U] | NothingType:
        """Apply a function that returns an Option to the contained value.

        Also known as flatmap or bind.

        Args:
            f: Function that takes T and returns Option[U].

        Returns:
            The Option returned by f.
        """
        return f(self.value)

    def filter(self, predicate: Callable[[T], bool]) -> Some[T] | NothingType:
        """Return self if the predicate holds for the value, else Nothing."""
        if predicate(self.value):
            return self
        return Nothing

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained value, ignoring the message."""
        return self.value

    def unwrap_or(self, _default: T) -> T:
        """Return the contained value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, _f: Callable[[], T]) -> T:
        """Return the contained value without calling the fallback."""
        return self.value

    def or_(self, _other: Some[T] | NothingType) -> Some[T]:
        """Return self since this is Some."""
        return self

    def or_else(self, _f: Callable[[], Some[T] | NothingType]) -> Some[T]:
        """Return self without calling the fallback."""
        return self

    def flatten[U](self: Some[Some[U] | NothingType]) -> Some[U] | NothingType:
        """Flatten a nested Option.

        Converts Option[Option[T]] into Option[T].
        """
        return self.value

    def tap_some(self, f: Callable[[T], Any]) -> Some[T]:
        """Call f with the value for its side effect and return self."""
        f(self.value)
        return self

    def tap_none(self, _f: Callable[[], Any]) -> Some[T]:
        """Return self without calling f."""
        return self

    def to_result[E](self, _err: E) -> Ok[T]:
        """Convert to Result, returning Ok(value)."""
        from combinate.result import Ok

        return Ok(self.value)

    def to_result_else[E](self, _f: Callable[[], E]) -> Ok[T]:
        """Convert to Result, returning Ok(value) without calling f."""
        from combinate.result import Ok

        return Ok(self.value)

    def to_nullable(self) -> T:
        """Return the contained value."""
        return self.value


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Option representing absence of a value.

    This is a singleton in practice - use the `Nothing` constant instead of
    instantiating directly. All instances compare equal.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.unwrap_or(0)
        0
    """

    def __repr__(self) -> str:
        return 'Nothing'

    def is_some(self) -> TypeIs[Some[Any]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True since this is Nothing."""
        return True

    def map[T, U](self, _f: Callable[[T], U]) -> NothingType:
        """Return Nothing since there's no value to map."""
        return self

    def map_or[T, U](self, default: U, _f: Callable[[T], U]) -> U:
        """Return the default since there's no value to map."""
        return default

    def and_then[T, U](self, _f: Callable[[T], Some[U] | NothingType]) -> NothingType:
        """Return Nothing since there's no value to bind."""
        return self

    def filter[T](self, _predicate: Callable[[T], bool]) -> NothingType:
        """Return Nothing without calling the predicate."""
        return self

    def unwrap(self) -> NoReturn:
        """Raise UnwrapError since Nothing has no value.

        Raises:
            UnwrapError: Always.
        """
        raise UnwrapError('Called unwrap on Nothing', code='UNWRAP_NOTHING')

    def expect(self, msg: str) -> NoReturn:
        """Raise UnwrapError with a custom message.

        Raises:
            UnwrapError: Always, carrying msg.
        """
        raise UnwrapError(msg, code='UNWRAP_NOTHING')

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Nothing."""
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        """Compute and return a default value since this is Nothing."""
        return f()

    def or_[T](self, other: Some[T] | NothingType) -> Some[T] | NothingType:
        """Return other since this is Nothing."""
        return other

    def or_else[T](self, f: Callable[[], Some[T] | NothingType]) -> Some[T] | NothingType:
        """Return the Option produced by f since this is Nothing."""
        return f()

    def flatten(self) -> NothingType:
        """Return Nothing since there's nothing to flatten."""
        return self

    def tap_some[T](self, _f: Callable[[T], Any]) -> NothingType:
        """Return self without calling f."""
        return self

    def tap_none(self, f: Callable[[], Any]) -> NothingType:
        """Call f for its side effect and return self."""
        f()
        return self

    def to_result[E](self, err: E) -> Err[E]:
        """Convert to Result, returning Err(err)."""
        from combinate.result import Err

        return Err(err)

    def to_result_else[E](self, f: Callable[[], E]) -> Err[E]:
        """Convert to Result, computing the error with f."""
        from combinate.result import Err

        return Err(f())

    def to_nullable(self) -> None:
        """Return None since this is Nothing."""
        return None


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Some[T] | NothingType


# ---------------------------------------------------------------------
# Constructors & variant tests
# ---------------------------------------------------------------------


def some[T](x: T) -> Option[T]:
    """Wrap a value in Some."""
    return Some(x)


def when[T](cond: bool, value: T) -> Option[T]:
    """Return Some(value) if cond is true, otherwise Nothing.

    The value is evaluated by the caller either way; use `and_then` on
    `when(cond, None)` when the value is expensive to build.

    Args:
        cond: Condition deciding presence.
        value: The value to wrap.

    Returns:
        Option[T]: Some(value) if cond, otherwise Nothing.
    """
    return Some(value) if cond else Nothing


def from_nullable[T](x: T | None) -> Option[T]:
    """Convert a nullable value to Option.

    Args:
        x: The value that may be None.

    Returns:
        Option[T]: Some(x) if x is not None, otherwise Nothing.
    """
    return Some(x) if x is not None else Nothing


def to_nullable[T](opt: Option[T]) -> T | None:
    """Return the contained value, or None for Nothing."""
    return opt.to_nullable()


def is_some[T](opt: Option[T]) -> TypeIs[Some[T]]:
    """Check if an Option contains a value.

    Args:
        opt: The Option to check.

    Returns:
        bool: True if the Option is Some, False if Nothing.
    """
    return isinstance(opt, Some)


def is_none[T](opt: Option[T]) -> TypeIs[NothingType]:
    """Check if an Option is Nothing.

    Args:
        opt: The Option to check.

    Returns:
        bool: True if the Option is Nothing, False if it contains a value.
    """
    return isinstance(opt, NothingType)


# ---------------------------------------------------------------------
# Transformation & chaining
# ---------------------------------------------------------------------


def map[T, U](opt: Option[T], f: Callable[[T], U]) -> Option[U]:
    """Transform the value inside an Option if present.

    Args:
        opt: The Option to transform.
        f: Function to apply to the value if present.

    Returns:
        Option[U]: Some with the transformed value if opt was Some, otherwise Nothing.
    """
    return opt.map(f)


def map_or[T, U](opt: Option[T], default: U, f: Callable[[T], U]) -> U:
    """Apply f to the value if present, otherwise return default."""
    return opt.map_or(default, f)


def and_then[T, U](opt: Option[T], f: Callable[[T], Option[U]]) -> Option[U]:
    """Chain a computation that may return Nothing.

    f is not invoked when opt is Nothing.

    Args:
        opt: The Option to chain from.
        f: Function that takes the value and returns an Option.

    Returns:
        Option[U]: The result of applying f if opt was Some, otherwise Nothing.
    """
    return opt.and_then(f)


def filter[T](opt: Option[T], pred: Callable[[T], bool]) -> Option[T]:
    """Keep the value only if it satisfies pred.

    Args:
        opt: The Option to filter.
        pred: Predicate function to test the value.

    Returns:
        Option[T]: opt if it contains a value that satisfies pred, otherwise Nothing.
    """
    return opt.filter(pred)


def flatten[T](opt: Option[Option[T]]) -> Option[T]:
    """Remove one level of nesting: Some(Some(v)) -> Some(v), Some(Nothing) -> Nothing."""
    return opt.flatten()


def zip_with[T, U, V](a: Option[T], b: Option[U], f: Callable[[T, U], V]) -> Option[V]:
    """Combine two Options with a function if both have values.

    f is only invoked when both options are Some.

    Args:
        a: The first Option.
        b: The second Option.
        f: Function to combine the values.

    Returns:
        Option[V]: Some with the result of f if both are Some, otherwise Nothing.
    """
    if isinstance(a, Some) and isinstance(b, Some):
        return Some(f(a.value, b.value))
    return Nothing


def zip[T, U](a: Option[T], b: Option[U]) -> Option[tuple[T, U]]:
    """Pair the values of two Options if both are present."""
    return zip_with(a, b, _pair)


def _pair[T, U](x: T, y: U) -> tuple[T, U]:
    return (x, y)


# ---------------------------------------------------------------------
# Extraction & fallback
# ---------------------------------------------------------------------


def unwrap_or[T](opt: Option[T], default: T) -> T:
    """Unwrap an Option or return a default value.

    Args:
        opt: The Option to unwrap.
        default: The default value to return if Nothing.

    Returns:
        T: The contained value if Some, otherwise the default.
    """
    return opt.unwrap_or(default)


def unwrap_or_else[T](opt: Option[T], f: Callable[[], T]) -> T:
    """Unwrap an Option or compute a default value.

    f is invoked exactly once when opt is Nothing and never otherwise.

    Args:
        opt: The Option to unwrap.
        f: Function to compute the default if Nothing.

    Returns:
        T: The contained value if Some, otherwise the result of f().
    """
    return opt.unwrap_or_else(f)


def unwrap[T](opt: Option[T]) -> T:
    """Return the contained value.

    Raises:
        UnwrapError: If the Option is Nothing.
    """
    return opt.unwrap()


def expect[T](opt: Option[T], msg: str) -> T:
    """Return the contained value, failing with msg on Nothing.

    Raises:
        UnwrapError: If the Option is Nothing.
    """
    return opt.expect(msg)


def or_[T](a: Option[T], b: Option[T]) -> Option[T]:
    """Return a if it has a value, otherwise b.

    b is an already-evaluated Option; use `or_else` to defer its computation.
    """
    return a.or_(b)


def or_else[T](a: Option[T], f: Callable[[], Option[T]]) -> Option[T]:
    """Return a if it has a value, otherwise call f and return its result.

    f is invoked only when a is Nothing.
    """
    return a.or_else(f)


# ---------------------------------------------------------------------
# Side effects
# ---------------------------------------------------------------------


def tap_some[T](opt: Option[T], f: Callable[[T], Any]) -> Option[T]:
    """Call f with the value if present; return opt unchanged.

    Exceptions raised by f propagate to the caller.
    """
    return opt.tap_some(f)


def tap_none[T](opt: Option[T], f: Callable[[], Any]) -> Option[T]:
    """Call f if opt is Nothing; return opt unchanged."""
    return opt.tap_none(f)


# ---------------------------------------------------------------------
# Conversion to and from Result
# ---------------------------------------------------------------------


def to_result[T, E](opt: Option[T], err: E) -> Result[T, E]:
    """Convert an Option to a Result, using err for Nothing.

    Args:
        opt: The Option to convert.
        err: The error to use if Nothing.

    Returns:
        Result[T, E]: Ok with the value if Some, otherwise Err(err).
    """
    return opt.to_result(err)


def to_result_else[T, E](opt: Option[T], f: Callable[[], E]) -> Result[T, E]:
    """Convert an Option to a Result, computing the error only for Nothing."""
    return opt.to_result_else(f)


def from_result[T, E](res: Result[T, E]) -> Option[T]:
    """Convert a Result to an Option, discarding any error.

    Args:
        res: The Result to convert.

    Returns:
        Option[T]: Some with the value if Ok, otherwise Nothing.
    """
    from combinate.result import Ok

    return Some(res.value) if isinstance(res, Ok) else Nothing


# ---------------------------------------------------------------------
# Collections of Options
# ---------------------------------------------------------------------


def sequence[T](opts: Iterable[Option[T]]) -> Option[list[T]]:
    """Collect values from an iterable of Options, short-circuiting on Nothing.

    The iterable is consumed only up to the first Nothing.

    Args:
        opts: An iterable of Option instances.

    Returns:
        Option[list[T]]: Some with the list of values if all are Some, otherwise Nothing.
    """
    out: list[T] = []
    for opt in opts:
        if not isinstance(opt, Some):
            return Nothing
        out.append(opt.value)
    return Some(out)
