"""Result type: Ok[T] | Err[E], and the combinators over it.

Failure is an ordinary return value. Chaining operations only ever invoke the
transformer for the branch they are on, so an `Err` flows through `map` and
`and_then` untouched, and an `Ok` flows through `map_error` untouched.

Example:
    ```python
    from combinate import result
    from combinate.result import Err, Ok

    def parse(s: str) -> result.Result[int, str]:
        return Ok(int(s)) if s.isdigit() else Err(f'not a number: {s!r}')

    result.and_then(Ok('42'), parse)  # Ok(value=42)
    result.and_then(Err('boom'), parse)  # Err(error='boom'), parse never called
    result.unwrap_or_else(parse('x'), lambda e: -1)  # -1
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from combinate.errors import UnwrapError

if TYPE_CHECKING:
    from combinate.option import Option

__all__ = [
    'Err',
    'Ok',
    'Result',
    'and_then',
    'expect',
    'flatten',
    'is_error',
    'is_ok',
    'map',
    'map_error',
    'ok',
    'or_else',
    'partition',
    'sequence',
    'tap_error',
    'tap_ok',
    'unwrap',
    'unwrap_or',
    'unwrap_or_else',
]


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Examples:
        >>> Ok(42).map(lambda x: x * 2)
        Ok(value=84)
        >>> Ok(42).map_error(str.upper)
        Ok(value=42)
    """

    value: T

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True since this is Ok."""
        return True

    def is_error(self) -> TypeIs[Err[Any]]:
        """Return False since this is Ok."""
        return False

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Ok value.

        Returns:
            Ok containing the result of applying f to the value.
        """
        return Ok(f(self.value))

    def map_error[F](self, _f: Callable[[Any], F]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def and_then[U, E](self, f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Apply a function that returns a Result to the contained value.

        Args:
            f: Function that takes T and returns Result[U, E].

        Returns:
            The Result returned by f.
        """
        return f(self.value)

    def or_else[F](self, _f: Callable[[Any], Ok[T] | Err[F]]) -> Ok[T]:
        """Return self without calling the recovery function."""
        return self

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained value, ignoring the message."""
        return self.value

    def unwrap_or(self, _default: T) -> T:
        """Return the contained value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, _f: Callable[[Any], T]) -> T:
        """Return the contained value without calling the fallback."""
        return self.value

    def tap_ok(self, f: Callable[[T], Any]) -> Ok[T]:
        """Call f with the value for its side effect and return self."""
        f(self.value)
        return self

    def tap_error(self, _f: Callable[[Any], Any]) -> Ok[T]:
        """Return self without calling f."""
        return self

    def flatten[U, E](self: Ok[Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Flatten a nested Result.

        Converts Result[Result[T, E], E] into Result[T, E].
        """
        return self.value

    def ok(self) -> Option[T]:
        """Convert to Option, returning Some(value)."""
        from combinate.option import Some

        return Some(self.value)


class Err[E](msgspec.Struct, frozen=True, gc=False):
    """Error variant of Result containing an error of type E.

    Examples:
        >>> Err('boom').is_error()
        True
        >>> Err('boom').unwrap_or(0)
        0
    """

    error: E

    def is_ok(self) -> TypeIs[Ok[Any]]:
        """Return False since this is Err."""
        return False

    def is_error(self) -> TypeIs[Err[E]]:
        """Return True since this is Err."""
        return True

    def map[T, U](self, _f: Callable[[T], U]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def map_error[F](self, f: Callable[[E], F]) -> Err[F]:
        """Apply a function to the contained error.

        Args:
            f: Function to apply to the error value.

        Returns:
            Err containing the transformed error.
        """
        return Err(f(self.error))

    def and_then[T, U](self, _f: Callable[[T], Ok[U] | Err[E]]) -> Err[E]:
        """Return self without calling f."""
        return self

    def or_else[T, F](self, f: Callable[[E], Ok[T] | Err[F]]) -> Ok[T] | Err[F]:
        """Apply a recovery function to the error.

        Args:
            f: Function that takes the error and returns a new Result.

        Returns:
            The Result returned by f.
        """
        return f(self.error)

    def unwrap(self) -> NoReturn:
        """Raise UnwrapError since Err has no Ok value.

        If the error is an exception it becomes the __cause__ of the raised error.

        Raises:
            UnwrapError: Always.
        """
        raise UnwrapError(f'Called unwrap on Err: {self.error!r}', code='UNWRAP_ERR') from _cause(self.error)

    def expect(self, msg: str) -> NoReturn:
        """Raise UnwrapError with a custom message.

        Raises:
            UnwrapError: Always, with msg and the error repr.
        """
        raise UnwrapError(f'{msg}: {self.error!r}', code='UNWRAP_ERR') from _cause(self.error)

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Err."""
        return default

    def unwrap_or_else[T](self, f: Callable[[E], T]) -> T:
        """Compute a value from the error since this is Err."""
        return f(self.error)

    def tap_ok[T](self, _f: Callable[[T], Any]) -> Err[E]:
        """Return self without calling f."""
        return self

    def tap_error(self, f: Callable[[E], Any]) -> Err[E]:
        """Call f with the error for its side effect and return self."""
        f(self.error)
        return self

    def flatten(self) -> Err[E]:
        """Return self since this is Err (nothing to flatten)."""
        return self

    def ok(self) -> Option[Any]:
        """Convert to Option, returning Nothing since this is Err."""
        from combinate.option import Nothing

        return Nothing


type Result[T, E] = Ok[T] | Err[E]


def _cause(error: object) -> BaseException | None:
    return error if isinstance(error, BaseException) else None


# ---------------------------------------------------------------------
# Free-function parity
# ---------------------------------------------------------------------


def is_ok[T, E](res: Result[T, E]) -> TypeIs[Ok[T]]:
    """Check if a Result is Ok.

    Args:
        res: The Result to check.

    Returns:
        bool: True if the Result is Ok, False if Err.
    """
    return isinstance(res, Ok)


def is_error[T, E](res: Result[T, E]) -> TypeIs[Err[E]]:
    """Check if a Result is Err.

    Args:
        res: The Result to check.

    Returns:
        bool: True if the Result is Err, False if Ok.
    """
    return isinstance(res, Err)


def map[T, U, E](res: Result[T, E], f: Callable[[T], U]) -> Result[U, E]:
    """Transform the value of a Result if Ok.

    Args:
        res: The Result to transform.
        f: Function to apply to the value if Ok.

    Returns:
        Result[U, E]: A new Ok with the transformed value, otherwise the original Err.
    """
    return res.map(f)


def map_error[T, E, F](res: Result[T, E], f: Callable[[E], F]) -> Result[T, F]:
    """Transform the error of a Result if Err.

    Args:
        res: The Result to transform.
        f: Function to apply to the error if Err.

    Returns:
        Result[T, F]: A new Err with the transformed error, otherwise the original Ok.
    """
    return res.map_error(f)


def and_then[T, U, E](res: Result[T, E], f: Callable[[T], Result[U, E]]) -> Result[U, E]:
    """Chain a computation that may fail.

    Short-circuits on Err: f is not invoked.

    Args:
        res: The Result to chain from.
        f: Function that takes the value and returns a new Result.

    Returns:
        Result[U, E]: The result of applying f if Ok, otherwise the original Err.
    """
    return res.and_then(f)


def or_else[T, E, F](res: Result[T, E], f: Callable[[E], Result[T, F]]) -> Result[T, F]:
    """Recover from an Err by computing a new Result from the error.

    Args:
        res: The Result to handle.
        f: Function that takes the error and returns a new Result.

    Returns:
        The original Ok if Ok, otherwise the result of applying f to the error.
    """
    return res.or_else(f)


def flatten[T, E](res: Result[Result[T, E], E]) -> Result[T, E]:
    """Remove one level of nesting from a Result."""
    return res.flatten()


def unwrap_or[T, E](res: Result[T, E], default: T) -> T:
    """Return the Ok value or a default."""
    return res.unwrap_or(default)


def unwrap_or_else[T, E](res: Result[T, E], f: Callable[[E], T]) -> T:
    """Unwrap a Result or compute a value from the error.

    Args:
        res: The Result to unwrap.
        f: A callable that takes the error and returns a fallback value.

    Returns:
        T: The contained value if Ok, otherwise f(error).
    """
    return res.unwrap_or_else(f)


def unwrap[T, E](res: Result[T, E]) -> T:
    """Return the Ok value.

    Raises:
        UnwrapError: If the Result is Err.
    """
    return res.unwrap()


def expect[T, E](res: Result[T, E], msg: str) -> T:
    """Return the Ok value, failing with msg on Err.

    Raises:
        UnwrapError: If the Result is Err.
    """
    return res.expect(msg)


def tap_ok[T, E](res: Result[T, E], f: Callable[[T], Any]) -> Result[T, E]:
    """Call f with the value if Ok; return res unchanged.

    Exceptions raised by f propagate to the caller.
    """
    return res.tap_ok(f)


def tap_error[T, E](res: Result[T, E], f: Callable[[E], Any]) -> Result[T, E]:
    """Call f with the error if Err; return res unchanged."""
    return res.tap_error(f)


def ok[T, E](res: Result[T, E]) -> Option[T]:
    """Convert a Result to an Option, discarding any error."""
    return res.ok()


# ---------------------------------------------------------------------
# Collections of Results
# ---------------------------------------------------------------------


def sequence[T, E](results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Collect values from an iterable of Results, short-circuiting on the first Err.

    The iterable is consumed only up to the first Err.

    Args:
        results: An iterable of Result instances.

    Returns:
        Result[list[T], E]: Ok with the list of values if all are Ok, otherwise the first Err.

    Examples:
        >>> sequence([Ok(1), Ok(2), Ok(3)])
        Ok(value=[1, 2, 3])
        >>> sequence([Ok(1), Err('fail'), Ok(3)])
        Err(error='fail')
    """
    values: list[T] = []
    for res in results:
        if isinstance(res, Err):
            return res
        values.append(res.value)
    return Ok(values)


def partition[T, E](results: Iterable[Result[T, E]]) -> tuple[list[T], list[E]]:
    """Separate an iterable of Results into successes and failures.

    Returns:
        tuple[list[T], list[E]]: (values, errors), each in input order.
    """
    oks: list[T] = []
    errs: list[E] = []
    for res in results:
        if isinstance(res, Ok):
            oks.append(res.value)
        else:
            errs.append(res.error)
    return oks, errs
