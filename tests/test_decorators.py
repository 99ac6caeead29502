"""Tests for decorators: @safe and @nullable."""

import pytest
from combinate import Err, Nothing, Ok, Some, nullable, result, safe


class TestSafeDecorator:
    """Tests for @safe decorator."""

    def test_safe_returns_ok_on_success(self):
        """@safe wraps successful return in Ok."""

        @safe
        def divide(a: int, b: int) -> float:
            return a / b

        assert divide(10, 2) == Ok(5.0)

    def test_safe_returns_err_on_exception(self):
        """@safe catches exception and returns Err."""

        @safe
        def divide(a: int, b: int) -> float:
            return a / b

        res = divide(10, 0)
        assert isinstance(res, Err)
        assert isinstance(res.error, ZeroDivisionError)

    def test_safe_with_exceptions_param(self):
        """@safe(exceptions=...) catches only specified exceptions."""

        @safe(exceptions=(ValueError,))
        def risky(x: int) -> int:
            if x < 0:
                raise ValueError('negative')
            if x == 0:
                raise TypeError('zero')
            return x

        assert risky(5) == Ok(5)
        assert isinstance(risky(-1).error, ValueError)

        with pytest.raises(TypeError):
            risky(0)

    def test_safe_does_not_catch_base_exceptions(self):
        """KeyboardInterrupt and friends are outside the default tuple."""

        @safe
        def interrupted() -> None:
            raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            interrupted()

    def test_safe_preserves_function_name(self):
        """@safe preserves function metadata."""

        @safe
        def my_function():
            pass

        assert my_function.__name__ == 'my_function'

    def test_safe_chains_with_result_combinators(self):
        @safe
        def parse(s: str) -> int:
            return int(s)

        assert result.unwrap_or(result.map(parse('21'), lambda x: x * 2), 0) == 42
        assert result.unwrap_or(result.map(parse('x'), lambda x: x * 2), 0) == 0


class TestNullableDecorator:
    """Tests for @nullable decorator."""

    def test_value_becomes_some(self):
        @nullable
        def find(users: dict[str, int], name: str) -> int | None:
            return users.get(name)

        assert find({'ada': 1}, 'ada') == Some(1)

    def test_none_becomes_nothing(self):
        @nullable
        def find(users: dict[str, int], name: str) -> int | None:
            return users.get(name)

        assert find({'ada': 1}, 'bob') == Nothing

    def test_falsy_values_are_present(self):
        @nullable
        def zero() -> int | None:
            return 0

        assert zero() == Some(0)

    def test_preserves_function_name(self):
        @nullable
        def lookup() -> None:
            return None

        assert lookup.__name__ == 'lookup'

    def test_exceptions_propagate(self):
        @nullable
        def broken() -> int | None:
            raise LookupError('gone')

        with pytest.raises(LookupError):
            broken()
