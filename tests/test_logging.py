"""Tests for logging configuration, hooks and trace taps."""

from __future__ import annotations

import logging
from typing import Any

import pytest
from combinate import (
    Err,
    Ok,
    Some,
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_config,
    get_logger,
    init,
    option,
    remove_log_hook,
    result,
    safe,
    tap,
    trace,
)


@pytest.fixture(autouse=True)
def isolated(clean_config):
    """Every test starts without hooks, stored config or COMBINATE_* variables."""
    return clean_config


def capture() -> list[dict[str, Any]]:
    received: list[dict[str, Any]] = []
    add_log_hook(received.append)
    return received


class TestLogHooks:
    """Tests for logging hooks functionality."""

    def test_hook_receives_log_events(self) -> None:
        """Registered hooks receive log entry dicts."""
        configure_logging(level='DEBUG', json_output=True)
        received = capture()

        get_logger('test').info('Test message', extra_field='extra_value')

        entries = [e for e in received if e.get('event') == 'Test message']
        assert len(entries) == 1
        assert entries[0]['extra_field'] == 'extra_value'

    def test_remove_hook(self) -> None:
        """remove_log_hook() stops hook from being called."""
        calls: list[str] = []

        def hook(event_dict: dict[str, Any]) -> None:
            calls.append('called')

        configure_logging(level='DEBUG', json_output=True)
        add_log_hook(hook)

        logger = get_logger('test')
        logger.info('First')
        assert len(calls) == 1

        remove_log_hook(hook)
        logger.info('Second')
        assert len(calls) == 1

    def test_clear_hooks(self) -> None:
        """clear_log_hooks() removes all hooks."""
        calls: list[str] = []
        configure_logging(level='DEBUG', json_output=True)
        add_log_hook(lambda _: calls.append('hook1'))
        add_log_hook(lambda _: calls.append('hook2'))

        logger = get_logger('test')
        logger.info('First')
        assert len(calls) == 2

        clear_log_hooks()
        logger.info('Second')
        assert len(calls) == 2

    def test_hook_exception_does_not_break_logging(self) -> None:
        """Exceptions in hooks don't prevent logging or other hooks."""
        calls: list[str] = []

        def bad_hook(event_dict: dict[str, Any]) -> None:
            raise RuntimeError('Hook failed')

        configure_logging(level='DEBUG', json_output=True)
        add_log_hook(bad_hook)
        add_log_hook(lambda _: calls.append('good'))

        get_logger('test').info('Test')

        assert 'good' in calls


class TestTrace:
    """Tests for trace taps."""

    def test_trace_returns_value_unchanged(self) -> None:
        value = {'k': [1, 2]}
        assert trace('seen')(value) is value

    def test_trace_is_silent_without_log_level(self) -> None:
        configure_logging(level='DEBUG', json_output=True)
        received = capture()

        trace('quiet')(1)

        assert [e for e in received if e.get('event') == 'quiet'] == []

    def test_trace_logs_value_and_fields(self) -> None:
        init(log_level='DEBUG')
        received = capture()

        trace('row.loaded', table='users')(42)

        entries = [e for e in received if e.get('event') == 'row.loaded']
        assert len(entries) == 1
        assert entries[0]['value'] == 42
        assert entries[0]['table'] == 'users'
        assert entries[0]['level'] == 'debug'

    def test_trace_uses_configured_level(self) -> None:
        init(log_level='DEBUG', trace_level='info')
        received = capture()

        trace('leveled')('x')

        entries = [e for e in received if e.get('event') == 'leveled']
        assert entries[0]['level'] == 'info'

    def test_trace_with_tap_family(self) -> None:
        init(log_level='DEBUG')
        received = capture()

        assert result.tap_ok(Ok(1), trace('ok.seen')) == Ok(1)
        assert result.tap_error(Err('boom'), trace('err.seen')) == Err('boom')
        assert option.tap_some(Some(2), trace('some.seen')) == Some(2)
        assert tap(3, trace('plain.seen')) == 3

        events = [e['event'] for e in received if e['event'].endswith('.seen')]
        assert events == ['ok.seen', 'err.seen', 'some.seen', 'plain.seen']


class TestSafeLogging:
    """The safe decorator reports caught exceptions at debug level."""

    def test_caught_exception_is_logged(self) -> None:
        init(log_level='DEBUG')
        received = capture()

        @safe
        def explode() -> None:
            raise ValueError('kaboom')

        explode()

        entries = [e for e in received if e.get('event') == 'safe.caught']
        assert len(entries) == 1
        assert 'explode' in entries[0]['function']
        assert 'kaboom' in entries[0]['error']


class TestEnvironmentLogLevel:
    """COMBINATE_LOG_LEVEL alone turns logging on without an init() call."""

    def test_level_filters_output(self, isolated, capsys) -> None:
        isolated.setenv('COMBINATE_LOG_LEVEL', 'ERROR')

        trace('below.threshold')(1)

        captured = capsys.readouterr()
        assert captured.out == ''
        assert 'below.threshold' not in captured.err

    def test_level_enables_output(self, isolated, capsys) -> None:
        isolated.setenv('COMBINATE_LOG_LEVEL', 'DEBUG')

        trace('above.threshold')(1)

        captured = capsys.readouterr()
        assert captured.out == ''
        assert 'above.threshold' in captured.err

    def test_hooks_receive_events(self, isolated) -> None:
        isolated.setenv('COMBINATE_LOG_LEVEL', 'DEBUG')
        received = capture()

        trace('env.hooked', source='env')(7)

        entries = [e for e in received if e.get('event') == 'env.hooked']
        assert len(entries) == 1
        assert entries[0]['value'] == 7
        assert entries[0]['source'] == 'env'

    def test_environment_is_read_once(self, isolated) -> None:
        isolated.setenv('COMBINATE_LOG_LEVEL', 'DEBUG')
        trace('first')(1)
        config = get_config()

        isolated.setenv('COMBINATE_LOG_LEVEL', 'ERROR')
        trace('second')(2)

        assert get_config() is config
        assert config.log_level == 'DEBUG'

    def test_unknown_trace_level_warns_once(self, isolated, caplog) -> None:
        caplog.set_level(logging.WARNING)
        isolated.setenv('COMBINATE_TRACE_LEVEL', 'verbose')

        for value in range(3):
            trace('quiet')(value)

        warnings = [r for r in caplog.records if 'Unknown trace level' in r.getMessage()]
        assert len(warnings) == 1
