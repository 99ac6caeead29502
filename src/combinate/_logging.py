"""Structured logging for combinate.

structlog events and stdlib records are rendered by one ProcessorFormatter on a
single stderr handler. Nothing is configured on import; `combinate.init()`, or
the first log-emitting call with COMBINATE_LOG_LEVEL set, calls
`configure_logging()`.

`trace` is the bridge to the tap family: it builds a one-argument function
that logs what flows through a pipeline and hands the value back.
"""

from __future__ import annotations

import contextlib
import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from collections.abc import Callable

type LogHook = Callable[[dict[str, Any]], None]

__all__ = [
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'remove_log_hook',
    'trace',
]

_log_hooks: list[LogHook] = []


def _run_log_hooks(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Processor handing a copy of every entry to the registered hooks."""
    for hook in tuple(_log_hooks):
        with contextlib.suppress(Exception):
            hook(dict(event_dict))
    return event_dict


def _pre_chain() -> list[Any]:
    """Processors applied to structlog events and foreign stdlib records alike."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.stdlib.ExtraAdder(),
        _run_log_hooks,
    ]


def configure_logging(level: str = 'INFO', *, json_output: bool = True) -> None:
    """Route structlog through stdlib logging with a shared renderer.

    Replaces any handlers on the root logger, so calling it again switches
    level or output format.

    Args:
        level: Logging level name ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: Emit JSON lines if True, colored console lines otherwise.
    """
    structlog.configure(
        processors=[
            *_pre_chain(),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_pre_chain(),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.getLevelNamesMapping().get(level.upper(), logging.INFO))


def get_logger(name: str | None = None) -> Any:
    """Return a structlog logger bound to `name`."""
    return structlog.get_logger(name)


def _emit(logger: Any, level: str | None, event: str, **fields: Any) -> None:
    """Log `event` unless combinate is silent; a None level means the trace level."""
    from combinate._config import get_config

    config = get_config()
    if config.log_level is None:
        return
    getattr(logger, level or config.trace_level)(event, **fields)


def trace[T](event: str, **fields: Any) -> Callable[[T], T]:
    """Build a pass-through function that logs each value it sees.

    Intended as the side effect of a tap:

        result.tap_ok(load(path), trace('config.loaded', path=path))
        compose.tap(rows, trace('rows.fetched'))

    The event is logged at the configured trace level with the value under
    the `value` key. Output is emitted only once a log level has been set via
    `combinate.init(log_level=...)` or `COMBINATE_LOG_LEVEL`.

    Args:
        event: Event name for the log entry.
        **fields: Extra fields bound to every entry.

    Returns:
        A function returning its argument unchanged.
    """

    def log_value(value: T) -> T:
        _emit(get_logger('combinate.trace'), None, event, value=value, **fields)
        return value

    return log_value


def add_log_hook(hook: LogHook) -> None:
    """Register a hook called with a copy of each log entry.

    Hooks that raise are ignored, so they cannot break logging.
    """
    _log_hooks.append(hook)


def remove_log_hook(hook: LogHook) -> None:
    """Unregister a hook; unknown hooks are ignored."""
    with contextlib.suppress(ValueError):
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    _log_hooks.clear()
