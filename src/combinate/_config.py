"""Library configuration: Config, init() and get_config().

combinate is silent by default. `init(log_level=...)` (or the
COMBINATE_LOG_LEVEL environment variable) turns on logging for `trace` taps
and the `safe` decorator.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from combinate._logging import configure_logging

__all__ = [
    'Config',
    'get_config',
    'init',
]

_TRACE_LEVELS = ('debug', 'info', 'warning', 'error', 'critical')
_TRUTHY = ('1', 'true', 'yes', 'on')


@dataclass(frozen=True)
class Config:
    """Configuration for combinate.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_output: Render logs as JSON (True) or as colored console lines.
        trace_level: Level name used by `trace` taps.
    """

    log_level: str | None = None
    json_output: bool = True
    trace_level: str = 'debug'


# Global configuration (set by init())
_config: Config | None = None


def _resolve_trace_level(value: str | None) -> str:
    """Normalize a trace level name, defaulting to debug for unknown names."""
    if not value:
        return 'debug'
    level = value.lower()
    if level not in _TRACE_LEVELS:
        logging.warning("Unknown trace level '%s', defaulting to debug", value)
        return 'debug'
    return level


def _config_from_env() -> Config:
    """Build a Config from COMBINATE_* environment variables."""
    json_env = os.environ.get('COMBINATE_LOG_JSON')
    return Config(
        log_level=os.environ.get('COMBINATE_LOG_LEVEL') or None,
        json_output=json_env.lower() in _TRUTHY if json_env else True,
        trace_level=_resolve_trace_level(os.environ.get('COMBINATE_TRACE_LEVEL')),
    )


def _apply(config: Config) -> Config:
    """Store `config` and configure logging when it names a level."""
    global _config  # noqa: PLW0603

    _config = config
    if config.log_level is not None:
        configure_logging(config.log_level, json_output=config.json_output)
    return config


def init(
    log_level: str | None = None,
    *,
    json_output: bool | None = None,
    trace_level: str | None = None,
) -> Config:
    """Initialize combinate with the given configuration.

    Arguments left as None are taken from the environment
    (COMBINATE_LOG_LEVEL, COMBINATE_LOG_JSON, COMBINATE_TRACE_LEVEL).

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.
        json_output: Emit JSON logs instead of console output.
        trace_level: Level name used by `trace` taps.

    Returns:
        The Config that was set.

    Example:
        ```python
        import combinate

        combinate.init(log_level='DEBUG', json_output=False)
        ```
    """
    env = _config_from_env()
    return _apply(
        Config(
            log_level=log_level if log_level is not None else env.log_level,
            json_output=json_output if json_output is not None else env.json_output,
            trace_level=_resolve_trace_level(trace_level) if trace_level is not None else env.trace_level,
        )
    )


def get_config() -> Config:
    """Get the current configuration.

    If init() has not been called, the environment is read once and the
    result is applied as if passed to init(), so COMBINATE_LOG_LEVEL alone
    turns logging on.

    Returns:
        The active Config.
    """
    if _config is None:
        return _apply(_config_from_env())
    return _config


def reset() -> None:
    """Forget the stored configuration (mainly for tests)."""
    global _config  # noqa: PLW0603
    _config = None
