"""combinate: pipeline-friendly combinators over Option, Result and plain functions.

Flat imports (preferred):
    from combinate import Option, Some, Nothing, Result, Ok, Err
    from combinate import option, result, sequence, predicate
    from combinate import compose, pipe, safe, nullable, trace

Submodule imports (for organization):
    from combinate.option import Some, Nothing, and_then
    from combinate.result import Ok, Err, map_error
    from combinate.compose import curry, flip
    from combinate.decorators import safe

Operations are module-level functions taking the value first, so they read
naturally inside `pipe`:

    from combinate import option, pipe2

    pipe2(option.from_nullable(env.get('PORT')),
          lambda o: option.map(o, int),
          lambda o: option.unwrap_or(o, 8080))
"""

from combinate import option, predicate, result, sequence
from combinate._config import Config, get_config, init
from combinate._logging import (
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_logger,
    remove_log_hook,
    trace,
)
from combinate.compose import (
    apply,
    compose,
    constant,
    curry,
    flip,
    identity,
    pipe,
    pipe2,
    pipe3,
    pipe4,
    tap,
    uncurry,
)
from combinate.decorators import nullable, safe
from combinate.errors import CombinateError, UnwrapError
from combinate.option import Nothing, NothingType, Option, Some
from combinate.result import Err, Ok, Result

__all__ = [
    # Configuration
    'CombinateError',
    'Config',
    # Result types
    'Err',
    # Option types
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'Result',
    'Some',
    'UnwrapError',
    # Logging
    'add_log_hook',
    # Function combinators
    'apply',
    'clear_log_hooks',
    'compose',
    'configure_logging',
    'constant',
    'curry',
    'flip',
    'get_config',
    'get_logger',
    'identity',
    'init',
    # Decorators
    'nullable',
    # Component modules
    'option',
    'pipe',
    'pipe2',
    'pipe3',
    'pipe4',
    'predicate',
    'remove_log_hook',
    'result',
    'safe',
    'sequence',
    'tap',
    'trace',
    'uncurry',
]
