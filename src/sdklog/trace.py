"""
Function tracing decorator.

Wraps each call of the decorated function in a logger block, so
everything the function logs is indented under its entry line:

    ... DEBUG|[mymod.build('x', retries=3)] Begin...
    ... DEBUG|  << returned: True
    ... DEBUG|[mymod.build('x', retries=3)] Completed!

Output goes through the module-level Logger singleton unless a logger
is given.
"""

import functools
import inspect
from pathlib import Path

from .levels import Channel


def _short_repr(value) -> str:
    if isinstance(value, Path):
        return f"Path('{value}')"
    if isinstance(value, str) and len(value) > 50:
        return f"'{value[:47]}...'"
    if isinstance(value, (list, tuple)) and len(value) > 3:
        return f"[...{len(value)} items...]"
    return repr(value)


def _format_call(func, args, kwargs) -> str:
    module = inspect.getmodule(func)
    module_name = module.__name__ if module else "unknown"
    args_repr = [_short_repr(arg) for arg in args]
    args_repr.extend(f"{key}={_short_repr(value)}" for key, value in kwargs.items())
    return f"{module_name}.{func.__qualname__}({', '.join(args_repr)})"


def trace_calls(func=None, *, channel=Channel.DEBUG, logger=None):
    """Decorator to log function entry, exit and return value as a block.

    Usable bare (``@trace_calls``) or with options
    (``@trace_calls(channel='trace', logger=log)``). When the channel is
    not enabled the function runs without any logging.
    """
    if func is None:
        return functools.partial(trace_calls, channel=channel, logger=logger)

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        # Lazy import to avoid circular dependency
        from .manager import get_logger

        out = logger if logger is not None else get_logger()
        if not out.is_enabled(channel):
            return func(*args, **kwargs)

        label = _format_call(func, args, kwargs)
        with out.block(label, channel):
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                out.write(f"!! raised: {type(e).__name__}: {e}", channel)
                raise
            if result is not None:
                out.write(f"<< returned: {_short_repr(result)}", channel)
            return result

    return wrapper
