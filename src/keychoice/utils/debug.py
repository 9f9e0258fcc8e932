"""Debug logging utility."""

import sys
import traceback
from datetime import datetime

from keychoice.utils.config import get_settings


def _emit(line: str):
    """Write a log line to stderr."""
    try:
        print(line, file=sys.stderr)
    except BrokenPipeError:
        pass  # Parent process closed stderr, continue silently


def debug(category: str, message: str, **kwargs):
    """Log debug message if debug mode is enabled.

    Args:
        category: Category like 'prompt', 'key', 'display'
        message: Debug message
        **kwargs: Additional key=value pairs to log
    """
    if not get_settings().debug:
        return

    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
    extras = " ".join(f"{k}={v!r}" for k, v in kwargs.items()) if kwargs else ""
    line = f"[keychoice:{category}] {timestamp} {message}"
    if extras:
        line += f" | {extras}"
    _emit(line)


def debug_prompt(message: str, **kwargs):
    """Log prompt-loop debug message."""
    debug("prompt", message, **kwargs)


def debug_key(message: str, **kwargs):
    """Log keystroke debug message."""
    debug("key", message, **kwargs)


def debug_display(message: str, **kwargs):
    """Log display-surface debug message."""
    debug("display", message, **kwargs)


def log_error(category: str, message: str, exc: Exception = None):
    """Log error message ALWAYS (even if debug mode is off).

    Args:
        category: Category like 'prompt', 'display'
        message: Error message
        exc: Optional exception to include traceback
    """
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
    line = f"[keychoice:{category}] {timestamp} ERROR: {message}"

    if exc:
        tb = traceback.format_exception(type(exc), exc, exc.__traceback__)
        line += "\n" + "".join(tb)

    _emit(line)
