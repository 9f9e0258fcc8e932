"""Custom exceptions for keychoice.

This module defines a hierarchy of exceptions for different error types:
- KeychoiceError: Base exception for all keychoice errors
- InvalidSpecificationError: Bad options or config, raised before prompting
- PromptTimeoutError: No keystroke arrived within the configured timeout

Invalid keystrokes and help requests are not errors: the prompt loop
handles them by asking again.
"""

from typing import Optional


class KeychoiceError(Exception):
    """Base exception for all keychoice errors.

    All keychoice-specific exceptions inherit from this class, allowing
    callers to catch all keychoice errors with a single except clause.
    """

    pass


class InvalidSpecificationError(KeychoiceError, ValueError):
    """The prompt cannot be asked as specified.

    Raised before any UI surface is touched, such as:
    - Empty option list
    - Duplicate keys (including a clash with the help key)
    - Keys that are not a single input symbol
    - Empty prompt text or invalid config values
    """

    pass


class PromptTimeoutError(KeychoiceError, TimeoutError):
    """No keystroke arrived before the timeout elapsed.

    Attributes:
        timeout_seconds: The timeout that elapsed
    """

    def __init__(self, message: str, timeout_seconds: Optional[float] = None):
        super().__init__(message)
        self.timeout_seconds = timeout_seconds
