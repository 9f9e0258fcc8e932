"""keychoice - Single-keystroke choice prompts for the terminal."""

from importlib.metadata import version

__version__ = version("keychoice")

from keychoice.core.options import Option
from keychoice.core.prompt import ask, confirm
from keychoice.ui.keys import format_key
from keychoice.utils.config import PromptConfig
from keychoice.utils.exceptions import (
    InvalidSpecificationError,
    KeychoiceError,
    PromptTimeoutError,
)

__all__ = [
    "ask",
    "confirm",
    "format_key",
    "Option",
    "PromptConfig",
    "KeychoiceError",
    "InvalidSpecificationError",
    "PromptTimeoutError",
]
