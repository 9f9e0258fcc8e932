"""Core prompt logic."""

from keychoice.core.options import Option
from keychoice.core.prompt import ask, confirm

__all__ = ["Option", "ask", "confirm"]
