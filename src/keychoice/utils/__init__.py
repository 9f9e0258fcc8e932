"""Utilities for keychoice."""

from keychoice.utils.config import PromptConfig, get_settings

__all__ = ["PromptConfig", "get_settings"]
