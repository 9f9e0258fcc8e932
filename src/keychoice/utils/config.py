"""Configuration management.

Two layers:
- Settings: process-wide defaults, overridable with KEYCHOICE_* env vars
- PromptConfig: the options of a single ask() call
"""

import os
from dataclasses import dataclass, replace
from typing import Optional

from keychoice.utils.constants import DEFAULT_HELP_SURFACE_NAME
from keychoice.utils.exceptions import InvalidSpecificationError

ENV_PREFIX = "KEYCHOICE_"


class Settings:
    """Process-wide defaults."""

    def __init__(self, environ: Optional[dict[str, str]] = None):
        """Load defaults, then apply env overrides."""
        self._load()
        self._apply_env_overrides(os.environ if environ is None else environ)

    def _load(self):
        """Set defaults."""
        self.debug = False
        self.help_surface_name = DEFAULT_HELP_SURFACE_NAME
        # None means wait forever
        self.timeout_seconds: Optional[float] = None

    def _apply_env_overrides(self, environ):
        """Apply KEYCHOICE_* env vars on top of the defaults."""
        for key, value in environ.items():
            if not key.startswith(ENV_PREFIX):
                continue
            attr_name = key[len(ENV_PREFIX) :].lower()
            if attr_name.startswith("_") or not hasattr(self, attr_name):
                continue
            current = getattr(self, attr_name)
            if isinstance(current, bool):
                setattr(self, attr_name, value.lower() in ("true", "1", "yes"))
            elif attr_name == "timeout_seconds":
                try:
                    seconds = float(value)
                except ValueError:
                    continue
                setattr(self, attr_name, seconds if seconds > 0 else None)
            elif value:
                setattr(self, attr_name, value)


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get cached settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings():
    """Drop cached settings (call after changing KEYCHOICE_* env vars)."""
    global _settings
    _settings = None


@dataclass(frozen=True)
class PromptConfig:
    """Options for one ask() call.

    Attributes:
        inherit_input_method: Passed through to the key reader
        timeout_seconds: Give up waiting for a key after this many seconds
        force_help_visible: Show help before every read; no "?" option is added
        help_text: Text shown atop the help panel (defaults to the prompt)
        help_surface_name: Name of the transient help surface
    """

    inherit_input_method: bool = False
    timeout_seconds: Optional[float] = None
    force_help_visible: bool = False
    help_text: Optional[str] = None
    help_surface_name: Optional[str] = None

    def resolve(self, prompt: str, settings: Optional[Settings] = None) -> "PromptConfig":
        """Fill unset fields from settings and the prompt, then validate."""
        settings = settings or get_settings()
        resolved = replace(
            self,
            timeout_seconds=(
                self.timeout_seconds
                if self.timeout_seconds is not None
                else settings.timeout_seconds
            ),
            help_text=self.help_text if self.help_text is not None else prompt.strip(),
            help_surface_name=self.help_surface_name or settings.help_surface_name,
        )
        resolved.validate()
        return resolved

    def validate(self):
        """Raise InvalidSpecificationError for values ask() cannot honour."""
        if self.timeout_seconds is not None:
            if isinstance(self.timeout_seconds, bool) or not isinstance(
                self.timeout_seconds, (int, float)
            ):
                raise InvalidSpecificationError(
                    f"timeout_seconds must be a number, got {self.timeout_seconds!r}"
                )
            if self.timeout_seconds <= 0:
                raise InvalidSpecificationError(
                    f"timeout_seconds must be positive, got {self.timeout_seconds!r}"
                )
        if self.help_surface_name is not None:
            if not isinstance(self.help_surface_name, str):
                raise InvalidSpecificationError(
                    f"help_surface_name must be a string, got {self.help_surface_name!r}"
                )
            if not self.help_surface_name.strip():
                raise InvalidSpecificationError("help_surface_name must not be blank")
        if self.help_text is not None and not isinstance(self.help_text, str):
            raise InvalidSpecificationError(
                f"help_text must be a string, got {self.help_text!r}"
            )
