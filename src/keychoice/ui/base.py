"""Protocols for the collaborators the prompt loop talks to.

Allows swapping keystroke and display backends (and fakes in tests).
"""

from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class KeyReader(Protocol):
    """Reads a single keystroke."""

    def read_key(
        self,
        prompt_text: str,
        inherit_input_method: bool = False,
        timeout_seconds: Optional[float] = None,
    ) -> str:
        """Show prompt_text and block until one key arrives.

        Raises:
            PromptTimeoutError: timeout_seconds elapsed with no key
            KeyboardInterrupt: the user interrupted the read
        """
        ...


@runtime_checkable
class Display(Protocol):
    """Named transient surfaces plus save/restore of the visible UI."""

    def get_or_create_surface(self, name: str) -> Any:
        """Return the open surface called name, opening it if needed."""
        ...

    def show(self, surface: Any, text: str) -> None:
        """Replace the contents of surface with text."""
        ...

    def close(self, surface: Any) -> None:
        """Close surface. Closing an already closed surface is a no-op."""
        ...

    def capture_context(self) -> Any:
        """Snapshot whatever is visible now."""
        ...

    def restore_context(self, context: Any) -> None:
        """Bring back the snapshot taken by capture_context."""
        ...
