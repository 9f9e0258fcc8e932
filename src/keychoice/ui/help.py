"""Help panel text and rendering."""

from typing import Any, Iterable

from keychoice.ui.base import Display
from keychoice.ui.keys import format_key
from keychoice.utils.constants import HELP_RETURN_HINT
from keychoice.utils.debug import debug_display


def format_help(help_text: str, options: Iterable) -> str:
    """Build the help panel text.

    Layout: help_text, a blank line, one "<key> - <description>" line per
    option, a blank line, then the hint for getting back to the prompt.
    """
    lines = "\n".join(
        f"{format_key(option.key)} - {option.description}" for option in options
    )
    return f"{help_text}\n\n{lines}\n\n{HELP_RETURN_HINT}"


def render_help(
    help_text: str, options: Iterable, display: Display, surface_name: str
) -> Any:
    """Show the help panel on the named surface and return its handle."""
    surface = display.get_or_create_surface(surface_name)
    display.show(surface, format_help(help_text, options))
    debug_display("help rendered", surface=surface_name)
    return surface
