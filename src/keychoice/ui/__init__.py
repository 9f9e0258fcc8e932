"""Terminal collaborators: key reading, key labels and the help panel."""

from keychoice.ui.base import Display, KeyReader
from keychoice.ui.help import format_help, render_help
from keychoice.ui.keys import ReadcharKeyReader, format_key
from keychoice.ui.panels import RichDisplay

__all__ = [
    "Display",
    "KeyReader",
    "ReadcharKeyReader",
    "RichDisplay",
    "format_help",
    "format_key",
    "render_help",
]
