"""Keystroke reading and key labels.

format_key() turns the strings readchar produces into short labels
("y", "RET", "C-x", "<up>"). ReadcharKeyReader is the default KeyReader.
"""

import sys
import time
from typing import Optional

import readchar
from rich.console import Console

from keychoice.ui.panels import get_console
from keychoice.utils.constants import KEY_POLL_INTERVAL
from keychoice.utils.debug import debug_key
from keychoice.utils.exceptions import PromptTimeoutError

# Labels for single characters that have a conventional name
_CHAR_NAMES = {
    " ": "SPC",
    "\r": "RET",
    "\n": "RET",
    "\t": "TAB",
    "\x1b": "ESC",
    "\x7f": "DEL",
}


def _special_key_names() -> dict[str, str]:
    """Map multi-character readchar sequences to <name> labels.

    Aliases (e.g. DELETE/SUPR) resolve to the alphabetically first name.
    """
    names: dict[str, str] = {}
    for attr in sorted(dir(readchar.key)):
        value = getattr(readchar.key, attr)
        if not attr.isupper() or not isinstance(value, str) or len(value) < 2:
            continue
        names.setdefault(value, "<" + attr.lower().replace("_", "-") + ">")
    return names


SPECIAL_KEY_NAMES = _special_key_names()


def format_key(key: str) -> str:
    """Return the human-readable label for a single key."""
    if key in _CHAR_NAMES:
        return _CHAR_NAMES[key]
    if len(key) == 1:
        code = ord(key)
        if 0 < code < 27:
            return "C-" + chr(code + 96)
        if 27 < code < 32:
            # C-\ C-] C-^ C-_
            return "C-" + chr(code + 64)
        if key.isprintable():
            return key
    if key in SPECIAL_KEY_NAMES:
        return SPECIAL_KEY_NAMES[key]
    return "<" + repr(key)[1:-1] + ">"


def is_single_key(key) -> bool:
    """Check if key is one input symbol (a character or a special key sequence)."""
    if not isinstance(key, str) or not key:
        return False
    if len(key) == 1:
        return True
    if key in SPECIAL_KEY_NAMES or key[0] == "\x1b":
        return True
    # Scan-code pairs on Windows
    return sys.platform == "win32" and len(key) == 2 and key[0] in ("\x00", "\xe0")


def _wait_for_key(timeout_seconds: float) -> bool:
    """Wait until a key is available on stdin. Returns False on timeout."""
    if sys.platform == "win32":
        import msvcrt

        deadline = time.monotonic() + timeout_seconds
        while not msvcrt.kbhit():
            if time.monotonic() >= deadline:
                return False
            time.sleep(KEY_POLL_INTERVAL)
        return True

    import select
    import termios
    import tty

    if not sys.stdin.isatty():
        ready, _, _ = select.select([sys.stdin], [], [], timeout_seconds)
        return bool(ready)

    # Canonical mode only reports a line at a time, so select in cbreak mode
    fd = sys.stdin.fileno()
    old_attr = termios.tcgetattr(fd)
    try:
        tty.setcbreak(fd)
        ready, _, _ = select.select([fd], [], [], timeout_seconds)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old_attr)
    return bool(ready)


class ReadcharKeyReader:
    """Reads keys with readchar, printing the prompt on a Rich console."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or get_console()

    def read_key(
        self,
        prompt_text: str,
        inherit_input_method: bool = False,
        timeout_seconds: Optional[float] = None,
    ) -> str:
        """Show prompt_text and block until one key arrives.

        inherit_input_method is accepted for interface compatibility;
        readchar has no notion of input methods.
        """
        self.console.print(prompt_text, end="", markup=False, highlight=False)

        if timeout_seconds is not None and not _wait_for_key(timeout_seconds):
            self.console.print()
            debug_key("timed out", timeout_seconds=timeout_seconds)
            raise PromptTimeoutError(
                f"No key pressed within {timeout_seconds} seconds",
                timeout_seconds=timeout_seconds,
            )

        try:
            key = readchar.readkey()
        except BaseException:
            self.console.print()
            raise

        self.console.print(format_key(key), markup=False, highlight=False)
        debug_key("read", key=key)
        return key
