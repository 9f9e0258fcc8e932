"""The single-keystroke prompt loop."""

from contextlib import contextmanager
from dataclasses import replace
from typing import Any, Iterable, Optional

import readchar

from keychoice.core.options import (
    HELP_REQUESTED,
    NOT_FOUND,
    Option,
    build_effective_options,
    format_key_list,
    lookup,
    normalize_options,
)
from keychoice.ui.base import Display, KeyReader
from keychoice.ui.help import render_help
from keychoice.ui.keys import ReadcharKeyReader, format_key
from keychoice.ui.panels import RichDisplay
from keychoice.utils.config import PromptConfig
from keychoice.utils.constants import HELP_KEY
from keychoice.utils.debug import debug_prompt, log_error
from keychoice.utils.exceptions import InvalidSpecificationError


class _HelpScope:
    """Tracks the help surface opened during one prompt."""

    def __init__(self, display: Display, surface_name: str):
        self.display = display
        self.surface_name = surface_name
        self.surface = None

    def show(self, help_text: str, options: Iterable[Option]):
        self.surface = render_help(
            help_text, options, self.display, self.surface_name
        )


def _release(scope: _HelpScope, context, body_failed: bool):
    """Close the help surface, then restore context.

    While the block is already raising, cleanup errors are logged so the
    original exception reaches the caller.
    """
    display = scope.display
    try:
        if scope.surface is not None:
            display.close(scope.surface)
    except Exception as e:
        log_error("display", f"failed to close surface {scope.surface_name!r}", e)
        if not body_failed:
            raise
    finally:
        try:
            display.restore_context(context)
        except Exception as e:
            log_error("display", "failed to restore UI context", e)
            if not body_failed:
                raise
        debug_prompt("ui restored", surface=scope.surface_name)


@contextmanager
def ui_scope(display: Display, surface_name: str):
    """Capture the visible UI and restore it however the block exits.

    Yields a scope whose show() renders the help panel; the help surface
    is closed before the captured context is restored.
    """
    context = display.capture_context()
    scope = _HelpScope(display, surface_name)
    try:
        yield scope
    except BaseException:
        _release(scope, context, body_failed=True)
        raise
    _release(scope, context, body_failed=False)


def initial_prompt_text(prompt: str, key_list: str, force_help_visible: bool) -> str:
    """Append the key list (and the help hint) to prompt."""
    help_hint = "" if force_help_visible else f", or {format_key(HELP_KEY)} for help"
    return f"{prompt} ({key_list}{help_hint}) "


def reminder_prompt_text(key_list: str, prompt_text: str) -> str:
    """Prefix the current prompt text with a reminder of the valid keys.

    The reminder is added to whatever is shown now, so repeated mistakes
    stack one reminder per miss.
    """
    # TODO: decide whether to stop stacking reminders once callers no longer
    # depend on the old text.
    return f"Please answer {key_list}. {prompt_text}"


def ask(
    prompt: str,
    options: Iterable,
    config: Optional[PromptConfig] = None,
    *,
    reader: Optional[KeyReader] = None,
    display: Optional[Display] = None,
    **overrides,
) -> Any:
    """Ask prompt and read single keys until one of options is pressed.

    Args:
        prompt: Question to show; the key list is appended to it
        options: Option instances or (key, value, description) tuples
        config: PromptConfig for this call
        reader: KeyReader to read keys with (readchar by default)
        display: Display to draw help on (Rich by default)
        **overrides: PromptConfig fields overriding those in config

    Returns:
        The value of the option whose key was pressed. Falsy values
        (None, False, 0, "") are returned as-is.

    Raises:
        InvalidSpecificationError: Bad prompt, options or config; raised
            before any surface is opened
        PromptTimeoutError: No key pressed within timeout_seconds
        KeyboardInterrupt: The read was interrupted
    """
    if not isinstance(prompt, str) or not prompt.strip():
        raise InvalidSpecificationError("prompt must be a non-empty string")

    try:
        config = replace(config or PromptConfig(), **overrides)
    except TypeError as e:
        raise InvalidSpecificationError(str(e)) from e
    config = config.resolve(prompt)

    user_options = normalize_options(options)
    effective_options = build_effective_options(
        user_options, config.force_help_visible
    )

    reader = reader or ReadcharKeyReader()
    display = display or RichDisplay()

    key_list = format_key_list(user_options)
    prompt_text = initial_prompt_text(prompt, key_list, config.force_help_visible)
    debug_prompt("started", prompt=prompt, keys=key_list)

    current = NOT_FOUND
    with ui_scope(display, config.help_surface_name) as scope:
        while current is NOT_FOUND:
            if config.force_help_visible:
                scope.show(config.help_text, user_options)

            key = reader.read_key(
                prompt_text,
                inherit_input_method=config.inherit_input_method,
                timeout_seconds=config.timeout_seconds,
            )
            current = lookup(effective_options, key)

            if current is HELP_REQUESTED:
                debug_prompt("help requested")
                scope.show(config.help_text, user_options)
                current = NOT_FOUND

            if current is NOT_FOUND:
                debug_prompt("no answer yet", key=key)
                prompt_text = reminder_prompt_text(key_list, prompt_text)

    debug_prompt("answered", value=current)
    return current


def confirm(
    prompt: str,
    default: Optional[bool] = None,
    config: Optional[PromptConfig] = None,
    *,
    reader: Optional[KeyReader] = None,
    display: Optional[Display] = None,
    **overrides,
) -> bool:
    """Ask a yes/no question answered with y or n.

    When default is given, Enter answers with it.
    """
    options = [Option("y", True, "Yes"), Option("n", False, "No")]
    if default is not None:
        label = "yes" if default else "no"
        options.append(Option(readchar.key.ENTER, bool(default), f"Default ({label})"))
    return ask(prompt, options, config, reader=reader, display=display, **overrides)
