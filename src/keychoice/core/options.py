"""Answer options and the effective option set of one prompt."""

from typing import Any, Iterable, NamedTuple

from keychoice.ui.keys import format_key, is_single_key
from keychoice.utils.constants import HELP_DESCRIPTION, HELP_KEY, KEY_LIST_SEPARATOR
from keychoice.utils.exceptions import InvalidSpecificationError


class _Sentinel:
    """Unique marker that never compares equal to a real answer."""

    __slots__ = ("_name",)

    def __init__(self, name: str):
        self._name = name

    def __repr__(self) -> str:
        return f"<{self._name}>"


# No matching key read yet
NOT_FOUND = _Sentinel("NOT_FOUND")

# The implicit help key was pressed
HELP_REQUESTED = _Sentinel("HELP_REQUESTED")


class Option(NamedTuple):
    """One valid answer: the key to press, the value returned, and its help line."""

    key: str
    value: Any
    description: str = ""


def normalize_options(options: Iterable) -> tuple[Option, ...]:
    """Convert options to a tuple of Option and validate it.

    Accepts Option instances or plain (key, value, description) tuples.

    Raises:
        InvalidSpecificationError: empty set, malformed entry, bad or duplicate key
    """
    if options is None:
        raise InvalidSpecificationError("options must not be None")

    normalized = []
    for entry in options:
        if isinstance(entry, Option):
            option = entry
        elif isinstance(entry, (tuple, list)) and len(entry) == 3:
            option = Option(*entry)
        else:
            raise InvalidSpecificationError(
                f"option must be (key, value, description), got {entry!r}"
            )
        if not is_single_key(option.key):
            raise InvalidSpecificationError(
                f"option key must be a single key, got {option.key!r}"
            )
        normalized.append(option)

    if not normalized:
        raise InvalidSpecificationError("at least one option is required")

    seen = set()
    for option in normalized:
        if option.key in seen:
            raise InvalidSpecificationError(
                f"duplicate key {format_key(option.key)!r}"
            )
        seen.add(option.key)

    return tuple(normalized)


def build_effective_options(
    options: tuple[Option, ...], force_help_visible: bool = False
) -> tuple[Option, ...]:
    """Prefix the implicit help option unless help is always shown."""
    if force_help_visible:
        return options
    if any(option.key == HELP_KEY for option in options):
        raise InvalidSpecificationError(
            f"key {HELP_KEY!r} is reserved for help; pass force_help_visible=True to use it"
        )
    return (Option(HELP_KEY, HELP_REQUESTED, HELP_DESCRIPTION),) + options


def lookup(options: tuple[Option, ...], key: str) -> Any:
    """Return the value of the first option bound to key, or NOT_FOUND."""
    for option in options:
        if option.key == key:
            return option.value
    return NOT_FOUND


def format_key_list(options: tuple[Option, ...]) -> str:
    """Join the labels of options, e.g. "y, n"."""
    return KEY_LIST_SEPARATOR.join(format_key(option.key) for option in options)
