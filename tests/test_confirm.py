"""Tests for the yes/no shortcut."""

import readchar

from keychoice import confirm
from tests.helpers.fakes import wire


def test_confirm_yes_and_no():
    reader, display = wire(["y"])
    assert confirm("Delete file?", reader=reader, display=display) is True

    reader, display = wire(["n"])
    assert confirm("Delete file?", reader=reader, display=display) is False


def test_confirm_prompt_text():
    """Without a default only y and n are offered."""
    reader, display = wire(["x", "n"])

    confirm("Delete file?", reader=reader, display=display)

    assert reader.prompts == [
        "Delete file? (y, n, or ? for help) ",
        "Please answer y, n. Delete file? (y, n, or ? for help) ",
    ]


def test_confirm_enter_picks_default():
    """Enter answers with the default when one is given."""
    reader, display = wire([readchar.key.ENTER])

    assert confirm("Delete file?", default=False, reader=reader, display=display) is False
    assert reader.prompts[0] == "Delete file? (y, n, RET, or ? for help) "


def test_confirm_enter_without_default_is_ignored():
    reader, display = wire([readchar.key.ENTER, "y"])

    assert confirm("Delete file?", reader=reader, display=display) is True
    assert len(reader.calls) == 2
