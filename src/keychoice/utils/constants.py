"""Constants used throughout keychoice."""

# Key that asks for the help panel when help is not already visible
HELP_KEY = "?"

# Description of the implicit help option
HELP_DESCRIPTION = "Get help"

# Name of the transient surface the help panel is drawn on
DEFAULT_HELP_SURFACE_NAME = "help"

# Last line of the help panel
HELP_RETURN_HINT = "Press one of the keys above to answer."

# Separator between key labels in the prompt
KEY_LIST_SEPARATOR = ", "

# Poll interval while waiting for a key with a timeout (in seconds)
KEY_POLL_INTERVAL = 0.05
