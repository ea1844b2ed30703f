"""
Configuration constants to replace magic numbers throughout codeframe
"""

import os

# Context window defaults
DEFAULT_LINES_ABOVE = 2  # Context lines shown before the first marked line
DEFAULT_LINES_BELOW = 3  # Context lines shown after the last marked line

# Column measurement
DEFAULT_TAB_WIDTH = 1  # Visual columns per tab character

# Frame layout constants
MARKER_CHAR = "^"
MARKED_LINE_INDICATOR = ">"
CONTEXT_LINE_INDICATOR = " "
GUTTER_SEPARATOR = " | "
MESSAGE_SEPARATOR = " "
LINE_JOIN = "\n"

# Markdown output
MARKDOWN_FENCE = "```"
MARKDOWN_LANGUAGE = "text"

# File encoding constants
DEFAULT_FILE_ENCODING = "utf-8"

# Color environment variables
NO_COLOR_ENV = "NO_COLOR"
COLOR_ENV = "CODEFRAME_COLOR"
_FALSY = ("0", "false", "no", "never")
_TRUTHY = ("1", "true", "yes", "always")


def use_color(default: bool = True) -> bool:
    """Color preference from the environment (NO_COLOR wins over CODEFRAME_COLOR)."""
    if os.environ.get(NO_COLOR_ENV):
        return False
    explicit = os.environ.get(COLOR_ENV, "").lower()
    if explicit in _FALSY:
        return False
    if explicit in _TRUTHY:
        return True
    return default
