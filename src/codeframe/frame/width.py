"""
Display width measurement.

Everything that turns character columns into terminal columns goes through
char_width(), so caret alignment does not depend on a particular width table.
"""

from typing import Tuple

import numpy as np
from wcwidth import wcwidth

from ..utils.config import DEFAULT_TAB_WIDTH


def char_width(ch: str, tab_width: int = DEFAULT_TAB_WIDTH) -> int:
    """
    Display width of a single character.

    Tabs take ``tab_width`` columns, East Asian wide and fullwidth characters
    take 2, combining marks and other non-printing characters take 0.
    """
    if ch == "\t":
        return max(0, tab_width)
    width = wcwidth(ch)
    return width if width > 0 else 0


class ColumnMap:
    """
    Prefix sums of character widths for one line.

    ``offsets[k]`` is the display width of ``line[:k]``; columns are
    1-indexed as in Location.
    """

    def __init__(self, line: str, tab_width: int = DEFAULT_TAB_WIDTH):
        self.line = line
        widths = np.fromiter(
            (char_width(ch, tab_width) for ch in line),
            dtype=np.int64,
            count=len(line),
        )
        self.offsets = np.concatenate((np.zeros(1, dtype=np.int64), np.cumsum(widths)))

    def __len__(self) -> int:
        return len(self.line)

    @property
    def total_width(self) -> int:
        return int(self.offsets[-1])

    def clamp(self, column: int) -> int:
        """Clamp a column to [1, len(line) + 1]; the latter is end-of-line."""
        return min(max(column, 1), len(self.line) + 1)

    def offset(self, column: int) -> int:
        """Display width of everything before ``column`` (end-of-line when past it)."""
        return int(self.offsets[self.clamp(column) - 1])

    def span(self, start_column: int, end_column: int) -> Tuple[int, int]:
        """
        (padding, width) for the half-open column range [start, end).

        The start is placed at end-of-line when it lies past the line.
        Columns past the end of the line count one display column each.
        """
        length = len(self.line)
        start_idx = self.clamp(start_column) - 1
        pad = int(self.offsets[start_idx])
        end_idx = max(end_column - 1, start_idx)
        if end_idx <= length:
            return pad, int(self.offsets[end_idx] - self.offsets[start_idx])
        inside = int(self.offsets[length] - self.offsets[start_idx])
        virtual = end_idx - max(start_column - 1, length)
        return pad, inside + max(virtual, 0)
