"""
Structured frame output.

The renderer emits text tagged with a semantic role; styling adapters decide
how each role looks.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Role(Enum):
    """Semantic role of a piece of frame text"""
    GUTTER = "gutter"
    MARKED_INDICATOR = "marked_indicator"
    CONTENT = "content"
    MARKER = "marker"
    MESSAGE = "message"


class LineKind(Enum):
    SOURCE = "source"
    MARKER = "marker"


@dataclass(frozen=True)
class Segment:
    text: str
    role: Role


@dataclass(frozen=True)
class FrameLine:
    """One display row: a source line or the marker row beneath it."""
    kind: LineKind
    line_number: int
    segments: Tuple[Segment, ...]
    marked: bool = False

    @property
    def plain(self) -> str:
        return "".join(seg.text for seg in self.segments)


@dataclass(frozen=True)
class Frame:
    """
    An ordered sequence of display rows.

    ``first_line``/``last_line`` bound the visible window and
    ``gutter_width`` is shared by every row.
    """
    lines: Tuple[FrameLine, ...]
    first_line: int
    last_line: int
    gutter_width: int

    def __iter__(self):
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    @property
    def source_lines(self) -> Tuple[FrameLine, ...]:
        return tuple(ln for ln in self.lines if ln.kind is LineKind.SOURCE)

    @property
    def marker_rows(self) -> Tuple[FrameLine, ...]:
        return tuple(ln for ln in self.lines if ln.kind is LineKind.MARKER)
