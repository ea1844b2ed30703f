"""
Source Location (Span)

Line/column positions and the spans a code frame marks.
"""

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Location:
    """
    A 1-indexed (line, column) position.

    The column counts characters, not bytes, so positions stay correct for
    non-ASCII source text. Immutable (frozen) for hashability.
    """
    line: int
    column: int

    def __str__(self) -> str:
        """Format as line:column"""
        return f"{self.line}:{self.column}"


@dataclass(frozen=True)
class Span:
    """
    A start location and an optional end location.

    - no end: a single caret at the start column
    - end on the same line: underline from start column up to end column
    - end on a later line: underline from start column to end of line on the
      first line, from column 1 up to end column on the last line
    """
    start: Location
    end: Optional[Location] = None

    @classmethod
    def from_positions(
        cls,
        line: int,
        column: int,
        end_line: Optional[int] = None,
        end_column: Optional[int] = None,
    ) -> "Span":
        """Build a span from raw numbers; an end column alone means the same line."""
        if end_line is None and end_column is None:
            return cls(Location(line, column))
        if end_line is None:
            end_line = line
        if end_column is None:
            end_column = column
        return cls(Location(line, column), Location(end_line, end_column))

    @property
    def end_or_start(self) -> Location:
        return self.end if self.end is not None else self.start

    def __str__(self) -> str:
        if self.end is None:
            return str(self.start)
        if self.end.line == self.start.line:
            return f"{self.start}-{self.end.column}"
        return f"{self.start}-{self.end}"


LocationLike = Union[Location, Span]


def as_span(location: LocationLike) -> Span:
    """Normalize a Location or Span to a Span."""
    if isinstance(location, Span):
        return location
    return Span(location)
