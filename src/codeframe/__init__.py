"""
codeframe: render annotated source snippets for diagnostics.

    >>> from codeframe import render, Span
    >>> print(render("let x = ;", Span.from_positions(1, 9), message="expected expression"))
    > 1 | let x = ;
        |         ^ expected expression
"""

from .shared import Location, Span, CodeFrameError, OutOfRangeError, InvalidSpanError, LocationSyntaxError
from .frame import (
    FrameOptions, MarkerLines, Frame, FrameLine, Role, Segment,
    split_lines, marker_lines, build_frame, render, render_lines, char_width,
)
from .frontend import parse_location

__version__ = "0.1.0"

__all__ = [
    "Location", "Span", "FrameOptions", "MarkerLines", "Frame", "FrameLine", "Role", "Segment",
    "split_lines", "marker_lines", "build_frame", "render", "render_lines", "char_width",
    "parse_location",
    "CodeFrameError", "OutOfRangeError", "InvalidSpanError", "LocationSyntaxError",
]
