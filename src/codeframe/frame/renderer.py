"""
Frame Renderer

Selects the visible line window around a span, lays out the line-number
gutter and draws caret/underline rows beneath the marked lines.

Example output (plain, no color)::

      1 | fn main() {
    > 2 |   println!("Hello, world!");
        |   ^^^^^^^^ expected expression
      3 | }
"""

import dataclasses
import logging
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from ..shared.errors import InvalidSpanError, OutOfRangeError
from ..shared.source_location import LocationLike, Span, as_span
from ..utils.config import (
    CONTEXT_LINE_INDICATOR,
    DEFAULT_LINES_ABOVE,
    DEFAULT_LINES_BELOW,
    DEFAULT_TAB_WIDTH,
    GUTTER_SEPARATOR,
    MARKED_LINE_INDICATOR,
    MARKER_CHAR,
    MESSAGE_SEPARATOR,
)
from .segments import Frame, FrameLine, LineKind, Role, Segment
from .styling import join_rows, style_frame
from .width import ColumnMap

logger = logging.getLogger("codeframe.frame.renderer")

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True)
class FrameOptions:
    """
    Rendering options.

    Negative counts are treated as 0; they never raise.
    """
    lines_above: int = DEFAULT_LINES_ABOVE
    lines_below: int = DEFAULT_LINES_BELOW
    highlight_code: bool = False
    message: Optional[str] = None
    tab_width: int = DEFAULT_TAB_WIDTH
    markdown: bool = False


# line number -> half-open (start_column, end_column), 1-indexed character columns
LineMarkers = Dict[int, Tuple[int, int]]


@dataclass(frozen=True)
class MarkerLines:
    """Visible window bounds plus the column range marked on each marked line."""
    start: int
    end: int
    markers: LineMarkers = field(default_factory=dict)

    @property
    def first_marked(self) -> int:
        return min(self.markers)

    @property
    def last_marked(self) -> int:
        return max(self.markers)


def split_lines(source: str) -> List[str]:
    """
    Split source text into lines with terminators stripped.

    Only LF, CRLF and CR end a line; form feeds, NEL and U+2028 stay in
    their line, matching how compilers count lines. A trailing terminator
    does not open another line; empty source is a single empty line so
    that 1:1 is always addressable.
    """
    lines = _LINE_BREAK.split(source)
    if len(lines) > 1 and lines[-1] == "":
        lines.pop()
    return lines


def _validate(lines: Sequence[str], span: Span) -> None:
    total = len(lines)
    for loc in (span.start, span.end):
        if loc is None:
            continue
        if loc.line < 1 or loc.line > total:
            raise OutOfRangeError(
                f"line {loc.line} is out of range (source has {total} line{'s' if total != 1 else ''})",
                span,
                line_count=total,
            )
        if loc.column < 1:
            raise OutOfRangeError(f"column {loc.column} is out of range (columns start at 1)", span, line_count=total)
    end = span.end
    if end is None:
        return
    if end.line < span.start.line:
        raise InvalidSpanError(f"span ends on line {end.line} before it starts on line {span.start.line}", span)
    if end.line == span.start.line and end.column < span.start.column:
        raise InvalidSpanError(
            f"span ends at column {end.column} before it starts at column {span.start.column}", span
        )


def marker_lines(
    lines: Sequence[str],
    location: LocationLike,
    lines_above: int = DEFAULT_LINES_ABOVE,
    lines_below: int = DEFAULT_LINES_BELOW,
) -> MarkerLines:
    """
    Compute the visible window and the marked column range of each marked line.

    Raises OutOfRangeError / InvalidSpanError before computing anything.
    """
    lines = list(lines) or [""]
    span = as_span(location)
    _validate(lines, span)

    start, end = span.start, span.end_or_start
    first = max(1, start.line - max(0, lines_above))
    last = min(len(lines), end.line + max(0, lines_below))

    markers: LineMarkers = {}
    if start.line == end.line:
        markers[start.line] = (start.column, end.column)
    else:
        for line_number in range(start.line, end.line + 1):
            eol = len(lines[line_number - 1]) + 1
            if line_number == start.line:
                markers[line_number] = (start.column, eol)
            elif line_number == end.line:
                markers[line_number] = (1, end.column)
            else:
                markers[line_number] = (1, eol)

    return MarkerLines(start=first, end=last, markers=markers)


def _source_row(line_number: int, content: str, width: int, marked: bool, tab_width: int) -> FrameLine:
    number = str(line_number).rjust(width)
    # tabs drawn at the same fixed width the marker row pads them with
    content = content.replace("\t", " " * max(0, tab_width))
    if marked:
        segments = [Segment(MARKED_LINE_INDICATOR, Role.MARKED_INDICATOR)]
    else:
        segments = [Segment(CONTEXT_LINE_INDICATOR, Role.GUTTER)]
    if content:
        segments.append(Segment(f" {number}{GUTTER_SEPARATOR}", Role.GUTTER))
        segments.append(Segment(content, Role.CONTENT))
    else:
        segments.append(Segment(f" {number}{GUTTER_SEPARATOR.rstrip()}", Role.GUTTER))
    return FrameLine(LineKind.SOURCE, line_number, tuple(segments), marked=marked)


def _marker_row(
    line_number: int,
    columns: ColumnMap,
    column_range: Tuple[int, int],
    width: int,
    message: Optional[str],
) -> FrameLine:
    pad, span_width = columns.span(*column_range)
    segments = [Segment(" " * (width + 2) + GUTTER_SEPARATOR, Role.GUTTER)]
    if pad:
        segments.append(Segment(" " * pad, Role.CONTENT))
    segments.append(Segment(MARKER_CHAR * max(1, span_width), Role.MARKER))
    if message:
        segments.append(Segment(MESSAGE_SEPARATOR + message, Role.MESSAGE))
    return FrameLine(LineKind.MARKER, line_number, tuple(segments), marked=True)


def build_frame(
    lines: Sequence[str],
    location: LocationLike,
    options: Optional[FrameOptions] = None,
) -> Frame:
    """Lay out the frame rows for pre-split ``lines`` without styling them."""
    options = options or FrameOptions()
    lines = list(lines) or [""]
    info = marker_lines(lines, location, options.lines_above, options.lines_below)
    gutter_width = len(str(info.end))
    last_marked = info.last_marked
    logger.debug(
        "frame window %d-%d of %d lines, marked %d-%d, gutter width %d",
        info.start, info.end, len(lines), info.first_marked, last_marked, gutter_width,
    )

    rows: List[FrameLine] = []
    for line_number in range(info.start, info.end + 1):
        content = lines[line_number - 1]
        column_range = info.markers.get(line_number)
        rows.append(_source_row(line_number, content, gutter_width, column_range is not None, options.tab_width))
        if column_range is not None:
            message = options.message if line_number == last_marked else None
            columns = ColumnMap(content, options.tab_width)
            rows.append(_marker_row(line_number, columns, column_range, gutter_width, message))

    return Frame(lines=tuple(rows), first_line=info.start, last_line=info.end, gutter_width=gutter_width)


def _resolve_options(options: Optional[FrameOptions], overrides: dict) -> FrameOptions:
    options = options or FrameOptions()
    if overrides:
        options = dataclasses.replace(options, **overrides)
    return options


def render_lines(
    lines: Sequence[str],
    location: LocationLike,
    options: Optional[FrameOptions] = None,
    **overrides,
) -> str:
    """Render a code frame for already split ``lines``."""
    options = _resolve_options(options, overrides)
    frame = build_frame(lines, location, options)
    rows = style_frame(frame, color=options.highlight_code, markdown=options.markdown)
    return join_rows(rows)


def render(
    source: str,
    location: LocationLike,
    options: Optional[FrameOptions] = None,
    **overrides,
) -> str:
    """
    Render a code frame for ``source`` at ``location``.

    ``location`` is a Location (single caret) or a Span. Keyword overrides
    replace fields of ``options``, e.g. ``render(src, loc, lines_above=0)``.
    The result has no trailing newline.

    Raises:
        OutOfRangeError: a line lies outside the source, or a column is < 1
        InvalidSpanError: the span ends before it starts
    """
    return render_lines(split_lines(source), location, options, **overrides)
