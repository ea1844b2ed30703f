"""
Frame rendering: window selection, gutter layout, marker rows and styling.
"""

from .renderer import (
    FrameOptions, MarkerLines, split_lines, marker_lines, build_frame, render, render_lines,
)
from .segments import Frame, FrameLine, LineKind, Role, Segment
from .styling import style_frame
from .width import ColumnMap, char_width

__all__ = [
    "FrameOptions", "MarkerLines", "split_lines", "marker_lines", "build_frame", "render", "render_lines",
    "Frame", "FrameLine", "LineKind", "Role", "Segment",
    "style_frame", "ColumnMap", "char_width",
]
