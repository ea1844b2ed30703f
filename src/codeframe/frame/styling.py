"""
Frame styling

Turns role-tagged segments into text: plain, ANSI colored, or fenced
Markdown. The renderer never emits escape codes itself.
"""

from typing import Dict, List, Tuple

from .segments import Frame, FrameLine, Role
from ..utils.config import LINE_JOIN, MARKDOWN_FENCE, MARKDOWN_LANGUAGE


# ---------------------------------------------------------------------------
# ANSI color helpers
# ---------------------------------------------------------------------------

_BOLD   = "\033[1m"
_RED    = "\033[31m"
_BLUE   = "\033[34m"
_RESET  = "\033[0m"

ROLE_STYLES: Dict[Role, Tuple[str, ...]] = {
    Role.GUTTER: (_BOLD, _BLUE),
    Role.MARKED_INDICATOR: (_BOLD, _RED),
    Role.CONTENT: (),
    Role.MARKER: (_BOLD, _RED),
    Role.MESSAGE: (_BOLD, _RED),
}


def _style(text: str, *codes: str, color: bool = True) -> str:
    if not color or not text:
        return text
    prefix = "".join(codes)
    return f"{prefix}{text}{_RESET}" if prefix else text


def style_line(line: FrameLine, color: bool = False) -> str:
    return "".join(
        _style(seg.text, *ROLE_STYLES[seg.role], color=color) for seg in line.segments
    )


def style_frame(frame: Frame, color: bool = False, markdown: bool = False) -> List[str]:
    """
    Render every row of ``frame`` to a string.

    Markdown output is a fenced code block of plain rows; escape codes would
    show up verbatim there, so ``color`` is ignored.
    """
    if markdown:
        rows = [line.plain for line in frame]
        return [MARKDOWN_FENCE + MARKDOWN_LANGUAGE, *rows, MARKDOWN_FENCE]
    return [style_line(line, color=color) for line in frame]


def join_rows(rows: List[str]) -> str:
    return LINE_JOIN.join(rows)
