#!/usr/bin/env python3
"""
Tests for ANSI and Markdown styling of frames.
"""

import re

from codeframe import Location, Span, render
from codeframe.frame.styling import ROLE_STYLES
from codeframe.frame.segments import Role

_ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")


def _strip_ansi(text: str) -> str:
    return _ANSI_ESCAPE.sub("", text)


class TestAnsi:
    def test_plain_by_default(self, hello_source):
        assert "\x1b[" not in render(hello_source, Location(2, 3))

    def test_highlight_adds_escapes(self, hello_source):
        out = render(hello_source, Location(2, 3), highlight_code=True, message="here")
        assert "\x1b[" in out
        assert _strip_ansi(out) == render(hello_source, Location(2, 3), message="here")

    def test_content_left_unstyled(self, hello_source):
        out = render(hello_source, Location(2, 3), highlight_code=True)
        assert '  println!("Hello, world!");' in out
        assert ROLE_STYLES[Role.CONTENT] == ()

    def test_marker_is_red(self):
        out = render("abc", Span(Location(1, 1), Location(1, 3)), highlight_code=True)
        assert "\x1b[1m\x1b[31m^^\x1b[0m" in out


class TestMarkdown:
    def test_fenced(self, hello_source):
        out = render(hello_source, Location(2, 3), markdown=True)
        rows = out.split("\n")
        assert rows[0] == "```text"
        assert rows[-1] == "```"
        assert "\n".join(rows[1:-1]) == render(hello_source, Location(2, 3))

    def test_no_escapes_inside_fence(self, hello_source):
        out = render(hello_source, Location(2, 3), markdown=True, highlight_code=True)
        assert "\x1b[" not in out
