"""
Error Reporting

Exceptions raised while validating a location against its source.
"""

from typing import Optional
from .source_location import Span


class CodeFrameError(Exception):
    """Base exception for all codeframe errors"""
    def __init__(self, message: str, location: Optional[Span] = None):
        super().__init__(message)
        self.message = message
        self.location = location

    def __str__(self):
        if self.location:
            return f"{self.message} (at {self.location})"
        return self.message


class OutOfRangeError(CodeFrameError):
    """
    The requested line or column references text that does not exist.

    Raised before any rendering work; the renderer never clamps an
    out-of-range line.
    """
    def __init__(self, message: str, location: Optional[Span] = None, line_count: int = 0):
        super().__init__(message, location)
        self.line_count = line_count


class InvalidSpanError(CodeFrameError):
    """The end location of a span precedes its start location."""


class LocationSyntaxError(CodeFrameError):
    """
    A location string such as ``3:5-7`` could not be parsed.

    Only raised by the location front-end, never by the renderer.
    """
    def __init__(self, message: str, text: str, column: int = 0):
        super().__init__(message)
        self.text = text
        self.column = column

    def __str__(self):
        if self.column:
            return f"{self.message} in {self.text!r} at column {self.column}"
        return f"{self.message} in {self.text!r}"
