"""
Shared components: location types and the error taxonomy.
"""

from .source_location import Location, Span, LocationLike, as_span
from .errors import CodeFrameError, OutOfRangeError, InvalidSpanError, LocationSyntaxError

__all__ = [
    "Location", "Span", "LocationLike", "as_span",
    "CodeFrameError", "OutOfRangeError", "InvalidSpanError", "LocationSyntaxError",
]
