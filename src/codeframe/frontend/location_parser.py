"""
Location Parser

Parses command-line location strings into spans:

    12:5         single caret at line 12, column 5
    12:5-9       underline on line 12, columns 5 up to 9
    12:5-14:2    span from 12:5 to 14:2
"""

from functools import lru_cache
from pathlib import Path
import logging

from lark import Lark, Transformer, v_args
from lark.exceptions import UnexpectedInput

from ..shared.errors import LocationSyntaxError
from ..shared.source_location import Location, Span

logger = logging.getLogger("codeframe.frontend.location_parser")


@v_args(inline=True)
class LocationTransformer(Transformer):
    """Converts the Lark parse tree to a Span"""

    def position(self, line, column) -> Location:
        return Location(int(line), int(column))

    def span(self, start: Location) -> Span:
        return Span(start)

    def full_range(self, start: Location, end: Location) -> Span:
        return Span(start, end)

    def column_range(self, start: Location, end_column) -> Span:
        return Span(start, Location(start.line, int(end_column)))


class LocationParser:
    """
    Location string parser.

    Takes text, returns a Span; shape checks only, range checks belong to
    the renderer, which knows the source.
    """

    def __init__(self):
        grammar_path = Path(__file__).parent / "location.lark"
        self.parser = Lark.open(
            str(grammar_path),
            start="start",
            parser="lalr",
            transformer=LocationTransformer(),
        )

    def parse(self, text: str) -> Span:
        try:
            span = self.parser.parse(text)
        except UnexpectedInput as e:
            raise LocationSyntaxError(
                "invalid location, expected LINE:COL[-[LINE:]COL]",
                text,
                column=max(getattr(e, "column", 0) or 0, 0),
            ) from e
        logger.debug("parsed location %r as %s", text, span)
        return span


@lru_cache(maxsize=1)
def _default_parser() -> LocationParser:
    return LocationParser()


def parse_location(text: str) -> Span:
    """Parse ``LINE:COL``, ``LINE:COL-COL`` or ``LINE:COL-LINE:COL``."""
    return _default_parser().parse(text)
