"""CLI entry point: run `codeframe FILE LOCATION` or `python -m codeframe FILE LOCATION`."""

import logging
import sys
from pathlib import Path
from typing import List, Optional


def main(argv: Optional[List[str]] = None) -> int:
    import argparse
    from .frame.renderer import FrameOptions, render
    from .frontend.location_parser import parse_location
    from .shared.errors import CodeFrameError
    from .utils.config import DEFAULT_LINES_ABOVE, DEFAULT_LINES_BELOW, DEFAULT_TAB_WIDTH, use_color
    from .utils.io_utils import read_source_file

    parser = argparse.ArgumentParser(prog="codeframe", description="Show a location in a source file as a code frame.")
    parser.add_argument("file", type=Path, help="Path to the source file")
    parser.add_argument("location", help="LINE:COL, LINE:COL-COL or LINE:COL-LINE:COL (1-indexed)")
    parser.add_argument("--above", type=int, default=DEFAULT_LINES_ABOVE, help=f"Context lines above (default: {DEFAULT_LINES_ABOVE})")
    parser.add_argument("--below", type=int, default=DEFAULT_LINES_BELOW, help=f"Context lines below (default: {DEFAULT_LINES_BELOW})")
    parser.add_argument("--message", "-m", default=None, help="Text shown after the marker")
    parser.add_argument("--tab-width", type=int, default=DEFAULT_TAB_WIDTH, help=f"Columns per tab (default: {DEFAULT_TAB_WIDTH})")
    parser.add_argument("--color", choices=("auto", "always", "never"), default="auto", help="Colorize output (default: auto)")
    parser.add_argument("--markdown", action="store_true", help="Wrap the frame in a Markdown code block")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    path = args.file.resolve()
    if not path.exists():
        sys.stderr.write(f"codeframe: error: file not found: {path}\n")
        return 1
    if not path.is_file():
        sys.stderr.write(f"codeframe: error: not a file: {path}\n")
        return 1

    try:
        source = read_source_file(path)
    except (OSError, UnicodeDecodeError) as e:
        sys.stderr.write(f"codeframe: error: could not read file: {e}\n")
        return 1

    if args.color == "auto":
        color = use_color()
    else:
        color = args.color == "always"

    options = FrameOptions(
        lines_above=args.above,
        lines_below=args.below,
        highlight_code=color,
        message=args.message,
        tab_width=args.tab_width,
        markdown=args.markdown,
    )

    try:
        span = parse_location(args.location)
        frame = render(source, span, options)
    except CodeFrameError as e:
        sys.stderr.write(f"codeframe: error: {e}\n")
        return 1

    sys.stdout.write(frame + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
