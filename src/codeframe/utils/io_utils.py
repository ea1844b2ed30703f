"""
Source file reading for the command line.

Columns are counted in characters, so a byte order mark must not reach the
renderer as a character of line 1.
"""

import logging
from pathlib import Path
from typing import Union

from .config import DEFAULT_FILE_ENCODING

logger = logging.getLogger("codeframe.utils.io_utils")

_BOM = "\ufeff"


def read_source_file(path: Union[Path, str]) -> str:
    """Read a source file as text, dropping a leading byte order mark."""
    text = Path(path).read_text(encoding=DEFAULT_FILE_ENCODING)
    if text.startswith(_BOM):
        logger.debug("dropping byte order mark from %s", path)
        text = text[len(_BOM):]
    return text
