"""
codeframe utilities package
"""

from .io_utils import read_source_file
from .config import use_color

__all__ = ["read_source_file", "use_color"]
