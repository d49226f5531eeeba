"""Legacy format string scanning.

Python 3.13+. Zero external dependencies.
"""

from .cursor import FormatCursor

__all__ = ["FormatCursor"]
