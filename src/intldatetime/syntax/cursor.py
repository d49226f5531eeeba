"""Immutable cursor over a legacy format string.

Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - Single forward pass: there is no way to move backwards
"""

from dataclasses import dataclass

__all__ = ["FormatCursor"]


@dataclass(frozen=True, slots=True)
class FormatCursor:
    """Immutable position in a legacy format string.

    Example:
        >>> cursor = FormatCursor("Y-m", 0)
        >>> cursor.current
        'Y'
        >>> cursor.advance().current
        '-'
        >>> cursor.current  # Original unchanged
        'Y'
        >>> FormatCursor("Y", 1).is_eof
        True
    """

    source: str
    pos: int = 0

    @property
    def is_eof(self) -> bool:
        """True once every character has been consumed."""
        return self.pos >= len(self.source)

    @property
    def is_last(self) -> bool:
        """True when the current character is the final one."""
        return self.pos == len(self.source) - 1

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected end of format string at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def advance(self, count: int = 1) -> "FormatCursor":
        """Return new cursor advanced by count positions.

        The position never moves past the end of the source.

        Example:
            >>> cursor = FormatCursor("ab", 0)
            >>> cursor.advance(5).pos
            2
        """
        new_pos = min(self.pos + count, len(self.source))
        return FormatCursor(self.source, new_pos)
