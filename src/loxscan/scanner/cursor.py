"""
Source Cursor
=============

A forward-only read position over an immutable byte buffer.

The cursor never backtracks. The only lookahead it offers is a single
byte past the current one (peek_next), which is all the scanner needs to
resolve two-byte operators.

Line and column are tracked as the cursor moves so tokens can carry a
SourceLocation. Columns count bytes, not characters.
"""

from typing import Optional

from loxscan.errors import CursorError, SourceLocation


NEWLINE = ord("\n")


class Cursor:
    """
    Read position into a source buffer.

    Attributes:
        source: The bytes being scanned (never modified)
        position: Offset of the current byte
        line: Line of the current byte (1-indexed)
        column: Column of the current byte (1-indexed)
    """

    def __init__(self, source: bytes):
        self.source = source
        self.position = 0
        self.line = 1
        self.column = 1
        self._line_start = 0

    def is_at_end(self) -> bool:
        """True once the position has reached or passed the end of source."""
        return self.position >= len(self.source)

    def current(self) -> int:
        """
        Return the byte under the cursor.

        Raises:
            CursorError: If the cursor is at end of input
        """
        if self.is_at_end():
            raise CursorError("read past end of source", self.position)
        return self.source[self.position]

    def peek_next(self) -> Optional[int]:
        """Return the byte after the current one, or None if there is none."""
        pos = self.position + 1
        if pos >= len(self.source):
            return None
        return self.source[pos]

    def advance(self) -> None:
        """
        Move forward one byte.

        Raises:
            CursorError: If the cursor is already at end of input
        """
        if self.is_at_end():
            raise CursorError("advanced past end of source", self.position)

        if self.source[self.position] == NEWLINE:
            self.line += 1
            self.column = 1
            self._line_start = self.position + 1
        else:
            self.column += 1
        self.position += 1

    def seek(self, target: int) -> bool:
        """
        Advance until the current byte equals target or input runs out.

        The cursor is left on the matching byte, never past it.

        Returns:
            True if target was found, False if the end was reached
        """
        while not self.is_at_end():
            if self.source[self.position] == target:
                return True
            self.advance()
        return False

    # =========================================================================
    # Diagnostics
    # =========================================================================

    def location(self, filename: str) -> SourceLocation:
        """Return the location of the current byte."""
        return SourceLocation(filename, self.line, self.column)

    def line_text(self, line_start: Optional[int] = None) -> str:
        """
        Return the text of a source line without its newline.

        Args:
            line_start: Offset where the line begins; defaults to the
                line the cursor is on
        """
        start = self._line_start if line_start is None else line_start
        end = self.source.find(b"\n", start)
        if end == -1:
            end = len(self.source)
        return self.source[start:end].decode("utf-8", errors="replace")

    @property
    def line_start(self) -> int:
        """Offset of the first byte of the current line."""
        return self._line_start
