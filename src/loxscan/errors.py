"""
loxscan Error Hierarchy
=======================

This module defines the exception hierarchy for the scanner package.
All exceptions inherit from LoxScanError, allowing callers to catch all
scanner-related errors with a single except clause if desired.

Exception Hierarchy
-------------------
LoxScanError (base)
├── CursorError - cursor moved or read past the end of the source
└── ScanError - malformed input surfaced as an exception
    ├── UnterminatedStringError - string literal without closing quote
    ├── UnexpectedCharacterError - byte outside the language's alphabet
    ├── InvalidUtf8Error - string contents are not valid UTF-8
    └── IntegerOutOfRangeError - integer literal does not fit in 32 bits

The scanner normally reports malformed input as ERROR tokens and keeps
going. The ScanError classes are raised only in strict mode, or when a
caller converts an error token with error_for_token().

Error messages follow this format:
    filename:line:column: error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class LoxScanError(Exception):
    """
    Base exception for all loxscan errors.

        try:
            tokens = scan_tokens(source, ScannerOptions(strict=True))
        except LoxScanError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    A position in source text.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed, counted in bytes)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Cursor Errors
# =============================================================================

class CursorError(LoxScanError):
    """
    Raised when the cursor is read or advanced past the end of the source.

    This always indicates a bug in the scanner rather than bad input:
    callers are expected to check is_at_end() first.
    """

    def __init__(self, message: str, position: int):
        self.position = position
        super().__init__(f"{message} (position {position})")


# =============================================================================
# Scan Errors
# =============================================================================

class ScanError(LoxScanError):
    """
    Base exception for malformed input.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The source text of the line holding the error (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            main.lox:3:9: error: unterminated string literal
                print "hello;
                      ^
            hint: add a closing '"' to end the string
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class UnterminatedStringError(ScanError):
    """String literal reaches the end of input without a closing quote."""

    def __init__(
        self,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        super().__init__(
            "unterminated string literal",
            location,
            hint="add a closing '\"' to end the string",
            source_line=source_line,
        )


class UnexpectedCharacterError(ScanError):
    """
    A byte that cannot start any token.

    Attributes:
        character: The offending text (a single byte, shown escaped when
            it is not printable ASCII)
    """

    def __init__(
        self,
        character: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.character = character
        super().__init__(
            f"unexpected character {character!r}",
            location,
            source_line=source_line,
        )


class InvalidUtf8Error(ScanError):
    """String literal contents are not valid UTF-8."""

    def __init__(
        self,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        super().__init__(
            "string literal is not valid UTF-8",
            location,
            source_line=source_line,
        )


class IntegerOutOfRangeError(ScanError):
    """
    Integer literal outside the signed 32-bit range.

    Attributes:
        text: The digits of the literal as written
    """

    def __init__(
        self,
        text: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.text = text
        super().__init__(
            f"integer literal {text} does not fit in 32 bits",
            location,
            hint="integers must be between -2147483648 and 2147483647",
            source_line=source_line,
        )
