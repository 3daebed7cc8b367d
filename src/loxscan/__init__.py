"""
loxscan - Scanner for a Lox-style Scripting Language
====================================================

This package turns source text into a list of classified tokens for a
downstream parser. It does no parsing or evaluation of its own.

Main Components
---------------
- **scanner**: Scanner, tokens and the byte cursor
- **errors**: Exception hierarchy and SourceLocation
- **cli**: The `loxscan` token dump command

Quick Start
-----------
    >>> from loxscan import scan_tokens
    >>> scan_tokens("print 1;")
    [Token(KEYWORD, PRINT), Token(NUMBER, INTEGER 1), Token(SEMICOLON)]

Or from the command line:
    $ loxscan main.lox --show-locations
"""

__version__ = "0.1.0"

# =============================================================================
# Public API Exports
# =============================================================================

from loxscan.errors import (
    LoxScanError,
    CursorError,
    ScanError,
    UnterminatedStringError,
    UnexpectedCharacterError,
    InvalidUtf8Error,
    IntegerOutOfRangeError,
    SourceLocation,
)
from loxscan.scanner import (
    Cursor,
    Scanner,
    ScannerOptions,
    error_for_token,
    scan_tokens,
    KEYWORDS,
    ErrorKind,
    Keyword,
    Number,
    NumberKind,
    Token,
    TokenType,
)

__all__ = [
    "__version__",
    # Errors
    "LoxScanError",
    "CursorError",
    "ScanError",
    "UnterminatedStringError",
    "UnexpectedCharacterError",
    "InvalidUtf8Error",
    "IntegerOutOfRangeError",
    "SourceLocation",
    # Scanner
    "Cursor",
    "Scanner",
    "ScannerOptions",
    "error_for_token",
    "scan_tokens",
    "KEYWORDS",
    "ErrorKind",
    "Keyword",
    "Number",
    "NumberKind",
    "Token",
    "TokenType",
]
