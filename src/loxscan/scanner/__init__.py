"""
Lox Scanner Package
===================

Lexical analysis for a small, C-like scripting language.

- **tokens**: TokenType, Keyword, ErrorKind, Number and the Token value
- **cursor**: Forward-only byte cursor with one byte of lookahead
- **scanner**: Scanner, ScannerOptions and the scan_tokens() helper

Usage
-----
>>> from loxscan.scanner import scan_tokens, Token, TokenType
>>> scan_tokens("1 + 2") == [Token.integer(1), Token(TokenType.PLUS), Token.integer(2)]
True
"""

from loxscan.scanner.cursor import Cursor
from loxscan.scanner.scanner import (
    Scanner,
    ScannerOptions,
    error_for_token,
    scan_tokens,
)
from loxscan.scanner.tokens import (
    KEYWORDS,
    ErrorKind,
    Keyword,
    Number,
    NumberKind,
    Token,
    TokenType,
)

__all__ = [
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
