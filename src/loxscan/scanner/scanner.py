"""
Lox Scanner
===========

Converts source text into a flat list of tokens for a parser.

Token Categories
----------------
- Punctuation: ( ) { } , . - + ; *
- Operators: ! != = == > >= < <= /
- Strings: "double quoted", may span lines, no escape sequences
- Numbers: 123 (32-bit integer), 12.5 and 12. (float)
- Keywords: and class else false for fun if nil or print return super
  this true var while
- Identifiers: a letter or underscore, then letters, digits, underscores

Whitespace and // line comments are skipped. Malformed input never stops
the scan: it becomes an ERROR token and scanning resumes with the next
byte. Pass ScannerOptions(strict=True) to raise a ScanError instead.

Scanning Model
--------------
For every lexeme the driver hands the cursor, positioned on the lexeme's
first byte, to the classifier. The classifier (and any literal
sub-scanner it delegates to) leaves the cursor on the lexeme's LAST byte.
The driver then advances once to reach the next lexeme start.

Example Usage
-------------
>>> from loxscan import scan_tokens
>>> for token in scan_tokens('var answer = 42;'):
...     print(token)
Token(KEYWORD, VAR)
Token(IDENTIFIER, 'answer')
Token(EQUAL)
Token(NUMBER, INTEGER 42)
Token(SEMICOLON)
"""

from dataclasses import dataclass
from typing import Iterator, Optional, Union
import logging
import os

from loxscan.errors import (
    IntegerOutOfRangeError,
    InvalidUtf8Error,
    ScanError,
    SourceLocation,
    UnexpectedCharacterError,
    UnterminatedStringError,
)
from loxscan.scanner.cursor import Cursor, NEWLINE
from loxscan.scanner.tokens import (
    COMPOUND_OPERATORS,
    KEYWORDS,
    PUNCTUATION,
    WHITESPACE_BYTES,
    ErrorKind,
    Number,
    Token,
    TokenType,
    TokenValue,
)


logger = logging.getLogger(__name__)


QUOTE = ord('"')
DOT = ord(".")

DIGITS = frozenset(b"0123456789")
LETTERS = frozenset(b"abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
IDENT_START = LETTERS | {ord("_")}
IDENT_CHARS = IDENT_START | DIGITS

# Integer literals are signed 32-bit; a literal never carries a sign.
INTEGER_MAX = 2**31 - 1

_TRUE_VALUES = ("1", "true", "yes", "on")


# =============================================================================
# Options
# =============================================================================

@dataclass
class ScannerOptions:
    """
    Scanner configuration options.

    Attributes:
        filename: Name reported in token locations and error messages
        strict: Raise a ScanError at the first malformed lexeme instead
                of emitting an ERROR token
    """
    filename: str = "<input>"
    strict: bool = False

    @classmethod
    def from_env(cls) -> "ScannerOptions":
        """
        Create options from environment variables.

        Environment variables:
            LOXSCAN_STRICT: "1", "true", "yes" or "on" enables strict mode
            LOXSCAN_FILENAME: Default filename for locations
        """
        options = cls()

        if strict := os.environ.get("LOXSCAN_STRICT"):
            options.strict = strict.strip().lower() in _TRUE_VALUES

        if filename := os.environ.get("LOXSCAN_FILENAME"):
            options.filename = filename

        return options


# =============================================================================
# Scanner
# =============================================================================

class Scanner:
    """
    Tokenizes Lox source code.

    The source is held as immutable bytes; each call to scan_tokens() or
    iter_tokens() walks it with a fresh Cursor, so repeated scans of the
    same Scanner return identical results.

    Usage:
        scanner = Scanner(source_text, ScannerOptions(filename="main.lox"))
        tokens = scanner.scan_tokens()

    Attributes:
        source: The UTF-8 bytes being scanned
        options: Active ScannerOptions
    """

    def __init__(
        self,
        source: Union[str, bytes],
        options: Optional[ScannerOptions] = None,
    ):
        if isinstance(source, str):
            source = source.encode("utf-8")
        self.source = bytes(source)
        self.options = options or ScannerOptions()

    @property
    def filename(self) -> str:
        return self.options.filename

    def scan_tokens(self) -> list[Token]:
        """
        Scan the whole source.

        Returns:
            Tokens in source order

        Raises:
            ScanError: In strict mode, for the first malformed lexeme
        """
        tokens = list(self.iter_tokens())
        logger.debug(f"Scanned {len(tokens)} tokens from {self.filename}")
        return tokens

    def iter_tokens(self) -> Iterator[Token]:
        """
        Generate tokens one lexeme at a time.

        Yields the same tokens, in the same order, as scan_tokens().
        """
        cursor = Cursor(self.source)

        while not cursor.is_at_end():
            start = cursor.position
            location = cursor.location(self.filename)
            line_start = cursor.line_start

            token_type, value = self._classify(cursor)

            if token_type is TokenType.SLASH_SLASH:
                # Comment runs up to, not including, the newline
                cursor.seek(NEWLINE)
            elif token_type is not TokenType.WHITESPACE:
                end = min(cursor.position + 1, len(self.source))
                lexeme = self.source[start:end].decode("utf-8", errors="replace")
                token = Token(token_type, value, lexeme, location)

                if token.is_error():
                    logger.debug(f"{location}: {value.name.lower()} in {lexeme!r}")
                    if self.options.strict:
                        raise error_for_token(token, cursor.line_text(line_start))

                yield token

            if not cursor.is_at_end():
                cursor.advance()

    # =========================================================================
    # Classifier
    # =========================================================================

    def _classify(self, cursor: Cursor) -> tuple[TokenType, TokenValue]:
        """
        Determine the kind of the lexeme starting at the cursor.

        Leaves the cursor on the last byte of the lexeme. Dispatch order
        matters: whitespace, string, punctuation, compound operators,
        numbers, words, then anything else is an error.
        """
        byte = cursor.current()

        if byte in WHITESPACE_BYTES:
            return TokenType.WHITESPACE, None

        if byte == QUOTE:
            return self._scan_string(cursor)

        if byte in PUNCTUATION:
            return PUNCTUATION[byte], None

        if byte in COMPOUND_OPERATORS:
            second, double, single = COMPOUND_OPERATORS[byte]
            if cursor.peek_next() == second:
                cursor.advance()
                return double, None
            return single, None

        if byte in DIGITS:
            return self._scan_number(cursor)

        if byte in IDENT_START:
            return self._scan_word(cursor)

        return TokenType.ERROR, ErrorKind.UNEXPECTED_CHARACTER

    # =========================================================================
    # Literal Sub-Scanners
    # =========================================================================

    def _scan_string(self, cursor: Cursor) -> tuple[TokenType, TokenValue]:
        """
        Scan a double-quoted string literal.

        The contents are taken verbatim, newlines included. On success the
        cursor sits on the closing quote; if none exists it is left at the
        end of input.
        """
        cursor.advance()  # opening "
        start = cursor.position

        if not cursor.seek(QUOTE):
            return TokenType.ERROR, ErrorKind.UNTERMINATED_STRING

        try:
            text = self.source[start:cursor.position].decode("utf-8")
        except UnicodeDecodeError:
            return TokenType.ERROR, ErrorKind.INVALID_UTF8

        return TokenType.STRING, text

    def _scan_number(self, cursor: Cursor) -> tuple[TokenType, TokenValue]:
        """
        Scan an integer or float literal.

        - Integer: 123
        - Float: 12.5, or 12. (empty fraction)

        No sign and no exponent; a leading '-' is scanned as MINUS.
        """
        start = cursor.position
        self._skip_digits(cursor)

        is_float = False
        if cursor.peek_next() == DOT:
            cursor.advance()
            is_float = True
            self._skip_digits(cursor)

        text = self.source[start:cursor.position + 1].decode("ascii")

        if is_float:
            return TokenType.NUMBER, Number.float_(float(text))

        digits = text.lstrip("0") or "0"
        if len(digits) > len(str(INTEGER_MAX)) or int(digits) > INTEGER_MAX:
            return TokenType.ERROR, ErrorKind.INTEGER_OUT_OF_RANGE
        return TokenType.NUMBER, Number.integer(int(digits))

    @staticmethod
    def _skip_digits(cursor: Cursor) -> None:
        """Move onto the last byte of the digit run that follows."""
        while cursor.peek_next() in DIGITS:
            cursor.advance()

    def _scan_word(self, cursor: Cursor) -> tuple[TokenType, TokenValue]:
        """
        Scan an identifier or keyword.

        Keywords are matched case-sensitively, so 'Print' is an identifier.
        """
        start = cursor.position
        while cursor.peek_next() in IDENT_CHARS:
            cursor.advance()

        word = self.source[start:cursor.position + 1].decode("ascii")

        if word in KEYWORDS:
            return TokenType.KEYWORD, KEYWORDS[word]
        return TokenType.IDENTIFIER, word


# =============================================================================
# Error Conversion
# =============================================================================

def error_for_token(token: Token, source_line: Optional[str] = None) -> ScanError:
    """
    Build the exception matching an ERROR token.

    Args:
        token: A token for which is_error() is True
        source_line: Text of the line holding the token, for context

    Raises:
        ValueError: If token is not an ERROR token
    """
    if not token.is_error():
        raise ValueError(f"not an error token: {token!r}")

    location: Optional[SourceLocation] = token.location

    if token.value is ErrorKind.UNTERMINATED_STRING:
        return UnterminatedStringError(location, source_line)
    if token.value is ErrorKind.INVALID_UTF8:
        return InvalidUtf8Error(location, source_line)
    if token.value is ErrorKind.INTEGER_OUT_OF_RANGE:
        return IntegerOutOfRangeError(token.lexeme, location, source_line)
    return UnexpectedCharacterError(token.lexeme, location, source_line)


def scan_tokens(
    source: Union[str, bytes],
    options: Optional[ScannerOptions] = None,
) -> list[Token]:
    """
    Convenience function to scan source text.

    Args:
        source: Source code as text or UTF-8 bytes
        options: Scanner options (defaults apply when omitted)

    Returns:
        Tokens in source order
    """
    return Scanner(source, options).scan_tokens()
