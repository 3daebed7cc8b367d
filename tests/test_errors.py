# =============================================================================
# test_errors.py - Error Hierarchy and Formatting Tests
# =============================================================================

import pytest
from loxscan.errors import (
    CursorError,
    IntegerOutOfRangeError,
    InvalidUtf8Error,
    LoxScanError,
    ScanError,
    SourceLocation,
    UnexpectedCharacterError,
    UnterminatedStringError,
)
from loxscan.scanner import ErrorKind, Token, TokenType, error_for_token, scan_tokens


class TestHierarchy:

    @pytest.mark.parametrize("cls", [
        UnterminatedStringError,
        InvalidUtf8Error,
    ])
    def test_scan_errors(self, cls):
        assert issubclass(cls, ScanError)
        assert issubclass(cls, LoxScanError)

    def test_cursor_error(self):
        assert issubclass(CursorError, LoxScanError)
        assert not issubclass(CursorError, ScanError)


class TestFormatting:

    def test_message_without_location(self):
        assert str(ScanError("bad thing")) == "error: bad thing"

    def test_message_with_location_and_caret(self):
        error = UnexpectedCharacterError(
            "#", SourceLocation("t.lox", 2, 5), source_line="var #;"
        )
        assert str(error).splitlines() == [
            "t.lox:2:5: error: unexpected character '#'",
            "    var #;",
            "        ^",
        ]

    def test_hint(self):
        error = UnterminatedStringError(SourceLocation("t.lox", 1, 1))
        assert str(error).endswith("hint: add a closing '\"' to end the string")

    def test_integer_text_kept(self):
        error = IntegerOutOfRangeError("4294967296")
        assert error.text == "4294967296"
        assert "4294967296" in str(error)


class TestErrorForToken:
    """Convert ERROR tokens into exceptions."""

    def test_unterminated(self):
        token = scan_tokens('  "abc')[0]
        error = error_for_token(token, '  "abc')
        assert isinstance(error, UnterminatedStringError)
        assert error.location.column == 3

    def test_unexpected_character(self):
        token = scan_tokens("~")[0]
        error = error_for_token(token)
        assert isinstance(error, UnexpectedCharacterError)
        assert error.character == "~"

    def test_integer_out_of_range(self):
        token = scan_tokens("3000000000")[0]
        assert isinstance(error_for_token(token), IntegerOutOfRangeError)

    def test_invalid_utf8(self):
        token = Token.error(ErrorKind.INVALID_UTF8)
        assert isinstance(error_for_token(token), InvalidUtf8Error)

    def test_non_error_token(self):
        with pytest.raises(ValueError):
            error_for_token(Token(TokenType.PLUS))
