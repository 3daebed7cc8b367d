# =============================================================================
# test_cursor.py - Cursor Unit Tests
# =============================================================================
# Tests for the forward-only byte cursor used by the scanner.
# =============================================================================

import pytest
from loxscan.scanner.cursor import Cursor
from loxscan.errors import CursorError, SourceLocation


class TestCursorMovement:
    """Test end detection, reading and advancing."""

    def test_empty_source_is_at_end(self):
        assert Cursor(b"").is_at_end()

    def test_current_byte(self):
        cursor = Cursor(b"ab")
        assert cursor.current() == ord("a")
        cursor.advance()
        assert cursor.current() == ord("b")

    def test_advance_to_end(self):
        cursor = Cursor(b"ab")
        cursor.advance()
        cursor.advance()
        assert cursor.is_at_end()
        assert cursor.position == 2

    def test_current_at_end_raises(self):
        with pytest.raises(CursorError):
            Cursor(b"").current()

    def test_advance_at_end_raises(self):
        cursor = Cursor(b"x")
        cursor.advance()
        with pytest.raises(CursorError):
            cursor.advance()


class TestCursorLookahead:
    """Test one-byte lookahead."""

    def test_peek_next(self):
        cursor = Cursor(b"!=")
        assert cursor.peek_next() == ord("=")
        assert cursor.position == 0

    def test_peek_next_on_last_byte(self):
        assert Cursor(b"!").peek_next() is None

    def test_peek_next_at_end(self):
        cursor = Cursor(b"!")
        cursor.advance()
        assert cursor.peek_next() is None


class TestCursorSeek:
    """Test seeking to a terminator byte."""

    def test_seek_stops_on_match(self):
        cursor = Cursor(b'abc"def')
        assert cursor.seek(ord('"')) is True
        assert cursor.position == 3
        assert cursor.current() == ord('"')

    def test_seek_already_on_match(self):
        cursor = Cursor(b"\nxyz")
        assert cursor.seek(ord("\n")) is True
        assert cursor.position == 0

    def test_seek_without_match_reaches_end(self):
        cursor = Cursor(b"abc")
        assert cursor.seek(ord('"')) is False
        assert cursor.is_at_end()


class TestCursorPositions:
    """Test line and column tracking."""

    def test_column_advances(self):
        cursor = Cursor(b"ab")
        cursor.advance()
        assert (cursor.line, cursor.column) == (1, 2)

    def test_newline_starts_next_line(self):
        cursor = Cursor(b"a\nb")
        cursor.advance()
        cursor.advance()
        assert (cursor.line, cursor.column) == (2, 1)
        assert cursor.line_start == 2

    def test_seek_tracks_lines(self):
        cursor = Cursor(b"one\ntwo\n!")
        cursor.seek(ord("!"))
        assert cursor.location("f.lox") == SourceLocation("f.lox", 3, 1)

    def test_line_text(self):
        cursor = Cursor(b"first\nsecond line\nthird")
        cursor.seek(ord("l"))
        assert cursor.line_text() == "second line"
        assert cursor.line_text(0) == "first"
