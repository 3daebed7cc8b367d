# =============================================================================
# test_tokens.py - Token Data Model Tests
# =============================================================================

from loxscan.scanner.tokens import (
    KEYWORDS,
    INTERNAL_TYPES,
    ErrorKind,
    Keyword,
    Number,
    NumberKind,
    Token,
    TokenType,
)
from loxscan.errors import SourceLocation


class TestTokenEquality:
    """Tokens compare by kind only."""

    def test_equal_ignores_lexeme_and_location(self):
        a = Token(TokenType.PLUS, lexeme="+", location=SourceLocation("a", 1, 1))
        b = Token(TokenType.PLUS, lexeme="+", location=SourceLocation("b", 9, 9))
        assert a == b

    def test_payload_is_compared(self):
        assert Token.identifier("a") != Token.identifier("b")
        assert Token.string("a") != Token.identifier("a")

    def test_integer_and_float_are_distinct(self):
        assert Number.integer(1) != Number.float_(1.0)
        assert Token.integer(1) != Token.float_(1.0)

    def test_number_kind(self):
        assert Number.float_(2.5).is_float
        assert Number.integer(2).kind is NumberKind.INTEGER
        assert not Number.integer(2).is_float

    def test_tokens_are_hashable(self):
        assert len({Token(TokenType.DOT), Token(TokenType.DOT)}) == 1


class TestTokenPredicates:

    def test_is_error(self):
        assert Token.error(ErrorKind.UNTERMINATED_STRING).is_error()
        assert not Token(TokenType.BANG).is_error()

    def test_is_keyword(self):
        token = Token.keyword(Keyword.WHILE)
        assert token.is_keyword()
        assert token.is_keyword(Keyword.WHILE)
        assert not token.is_keyword(Keyword.FOR)
        assert not Token.identifier("while_").is_keyword()

    def test_is_literal(self):
        assert Token.string("x").is_literal()
        assert Token.integer(3).is_literal()
        assert not Token.identifier("x").is_literal()


class TestTokenRepr:

    def test_repr_simple(self):
        assert repr(Token(TokenType.SEMICOLON)) == "Token(SEMICOLON)"

    def test_repr_values(self):
        assert repr(Token.identifier("foo")) == "Token(IDENTIFIER, 'foo')"
        assert repr(Token.keyword(Keyword.NIL)) == "Token(KEYWORD, NIL)"
        assert repr(Token.float_(1.5)) == "Token(NUMBER, FLOAT 1.5)"


class TestTables:

    def test_keyword_table_complete(self):
        assert set(KEYWORDS) == {
            "and", "class", "else", "false", "for", "fun", "if", "nil",
            "or", "print", "return", "super", "this", "true", "var", "while",
        }

    def test_keyword_table_maps_to_tags(self):
        assert KEYWORDS["fun"] is Keyword.FUN

    def test_internal_types(self):
        assert INTERNAL_TYPES == {TokenType.SLASH_SLASH, TokenType.WHITESPACE}
