"""
Token Data Model
================

Token types, keyword table and the Token value produced by the scanner.

A token's identity is its kind: the TokenType together with its payload
(the string of a STRING or IDENTIFIER, the Number of a NUMBER, the
Keyword of a KEYWORD, the ErrorKind of an ERROR). Lexeme text and source
location ride along for diagnostics but never take part in equality, so

    Token(TokenType.PLUS) == scanned_plus_token

holds no matter where the '+' appeared.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Union

from loxscan.errors import SourceLocation


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """Lexical categories recognized by the scanner."""

    # === Single-byte punctuation ===
    LEFT_PAREN = auto()     # (
    RIGHT_PAREN = auto()    # )
    LEFT_BRACE = auto()     # {
    RIGHT_BRACE = auto()    # }
    COMMA = auto()          # ,
    DOT = auto()            # .
    MINUS = auto()          # -
    PLUS = auto()           # +
    SEMICOLON = auto()      # ;
    STAR = auto()           # *

    # === One or two byte operators ===
    BANG = auto()           # !
    BANG_EQUAL = auto()     # !=
    EQUAL = auto()          # =
    EQUAL_EQUAL = auto()    # ==
    GREATER = auto()        # >
    GREATER_EQUAL = auto()  # >=
    LESS = auto()           # <
    LESS_EQUAL = auto()     # <=
    SLASH = auto()          # /

    # === Literals and words ===
    STRING = auto()
    NUMBER = auto()
    KEYWORD = auto()
    IDENTIFIER = auto()

    # === Malformed input ===
    ERROR = auto()

    # === Internal markers (never emitted) ===
    SLASH_SLASH = auto()    # // comment start
    WHITESPACE = auto()


# Markers the driver consumes itself; they never reach the output.
INTERNAL_TYPES = frozenset({TokenType.SLASH_SLASH, TokenType.WHITESPACE})


class Keyword(Enum):
    """Reserved words. The value is the word as written in source."""

    AND = "and"
    CLASS = "class"
    ELSE = "else"
    FALSE = "false"
    FOR = "for"
    FUN = "fun"
    IF = "if"
    NIL = "nil"
    OR = "or"
    PRINT = "print"
    RETURN = "return"
    SUPER = "super"
    THIS = "this"
    TRUE = "true"
    VAR = "var"
    WHILE = "while"


class ErrorKind(Enum):
    """Kinds of malformed input reported as ERROR tokens."""

    UNTERMINATED_STRING = auto()
    UNEXPECTED_CHARACTER = auto()
    INVALID_UTF8 = auto()
    INTEGER_OUT_OF_RANGE = auto()


class NumberKind(Enum):
    INTEGER = auto()
    FLOAT = auto()


@dataclass(frozen=True)
class Number:
    """
    Decoded numeric literal.

    Integer and float literals stay distinct even when numerically equal:
    Number.integer(1) != Number.float_(1.0).
    """
    kind: NumberKind
    value: Union[int, float]

    @classmethod
    def integer(cls, value: int) -> "Number":
        return cls(NumberKind.INTEGER, value)

    @classmethod
    def float_(cls, value: float) -> "Number":
        return cls(NumberKind.FLOAT, value)

    @property
    def is_float(self) -> bool:
        return self.kind is NumberKind.FLOAT

    def __str__(self) -> str:
        return str(self.value)


# =============================================================================
# Lookup Tables
# =============================================================================

# Map reserved words to their keyword tags (case-sensitive)
KEYWORDS: dict[str, Keyword] = {keyword.value: keyword for keyword in Keyword}

# Bytes that always form a complete token on their own
PUNCTUATION: dict[int, TokenType] = {
    ord("("): TokenType.LEFT_PAREN,
    ord(")"): TokenType.RIGHT_PAREN,
    ord("{"): TokenType.LEFT_BRACE,
    ord("}"): TokenType.RIGHT_BRACE,
    ord(","): TokenType.COMMA,
    ord("."): TokenType.DOT,
    ord("-"): TokenType.MINUS,
    ord("+"): TokenType.PLUS,
    ord(";"): TokenType.SEMICOLON,
    ord("*"): TokenType.STAR,
}

# Leading byte -> (expected second byte, two-byte type, one-byte type)
COMPOUND_OPERATORS: dict[int, tuple[int, TokenType, TokenType]] = {
    ord("!"): (ord("="), TokenType.BANG_EQUAL, TokenType.BANG),
    ord("="): (ord("="), TokenType.EQUAL_EQUAL, TokenType.EQUAL),
    ord(">"): (ord("="), TokenType.GREATER_EQUAL, TokenType.GREATER),
    ord("<"): (ord("="), TokenType.LESS_EQUAL, TokenType.LESS),
    ord("/"): (ord("/"), TokenType.SLASH_SLASH, TokenType.SLASH),
}

WHITESPACE_BYTES = frozenset(b" \t\r\n")


# =============================================================================
# Token Data Class
# =============================================================================

TokenValue = Union[str, Number, Keyword, ErrorKind, None]


@dataclass(frozen=True)
class Token:
    """
    A single classified lexeme.

    Attributes:
        type: The TokenType classification
        value: Payload for literals, words and errors; None otherwise
        lexeme: Exact source text of the token (not compared)
        location: Where the token starts (not compared)
    """
    type: TokenType
    value: TokenValue = None
    lexeme: str = field(default="", compare=False)
    location: Optional[SourceLocation] = field(default=None, compare=False)

    def __repr__(self) -> str:
        if self.value is None:
            return f"Token({self.type.name})"
        if isinstance(self.value, Enum):
            return f"Token({self.type.name}, {self.value.name})"
        if isinstance(self.value, Number):
            return f"Token({self.type.name}, {self.value.kind.name} {self.value.value!r})"
        return f"Token({self.type.name}, {self.value!r})"

    # === Convenience constructors ===

    @classmethod
    def string(cls, text: str) -> "Token":
        return cls(TokenType.STRING, text)

    @classmethod
    def integer(cls, value: int) -> "Token":
        return cls(TokenType.NUMBER, Number.integer(value))

    @classmethod
    def float_(cls, value: float) -> "Token":
        return cls(TokenType.NUMBER, Number.float_(value))

    @classmethod
    def keyword(cls, keyword: Keyword) -> "Token":
        return cls(TokenType.KEYWORD, keyword)

    @classmethod
    def identifier(cls, name: str) -> "Token":
        return cls(TokenType.IDENTIFIER, name)

    @classmethod
    def error(cls, kind: ErrorKind) -> "Token":
        return cls(TokenType.ERROR, kind)

    # === Predicates ===

    def is_error(self) -> bool:
        """Return True if this token reports malformed input."""
        return self.type is TokenType.ERROR

    def is_keyword(self, keyword: Optional[Keyword] = None) -> bool:
        """Return True if this is a keyword (optionally a specific one)."""
        if self.type is not TokenType.KEYWORD:
            return False
        return keyword is None or self.value is keyword

    def is_literal(self) -> bool:
        """Return True for string and number literals."""
        return self.type in (TokenType.STRING, TokenType.NUMBER)
