"""
Token definitions for the interpreter's lexer.

This module defines every token type the scanner can produce:
- Single-character punctuation
- One- or two-character operators (=, ==, !, !=, <, <=, >, >=)
- Literals (strings, numbers) and identifiers
- One token type per reserved keyword
- EOF

It also holds the static lookup tables the scanner uses and the canonical
number formatting shared with the AST printer.
"""

from enum import Enum, auto
from dataclasses import dataclass
from decimal import Decimal
import math
from typing import Dict, Optional, Tuple, Union


class TokenType(Enum):
    """
    Enumeration of all token types.

    The member name is the kind printed by hosts, so keyword members are
    named after the uppercase keyword text.
    """

    # ========================================================================
    # Single-character punctuation
    # ========================================================================
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }
    COMMA = auto()                  # ,
    DOT = auto()                    # .
    MINUS = auto()                  # -
    PLUS = auto()                   # +
    SEMICOLON = auto()              # ;
    STAR = auto()                   # *
    SLASH = auto()                  # /

    # ========================================================================
    # One- or two-character operators
    # ========================================================================
    EQUAL = auto()                  # =
    EQUAL_EQUAL = auto()            # ==
    BANG = auto()                   # !
    BANG_EQUAL = auto()             # !=
    LESS = auto()                   # <
    LESS_EQUAL = auto()             # <=
    GREATER = auto()                # >
    GREATER_EQUAL = auto()          # >=

    # ========================================================================
    # Literals and identifiers
    # ========================================================================
    STRING = auto()                 # "hello"
    NUMBER = auto()                 # 42, 3.14
    IDENTIFIER = auto()             # variable_name

    # ========================================================================
    # Keywords
    # ========================================================================
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FOR = auto()
    FUN = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    # ========================================================================
    # Special
    # ========================================================================
    EOF = auto()


# A token literal is absent, the raw content of a string, or a parsed number.
LiteralValue = Optional[Union[str, float]]


@dataclass(frozen=True)
class Token:
    """
    A lexical token.

    Holds the token type, the exact source text it was scanned from, the
    literal value for STRING and NUMBER tokens, and the 1-based line the
    token starts on.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    literal: LiteralValue           # str for STRING, float for NUMBER, else None
    line: int

    def __str__(self) -> str:
        return f"{self.type.name} {self.lexeme} {self.literal_text()}"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.literal!r}, line={self.line})")

    def literal_text(self) -> str:
        """Render the literal slot the way hosts print it."""
        if self.type == TokenType.NUMBER:
            return format_number(self.literal)
        if self.type == TokenType.STRING:
            return self.literal
        return "null"

    @property
    def is_literal(self) -> bool:
        """Check if this token carries a literal value."""
        return self.type in (TokenType.STRING, TokenType.NUMBER)

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a reserved keyword."""
        return self.type in KEYWORD_TYPES


# Lookup tables for token recognition. Built once at import, never mutated.

SINGLE_CHAR_TOKENS: Dict[str, TokenType] = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# Operators that become a two-character token when followed by '='.
# Maps the first character to (one-char type, two-char type).
ONE_OR_TWO_CHAR_TOKENS: Dict[str, Tuple[TokenType, TokenType]] = {
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
}

KEYWORDS: Dict[str, TokenType] = {
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "fun": TokenType.FUN,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
}

KEYWORD_TYPES = frozenset(KEYWORDS.values())


def format_number(value: float) -> str:
    """
    Render a number in canonical decimal form.

    Integral values always keep one fractional digit ("3.0"); everything
    else uses the shortest digits that round-trip, written positionally
    rather than in exponent notation ("0.0000001", not "1e-07").

    A literal too large for a float scans as infinity, which has no decimal
    form and renders as "Infinity".
    """
    value = float(value)
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer():
        return f"{value:.1f}"
    return format(Decimal(repr(value)), "f")
