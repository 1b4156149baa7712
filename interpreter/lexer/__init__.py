"""
Lexer Package

Implements the scanner that turns source text into tokens.

Key Features:
- Maximal-munch scanning of one- and two-character operators
- String and number literals with parsed values
- Reserved keyword recognition
- Line tracking for diagnostics
- Error recovery: every bad character and unterminated string is reported
"""

from .tokens import Token, TokenType, KEYWORDS, format_number
from .lexer import Lexer, ScanResult, scan, tokenize_string
from .errors import Diagnostic, LexerError

__all__ = [
    "Lexer",
    "ScanResult",
    "scan",
    "tokenize_string",
    "Token",
    "TokenType",
    "KEYWORDS",
    "format_number",
    "Diagnostic",
    "LexerError",
]
