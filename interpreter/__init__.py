"""
Interpreter Front End Package

Scanner and expression parser for a small C-like scripting language.

Architecture:
    interpreter/
    ├── lexer/           # Tokenization and lexical analysis
    └── parser/          # Expression parsing and AST printing

Pipeline: source -> scan() -> tokens -> parse_expression() -> AST -> print_ast()
"""

__version__ = "0.1.0"
__author__ = "myinterpreter developers"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType, ScanResult, scan, LexerError
from .parser import Parser, parse_expression, print_ast, ParseError

__all__ = [
    # Core classes
    "Lexer",
    "Parser",
    "Token",
    "TokenType",
    "ScanResult",

    # Pipeline functions
    "scan",
    "parse_expression",
    "print_ast",

    # Errors
    "LexerError",
    "ParseError",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
