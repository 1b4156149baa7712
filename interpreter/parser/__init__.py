"""
Parser Package

Implements a recursive descent parser for expressions and the canonical
printer for the trees it builds.

Key Features:
- Unary operators ('!', '-') over literals and parenthesized groups
- Immutable AST nodes with visitor support
- Fail-fast syntax errors that point at the offending token
"""

from .ast_nodes import (
    ASTNodeType, ASTVisitor, LiteralKind,
    Expression, Literal, Grouping, Unary
)
from .parser import Parser, parse_expression
from .ast_printer import ASTPrinter, print_ast
from .errors import ParseError

__all__ = [
    # Core parser
    "Parser",
    "parse_expression",

    # AST nodes
    "ASTNodeType", "ASTVisitor", "LiteralKind",
    "Expression", "Literal", "Grouping", "Unary",

    # Printing
    "ASTPrinter",
    "print_ast",

    # Error handling
    "ParseError",
]
