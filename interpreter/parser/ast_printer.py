"""
Canonical AST printer.

Renders an expression tree as parenthesized prefix text, e.g.
``(group (- 3.0))``. Each node type has exactly one rendering, so equal
trees always print the same string.
"""

from typing import Callable, Dict, List, Optional, Tuple

from ..lexer.tokens import format_number
from .ast_nodes import ASTVisitor, ASTNodeType, Expression, Literal, Grouping, Unary, LiteralKind


# Rendered text for a node, plus the single child it wraps (None for a leaf)
Rendering = Tuple[str, Optional[Expression]]


class ASTPrinter(ASTVisitor):
    """
    Visitor that renders a node and everything beneath it to text.

    Groupings and unary operators each wrap exactly one operand, so a tree is
    a chain ending in a literal. The printer walks that chain with a loop and
    writes all closing parentheses at the end.
    """

    def __init__(self):
        # One handler per node type; a new node type needs an entry here
        self._handlers: Dict[ASTNodeType, Callable[[Expression], Rendering]] = {
            ASTNodeType.LITERAL: self._print_literal,
            ASTNodeType.GROUPING: self._print_grouping,
            ASTNodeType.UNARY: self._print_unary,
        }

    def print(self, expr: Expression) -> str:
        return expr.accept(self)

    def visit(self, node: Expression) -> str:
        parts: List[str] = []
        depth = 0
        current: Optional[Expression] = node
        while current is not None:
            text, child = self._handlers[current.node_type](current)
            parts.append(text)
            if child is not None:
                depth += 1
            current = child
        parts.append(")" * depth)
        return "".join(parts)

    def _print_literal(self, node: Literal) -> Rendering:
        if node.kind == LiteralKind.BOOLEAN:
            return ("true" if node.value else "false"), None
        if node.kind == LiteralKind.NUMBER:
            return format_number(node.value), None
        if node.kind == LiteralKind.STRING:
            return node.value, None
        return "nil", None

    def _print_grouping(self, node: Grouping) -> Rendering:
        return "(group ", node.expression

    def _print_unary(self, node: Unary) -> Rendering:
        return f"({node.operator.lexeme} ", node.operand


def print_ast(expr: Expression) -> str:
    """Render an expression tree in canonical prefix form."""
    return ASTPrinter().print(expr)
