"""
Abstract Syntax Tree node definitions.

The expression tree is a closed set of node types: Literal, Grouping and
Unary. Nodes are immutable and compare structurally, and every node supports
the visitor pattern through accept().
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, List, Union

from ..lexer.tokens import Token


class ASTNodeType(Enum):
    """Enumeration of all AST node types."""
    LITERAL = "Literal"
    GROUPING = "Grouping"
    UNARY = "Unary"


class LiteralKind(Enum):
    """The kinds of value a Literal node can hold."""
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    NIL = "nil"


class ASTVisitor(ABC):
    """Abstract visitor interface for traversing AST nodes."""

    @abstractmethod
    def visit(self, node: 'Expression') -> Any:
        """Visit an expression node."""
        pass


class Expression(ABC):
    """Base class for expressions."""
    node_type: ClassVar[ASTNodeType]

    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        return visitor.visit(self)

    @abstractmethod
    def children(self) -> List['Expression']:
        """Get all child nodes."""
        pass


@dataclass(frozen=True)
class Literal(Expression):
    """Literal value expression: true, false, nil, a number or a string."""
    value: Union[bool, float, str, None]
    kind: LiteralKind
    line: int = field(default=0, compare=False)

    node_type: ClassVar[ASTNodeType] = ASTNodeType.LITERAL

    @classmethod
    def boolean(cls, value: bool, line: int = 0) -> 'Literal':
        return cls(value, LiteralKind.BOOLEAN, line)

    @classmethod
    def number(cls, value: float, line: int = 0) -> 'Literal':
        return cls(float(value), LiteralKind.NUMBER, line)

    @classmethod
    def string(cls, value: str, line: int = 0) -> 'Literal':
        return cls(value, LiteralKind.STRING, line)

    @classmethod
    def nil(cls, line: int = 0) -> 'Literal':
        return cls(None, LiteralKind.NIL, line)

    def children(self) -> List[Expression]:
        return []


@dataclass(frozen=True)
class Grouping(Expression):
    """Parenthesized expression."""
    expression: Expression
    line: int = field(default=0, compare=False)

    node_type: ClassVar[ASTNodeType] = ASTNodeType.GROUPING

    def children(self) -> List[Expression]:
        return [self.expression]


@dataclass(frozen=True)
class Unary(Expression):
    """Unary operation expression: '!' or '-' applied to one operand."""
    operator: Token
    operand: Expression
    line: int = field(default=0, compare=False)

    node_type: ClassVar[ASTNodeType] = ASTNodeType.UNARY

    def children(self) -> List[Expression]:
        return [self.operand]
