"""
Recursive Descent Parser Implementation

Builds an expression tree from the lexer's tokens. Only the unary level of
the grammar and below is recognised:

    expression -> unary
    unary      -> ( "!" | "-" ) unary | primary
    primary    -> NUMBER | STRING | "true" | "false" | "nil" | "(" expression ")"

The first syntax error aborts the parse.

The grammar below the unary level is a single chain of prefix operators and
opening parentheses around one literal, so the parser reads that chain with
a loop and then closes it from the innermost end. Nesting depth is limited
only by memory.
"""

import logging
from typing import Callable, Dict, List

from ..lexer.tokens import Token, TokenType
from .ast_nodes import Expression, Literal, Grouping, Unary
from .errors import (
    ParseError, create_expected_expression_error, create_missing_token_error
)


UNARY_OPERATORS = (TokenType.BANG, TokenType.MINUS)


class Parser:
    """
    Expression parser.

    Holds a cursor over the token list with one token of lookahead. The
    cursor only moves forward and stops on EOF.
    """

    def __init__(self, tokens: List[Token]):
        """
        Initialize parser with a list of tokens.

        Args:
            tokens: List of tokens from the lexer
        """
        self.tokens = tokens
        self.current = 0

        self._logger = logging.getLogger("Parser")

        # Parsing functions for literal tokens
        self.primary_parsers: Dict[TokenType, Callable[[], Expression]] = {
            TokenType.NUMBER: self._parse_number_literal,
            TokenType.STRING: self._parse_string_literal,
            TokenType.TRUE: self._parse_boolean_literal,
            TokenType.FALSE: self._parse_boolean_literal,
            TokenType.NIL: self._parse_nil_literal,
        }

    def parse_expression(self) -> Expression:
        """
        Parse one expression starting at the cursor.

        Tokens after the expression are left unconsumed.

        Raises:
            ParseError: On the first malformed construct
        """
        try:
            expr = self._parse_expression()
        except ParseError as e:
            self._logger.debug("Parse failed: %s", e)
            raise

        self._logger.debug("Parsed %s, stopped at token %d", expr.node_type.value, self.current)
        return expr

    def _parse_expression(self) -> Expression:
        return self._parse_unary()

    def _parse_unary(self) -> Expression:
        """
        Parse unary operators and parenthesized expressions.

        Prefix operators and '(' tokens are collected until a literal is
        reached. The chain is then closed innermost first: each '(' consumes
        its ')' and wraps a Grouping, each operator wraps a Unary.
        """
        openers: List[Token] = []
        while self._peek().type in UNARY_OPERATORS or self._check(TokenType.LEFT_PAREN):
            openers.append(self._advance())

        expr = self._parse_primary()

        for token in reversed(openers):
            if token.type == TokenType.LEFT_PAREN:
                expr = self._finish_grouping(token, expr)
            else:
                expr = Unary(token, expr, token.line)

        return expr

    def _parse_primary(self) -> Expression:
        """Parse a literal."""
        token = self._peek()
        parse_fn = self.primary_parsers.get(token.type)
        if parse_fn is None:
            raise create_expected_expression_error(token)

        return parse_fn()

    def _parse_number_literal(self) -> Literal:
        token = self._advance()
        return Literal.number(token.literal, token.line)

    def _parse_string_literal(self) -> Literal:
        token = self._advance()
        return Literal.string(token.literal, token.line)

    def _parse_boolean_literal(self) -> Literal:
        token = self._advance()
        return Literal.boolean(token.type == TokenType.TRUE, token.line)

    def _parse_nil_literal(self) -> Literal:
        token = self._advance()
        return Literal.nil(token.line)

    def _finish_grouping(self, start_token: Token, expr: Expression) -> Grouping:
        """Close a parenthesized expression whose '(' was already consumed."""
        self._consume(TokenType.RIGHT_PAREN, "Expect ')' after expression.")

        return Grouping(expr, start_token.line)

    # Utility methods

    def _check(self, token_type: TokenType) -> bool:
        """Check if current token matches type without consuming."""
        if self._is_at_end():
            return False
        return self._peek().type == token_type

    def _advance(self) -> Token:
        """Consume and return current token; a no-op on EOF."""
        token = self._peek()
        if not self._is_at_end():
            self.current += 1
        return token

    def _is_at_end(self) -> bool:
        """Check if we've reached the end of tokens."""
        return self._peek().type == TokenType.EOF

    def _peek(self) -> Token:
        """Return current token without consuming."""
        if self.current < len(self.tokens):
            return self.tokens[self.current]
        # Behave as if an EOF token followed the last one
        line = self.tokens[-1].line if self.tokens else 1
        return Token(TokenType.EOF, "", None, line)

    def _consume(self, token_type: TokenType, message: str) -> Token:
        """Consume token of expected type or raise error."""
        if self._check(token_type):
            return self._advance()

        raise create_missing_token_error(token_type, self._peek(), message)


def parse_expression(tokens: List[Token]) -> Expression:
    """
    Parse a token list into an expression tree.

    Raises:
        ParseError: If the tokens do not form an expression
    """
    return Parser(tokens).parse_expression()
