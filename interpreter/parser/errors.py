"""
Error handling for the parser.

The parser does not recover: the first grammar violation raises a
ParseError that carries the offending token and a diagnostic.
"""

from typing import Dict, Optional

from ..lexer.tokens import Token, TokenType
from ..lexer.errors import Diagnostic


class ParseError(Exception):
    """
    Exception raised when the parser encounters a syntax error.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        token: Token,
        code: Optional[str] = None,
        help_text: Optional[str] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            line=token.line,
            severity="error",
            code=code,
            help_text=help_text
        )
        self.token = token

    @property
    def line(self) -> int:
        return self.diagnostic.line

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        if self.token.type == TokenType.EOF:
            where = "at end"
        else:
            where = f"at '{self.token.lexeme}'"
        return f"[line {self.diagnostic.line}] Error {where}: {self.diagnostic.message}"


PARSER_ERROR_CODES: Dict[str, str] = {
    "P001": "Expected expression",
    "P002": "Expected token not found",
}


def create_expected_expression_error(found: Token) -> ParseError:
    """Create an error for a token that cannot start an expression."""
    return ParseError(
        message="Expect expression.",
        token=found,
        code="P001",
        help_text=f"{found.type.name} cannot start an expression here."
    )


def create_missing_token_error(expected: TokenType, found: Token, message: str) -> ParseError:
    """Create an error for a missing expected token."""
    return ParseError(
        message=message,
        token=found,
        code="P002",
        help_text=f"The parser expected {expected.name} but found {found.type.name}."
    )
