"""
Error handling for the lexer.

Scan errors are recoverable: the lexer records each one as a LexerError and
keeps scanning, so a single pass reports every malformed character and
string in the source.
"""

from typing import Optional, Dict
from dataclasses import dataclass


@dataclass
class Diagnostic:
    """A single error or warning with the line it was reported on."""
    message: str
    line: int
    severity: str = "error"  # "error" or "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None
    filename: Optional[str] = None

    def __str__(self) -> str:
        label = "Error" if self.severity == "error" else "Warning"
        return f"[line {self.line}] {label}: {self.message}"


class LexerError(Exception):
    """
    Raised inside the lexer when a character or string cannot be scanned.

    The lexer catches these and accumulates them; they never escape
    Lexer.tokenize().
    """

    def __init__(
        self,
        message: str,
        line: int,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        filename: Optional[str] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            line=line,
            severity="error",
            code=code,
            help_text=help_text,
            filename=filename
        )

    @property
    def line(self) -> int:
        return self.diagnostic.line

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


class UnexpectedCharacterError(LexerError):
    """A character that cannot start any token."""

    def __init__(self, char: str, line: int, filename: Optional[str] = None):
        if char.isprintable():
            help_text = f"The character '{char}' is not valid in source code."
        else:
            help_text = f"Non-printable character (U+{ord(char):04X}) is not allowed."
        super().__init__(
            f"Unexpected character: {char}",
            line,
            code="L001",
            help_text=help_text,
            filename=filename
        )
        self.char = char


class UnterminatedStringError(LexerError):
    """A string literal with no closing quote before the end of its line."""

    def __init__(self, line: int, partial: str, filename: Optional[str] = None):
        super().__init__(
            "Unterminated string.",
            line,
            code="L002",
            help_text="String literals must be closed with '\"' on the line they start.",
            filename=filename
        )
        # Text scanned after the opening quote, kept for tooling
        self.partial = partial


ERROR_CODES: Dict[str, str] = {
    "L001": "Unexpected character",
    "L002": "Unterminated string literal",
}


def create_unexpected_character_error(char: str, line: int,
                                      filename: Optional[str] = None) -> LexerError:
    """Create an error for a character no token can start with."""
    return UnexpectedCharacterError(char, line, filename)


def create_unterminated_string_error(line: int, partial: str,
                                     filename: Optional[str] = None) -> LexerError:
    """Create an error for a string literal missing its closing quote."""
    return UnterminatedStringError(line, partial, filename)
