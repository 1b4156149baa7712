"""
Lexer - turns source text into a flat list of tokens.

Scans one character at a time with up to two characters of lookahead. Bad
characters and unterminated strings are recorded as errors and skipped, so
a single pass reports every problem while still producing the tokens that
did scan cleanly.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Union

from .tokens import (
    Token, TokenType, KEYWORDS, SINGLE_CHAR_TOKENS, ONE_OR_TWO_CHAR_TOKENS
)
from .errors import (
    LexerError, create_unexpected_character_error,
    create_unterminated_string_error
)


WHITESPACE = " \t\r\n"


@dataclass
class ScanResult:
    """
    Tokens from a full scan plus every error met along the way.

    Unpacks as ``tokens, had_error``.
    """
    tokens: List[Token]
    errors: List[LexerError] = field(default_factory=list)

    @property
    def had_error(self) -> bool:
        return len(self.errors) > 0

    def __iter__(self) -> Iterator:
        yield self.tokens
        yield self.had_error


class Lexer:
    """
    Lexical analyzer.

    Converts source code into tokens, tracking the line each token starts
    on and recovering from malformed input.
    """

    def __init__(self, source: Union[str, bytes], filename: str = "<stdin>"):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code, as text or as UTF-8 encoded bytes
            filename: Name of source file for error reporting
        """
        if isinstance(source, (bytes, bytearray)):
            source = bytes(source).decode("utf-8", errors="replace")

        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.tokens: List[Token] = []
        self.errors: List[LexerError] = []

        self._logger = logging.getLogger("Lexer")

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source code.

        Returns:
            List of tokens ending with exactly one EOF token
        """
        self.pos = 0
        self.line = 1
        self.tokens = []
        self.errors = []

        while self.pos < len(self.source):
            try:
                self._skip_whitespace_and_comments()

                if self.pos >= len(self.source):
                    break

                token = self._next_token()
                self.tokens.append(token)

            except LexerError as e:
                # The failing rule has already moved past the bad input
                self._logger.debug("%s: %s", self.filename, e)
                self.errors.append(e)

        self.tokens.append(Token(TokenType.EOF, "", None, self.line))

        self._logger.debug(
            "Scanned %s: %d tokens, %d errors",
            self.filename, len(self.tokens), len(self.errors)
        )
        return self.tokens

    def _next_token(self) -> Token:
        """Scan the token starting at the current position."""
        start_pos = self.pos
        start_line = self.line

        current_char = self.source[self.pos]

        if current_char in SINGLE_CHAR_TOKENS:
            self._advance()
            return Token(SINGLE_CHAR_TOKENS[current_char], current_char, None, start_line)

        # '//' comments were skipped already, so this is division
        if current_char == '/':
            self._advance()
            return Token(TokenType.SLASH, current_char, None, start_line)

        if current_char in ONE_OR_TWO_CHAR_TOKENS:
            one_char_type, two_char_type = ONE_OR_TWO_CHAR_TOKENS[current_char]
            self._advance()
            if self._current() == '=':
                self._advance()
                return Token(two_char_type, self.source[start_pos:self.pos], None, start_line)
            return Token(one_char_type, current_char, None, start_line)

        if current_char == '"':
            return self._tokenize_string(start_line)

        if _is_digit(current_char):
            return self._tokenize_number(start_line)

        if _is_identifier_start(current_char):
            return self._tokenize_identifier_or_keyword(start_line)

        self._advance()
        raise create_unexpected_character_error(current_char, start_line, self.filename)

    def _tokenize_string(self, line: int) -> Token:
        """Tokenize a string literal; strings may not span lines."""
        start_pos = self.pos
        self._advance()  # Skip opening quote

        while self.pos < len(self.source) and self.source[self.pos] not in '"\n':
            self._advance()

        if self.pos >= len(self.source) or self.source[self.pos] != '"':
            # Resume at the newline (or end of input) that cut the string off
            raise create_unterminated_string_error(
                line, self.source[start_pos + 1:self.pos], self.filename
            )

        self._advance()  # Skip closing quote

        lexeme = self.source[start_pos:self.pos]
        return Token(TokenType.STRING, lexeme, lexeme[1:-1], line)

    def _tokenize_number(self, line: int) -> Token:
        """Tokenize a number literal: digits with an optional fraction."""
        start_pos = self.pos

        while _is_digit(self._current()):
            self._advance()

        # A '.' is only part of the number when a digit follows it
        if self._current() == '.' and _is_digit(self._peek()):
            self._advance()
            while _is_digit(self._current()):
                self._advance()

        lexeme = self.source[start_pos:self.pos]
        return Token(TokenType.NUMBER, lexeme, float(lexeme), line)

    def _tokenize_identifier_or_keyword(self, line: int) -> Token:
        """Tokenize an identifier or reserved keyword."""
        start_pos = self.pos

        while _is_identifier_continue(self._current()):
            self._advance()

        lexeme = self.source[start_pos:self.pos]
        token_type = KEYWORDS.get(lexeme, TokenType.IDENTIFIER)
        return Token(token_type, lexeme, None, line)

    def _skip_whitespace_and_comments(self):
        """Skip whitespace and '//' line comments."""
        while self.pos < len(self.source):
            if self.source[self.pos] in WHITESPACE:
                self._advance()
                continue

            if self.source[self.pos] == '/' and self._peek() == '/':
                while self.pos < len(self.source) and self.source[self.pos] != '\n':
                    self._advance()
                continue

            break

    def _advance(self):
        """Advance position by one character, counting newlines."""
        if self.pos < len(self.source):
            if self.source[self.pos] == '\n':
                self.line += 1
            self.pos += 1

    def _current(self) -> str:
        """Return the character at the current position."""
        if self.pos < len(self.source):
            return self.source[self.pos]
        return '\0'

    def _peek(self, offset: int = 1) -> str:
        """Peek at character ahead without advancing."""
        peek_pos = self.pos + offset
        if peek_pos < len(self.source):
            return self.source[peek_pos]
        return '\0'

    def has_errors(self) -> bool:
        """Check if lexer encountered any errors."""
        return len(self.errors) > 0

    def get_diagnostics(self) -> List[str]:
        """Render every error in the order it was found."""
        return [str(error) for error in self.errors]


def _is_digit(char: str) -> bool:
    return '0' <= char <= '9'


def _is_identifier_start(char: str) -> bool:
    return ('a' <= char <= 'z') or ('A' <= char <= 'Z') or char == '_'


def _is_identifier_continue(char: str) -> bool:
    return _is_identifier_start(char) or _is_digit(char)


def scan(source: Union[str, bytes], filename: str = "<stdin>") -> ScanResult:
    """
    Scan a whole source text.

    Never raises for malformed input: errors are returned on the result
    alongside every token that did scan.
    """
    lexer = Lexer(source, filename)
    tokens = lexer.tokenize()
    return ScanResult(tokens, list(lexer.errors))


def tokenize_string(source: Union[str, bytes], filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing fails
    """
    lexer = Lexer(source, filename)
    tokens = lexer.tokenize()

    if lexer.has_errors():
        # Raise the first error encountered
        raise lexer.errors[0]

    return tokens
