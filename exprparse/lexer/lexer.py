"""
exprparse Lexer - turns an expression string into tokens on demand

The parser pulls one token at a time through scan_token(), so nothing is
buffered here. Bad characters come back as ERROR tokens instead of
exceptions; the caller decides what to report.

xwest
"""

from typing import List

from .tokens import Token, TokenType, SourceLocation, OPERATORS, WHITESPACE, DIGITS
from .errors import UNEXPECTED_CHARACTER


class Lexer:
    """
    Expression lexical analyzer.

    Holds the cursor over a single input string. `start` marks the first
    character of the token being scanned, `current` the next character to
    read. Both only move forward.
    """

    def __init__(self, source: str, filename: str = "<input>"):
        """
        Initialize the lexer with source text.

        Args:
            source: Expression text
            filename: Name used in source locations
        """
        self.source = source
        self.filename = filename
        self.start = 0
        self.current = 0
        self.line = 1
        self.column = 1

        # Location of the token being scanned
        self._start_line = 1
        self._start_column = 1

    def scan_token(self) -> Token:
        """
        Scan and return the next token.

        Returns EOF with an empty lexeme once the input is exhausted, and
        keeps returning it on further calls.
        """
        self._skip_whitespace()

        self.start = self.current
        self._start_line = self.line
        self._start_column = self.column

        if self._is_at_end():
            return self._make_token(TokenType.EOF)

        char = self._advance()

        if char in DIGITS:
            return self._number()

        token_type = OPERATORS.get(char)
        if token_type is not None:
            return self._make_token(token_type)

        # The offending character is already consumed
        return self._error_token(UNEXPECTED_CHARACTER)

    def tokenize(self) -> List[Token]:
        """
        Scan the rest of the input.

        Returns:
            List of tokens ending with the EOF token
        """
        tokens = []
        while True:
            token = self.scan_token()
            tokens.append(token)
            if token.type == TokenType.EOF:
                return tokens

    def _number(self) -> Token:
        """Consume the rest of a digit run."""
        while self._peek() in DIGITS:
            self._advance()
        return self._make_token(TokenType.NUMBER)

    def _skip_whitespace(self):
        """Skip spaces, tabs and line breaks."""
        while not self._is_at_end() and self._peek() in WHITESPACE:
            self._advance()

    def _make_token(self, token_type: TokenType) -> Token:
        lexeme = self.source[self.start:self.current]
        return Token(token_type, lexeme, self._start_location())

    def _error_token(self, message: str) -> Token:
        return Token(TokenType.ERROR, message, self._start_location())

    def _start_location(self) -> SourceLocation:
        return SourceLocation(self.filename, self._start_line, self._start_column, self.start)

    def _advance(self) -> str:
        """Consume one character, updating line/column."""
        char = self.source[self.current]
        self.current += 1
        if char == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return char

    def _peek(self) -> str:
        """Return the next character without consuming it, '' at end."""
        if self._is_at_end():
            return ''
        return self.source[self.current]

    def _is_at_end(self) -> bool:
        return self.current >= len(self.source)


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    ERROR tokens are left in the stream; nothing is raised.

    Args:
        source: Expression text
        filename: Filename for source locations

    Returns:
        List of tokens ending with EOF
    """
    return Lexer(source, filename).tokenize()
