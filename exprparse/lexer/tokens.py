"""
Token definitions for the exprparse lexer.

The token set is closed: integer literals, the single-character operators
of the expression grammar, an end-of-input marker and an error token that
carries a lexical diagnostic in place of source text.

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass


class TokenType(Enum):
    """Enumeration of all token types in the expression grammar."""

    # ========================================================================
    # Special Tokens
    # ========================================================================
    EOF = auto()                    # End of input
    ERROR = auto()                  # Unrecognized input; lexeme is the message

    # ========================================================================
    # Literals
    # ========================================================================
    NUMBER = auto()                 # 42, 007

    # ========================================================================
    # Operators
    # ========================================================================
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    MULTIPLY = auto()               # *
    DIVIDE = auto()                 # /
    LOGICAL_NOT = auto()            # !

    # ========================================================================
    # Punctuation
    # ========================================================================
    QUESTION = auto()               # ?
    COLON = auto()                  # :


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source text.

    Used for error reporting and for the token dump of the REPL.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of input

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    A lexical token.

    `lexeme` is the exact source slice for literals and operators, the empty
    string for EOF, and a human-readable message for ERROR tokens.
    """
    type: TokenType
    lexeme: str
    location: SourceLocation

    def __str__(self) -> str:
        return f"{self.type.name}({self.lexeme!r})"

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.lexeme!r}, {self.location!r})"

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.type == TokenType.NUMBER

    @property
    def is_operator(self) -> bool:
        """Check if this token is an operator or punctuation."""
        return self.type in OPERATORS.values()


# Single-character operators recognized by the lexer
OPERATORS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MULTIPLY,
    "/": TokenType.DIVIDE,
    "!": TokenType.LOGICAL_NOT,
    "?": TokenType.QUESTION,
    ":": TokenType.COLON,
}

# Characters skipped between tokens
WHITESPACE = frozenset(" \t\r\n")

DIGITS = frozenset("0123456789")
