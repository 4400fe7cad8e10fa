"""
exprparse Lexer Package

Hand-written lexical analyzer for the expression grammar: integer literals,
the operators + - * / ! and the ternary punctuation ? :.

Key Features:
- Lazy, one-token-at-a-time scanning driven by the parser
- Lexical errors reported as ERROR tokens, never as exceptions
- Source location tracking for diagnostics

Author: xwest
"""

from .tokens import Token, TokenType, SourceLocation
from .lexer import Lexer, tokenize_string
from .errors import Diagnostic

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "SourceLocation",
    "Diagnostic",
    "tokenize_string",
]
