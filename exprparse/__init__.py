"""
exprparse Package

A from-scratch scanner and Pratt parser for integer arithmetic expressions
with unary negation and logical not, binary + - * / and the ternary
conditional.

Architecture:
    exprparse/
    ├── lexer/           # Tokenization and lexical analysis
    ├── parser/          # Syntax analysis and AST generation
    └── repl.py          # Line-oriented front end

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__email__ = "dev@neuralscript.org"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType
from .parser import Parser, ParseError, create_parser, parse_string

__all__ = [
    # Core classes
    "Lexer",
    "Parser",
    "Token",
    "TokenType",
    "ParseError",

    # Entry points
    "create_parser",
    "parse_string",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
