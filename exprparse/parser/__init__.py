"""
exprparse Parser Package

Pratt-based recursive descent parser for arithmetic expressions with unary
operators and the ternary conditional.

Key Features:
- Top-down operator precedence (Pratt parsing)
- Panic-mode error recovery; always returns a tree plus an error flag
- AST nodes with source spans and a visitor interface

Author: xwest
"""

from .ast_nodes import *
from .parser import Parser, Precedence, create_parser, parse_string
from .errors import ParseError

__all__ = [
    # Core parser
    "Parser", "Precedence", "create_parser", "parse_string",

    # AST nodes
    "ASTNode", "ASTNodeType", "ASTVisitor", "ASTPrinter", "SourceSpan",
    "ErrorNode", "NumberLiteral", "UnaryOp", "BinaryOp", "TernaryOp",
    "print_ast",

    # Error handling
    "ParseError",
]
