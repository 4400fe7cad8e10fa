"""
exprparse Pratt Parser Implementation

Top-down operator precedence (Pratt) parser for the expression grammar.
Pulls tokens from the lexer one at a time, keeps a single token of
lookahead and recovers from errors in panic mode: the first problem in a
bad region is recorded, later ones are suppressed until the parser
accepts a token it was explicitly waiting for.

Author: xwest
"""

import logging
from typing import List, Optional, Callable, Tuple
from enum import IntEnum

from ..lexer.tokens import Token, TokenType
from ..lexer.lexer import Lexer
from ..lexer.errors import Diagnostic
from .ast_nodes import (
    ASTNode, ErrorNode, NumberLiteral, UnaryOp, BinaryOp, TernaryOp, SourceSpan
)
from .errors import (
    ParseError, create_lexical_error, create_missing_token_error, create_nesting_error,
    create_expected_expression_error, create_number_too_large_error
)

logger = logging.getLogger(__name__)


class Precedence(IntEnum):
    """Operator precedence levels for Pratt parsing."""
    NONE = 0            # ?:, and every token without an infix rule
    TERM = 1            # +, -
    FACTOR = 2          # *, /
    UNARY = 3           # !, - (prefix)


# Binding power of tokens in infix position
BINARY_PRECEDENCE = {
    TokenType.PLUS: Precedence.TERM,
    TokenType.MINUS: Precedence.TERM,
    TokenType.MULTIPLY: Precedence.FACTOR,
    TokenType.DIVIDE: Precedence.FACTOR,
    TokenType.QUESTION: Precedence.NONE,
}

# Deepest nesting accepted, counted both as recursion depth while parsing
# and as height of the tree being built
MAX_NESTING_DEPTH = 100


class Parser:
    """
    Expression Pratt parser.

    State is `previous` and `current` (one token of lookahead), the sticky
    `had_error` flag, the transient `panic_mode` flag and the list of
    recorded errors. One parser handles one input string.
    """

    def __init__(self, lexer: Lexer):
        """
        Initialize the parser and pull the first token.

        Args:
            lexer: Lexer positioned at the start of the input
        """
        self.lexer = lexer
        self.previous: Optional[Token] = None
        self.current: Optional[Token] = None
        self.had_error = False
        self.panic_mode = False
        self.errors: List[ParseError] = []

        # Set once the nesting limit is hit; parsing then unwinds without
        # reading further tokens
        self.nesting_exceeded = False
        self._depth = 0

        self._advance()

    def expression(self) -> Tuple[ASTNode, bool]:
        """
        Parse one complete expression followed by end of input.

        Never raises on malformed input. The tree may contain ErrorNode
        placeholders when had_error is set.

        Returns:
            (tree, had_error)
        """
        expr = self._parse_precedence(Precedence.NONE)
        self._consume(TokenType.EOF, "Expect end of expression")
        return expr, self.had_error

    @property
    def diagnostics(self) -> List[Diagnostic]:
        """Diagnostics of every recorded error, in report order."""
        return [error.diagnostic for error in self.errors]

    def _parse_precedence(self, precedence: Precedence) -> ASTNode:
        """Parse expression with given minimum precedence."""
        if self.nesting_exceeded or self._depth >= MAX_NESTING_DEPTH:
            return self._nesting_error()

        self._depth += 1
        try:
            return self._parse_operand(precedence)
        finally:
            self._depth -= 1

    def _parse_operand(self, precedence: Precedence) -> ASTNode:
        """Prefix rule followed by every infix rule binding at least `precedence`."""
        self._advance()
        prefix_rule = self._prefix_rule(self.previous.type)
        if prefix_rule is None:
            self._error_at(create_expected_expression_error(self.previous))
            return self._error_node(self.previous)

        left = prefix_rule()

        while not self.nesting_exceeded and precedence <= self._get_precedence(self.current.type):
            infix_rule = self._infix_rule(self.current.type)
            if infix_rule is None:
                break
            # Left-associative chains grow the tree without recursing
            if self._depth + left.height > MAX_NESTING_DEPTH:
                self._nesting_error()
                break
            self._advance()
            left = infix_rule(left)

        return left

    def _get_precedence(self, token_type: TokenType) -> Precedence:
        """Get precedence for a token type."""
        return BINARY_PRECEDENCE.get(token_type, Precedence.NONE)

    def _prefix_rule(self, token_type: TokenType) -> Optional[Callable[[], ASTNode]]:
        """Select the handler for a token that starts an expression."""
        if token_type == TokenType.NUMBER:
            return self._number
        if token_type in (TokenType.MINUS, TokenType.LOGICAL_NOT):
            return self._unary
        return None

    def _infix_rule(self, token_type: TokenType) -> Optional[Callable[[ASTNode], ASTNode]]:
        """Select the handler for a token that continues an expression."""
        if token_type in (TokenType.PLUS, TokenType.MINUS,
                          TokenType.MULTIPLY, TokenType.DIVIDE):
            return self._binary
        if token_type == TokenType.QUESTION:
            return self._ternary
        return None

    # Prefix parsers (tokens that can start expressions)

    def _number(self) -> ASTNode:
        """Parse integer literal."""
        token = self.previous
        try:
            value = int(token.lexeme)
        except ValueError:
            # Digit run longer than the interpreter's int conversion limit
            self._error_at(create_number_too_large_error(token))
            return self._error_node(token)

        span = SourceSpan(token.location, token.location)
        return NumberLiteral(value, span)

    def _unary(self) -> UnaryOp:
        """Parse unary operation."""
        operator_token = self.previous

        operand = self._parse_precedence(Precedence.UNARY)

        span = SourceSpan(operator_token.location, operand.span.end)
        return UnaryOp(operator_token, operand, span)

    # Infix parsers

    def _binary(self, left: ASTNode) -> BinaryOp:
        """Parse binary operation (left associative)."""
        operator_token = self.previous

        precedence = self._get_precedence(operator_token.type)
        right = self._parse_precedence(Precedence(precedence + 1))

        span = SourceSpan(left.span.start, right.span.end)
        return BinaryOp(operator_token, left, right, span)

    def _ternary(self, condition: ASTNode) -> TernaryOp:
        """Parse `? then : else` after its condition."""
        then_branch = self._parse_precedence(Precedence.NONE)
        self._consume(TokenType.COLON, "Expected ':' after true condition")
        # The else branch may itself be a conditional, which makes ?: right associative
        else_branch = self._parse_precedence(Precedence.NONE)

        span = SourceSpan(condition.span.start, else_branch.span.end)
        return TernaryOp(condition, then_branch, else_branch, span)

    # Utility methods

    def _advance(self) -> Token:
        """Move to the next token, reporting and skipping ERROR tokens."""
        self.previous = self.current

        while True:
            self.current = self.lexer.scan_token()
            if self.current.type != TokenType.ERROR:
                break
            self._error_at(create_lexical_error(self.current))

        return self.previous

    def _consume(self, token_type: TokenType, message: str) -> bool:
        """
        Consume the expected token or record an error.

        Accepting the expected token is the resynchronization point that
        ends panic mode. Once the nesting limit was hit nothing more is read.
        """
        if self.nesting_exceeded:
            return False

        if self.current.type == token_type:
            self.panic_mode = False
            self._advance()
            return True

        self._error_at(create_missing_token_error(token_type, self.current, message))
        return False

    def _error_at(self, error: ParseError):
        """Record an error unless an earlier one is still being recovered from."""
        if self.panic_mode:
            logger.debug("suppressed while recovering: %s", error.short_message())
            return
        self.panic_mode = True
        self.had_error = True
        self.errors.append(error)
        logger.debug("%s: %s", error.location, error.short_message())

    def _nesting_error(self) -> ErrorNode:
        """Record the nesting limit once and stand in for the operand."""
        if not self.nesting_exceeded:
            self.nesting_exceeded = True
            self._error_at(create_nesting_error(self.current, MAX_NESTING_DEPTH))
        return self._error_node(self.current)

    def _error_node(self, token: Token) -> ErrorNode:
        return ErrorNode(SourceSpan(token.location, token.location))


def create_parser(source: str, filename: str = "<input>") -> Parser:
    """
    Build a lexer and parser for one input string.

    The first token is already pulled when this returns.
    """
    return Parser(Lexer(source, filename))


def parse_string(source: str, filename: str = "<string>") -> ASTNode:
    """
    Convenience function to parse a source string.

    Args:
        source: Expression text
        filename: Filename for error reporting

    Returns:
        AST of the expression

    Raises:
        ParseError: The first error recorded, if any
    """
    parser = create_parser(source, filename)
    tree, had_error = parser.expression()

    if had_error:
        raise parser.errors[0]

    return tree
