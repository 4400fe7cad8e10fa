"""
Error handling for the exprparse parser.

Syntax errors are recorded on the parser as ParseError values rather than
raised, so one parse can report a problem and still hand back a tree.
parse_string() is the only place that raises them.

Author: xwest
"""

from typing import Optional, List

from ..lexer.tokens import Token, TokenType, SourceLocation
from ..lexer.errors import Diagnostic, LEXER_MESSAGE_CODES


class ParseError(Exception):
    """
    A syntax or lexical error found while parsing.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        token: Optional[Token] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.message = message
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )
        self.token = token

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def short_message(self) -> str:
        """One-line form: `Error at '+': Expect an expression`."""
        return f"Error{describe_position(self.token)}: {self.message}"

    def __str__(self) -> str:
        return str(self.diagnostic)


class SyntaxErrorRecovery:
    """
    Utilities for error recovery in the parser.

    The grammar has no statement separators, so the only places the parser
    can resynchronize are tokens it explicitly expects (':' and the end of
    input); Parser._consume ends panic mode when it accepts one.
    """

    @staticmethod
    def suggest_missing_token(expected: TokenType) -> List[str]:
        """Suggest what token might be missing."""
        token_suggestions = {
            TokenType.COLON: ["Add a colon ':' followed by the false branch"],
            TokenType.EOF: [
                "Remove the trailing input",
                "Join the operands with an operator such as '+'",
            ],
        }

        return list(token_suggestions.get(expected, []))


EXPECTED_TOKEN = "Expected token not found"
EXPECTED_EXPRESSION = "Expected expression"
TRAILING_INPUT = "Trailing input after expression"
NUMBER_TOO_LARGE = "Number literal too large"
NESTED_TOO_DEEPLY = "Expression nested too deeply"

# Common parser error codes for categorization
PARSER_ERROR_CODES = {
    "P001": EXPECTED_TOKEN,
    "P002": EXPECTED_EXPRESSION,
    "P003": TRAILING_INPUT,
    "P004": NUMBER_TOO_LARGE,
    "P005": NESTED_TOO_DEEPLY,
}

# Reverse lookup used by the create_* helpers below
PARSER_DESCRIPTION_CODES = {description: code for code, description in PARSER_ERROR_CODES.items()}


def describe_position(token: Optional[Token]) -> str:
    """Render where an error happened, in the classic `at 'x'` form."""
    if token is None or token.type == TokenType.ERROR:
        return ""
    if token.type == TokenType.EOF:
        return " at end"
    return f" at '{token.lexeme}'"


# Helper functions for creating common parser errors

def create_lexical_error(token: Token) -> ParseError:
    """Create an error for an ERROR token handed over by the lexer."""
    return ParseError(
        message=token.lexeme,
        location=token.location,
        token=token,
        code=LEXER_MESSAGE_CODES.get(token.lexeme),
        help_text="Only digits, whitespace and the characters + - * / ! ? : are allowed."
    )


def create_missing_token_error(expected: TokenType, found: Token, message: str) -> ParseError:
    """Create an error for a missing expected token."""
    description = TRAILING_INPUT if expected == TokenType.EOF else EXPECTED_TOKEN

    return ParseError(
        message=message,
        location=found.location,
        token=found,
        code=PARSER_DESCRIPTION_CODES[description],
        help_text=f"The parser expected to see {expected.name} here, but found {found.type.name} instead.",
        suggestions=SyntaxErrorRecovery.suggest_missing_token(expected)
    )


def create_expected_expression_error(found: Token) -> ParseError:
    """Create an error for a token that cannot start an expression."""
    return ParseError(
        message="Expect an expression",
        location=found.location,
        token=found,
        code=PARSER_DESCRIPTION_CODES[EXPECTED_EXPRESSION],
        help_text="An expression starts with a number, '-' or '!'.",
        suggestions=["Check that every operator has operands"]
    )


def create_number_too_large_error(token: Token) -> ParseError:
    """Create an error for a digit run that cannot be converted to int."""
    return ParseError(
        message=NUMBER_TOO_LARGE,
        location=token.location,
        token=token,
        code=PARSER_DESCRIPTION_CODES[NUMBER_TOO_LARGE],
        help_text=f"The literal has {len(token.lexeme)} digits, more than the interpreter converts."
    )


def create_nesting_error(token: Token, limit: int) -> ParseError:
    """Create an error for an expression deeper than the parser accepts."""
    return ParseError(
        message=NESTED_TOO_DEEPLY,
        location=token.location,
        token=token,
        code=PARSER_DESCRIPTION_CODES[NESTED_TOO_DEEPLY],
        help_text=f"Operators may nest at most {limit} levels deep.",
        suggestions=["Split the expression into smaller parts"]
    )
