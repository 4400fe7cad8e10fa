"""
Diagnostics shared by the exprparse lexer and parser.

Lexical problems never raise: the lexer hands back an ERROR token whose
lexeme is one of the messages below, and the parser turns it into a
Diagnostic when it reaches it.

Author: xwest
"""

from typing import Optional, List
from dataclasses import dataclass

from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """Base class for diagnostics (errors, warnings, info)."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning", "info", "hint"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix += f"[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


UNEXPECTED_CHARACTER = "Unexpected character"

# Lexer error codes, keyed by code
LEXER_ERROR_CODES = {
    "L001": UNEXPECTED_CHARACTER,
}

# Reverse lookup used by the parser when it reports an ERROR token
LEXER_MESSAGE_CODES = {message: code for code, message in LEXER_ERROR_CODES.items()}
