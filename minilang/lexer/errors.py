"""
Error handling for the minilang lexer.

Provides diagnostics with source location information and
help text for hosting applications that report bad tokens.

Author: xwest
"""

from typing import Optional, List
from dataclasses import dataclass
from .tokens import SourceLocation, Token, INTEGER_MAX


@dataclass
class Diagnostic:
    """Base class for lexer diagnostics (errors, warnings, info)."""
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


class LexerError(Exception):
    """
    Exception raised when the lexer cannot produce a token.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    def __str__(self) -> str:
        return str(self.diagnostic)


class NumericOverflowError(LexerError):
    """Raised when an integer literal does not fit in a signed 32-bit integer."""

    def __init__(self, lexeme: str, location: SourceLocation, **kwargs):
        super().__init__(f"Integer literal out of range: '{lexeme}'", location, **kwargs)
        self.lexeme = lexeme


class LexerWarning:
    """
    Represents a lexer warning that doesn't stop tokenization.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="warning",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    def __str__(self) -> str:
        return str(self.diagnostic)


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Invalid character",
    "L007": "Number literal overflow",
    "W001": "Identifier differs from a keyword only by case",
}


# Helper functions for creating common diagnostics
def create_overflow_error(lexeme: str, location: SourceLocation) -> NumericOverflowError:
    """Create an error for an integer literal that exceeds the 32-bit range."""
    return NumericOverflowError(
        lexeme,
        location,
        code="L007",
        help_text=f"Integer literals must not exceed {INTEGER_MAX}."
    )


def create_invalid_character_diagnostic(token: Token) -> Diagnostic:
    """Describe an INVALID token for a hosting application."""
    char = token.lexeme
    if char.isprintable():
        help_text = f"The character '{char}' is not valid in minilang source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return Diagnostic(
        message=f"Invalid character: {char!r}",
        location=token.location,
        severity="error",
        code="L001",
        help_text=help_text
    )


def create_keyword_case_warning(name: str, location: SourceLocation) -> LexerWarning:
    """Create a warning for a name that is a keyword spelled with other casing."""
    return LexerWarning(
        message=f"'{name}' is a name, not the keyword '{name.lower()}'",
        location=location,
        code="W001",
        help_text="Keywords are case-sensitive.",
        suggestions=[name.lower()]
    )
