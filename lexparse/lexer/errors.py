"""
Error handling for the lexparse lexer.

Provides error reporting with source location information and
suggestions for the most common mistakes.

Author: lexparse contributors
"""

from typing import Optional, List
from dataclasses import dataclass
from .tokens import SourceLocation, SYMBOLS


@dataclass
class Diagnostic:
    """Diagnostic attached to a lexer error."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning", "info", "hint"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}[{self.code}]: {self.message}\n" if self.code else f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.code in ERROR_CODES:
            result += f"  note: {self.code} is '{ERROR_CODES[self.code]}'\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Exception raised when tokenization cannot continue.

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
        self.location = location
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


class UnrecognizedInputError(LexerError):
    """
    Raised when no pattern in the table matches at the cursor.

    ``remainder`` holds the source text from the failing position to the end.
    """

    def __init__(
        self,
        remainder: str,
        location: SourceLocation,
        code: str = "L001",
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        self.remainder = remainder
        super().__init__(
            message=f"Unrecognized input near {excerpt(remainder)!r}",
            location=location,
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )


class StalledLexerError(LexerError):
    """Raised when a handler returns without moving the cursor."""

    def __init__(self, pattern_name: str, location: SourceLocation):
        self.pattern_name = pattern_name
        super().__init__(
            message=f"Pattern '{pattern_name}' made no progress",
            location=location,
            code="L003",
            help_text="Every pattern handler must consume at least one character."
        )


class ErrorRecovery:
    """
    Suggestion helpers used when building diagnostics.
    """

    @staticmethod
    def suggest_symbol_completions(char: str) -> List[str]:
        """Suggest known symbols that start with ``char`` (``&`` -> ``&&``)."""
        return [literal for literal, _ in SYMBOLS if literal.startswith(char) and literal != char][:3]


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Unrecognized input",
    "L002": "Unterminated string literal",
    "L003": "Pattern made no progress",
}


def excerpt(text: str, limit: int = 20) -> str:
    """First line of ``text``, cut to ``limit`` characters."""
    line = text.split("\n", 1)[0]
    if len(line) > limit:
        return line[:limit] + "..."
    return line


# Helper functions for creating common errors
def create_unrecognized_input_error(remainder: str, location: SourceLocation) -> UnrecognizedInputError:
    """Create the error for input no pattern recognizes."""
    if remainder.startswith('"'):
        return create_unterminated_string_error(remainder, location)

    char = remainder[0]
    suggestions = ErrorRecovery.suggest_symbol_completions(char)
    if suggestions:
        help_text = f"'{char}' is only valid as part of: {', '.join(suggestions)}"
    elif char.isprintable():
        help_text = f"The character '{char}' is not valid in source code."
    else:
        help_text = f"Non-printable character (U+{ord(char):04X}) is not allowed."

    return UnrecognizedInputError(
        remainder,
        location,
        code="L001",
        help_text=help_text,
        suggestions=suggestions
    )


def create_unterminated_string_error(remainder: str, location: SourceLocation) -> UnrecognizedInputError:
    """Create the error for a string literal with no closing quote."""
    return UnrecognizedInputError(
        remainder,
        location,
        code="L002",
        help_text='String literals must be closed with a matching " quote.',
        suggestions=['Add a closing " quote']
    )
