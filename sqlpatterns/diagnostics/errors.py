"""
Diagnostic errors for SQL pattern translation.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, List, Optional


class ErrorKind(str, Enum):
    """Kind of translation failure."""
    INVALID_ESCAPE_CHARACTER = "invalid_escape_character"
    INVALID_ESCAPE_SEQUENCE = "invalid_escape_sequence"
    INVALID_REGULAR_EXPRESSION = "invalid_regular_expression"


@dataclass(eq=False)
class TranslationDiagnostic:
    """Base class for all translation diagnostics."""
    message: str
    pattern: Optional[str] = None
    index: Optional[int] = None
    suggestions: List[str] = None

    def __post_init__(self):
        if self.suggestions is None:
            self.suggestions = []

    def __str__(self) -> str:
        return self.message

    def format(self) -> str:
        """Format diagnostic for display."""
        error_type = self.__class__.__name__
        parts = [f"{error_type}: {self.message}"]

        # Caret under the offending character
        if self.pattern is not None and self.index is not None and 0 <= self.index <= len(self.pattern):
            parts.append(f"  --> {self.pattern}")
            parts.append("      " + " " * self.index + "^")

        if self.suggestions:
            parts.append("\nSuggestions:")
            for i, suggestion in enumerate(self.suggestions, 1):
                parts.append(f"  {i}) {suggestion}")

        return "\n".join(parts)


class PatternTranslationError(TranslationDiagnostic, Exception):
    """A SQL pattern could not be translated."""
    kind: ClassVar[ErrorKind]


class InvalidEscapeCharacter(PatternTranslationError):
    """The escape designator is not exactly one character long."""
    kind = ErrorKind.INVALID_ESCAPE_CHARACTER


class InvalidEscapeSequence(PatternTranslationError):
    """An escape character is last, or escapes a character it may not."""
    kind = ErrorKind.INVALID_ESCAPE_SEQUENCE


class InvalidRegularExpression(PatternTranslationError):
    """A bracket expression or character class is malformed."""
    kind = ErrorKind.INVALID_REGULAR_EXPRESSION


def invalid_escape_character(escape: str) -> InvalidEscapeCharacter:
    return InvalidEscapeCharacter(
        message=f"Invalid escape character '{escape}'",
        suggestions=["Use exactly one character after ESCAPE, or omit the clause"],
    )


def invalid_escape_sequence(
    pattern: str,
    index: int,
    suggestions: Optional[List[str]] = None,
) -> InvalidEscapeSequence:
    return InvalidEscapeSequence(
        message=f"Invalid escape sequence '{pattern}', {index}",
        pattern=pattern,
        index=index,
        suggestions=suggestions,
    )


def invalid_regular_expression(
    pattern: str,
    index: int,
    suggestions: Optional[List[str]] = None,
) -> InvalidRegularExpression:
    return InvalidRegularExpression(
        message=f"Invalid regular expression '{pattern}', index {index}",
        pattern=pattern,
        index=index,
        suggestions=suggestions,
    )
