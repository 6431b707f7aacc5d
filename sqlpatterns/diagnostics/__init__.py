"""Diagnostics package."""

from .errors import (
    ErrorKind,
    TranslationDiagnostic,
    PatternTranslationError,
    InvalidEscapeCharacter,
    InvalidEscapeSequence,
    InvalidRegularExpression,
)

__all__ = [
    "ErrorKind",
    "TranslationDiagnostic",
    "PatternTranslationError",
    "InvalidEscapeCharacter",
    "InvalidEscapeSequence",
    "InvalidRegularExpression",
]
