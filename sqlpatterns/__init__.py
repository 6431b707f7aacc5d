"""
SqlPatterns - SQL LIKE and SIMILAR TO patterns as Python regular expressions.

This package provides:
- LIKE translation with optional ESCAPE character
- SIMILAR TO translation with bracket expressions and character classes
- SQL:2003 escape rule validation
- POSIX class keyword normalization for ``re`` compilation
- Structured diagnostics with error kinds and suggestions
"""

from .grammar import (
    REGEX_SPECIALS,
    SIMILAR_SPECIALS,
    CHARACTER_CLASSES,
    POSIX_CHARACTER_CLASSES,
    CharacterClass,
)
from .compiler import (
    LikeTranslator,
    SimilarTranslator,
    sql_to_regex_like,
    sql_to_regex_similar,
)
from .posix import (
    normalize_posix_classes,
    posix_regex_to_pattern,
    posix_regex_to_pattern_with_flags,
)
from .diagnostics.errors import (
    ErrorKind,
    TranslationDiagnostic,
    PatternTranslationError,
    InvalidEscapeCharacter,
    InvalidEscapeSequence,
    InvalidRegularExpression,
)
from .config import TranslatorConfig, ConfigLoader, ConfigError

__version__ = "0.1.0"

__all__ = [
    # Tables
    "REGEX_SPECIALS",
    "SIMILAR_SPECIALS",
    "CHARACTER_CLASSES",
    "POSIX_CHARACTER_CLASSES",
    "CharacterClass",
    # Translators
    "LikeTranslator",
    "SimilarTranslator",
    "sql_to_regex_like",
    "sql_to_regex_similar",
    # POSIX classes
    "normalize_posix_classes",
    "posix_regex_to_pattern",
    "posix_regex_to_pattern_with_flags",
    # Diagnostics
    "ErrorKind",
    "TranslationDiagnostic",
    "PatternTranslationError",
    "InvalidEscapeCharacter",
    "InvalidEscapeSequence",
    "InvalidRegularExpression",
    # Configuration
    "TranslatorConfig",
    "ConfigLoader",
    "ConfigError",
]
