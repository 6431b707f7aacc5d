"""
Fixed character tables for SQL pattern translation.

Special Characters
==================

Characters with syntactic meaning in Python ``re`` patterns:

    [ ] ( ) | ^ - + * ? { } $ \\ .

Characters with syntactic meaning in SQL ``SIMILAR TO`` patterns:

    [ ] ( ) | ^ - + * _ % ? { }

Wildcards
=========
_       any single character          ->  .
%       any sequence, line breaks too ->  (?s:.*)

Character Classes
=================
Inside a SIMILAR bracket expression (or standing alone as a set):

[:ALPHA:]       letters                a-zA-Z
[:UPPER:]       upper case letters     A-Z
[:LOWER:]       lower case letters     a-z
[:DIGIT:]       digits                 0-9
[:SPACE:]       the space character
[:WHITESPACE:]  whitespace             space, \\t \\n \\x0b \\f \\r
[:ALNUM:]       letters and digits     a-zA-Z0-9

Lower case spellings (``[:alpha:]``) are accepted as well. All sets are
restricted to US-ASCII, matching the classic POSIX definitions.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional

REGEX_SPECIALS = frozenset("[]()|^-+*?{}$\\.")

SIMILAR_SPECIALS = frozenset("[]()|^-+*_%?{}")

# Escaping disabled
NO_ESCAPE = ""

ANY_CHAR = "."
ANY_SEQUENCE = "(?s:.*)"


@dataclass(frozen=True)
class CharacterClass:
    """A SQL character class marker and the ``re`` set contents it expands to."""
    name: str
    body: str


CHARACTER_CLASSES = (
    CharacterClass("[:ALPHA:]", "a-zA-Z"),
    CharacterClass("[:alpha:]", "a-zA-Z"),
    CharacterClass("[:UPPER:]", "A-Z"),
    CharacterClass("[:upper:]", "A-Z"),
    CharacterClass("[:LOWER:]", "a-z"),
    CharacterClass("[:lower:]", "a-z"),
    CharacterClass("[:DIGIT:]", "0-9"),
    CharacterClass("[:digit:]", "0-9"),
    CharacterClass("[:SPACE:]", " "),
    CharacterClass("[:space:]", " "),
    CharacterClass("[:WHITESPACE:]", r" \t\n\x0b\f\r"),
    CharacterClass("[:whitespace:]", r" \t\n\x0b\f\r"),
    CharacterClass("[:ALNUM:]", "a-zA-Z0-9"),
    CharacterClass("[:alnum:]", "a-zA-Z0-9"),
)

_CLASSES_BY_LENGTH = tuple(
    sorted(CHARACTER_CLASSES, key=lambda entry: len(entry.name), reverse=True)
)

# XDigit must stay ahead of Digit: "xdigit" contains "digit".
POSIX_CHARACTER_CLASSES = (
    "Lower", "Upper", "ASCII", "Alpha", "XDigit", "Digit", "Alnum",
    "Punct", "Graph", "Print", "Blank", "Cntrl", "Space",
)

POSIX_CLASS_BODIES = MappingProxyType({
    "Lower": "a-z",
    "Upper": "A-Z",
    "ASCII": r"\x00-\x7f",
    "Alpha": "a-zA-Z",
    "XDigit": "0-9a-fA-F",
    "Digit": "0-9",
    "Alnum": "a-zA-Z0-9",
    "Punct": r"!-/:-@\[-`{-~",
    "Graph": "!-~",
    "Print": " -~",
    "Blank": r" \t",
    "Cntrl": r"\x00-\x1f\x7f",
    "Space": r" \t\n\x0b\f\r",
})


def escape_regex_char(ch: str) -> str:
    """Return ``ch`` as a literal in ``re`` syntax."""
    if ch in REGEX_SPECIALS:
        return "\\" + ch
    return ch


def match_character_class(pattern: str, pos: int) -> Optional[CharacterClass]:
    """Find the character class marker starting at ``pos``, if any."""
    for entry in _CLASSES_BY_LENGTH:
        if pattern.startswith(entry.name, pos):
            return entry
    return None
