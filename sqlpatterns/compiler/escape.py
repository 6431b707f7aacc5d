"""
Escape character handling shared by the LIKE and SIMILAR translators.

SQL:2003 Part 2, Section 8.6, General Rule 3 restricts where a SIMILAR
escape character may appear when it collides with pattern syntax:

- 3.b: an escape character that is itself a SIMILAR special character
  may only be followed by a special character or by itself.
- 3.c: a ``:`` escape character requires a ``[:`` ... ``:]`` class marker.
"""

import logging
from typing import Optional

from ..grammar import NO_ESCAPE, SIMILAR_SPECIALS
from ..diagnostics.errors import invalid_escape_character, invalid_escape_sequence

logger = logging.getLogger("sqlpatterns.compiler.escape")


def resolve_escape(escape: Optional[str]) -> str:
    """
    Turn an optional ESCAPE clause value into an escape character.

    Args:
        escape: Escape string supplied by the caller, or None

    Returns:
        The single escape character, or NO_ESCAPE when escaping is disabled

    Raises:
        InvalidEscapeCharacter: ``escape`` is not exactly one character
    """
    if escape is None:
        return NO_ESCAPE
    if len(escape) != 1:
        raise invalid_escape_character(str(escape))
    return escape


def check_similar_escape_rules(pattern: str, escape_char: str) -> None:
    """Validate escape character placement in a SIMILAR pattern."""
    if escape_char == NO_ESCAPE:
        return

    if escape_char in SIMILAR_SPECIALS:
        last = len(pattern) - 1
        for i, ch in enumerate(pattern):
            if ch != escape_char:
                continue
            if i == last:
                logger.warning(f"Escape character at end of SIMILAR pattern {pattern!r}")
                raise invalid_escape_sequence(
                    pattern,
                    i,
                    suggestions=[f"Follow '{escape_char}' with a special character or with itself"],
                )
            next_char = pattern[i + 1]
            if next_char not in SIMILAR_SPECIALS and next_char != escape_char:
                logger.warning(
                    f"Escape character {escape_char!r} followed by {next_char!r} "
                    f"in SIMILAR pattern {pattern!r}"
                )
                raise invalid_escape_sequence(
                    pattern,
                    i,
                    suggestions=[
                        f"Write '{escape_char}{escape_char}' for a literal '{escape_char}'",
                        "Choose an escape character that is not a SIMILAR special character",
                    ],
                )

    if escape_char == ":":
        position = pattern.find("[:")
        if position >= 0:
            position = pattern.find(":]", position + 2)
        if position < 0:
            logger.warning(f"':' escape without a [: ... :] class marker in {pattern!r}")
            raise invalid_escape_sequence(
                pattern,
                position,
                suggestions=["A ':' escape character requires a '[:name:]' class in the pattern"],
            )
