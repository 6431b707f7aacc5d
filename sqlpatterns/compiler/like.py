"""
Translator for SQL LIKE patterns.
"""

import logging
from typing import List, Optional

from ..grammar import ANY_CHAR, ANY_SEQUENCE, escape_regex_char
from ..diagnostics.errors import invalid_escape_sequence
from .escape import resolve_escape

logger = logging.getLogger("sqlpatterns.compiler.like")

LIKE_ESCAPABLE = frozenset("_%\\")


class LikeTranslator:
    """Translates one LIKE pattern into ``re`` syntax."""

    def __init__(self, pattern: str, escape_char: str):
        self.pattern = pattern
        self.escape_char = escape_char
        self.pos = 0
        self._out: List[str] = []

    def translate(self) -> str:
        """Scan the pattern and return the regex source."""
        pattern = self.pattern
        length = len(pattern)
        while self.pos < length:
            ch = pattern[self.pos]
            if ch == self.escape_char:
                self._escape_sequence()
                continue
            if ch == "_":
                self._out.append(ANY_CHAR)
            elif ch == "%":
                self._out.append(ANY_SEQUENCE)
            else:
                self._out.append(escape_regex_char(ch))
            self.pos += 1

        regex = "".join(self._out)
        logger.debug(f"LIKE {pattern!r} -> {regex!r}")
        return regex

    def _escape_sequence(self):
        """Emit the character escaped at the current position."""
        pattern = self.pattern
        if self.pos == len(pattern) - 1:
            raise invalid_escape_sequence(
                pattern,
                self.pos,
                suggestions=[f"Remove the trailing '{self.escape_char}' or escape it as well"],
            )
        next_char = pattern[self.pos + 1]
        if next_char not in LIKE_ESCAPABLE and next_char != self.escape_char:
            raise invalid_escape_sequence(
                pattern,
                self.pos,
                suggestions=[f"Only '_', '%', '\\' or '{self.escape_char}' may follow the escape character"],
            )
        self._out.append(escape_regex_char(next_char))
        self.pos += 2


def sql_to_regex_like(pattern: str, escape: Optional[str] = None) -> str:
    """
    Translate a SQL LIKE pattern to a Python regex.

    Args:
        pattern: LIKE pattern
        escape: Optional single-character ESCAPE clause

    Returns:
        Regex source matching the same strings (use with ``fullmatch``)

    Raises:
        InvalidEscapeCharacter: ``escape`` is not exactly one character
        InvalidEscapeSequence: Dangling or misplaced escape character
    """
    return LikeTranslator(pattern, resolve_escape(escape)).translate()
