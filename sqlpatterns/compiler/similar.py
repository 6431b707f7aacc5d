"""
Translator for SQL SIMILAR TO patterns.

SIMILAR keeps most regular expression operators (``|``, ``*``, ``+``,
``?``, ``{m,n}``, grouping and bracket expressions) and adds the LIKE
wildcards. Translation therefore passes operators through, rewrites
wildcards and bracket contents, and escapes the few characters that are
literal in SQL but special in ``re``.
"""

import logging
from typing import List, Optional

from ..grammar import (
    ANY_CHAR,
    ANY_SEQUENCE,
    SIMILAR_SPECIALS,
    escape_regex_char,
    match_character_class,
)
from ..diagnostics.errors import invalid_escape_sequence, invalid_regular_expression
from .brackets import rewrite_char_enumeration
from .escape import check_similar_escape_rules, resolve_escape

logger = logging.getLogger("sqlpatterns.compiler.similar")

# Literal in SIMILAR, special in re
SIMILAR_LITERALS = {
    "\\": "\\\\",
    "$": "\\$",
    ".": "\\.",
}


class SimilarTranslator:
    """Translates one SIMILAR pattern into ``re`` syntax."""

    def __init__(self, pattern: str, escape_char: str):
        self.pattern = pattern
        self.escape_char = escape_char
        self.inside_enumeration = False
        self._out: List[str] = []

    def translate(self) -> str:
        """Validate escapes, then scan the pattern and return the regex source."""
        pattern = self.pattern
        check_similar_escape_rules(pattern, self.escape_char)

        out = self._out
        length = len(pattern)
        i = 0
        while i < length:
            ch = pattern[i]
            if ch == self.escape_char:
                if i == length - 1:
                    raise invalid_escape_sequence(pattern, i)
                next_char = pattern[i + 1]
                if next_char in SIMILAR_SPECIALS or next_char == self.escape_char:
                    out.append(escape_regex_char(next_char))
                else:
                    raise invalid_escape_sequence(pattern, i)
                i += 2
                continue

            if ch == "_":
                out.append(ANY_CHAR)
            elif ch == "%":
                out.append(ANY_SEQUENCE)
            elif ch == "[":
                entry = match_character_class(pattern, i)
                if entry is not None:
                    # A class marker may stand alone as a whole set
                    out.append(f"[{entry.body}]")
                    i += len(entry.name)
                    continue
                out.append("[")
                self.inside_enumeration = True
                i = rewrite_char_enumeration(pattern, out, i, self.escape_char)
            elif ch == "]":
                if not self.inside_enumeration:
                    raise invalid_regular_expression(
                        pattern,
                        i,
                        suggestions=["Escape ']' or add the matching '['"],
                    )
                self.inside_enumeration = False
                out.append("]")
            elif ch in SIMILAR_LITERALS:
                out.append(SIMILAR_LITERALS[ch])
            else:
                out.append(ch)
            i += 1

        if self.inside_enumeration:
            logger.warning(f"Unterminated bracket expression in SIMILAR pattern {pattern!r}")
            raise invalid_regular_expression(
                pattern,
                length,
                suggestions=["Close the bracket expression with ']'"],
            )

        regex = "".join(out)
        logger.debug(f"SIMILAR {pattern!r} -> {regex!r}")
        return regex


def sql_to_regex_similar(pattern: str, escape: Optional[str] = None) -> str:
    """
    Translate a SQL SIMILAR TO pattern to a Python regex.

    Args:
        pattern: SIMILAR pattern
        escape: Optional single-character ESCAPE clause

    Returns:
        Regex source matching the same strings (use with ``fullmatch``)

    Raises:
        InvalidEscapeCharacter: ``escape`` is not exactly one character
        InvalidEscapeSequence: Escape character breaks SQL:2003 8.6 rule 3
        InvalidRegularExpression: Malformed bracket expression or class
    """
    return SimilarTranslator(pattern, resolve_escape(escape)).translate()
