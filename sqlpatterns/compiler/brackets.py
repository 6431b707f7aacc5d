"""
Rewriting of SIMILAR bracket expressions (character enumerations).
"""

from typing import List

from ..grammar import SIMILAR_SPECIALS, escape_regex_char, match_character_class
from ..diagnostics.errors import invalid_regular_expression


def rewrite_char_enumeration(
    pattern: str,
    out: List[str],
    pos: int,
    escape_char: str,
) -> int:
    """
    Translate the contents of the bracket expression opened at ``pos``.

    Appends the ``re`` form of everything between ``[`` and ``]`` to
    ``out``. Neither bracket is emitted here.

    Args:
        pattern: SIMILAR pattern being translated
        out: Output buffer of the caller
        pos: Index of the opening ``[``
        escape_char: Active escape character (NO_ESCAPE when disabled)

    Returns:
        Index of the last consumed character: the one before the closing
        ``]``, or the last index of the pattern if the bracket never closes.

    Raises:
        InvalidRegularExpression: Bad escape, unknown class name, or an
            unescaped special character inside the brackets
    """
    length = len(pattern)
    i = pos + 1
    while i < length:
        ch = pattern[i]
        if ch == "]":
            return i - 1
        elif ch == escape_char:
            i += 1
            if i == length:
                raise invalid_regular_expression(pattern, i)
            next_char = pattern[i]
            if next_char in SIMILAR_SPECIALS or next_char == escape_char:
                out.append(escape_regex_char(next_char))
            else:
                raise invalid_regular_expression(
                    pattern,
                    i,
                    suggestions=[f"Only special characters or '{escape_char}' may follow '{escape_char}'"],
                )
        elif ch == "-" or ch == "^":
            # Ranges and negation read the same in both dialects
            out.append(ch)
        elif pattern.startswith("[:", i):
            entry = match_character_class(pattern, i)
            if entry is None:
                raise invalid_regular_expression(
                    pattern,
                    i,
                    suggestions=[
                        "Known classes: ALPHA, UPPER, LOWER, DIGIT, SPACE, WHITESPACE, ALNUM",
                    ],
                )
            out.append(entry.body)
            i += len(entry.name) - 1
        elif ch in SIMILAR_SPECIALS:
            raise invalid_regular_expression(
                pattern,
                i,
                suggestions=[f"Escape '{ch}' to use it as a literal inside brackets"],
            )
        elif ch == "\\":
            out.append("\\\\")
        else:
            out.append(ch)
        i += 1
    return i - 1
