"""
POSIX character class support for regexes compiled with ``re``.

``re`` has no ``[:alpha:]`` style classes. Patterns written with them
(``[[:alpha:]]+``) or with the bare keyword are rewritten to explicit
US-ASCII sets before compilation.
"""

import logging
import re
from typing import Pattern

from .grammar import POSIX_CHARACTER_CLASSES, POSIX_CLASS_BODIES

logger = logging.getLogger("sqlpatterns.posix")


def normalize_posix_classes(regex: str) -> str:
    """
    Replace POSIX class keywords with ``re`` character sets.

    ``[:name:]`` inside a bracket expression becomes the set contents,
    and any other occurrence of ``name`` becomes a complete set.
    Keywords are processed in POSIX_CHARACTER_CLASSES order, so
    ``xdigit`` is consumed before ``digit`` can match inside it.
    """
    for name in POSIX_CHARACTER_CLASSES:
        keyword = name.lower()
        if keyword not in regex:
            continue
        body = POSIX_CLASS_BODIES[name]
        regex = regex.replace(f"[:{keyword}:]", body)
        regex = regex.replace(keyword, f"[{body}]")
    return regex


def posix_regex_to_pattern_with_flags(regex: str, flags: int = 0) -> Pattern:
    """
    Normalize POSIX classes and compile with explicit ``re`` flags.

    Raises:
        re.error: The normalized regex does not compile
    """
    normalized = normalize_posix_classes(regex)
    if normalized != regex:
        logger.debug(f"POSIX classes {regex!r} -> {normalized!r}")
    return re.compile(normalized, flags)


def posix_regex_to_pattern(regex: str, case_sensitive: bool = True) -> Pattern:
    """Normalize POSIX classes and compile, ignoring case unless ``case_sensitive``."""
    flags = 0 if case_sensitive else re.IGNORECASE
    return posix_regex_to_pattern_with_flags(regex, flags)
