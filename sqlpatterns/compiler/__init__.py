"""Compiler package for SQL pattern translation."""

from .escape import resolve_escape, check_similar_escape_rules
from .brackets import rewrite_char_enumeration
from .like import LikeTranslator, sql_to_regex_like
from .similar import SimilarTranslator, sql_to_regex_similar

__all__ = [
    "resolve_escape",
    "check_similar_escape_rules",
    "rewrite_char_enumeration",
    "LikeTranslator",
    "sql_to_regex_like",
    "SimilarTranslator",
    "sql_to_regex_similar",
]
