"""
Shared test fixtures and helpers for the SqlPatterns test suite.
"""

import os
import re
from typing import Optional

import pytest


# ============================================================================
# Matching Helpers
# ============================================================================


def full_match(regex: str, value: str, flags: int = 0) -> bool:
    """Whole-string match, the way a SQL predicate evaluates a pattern."""
    return re.fullmatch(regex, value, flags) is not None


@pytest.fixture
def matches():
    """Expose full_match to tests as a fixture."""
    return full_match


# ============================================================================
# Environment Isolation
# ============================================================================


@pytest.fixture(autouse=True)
def clean_sqlpat_env(monkeypatch):
    """Drop SQLPAT_* variables so config tests see only what they set."""
    for key in list(os.environ):
        if key.startswith("SQLPAT_"):
            monkeypatch.delenv(key)
    yield


@pytest.fixture
def write_config(tmp_path):
    """Write a config file and return its path."""

    def _write(name: str, content: str, directory: Optional[str] = None) -> str:
        target = tmp_path / directory if directory else tmp_path
        target.mkdir(parents=True, exist_ok=True)
        path = target / name
        path.write_text(content)
        return str(path)

    return _write
