"""
SqlPatterns CLI - styled output helpers built on Click.

All output respects terminal capabilities (click.style handles
NO_COLOR / TERM=dumb).
"""

from __future__ import annotations

import click

_CHECK = "\u2713"     # ✓
_CROSS = "\u2717"     # ✗


def success(message: str) -> None:
    """Print success message in green."""
    click.echo(click.style(message, fg="green"))


def error(message: str) -> None:
    """Print error message in red."""
    click.echo(click.style(message, fg="red"))


def kv(
    key: str,
    value: str,
    *,
    key_width: int = 12,
    indent: int = 2,
    key_fg: str = "white",
    val_fg: str = "cyan",
) -> None:
    """
    Print an aligned key-value pair.

        Pattern:    a%b_c
        Regex:      a(?s:.*)b.c
    """
    prefix = " " * indent
    k = click.style(f"{key}:", fg=key_fg)
    v = click.style(str(value), fg=val_fg)
    padding = " " * max(1, key_width - len(key) - 1)
    click.echo(f"{prefix}{k}{padding}{v}")
