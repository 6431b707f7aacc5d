"""
SqlPatterns CLI.

The `sqlpat` command translates SQL patterns from the shell.

Usage:
    sqlpat like 'a%b_c'
    sqlpat similar '[[:ALPHA:]]+' --escape '!'
    sqlpat posix '[[:xdigit:]]+' --ignore-case
"""

__version__ = "0.1.0"
__cli_name__ = "sqlpat"
