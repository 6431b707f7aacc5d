"""SqlPatterns CLI - Main Entry Point.

Commands:
    like     - Translate a LIKE pattern
    similar  - Translate a SIMILAR TO pattern
    posix    - Normalize and compile a regex with POSIX class keywords
"""

import logging
import re
import sys
from typing import Callable, Optional

import click

from . import __version__, __cli_name__
from .utils.colors import success, error, kv, _CHECK, _CROSS
from ..config import ConfigLoader, ConfigError
from ..diagnostics.errors import PatternTranslationError


@click.group()
@click.version_option(version=__version__, prog_name=__cli_name__)
@click.option('--config', 'config_paths', multiple=True, type=click.Path(), help='JSON or YAML config file')
@click.option('--verbose', '-v', is_flag=True, help='Verbose output')
@click.pass_context
def cli(ctx, config_paths: tuple, verbose: bool):
    """Translate SQL LIKE and SIMILAR TO patterns to Python regexes.

    \b
    Quick start:
      sqlpat like 'a%b_c'
      sqlpat similar '[[:ALPHA:]]+'
      sqlpat posix '[[:xdigit:]]+'
    """
    try:
        config = ConfigLoader.load(paths=list(config_paths))
    except ConfigError as e:
        error(f"  {_CROSS} {e}")
        sys.exit(1)

    logging.basicConfig(level="DEBUG" if verbose else config.log_level.upper())

    ctx.ensure_object(dict)
    ctx.obj['config'] = config
    ctx.obj['verbose'] = verbose


def _run_translation(
    ctx,
    dialect: str,
    translate: Callable[[str, Optional[str]], str],
    pattern: str,
    escape: Optional[str],
    no_escape: bool = False,
):
    """Translate, then print the regex or the diagnostic."""
    if no_escape:
        if escape is not None:
            raise click.UsageError("--escape and --no-escape are mutually exclusive")
    elif escape is None:
        escape = ctx.obj['config'].escape

    try:
        regex = translate(pattern, escape)
    except PatternTranslationError as e:
        error(e.format())
        sys.exit(1)

    if ctx.obj['verbose']:
        kv("Dialect", dialect)
        kv("Pattern", pattern)
        kv("Escape", escape if escape is not None else "(none)")
        kv("Regex", regex)
    else:
        click.echo(regex)


# ============================================================================
# Commands
# ============================================================================

@cli.command('like')
@click.argument('pattern')
@click.option('--escape', '-e', type=str, default=None, help='ESCAPE character')
@click.option('--no-escape', is_flag=True, help='Disable escaping, ignoring the configured escape')
@click.pass_context
def like_cmd(ctx, pattern: str, escape: Optional[str], no_escape: bool):
    """
    Translate a LIKE pattern.

    Examples:
      sqlpat like 'a%b_c'
      sqlpat like 'a!%b' --escape '!'
      sqlpat like '100!' --no-escape
    """
    from ..compiler.like import sql_to_regex_like

    _run_translation(ctx, "LIKE", sql_to_regex_like, pattern, escape, no_escape)


@cli.command('similar')
@click.argument('pattern')
@click.option('--escape', '-e', type=str, default=None, help='ESCAPE character')
@click.option('--no-escape', is_flag=True, help='Disable escaping, ignoring the configured escape')
@click.pass_context
def similar_cmd(ctx, pattern: str, escape: Optional[str], no_escape: bool):
    """
    Translate a SIMILAR TO pattern.

    Examples:
      sqlpat similar '(ab|cd)%'
      sqlpat similar '[[:DIGIT:]]{3}'
    """
    from ..compiler.similar import sql_to_regex_similar

    _run_translation(ctx, "SIMILAR", sql_to_regex_similar, pattern, escape, no_escape)


@cli.command('posix')
@click.argument('regex')
@click.option('--ignore-case/--case-sensitive', default=None, help='Compile case-insensitively')
@click.pass_context
def posix_cmd(ctx, regex: str, ignore_case: Optional[bool]):
    """
    Replace POSIX class keywords and compile the result.

    Examples:
      sqlpat posix '[[:alpha:]]+'
      sqlpat posix '[[:upper:]]' --ignore-case
    """
    from ..posix import posix_regex_to_pattern

    if ignore_case is None:
        case_sensitive = ctx.obj['config'].case_sensitive
    else:
        case_sensitive = not ignore_case

    try:
        compiled = posix_regex_to_pattern(regex, case_sensitive=case_sensitive)
    except re.error as e:
        error(f"  {_CROSS} Regex does not compile: {e}")
        sys.exit(1)

    if ctx.obj['verbose']:
        kv("Regex", regex)
        kv("Compiled", compiled.pattern)
        kv("Flags", "IGNORECASE" if compiled.flags & re.IGNORECASE else "-")
        success(f"  {_CHECK} Compiled")
    else:
        click.echo(compiled.pattern)


def main():
    """Entry point for `sqlpat` command."""
    cli(obj={})


if __name__ == '__main__':
    main()
