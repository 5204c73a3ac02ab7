# topmark:header:start
#
#   project      : Frack
#   file         : generate.py
#   file_relpath : src/frack/cli/commands/generate.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Frack `error` and `warning` commands.

Both commands take a positional grammar (see `frack.cli.args`) that Click
cannot express, so Click hands over the raw arguments unprocessed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from frack.cli.args import parse_diagnostic
from frack.rendering.api import render_to_string

if TYPE_CHECKING:
    from frack.cli.console import ConsoleLike
    from frack.config.model import FrackConfig

RAW_ARGS_SETTINGS = {
    "ignore_unknown_options": True,
    "help_option_names": [],
}


def _generate(args: tuple[str, ...], *, is_error: bool) -> None:
    ctx = click.get_current_context()
    console: ConsoleLike = ctx.obj["console"]
    config: FrackConfig = ctx.obj["config"]

    diagnostic = parse_diagnostic(
        args,
        is_error=is_error,
        path=ctx.obj["path"],
        line=ctx.obj["line"],
        defaults=config.markers,
    )
    console.print(render_to_string(diagnostic, palette=config.palette))


@click.command(
    name="error",
    help="Print an error: <code> <message> <code-line> <start>-<end> [SUBCOMMAND]...",
    context_settings=RAW_ARGS_SETTINGS,
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def error_command(args: tuple[str, ...]) -> None:
    """Print an error built from positional arguments."""
    _generate(args, is_error=True)


@click.command(
    name="warning",
    help="Print a warning: <message> <code-line> <start>-<end> [SUBCOMMAND]...",
    context_settings=RAW_ARGS_SETTINGS,
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def warning_command(args: tuple[str, ...]) -> None:
    """Print a warning built from positional arguments."""
    _generate(args, is_error=False)
