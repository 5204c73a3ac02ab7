# topmark:header:start
#
#   project      : Frack
#   file         : example.py
#   file_relpath : src/frack/cli/commands/example.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Frack `example` command.

Shows a complete invocation of ``frack error`` followed by the diagnostic it
produces.
"""

from __future__ import annotations

import shlex
from typing import TYPE_CHECKING

import click

from frack.cli.args import parse_diagnostic
from frack.constants import DEFAULT_LINE, DEFAULT_PATH, PROG_NAME
from frack.rendering.api import render_to_string
from frack.rendering.styles import bold, reset

if TYPE_CHECKING:
    from frack.cli.console import ConsoleLike
    from frack.config.model import FrackConfig

EXAMPLE_ARGS: tuple[str, ...] = (
    "E0308",
    "mismatched types",
    "    12_i32",
    "4-9",
    "fix",
    "consider using the available `ToString` impl",
    "    12_i32.to_string()",
    "10-21",
    "span",
    "convert this into a `String`",
    "note",
    "expected `String`, found `i32`",
)


@click.command(
    name="example",
    help="Show an example invocation and its output.",
)
def example_command() -> None:
    """Print the example command line and the rendered diagnostic."""
    ctx = click.get_current_context()
    console: ConsoleLike = ctx.obj["console"]
    config: FrackConfig = ctx.obj["config"]

    diagnostic = parse_diagnostic(
        EXAMPLE_ARGS,
        is_error=True,
        path=DEFAULT_PATH,
        line=DEFAULT_LINE,
        defaults=config.markers,
    )

    console.print(f"{bold()}${reset()} {shlex.join([PROG_NAME, 'error', *EXAMPLE_ARGS])}")
    console.print()
    console.print(render_to_string(diagnostic, palette=config.palette))
