# topmark:header:start
#
#   project      : Frack
#   file         : usage.py
#   file_relpath : src/frack/cli/commands/usage.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Frack `help` command.

Prints the argument grammar of the ``error`` and ``warning`` commands. The
text is styled with the same escape sequences as rendered diagnostics.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from frack.constants import PROG_NAME
from frack.rendering.styles import bold, color, reset

if TYPE_CHECKING:
    from frack.cli.console import ConsoleLike

USAGE_TEMPLATE = """\
{BOLD}{PROG}{OFF}: generate `rustc`-style diagnostics

{BOLD}USAGE:{OFF}
    {PROG} {BLUE}help{OFF}
    {PROG} {BLUE}example{OFF}
    {PROG} {RED}error{OFF} <code> <message> <code-line> <start>-<end> [SUBCOMMAND]...
    {PROG} {YELLOW}warning{OFF} <message> <code-line> <start>-<end> [SUBCOMMAND]...

{BOLD}SUBCOMMANDS:{OFF}
    {BOLD}note{OFF} <message>
        add a note after all help messages
    {BOLD}help{OFF} <message>
        add a help message
    {BOLD}fix{OFF} <message> <code-line> <start>-<end> [{BOLD}span{OFF} <message>]
        add a help message suggesting a revised line; the span is
        highlighted, and `span` adds a message after its underline

{BOLD}SPANS:{OFF}
    `<start>-<end>` are 0-indexed character offsets into the code line;
    both ends are inclusive, so `4-9` underlines six characters.

{BOLD}OPTIONS:{OFF}
    --path TEXT    file path shown in the location line (default: src/main.rs)
    --line N       line number of the location and code (default: 7)
    --config FILE  read colors and symbols from a TOML file
    -v, --verbose  log what {PROG} is doing (repeat for more detail)
"""


def usage_text() -> str:
    """Return the styled usage text."""
    return USAGE_TEMPLATE.format(
        PROG=PROG_NAME,
        OFF=reset(),
        BOLD=bold(),
        RED=color(9),
        YELLOW=color(3),
        BLUE=color(12),
    )


@click.command(
    name="help",
    help="Show how to build diagnostics from the command line.",
)
def help_command() -> None:
    """Print the argument grammar."""
    ctx = click.get_current_context()
    console: ConsoleLike = ctx.obj["console"]
    console.print(usage_text())
