# topmark:header:start
#
#   project      : Frack
#   file         : console.py
#   file_relpath : src/frack/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console abstraction for user-facing program output.

This module separates CLI output from internal logging. Use the console for
messages intended for end users, while reserving `logging` for diagnostics
about Frack itself.

Rendered diagnostics always carry ANSI escape sequences, so the console
passes ``color=True`` to Click; otherwise Click would strip the styling when
the output is not a terminal.
"""

from __future__ import annotations

import sys
from typing import Protocol, TextIO

import click


class ConsoleLike(Protocol):
    """Minimal interface for a console used by CLI commands."""

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        ...


class ClickConsole(ConsoleLike):
    """Program-output console, independent from the logger.

    Args:
        out (TextIO | None): The text stream to use for standard output.
            Defaults to `sys.stdout`.
        err (TextIO | None): The text stream to use for error output.
            Defaults to `sys.stderr`.
    """

    out: TextIO | None
    err: TextIO | None

    def __init__(
        self,
        *,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.out = out
        self.err = err

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout.

        Args:
            text (str): Message text.
            nl (bool): If True, append a newline.
        """
        click.echo(text, nl=nl, file=self.out or sys.stdout, color=True)

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr.

        Args:
            text (str): Error text.
            nl (bool): If True, append a newline.
        """
        click.echo(text, nl=nl, file=self.err or sys.stderr, color=True)


def get_console(ctx: click.Context | None = None) -> ConsoleLike:
    """Return the console stored on the Click context, or a fresh one.

    Falls back to a new `ClickConsole` when no context is active (e.g., when
    an error is shown outside of command processing).
    """
    ctx = ctx or click.get_current_context(silent=True)
    if ctx is not None and isinstance(getattr(ctx, "obj", None), dict) and "console" in ctx.obj:
        console: ConsoleLike = ctx.obj["console"]
        return console
    return ClickConsole()
