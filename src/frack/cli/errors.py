# topmark:header:start
#
#   project      : Frack
#   file         : errors.py
#   file_relpath : src/frack/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the Frack CLI.

Usage:
    Raise these exceptions in CLI commands to stop processing with a
    standardized exit code. Click catches them in standalone mode, calls
    `show()` and exits with `exit_code`.

Styling:
    `FrackUsageError` describes the mistake with a rendered diagnostic, using
    the same engine as the diagnostics Frack generates on request.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

import click

from frack.cli.console import get_console
from frack.cli.exit_codes import ExitCode
from frack.rendering.api import render_to_string

if TYPE_CHECKING:
    from frack.diagnostic.model import Error


class FrackError(click.ClickException):
    """Base class for all Frack CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error on stderr through the project console."""
        console = get_console()
        console.error(click.style(f"error: {self.format_message()}", fg="bright_red", bold=True))


class FrackUsageError(FrackError):
    """Invalid command-line invocation, described by an ``error[...]`` diagnostic.

    Attributes:
        diagnostic (Error): The diagnostic explaining what is wrong with the arguments.
    """

    exit_code = ExitCode.FAILURE

    def __init__(self, diagnostic: Error) -> None:
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic

    def show(self, file: IO[Any] | None = None) -> None:
        """Print the rendered diagnostic to stderr."""
        get_console().error(render_to_string(self.diagnostic))


class FrackConfigError(FrackError):
    """Configuration file missing, unreadable or malformed."""

    exit_code = ExitCode.CONFIG_ERROR
