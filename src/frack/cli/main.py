# topmark:header:start
#
#   project      : Frack
#   file         : main.py
#   file_relpath : src/frack/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point of the ``frack`` command.

Key ideas:
- Group-level options are resolved once and placed into ``ctx.obj``
  (console, configuration, location of generated diagnostics).
- Every invocation mistake, including ones Click detects itself, exits with
  code 1 after printing a diagnostic that describes it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import click

from frack.cli.args import invalid_command, invalid_invocation, missing_command
from frack.cli.commands.example import example_command
from frack.cli.commands.generate import error_command, warning_command
from frack.cli.commands.usage import help_command
from frack.cli.console import ClickConsole
from frack.cli.errors import FrackConfigError
from frack.cli.options import common_verbose_options, config_options, resolve_log_level
from frack.config.loaders import discover_config, load_config_file
from frack.config.logging import get_logger, setup_logging
from frack.config.model import ConfigError, FrackConfig
from frack.constants import PROG_NAME

logger = get_logger(__name__)


class FrackGroup(click.Group):
    """Click group that reports invocation errors as rendered diagnostics."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        """Parse group options, turning Click usage errors into diagnostics."""
        original = list(args)
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as exc:
            raise invalid_invocation(exc.format_message(), original) from exc

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        """Resolve the sub-command, rejecting unknown names with a diagnostic."""
        if args and self.get_command(ctx, args[0]) is None:
            raise invalid_command(args[0])
        return super().resolve_command(ctx, args)


def _load_config(config_path: str | None) -> FrackConfig:
    try:
        if config_path is not None:
            return load_config_file(Path(config_path))
        return discover_config()
    except ConfigError as exc:
        raise FrackConfigError(str(exc)) from exc


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    config_path: str | None,
    path: str,
    line: int,
) -> None:
    """Initialize shared state (logging, console, configuration) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` set.
        verbose (int): Count of ``-v`` flags.
        config_path (str | None): Explicit configuration file, if any.
        path (str): File path for generated diagnostics.
        line (int): Line number for generated diagnostics.
    """
    obj: dict[str, Any] = ctx.ensure_object(dict)

    setup_logging(level=resolve_log_level(verbose))

    obj.setdefault("console", ClickConsole())
    obj["config"] = _load_config(config_path)
    obj["path"] = path
    obj["line"] = line
    logger.debug("Using configuration from %s", obj["config"].source or "built-in defaults")


@click.group(
    cls=FrackGroup,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Generate rustc-style error and warning messages.",
)
@click.version_option(package_name="frack", prog_name=PROG_NAME)
@common_verbose_options
@config_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    config_path: str | None,
    path: str,
    line: int,
) -> None:
    """Entry point for the Frack CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        config_path=config_path,
        path=path,
        line=line,
    )

    if ctx.invoked_subcommand is None:
        raise missing_command()


cli.add_command(help_command)

cli.add_command(example_command)

cli.add_command(error_command)

cli.add_command(warning_command)

if __name__ == "__main__":
    cli()
