# topmark:header:start
#
#   project      : Frack
#   file         : options.py
#   file_relpath : src/frack/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes the group-level options (verbosity, configuration
and the location of generated diagnostics) and their resolution logic, so
commands can stay thin.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import ParamSpec, TypeVar

import click

from frack.config.logging import TRACE_LEVEL, resolve_env_log_level
from frack.constants import DEFAULT_LINE, DEFAULT_PATH

P = ParamSpec("P")
R = TypeVar("R")


def resolve_log_level(verbose_count: int) -> int | None:
    """Resolve the internal logging level.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.

    Returns:
        The logging level, or None to keep the default (CRITICAL).

    Behavior:
        Three or more -v flags set TRACE level.
        Two -v flags set DEBUG level.
        One -v flag sets INFO level.
        Without -v, ``FRACK_LOG_LEVEL`` is honored.
    """
    if verbose_count >= 3:  # -vvv
        return TRACE_LEVEL
    if verbose_count == 2:  # -vv
        return logging.DEBUG
    if verbose_count == 1:  # -v
        return logging.INFO
    return resolve_env_log_level()


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the repeatable ``-v/--verbose`` option to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Log what frack is doing. Repeat for more detail.",
    )(f)
    return f


def config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config``, ``--path`` and ``--line`` to a command.

    ``--path`` and ``--line`` set the location reported by generated
    diagnostics; ``--line`` also numbers their code lines.
    """
    f = click.option(
        "--config",
        "config_path",
        metavar="FILE",
        default=None,
        help="Read colors and symbols from this TOML file "
        "(default: frack.toml or [tool.frack] in pyproject.toml).",
    )(f)
    f = click.option(
        "--path",
        default=DEFAULT_PATH,
        show_default=True,
        help="File path shown in the location line.",
    )(f)
    f = click.option(
        "--line",
        type=click.IntRange(min=1),
        default=DEFAULT_LINE,
        show_default=True,
        help="Line number of the location and of the code lines.",
    )(f)
    return f
