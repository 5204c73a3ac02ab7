# topmark:header:start
#
#   project      : Frack
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running Frack in a controlled working directory.

`run_cli_in()` changes the process working directory to the given `tmp_path`
before invoking the Click CLI, so configuration discovery (``frack.toml`` and
``pyproject.toml``) only sees files created by the test.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from click.testing import CliRunner, Result

from frack.cli.exit_codes import ExitCode
from frack.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


def run_cli_in(tmp_path: Path, argv: Sequence[str]) -> Result:
    """Invoke the CLI with `tmp_path` as the working directory.

    Args:
        tmp_path (Path): Directory used as the CWD for the command invocation.
        argv (Sequence[str]): CLI argument vector, e.g. ``["error", "E1", ...]``.

    Returns:
        Result: The `click.testing.Result` of the invocation; ``stdout`` and
            ``stderr`` are captured separately.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, list(argv))
    finally:
        os.chdir(cwd)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output + result.stderr


def assert_FAILURE(result: Result) -> None:
    """Assert that the command exited with FAILURE (code 1) and printed nothing to stdout."""
    assert result.exit_code == ExitCode.FAILURE, result.output + result.stderr
    assert result.stdout == ""


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that the command exited with CONFIG_ERROR (code 78)."""
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output + result.stderr
