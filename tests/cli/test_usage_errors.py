# topmark:header:start
#
#   project      : Frack
#   file         : test_usage_errors.py
#   file_relpath : tests/cli/test_usage_errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: invocation mistakes are described by rendered diagnostics.

Every mistake exits with code 1, prints nothing to stdout and renders an
``error[MISSING]`` or ``error[INVALID]`` diagnostic to stderr.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from frack import render_to_string
from frack.cli.args import USAGE_HINT
from frack.diagnostic.builder import build_error
from frack.diagnostic.model import File, Span
from tests.cli.conftest import assert_CONFIG_ERROR, assert_FAILURE, run_cli_in
from tests.conftest import B, C, R

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.cli


def test_missing_command(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, [])
    assert_FAILURE(result)
    expected = build_error(
        "MISSING",
        "must provide command",
        File("arg", 1, 1),
        "frack",
        Span(6, 9),
        span_message="no command provided",
        helps=[USAGE_HINT],
    )
    assert result.stderr == render_to_string(expected) + "\n"


def test_invalid_command(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["bogus"])
    assert_FAILURE(result)
    expected = build_error(
        "INVALID",
        "invalid command",
        File("arg", 1, 1),
        "bogus",
        Span(0, 4),
        span_message="unrecognized command",
        helps=["valid commands are `help`, `example`, `error`, `warning`", USAGE_HINT],
    )
    assert result.stderr == render_to_string(expected) + "\n"


def test_unknown_group_option(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["--bogus", "help"])
    assert_FAILURE(result)
    assert result.stderr.startswith(f"{B}{C(9)}error[INVALID]{R}{B}: invalid invocation{R}\n")
    assert "--bogus" in result.stderr


def test_line_option_must_be_positive(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["--line", "0", "warning", "w", "c", "0-0"])
    assert_FAILURE(result)
    assert "error[INVALID]" in result.stderr


@pytest.mark.parametrize(
    ("args", "code", "location", "needle"),
    [
        (["error", "E0308"], "MISSING", "arg:1:3", "no message provided"),
        (["warning", "m", "c"], "MISSING", "arg:1:4", "no span provided"),
        (["warning", "m", "c", "5-2"], "INVALID", "arg:1:4", "must not come before its start"),
        (["warning", "m", "c", "x"], "INVALID", "arg:1:4", "`start-end`"),
        (["warning", "m", "c", "0-0", "bogus"], "INVALID", "arg:2:1", "unrecognized subcommand"),
        (["warning", "m", "c", "0-0", "fix", "f"], "MISSING", "arg:2:3", "no help code provided"),
    ],
)
def test_argument_mistakes(
    tmp_path: Path, args: list[str], code: str, location: str, needle: str
) -> None:
    result = run_cli_in(tmp_path, args)
    assert_FAILURE(result)
    assert result.stderr.startswith(f"{B}{C(9)}error[{code}]{R}")
    assert f"{C(12)} --> {R}{location}\n" in result.stderr
    assert needle in result.stderr
    assert USAGE_HINT in result.stderr


def test_missing_config_file(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["--config", "missing.toml", "warning", "w", "c", "0-0"])
    assert_CONFIG_ERROR(result)
    assert "Cannot read config file" in result.stderr
    assert result.stdout == ""


def test_malformed_config_file(tmp_path: Path) -> None:
    (tmp_path / "frack.toml").write_text("[palette]\nerror = 'red'\n", encoding="utf-8")
    result = run_cli_in(tmp_path, ["warning", "w", "c", "0-0"])
    assert_CONFIG_ERROR(result)
    assert "[palette].error must be of type int" in result.stderr


def test_discovered_config_is_applied(tmp_path: Path) -> None:
    (tmp_path / "frack.toml").write_text(
        "[palette]\nerror = 1\n\n[markers]\nsymbol = '*'\n", encoding="utf-8"
    )
    result = run_cli_in(tmp_path, ["error", "E1", "m", "abc", "0-1"])
    assert result.exit_code == 0, result.stderr
    assert result.stdout.startswith(f"{B}{C(1)}error[E1]{R}")
    assert f"{B}{C(9)}**{R}\n" in result.stdout


@pytest.mark.parametrize("value", ["3", "'x'"])
def test_scalar_tool_frack_in_pyproject(tmp_path: Path, value: str) -> None:
    (tmp_path / "pyproject.toml").write_text(f"[tool]\nfrack = {value}\n", encoding="utf-8")
    result = run_cli_in(tmp_path, ["warning", "m", "code", "0-1"])
    assert_CONFIG_ERROR(result)
    assert "[tool.frack] must be a table" in result.stderr
    assert result.stdout == ""
