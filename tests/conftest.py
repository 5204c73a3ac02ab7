# topmark:header:start
#
#   project      : Frack
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the Frack test suite.

This file sets up global fixtures, the escape-sequence shorthands used to
spell out expected output, and the logging configuration for test runs.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, TypeVar, cast

import pytest

from frack.config import logging

F = TypeVar("F", bound=Callable[..., object])

# Shorthands for writing expected renderings.
B = "\x1b[1m"
R = "\x1b[0m"


def C(index: int) -> str:
    """Return the 8-bit foreground color sequence for ``index``."""
    return f"\x1b[38;5;{index}m"


def rule(text: str) -> str:
    """Return ``text`` styled as a gutter rule (bold, color 12)."""
    return f"{B}{C(12)}{text}{R}"


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.hookimpl`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.hookimpl`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    return cast("Callable[[F], F]", pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_frack_logging(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Ensure Frack's runtime log level is not forced via env during tests.

    The CLI reconfigures the root logger on every invocation, binding its
    handler to the stream of the running `CliRunner`; the handler is rebuilt
    afterwards so later tests never log to a closed stream.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)
    yield
    logging.setup_logging(level=logging.TRACE_LEVEL)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE so every log call is exercised.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)
