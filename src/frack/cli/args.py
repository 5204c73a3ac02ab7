# topmark:header:start
#
#   project      : Frack
#   file         : args.py
#   file_relpath : src/frack/cli/args.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Positional argument grammar of the ``error`` and ``warning`` commands.

Grammar:

```text
error   <code> <message> <code-line> <start>-<end> [SUB]...
warning <message> <code-line> <start>-<end> [SUB]...

SUB := note <message>
     | help <message>
     | fix <message> <code-line> <start>-<end> [span <message>]
```

Every mistake raises `FrackUsageError` carrying an ``error[MISSING]`` or
``error[INVALID]`` diagnostic. Its location is ``arg:<major>:<minor>``:
``major`` is 1 for the command itself and counts sub-commands from 2,
``minor`` is the position of the argument within that group. The code line of
the diagnostic echoes the arguments read so far and the marker points where
the offending argument is (or should be).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from frack.cli.errors import FrackUsageError
from frack.config.logging import get_logger
from frack.constants import PROG_NAME
from frack.diagnostic.builder import HelpSpec, SuggestionSpec, build_error, build_warning
from frack.diagnostic.model import File, MarkerRangeError, Span

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from frack.config.logging import FrackLogger
    from frack.config.model import BuilderDefaults
    from frack.diagnostic.model import Diagnostic

logger: FrackLogger = get_logger(__name__)

USAGE_HINT = f"try `{PROG_NAME} help` for usage"

COMMANDS: tuple[str, ...] = ("help", "example", "error", "warning")
SUBCOMMANDS: tuple[str, ...] = ("note", "help", "fix")


class ArgumentStream:
    """Peekable cursor over positional arguments."""

    def __init__(self, args: Iterable[str]) -> None:
        self._args: list[str] = list(args)
        self._pos = 0

    def next(self) -> str | None:
        """Consume and return the next argument, or None when exhausted."""
        if self._pos >= len(self._args):
            return None
        value = self._args[self._pos]
        self._pos += 1
        return value

    def peek(self) -> str | None:
        """Return the next argument without consuming it."""
        if self._pos >= len(self._args):
            return None
        return self._args[self._pos]


def _single_line(text: str) -> str:
    """Escape line breaks so user input can be echoed as one code line."""
    return text.replace("\r", "\\r").replace("\n", "\\n")


def _word_span(start: int, text: str) -> Span:
    return Span(start, start + max(len(text) - 1, 0))


def missing(
    message: str,
    what: str,
    major: int,
    minor: int,
    echoed: str,
    helps: Sequence[str] = (),
) -> FrackUsageError:
    """Return the error for an argument missing after ``echoed``.

    The marker is a four-character placeholder just past the echoed text.
    """
    echoed = _single_line(echoed)
    start = len(echoed) + 1
    return FrackUsageError(
        build_error(
            "MISSING",
            message,
            File("arg", major, minor),
            echoed,
            Span(start, start + 3),
            span_message=f"no {what} provided",
            helps=[*helps, USAGE_HINT],
        )
    )


def invalid(
    message: str,
    major: int,
    minor: int,
    echoed: str,
    span: Span,
    span_message: str,
    helps: Sequence[str] = (),
) -> FrackUsageError:
    """Return the error for an argument that was given but is not acceptable."""
    return FrackUsageError(
        build_error(
            "INVALID",
            message,
            File("arg", major, minor),
            _single_line(echoed),
            span,
            span_message=span_message,
            helps=[*helps, USAGE_HINT],
        )
    )


def missing_command() -> FrackUsageError:
    """Return the error for an invocation without a command."""
    return missing("must provide command", "command", 1, 1, PROG_NAME)


def invalid_command(name: str) -> FrackUsageError:
    """Return the error for an unknown command."""
    name = _single_line(name)
    valid = ", ".join(f"`{c}`" for c in COMMANDS)
    return invalid(
        "invalid command",
        1,
        1,
        name,
        _word_span(0, name),
        "unrecognized command",
        helps=[f"valid commands are {valid}"],
    )


def invalid_invocation(reason: str, args: Sequence[str]) -> FrackUsageError:
    """Return the error for options Click could not parse."""
    echoed = _single_line(" ".join(args))
    return invalid(
        "invalid invocation",
        1,
        1,
        echoed,
        _word_span(0, echoed),
        reason,
    )


def _code_line(stream: ArgumentStream, what: str, major: int, minor: int, echoed: str) -> str:
    code = stream.next()
    if code is None:
        raise missing(f"must provide {what}", what, major, minor, echoed)
    if "\n" in code or "\r" in code:
        shown = _single_line(code)
        start = len(_single_line(echoed)) + 2
        raise invalid(
            f"invalid {what}",
            major,
            minor,
            f"{echoed} '{shown}'",
            _word_span(start, shown),
            "contains a line break",
            helps=[f"the {what} must be a single line"],
        )
    return code


def parse_span(stream: ArgumentStream, echoed: str, major: int, minor: int) -> Span:
    """Read a ``<start>-<end>`` argument.

    Raises:
        FrackUsageError: If the span is missing, malformed or inverted.
    """
    text = stream.next()
    if text is None:
        raise missing("must provide span", "span", major, minor, echoed)

    try:
        return Span.parse(text)
    except MarkerRangeError:
        hint = "the end of a span must not come before its start"
    except ValueError:
        hint = "span must be in the format `start-end`, e.g. `3-15`"

    shown = _single_line(text)
    start = len(_single_line(echoed)) + 1
    raise invalid(
        "invalid span",
        major,
        minor,
        f"{echoed} {shown}",
        _word_span(start, shown),
        "invalid span",
        helps=[hint],
    )


def _message(stream: ArgumentStream, what: str, major: int, minor: int, echoed: str) -> str:
    value = stream.next()
    if value is None:
        raise missing(f"must provide {what}", what, major, minor, echoed)
    return value


def parse_fix(stream: ArgumentStream, major: int) -> HelpSpec:
    """Read the arguments of a ``fix`` sub-command (after the keyword)."""
    message = _message(stream, "help message", major, 2, "fix")
    code = _code_line(stream, "help code", major, 3, f"fix '{message}'")
    echoed = f"fix '{message}' '{code}'"
    span = parse_span(stream, echoed, major, 4)

    tip = None
    if stream.peek() == "span":
        stream.next()
        tip = stream.next()
        if tip is None:
            raise missing(
                "must provide span message",
                "span message",
                major,
                6,
                f"{echoed} {span} span",
                helps=["if you don't want a span message, omit `span`"],
            )
    return HelpSpec(message, SuggestionSpec(code, span, tip))


def parse_diagnostic(
    args: Iterable[str],
    *,
    is_error: bool,
    path: str,
    line: int,
    defaults: BuilderDefaults | None = None,
) -> Diagnostic:
    """Build a diagnostic from the arguments of ``error`` or ``warning``.

    Args:
        args: Arguments following the command name.
        is_error: True for ``error`` (first argument is the error code).
        path: File path shown in the location line.
        line: Line number of the location and of every code line.
        defaults: Builder symbol/color overrides.

    Returns:
        Diagnostic: The populated `Error` or `Warning`. Its column is the
        span start, counted from 1.

    Raises:
        FrackUsageError: On any missing or invalid argument.
    """
    stream = ArgumentStream(args)

    error_code: str | None = None
    if is_error:
        error_code = _message(stream, "error code", 1, 2, "error")
        command = f"error '{error_code}'"
        minor = 3
    else:
        command = "warning"
        minor = 2

    message = _message(stream, "message", 1, minor, command)
    code = _code_line(stream, "code", 1, minor + 1, f"{command} '{message}'")
    span = parse_span(stream, f"{command} '{message}' '{code}'", 1, minor + 2)

    helps: list[HelpSpec | str] = []
    notes: list[str] = []
    major = 2
    while (sub := stream.next()) is not None:
        match sub:
            case "note":
                notes.append(_message(stream, "note message", major, 2, "note"))
            case "help":
                helps.append(_message(stream, "help message", major, 2, "help"))
            case "fix":
                helps.append(parse_fix(stream, major))
            case _:
                shown = _single_line(sub)
                valid = ", ".join(f"`{c}`" for c in SUBCOMMANDS)
                raise invalid(
                    "invalid subcommand",
                    major,
                    1,
                    shown,
                    _word_span(0, shown),
                    "unrecognized subcommand",
                    helps=[f"valid subcommands are {valid}"],
                )
        major += 1

    logger.debug(
        "Parsed %s with %d help(s) and %d note(s)",
        "error" if is_error else "warning",
        len(helps),
        len(notes),
    )

    file = File(path, line, span.start + 1)
    if error_code is not None:
        return build_error(
            error_code, message, file, code, span, helps=helps, notes=notes, defaults=defaults
        )
    return build_warning(message, file, code, span, helps=helps, notes=notes, defaults=defaults)
