# topmark:header:start
#
#   project      : Frack
#   file         : builder.py
#   file_relpath : src/frack/diagnostic/builder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Build diagnostics from flat arguments with default styling.

Most diagnostics point at a single line and underline one span of it. The
builders here take that flat shape and fill in symbols and colors from
`BuilderDefaults`:

- the primary marker uses ``^`` in red (errors) or yellow (warnings);
- a suggestion marker uses ``~`` in green and colors the changed code inline.

Example:
    ```python
    error = build_error(
        "EGGS", "this code smells bad",
        File("src/main.rs", 12, 34),
        "  rotten(eggs);", Span(2, 13),
        helps=[
            HelpSpec("clean the eggs", SuggestionSpec("  clean(eggs);", Span(2, 12))),
            "just don't keep them here",
        ],
        notes=["ferris has feelings too"],
    )
    print(error)
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from frack.config.logging import get_logger
from frack.config.model import BuilderDefaults
from frack.diagnostic.model import Code, Error, File, Help, Marker, Note, Span, Warning

if TYPE_CHECKING:
    from collections.abc import Iterable

    from frack.config.logging import FrackLogger

logger: FrackLogger = get_logger(__name__)


@dataclass(frozen=True)
class SuggestionSpec:
    """A suggested replacement line.

    Attributes:
        code: The revised line of code.
        diff: The changed characters; when None the line is shown unmarked.
        tip: Message shown after the suggestion underline.
    """

    code: str
    diff: Span | None = None
    tip: str | None = None


@dataclass(frozen=True)
class HelpSpec:
    """A help message with an optional suggestion."""

    message: str
    suggestion: SuggestionSpec | None = None


def _suggestion(spec: SuggestionSpec, line_number: int, defaults: BuilderDefaults) -> Code:
    marker = None
    if spec.diff is not None:
        marker = Marker(
            span=spec.diff,
            symbol=defaults.suggestion_symbol,
            color=defaults.suggestion,
            message=spec.tip,
            color_span=True,
        )
    return Code.single(spec.code, line_number, marker)


def build_helps(
    helps: Iterable[HelpSpec | str],
    line_number: int,
    defaults: BuilderDefaults | None = None,
) -> tuple[Help, ...]:
    """Turn help specs (or plain messages) into `Help` entries.

    Suggestions are numbered ``line_number``, like the line they revise.
    """
    defaults = defaults or BuilderDefaults()
    result: list[Help] = []
    for item in helps:
        spec = HelpSpec(item) if isinstance(item, str) else item
        suggestion = (
            _suggestion(spec.suggestion, line_number, defaults)
            if spec.suggestion is not None
            else None
        )
        result.append(Help(spec.message, suggestion))
    return tuple(result)


def _primary_code(
    code: str, line_number: int, span: Span, span_message: str | None, symbol: str, color: int
) -> Code:
    return Code.single(
        code,
        line_number,
        Marker(span=span, symbol=symbol, color=color, message=span_message),
    )


def build_error(
    error_code: str,
    message: str,
    file: File,
    code: str,
    span: Span,
    span_message: str | None = None,
    helps: Iterable[HelpSpec | str] = (),
    notes: Iterable[str] = (),
    defaults: BuilderDefaults | None = None,
) -> Error:
    """Build an `Error` pointing at ``span`` of a single line of code.

    Args:
        error_code: The ``E0502`` in ``error[E0502]``.
        message: Header message.
        file: Location; ``file.line`` also numbers the code line.
        code: The offending line of code.
        span: Characters to underline.
        span_message: Message shown after the underline.
        helps: Help entries, in display order.
        notes: Note messages, in display order.
        defaults: Symbol and color overrides.

    Returns:
        Error: The populated diagnostic.
    """
    defaults = defaults or BuilderDefaults()
    logger.trace("Building error[%s] at %s", error_code, file)
    return Error(
        error_code=error_code,
        message=message,
        file=file,
        code=_primary_code(
            code, file.line, span, span_message, defaults.symbol, defaults.error_marker
        ),
        helps=build_helps(helps, file.line, defaults),
        notes=tuple(Note(n) for n in notes),
    )


def build_warning(
    message: str,
    file: File,
    code: str,
    span: Span,
    span_message: str | None = None,
    helps: Iterable[HelpSpec | str] = (),
    notes: Iterable[str] = (),
    defaults: BuilderDefaults | None = None,
) -> Warning:
    """Build a `Warning` pointing at ``span`` of a single line of code.

    Same arguments as `build_error`, without the error code.
    """
    defaults = defaults or BuilderDefaults()
    logger.trace("Building warning at %s", file)
    return Warning(
        message=message,
        file=file,
        code=_primary_code(
            code, file.line, span, span_message, defaults.symbol, defaults.warning_marker
        ),
        helps=build_helps(helps, file.line, defaults),
        notes=tuple(Note(n) for n in notes),
    )
