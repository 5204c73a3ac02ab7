# topmark:header:start
#
#   project      : Frack
#   file         : model.py
#   file_relpath : src/frack/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Data model of a `rustc`-style diagnostic.

Sections:
    * File: the ``path:line:col`` location shown after the arrow.
    * Span / Marker: an underline beneath part of a single code line.
    * Line / Code: the source excerpt with its gutter of line numbers.
    * Help / Note: trailing suggestions and remarks.
    * Error / Warning: the two root diagnostic variants.

All types are frozen dataclasses. Invalid values are rejected when an entity
is constructed, so rendering never has to validate.

Offsets:
    Marker offsets are 0-indexed *character* offsets into `Line.code` and
    both ends are inclusive: ``Span(4, 9)`` underlines ``code[4:10]``.
    Because offsets count characters rather than UTF-8 bytes, slicing a line
    that contains multi-byte text never splits a character.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from frack.rendering.gutter import block_width

if TYPE_CHECKING:
    from collections.abc import Iterator

    from frack.config.model import Palette
    from frack.rendering.renderer import Sink


class MarkerRangeError(ValueError):
    """Raised for a span whose start is negative or whose end precedes its start."""


class DiagnosticLevel(Enum):
    """The two kinds of root diagnostic."""

    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class File:
    """The location a diagnostic points at. Never checked against the filesystem."""

    path: str
    line: int
    col: int

    def __str__(self) -> str:
        return f"{self.path}:{self.line}:{self.col}"


@dataclass(frozen=True)
class Span:
    """Inclusive range of character offsets within one line of code."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0:
            raise MarkerRangeError(f"span start must not be negative, got {self.start}")
        if self.end < self.start:
            raise MarkerRangeError(f"span end {self.end} comes before its start {self.start}")

    @classmethod
    def parse(cls, text: str) -> Span:
        """Parse the ``<start>-<end>`` form used on the command line.

        Raises:
            ValueError: If ``text`` is not two non-negative integers joined by ``-``.
                `MarkerRangeError` (a subclass) is raised for an inverted range.
        """
        start, sep, end = text.partition("-")
        if not sep or not start.isdigit() or not end.isdigit():
            raise ValueError(f"invalid span {text!r}; expected <start>-<end>")
        return cls(int(start), int(end))

    @property
    def width(self) -> int:
        """Number of characters covered by the span."""
        return self.end - self.start + 1

    def fits(self, length: int) -> bool:
        """Return True if the span lies within a line of ``length`` characters."""
        return self.end < length

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"


@dataclass(frozen=True)
class Marker:
    """An underline for part of a `Line`.

    Attributes:
        span: The characters to underline.
        symbol: Underline character; `rustc` uses ``~`` for modifications and
            ``^`` for everything else.
        color: 8-bit color of the underline; `rustc` uses 10 for
            modifications, 3 for warnings and 9 for errors.
        message: Text shown after the underline, in the same color.
        color_span: Also color the underlined code itself (used for
            suggested modifications).
    """

    span: Span
    symbol: str = "^"
    color: int = 9
    message: str | None = None
    color_span: bool = False

    def __post_init__(self) -> None:
        if len(self.symbol) != 1:
            raise ValueError(f"marker symbol must be a single character, got {self.symbol!r}")
        if not 0 <= self.color <= 255:
            raise ValueError(f"marker color must be in 0..255, got {self.color}")


@dataclass(frozen=True)
class Line:
    """A single line of a `Code` block."""

    code: str
    line_number: int
    marker: Marker | None = None

    def __post_init__(self) -> None:
        if "\n" in self.code or "\r" in self.code:
            raise ValueError("a code line must not contain a line break")
        if self.line_number < 1:
            raise ValueError(f"line numbers start at 1, got {self.line_number}")


@dataclass(frozen=True)
class Code:
    """A code block for a `Help`, `Warning` or `Error`.

    Lines whose numbers are not adjacent are separated by an ellipsis row.
    Line numbers are expected to increase; this is not enforced.
    """

    lines: tuple[Line, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable (e.g. a list) while keeping the dataclass frozen
        object.__setattr__(self, "lines", tuple(self.lines))

    @classmethod
    def single(cls, code: str, line_number: int, marker: Marker | None = None) -> Code:
        """Create a code block with a single line of code."""
        return cls((Line(code, line_number, marker),))

    def line_number_width(self) -> int:
        """Return the gutter width of this block (widest line number, at least 1)."""
        return block_width(line.line_number for line in self.lines)

    def end_marker(self) -> bool:
        """Return True if the last line carries a `Marker`."""
        return bool(self.lines) and self.lines[-1].marker is not None

    def __iter__(self) -> Iterator[Line]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)


@dataclass(frozen=True)
class Help:
    """A help message, optionally with a suggested revision of the code."""

    message: str
    suggestion: Code | None = None


@dataclass(frozen=True)
class Note:
    """A note shown after all help messages."""

    message: str

    def __str__(self) -> str:
        return self.message


class _Renderable:
    """Rendering entry points shared by `Error` and `Warning`."""

    def render(self, sink: Sink, *, palette: Palette | None = None) -> None:
        """Write the styled diagnostic to ``sink``.

        Errors raised by ``sink.write`` propagate; output may be partial.
        """
        from frack.rendering.renderer import DiagnosticRenderer

        DiagnosticRenderer(palette).render(self, sink)  # type: ignore[arg-type]

    def render_to_string(self, *, palette: Palette | None = None) -> str:
        """Return the styled diagnostic as a string."""
        from frack.rendering.api import render_to_string

        return render_to_string(self, palette=palette)  # type: ignore[arg-type]

    def __str__(self) -> str:
        return self.render_to_string()


@dataclass(frozen=True)
class Error(_Renderable):
    """An error in `rustc` style, e.g. ``error[E0502]: ...``."""

    error_code: str
    message: str
    file: File
    code: Code
    helps: tuple[Help, ...] = field(default=())
    notes: tuple[Note, ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "helps", tuple(self.helps))
        object.__setattr__(self, "notes", tuple(self.notes))

    @property
    def level(self) -> DiagnosticLevel:
        """Always `DiagnosticLevel.ERROR`."""
        return DiagnosticLevel.ERROR


@dataclass(frozen=True)
class Warning(_Renderable):  # noqa: A001
    """A warning in `rustc` style, e.g. ``warning: ...``."""

    message: str
    file: File
    code: Code
    helps: tuple[Help, ...] = field(default=())
    notes: tuple[Note, ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "helps", tuple(self.helps))
        object.__setattr__(self, "notes", tuple(self.notes))

    @property
    def level(self) -> DiagnosticLevel:
        """Always `DiagnosticLevel.WARNING`."""
        return DiagnosticLevel.WARNING


Diagnostic = Error | Warning
