# topmark:header:start
#
#   project      : Frack
#   file         : renderer.py
#   file_relpath : src/frack/rendering/renderer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render diagnostics into `rustc`-style styled text.

`DiagnosticRenderer` exposes one method per entity kind plus a dispatching
`DiagnosticRenderer.render`. Every method writes to a *sink* (any object with
a ``write(str)`` method) and never reads back from it. Rendering is
synchronous and keeps no state between calls; errors raised by the sink
propagate unchanged.

Layout of an error:

```text
error[E0308]: mismatched types
 --> main.rs:7:5
  |
3 | fn foo() -> String {
  |             ------ expected `String` because of return type
...
7 |     12_i32
  |     ^^^^^^ expected `String`, found `i32`
help: consider using the available `ToString` impl
  |
7 |     12_i32.to_string()
  |           ~~~~~~~~~~~~ convert this into a `String`
```

The ``extend`` flag decides whether a code block is closed with a trailing
blank gutter row even when its last line carries a marker. The primary block
is extended only when no helps or notes follow it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from frack.config.logging import get_logger
from frack.config.model import Palette
from frack.diagnostic.model import (
    Code,
    DiagnosticLevel,
    Error,
    Help,
    Line,
    Marker,
    Note,
    Warning,
)
from frack.rendering.gutter import width
from frack.rendering.styles import bold, color, reset

if TYPE_CHECKING:
    from frack.config.logging import FrackLogger
    from frack.diagnostic.model import Diagnostic

logger: FrackLogger = get_logger(__name__)


class Sink(Protocol):
    """Anything text can be written to (``io.StringIO``, ``sys.stdout``, ...)."""

    def write(self, s: str, /) -> object:
        """Write ``s``; failures are reported by raising."""
        ...


Renderable = Error | Warning | Code | Line | Marker | Help | Note


class DiagnosticRenderer:
    """Writes diagnostics and their parts as styled rows.

    Args:
        palette (Palette | None): Colors of labels and gutter rules. Defaults to
            the `rustc` look.
    """

    palette: Palette

    def __init__(self, palette: Palette | None = None) -> None:
        self.palette = palette or Palette()

    def render(self, entity: Renderable, sink: Sink, extend: bool = False) -> None:
        """Render any entity of the diagnostic model.

        Args:
            entity (Renderable): What to render. A bare `Line` uses its own
                gutter width; a bare `Note` uses the error form.
            sink (Sink): Destination of the styled text.
            extend (bool): Passed to code blocks (directly or through a `Help`).

        Raises:
            TypeError: If ``entity`` is not part of the diagnostic model.
        """
        logger.trace("Rendering %s (extend=%s)", type(entity).__name__, extend)
        match entity:
            case Error() | Warning():
                self.render_diagnostic(entity, sink)
            case Code():
                self.render_code(entity, sink, extend=extend)
            case Help():
                self.render_help(entity, sink, extend=extend)
            case Line():
                self.render_line(entity, sink, lno_width=width(entity.line_number))
            case Marker():
                self.render_marker(entity, sink)
            case Note():
                self.render_note(entity, sink)
            case _:
                raise TypeError(f"cannot render {type(entity).__name__}")

    # --- gutter rows ---

    def _rule(self, sink: Sink, text: str) -> None:
        sink.write(f"{bold()}{color(self.palette.location)}{text}{reset()}")

    def _blank_gutter(self, sink: Sink, lno_width: int) -> None:
        self._rule(sink, " |".rjust(lno_width + 2))
        sink.write("\n")

    # --- entities ---

    def render_marker(self, marker: Marker, sink: Sink) -> None:
        """Write the underline row of ``marker`` (without the gutter prefix)."""
        row = " " * marker.span.start + marker.symbol * marker.span.width
        if marker.message is not None:
            row += f" {marker.message}"
        sink.write(f"{bold()}{color(marker.color)}{row}{reset()}\n")

    def render_line(self, line: Line, sink: Sink, *, lno_width: int) -> None:
        """Write one numbered code line and, if it has a marker, its underline row."""
        self._rule(sink, f"{line.line_number:<{lno_width}} | ")

        marker = line.marker
        if marker is not None and marker.color_span and marker.span.fits(len(line.code)):
            start, end = marker.span.start, marker.span.end + 1
            sink.write(line.code[:start])
            sink.write(f"{color(marker.color)}{line.code[start:end]}{reset()}")
            sink.write(f"{line.code[end:]}\n")
        else:
            if marker is not None and marker.color_span:
                logger.debug(
                    "Span %s does not fit line %d (%d chars); not coloring it inline",
                    marker.span,
                    line.line_number,
                    len(line.code),
                )
            sink.write(f"{line.code}\n")

        if marker is not None:
            self._rule(sink, " | ".rjust(lno_width + 3))
            self.render_marker(marker, sink)

    def render_code(self, code: Code, sink: Sink, *, extend: bool) -> None:
        """Write a code block framed by blank gutter rows.

        Args:
            code (Code): The block to write.
            sink (Sink): Destination of the styled text.
            extend (bool): Force the trailing blank gutter row. Without it the
                row is only written when the last line has no marker.
        """
        lno_width = code.line_number_width()
        self._blank_gutter(sink, lno_width)

        previous: int | None = None
        for line in code:
            if previous is not None and previous + 1 != line.line_number:
                self._rule(sink, "...")
                sink.write("\n")
            previous = line.line_number
            self.render_line(line, sink, lno_width=lno_width)

        if extend or not code.end_marker():
            self._blank_gutter(sink, lno_width)

    def render_help(self, help: Help, sink: Sink, *, extend: bool) -> None:
        """Write a ``help:`` row followed by the suggested revision, if any."""
        sink.write(f"{bold()}{color(self.palette.help)}help{reset()}: {help.message}\n")
        if help.suggestion is not None:
            self.render_code(help.suggestion, sink, extend=extend)

    def render_note(self, note: Note, sink: Sink, *, indent: int | None = None) -> None:
        """Write a ``note:`` row.

        Args:
            note (Note): The note to write.
            sink (Sink): Destination of the styled text.
            indent (int | None): Gutter width of the enclosing warning. When
                given, the row is prefixed with ``" = "`` right-aligned to
                ``indent + 3`` columns.
        """
        if indent is not None:
            self._rule(sink, " = ".rjust(indent + 3))
        sink.write(f"{bold()}note{reset()}: {note.message}\n")

    def render_diagnostic(self, diagnostic: Diagnostic, sink: Sink) -> None:
        """Write a complete error or warning.

        Order is fixed: header, location, code block, helps, notes.
        """
        logger.trace(
            "Rendering %s %r (%d help(s), %d note(s))",
            diagnostic.level.value,
            diagnostic.message,
            len(diagnostic.helps),
            len(diagnostic.notes),
        )

        if isinstance(diagnostic, Error):
            label = f"error[{diagnostic.error_code}]"
            label_color = self.palette.error
        else:
            label = "warning"
            label_color = self.palette.warning
        sink.write(f"{bold()}{color(label_color)}{label}{reset()}")
        sink.write(f"{bold()}: {diagnostic.message}{reset()}\n")

        sink.write(f"{color(self.palette.location)} --> {reset()}{diagnostic.file}\n")

        last = not diagnostic.helps and not diagnostic.notes
        self.render_code(diagnostic.code, sink, extend=last)

        for help in diagnostic.helps:
            self.render_help(help, sink, extend=False)

        indent = (
            diagnostic.code.line_number_width()
            if diagnostic.level is DiagnosticLevel.WARNING
            else None
        )
        for note in diagnostic.notes:
            self.render_note(note, sink, indent=indent)

    def render_error(self, error: Error, sink: Sink) -> None:
        """Write a complete error."""
        self.render_diagnostic(error, sink)

    def render_warning(self, warning: Warning, sink: Sink) -> None:
        """Write a complete warning."""
        self.render_diagnostic(warning, sink)
