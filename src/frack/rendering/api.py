# topmark:header:start
#
#   project      : Frack
#   file         : api.py
#   file_relpath : src/frack/rendering/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""High-level helpers for rendering diagnostics.

These wrap `DiagnosticRenderer` for the common cases: writing a diagnostic
to a stream, or getting the styled text as a string.
"""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

from frack.rendering.renderer import DiagnosticRenderer

if TYPE_CHECKING:
    from frack.config.model import Palette
    from frack.rendering.renderer import Renderable, Sink


def write_diagnostic(
    entity: Renderable,
    sink: Sink,
    *,
    palette: Palette | None = None,
    extend: bool = False,
) -> None:
    """Render ``entity`` into ``sink``.

    Args:
        entity (Renderable): A diagnostic or any of its parts.
        sink (Sink): Destination stream; write errors propagate.
        palette (Palette | None): Optional color overrides.
        extend (bool): Forwarded to code blocks rendered directly.
    """
    DiagnosticRenderer(palette).render(entity, sink, extend)


def render_to_string(
    entity: Renderable,
    *,
    palette: Palette | None = None,
    extend: bool = False,
) -> str:
    """Render ``entity`` and return the styled text.

    Args:
        entity (Renderable): A diagnostic or any of its parts.
        palette (Palette | None): Optional color overrides.
        extend (bool): Forwarded to code blocks rendered directly.

    Returns:
        str: The rendered rows, each terminated by a newline.
    """
    buffer = io.StringIO()
    write_diagnostic(entity, buffer, palette=palette, extend=extend)
    return buffer.getvalue()
