# topmark:header:start
#
#   project      : Frack
#   file         : __init__.py
#   file_relpath : src/frack/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering engine for Frack diagnostics.

Public modules:
    - frack.rendering.styles: ANSI escape sequences.
    - frack.rendering.gutter: line-number gutter widths.
    - frack.rendering.renderer: the `DiagnosticRenderer`.
    - frack.rendering.api: `render_to_string` and `write_diagnostic`.
"""

from __future__ import annotations
