# topmark:header:start
#
#   project      : Frack
#   file         : __init__.py
#   file_relpath : src/frack/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Frack package.

Frack renders error and warning messages that look like the ones `rustc`
prints: a colored header, the source location, an excerpt of the code with
line numbers and an underline, help suggestions and notes. It ships a small
typed API and a ``frack`` command line tool.

All rendered text uses ANSI escape sequences; there is no way to turn
them off.
"""

from __future__ import annotations

from frack.diagnostic import (
    Code,
    Diagnostic,
    Error,
    File,
    Help,
    HelpSpec,
    Line,
    Marker,
    Note,
    Span,
    SuggestionSpec,
    Warning,
    build_error,
    build_warning,
)
from frack.rendering.api import render_to_string, write_diagnostic

__all__ = [
    "Code",
    "Diagnostic",
    "Error",
    "File",
    "Help",
    "HelpSpec",
    "Line",
    "Marker",
    "Note",
    "Span",
    "SuggestionSpec",
    "Warning",
    "build_error",
    "build_warning",
    "render_to_string",
    "write_diagnostic",
]
