# topmark:header:start
#
#   project      : Frack
#   file         : __init__.py
#   file_relpath : src/frack/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic data model and builders.

Design:
    - Diagnostics are immutable `Error` or `Warning` values owning their
      `File`, `Code` block, `Help` entries and `Note` entries.
    - Values are validated on construction; rendering never fails on content.
    - `build_error` / `build_warning` fill in default symbols and colors.
"""

from __future__ import annotations

from frack.diagnostic.builder import (
    HelpSpec,
    SuggestionSpec,
    build_error,
    build_helps,
    build_warning,
)
from frack.diagnostic.model import (
    Code,
    Diagnostic,
    DiagnosticLevel,
    Error,
    File,
    Help,
    Line,
    Marker,
    MarkerRangeError,
    Note,
    Span,
    Warning,
)

__all__ = [
    "Code",
    "Diagnostic",
    "DiagnosticLevel",
    "Error",
    "File",
    "Help",
    "HelpSpec",
    "Line",
    "Marker",
    "MarkerRangeError",
    "Note",
    "Span",
    "SuggestionSpec",
    "Warning",
    "build_error",
    "build_helps",
    "build_warning",
]
