# topmark:header:start
#
#   project      : Frack
#   file         : model.py
#   file_relpath : src/frack/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable configuration for rendering and building diagnostics.

Sections:
    * Palette: 8-bit colors used by the renderer for labels and gutter rules.
    * BuilderDefaults: symbols and marker colors applied by the builder.
    * FrackConfig: the frozen snapshot combining both, plus where it came from.

The defaults reproduce the look of `rustc`: red errors, yellow warnings,
blue gutters and arrows, cyan help labels and green suggestions.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class ConfigError(Exception):
    """Raised when a configuration source cannot be read or is malformed."""


def _check_color(owner: object, name: str, value: int) -> None:
    if not 0 <= value <= 255:
        raise ValueError(
            f"{type(owner).__name__}.{name} must be an 8-bit color (0..255), got {value}"
        )


@dataclass(frozen=True)
class Palette:
    """Colors of the fixed parts of a rendered diagnostic.

    Attributes:
        error: Color of the ``error[...]`` label.
        warning: Color of the ``warning`` label.
        location: Color of the `` --> `` arrow, gutter rules, line numbers and ellipses.
        help: Color of the ``help`` label.
    """

    error: int = 9
    warning: int = 3
    location: int = 12
    help: int = 14

    def __post_init__(self) -> None:
        for f in fields(self):
            _check_color(self, f.name, getattr(self, f.name))


@dataclass(frozen=True)
class BuilderDefaults:
    """Marker styling applied when diagnostics are built from flat arguments.

    Attributes:
        symbol: Underline symbol of the primary marker.
        suggestion_symbol: Underline symbol of suggestion markers.
        error_marker: Primary marker color for errors.
        warning_marker: Primary marker color for warnings.
        suggestion: Suggestion marker color (also used for the inline span).
    """

    symbol: str = "^"
    suggestion_symbol: str = "~"
    error_marker: int = 9
    warning_marker: int = 3
    suggestion: int = 10

    def __post_init__(self) -> None:
        for name in ("symbol", "suggestion_symbol"):
            if len(getattr(self, name)) != 1:
                raise ValueError(f"BuilderDefaults.{name} must be a single character")
        for name in ("error_marker", "warning_marker", "suggestion"):
            _check_color(self, name, getattr(self, name))


@dataclass(frozen=True)
class FrackConfig:
    """Frozen configuration snapshot.

    Attributes:
        palette: Renderer colors.
        markers: Builder defaults.
        source: File the configuration was read from, if any.
    """

    palette: Palette = field(default_factory=Palette)
    markers: BuilderDefaults = field(default_factory=BuilderDefaults)
    source: Path | None = None
