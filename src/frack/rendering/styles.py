# topmark:header:start
#
#   project      : Frack
#   file         : styles.py
#   file_relpath : src/frack/rendering/styles.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ANSI escape sequences used by the diagnostic renderer.

The renderer always emits styling; there is no terminal capability detection.
Colors use the 8-bit palette (``ESC[38;5;<n>m``), see
<https://wikipedia.org/wiki/ANSI_escape_code#8-bit>.
"""

from __future__ import annotations

from typing import Final

ESC: Final[str] = "\x1b"

BOLD: Final[str] = f"{ESC}[1m"
RESET: Final[str] = f"{ESC}[0m"


def bold() -> str:
    """Return the escape sequence that turns on bold text."""
    return BOLD


def color(index: int) -> str:
    """Return the escape sequence selecting foreground color ``index``.

    Args:
        index (int): Index into the 8-bit palette (0..255).

    Returns:
        str: The ``ESC[38;5;<index>m`` sequence.

    Raises:
        ValueError: If ``index`` is outside the 8-bit palette.
    """
    if not 0 <= index <= 255:
        raise ValueError(f"color index must be in 0..255, got {index}")
    return f"{ESC}[38;5;{index}m"


def reset() -> str:
    """Return the escape sequence that clears all styling."""
    return RESET
