# topmark:header:start
#
#   project      : Frack
#   file         : gutter.py
#   file_relpath : src/frack/rendering/gutter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line-number gutter arithmetic.

Every row of a code block (numbered lines, ``" |"`` rows, underline rows and
``" = "`` note prefixes) is padded to the same gutter width so the vertical
rule lines up. Nested suggestion blocks compute their own width.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


def width(line_number: int) -> int:
    """Return the number of decimal digits in ``line_number`` (at least 1)."""
    return len(str(abs(line_number)))


def block_width(line_numbers: Iterable[int]) -> int:
    """Return the widest line number in a block, or 1 for an empty block."""
    return max((width(n) for n in line_numbers), default=1)
