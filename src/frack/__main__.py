# topmark:header:start
#
#   project      : Frack
#   file         : __main__.py
#   file_relpath : src/frack/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running Frack via ``python -m frack``.

Delegates to :func:`frack.cli.main.cli`, the same entry point as the
``frack`` console script.

Examples:
    Render a warning::

        python -m frack warning "unused variable" "    let x = 5;" 8-8
"""

from __future__ import annotations

from frack.cli.main import cli

if __name__ == "__main__":
    cli()
