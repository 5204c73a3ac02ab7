# topmark:header:start
#
#   project      : Frack
#   file         : __init__.py
#   file_relpath : src/frack/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command-line interface for Frack (Click based)."""
