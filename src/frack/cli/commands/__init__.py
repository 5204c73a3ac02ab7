# topmark:header:start
#
#   project      : Frack
#   file         : __init__.py
#   file_relpath : src/frack/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Frack CLI commands."""
