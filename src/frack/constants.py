# topmark:header:start
#
#   project      : Frack
#   file         : constants.py
#   file_relpath : src/frack/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Frack Constants."""

from __future__ import annotations

PROG_NAME: str = "frack"

CONFIG_FILE_NAME: str = "frack.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"

# Location reported for diagnostics generated from the command line
DEFAULT_PATH: str = "src/main.rs"
DEFAULT_LINE: int = 7
