# topmark:header:start
#
#   project      : Frack
#   file         : __init__.py
#   file_relpath : src/frack/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging for Frack.

Configuration is an immutable `FrackConfig` snapshot (renderer `Palette` and
builder `BuilderDefaults`) read from ``frack.toml`` or ``[tool.frack]`` in
``pyproject.toml``.
"""

from __future__ import annotations

from frack.config.loaders import config_from_mapping, discover_config, load_config_file
from frack.config.model import BuilderDefaults, ConfigError, FrackConfig, Palette

__all__ = [
    "BuilderDefaults",
    "ConfigError",
    "FrackConfig",
    "Palette",
    "config_from_mapping",
    "discover_config",
    "load_config_file",
]
