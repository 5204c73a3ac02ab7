# topmark:header:start
#
#   project      : Frack
#   file         : loaders.py
#   file_relpath : src/frack/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load Frack configuration from TOML.

Configuration lives either in a dedicated ``frack.toml`` or in the
``[tool.frack]`` table of a ``pyproject.toml``. Both documents use the same
sections:

```toml
[palette]
error = 9
warning = 3
location = 12
help = 14

[markers]
symbol = "^"
suggestion_symbol = "~"
error_marker = 9
warning_marker = 3
suggestion = 10
```

Parsing is done with `tomlkit`; unknown keys are logged and ignored.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import fields
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeVar, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from frack.config.logging import get_logger
from frack.config.model import BuilderDefaults, ConfigError, FrackConfig, Palette
from frack.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME

if TYPE_CHECKING:
    from frack.config.logging import FrackLogger

logger: FrackLogger = get_logger(__name__)

S = TypeVar("S", Palette, BuilderDefaults)

SECTION_PALETTE = "palette"
SECTION_MARKERS = "markers"


def _build_section(
    cls: type[S], data: Mapping[str, Any], section: str, source: Path | None
) -> S:
    """Build one section dataclass from a TOML table, validating value types."""
    known = {f.name: type(f.default) for f in fields(cls)}
    kwargs: dict[str, Any] = {}
    for key, value in data.items():
        expected = known.get(key)
        if expected is None:
            logger.warning("Ignoring unknown key [%s].%s in %s", section, key, source or "<mapping>")
            continue
        # bool is an int subclass; TOML booleans are never valid here
        if isinstance(value, bool) or not isinstance(value, expected):
            raise ConfigError(
                f"[{section}].{key} must be of type {expected.__name__}, "
                f"got {type(value).__name__}"
            )
        kwargs[key] = value
    try:
        return cls(**kwargs)
    except ValueError as exc:
        raise ConfigError(str(exc)) from exc


def config_from_mapping(data: Mapping[str, Any], *, source: Path | None = None) -> FrackConfig:
    """Build a `FrackConfig` from an already parsed TOML table.

    Args:
        data: Top-level table with optional ``palette`` and ``markers`` sections.
        source: Where ``data`` came from, recorded on the result.

    Returns:
        The frozen configuration.

    Raises:
        ConfigError: If ``data`` or a section is not a table, or holds invalid values.
    """
    if not isinstance(data, Mapping):
        raise ConfigError(f"Configuration in {source or '<mapping>'} must be a table")

    sections: dict[str, Mapping[str, Any]] = {}
    for name in (SECTION_PALETTE, SECTION_MARKERS):
        table = data.get(name, {})
        if not isinstance(table, dict):
            raise ConfigError(f"[{name}] must be a table")
        sections[name] = cast("Mapping[str, Any]", table)

    for key in data:
        if key not in sections:
            logger.warning("Ignoring unknown section [%s] in %s", key, source or "<mapping>")

    return FrackConfig(
        palette=_build_section(Palette, sections[SECTION_PALETTE], SECTION_PALETTE, source),
        markers=_build_section(BuilderDefaults, sections[SECTION_MARKERS], SECTION_MARKERS, source),
        source=source,
    )


def load_config_file(path: Path) -> FrackConfig:
    """Read a ``frack.toml`` or ``pyproject.toml`` file.

    For ``pyproject.toml`` only the ``[tool.frack]`` table is considered; a
    missing table yields the defaults.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc

    try:
        doc: dict[str, Any] = tomlkit.parse(text).unwrap()
    except TomlkitParseError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc

    if path.name == PYPROJECT_FILE_NAME:
        tool = doc.get("tool", {})
        if not isinstance(tool, dict):
            raise ConfigError(f"[tool] must be a table in {path}")
        doc = tool.get("frack", {})
        if not isinstance(doc, dict):
            raise ConfigError(f"[tool.frack] must be a table in {path}")

    logger.debug("Loaded configuration from %s", path)
    return config_from_mapping(doc, source=path)


def discover_config(directory: Path | None = None) -> FrackConfig:
    """Return the configuration found in ``directory`` (default: the CWD).

    ``frack.toml`` wins over ``pyproject.toml``; without either, the built-in
    defaults are returned.
    """
    base = directory or Path.cwd()
    for name in (CONFIG_FILE_NAME, PYPROJECT_FILE_NAME):
        candidate = base / name
        if candidate.is_file():
            return load_config_file(candidate)
    logger.debug("No configuration file in %s; using defaults", base)
    return FrackConfig()
