"""Loading table options from configuration files and the environment.

A configuration file is a YAML (or JSON) mapping::

    padding: 2
    charset: rounded
    characters:
      vertical: "┃"
    headers:
      name: Name
      age: Age

``charset`` picks a preset and ``characters`` overrides single roles on top
of it. Renderers are code, so they can't be configured from a file.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .charsets import DEFAULT_CHARSET, get_charset
from .exceptions import ConfigurationError
from .models import FrameCharacters, TableOptions

PADDING_ENV_VAR = "BOXGRID_PADDING"
"""Environment variable for overriding the default padding of the CLI."""

CHARSET_ENV_VAR = "BOXGRID_CHARSET"
"""Environment variable for overriding the default character set of the CLI."""

CONFIG_KEYS = frozenset({"headers", "padding", "charset", "characters"})


def options_from_dict(d: Mapping[str, Any], **overrides: Any) -> TableOptions:
    """
    Build table options from a configuration mapping.

    Args:
        d: Configuration mapping with any of the keys ``headers``,
            ``padding``, ``charset`` and ``characters``
        **overrides: ``TableOptions`` fields that take precedence over
            the mapping (e.g. renderers)

    Returns:
        Validated table options

    Raises:
        ConfigurationError: If the mapping has unknown keys or invalid values
    """
    unknown = sorted(set(d) - CONFIG_KEYS)
    if unknown:
        raise ConfigurationError(f"Unknown configuration key(s): {', '.join(unknown)}")

    headers = d.get("headers") or {}
    if not isinstance(headers, Mapping):
        raise ConfigurationError("'headers' must be a mapping of column key to label")

    characters = _characters(d.get("charset"), d.get("characters"))

    kwargs: dict[str, Any] = {"headers": dict(headers), "characters": characters}
    if d.get("padding") is not None:
        kwargs["padding"] = d["padding"]
    kwargs.update(overrides)
    return TableOptions(**kwargs)


def _characters(charset: Any, characters: Any) -> FrameCharacters:
    base = get_charset(str(charset)) if charset else get_charset(DEFAULT_CHARSET)
    if characters is None:
        return base
    if not isinstance(characters, Mapping):
        raise ConfigurationError("'characters' must be a mapping of role to glyph")
    return FrameCharacters.from_dict(characters, base=base)


def load_config(path: str | Path) -> dict[str, Any]:
    """
    Read a configuration file.

    Raises:
        ConfigurationError: If the file is not a YAML mapping
    """
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid configuration file {path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file {path} must contain a mapping")
    return data


def load_options(path: str | Path, **overrides: Any) -> TableOptions:
    """Build table options from a configuration file."""
    return options_from_dict(load_config(path), **overrides)
