"""Icon configuration shared read-only by the formatter."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any


class ConfigError(ValueError):
    """Invalid or unreadable configuration."""


@dataclass(frozen=True, slots=True)
class IconConfig:
    """Material icon names used for decorations, plus optional glyph overrides."""

    haiku: str = "spa"
    credit: str = "star"
    glyphs: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "glyphs", MappingProxyType(dict(self.glyphs)))

    def glyph(self, name: str) -> str:
        """Text placed inside the icon element; the ligature name by default."""
        return self.glyphs.get(name, name)


_ICON_KEYS = ("haiku", "credit", "glyphs")


def load_config(path: Path) -> IconConfig:
    """Read ``[icons]`` settings from a TOML file."""
    try:
        with Path(path).open("rb") as fh:
            data = tomllib.load(fh)
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc

    return icon_config_from_mapping(data.get("icons", {}))


def icon_config_from_mapping(raw: Any) -> IconConfig:
    if not isinstance(raw, Mapping):
        raise ConfigError("[icons] must be a table")

    unknown = sorted(set(raw) - set(_ICON_KEYS))
    if unknown:
        raise ConfigError(f"Unknown icon settings: {', '.join(unknown)}")

    values: dict[str, Any] = {}
    for key in ("haiku", "credit"):
        if key in raw:
            if not isinstance(raw[key], str) or not raw[key]:
                raise ConfigError(f"icons.{key} must be a non-empty string")
            values[key] = raw[key]

    glyphs = raw.get("glyphs", {})
    if not isinstance(glyphs, Mapping) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in glyphs.items()
    ):
        raise ConfigError("icons.glyphs must map icon names to strings")

    return IconConfig(glyphs=glyphs, **values)
