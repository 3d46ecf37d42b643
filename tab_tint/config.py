"""Configuration loading: user palette file and environment overrides."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

from .colors import DEFAULT_COLOR, PRESET_COLORS, is_hex_color
from .errors import ConfigError

logger = logging.getLogger(__name__)

# Config directory for tab-tint data
CONFIG_DIR = Path.home() / ".config" / "tab-tint"
DEFAULT_PALETTE_FILE = CONFIG_DIR / "colors.yaml"


def _parse_palette(data: Any, path: Path) -> dict[str, str]:
    """Validate the ``colors`` mapping of a palette file."""
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a YAML mapping")

    colors = data.get("colors") or {}
    if not isinstance(colors, dict):
        raise ConfigError(f"'colors' in {path} must be a mapping of name to hex value")

    palette: dict[str, str] = {}
    for name, value in colors.items():
        # YAML reads unquoted all-digit values such as 123456 as integers
        text = str(value).strip()
        if not is_hex_color(text):
            raise ConfigError(
                f"color '{name}' in {path} must be 6 hex digits (got {value!r})"
            )
        palette[str(name).lower()] = text.removeprefix("#").upper()
    return palette


def load_palette(
    config_path: str | None = None, env: Mapping[str, str] | None = None
) -> Mapping[str, str]:
    """Load the color palette: built-in presets overlaid with user entries.

    Args:
        config_path: Path to a YAML palette file. If None, checks:
            1. TAB_TINT_CONFIG environment variable
            2. ~/.config/tab-tint/colors.yaml

    Returns:
        Read-only mapping of lower-case name to 6-digit hex string.

    Raises:
        FileNotFoundError: If an explicit config path doesn't exist.
        ConfigError: If the file content is invalid.
    """
    env = os.environ if env is None else env

    if config_path is None:
        config_path = env.get("TAB_TINT_CONFIG")

    if config_path is None:
        if DEFAULT_PALETTE_FILE.exists():
            config_path = str(DEFAULT_PALETTE_FILE)
        else:
            return PRESET_COLORS

    path = Path(config_path).expanduser()
    if not path.exists():
        raise FileNotFoundError(f"Palette file not found: {path}")

    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ConfigError(f"invalid YAML in {path}: {exc}") from exc

    user_colors = _parse_palette(data, path)
    logger.debug("Loaded %d user colors from %s", len(user_colors), path)
    return MappingProxyType({**PRESET_COLORS, **user_colors})


@dataclass
class TabTintConfig:
    """Runtime settings for a tab controller."""

    palette: Mapping[str, str] = field(default_factory=lambda: PRESET_COLORS)
    default_color: str = DEFAULT_COLOR
    wt_settings_path: str | None = None

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> TabTintConfig:
        """Build settings from TAB_TINT_* environment variables."""
        env = os.environ if env is None else env
        return cls(
            palette=load_palette(env=env),
            default_color=env.get("TAB_TINT_DEFAULT_COLOR") or DEFAULT_COLOR,
            wt_settings_path=env.get("TAB_TINT_WT_SETTINGS") or None,
        )
