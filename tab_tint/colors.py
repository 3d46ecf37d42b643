"""Color presets and token resolution."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .errors import ConfigError, InvalidColorError

HEX_PATTERN = re.compile(r"[0-9a-fA-F]{6}")

DEFAULT_COLOR = "default"

# Built-in presets. Work-category names (bug, feature, ...) are aliases for
# common task types so a tab can be tagged by what it is used for.
PRESET_COLORS: Mapping[str, str] = MappingProxyType(
    {
        "red": "E74C3C",
        "green": "2ECC71",
        "blue": "3498DB",
        "purple": "9B59B6",
        "orange": "E67E22",
        "yellow": "F1C40F",
        "pink": "FF69B4",
        "cyan": "00BCD4",
        "bug": "C0392B",
        "feature": "27AE60",
        "research": "8E44AD",
        "refactor": "D35400",
        "devops": "16A085",
        "test": "F39C12",
        "default": "333333",
    }
)


@dataclass(frozen=True)
class RGBColor:
    """An 8-bit RGB triplet."""

    r: int
    g: int
    b: int

    @classmethod
    def from_hex(cls, value: str) -> RGBColor:
        """Build a color from exactly six hex digits (no ``#``)."""
        if not HEX_PATTERN.fullmatch(value):
            raise InvalidColorError(value)
        return cls(int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))

    @property
    def hex(self) -> str:
        return f"{self.r:02X}{self.g:02X}{self.b:02X}"

    def to_sequence_component(self) -> str:
        """Return the ``RR/GG/BB`` form used in ``rgb:`` color specs."""
        return f"{self.r:02X}/{self.g:02X}/{self.b:02X}"

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


def is_hex_color(value: str) -> bool:
    """Return True for a 6-digit hex string with an optional leading ``#``."""
    return bool(HEX_PATTERN.fullmatch(value.removeprefix("#")))


class ColorResolver:
    """Resolve color tokens against an immutable palette.

    Lookup is case-insensitive. Tokens that are not palette names are read as
    literal hex. Only 6-digit hex is accepted; 3-digit shorthand is rejected.
    """

    def __init__(self, palette: Mapping[str, str] | None = None) -> None:
        source = PRESET_COLORS if palette is None else palette
        entries: dict[str, str] = {}
        for name, value in source.items():
            if not isinstance(value, str) or not is_hex_color(value):
                raise ConfigError(f"color '{name}' must be 6 hex digits (got {value!r})")
            entries[name.lower()] = value.removeprefix("#").upper()
        # "default" must always resolve
        entries.setdefault(DEFAULT_COLOR, PRESET_COLORS[DEFAULT_COLOR])
        self._palette: Mapping[str, str] = MappingProxyType(entries)

    @property
    def palette(self) -> Mapping[str, str]:
        return self._palette

    def names(self) -> list[str]:
        """Palette names in definition order."""
        return list(self._palette)

    def resolve(self, token: str) -> RGBColor:
        """Resolve ``token`` to an RGB color or raise InvalidColorError."""
        stripped = token.removeprefix("#")
        value = self._palette.get(stripped.lower(), stripped)
        try:
            return RGBColor.from_hex(value.removeprefix("#"))
        except InvalidColorError:
            raise InvalidColorError(token) from None
