"""tab-tint: set, inspect and restore the title and color of the current terminal tab."""

__version__ = "0.1.0"

from .colors import DEFAULT_COLOR, PRESET_COLORS, ColorResolver, RGBColor
from .config import TabTintConfig, load_palette
from .controller import (
    TabController,
    TabInfo,
    TabResult,
    UsageInfo,
    parse_directive,
)
from .errors import ConfigError, InvalidColorError, TabTintError
from .terminal import TerminalEnvironment, WindowsTerminalEnvironment

_default_controller: TabController | None = None


def get_controller() -> TabController:
    """Return the process-wide controller, creating it on first use."""
    global _default_controller
    if _default_controller is None:
        _default_controller = TabController(config=TabTintConfig.from_env())
    return _default_controller


def set_tab(title: str, color: str | None = None) -> TabResult:
    return get_controller().set_tab(title, color)


def reset_tab(color: str | None = None) -> TabResult:
    return get_controller().reset_tab(color)


def get_spawn_title() -> str:
    return get_controller().get_spawn_title()


def get_tab_info() -> TabInfo:
    return get_controller().get_tab_info()


__all__ = [
    "__version__",
    "DEFAULT_COLOR",
    "PRESET_COLORS",
    "ColorResolver",
    "ConfigError",
    "InvalidColorError",
    "RGBColor",
    "TabController",
    "TabInfo",
    "TabResult",
    "TabTintConfig",
    "TabTintError",
    "TerminalEnvironment",
    "UsageInfo",
    "WindowsTerminalEnvironment",
    "get_controller",
    "get_spawn_title",
    "get_tab_info",
    "load_palette",
    "parse_directive",
    "reset_tab",
    "set_tab",
]
