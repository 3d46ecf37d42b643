"""Tab controller: spawn-title memory plus set, reset, info and dispatch."""

from __future__ import annotations

import re
import threading
from collections.abc import Sequence
from dataclasses import dataclass, field

from .colors import DEFAULT_COLOR, ColorResolver, RGBColor
from .config import TabTintConfig
from .terminal import TerminalEnvironment, WindowsTerminalEnvironment

RESET_FLAG = "--reset"

# "<title>|<word>": the title holds no pipe, the color is letters/digits only
DIRECTIVE_PATTERN = re.compile(r"^([^|]+)\|([A-Za-z0-9]+)$")

USAGE_TEXT = """\
Usage:
  tab TITLE [COLOR]     Set the tab title and accent color
  tab "TITLE|COLOR"     Same, as a single argument
  tab --reset [COLOR]   Restore the tab's original title
  tab info              Show title, profile and session details
  tab colors            List color presets

COLOR is a preset name or a 6-digit hex value (3498DB or #3498DB)."""


@dataclass(frozen=True)
class TabResult:
    """What was applied to the tab."""

    title: str
    color: str
    rgb: RGBColor


@dataclass(frozen=True)
class UsageInfo:
    """Returned by dispatch when there is nothing to apply."""

    text: str
    colors: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class TabInfo:
    """Snapshot of the tab's identity and session."""

    current_title: str | None
    spawn_title: str
    profile_id: str | None
    session_id: str | None
    profile_name: str | None


def parse_directive(text: str, default_color: str = DEFAULT_COLOR) -> tuple[str, str]:
    """Split ``"Title|color"`` into its parts.

    Anything that is not exactly one pipe followed by a bare word is treated
    as a title with the default color.
    """
    match = DIRECTIVE_PATTERN.match(text)
    if match is None:
        return text, default_color
    return match.group(1), match.group(2)


class TabController:
    """Changes and restores the title and accent color of the current tab."""

    def __init__(
        self,
        terminal: TerminalEnvironment | None = None,
        resolver: ColorResolver | None = None,
        config: TabTintConfig | None = None,
    ) -> None:
        self.config = config or TabTintConfig()
        self.terminal = terminal or WindowsTerminalEnvironment(
            settings_path=self.config.wt_settings_path
        )
        self.resolver = resolver or ColorResolver(self.config.palette)
        self._spawn_title: str | None = None
        self._spawn_lock = threading.Lock()

    @property
    def default_color(self) -> str:
        return self.config.default_color

    def get_spawn_title(self) -> str:
        """Return the title the tab had before this process changed it.

        The first call looks up the terminal profile name, falling back to the
        live window title, and the result is kept for the controller's life.
        """
        with self._spawn_lock:
            if self._spawn_title is None:
                title = self.terminal.get_profile_name()
                if not title:
                    title = self.terminal.get_window_title() or ""
                self._spawn_title = title
            return self._spawn_title

    def set_tab(self, title: str, color: str | None = None) -> TabResult:
        """Apply ``title`` and ``color``; raises InvalidColorError for bad colors."""
        # Capture the original title before this process overwrites it
        self.get_spawn_title()
        color = color or self.default_color
        rgb = self.resolver.resolve(color)
        self.terminal.set_window_title(title)
        self.terminal.emit_color_sequence(rgb)
        return TabResult(title=title, color=color, rgb=rgb)

    def reset_tab(self, color: str | None = None) -> TabResult:
        return self.set_tab(self.get_spawn_title(), color)

    def parse_directive(self, text: str) -> tuple[str, str]:
        return parse_directive(text, self.default_color)

    def usage(self) -> UsageInfo:
        return UsageInfo(text=USAGE_TEXT, colors=self.resolver.names())

    def dispatch(self, args: Sequence[str]) -> TabResult | UsageInfo:
        """Run the ``tab`` command for positional ``args``.

        ``[]`` gives usage, ``["--reset", color?]`` resets, ``[title]`` is
        read as a directive, and ``[title, color]`` is applied as given.
        """
        if not args:
            return self.usage()

        first = args[0]
        second = args[1] if len(args) > 1 and args[1] else None

        if first == RESET_FLAG:
            return self.reset_tab(second)
        if not first:
            return self.usage()
        if second is None:
            title, color = self.parse_directive(first)
            return self.set_tab(title, color)
        return self.set_tab(first, second)

    def get_tab_info(self) -> TabInfo:
        return TabInfo(
            current_title=self.terminal.get_window_title(),
            spawn_title=self.get_spawn_title(),
            profile_id=self.terminal.get_session_profile_id(),
            session_id=self.terminal.get_session_id(),
            profile_name=self.terminal.get_profile_name(),
        )
