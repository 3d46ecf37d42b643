"""Host terminal access: window title, tab color sequence, session lookup."""

from __future__ import annotations

import json
import logging
import os
import re
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Protocol, TextIO

from .colors import RGBColor

logger = logging.getLogger(__name__)

# Palette slot Windows Terminal reads as the active tab's color
TAB_COLOR_INDEX = 264

ESC = "\x1b"
BEL = "\x07"

WT_SETTINGS_CANDIDATES = (
    Path("Packages") / "Microsoft.WindowsTerminal_8wekyb3d8bbwe" / "LocalState" / "settings.json",
    Path("Packages")
    / "Microsoft.WindowsTerminalPreview_8wekyb3d8bbwe"
    / "LocalState"
    / "settings.json",
    Path("Microsoft") / "Windows Terminal" / "settings.json",
)

# Full-line and trailing // comments outside of strings
_LINE_COMMENT = re.compile(r'("(?:\\.|[^"\\])*")|//[^\n]*')


class TerminalEnvironment(Protocol):
    """What a tab controller needs from the host terminal and session."""

    def get_window_title(self) -> str | None: ...

    def set_window_title(self, title: str) -> None: ...

    def emit_color_sequence(self, rgb: RGBColor) -> None: ...

    def get_session_profile_id(self) -> str | None: ...

    def get_session_id(self) -> str | None: ...

    def get_profile_name(self) -> str | None: ...


def color_sequence(rgb: RGBColor) -> str:
    """Return the OSC 4 sequence that sets the tab color slot."""
    return f"{ESC}]4;{TAB_COLOR_INDEX};rgb:{rgb.to_sequence_component()}{BEL}"


def title_sequence(title: str) -> str:
    """Return the OSC 0 sequence that sets the window title."""
    return f"{ESC}]0;{title}{BEL}"


def _strip_json_comments(text: str) -> str:
    return _LINE_COMMENT.sub(lambda m: m.group(1) or "", text)


def _normalize_guid(value: str) -> str:
    return value.strip().strip("{}").lower()


def find_profile_name(settings: Any, profile_id: str) -> str | None:
    """Return the ``name`` of the profile whose guid matches ``profile_id``."""
    if not isinstance(settings, dict):
        return None
    profiles = settings.get("profiles")
    if isinstance(profiles, dict):
        profiles = profiles.get("list")
    if not isinstance(profiles, list):
        return None

    wanted = _normalize_guid(profile_id)
    for entry in profiles:
        if not isinstance(entry, dict):
            continue
        guid = entry.get("guid")
        if isinstance(guid, str) and _normalize_guid(guid) == wanted:
            name = entry.get("name")
            return name if isinstance(name, str) and name else None
    return None


class WindowsTerminalEnvironment:
    """TerminalEnvironment backed by the process environment and Windows Terminal.

    Titles go through the console API on Windows and OSC 0 elsewhere. Since
    POSIX terminals offer no portable way to read the title back, the last
    title written by this instance is reported instead.
    """

    def __init__(
        self,
        env: Mapping[str, str] | None = None,
        settings_path: str | None = None,
        stream: TextIO | None = None,
        platform: str | None = None,
    ) -> None:
        self._env = os.environ if env is None else env
        self._settings_path = settings_path
        self._stream = stream
        self._platform = platform or sys.platform
        self._last_title: str | None = None

    @property
    def stream(self) -> TextIO:
        return self._stream or sys.stdout

    def _write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()

    def get_window_title(self) -> str | None:
        if self._platform == "win32":
            import ctypes

            buffer = ctypes.create_unicode_buffer(1024)
            length = ctypes.windll.kernel32.GetConsoleTitleW(buffer, len(buffer))
            if length:
                return buffer.value
        return self._last_title

    def set_window_title(self, title: str) -> None:
        if self._platform == "win32":
            import ctypes

            ctypes.windll.kernel32.SetConsoleTitleW(title)
        else:
            self._write(title_sequence(title))
        self._last_title = title

    def emit_color_sequence(self, rgb: RGBColor) -> None:
        self._write(color_sequence(rgb))

    def get_session_profile_id(self) -> str | None:
        return self._env.get("WT_PROFILE_ID") or None

    def get_session_id(self) -> str | None:
        return self._env.get("WT_SESSION") or None

    def settings_file(self) -> Path | None:
        """Locate the Windows Terminal settings file, if any."""
        explicit = self._settings_path or self._env.get("TAB_TINT_WT_SETTINGS")
        if explicit:
            return Path(explicit).expanduser()

        local_app_data = self._env.get("LOCALAPPDATA")
        if not local_app_data:
            return None
        for candidate in WT_SETTINGS_CANDIDATES:
            path = Path(local_app_data) / candidate
            if path.exists():
                return path
        return None

    def get_profile_name(self) -> str | None:
        profile_id = self.get_session_profile_id()
        if not profile_id:
            return None

        path = self.settings_file()
        if path is None:
            logger.debug("No Windows Terminal settings file found")
            return None

        try:
            text = path.read_text(encoding="utf-8-sig")
            settings = json.loads(_strip_json_comments(text))
        except (OSError, ValueError) as exc:
            logger.debug("Could not read profile name from %s: %s", path, exc)
            return None

        return find_profile_name(settings, profile_id)
