from __future__ import annotations

import pytest

from tab_tint.colors import RGBColor


class FakeTerminal:
    """In-memory TerminalEnvironment that records what was applied."""

    def __init__(
        self,
        window_title: str | None = "pwsh",
        profile_name: str | None = None,
        profile_id: str | None = None,
        session_id: str | None = None,
    ) -> None:
        self.window_title = window_title
        self.profile_name = profile_name
        self.profile_id = profile_id
        self.session_id = session_id
        self.colors: list[RGBColor] = []
        self.profile_lookups = 0
        self.title_lookups = 0

    def get_window_title(self) -> str | None:
        self.title_lookups += 1
        return self.window_title

    def set_window_title(self, title: str) -> None:
        self.window_title = title

    def emit_color_sequence(self, rgb: RGBColor) -> None:
        self.colors.append(rgb)

    def get_session_profile_id(self) -> str | None:
        return self.profile_id

    def get_session_id(self) -> str | None:
        return self.session_id

    def get_profile_name(self) -> str | None:
        self.profile_lookups += 1
        return self.profile_name


@pytest.fixture
def terminal() -> FakeTerminal:
    return FakeTerminal()
