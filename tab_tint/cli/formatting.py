"""Display helpers for CLI output."""

from __future__ import annotations

import importlib.metadata
from collections.abc import Mapping

from rich.markup import escape
from rich.table import Table

from ..controller import TabInfo, TabResult, UsageInfo
from ..ui.theme import THEME


def _markup(text: str, color: str) -> str:
    """Wrap text in Rich markup with the given color, escaping special chars."""
    return f"[{color}]{escape(text)}[/{color}]"


def _swatch(hex_value: str) -> str:
    return f"[on #{hex_value}]    [/]"


def _get_version() -> str:
    """Return the installed package version or 'dev' if not installed."""
    try:
        return importlib.metadata.version("tab-tint")
    except importlib.metadata.PackageNotFoundError:
        return "dev"


def format_result(result: TabResult) -> str:
    return (
        f"{_swatch(result.rgb.hex)} {_markup(result.title or '(empty title)', THEME.primary)} "
        f"{_markup(f'{result.color} #{result.rgb.hex}', THEME.muted)}"
    )


def format_usage(usage: UsageInfo) -> str:
    colors = ", ".join(usage.colors)
    return f"{escape(usage.text)}\n\n{_markup('Colors: ', THEME.secondary)}{escape(colors)}"


def _value(value: str | None) -> str:
    if value:
        return _markup(value, THEME.primary)
    return "[dim]-[/dim]"


def info_table(info: TabInfo) -> Table:
    table = Table(show_header=True, header_style=THEME.secondary)
    table.add_column("Field")
    table.add_column("Value")
    table.add_row("Current title", _value(info.current_title))
    table.add_row("Spawn title", _value(info.spawn_title))
    table.add_row("Profile name", _value(info.profile_name))
    table.add_row("Profile ID", _value(info.profile_id))
    table.add_row("Session ID", _value(info.session_id))
    return table


def colors_table(palette: Mapping[str, str]) -> Table:
    table = Table(show_header=True, header_style=THEME.secondary)
    table.add_column("Name")
    table.add_column("Hex")
    table.add_column("")
    for name, hex_value in palette.items():
        value = hex_value.removeprefix("#").upper()
        table.add_row(_markup(name, THEME.accent), f"#{value}", _swatch(value))
    return table
