"""Inspection commands: info, colors."""

from __future__ import annotations

import typer

from ..errors import TabTintError
from ..ui.theme import THEME
from .formatting import _markup, colors_table, info_table
from .state import app, build_controller, console


@app.command()
def info() -> None:
    """Show the tab's current and spawn titles plus session details."""
    try:
        controller = build_controller()
    except (TabTintError, FileNotFoundError) as e:
        console.print(_markup(str(e), THEME.error))
        raise typer.Exit(1) from e

    console.print(info_table(controller.get_tab_info()))


@app.command()
def colors() -> None:
    """List color presets, including entries from the user palette file."""
    try:
        controller = build_controller()
    except (TabTintError, FileNotFoundError) as e:
        console.print(_markup(str(e), THEME.error))
        raise typer.Exit(1) from e

    console.print(colors_table(controller.resolver.palette))
