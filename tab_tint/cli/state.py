"""Shared CLI state: console, app and the tab controller."""

from __future__ import annotations

import typer
from rich.console import Console

from ..config import TabTintConfig
from ..controller import TabController

# Rich console for all output
console = Console()

# Typer app
app = typer.Typer(
    name="tab",
    help="Set, inspect and restore the title and accent color of the current terminal tab.",
    epilog=(
        "Examples:\n"
        '  tab "API server" blue\n'
        '  tab "Fix login|bug"\n'
        "  tab --reset\n"
        "  tab info\n"
        "  tab colors"
    ),
    add_completion=False,
)


def build_controller() -> TabController:
    """Create a controller from TAB_TINT_* settings."""
    return TabController(config=TabTintConfig.from_env())
