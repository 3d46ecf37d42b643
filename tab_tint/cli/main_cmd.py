"""Main CLI command: tab entry point."""

from typing import Annotated

import typer
from dotenv import load_dotenv

load_dotenv()

from ..controller import RESET_FLAG, UsageInfo
from ..errors import TabTintError
from ..ui.theme import THEME
from .formatting import _get_version, _markup, format_result, format_usage
from .state import app, build_controller, console


@app.command()
def main(
    title: Annotated[
        str | None,
        typer.Argument(
            metavar="TITLE",
            help="Tab title, or 'Title|color' (with --reset: the color)",
        ),
    ] = None,
    color: Annotated[
        str | None,
        typer.Argument(metavar="COLOR", help="Preset name or 6-digit hex color"),
    ] = None,
    reset: Annotated[
        bool,
        typer.Option("--reset", help="Restore the tab's original title"),
    ] = False,
    version: Annotated[
        bool,
        typer.Option("--version", help="Show version and exit"),
    ] = False,
) -> None:
    """Set the title and accent color of the current tab."""
    if version:
        console.print(f"tab-tint {_get_version()}")
        raise typer.Exit(0)

    if reset:
        if title is not None and color is not None:
            console.print(
                _markup(
                    f"Unexpected argument '{color}': --reset takes at most one COLOR.",
                    THEME.error,
                )
            )
            raise typer.Exit(1)
        reset_color = title or color
        args = [RESET_FLAG, reset_color] if reset_color else [RESET_FLAG]
    else:
        args = [value for value in (title, color) if value is not None]

    try:
        controller = build_controller()
        outcome = controller.dispatch(args)
    except (TabTintError, FileNotFoundError) as e:
        console.print(_markup(str(e), THEME.error))
        raise typer.Exit(1) from e

    if isinstance(outcome, UsageInfo):
        console.print(format_usage(outcome))
        return
    console.print(format_result(outcome))
