"""CLI package for tab-tint."""

import sys

from .state import app, build_controller, console

# Import subcommand modules so their @app.command() decorators register
from . import admin as _admin  # noqa: F401
from . import main_cmd as _main_cmd  # noqa: F401

from .main_cmd import main

SUBCOMMANDS = {"main", "info", "colors"}


def cli() -> None:
    """CLI entrypoint with `main` as the default command."""
    args = sys.argv[1:]

    if not args or args[0] not in SUBCOMMANDS:
        args = ["main", *args]

    app(args=args, prog_name="tab")


__all__ = [
    "SUBCOMMANDS",
    "app",
    "build_controller",
    "cli",
    "console",
    "main",
]


if __name__ == "__main__":
    cli()
