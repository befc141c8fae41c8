# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands and shared callbacks."""

from __future__ import annotations

from typing import Annotated

import typer

from .. import __version__
from .commands import register_commands
from .typer_ext import TyperAppConfig, create_typer

app = create_typer(config=TyperAppConfig(name="xtask", help_text="Workspace development tasks."))


def _print_version(value: bool) -> None:
    if value:
        typer.echo(f"xtask {__version__}")
        raise typer.Exit(code=0)


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_print_version,
            is_eager=True,
            help="Show the installed version and exit.",
        ),
    ] = False,
) -> None:
    """Workspace development tasks."""


register_commands(app)

__all__ = ["app"]
