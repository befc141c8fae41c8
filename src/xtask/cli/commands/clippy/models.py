# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parameter declarations for the clippy CLI command."""

from __future__ import annotations

from typing import Annotated

import typer

from ....clippy import ClippyOptions

FIX_OPTION = Annotated[
    bool,
    typer.Option(
        "--fix",
        help="Automatically apply lint suggestions (`clippy --fix`).",
    ),
]
PACKAGE_OPTION = Annotated[
    str | None,
    typer.Option(
        "--package",
        "-p",
        metavar="PACKAGE",
        help="The package to run Clippy against (`cargo clippy -p <PACKAGE>`).",
    ),
]


def build_clippy_options(fix: bool, package: str | None) -> ClippyOptions:
    """Construct ``ClippyOptions`` from Typer parameters."""

    return ClippyOptions(fix=fix, package=package)


__all__ = ["FIX_OPTION", "PACKAGE_OPTION", "build_clippy_options"]
