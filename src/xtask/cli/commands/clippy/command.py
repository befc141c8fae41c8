# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI command running Cargo Clippy with the workspace lint policy."""

from __future__ import annotations

import typer

from ....clippy import run_clippy
from ....config import XtaskSettings
from ....errors import XtaskError
from ...shared import build_cli_logger
from .models import FIX_OPTION, PACKAGE_OPTION, build_clippy_options


def clippy(fix: FIX_OPTION = False, package: PACKAGE_OPTION = None) -> None:
    """Runs `cargo clippy`."""

    logger = build_cli_logger()
    options = build_clippy_options(fix, package)
    try:
        settings = XtaskSettings.from_env()
        logger.debug_enabled = settings.debug
        run_clippy(options, settings=settings, logger=logger)
    except XtaskError as exc:
        logger.error(exc)
        raise typer.Exit(code=exc.exit_code) from exc


__all__ = ["clippy"]
