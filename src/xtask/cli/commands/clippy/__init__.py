# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Clippy CLI command package."""

from __future__ import annotations

import typer

from ...shared import register_command
from .command import clippy

__all__ = ["register"]


def register(app: typer.Typer) -> None:
    """Register the clippy command.

    Args:
        app: Typer application receiving the clippy command registration.
    """

    register_command(app, clippy, name="clippy")
