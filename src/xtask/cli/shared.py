# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging, errors, registration)."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import typer
from rich.console import Console
from rich.text import Text

from ..errors import XtaskError
from ..logging import colorize
from ..logging import fail as core_fail


@dataclass(slots=True)
class CLILogger:
    """Adapter around project logging helpers respecting CLI emoji settings."""

    console: Console
    use_emoji: bool
    use_color: bool = True
    debug_enabled: bool = False
    _key_value_re: re.Pattern[str] = re.compile(r"([\w-]+)=(\".*?\"|\S+)")

    def fail(self, message: str) -> None:
        """Log a failure message honouring emoji preferences."""

        core_fail(f"{colorize('error:', 'red', self.use_color)} {message}", use_emoji=self.use_emoji)

    def command(self, command_line: str) -> None:
        """Echo the command line about to run, unwrapped and unhighlighted.

        Args:
            command_line: Fully rendered command line.
        """

        self.console.print(Text(f"running: {command_line}"), soft_wrap=True)

    def error(self, exc: XtaskError) -> None:
        """Report ``exc`` and the OS error that caused it, when there is one.

        Args:
            exc: Error raised by an xtask operation.
        """

        self.fail(str(exc))
        cause = exc.__cause__
        if cause is not None:
            self.fail(f"caused by: {cause}")

    def debug(self, message: str) -> None:
        """Emit a debug message when debug logging is enabled.

        Args:
            message: Debug payload rendered with simple highlighting.
        """

        if not self.debug_enabled:
            return
        text = Text("[debug] ", style="bold cyan")
        cursor = 0
        for match in self._key_value_re.finditer(message):
            start, end = match.span()
            if start > cursor:
                text.append(message[cursor:start], style="dim")
            key, raw_value = match.group(1), match.group(2)
            text.append(key, style="bold magenta")
            text.append("=", style="dim")
            text.append(raw_value, style="bold blue" if key in {"cargo", "command"} else "bold green")
            cursor = end
        if cursor < len(message):
            text.append(message[cursor:], style="dim")
        self.console.print(text, soft_wrap=True)


def build_cli_logger(*, emoji: bool = False, debug: bool = False, no_color: bool = False) -> CLILogger:
    """Return a ``CLILogger`` writing to standard error.

    Args:
        emoji: Whether log output may include emoji glyphs.
        debug: Whether debug logging should be enabled.
        no_color: Whether terminal colour output should be disabled.

    Returns:
        CLILogger: Logger instance bound to a dedicated Rich console.
    """

    console = Console(stderr=True, no_color=no_color, highlight=False)
    return CLILogger(console=console, use_emoji=emoji, use_color=not no_color, debug_enabled=debug)


def register_command(
    app: typer.Typer,
    func: Callable[..., Any],
    *,
    name: str | None = None,
    help_text: str | None = None,
) -> None:
    """Register ``func`` as a command on ``app``.

    Args:
        app: Typer application receiving the command.
        func: Command callback.
        name: Optional explicit command name.
        help_text: Optional help text overriding the callback docstring.
    """

    app.command(name=name, help=help_text)(func)


__all__ = ["CLILogger", "build_cli_logger", "register_command"]
