# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing logging helpers with optional colour and emoji support.

Everything here writes to standard error; standard output belongs to the
child process whose streams are inherited.
"""

from __future__ import annotations

import sys
from typing import TextIO

ANSI = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "red": "\033[31;1m",
}


def is_tty(stream: TextIO | None = None) -> bool:
    """Return ``True`` when ``stream`` (default stderr) appears to be a TTY."""

    target = sys.stderr if stream is None else stream
    try:
        return target.isatty()
    except (AttributeError, ValueError):  # pragma: no cover - closed or replaced stream
        return False


def colorize(text: str, code: str, enable: bool) -> str:
    """Wrap ``text`` in ANSI colour codes when *enable* is truthy."""

    if not enable or not is_tty():
        return text
    return f"{ANSI.get(code, '')}{text}{ANSI['reset']}"


def emoji(symbol: str, enable: bool) -> str:
    """Return *symbol* when emoji output is enabled, otherwise blank."""

    return symbol if enable else ""


def fail(msg: str, *, use_emoji: bool) -> None:
    """Emit an error message."""

    print(f"{emoji('❌ ', use_emoji)}{msg}", file=sys.stderr)


__all__ = ["colorize", "emoji", "fail", "is_tty"]
