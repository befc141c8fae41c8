# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Safe wrapper around interactive ``subprocess`` execution."""

from __future__ import annotations

import errno

# Bandit: subprocess usage is intentional; the wrapper passes argument lists
# directly and never enables ``shell=True``.
import subprocess  # nosec B404
from collections.abc import Sequence

from .errors import ProcessSpawnError, ProcessWaitError


def _normalize_args(program: str, args: Sequence[str]) -> list[str]:
    if not program:
        raise FileNotFoundError(errno.ENOENT, "program name is empty", program)
    return [program, *args]


def spawn_and_wait(program: str, args: Sequence[str]) -> int:
    """Run ``program`` with ``args`` and block until it exits.

    The child inherits stdin, stdout and stderr, so its output is passed
    straight through to the caller's terminal. There is no timeout. The
    process handle is reaped on every exit path, including interrupts.

    Args:
        program: Executable name (resolved via ``PATH``) or path.
        args: Arguments passed after the program name.

    Returns:
        int: Return code of the child; negative when killed by a signal.

    Raises:
        ProcessSpawnError: If the child process could not be created.
        ProcessWaitError: If waiting on the child process failed.
    """

    try:
        # Bandit: commands are assembled from fixed flags and validated
        # settings; no shell expansion takes place.
        process = subprocess.Popen(_normalize_args(program, args))  # nosec B603
    except OSError as exc:
        raise ProcessSpawnError("failed to spawn child process") from exc

    try:
        with process:
            return process.wait()
    except OSError as exc:
        raise ProcessWaitError("failed to wait for child process") from exc


__all__ = ["spawn_and_wait"]
