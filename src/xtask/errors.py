# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy raised by xtask commands."""

from __future__ import annotations

import signal


class XtaskError(RuntimeError):
    """Base error for failures that terminate an xtask command."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


class ProcessSpawnError(XtaskError):
    """Raised when the child process could not be created."""


class ProcessWaitError(XtaskError):
    """Raised when the child process could not be waited on."""


class LintFailure(XtaskError):
    """Raised when the lint tool ran to completion but reported failure."""

    def __init__(self, tool: str, returncode: int) -> None:
        """Record the raw return code reported by the child process.

        Args:
            tool: Short name of the tool that failed, used in the message.
            returncode: Return code reported by :mod:`subprocess`.
        """

        self.returncode = returncode
        self.status = describe_exit_status(returncode)
        exit_code = returncode if 0 < returncode < 256 else 1
        super().__init__(f"{tool} failed: {self.status}", exit_code=exit_code)


def describe_exit_status(returncode: int) -> str:
    """Return a display string for ``returncode``.

    Negative values mean the child was terminated by a signal.

    Args:
        returncode: Return code reported by :mod:`subprocess`.

    Returns:
        str: ``exit status: N`` or ``signal: N (NAME)``.
    """

    if returncode >= 0:
        return f"exit status: {returncode}"
    signum = -returncode
    try:
        name = signal.Signals(signum).name
    except ValueError:
        return f"signal: {signum}"
    return f"signal: {signum} ({name})"


__all__ = [
    "LintFailure",
    "ProcessSpawnError",
    "ProcessWaitError",
    "XtaskError",
    "describe_exit_status",
]
