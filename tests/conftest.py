# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

import pytest

from xtask import clippy as clippy_module
from xtask.config import CARGO_ENV_VAR, DEBUG_ENV_VAR


@dataclass(slots=True)
class FakeSpawn:
    """Stand-in for :func:`xtask.process_utils.spawn_and_wait`."""

    returncode: int = 0
    error: Exception | None = None
    calls: list[tuple[str, tuple[str, ...]]] = field(default_factory=list)

    def __call__(self, program: str, args: Sequence[str]) -> int:
        self.calls.append((program, tuple(args)))
        if self.error is not None:
            raise self.error
        return self.returncode


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the caller's environment from leaking into settings."""
    monkeypatch.delenv(CARGO_ENV_VAR, raising=False)
    monkeypatch.delenv(DEBUG_ENV_VAR, raising=False)


@pytest.fixture
def fake_spawn(monkeypatch: pytest.MonkeyPatch) -> FakeSpawn:
    """Replace process spawning in the clippy runner with a recorder."""
    fake = FakeSpawn()
    monkeypatch.setattr(clippy_module, "spawn_and_wait", fake)
    return fake
