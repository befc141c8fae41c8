# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the interactive subprocess wrapper."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from xtask import process_utils
from xtask.errors import ProcessSpawnError, ProcessWaitError
from xtask.process_utils import spawn_and_wait


def test_returns_child_exit_code() -> None:
    assert spawn_and_wait(sys.executable, ["-c", "raise SystemExit(3)"]) == 3


def test_returns_zero_on_success() -> None:
    assert spawn_and_wait(sys.executable, ["-c", "pass"]) == 0


def test_child_inherits_stdout(capfd: pytest.CaptureFixture[str]) -> None:
    spawn_and_wait(sys.executable, ["-c", "print('from child')"])
    assert "from child" in capfd.readouterr().out


def test_missing_executable_raises_spawn_error(tmp_path: Path) -> None:
    missing = tmp_path / "no-such-cargo"
    with pytest.raises(ProcessSpawnError, match="failed to spawn child process") as excinfo:
        spawn_and_wait(str(missing), ["clippy"])
    assert isinstance(excinfo.value.__cause__, OSError)
    assert excinfo.value.exit_code == 1


class _FakeProcess:
    """Popen stand-in whose ``wait`` outcome is scripted per call."""

    outcomes: list[BaseException | int] = []
    instances: list[_FakeProcess] = []

    def __init__(self, command: list[str]) -> None:
        self.command = command
        self.wait_calls = 0
        self.exited = False
        _FakeProcess.instances.append(self)

    def __enter__(self) -> _FakeProcess:
        return self

    def __exit__(self, exc_type: object, exc: object, traceback: object) -> None:
        self.exited = True
        if exc_type is not KeyboardInterrupt:
            self.wait()

    def wait(self) -> int:
        self.wait_calls += 1
        outcome = _FakeProcess.outcomes.pop(0) if _FakeProcess.outcomes else 0
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


@pytest.fixture
def fake_popen(monkeypatch: pytest.MonkeyPatch) -> type[_FakeProcess]:
    _FakeProcess.outcomes = []
    _FakeProcess.instances = []
    monkeypatch.setattr(process_utils.subprocess, "Popen", _FakeProcess)
    return _FakeProcess


def test_wait_failure_raises_wait_error(fake_popen: type[_FakeProcess]) -> None:
    fake_popen.outcomes = [OSError("wait interrupted")]
    with pytest.raises(ProcessWaitError, match="failed to wait for child process") as excinfo:
        spawn_and_wait("cargo", ["clippy"])
    assert str(excinfo.value.__cause__) == "wait interrupted"
    assert fake_popen.instances[0].exited


def test_handle_released_after_success(fake_popen: type[_FakeProcess]) -> None:
    fake_popen.outcomes = [7]
    assert spawn_and_wait("cargo", ["clippy"]) == 7
    process = fake_popen.instances[0]
    assert process.command == ["cargo", "clippy"]
    assert process.exited


def test_handle_released_on_interrupt(fake_popen: type[_FakeProcess]) -> None:
    fake_popen.outcomes = [KeyboardInterrupt()]
    with pytest.raises(KeyboardInterrupt):
        spawn_and_wait("cargo", ["clippy"])
    assert fake_popen.instances[0].exited


def test_empty_program_raises_spawn_error(fake_popen: type[_FakeProcess]) -> None:
    with pytest.raises(ProcessSpawnError, match="failed to spawn child process") as excinfo:
        spawn_and_wait("", ["clippy"])
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)
    assert fake_popen.instances == []
