# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for environment-derived settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from xtask.config import DEFAULT_CARGO, XtaskSettings


def test_defaults_when_unset() -> None:
    settings = XtaskSettings.from_env({})
    assert settings.cargo == DEFAULT_CARGO == "cargo"
    assert settings.debug is False


def test_cargo_override() -> None:
    settings = XtaskSettings.from_env({"CARGO": "/home/dev/.cargo/bin/cargo"})
    assert settings.cargo == "/home/dev/.cargo/bin/cargo"


def test_empty_cargo_is_kept_verbatim() -> None:
    assert XtaskSettings.from_env({"CARGO": ""}).cargo == ""


@pytest.mark.parametrize(("raw", "expected"), [("1", True), ("TRUE", True), ("on", True), ("0", False), ("", False), ("maybe", False)])
def test_debug_flag(raw: str, expected: bool) -> None:
    assert XtaskSettings.from_env({"XTASK_DEBUG": raw}).debug is expected


def test_reads_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CARGO", "cargo-nightly")
    assert XtaskSettings.from_env().cargo == "cargo-nightly"


def test_settings_are_frozen() -> None:
    settings = XtaskSettings()
    with pytest.raises(ValidationError):
        settings.cargo = "other"


def test_debug_accepts_bool_directly() -> None:
    assert XtaskSettings(debug=True).debug is True
