# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Settings resolved from the process environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Final

from pydantic import BaseModel, ConfigDict, field_validator

CARGO_ENV_VAR: Final[str] = "CARGO"
DEFAULT_CARGO: Final[str] = "cargo"
DEBUG_ENV_VAR: Final[str] = "XTASK_DEBUG"
_TRUTHY: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})


class XtaskSettings(BaseModel):
    """Environment-derived settings shared by xtask commands."""

    model_config = ConfigDict(frozen=True)

    cargo: str = DEFAULT_CARGO
    debug: bool = False

    @field_validator("debug", mode="before")
    @classmethod
    def _parse_debug_flag(cls, value: bool | str) -> bool:
        """Return ``value`` as a flag, reading common truthy spellings from strings.

        Args:
            value: Boolean or raw environment string.

        Returns:
            bool: ``True`` for ``1``/``true``/``yes``/``on`` (any case).
        """

        if isinstance(value, str):
            return value.strip().lower() in _TRUTHY
        return value

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> XtaskSettings:
        """Build settings from ``environ`` (defaults to :data:`os.environ`).

        ``CARGO`` is used verbatim when present, even when empty, so a broken
        override is reported when spawning rather than silently replaced.

        Args:
            environ: Mapping of environment variables to read.

        Returns:
            XtaskSettings: Resolved settings.
        """

        env = os.environ if environ is None else environ
        return cls(
            cargo=env.get(CARGO_ENV_VAR, DEFAULT_CARGO),
            debug=env.get(DEBUG_ENV_VAR, ""),
        )


__all__ = ["CARGO_ENV_VAR", "DEBUG_ENV_VAR", "DEFAULT_CARGO", "XtaskSettings"]
