# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Custom Typer helpers for consistent, sorted CLI help output."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Final, TypeVar

import typer
from click.core import Context, Parameter
from typer.core import TyperCommand, TyperGroup

ARGUMENT_PARAM_TYPE: Final[str] = "argument"


@dataclass(frozen=True, slots=True)
class TyperAppConfig:
    """Construction options for :func:`create_typer`."""

    help_text: str | None = None
    name: str | None = None
    invoke_without_command: bool = False
    no_args_is_help: bool = True


class SortedTyperCommand(TyperCommand):
    """Typer command that renders options in sorted order within help output."""

    def get_params(self, ctx: Context) -> list[Parameter]:
        """Return arguments in declaration order followed by options sorted by name.

        Both the rich and the plain help renderers list parameters in this
        order, so sorting here keeps help output consistent.
        """

        params = list(super().get_params(ctx))
        arguments = [param for param in params if getattr(param, "param_type_name", "") == ARGUMENT_PARAM_TYPE]
        options = [param for param in params if getattr(param, "param_type_name", "") != ARGUMENT_PARAM_TYPE]
        return [*arguments, *sorted(options, key=_primary_option_name)]


class SortedTyperGroup(TyperGroup):
    """Typer group that defaults to using :class:`SortedTyperCommand`."""

    command_class = SortedTyperCommand


CommandCallback = TypeVar("CommandCallback", bound=Callable[..., Any])


class SortedTyper(typer.Typer):
    """Typer application that emits sorted option listings by default."""

    def __init__(self, *args: Any, cls: type[TyperGroup] | None = None, **kwargs: Any) -> None:
        super().__init__(*args, cls=cls or SortedTyperGroup, **kwargs)

    def command(
        self,
        name: str | None = None,
        *,
        cls: type[TyperCommand] | None = None,
        **kwargs: Any,
    ) -> Callable[[CommandCallback], CommandCallback]:
        """Return a decorator that registers commands using sorted help output."""

        return super().command(name, cls=cls or SortedTyperCommand, **kwargs)


def create_typer(*, config: TyperAppConfig | None = None) -> SortedTyper:
    """Return a :class:`SortedTyper` configured from ``config``.

    Args:
        config: Optional construction options; defaults apply when omitted.

    Returns:
        SortedTyper: Typer application with sorted help output.
    """

    cfg = config or TyperAppConfig()
    return SortedTyper(
        name=cfg.name,
        help=cfg.help_text,
        invoke_without_command=cfg.invoke_without_command,
        no_args_is_help=cfg.no_args_is_help,
        add_completion=False,
    )


def _primary_option_name(param: Parameter) -> str:
    """Return the canonical name used for sorting a Click parameter."""

    option_names: Iterable[str] = tuple(getattr(param, "opts", ())) + tuple(
        getattr(param, "secondary_opts", ()),
    )
    long_names = [name for name in option_names if name.startswith("--")]
    candidate = long_names[0] if long_names else (next(iter(option_names), "") or param.name or "")
    return candidate.lstrip("-").lower()


__all__ = ["SortedTyper", "TyperAppConfig", "create_typer"]
