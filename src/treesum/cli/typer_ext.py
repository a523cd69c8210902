# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typer command customisations for the treesum CLI."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, Final, TypeVar

import typer
from typer.core import TyperCommand

ARGUMENT_PARAM_TYPE: Final[str] = "argument"


class ChecksumCommand(TyperCommand):
    """Typer command that lists its options sorted by long name in help output."""

    def format_options(
        self,
        ctx: typer.Context,
        formatter: Any,
    ) -> None:
        """Render positional arguments and sorted options within CLI help.

        Args:
            ctx: Click context describing the application invocation.
            formatter: Click help formatter used to emit definition lists.
        """

        argument_records: list[tuple[str, str]] = []
        option_entries: list[tuple[tuple[str, int], tuple[str, str]]] = []

        for index, param in enumerate(self.get_params(ctx)):
            record = param.get_help_record(ctx)
            if record is None:
                continue
            if getattr(param, "param_type_name", "") == ARGUMENT_PARAM_TYPE:
                argument_records.append(record)
                continue
            option_entries.append(((_primary_option_name(param), index), record))

        if argument_records:
            with formatter.section("Arguments"):
                formatter.write_dl(argument_records)
        if option_entries:
            with formatter.section("Options"):
                formatter.write_dl([record for _, record in sorted(option_entries, key=lambda item: item[0])])


CommandCallback = TypeVar("CommandCallback", bound=Callable[..., Any])


class ChecksumTyper(typer.Typer):
    """Typer application whose commands default to :class:`ChecksumCommand`."""

    def command(
        self,
        name: str | None = None,
        *,
        cls: type[TyperCommand] | None = None,
        **kwargs: Any,
    ) -> Callable[[CommandCallback], CommandCallback]:
        """Return a decorator registering a command, defaulting ``cls`` to :class:`ChecksumCommand`."""

        return super().command(name, cls=cls or ChecksumCommand, **kwargs)


def create_typer(**kwargs: Any) -> ChecksumTyper:
    """Return a :class:`ChecksumTyper` forwarding ``kwargs`` to :class:`typer.Typer`."""

    return ChecksumTyper(**kwargs)


def _primary_option_name(param: Any) -> str:
    """Return the long option name, without dashes, used to sort ``param``."""

    option_names: Iterable[str] = tuple(getattr(param, "opts", ())) + tuple(
        getattr(param, "secondary_opts", ()),
    )
    long_names = [name for name in option_names if name.startswith("--")]
    candidate = long_names[0] if long_names else (next(iter(option_names), "") or param.name or "")
    return candidate.lstrip("-").lower()


__all__ = [
    "ChecksumCommand",
    "ChecksumTyper",
    "create_typer",
]
