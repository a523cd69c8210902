# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run configuration for a checksum pass."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .constants import DEFAULT_CHUNK_SIZE


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class ChecksumConfig(BaseModel):
    """Configuration describing which tree to scan and how to report it."""

    model_config = ConfigDict(validate_assignment=True, frozen=True)

    root: str = Field(min_length=1)
    chunk_size: int = Field(default=DEFAULT_CHUNK_SIZE, gt=0)
    emoji: bool = True
    color: bool = True
    debug: bool = False


def build_config(**values: Any) -> ChecksumConfig:
    """Return a validated :class:`ChecksumConfig` built from ``values``.

    Raises:
        ConfigError: If any value fails validation.
    """

    try:
        return ChecksumConfig(**values)
    except ValidationError as exc:
        problems = "; ".join(_format_problem(error) for error in exc.errors())
        raise ConfigError(f"Invalid configuration: {problems}") from exc


def _format_problem(error: Any) -> str:
    location = ".".join(str(part) for part in error.get("loc", ())) or "config"
    return f"{location}: {error.get('msg', 'invalid value')}"


__all__ = ["ChecksumConfig", "ConfigError", "build_config"]
