#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""buildplat runtime configuration for CLI startup."""

from __future__ import annotations

import os
from pathlib import Path

from attrs import define
from provide.foundation.config.base import field
from provide.foundation.config.env import RuntimeConfig

from buildplat.config.defaults import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_OUTPUT_FORMAT,
    DEFAULT_SETUP_LOG_LEVEL,
    OUTPUT_FORMATS,
    VALID_LOG_LEVELS,
)


def parse_log_level(value: str) -> str:
    """Validate and normalize log levels."""
    normalized = value.strip().upper()
    if normalized not in VALID_LOG_LEVELS:
        raise ValueError(f"Invalid log level: {value}")
    return normalized


def parse_output_format(value: str) -> str:
    """Validate and normalize the CLI output format."""
    normalized = value.strip().lower()
    if normalized not in OUTPUT_FORMATS:
        raise ValueError(f"Invalid output format: {value}")
    return normalized


def parse_platforms_path(value: str | None) -> str | None:
    """Treat an empty search path as unset."""
    if value is None:
        return None
    value = value.strip()
    return value or None


@define
class BuildplatRuntimeConfig(RuntimeConfig):
    """buildplat runtime configuration for CLI startup."""

    log_level: str = field(
        default=DEFAULT_LOG_LEVEL,
        env_var="BUILDPLAT_LOG_LEVEL",
        converter=parse_log_level,
        metadata={"help": "Log level for buildplat operations (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)"},
    )

    setup_log_level: str = field(
        default=DEFAULT_SETUP_LOG_LEVEL,
        env_var="BUILDPLAT_SETUP_LOG_LEVEL",
        converter=parse_log_level,
        metadata={"help": "Log level for Foundation setup messages during initialization"},
    )

    platforms_path: str | None = field(
        default=None,
        env_var="BUILDPLAT_PLATFORMS_PATH",
        converter=parse_platforms_path,
        metadata={"help": "Search path of platform declaration files or directories (os.pathsep separated)"},
    )

    output_format: str = field(
        default=DEFAULT_OUTPUT_FORMAT,
        env_var="BUILDPLAT_OUTPUT_FORMAT",
        converter=parse_output_format,
        metadata={"help": "Default output format for the show command (text, json)"},
    )

    def platform_paths(self) -> list[Path]:
        """Split the search path into individual paths."""
        if not self.platforms_path:
            return []
        return [Path(p) for p in self.platforms_path.split(os.pathsep) if p]
