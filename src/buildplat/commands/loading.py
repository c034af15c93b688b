#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Registry loading shared by the buildplat commands."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import click

from buildplat.config import BuildplatRuntimeConfig
from buildplat.loader import load_builtin_platforms, load_platforms
from buildplat.registry import PlatformRegistry

path_option = click.option(
    "--path",
    "-p",
    "paths",
    multiple=True,
    type=click.Path(exists=True, resolve_path=True),
    help=(
        "Platform declaration file or directory (repeatable). "
        "Defaults to BUILDPLAT_PLATFORMS_PATH, then the bundled platforms."
    ),
)


def runtime_config(ctx: click.Context) -> BuildplatRuntimeConfig:
    """Config stored by the CLI group, or a fresh one from the environment."""
    obj = ctx.find_object(dict)
    if obj and "config" in obj:
        return obj["config"]
    return BuildplatRuntimeConfig.from_env()


def load_registry(ctx: click.Context, paths: Sequence[str]) -> PlatformRegistry:
    """Load platforms from explicit paths, the configured search path, or the bundled set."""
    if paths:
        return load_platforms([Path(p) for p in paths])

    configured = runtime_config(ctx).platform_paths()
    if configured:
        return load_platforms(configured)

    return load_builtin_platforms()


# 🌶️📦🔚
