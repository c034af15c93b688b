#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Validate command for the buildplat CLI."""

from __future__ import annotations

from pathlib import Path

import click
from provide.foundation.console import perr, pout

from buildplat.console import get_command_logger
from buildplat.exceptions import BuildplatError
from buildplat.loader import load_platforms

# Get structured logger for this command
log = get_command_logger("validate")


@click.command("validate")
@click.argument(
    "paths",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, resolve_path=True),
)
def validate_command(paths: tuple[str, ...]) -> None:
    """Validate platform declaration files or directories."""
    log.debug("Validating platform declarations", paths=list(paths))

    try:
        registry = load_platforms([Path(p) for p in paths])
    except BuildplatError as e:
        log.error("Validation failed", error=str(e))
        perr(f"❌ Validation failed: {e}")
        for note in getattr(e, "__notes__", []):
            perr(f"   {note}")
        raise click.Abort() from e

    log.info("Validation succeeded", count=len(registry))
    pout(f"✅ {len(registry)} platform(s) valid")


# 🌶️📦🔚
