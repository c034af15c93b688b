#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Command rendering for the buildplat CLI."""

from __future__ import annotations

import click
from provide.foundation.console import perr, pout

from buildplat.commands.loading import load_registry, path_option
from buildplat.console import get_command_logger
from buildplat.exceptions import BuildplatError

# Get structured logger for this command
log = get_command_logger("render")


@click.command("render")
@click.argument("name")
@path_option
@click.option(
    "--build-deps",
    "-d",
    "build_deps",
    multiple=True,
    help="Build dependency to append to the install command (repeatable)",
)
@click.pass_context
def render_command(ctx: click.Context, name: str, paths: tuple[str, ...], build_deps: tuple[str, ...]) -> None:
    """Print the provisioning commands of a platform."""
    log.debug("Render command started", platform=name, build_deps=list(build_deps))

    try:
        descriptor = load_registry(ctx, paths).get(name)
    except BuildplatError as e:
        log.error("Render failed", platform=name, error=str(e))
        perr(f"❌ {e}")
        raise click.Abort() from e

    provision = descriptor.render_provision_command()
    build_deps_command = descriptor.render_build_dependencies_command(build_deps)

    if provision is None and build_deps_command is None:
        pout(f"Platform '{name}' declares no commands.")
        return

    if provision is not None:
        pout(f"provision: {provision}")
    if build_deps_command is not None:
        pout(f"build-deps: {build_deps_command}")


# 🌶️📦🔚
