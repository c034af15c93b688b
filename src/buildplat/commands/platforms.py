#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Listing and inspection commands for the buildplat CLI."""

from __future__ import annotations

from typing import Any

import click
from provide.foundation.console import perr, pout
from provide.foundation.serialization import json_dumps

from buildplat.commands.loading import load_registry, path_option, runtime_config
from buildplat.config.defaults import OUTPUT_FORMATS, OUTPUT_JSON
from buildplat.console import get_command_logger
from buildplat.descriptor import PlatformDescriptor
from buildplat.exceptions import BuildplatError

# Get structured loggers for these commands
list_log = get_command_logger("list")
show_log = get_command_logger("show")


@click.command("list")
@path_option
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Show service type and parsed OS details",
)
@click.pass_context
def list_command(ctx: click.Context, paths: tuple[str, ...], verbose: bool) -> None:
    """List known platform names."""
    list_log.debug("List command started", paths=list(paths), verbose=verbose)

    try:
        registry = load_registry(ctx, paths)
    except BuildplatError as e:
        list_log.error("Loading platforms failed", error=str(e))
        perr(f"❌ Failed to load platforms: {e}")
        raise click.Abort() from e

    if len(registry) == 0:
        pout("No platforms defined.")
        return

    for descriptor in registry:
        if verbose:
            pout(_summary_line(descriptor))
        else:
            pout(descriptor.name)


def _summary_line(descriptor: PlatformDescriptor) -> str:
    details = [f"service={descriptor.service_type}"]
    if descriptor.os_version:
        details.append(f"os={descriptor.os_name} {descriptor.os_version}")
        details.append(f"arch={descriptor.architecture}")
    return f"{descriptor.name}  ({', '.join(details)})"


@click.command("show")
@click.argument("name")
@path_option
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default=None,
    help="Output format (defaults to BUILDPLAT_OUTPUT_FORMAT or text)",
)
@click.pass_context
def show_command(ctx: click.Context, name: str, paths: tuple[str, ...], output_format: str | None) -> None:
    """Show the flat record of a platform."""
    output_format = output_format or runtime_config(ctx).output_format
    show_log.debug("Show command started", platform=name, format=output_format)

    try:
        descriptor = load_registry(ctx, paths).get(name)
    except BuildplatError as e:
        show_log.error("Show failed", platform=name, error=str(e))
        perr(f"❌ {e}")
        raise click.Abort() from e

    record = descriptor.to_record()
    if output_format == OUTPUT_JSON:
        pout(json_dumps(record, indent=2))
    else:
        _display_record(record)


def _display_record(record: dict[str, Any]) -> None:
    width = max(len(key) for key in record)
    for key, value in record.items():
        if isinstance(value, list):
            pout(f"{key.ljust(width)} :")
            for item in value:
                pout(f"  - {item}")
        else:
            pout(f"{key.ljust(width)} : {'' if value is None else value}")


# 🌶️📦🔚
