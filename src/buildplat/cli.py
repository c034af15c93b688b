#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""buildplat command-line interface entrypoint."""

from __future__ import annotations

from attrs import evolve
import click
from provide.foundation import CLIContext, TelemetryConfig, get_hub
from provide.foundation.utils import get_version

from buildplat.commands.platforms import list_command, show_command
from buildplat.commands.render import render_command
from buildplat.commands.validate import validate_command
from buildplat.config import BuildplatRuntimeConfig

__version__ = get_version("buildplat", caller_file=__file__)


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(
    __version__,
    "-V",
    "--version",
    prog_name="buildplat",
    message="%(prog)s version %(version)s",
)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Build platform descriptor tool.

    Configure via environment variables:
    - BUILDPLAT_LOG_LEVEL: Log level (trace, debug, info, warning, error)
    - BUILDPLAT_SETUP_LOG_LEVEL: Control Foundation's initialization logs
    - BUILDPLAT_PLATFORMS_PATH: Platform declaration search path
    - BUILDPLAT_OUTPUT_FORMAT: Default output format for 'show'
    - PROVIDE_LOG_FILE: Write logs to file
    """
    ctx.ensure_object(dict)

    config = BuildplatRuntimeConfig.from_env()
    cli_ctx = CLIContext.from_env()

    base_telemetry = TelemetryConfig.from_env()
    telemetry_config = evolve(
        base_telemetry,
        service_name="buildplat",
        logging=evolve(
            base_telemetry.logging,
            default_level=config.log_level,  # type: ignore[arg-type]
        ),
    )

    hub = get_hub()
    hub.initialize_foundation(telemetry_config)

    ctx.obj["config"] = config
    ctx.obj["cli_context"] = cli_ctx
    ctx.obj["log"] = cli_ctx.logger


cli.add_command(list_command, name="list")
cli.add_command(show_command, name="show")
cli.add_command(render_command, name="render")
cli.add_command(validate_command, name="validate")

main = cli

if __name__ == "__main__":
    cli()

# 🌶️📦🔚
