#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""MConfig command-line interface entrypoint."""

from __future__ import annotations

from attrs import evolve
import click
from provide.foundation import CLIContext, TelemetryConfig, get_hub
from provide.foundation.utils import get_version

from mconfig.commands.edit import edit_command
from mconfig.commands.init import init_command
from mconfig.config import MConfigRuntimeConfig

__version__ = get_version("mconfig", caller_file=__file__)


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(
    __version__,
    "-V",
    "--version",
    prog_name="mconfig",
    message="%(prog)s version %(version)s",
)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Fixed-size, lightly obfuscated key/value store.

    The secret is read from a plain-text prompt unless MCONFIG_SECRET is set.
    Obfuscation is a repeating-key XOR and provides no real confidentiality.

    Configure logging via environment variables:
    - MCONFIG_LOG_LEVEL: Set log level for MConfig (trace, debug, info, warning, error)
    - MCONFIG_SETUP_LOG_LEVEL: Control Foundation's initialization logs
    - PROVIDE_LOG_FILE: Write logs to file
    """
    ctx.ensure_object(dict)

    mconfig_config = MConfigRuntimeConfig.from_env()
    cli_ctx = CLIContext.from_env()

    base_telemetry = TelemetryConfig.from_env()
    telemetry_config = evolve(
        base_telemetry,
        service_name="mconfig",
        logging=evolve(
            base_telemetry.logging,
            default_level=mconfig_config.log_level,  # type: ignore[arg-type]
        ),
    )

    hub = get_hub()
    hub.initialize_foundation(telemetry_config)

    ctx.obj["config"] = mconfig_config
    ctx.obj["cli_context"] = cli_ctx
    ctx.obj["log"] = cli_ctx.logger


cli.add_command(edit_command, name="edit")
cli.add_command(init_command, name="init")

main = cli

if __name__ == "__main__":
    cli()

# 🌶️📦🔚
