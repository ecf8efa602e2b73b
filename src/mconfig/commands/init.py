#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Init command for the mconfig CLI - create an empty store file."""

from __future__ import annotations

from pathlib import Path

import click
from provide.foundation.console import perr, pout
from provide.foundation.file.directory import ensure_parent_dir

from mconfig.commands.secret import resolve_secret
from mconfig.console import get_command_logger
from mconfig.store import MConfig

# Get structured logger for this command
log = get_command_logger("init")


@click.command("init")
@click.argument(
    "file",
    type=click.Path(dir_okay=False, resolve_path=True),
    required=True,
)
@click.option(
    "--force",
    "-f",
    is_flag=True,
    help="Overwrite an existing file",
)
@click.pass_context
def init_command(ctx: click.Context, file: str, force: bool) -> None:
    """Create an empty MConfig store in FILE."""
    path = Path(file)
    if path.exists() and not force:
        log.error("Output file already exists", path=str(path))
        perr(f"❌ File already exists: {path}")
        perr("Use --force to overwrite")
        raise click.Abort()

    secret = resolve_secret(ctx)
    store = MConfig.builder().with_secret(secret).try_build()

    ensure_parent_dir(path)
    store.save(path)
    log.info("Created empty store", path=str(path), has_secret=secret is not None)
    pout(f"✅ Created empty MConfig store at {path}")


# 🌶️📦🔚
