#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Edit command for the mconfig CLI - list, read, set and remove keys."""

from __future__ import annotations

from pathlib import Path

import click
from provide.foundation.console import perr, pout

from mconfig.commands.secret import resolve_secret
from mconfig.config.defaults import EMPTY_VALUE_DISPLAY, NO_PREVIOUS_DISPLAY
from mconfig.console import get_command_logger
from mconfig.exceptions import MConfigError
from mconfig.store import Entry, MConfig

# Get structured logger for this command
log = get_command_logger("edit")


def _display(value: str | None) -> str:
    return EMPTY_VALUE_DISPLAY if value is None else value


def _previous(entry: Entry | None) -> str:
    if entry is None:
        return NO_PREVIOUS_DISPLAY
    return _display(entry.value)


@click.command("edit")
@click.argument(
    "file",
    type=click.Path(exists=True, dir_okay=False, resolve_path=True),
    required=True,
)
@click.option("--list", "-l", "list_entries", is_flag=True, help="List the keys and values contained in the file.")
@click.option("--key", "-k", help="The key to retrieve or set.")
@click.option("--value", "-v", help="The value to set.")
@click.option("--empty", "-e", is_flag=True, help="Create the key with no value.")
@click.option("--remove", "-r", is_flag=True, help="Delete the key and its value, if any.")
@click.pass_context
def edit_command(
    ctx: click.Context,
    file: str,
    list_entries: bool,
    key: str | None,
    value: str | None,
    empty: bool,
    remove: bool,
) -> None:
    """Read or modify the MConfig store in FILE."""
    if list_entries and key is not None:
        raise click.UsageError("--list cannot be combined with --key")
    if key is None and (value is not None or empty or remove):
        raise click.UsageError("--value, --empty and --remove require --key")
    if sum([value is not None, empty, remove]) > 1:
        raise click.UsageError("--value, --empty and --remove are mutually exclusive")

    path = Path(file)
    data = path.read_bytes()
    pout(f"Loaded {len(data)} bytes from {path}")

    secret = resolve_secret(ctx)
    log.debug("Loading store", path=str(path), size=len(data), has_secret=secret is not None)

    try:
        store = MConfig.builder().with_secret(secret).load(data).try_build()
        pout(f"Loaded MConfig data with {len(store)} entries.")

        if list_entries:
            for k, v in store.iter():
                pout(f"{k}: {_display(v)}")

        if key is not None:
            _apply_key_operation(store, path, key, value, empty, remove)

    except MConfigError as e:
        log.error("MConfig operation failed", error=str(e), code=e.code, path=str(path))
        perr(f"❌ Failed to process MConfig data: {e}")
        raise click.Abort() from e


def _apply_key_operation(
    store: MConfig,
    path: Path,
    key: str,
    value: str | None,
    empty: bool,
    remove: bool,
) -> None:
    """Read, set or remove a single key, rewriting the file on change."""
    if remove:
        old = store.remove(key)
        if old is None:
            pout(f"{key} not found.")
            return
        pout(f"Removed {key} with value {_display(old.value)}")
        _write(store, path)
    elif empty:
        old = store.insert(key, None)
        _write(store, path)
        pout(f"Added empty {key}. Previous value: {_previous(old)}")
    elif value is not None:
        old = store.insert(key, value)
        _write(store, path)
        pout(f"Added value {value} to key {key}. Previous value: {_previous(old)}")
    else:
        entry = store.get(key)
        if entry is None:
            pout(f"{key} not found.")
        else:
            pout(f"{key}: {_display(entry.value)}")


def _write(store: MConfig, path: Path) -> None:
    store.save(path)
    log.info("Store updated", path=str(path), entries=len(store))
    pout(f"Updated {path}")


# 🌶️📦🔚
