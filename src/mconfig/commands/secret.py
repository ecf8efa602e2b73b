#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Secret entry shared by commands that load or write a store."""

from __future__ import annotations

import os

import click

from mconfig.config.defaults import SECRET_ENV_VAR, SECRET_PROMPT
from mconfig.config.runtime import MConfigRuntimeConfig


def resolve_secret(ctx: click.Context) -> str | None:
    """Return the secret from MCONFIG_SECRET, or prompt for it in plain text.

    A set but empty MCONFIG_SECRET, like an empty answer, means the store is
    not obfuscated; neither case prompts again.
    """
    obj = ctx.find_object(dict) or {}
    config: MConfigRuntimeConfig | None = obj.get("config")
    if config is not None and config.secret is not None:
        return config.secret
    # the config maps "" to None, so check whether the variable is set at all
    if SECRET_ENV_VAR in os.environ:
        return os.environ[SECRET_ENV_VAR] or None

    secret = click.prompt(SECRET_PROMPT, default="", show_default=False)
    return secret.strip() or None


# 🌶️📦🔚
