#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""MConfig runtime configuration for CLI startup."""

from __future__ import annotations

from attrs import define
from provide.foundation.config.base import field
from provide.foundation.config.env import RuntimeConfig

from mconfig.config.defaults import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_SETUP_LOG_LEVEL,
    SECRET_ENV_VAR,
    VALID_LOG_LEVELS,
)


def parse_log_level(value: str) -> str:
    """Validate and normalize log levels."""
    normalized = value.strip().upper()
    if normalized not in VALID_LOG_LEVELS:
        raise ValueError(f"Invalid log level: {value}")
    return normalized


def parse_secret(value: str | None) -> str | None:
    """Treat an empty secret as no secret."""
    return value or None


@define
class MConfigRuntimeConfig(RuntimeConfig):
    """MConfig runtime configuration for CLI startup."""

    log_level: str = field(
        default=DEFAULT_LOG_LEVEL,
        env_var="MCONFIG_LOG_LEVEL",
        converter=parse_log_level,
        metadata={"help": "Log level for MConfig operations (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)"},
    )

    setup_log_level: str = field(
        default=DEFAULT_SETUP_LOG_LEVEL,
        env_var="MCONFIG_SETUP_LOG_LEVEL",
        converter=parse_log_level,
        metadata={"help": "Log level for Foundation setup messages during initialization"},
    )

    secret: str | None = field(
        default=None,
        env_var=SECRET_ENV_VAR,
        converter=parse_secret,
        metadata={"help": "Secret used instead of the interactive prompt", "sensitive": True},
    )


# 🌶️📦🔚
