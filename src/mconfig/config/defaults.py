#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Centralized default values for MConfig configuration."""

from __future__ import annotations

# Note: binary layout constants live in mconfig.format.constants

# =================================
# Logging defaults
# =================================
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_SETUP_LOG_LEVEL = "WARNING"
VALID_LOG_LEVELS = frozenset({"TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

# =================================
# Secret prompt
# =================================
SECRET_PROMPT = "Enter secret"
SECRET_ENV_VAR = "MCONFIG_SECRET"

# =================================
# Display markers
# =================================
EMPTY_VALUE_DISPLAY = "<empty>"  # key present with no value
NO_PREVIOUS_DISPLAY = "n/a"  # key was not present before an insert


# 🌶️📦🔚
