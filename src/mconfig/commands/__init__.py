#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Command modules for the mconfig CLI."""

from __future__ import annotations

from mconfig.commands.edit import edit_command
from mconfig.commands.init import init_command

__all__ = [
    "edit_command",
    "init_command",
]

# 🌶️📦🔚
