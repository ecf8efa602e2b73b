#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Utility helpers for MConfig."""

from __future__ import annotations

from mconfig.utils.xor import xor_decode, xor_encode

__all__ = [
    "xor_decode",
    "xor_encode",
]

# 🌶️📦🔚
