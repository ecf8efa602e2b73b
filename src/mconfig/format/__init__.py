#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""MConfig binary format: layout constants and the entry codec."""

from __future__ import annotations

from mconfig.format.codec import (
    check_header,
    deobfuscate,
    encode_entries,
    entries_size,
    entry_size,
    obfuscate,
    parse,
    parse_entries,
    parse_region,
    serialize,
)
from mconfig.format.constants import (
    HEADER_SIZE,
    LATEST_VERSION,
    MAGIC_HEADER,
    MAX_KEY_LEN,
    MAX_VALUE_LEN,
    MCONFIG_SIZE,
)

__all__ = [
    "HEADER_SIZE",
    "LATEST_VERSION",
    "MAGIC_HEADER",
    "MAX_KEY_LEN",
    "MAX_VALUE_LEN",
    "MCONFIG_SIZE",
    "check_header",
    "deobfuscate",
    "encode_entries",
    "entries_size",
    "entry_size",
    "obfuscate",
    "parse",
    "parse_entries",
    "parse_region",
    "serialize",
]

# 🌶️📦🔚
