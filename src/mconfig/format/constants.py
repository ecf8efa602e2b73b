#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""MConfig binary layout constants.

Layout of a store buffer::

    4d 43 4f 4e 46 vv
    ll kk kk kk ... mm vv vv vv ...   (repeated)
    00                                (end of data)
    ?? ?? ?? ...                      (random padding)
"""

from __future__ import annotations

# =================================
# Header
# =================================
MAGIC_HEADER = b"MCONF"  # 0x4d 0x43 0x4f 0x4e 0x46
VERSION_INDEX = len(MAGIC_HEADER)
HEADER_SIZE = len(MAGIC_HEADER) + 1  # magic + version byte

# =================================
# Versions
# =================================
VERSION_0 = 0
LATEST_VERSION = VERSION_0
SUPPORTED_VERSIONS = frozenset({VERSION_0})

# =================================
# Sizes
# =================================
MCONFIG_SIZE = 8_192
MAX_KEY_LEN = 0xFF  # length prefix is a single byte
MAX_VALUE_LEN = 0xFF
END_OF_DATA = 0x00  # zero key length terminates the entry stream
TERMINATOR_SIZE = 1
ENTRIES_REGION_SIZE = MCONFIG_SIZE - HEADER_SIZE


# 🌶️📦🔚
