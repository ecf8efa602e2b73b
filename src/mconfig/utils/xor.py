#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Repeating-key XOR used to obfuscate the entries region."""

from __future__ import annotations

from itertools import cycle


def xor_encode(data: bytes, key: bytes) -> bytes:
    """
    XOR encode data with repeating key.

    Args:
        data: Bytes to encode
        key: XOR key bytes, cycled to the length of data

    Returns:
        XOR encoded bytes

    Raises:
        ValueError: If key is empty
    """
    if not key:
        raise ValueError("XOR key must not be empty")
    return bytes(b ^ k for b, k in zip(data, cycle(key)))


def xor_decode(data: bytes, key: bytes) -> bytes:
    """
    XOR decode data with repeating key.

    Since XOR is symmetric, this is the same as encoding.
    """
    return xor_encode(data, key)


# 🌶️📦🔚
