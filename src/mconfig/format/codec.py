#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""MConfig entry codec.

Converts between a key/value mapping and the fixed-size MConfig buffer.
Each entry is encoded as ``key_len:u8 key val_len:u8 [value]``; a value
length of zero means the key has no value. A zero key length ends the entry
stream and everything after it is random padding.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
import os

from provide.foundation import logger

from mconfig.exceptions import (
    BadHeaderError,
    InvalidUTF8Error,
    MissingKeyError,
    TooBigError,
    TooShortError,
    TruncatedKeyError,
    TruncatedValueError,
    UnknownVersionError,
)
from mconfig.format.constants import (
    END_OF_DATA,
    ENTRIES_REGION_SIZE,
    HEADER_SIZE,
    LATEST_VERSION,
    MAGIC_HEADER,
    MAX_KEY_LEN,
    MAX_VALUE_LEN,
    MCONFIG_SIZE,
    SUPPORTED_VERSIONS,
    VERSION_INDEX,
)
from mconfig.utils.xor import xor_decode, xor_encode

Entries = dict[str, str | None]


def entry_size(key: str, value: str | None) -> int:
    """Number of bytes an entry occupies in the entries region."""
    size = 1 + len(key.encode("utf-8")) + 1
    if value is not None:
        size += len(value.encode("utf-8"))
    return size


def entries_size(entries: Mapping[str, str | None]) -> int:
    """Serialized size of the header plus all entries, excluding the terminator."""
    return HEADER_SIZE + sum(entry_size(k, v) for k, v in entries.items())


def obfuscate(region: bytes, secret: str | None) -> bytes:
    """Apply the version 0 obfuscation to a region if a secret is set.

    XOR is its own inverse, so the same transform is used for both directions.
    """
    if not secret:
        return region
    return xor_encode(region, secret.encode("utf-8"))


def deobfuscate(region: bytes, secret: str | None) -> bytes:
    """Reverse `obfuscate`."""
    if not secret:
        return region
    return xor_decode(region, secret.encode("utf-8"))


def encode_entries(entries: Iterable[tuple[str, str | None]]) -> bytes:
    """Encode entries followed by the end-of-data marker, without padding.

    Raises:
        RuntimeError: If a key or value exceeds 255 bytes, or if the encoded
            entries do not fit in the entries region. Both are prevented by
            the store's insert checks.
    """
    out = bytearray()
    for key, value in entries:
        key_bytes = key.encode("utf-8")
        if len(key_bytes) > MAX_KEY_LEN:
            raise RuntimeError(f"Key of {len(key_bytes)} bytes reached the encoder")
        out.append(len(key_bytes))
        out += key_bytes

        if value is None:
            out.append(0)
            continue
        value_bytes = value.encode("utf-8")
        if len(value_bytes) > MAX_VALUE_LEN:
            raise RuntimeError(f"Value of {len(value_bytes)} bytes reached the encoder")
        out.append(len(value_bytes))
        out += value_bytes

    out.append(END_OF_DATA)
    if len(out) > ENTRIES_REGION_SIZE:
        raise RuntimeError(f"Encoded entries ({len(out)} bytes) exceed the {ENTRIES_REGION_SIZE}-byte region")
    return bytes(out)


def serialize(
    entries: Mapping[str, str | None],
    secret: str | None = None,
    version: int = LATEST_VERSION,
) -> bytes:
    """Serialize entries into a full MCONFIG_SIZE buffer.

    The region after the header is padded with random bytes and, if a secret
    is given, obfuscated as a whole (padding included).
    """
    encoded = encode_entries(entries.items())
    padding = os.urandom(ENTRIES_REGION_SIZE - len(encoded))
    region = obfuscate(encoded + padding, secret)

    buffer = MAGIC_HEADER + bytes([version]) + region
    if len(buffer) != MCONFIG_SIZE:
        raise RuntimeError(f"Serialized buffer is {len(buffer)} bytes, expected {MCONFIG_SIZE}")

    logger.trace(
        "Serialized MConfig buffer",
        entries=len(entries),
        used=HEADER_SIZE + len(encoded),
        obfuscated=bool(secret),
    )
    return buffer


def check_header(buffer: bytes) -> int:
    """Validate length bounds, magic bytes and version. Returns the version."""
    if len(buffer) < HEADER_SIZE:
        raise TooShortError(
            f"Buffer is {len(buffer)} bytes, header needs {HEADER_SIZE}",
            length=len(buffer),
        )
    if len(buffer) > MCONFIG_SIZE:
        raise TooBigError(
            f"Buffer is {len(buffer)} bytes, maximum is {MCONFIG_SIZE}",
            length=len(buffer),
        )
    if buffer[:VERSION_INDEX] != MAGIC_HEADER:
        raise BadHeaderError(magic=buffer[:VERSION_INDEX].hex())

    version = buffer[VERSION_INDEX]
    if version not in SUPPORTED_VERSIONS:
        raise UnknownVersionError(f"Unknown MConfig format version {version}", version=version)
    return version


def _decode_text(raw: bytes, what: str, offset: int) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidUTF8Error(f"{what} at offset {offset} is not valid UTF-8", offset=offset) from e


def parse_entries(region: bytes) -> Entries:
    """Decode a de-obfuscated entries region.

    Stops at the first zero key length or at the end of the region. A
    duplicate key keeps the last value seen.
    """
    entries: Entries = {}
    pos = 0
    end = len(region)

    while pos < end:
        key_len = region[pos]
        pos += 1
        if key_len == END_OF_DATA:
            break

        if pos + key_len > end:
            raise TruncatedKeyError(
                f"Key at offset {pos} declares {key_len} bytes, {end - pos} remain",
                offset=pos,
                declared=key_len,
            )
        key = _decode_text(region[pos : pos + key_len], "Key", pos)
        pos += key_len

        if pos >= end:
            raise MissingKeyError(f"Key at offset {pos - key_len} has no value length", offset=pos)
        val_len = region[pos]
        pos += 1

        if val_len == 0:
            # valueless keys are allowed
            entries[key] = None
            continue

        if pos + val_len > end:
            raise TruncatedValueError(
                f"Value at offset {pos} declares {val_len} bytes, {end - pos} remain",
                offset=pos,
                declared=val_len,
            )
        entries[key] = _decode_text(region[pos : pos + val_len], "Value", pos)
        pos += val_len

    logger.trace("Parsed MConfig entries", entries=len(entries), consumed=pos)
    return entries


def parse_region(region: bytes, secret: str | None = None) -> Entries:
    """De-obfuscate and decode the region that follows the header."""
    return parse_entries(deobfuscate(bytes(region), secret))


def parse(buffer: bytes, secret: str | None = None) -> Entries:
    """Parse a full MConfig buffer into a key/value mapping.

    A wrong secret is not detected as such; it usually garbles the region
    enough to raise one of the structural errors, but it is not guaranteed to.
    A secret whose UTF-8 bytes repeat the right one (``"TACOSTACOS"`` for
    ``"TACOS"``) produces the same XOR stream and decodes the original entries.

    Raises:
        TooShortError, TooBigError, BadHeaderError, UnknownVersionError:
            If the header checks fail.
        TruncatedKeyError, TruncatedValueError, MissingKeyError, InvalidUTF8Error:
            If the entries region is malformed.
    """
    check_header(buffer)
    return parse_region(buffer[HEADER_SIZE:], secret)


# 🌶️📦🔚
