#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""In-memory MConfig store.

Keys are strings and values are optional strings; a key may be stored
without a value. Lookups return an `Entry` or ``None`` so that the three
states stay distinct:

- ``None``: the key is not present
- ``Entry(key, None)``: the key is present with no value
- ``Entry(key, "v")``: the key is present with a value

A store is not safe to share between threads. Iteration is live over the
underlying mapping, so callers must not insert or remove while iterating.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import TYPE_CHECKING

from attrs import define, field, frozen
from provide.foundation import logger
from provide.foundation.file import atomic_write

from mconfig.exceptions import (
    EmptyKeyError,
    KeyTooBigError,
    MissingKeyError,
    TooBigError,
    ValueTooBigError,
)
from mconfig.format.codec import entries_size, entry_size, serialize
from mconfig.format.constants import (
    LATEST_VERSION,
    MAX_KEY_LEN,
    MAX_VALUE_LEN,
    MCONFIG_SIZE,
    TERMINATOR_SIZE,
)

if TYPE_CHECKING:
    from mconfig.builder import MConfigBuilder


@frozen
class Entry:
    """A key and its optional value."""

    key: str
    value: str | None = None


def _check_lengths(key: str, value: str | None) -> None:
    # Zero-length keys are refused even though the length byte allows them:
    # key_len 0 is the end-of-data marker, so everything after it would be
    # dropped on reload.
    if not key:
        raise EmptyKeyError()
    key_len = len(key.encode("utf-8"))
    if key_len > MAX_KEY_LEN:
        raise KeyTooBigError(f"Key is {key_len} bytes, maximum is {MAX_KEY_LEN}", length=key_len)
    if value is not None:
        value_len = len(value.encode("utf-8"))
        if value_len > MAX_VALUE_LEN:
            raise ValueTooBigError(
                f"Value for key {key!r} is {value_len} bytes, maximum is {MAX_VALUE_LEN}",
                length=value_len,
            )


@define(repr=False)
class MConfig:
    """Key/value store that serializes to a fixed-size, optionally obfuscated buffer."""

    _entries: dict[str, str | None] = field(factory=dict)
    _secret: str | None = field(default=None)
    _version: int = field(default=LATEST_VERSION)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @staticmethod
    def builder() -> MConfigBuilder:
        """Get a new, empty builder."""
        from mconfig.builder import MConfigBuilder

        return MConfigBuilder()

    @classmethod
    def from_dict(cls, entries: Mapping[str, str | None]) -> MConfig:
        """Create a latest-version store with no secret from a plain mapping.

        Raises:
            EmptyKeyError: If a key is empty.
            KeyTooBigError, ValueTooBigError: If a key or value is over 255 bytes.
            TooBigError: If the entries would not fit in the buffer.
        """
        for key, value in entries.items():
            _check_lengths(key, value)
        total = entries_size(entries) + TERMINATOR_SIZE
        if total > MCONFIG_SIZE:
            raise TooBigError(f"Entries need {total} bytes, maximum is {MCONFIG_SIZE}", size=total)
        return cls(entries=dict(entries))

    @classmethod
    def open(cls, path: Path | str, secret: str | None = None) -> MConfig:
        """Read a store from a file."""
        data = Path(path).read_bytes()
        logger.debug("Read MConfig file", path=str(path), size=len(data))
        return cls.builder().with_secret(secret).load(data).try_build()

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def insert(self, key: str, value: str | None = None) -> Entry | None:
        """Insert or replace a key.

        The size check uses the exact post-insert size: replacing a key
        releases the space taken by its previous entry. An empty-string value
        is accepted but is stored exactly like no value.

        Returns:
            The previous entry if the key existed, otherwise None.

        Raises:
            EmptyKeyError: If the key is empty.
            KeyTooBigError: If the key is over 255 bytes.
            ValueTooBigError: If the value is over 255 bytes.
            TooBigError: If the store would no longer fit in the buffer.
        """
        _check_lengths(key, value)

        projected = entries_size(self._entries) + entry_size(key, value)
        if key in self._entries:
            projected -= entry_size(key, self._entries[key])
        if projected + TERMINATOR_SIZE > MCONFIG_SIZE:
            raise TooBigError(
                f"Inserting {key!r} needs {projected + TERMINATOR_SIZE} bytes, maximum is {MCONFIG_SIZE}",
                size=projected + TERMINATOR_SIZE,
            )

        previous = Entry(key, self._entries[key]) if key in self._entries else None
        self._entries[key] = value
        logger.trace("Inserted MConfig key", replaced=previous is not None, size=projected)
        return previous

    def remove(self, key: str) -> Entry | None:
        """Remove a key if present. Returns the removed entry or None."""
        if key not in self._entries:
            return None
        return Entry(key, self._entries.pop(key))

    def set_secret(self, secret: str | None) -> None:
        """Change the secret used by future `to_vec` calls.

        An empty string is the same as no secret.
        """
        self._secret = secret or None

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, key: str) -> Entry | None:
        """Retrieve the entry for a key, or None if the key is not set."""
        if key not in self._entries:
            return None
        return Entry(key, self._entries[key])

    def try_get(self, key: str) -> str | None:
        """Retrieve the value for a key.

        Raises:
            MissingKeyError: If the key is not present.
        """
        try:
            return self._entries[key]
        except KeyError:
            raise MissingKeyError(f"Key {key!r} not found") from None

    def contains_key(self, key: str) -> bool:
        return key in self._entries

    def iter(self) -> Iterator[tuple[str, str | None]]:
        """Iterate over ``(key, value)`` pairs in no particular order."""
        yield from self._entries.items()

    items = iter

    def keys(self) -> Iterator[str]:
        yield from self._entries

    def to_dict(self) -> dict[str, str | None]:
        """Snapshot of the entries as a plain dict."""
        return dict(self._entries)

    @property
    def secret(self) -> str | None:
        return self._secret

    @property
    def version(self) -> int:
        return self._version

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_vec(self) -> bytes:
        """Return the full buffer, obfuscated if a secret is configured."""
        return serialize(self._entries, self._secret, self._version)

    to_bytes = to_vec

    def save(self, path: Path | str) -> None:
        """Write the full buffer to a file, replacing it atomically."""
        data = self.to_vec()
        atomic_write(Path(path), data)
        logger.debug("Wrote MConfig file", path=str(path), entries=len(self._entries), size=len(data))

    # ------------------------------------------------------------------
    # Python protocols
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._entries)

    def len(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __getitem__(self, key: str) -> str | None:
        return self.try_get(key)

    def __setitem__(self, key: str, value: str | None) -> None:
        self.insert(key, value)

    def __delitem__(self, key: str) -> None:
        if self.remove(key) is None:
            raise MissingKeyError(f"Key {key!r} not found")

    def __repr__(self) -> str:
        return f"MConfig(version={self._version}, entries={len(self._entries)}, secret={'set' if self._secret else 'unset'})"


# 🌶️📦🔚
