#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Builder for `MConfig` stores."""

from __future__ import annotations

from attrs import evolve, field, frozen
from provide.foundation import logger

from mconfig.format.codec import check_header, parse_region
from mconfig.format.constants import HEADER_SIZE, LATEST_VERSION
from mconfig.store import MConfig


@frozen
class MConfigBuilder:
    """Immutable builder collecting an optional secret and optional raw bytes.

    Each ``with_*``/``load`` call returns a new builder::

        store = MConfig.builder().with_secret("TACOS").load(data).try_build()
    """

    secret: str | None = field(default=None, converter=lambda s: s or None, repr=False)
    raw_bytes: bytes | None = field(default=None, repr=False)

    def with_secret(self, secret: str | None) -> MConfigBuilder:
        """Set the secret used to de-obfuscate loaded data and for later saves."""
        return evolve(self, secret=secret)

    def load(self, raw_bytes: bytes) -> MConfigBuilder:
        """Load raw bytes, which may or may not be obfuscated."""
        return evolve(self, raw_bytes=bytes(raw_bytes))

    def try_build(self) -> MConfig:
        """Build the store.

        Without raw bytes the store is empty. With raw bytes the header is
        validated and the entries region decoded; any codec error propagates
        unchanged. A wrong secret usually fails here, but is not guaranteed
        to.
        """
        if self.raw_bytes is None:
            logger.debug("Building empty MConfig", has_secret=self.secret is not None)
            return MConfig(secret=self.secret)

        check_header(self.raw_bytes)
        entries = parse_region(self.raw_bytes[HEADER_SIZE:], self.secret)
        logger.debug(
            "Built MConfig from buffer",
            size=len(self.raw_bytes),
            entries=len(entries),
            has_secret=self.secret is not None,
        )
        return MConfig(entries=entries, secret=self.secret, version=LATEST_VERSION)


# 🌶️📦🔚
