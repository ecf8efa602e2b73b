#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Custom exceptions for MConfig.

Every failure the codec or the store can report is a subclass of
`MConfigError`. The `kind` attribute identifies the failure independently of
the class hierarchy, and `code` is the foundation error code used in logs.

A wrong secret has no dedicated kind: de-obfuscating with the wrong key
yields effectively random bytes, which surface as any of the structural
parse errors below.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar

from provide.foundation.errors import FoundationError


class ErrorKind(Enum):
    """Failure kinds reported by the codec and the store."""

    TOO_SHORT = "TooShort"
    TOO_BIG = "TooBig"
    BAD_HEADER = "BadHeader"
    UNKNOWN_VERSION = "UnknownVersion"
    TRUNCATED_KEY = "TruncatedKey"
    TRUNCATED_VALUE = "TruncatedValue"
    MISSING_KEY = "MissingKey"
    INVALID_UTF8 = "InvalidUTF8"
    KEY_TOO_BIG = "KeyTooBig"
    EMPTY_KEY = "EmptyKey"
    VALUE_TOO_BIG = "ValueTooBig"


class MConfigError(FoundationError):
    """Base exception for all MConfig errors."""

    kind: ClassVar[ErrorKind]
    default_message: ClassVar[str] = "MConfig error"

    def __init__(self, message: str | None = None, **context: Any) -> None:
        super().__init__(message or self.default_message, **context)

    def _default_code(self) -> str:
        return f"MCONFIG_{self.kind.name}"


class TooShortError(MConfigError):
    """Raised when a buffer is shorter than the header."""

    kind = ErrorKind.TOO_SHORT
    default_message = "Buffer is shorter than the MConfig header"


class TooBigError(MConfigError):
    """Raised when a buffer or a projected store exceeds the fixed size."""

    kind = ErrorKind.TOO_BIG
    default_message = "Data does not fit in the MConfig buffer"


class BadHeaderError(MConfigError):
    """Raised when the magic bytes do not match."""

    kind = ErrorKind.BAD_HEADER
    default_message = "Buffer does not start with the MCONF magic bytes"


class UnknownVersionError(MConfigError):
    """Raised for a version byte this implementation does not understand."""

    kind = ErrorKind.UNKNOWN_VERSION
    default_message = "Unknown MConfig format version"


class TruncatedKeyError(MConfigError):
    """Raised when a key's declared length runs past the end of the buffer."""

    kind = ErrorKind.TRUNCATED_KEY
    default_message = "Key is truncated"


class TruncatedValueError(MConfigError):
    """Raised when a value's declared length runs past the end of the buffer."""

    kind = ErrorKind.TRUNCATED_VALUE
    default_message = "Value is truncated"


class MissingKeyError(MConfigError, KeyError):
    """Raised when a key is absent, or a decoded key has no value-length byte."""

    kind = ErrorKind.MISSING_KEY
    default_message = "Key is missing"

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0]) if self.args else self.default_message


class InvalidUTF8Error(MConfigError):
    """Raised when decoded key or value bytes are not valid UTF-8."""

    kind = ErrorKind.INVALID_UTF8
    default_message = "Bytes are not valid UTF-8"


class KeyTooBigError(MConfigError):
    """Raised when a key is longer than 255 bytes once UTF-8 encoded."""

    kind = ErrorKind.KEY_TOO_BIG
    default_message = "Key is longer than 255 bytes"


class EmptyKeyError(MConfigError, ValueError):
    """Raised when inserting a zero-length key, which would encode as the end-of-data marker."""

    kind = ErrorKind.EMPTY_KEY
    default_message = "Key must not be empty"


class ValueTooBigError(MConfigError):
    """Raised when a value is longer than 255 bytes once UTF-8 encoded."""

    kind = ErrorKind.VALUE_TOO_BIG
    default_message = "Value is longer than 255 bytes"


# 🌶️📦🔚
