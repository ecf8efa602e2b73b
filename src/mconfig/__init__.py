#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""MConfig: a fixed-size, lightly obfuscated key/value record store.

Example:
    ```python
    from mconfig import MConfig

    store = MConfig.builder().with_secret("TACOS").try_build()
    store.insert("Hello", "World")
    store.insert("Bye", None)
    data = store.to_vec()  # always 8,192 bytes

    loaded = MConfig.builder().with_secret("TACOS").load(data).try_build()
    loaded.get("Hello")  # Entry(key='Hello', value='World')
    ```
"""

from __future__ import annotations

from provide.foundation.utils import get_version

from mconfig.builder import MConfigBuilder
from mconfig.exceptions import (
    BadHeaderError,
    EmptyKeyError,
    ErrorKind,
    InvalidUTF8Error,
    KeyTooBigError,
    MConfigError,
    MissingKeyError,
    TooBigError,
    TooShortError,
    TruncatedKeyError,
    TruncatedValueError,
    UnknownVersionError,
    ValueTooBigError,
)
from mconfig.format.codec import parse, serialize
from mconfig.format.constants import MCONFIG_SIZE
from mconfig.store import Entry, MConfig

__version__ = get_version("mconfig", caller_file=__file__)

__all__ = [
    "MCONFIG_SIZE",
    "BadHeaderError",
    "EmptyKeyError",
    "Entry",
    "ErrorKind",
    "InvalidUTF8Error",
    "KeyTooBigError",
    "MConfig",
    "MConfigBuilder",
    "MConfigError",
    "MissingKeyError",
    "TooBigError",
    "TooShortError",
    "TruncatedKeyError",
    "TruncatedValueError",
    "UnknownVersionError",
    "ValueTooBigError",
    "__version__",
    "parse",
    "serialize",
]

# 🌶️📦🔚
