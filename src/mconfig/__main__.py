#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Allow running the CLI with ``python -m mconfig``."""

from __future__ import annotations

from mconfig.cli import main

if __name__ == "__main__":
    main()

# 🌶️📦🔚
