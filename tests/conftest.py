#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared pytest fixtures and helpers for MConfig tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import provide.testkit  # noqa: F401 - Installs setproctitle blocker early
from provide.testkit.logger import reset_foundation_setup_for_testing
import pytest

from mconfig import MConfig

TEST_SECRET = "TACOS"


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: fast, isolated unit tests")


@pytest.fixture(autouse=True)
def reset_foundation_logging() -> Iterator[None]:
    """Reset foundation logging state before each test to avoid conflicts."""
    reset_foundation_setup_for_testing()
    yield
    reset_foundation_setup_for_testing()


@pytest.fixture(autouse=True)
def no_env_secret(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make sure a developer's MCONFIG_SECRET never leaks into tests."""
    monkeypatch.delenv("MCONFIG_SECRET", raising=False)


@pytest.fixture
def empty_store() -> MConfig:
    return MConfig.builder().try_build()


@pytest.fixture
def tacos_store() -> MConfig:
    """Store with one valued key and one valueless key, secret "TACOS"."""
    store = MConfig.builder().with_secret(TEST_SECRET).try_build()
    store.insert("Hello", "World")
    store.insert("Bye", None)
    return store


@pytest.fixture
def store_file(tmp_path: Path, tacos_store: MConfig) -> Path:
    """The tacos store saved to disk."""
    path = tmp_path / "settings.mconf"
    path.write_bytes(tacos_store.to_vec())
    return path


# 🌶️📦🔚
