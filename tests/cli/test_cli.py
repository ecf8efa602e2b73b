#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for the mconfig command-line interface."""

from __future__ import annotations

from pathlib import Path

from click.testing import CliRunner
import pytest

from mconfig import MConfig
from mconfig.cli import main as cli_main
from mconfig.format.constants import MCONFIG_SIZE
from mconfig.store import Entry


def load(path: Path, secret: str | None = "TACOS") -> MConfig:
    return MConfig.open(path, secret=secret)


class TestEditRead:
    """Test read-only uses of `mconfig edit`."""

    def test_list(self, store_file: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(cli_main, ["edit", str(store_file), "--list"], input="TACOS\n")

        assert result.exit_code == 0, result.output
        assert f"Loaded {MCONFIG_SIZE} bytes" in result.output
        assert "Loaded MConfig data with 2 entries." in result.output
        assert "Hello: World" in result.output
        assert "Bye: <empty>" in result.output

    def test_get_key(self, store_file: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(cli_main, ["edit", str(store_file), "-k", "Hello"], input="TACOS\n")

        assert result.exit_code == 0, result.output
        assert "Hello: World" in result.output

    def test_get_missing_key_is_not_an_error(self, store_file: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(cli_main, ["edit", str(store_file), "--key", "absent"], input="TACOS\n")

        assert result.exit_code == 0, result.output
        assert "absent not found." in result.output

    def test_read_does_not_rewrite(self, store_file: Path) -> None:
        before = store_file.read_bytes()
        runner = CliRunner()
        runner.invoke(cli_main, ["edit", str(store_file), "--list"], input="TACOS\n")
        assert store_file.read_bytes() == before

    def test_secret_from_environment(self, store_file: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli_main,
            ["edit", str(store_file), "--list"],
            env={"MCONFIG_SECRET": "TACOS"},
        )

        assert result.exit_code == 0, result.output
        assert "Enter secret" not in result.output
        assert "Hello: World" in result.output

    def test_empty_secret_from_environment_skips_prompt(self, tmp_path: Path) -> None:
        path = tmp_path / "plain.bin"
        MConfig.from_dict({"Hello": "World"}).save(path)

        runner = CliRunner()
        result = runner.invoke(
            cli_main,
            ["edit", str(path), "--list"],
            env={"MCONFIG_SECRET": ""},
            input="TACOS\n",
        )

        assert result.exit_code == 0, result.output
        assert "Enter secret" not in result.output
        assert "Loaded MConfig data with 1 entries." in result.output
        assert "Hello: World" in result.output


class TestEditWrite:
    """Test mutating uses of `mconfig edit`."""

    def test_set_value(self, store_file: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli_main,
            ["edit", str(store_file), "--key", "user", "--value", "alice"],
            input="TACOS\n",
        )

        assert result.exit_code == 0, result.output
        assert "Added value alice to key user. Previous value: n/a" in result.output
        assert load(store_file).get("user") == Entry("user", "alice")
        assert store_file.stat().st_size == MCONFIG_SIZE

    def test_replace_value_reports_previous(self, store_file: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli_main,
            ["edit", str(store_file), "-k", "Hello", "-v", "There"],
            input="TACOS\n",
        )

        assert result.exit_code == 0, result.output
        assert "Previous value: World" in result.output
        assert load(store_file).try_get("Hello") == "There"

    def test_set_empty(self, store_file: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli_main,
            ["edit", str(store_file), "--key", "Hello", "--empty"],
            input="TACOS\n",
        )

        assert result.exit_code == 0, result.output
        assert "Added empty Hello. Previous value: World" in result.output
        assert load(store_file).get("Hello") == Entry("Hello", None)

    def test_remove(self, store_file: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli_main,
            ["edit", str(store_file), "--key", "Hello", "--remove"],
            input="TACOS\n",
        )

        assert result.exit_code == 0, result.output
        assert "Removed Hello with value World" in result.output
        assert load(store_file).get("Hello") is None

    def test_remove_missing_leaves_file(self, store_file: Path) -> None:
        before = store_file.read_bytes()
        runner = CliRunner()
        result = runner.invoke(
            cli_main,
            ["edit", str(store_file), "--key", "absent", "--remove"],
            input="TACOS\n",
        )

        assert result.exit_code == 0, result.output
        assert store_file.read_bytes() == before

    def test_value_too_big_aborts(self, store_file: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli_main,
            ["edit", str(store_file), "--key", "k", "--value", "v" * 256],
            input="TACOS\n",
        )

        assert result.exit_code != 0
        assert load(store_file).get("k") is None


class TestEditErrors:
    """Test error reporting and argument validation."""

    def test_bad_header_aborts(self, tmp_path: Path) -> None:
        path = tmp_path / "junk.mconf"
        path.write_bytes(b"\x00" * MCONFIG_SIZE)
        runner = CliRunner()
        result = runner.invoke(cli_main, ["edit", str(path), "--list"], input="\n")

        assert result.exit_code != 0
        assert "Failed to process MConfig data" in result.output

    def test_wrong_secret_never_lists_original(self, store_file: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(cli_main, ["edit", str(store_file), "--list"], input="BURRITOS\n")
        assert "Hello: World" not in result.output

    def test_missing_file(self, tmp_path: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(cli_main, ["edit", str(tmp_path / "nope.mconf"), "--list"])
        assert result.exit_code == 2

    @pytest.mark.parametrize(
        "args",
        [
            ["--list", "--key", "k"],
            ["--value", "v"],
            ["--empty"],
            ["--key", "k", "--value", "v", "--empty"],
            ["--key", "k", "--value", "v", "--remove"],
            ["--key", "k", "--empty", "--remove"],
        ],
    )
    def test_conflicting_options(self, store_file: Path, args: list[str]) -> None:
        before = store_file.read_bytes()
        runner = CliRunner()
        result = runner.invoke(cli_main, ["edit", str(store_file), *args], input="TACOS\n")

        assert result.exit_code == 2
        assert store_file.read_bytes() == before


class TestInit:
    """Test `mconfig init`."""

    def test_init_creates_empty_store(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "new.mconf"
        runner = CliRunner()
        result = runner.invoke(cli_main, ["init", str(path)], input="TACOS\n")

        assert result.exit_code == 0, result.output
        assert path.stat().st_size == MCONFIG_SIZE
        assert len(load(path)) == 0

    def test_init_without_secret(self, tmp_path: Path) -> None:
        path = tmp_path / "plain.mconf"
        runner = CliRunner()
        result = runner.invoke(cli_main, ["init", str(path)], input="\n")

        assert result.exit_code == 0, result.output
        assert path.read_bytes()[6] == 0
        assert len(load(path, secret=None)) == 0

    def test_init_refuses_to_overwrite(self, store_file: Path) -> None:
        before = store_file.read_bytes()
        runner = CliRunner()
        result = runner.invoke(cli_main, ["init", str(store_file)], input="TACOS\n")

        assert result.exit_code != 0
        assert store_file.read_bytes() == before

    def test_init_force(self, store_file: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(cli_main, ["init", str(store_file), "--force"], input="TACOS\n")

        assert result.exit_code == 0, result.output
        assert len(load(store_file)) == 0


def test_version() -> None:
    runner = CliRunner()
    result = runner.invoke(cli_main, ["--version"])
    assert result.exit_code == 0
    assert "mconfig version" in result.output


# 🌶️📦🔚
