#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for the buildplat command-line interface."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any
from unittest.mock import patch

from click.testing import CliRunner

from buildplat.cli import main as cli_main

QUIET = {"BUILDPLAT_LOG_LEVEL": "WARNING"}


def _json_record(output: str) -> dict[str, Any]:
    """Extract the pretty-printed record, ignoring any log lines around it."""
    lines = output.splitlines()
    start = lines.index("{")
    end = len(lines) - 1 - lines[::-1].index("}")
    return json.loads("\n".join(lines[start : end + 1]))


class TestListCommand:
    """Test suite for 'buildplat list'."""

    def test_list_builtin(self) -> None:
        runner = CliRunner()
        with patch.dict(os.environ, {}, clear=False) as env:
            env.pop("BUILDPLAT_PLATFORMS_PATH", None)
            result = runner.invoke(cli_main, ["list"])
        assert result.exit_code == 0, result.output
        assert "cisco-wrlinux-5-x86_64" in result.output

    def test_list_path(self, platforms_dir: Path) -> None:
        result = CliRunner().invoke(cli_main, ["list", "--path", str(platforms_dir)])
        assert result.exit_code == 0, result.output
        assert "debian-10-amd64" in result.stdout
        assert "el-7-x86_64" in result.stdout
        assert "cisco-wrlinux-5-x86_64" not in result.stdout

    def test_list_verbose(self, platforms_dir: Path) -> None:
        result = CliRunner().invoke(cli_main, ["list", "-v", "-p", str(platforms_dir)])
        assert result.exit_code == 0, result.output
        assert "el-7-x86_64  (service=systemd, os=el 7, arch=x86_64)" in result.output

    def test_list_from_env_path(self, platforms_dir: Path) -> None:
        with patch.dict(os.environ, {"BUILDPLAT_PLATFORMS_PATH": str(platforms_dir)}):
            result = CliRunner().invoke(cli_main, ["list"])
        assert result.exit_code == 0, result.output
        assert "debian-10-amd64" in result.output
        assert "cisco-wrlinux-5-x86_64" not in result.output

    def test_list_empty(self, tmp_path: Path) -> None:
        result = CliRunner().invoke(cli_main, ["list", "--path", str(tmp_path)])
        assert result.exit_code == 0
        assert "No platforms defined." in result.output

    def test_list_invalid_declaration(self, tmp_path: Path) -> None:
        (tmp_path / "p.toml").write_text('service_dir = "/etc/init.d"\n')
        result = CliRunner().invoke(cli_main, ["list", "--path", str(tmp_path)])
        assert result.exit_code == 1


class TestShowCommand:
    """Test suite for 'buildplat show'."""

    def test_show_json(self, platforms_dir: Path) -> None:
        with patch.dict(os.environ, QUIET):
            result = CliRunner().invoke(
                cli_main, ["show", "el-7-x86_64", "--path", str(platforms_dir), "--format", "json"]
            )
        assert result.exit_code == 0, result.output
        record = _json_record(result.stdout)
        assert record["name"] == "el-7-x86_64"
        assert record["packages"] == ["gcc", "make"]
        assert record["vmpooler_template"] is None

    def test_show_text(self, platforms_dir: Path) -> None:
        result = CliRunner().invoke(cli_main, ["show", "el-7-x86_64", "--path", str(platforms_dir)])
        assert result.exit_code == 0, result.output
        assert "service_type" in result.output
        assert "  - gcc" in result.output

    def test_show_format_from_env(self, platforms_dir: Path) -> None:
        with patch.dict(os.environ, {**QUIET, "BUILDPLAT_OUTPUT_FORMAT": "json"}):
            result = CliRunner().invoke(cli_main, ["show", "debian-10-amd64", "-p", str(platforms_dir)])
        assert result.exit_code == 0, result.output
        assert _json_record(result.stdout)["default_dir"] == "/etc/default"

    def test_show_unknown(self, platforms_dir: Path) -> None:
        result = CliRunner().invoke(cli_main, ["show", "nope", "--path", str(platforms_dir)])
        assert result.exit_code == 1


class TestRenderCommand:
    """Test suite for 'buildplat render'."""

    def test_render_builtin(self) -> None:
        with patch.dict(os.environ, {}, clear=False) as env:
            env.pop("BUILDPLAT_PLATFORMS_PATH", None)
            result = CliRunner().invoke(cli_main, ["render", "cisco-wrlinux-5-x86_64", "-d", "openssl-devel"])
        assert result.exit_code == 0, result.output
        assert (
            "provision: yum install -y --nogpgcheck  make pkgconfig pl-cmake readline-devel zlib-devel"
            in result.output
        )
        assert "build-deps: yum install -y openssl-devel" in result.output

    def test_render_without_commands(self, tmp_path: Path) -> None:
        (tmp_path / "bare-1-x86_64.toml").write_text('service_type = "sysv"\n')
        result = CliRunner().invoke(cli_main, ["render", "bare-1-x86_64", "--path", str(tmp_path)])
        assert result.exit_code == 0, result.output
        assert "declares no commands" in result.output


class TestValidateCommand:
    """Test suite for 'buildplat validate'."""

    def test_validate_ok(self, platforms_dir: Path) -> None:
        result = CliRunner().invoke(cli_main, ["validate", str(platforms_dir)])
        assert result.exit_code == 0, result.output
        assert "2 platform(s) valid" in result.output

    def test_validate_duplicate(self, platforms_dir: Path) -> None:
        result = CliRunner().invoke(
            cli_main, ["validate", str(platforms_dir), str(platforms_dir / "el-7-x86_64.toml")]
        )
        assert result.exit_code == 1

    def test_validate_requires_path(self) -> None:
        result = CliRunner().invoke(cli_main, ["validate"])
        assert result.exit_code == 2


def test_version() -> None:
    result = CliRunner().invoke(cli_main, ["--version"])
    assert result.exit_code == 0
    assert result.output.startswith("buildplat version")


# 🌶️📦🔚
