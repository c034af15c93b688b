#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared pytest fixtures and helpers for buildplat tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Any

import provide.testkit  # noqa: F401 - Installs setproctitle blocker early
from provide.testkit.logger import reset_foundation_setup_for_testing
import pytest

from buildplat.registry import PlatformRegistry

CISCO_REPO = "http://pl-build-tools.delivery.puppetlabs.net/yum/cisco-wrlinux/5/pl-build-tools-cisco-wrlinux-5.repo"


@pytest.fixture(autouse=True)
def reset_foundation_logging() -> Iterator[None]:
    """Reset foundation logging state before each test to avoid conflicts."""
    reset_foundation_setup_for_testing()
    yield
    reset_foundation_setup_for_testing()


@pytest.fixture
def registry() -> PlatformRegistry:
    return PlatformRegistry()


@pytest.fixture
def cisco_record() -> dict[str, Any]:
    """Flat record matching the bundled cisco-wrlinux-5-x86_64 declaration."""
    return {
        "name": "cisco-wrlinux-5-x86_64",
        "service_dir": "/etc/init.d",
        "default_dir": "/etc/sysconfig",
        "service_type": "sysv",
        "build_repositories": [CISCO_REPO],
        "packages": ["make", "pkgconfig", "pl-cmake", "readline-devel", "zlib-devel"],
        "provision_command": "yum install -y --nogpgcheck  %s",
        "install_build_dependencies_command": "yum install -y",
        "vmpooler_template": "cisco-wrlinux-5-x86_64",
    }


@pytest.fixture
def platforms_dir(tmp_path: Path) -> Path:
    """Directory holding one TOML and one JSON declaration."""
    directory = tmp_path / "platforms"
    directory.mkdir()
    (directory / "el-7-x86_64.toml").write_text(
        'service_dir = "/usr/lib/systemd/system"\n'
        'default_dir = "/etc/sysconfig"\n'
        'service_type = "systemd"\n'
        'packages = ["gcc", "make"]\n'
        'provision_command = "yum install -y %s"\n'
        'install_build_dependencies_command = "yum install -y"\n'
    )
    (directory / "debian-10-amd64.json").write_text(
        '{"name": "debian-10-amd64", "service_dir": "/lib/systemd/system", '
        '"default_dir": "/etc/default", "service_type": "systemd", '
        '"packages": ["build-essential"], "provision_command": "apt-get install -y %s"}'
    )
    (directory / "README.md").write_text("not a declaration\n")
    return directory


# 🌶️📦🔚
