#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Console helpers shared by buildplat commands."""

from __future__ import annotations

from typing import Any

from provide.foundation.logger import get_logger


def get_command_logger(command: str) -> Any:
    """Return a structured logger named after a CLI command."""
    return get_logger(f"buildplat.commands.{command}")


# 🌶️📦🔚
