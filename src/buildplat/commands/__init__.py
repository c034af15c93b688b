#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Command modules for the buildplat CLI."""

from __future__ import annotations

from buildplat.commands.platforms import list_command, show_command
from buildplat.commands.render import render_command
from buildplat.commands.validate import validate_command

__all__ = [
    "list_command",
    "render_command",
    "show_command",
    "validate_command",
]

# 🌶️📦🔚
