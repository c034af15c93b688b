#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""buildplat configuration built on the Provide Foundation config stack."""

from __future__ import annotations

from buildplat.config.runtime import (
    BuildplatRuntimeConfig,
    parse_log_level,
    parse_output_format,
)

__all__ = [
    "BuildplatRuntimeConfig",
    "parse_log_level",
    "parse_output_format",
]

# 🌶️📦🔚
