#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Centralized default values for buildplat configuration."""

from __future__ import annotations

# =================================
# Logging defaults
# =================================
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_SETUP_LOG_LEVEL = "WARNING"
VALID_LOG_LEVELS = frozenset({"TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

# =================================
# Output defaults
# =================================
OUTPUT_TEXT = "text"
OUTPUT_JSON = "json"
OUTPUT_FORMATS = (OUTPUT_TEXT, OUTPUT_JSON)
DEFAULT_OUTPUT_FORMAT = OUTPUT_TEXT

# =================================
# Declaration files
# =================================
DECLARATION_SUFFIXES = (".toml", ".json")
TOML_PLATFORM_TABLE = "platform"

# =================================
# Command templates
# =================================
PACKAGES_PLACEHOLDER = "%s"
PACKAGE_SEPARATOR = " "

# =================================
# Platform naming
# =================================
# <os_name>-<os_version>-<architecture>, os_name may itself contain dashes
PLATFORM_NAME_MIN_PARTS = 3

# =================================
# Record keys
# =================================
RECORD_FIELDS = (
    "name",
    "service_dir",
    "default_dir",
    "service_type",
    "build_repositories",
    "packages",
    "provision_command",
    "install_build_dependencies_command",
    "vmpooler_template",
)

# 🌶️📦🔚
