#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""buildplat core package exports."""

from __future__ import annotations

from provide.foundation.utils import get_version

from buildplat.builder import DescriptorBuilder
from buildplat.descriptor import PlatformDescriptor
from buildplat.exceptions import (
    BuildplatError,
    DescriptorError,
    DescriptorFrozenError,
    DuplicateNameError,
    IncompleteDescriptorError,
    InvalidPathError,
    InvalidValueError,
    PlatformLoadError,
    UnknownPlatformError,
)
from buildplat.loader import load_builtin_platforms, load_platform_file, load_platforms
from buildplat.registry import PlatformRegistry

__version__ = get_version("buildplat", caller_file=__file__)

__all__ = [
    "BuildplatError",
    "DescriptorBuilder",
    "DescriptorError",
    "DescriptorFrozenError",
    "DuplicateNameError",
    "IncompleteDescriptorError",
    "InvalidPathError",
    "InvalidValueError",
    "PlatformDescriptor",
    "PlatformLoadError",
    "PlatformRegistry",
    "UnknownPlatformError",
    "__version__",
    "load_builtin_platforms",
    "load_platform_file",
    "load_platforms",
]

# 🌶️📦🔚
