#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Custom exceptions for buildplat."""

from __future__ import annotations

from provide.foundation.errors import FoundationError


class BuildplatError(FoundationError):
    """Base exception for all buildplat errors."""

    pass


class DescriptorError(BuildplatError):
    """Raised when a platform descriptor cannot be built."""

    pass


class DuplicateNameError(DescriptorError):
    """Raised when a platform name is already registered."""

    pass


class IncompleteDescriptorError(DescriptorError):
    """Raised when a descriptor is finalized with required fields unset."""

    pass


class InvalidPathError(DescriptorError):
    """Raised when a directory attribute is not an absolute path."""

    pass


class InvalidValueError(DescriptorError):
    """Raised for empty or mistyped attribute values."""

    pass


class DescriptorFrozenError(DescriptorError):
    """Raised when a finalized builder is modified."""

    pass


class UnknownPlatformError(BuildplatError, KeyError):
    """Raised when a registry lookup misses."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0]) if self.args else ""


class PlatformLoadError(BuildplatError):
    """Raised when a platform declaration file cannot be read."""

    pass


# 🌶️📦🔚
