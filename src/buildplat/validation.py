#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Attribute checks shared by the builder and the descriptor value."""

from __future__ import annotations

from pathlib import PurePath, PurePosixPath
from typing import Any

from buildplat.exceptions import InvalidPathError, InvalidValueError


def require_text(value: Any, attribute: str) -> str:
    """Return ``value`` if it is a non-blank string."""
    if not isinstance(value, str):
        raise InvalidValueError(f"{attribute} must be a string, got {type(value).__name__}")
    if not value.strip():
        raise InvalidValueError(f"{attribute} must not be empty")
    return value


def require_absolute_path(value: Any, attribute: str) -> str:
    """Return ``value`` as a POSIX path string if it is absolute."""
    if isinstance(value, PurePath):
        value = value.as_posix()
    path = require_text(value, attribute)
    if not PurePosixPath(path).is_absolute():
        raise InvalidPathError(f"{attribute} must be an absolute path, got '{path}'")
    return path


def require_string_list(value: Any, attribute: str) -> list[str]:
    """Return the items of a list or tuple of non-blank strings.

    Sets and mappings are refused: their iteration order is not the declared
    order, and package order decides the rendered command.
    """
    if not isinstance(value, (list, tuple)):
        raise InvalidValueError(f"{attribute} must be a list of strings, got {type(value).__name__}")
    return [require_text(item, attribute) for item in value]


def unique_names(value: Any, attribute: str) -> list[str]:
    """Like ``require_string_list`` but drops repeats, keeping the first."""
    return list(dict.fromkeys(require_string_list(value, attribute)))


# 🌶️📦🔚
