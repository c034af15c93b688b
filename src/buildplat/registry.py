#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Registry of platform descriptors owned by a configuration load."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from provide.foundation import logger

from buildplat.builder import DescriptorBuilder
from buildplat.descriptor import PlatformDescriptor
from buildplat.exceptions import DuplicateNameError, UnknownPlatformError
from buildplat.validation import require_text


class PlatformRegistry:
    """Named set of platform descriptors.

    A registry is created by whoever loads configuration and passed along
    explicitly; there is no process-wide instance.
    """

    def __init__(self) -> None:
        self._platforms: dict[str, PlatformDescriptor] = {}

    def define(self, name: str) -> DescriptorBuilder:
        """Start declaring a new platform.

        Raises:
            DuplicateNameError: ``name`` is already registered.
            InvalidValueError: ``name`` is empty.
        """
        require_text(name, "name")
        self._ensure_available(name)
        return DescriptorBuilder(name, registry=self)

    @contextmanager
    def platform(self, name: str) -> Iterator[DescriptorBuilder]:
        """Declare a platform in a ``with`` block.

        The builder is finalized when the block exits cleanly. If the block
        raises, nothing is registered.

        Example:
            ```python
            registry = PlatformRegistry()
            with registry.platform("el-7-x86_64") as plat:
                plat.service_dir("/usr/lib/systemd/system")
                plat.service_type("systemd")
            ```
        """
        builder = self.define(name)
        yield builder
        builder.finalize()

    def register(self, descriptor: PlatformDescriptor) -> PlatformDescriptor:
        """Add a finalized descriptor."""
        self._ensure_available(descriptor.name)
        self._platforms[descriptor.name] = descriptor
        logger.debug("Platform registered", platform=descriptor.name, total=len(self._platforms))
        return descriptor

    def _ensure_available(self, name: str) -> None:
        if name in self._platforms:
            raise DuplicateNameError(f"Platform '{name}' is already defined")

    def get(self, name: str) -> PlatformDescriptor:
        try:
            return self._platforms[name]
        except KeyError:
            raise UnknownPlatformError(f"Unknown platform '{name}'") from None

    def names(self) -> list[str]:
        return sorted(self._platforms)

    def to_records(self) -> list[dict[str, Any]]:
        return [descriptor.to_record() for descriptor in self]

    def __contains__(self, name: object) -> bool:
        return name in self._platforms

    def __len__(self) -> int:
        return len(self._platforms)

    def __iter__(self) -> Iterator[PlatformDescriptor]:
        for name in self.names():
            yield self._platforms[name]

    def __repr__(self) -> str:
        return f"PlatformRegistry({self.names()!r})"


# 🌶️📦🔚
