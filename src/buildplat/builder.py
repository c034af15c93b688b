#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Fluent builder that assembles and freezes platform descriptors."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import PurePath
from typing import TYPE_CHECKING, Any

from provide.foundation import logger

from buildplat.config.defaults import RECORD_FIELDS
from buildplat.descriptor import PlatformDescriptor
from buildplat.exceptions import DescriptorFrozenError, IncompleteDescriptorError, InvalidValueError
from buildplat.validation import require_absolute_path, require_string_list, require_text

if TYPE_CHECKING:
    from buildplat.registry import PlatformRegistry


class DescriptorBuilder:
    """Mutable, in-progress platform declaration.

    Setters return the builder so calls can be chained; the last write to an
    attribute wins. ``finalize()`` freezes the result and, when the builder
    was created by a registry, registers it there.
    """

    def __init__(self, name: str, registry: PlatformRegistry | None = None) -> None:
        self._name = require_text(name, "name")
        self._registry = registry
        self._service_dir: str | None = None
        self._default_dir: str | None = None
        self._service_type: str | None = None
        self._build_repositories: list[str] = []
        self._packages: list[str] = []
        self._provision_command: str | None = None
        self._install_build_dependencies_command: str | None = None
        self._vmpooler_template: str | None = None
        self._descriptor: PlatformDescriptor | None = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def finalized(self) -> bool:
        return self._descriptor is not None

    def _check_open(self) -> None:
        if self._descriptor is not None:
            raise DescriptorFrozenError(f"Platform '{self._name}' is already finalized")

    def service_dir(self, path: str | PurePath) -> DescriptorBuilder:
        self._check_open()
        self._service_dir = require_absolute_path(path, "service_dir")
        return self

    def default_dir(self, path: str | PurePath) -> DescriptorBuilder:
        self._check_open()
        self._default_dir = require_absolute_path(path, "default_dir")
        return self

    def service_type(self, tag: str) -> DescriptorBuilder:
        self._check_open()
        self._service_type = require_text(tag, "service_type")
        return self

    def add_build_repository(self, url: str) -> DescriptorBuilder:
        self._check_open()
        self._build_repositories.append(require_text(url, "build_repository"))
        return self

    def packages(self, *names: str) -> DescriptorBuilder:
        """Replace the package set. Duplicates are dropped, first one kept."""
        self._check_open()
        self._packages = []
        for name in names:
            self._append_package(name)
        return self

    def add_package(self, name: str) -> DescriptorBuilder:
        self._check_open()
        self._append_package(name)
        return self

    def _append_package(self, name: str) -> None:
        package = require_text(name, "package")
        if package not in self._packages:
            self._packages.append(package)

    def provision_with(self, template: str) -> DescriptorBuilder:
        self._check_open()
        self._provision_command = require_text(template, "provision_command")
        return self

    def install_build_dependencies_with(self, template: str) -> DescriptorBuilder:
        self._check_open()
        self._install_build_dependencies_command = require_text(template, "install_build_dependencies_command")
        return self

    def vmpooler_template(self, name: str) -> DescriptorBuilder:
        self._check_open()
        self._vmpooler_template = require_text(name, "vmpooler_template")
        return self

    def finalize(self) -> PlatformDescriptor:
        """Freeze the declaration into an immutable descriptor.

        Returns:
            The frozen descriptor. Calling again returns the same object.

        Raises:
            IncompleteDescriptorError: ``service_type`` is unset, or the
                provision template expects packages and none were given.
            DuplicateNameError: the owning registry already holds the name.
        """
        if self._descriptor is not None:
            return self._descriptor

        if self._service_type is None:
            raise IncompleteDescriptorError(f"Platform '{self._name}' has no service_type")

        descriptor = PlatformDescriptor(
            name=self._name,
            service_type=self._service_type,
            service_dir=self._service_dir,
            default_dir=self._default_dir,
            build_repositories=self._build_repositories,
            packages=self._packages,
            provision_command=self._provision_command,
            install_build_dependencies_command=self._install_build_dependencies_command,
            vmpooler_template=self._vmpooler_template,
        )
        if self._registry is not None:
            self._registry.register(descriptor)

        self._descriptor = descriptor
        logger.debug(
            "Platform finalized",
            platform=descriptor.name,
            service_type=descriptor.service_type,
            packages=len(descriptor.packages),
        )
        return descriptor


def builder_from_record(
    record: Mapping[str, Any],
    registry: PlatformRegistry | None = None,
    default_name: str | None = None,
) -> DescriptorBuilder:
    """Populate a builder from a flat record.

    ``None`` values are treated as unset. Keys outside the record schema are
    rejected so typos in declaration files do not pass silently.
    """
    if not isinstance(record, Mapping):
        raise InvalidValueError(f"Platform record must be a mapping, got {type(record).__name__}")

    unknown = sorted(set(record) - set(RECORD_FIELDS))
    if unknown:
        raise InvalidValueError(f"Unknown platform attributes: {', '.join(unknown)}")

    name = record.get("name", default_name)
    if name is None:
        raise IncompleteDescriptorError("Platform record has no name")

    builder = registry.define(name) if registry is not None else DescriptorBuilder(name)

    if record.get("service_dir") is not None:
        builder.service_dir(record["service_dir"])
    if record.get("default_dir") is not None:
        builder.default_dir(record["default_dir"])
    if record.get("service_type") is not None:
        builder.service_type(record["service_type"])
    for url in require_string_list(record.get("build_repositories") or [], "build_repositories"):
        builder.add_build_repository(url)
    builder.packages(*require_string_list(record.get("packages") or [], "packages"))
    if record.get("provision_command") is not None:
        builder.provision_with(record["provision_command"])
    if record.get("install_build_dependencies_command") is not None:
        builder.install_build_dependencies_with(record["install_build_dependencies_command"])
    if record.get("vmpooler_template") is not None:
        builder.vmpooler_template(record["vmpooler_template"])

    return builder


# 🌶️📦🔚
