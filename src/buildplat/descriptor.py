#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Immutable platform descriptor value and its flat record form."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import PurePath
from typing import Any

from attrs import Attribute, define, field
from attrs.validators import optional

from buildplat.config.defaults import (
    PACKAGE_SEPARATOR,
    PACKAGES_PLACEHOLDER,
    PLATFORM_NAME_MIN_PARTS,
)
from buildplat.exceptions import IncompleteDescriptorError
from buildplat.validation import require_absolute_path, require_string_list, require_text, unique_names


def _text(instance: Any, attribute: Attribute, value: Any) -> None:
    require_text(value, attribute.name)


def _absolute_path(instance: Any, attribute: Attribute, value: Any) -> None:
    require_absolute_path(value, attribute.name)


def _posix_path(value: Any) -> Any:
    return value.as_posix() if isinstance(value, PurePath) else value


def _repositories(values: Any) -> tuple[str, ...]:
    return tuple(require_string_list(values, "build_repositories"))


def _packages(values: Any) -> tuple[str, ...]:
    return tuple(unique_names(values, "packages"))


@define(frozen=True)
class PlatformDescriptor:
    """How to provision and package software for one target platform.

    Instances are usually produced by ``DescriptorBuilder.finalize()`` or
    ``PlatformDescriptor.from_record()``. Direct construction runs the same
    checks: non-blank text, absolute POSIX directories, and packages for a
    ``%s`` provision template. Repeated packages are dropped.
    """

    name: str = field(validator=_text)
    service_type: str = field(validator=_text)
    service_dir: str | None = field(default=None, converter=_posix_path, validator=optional(_absolute_path))
    default_dir: str | None = field(default=None, converter=_posix_path, validator=optional(_absolute_path))
    build_repositories: tuple[str, ...] = field(default=(), converter=_repositories)
    packages: tuple[str, ...] = field(default=(), converter=_packages)
    provision_command: str | None = field(default=None, validator=optional(_text))
    install_build_dependencies_command: str | None = field(default=None, validator=optional(_text))
    vmpooler_template: str | None = field(default=None, validator=optional(_text))

    def __attrs_post_init__(self) -> None:
        if (
            self.provision_command is not None
            and PACKAGES_PLACEHOLDER in self.provision_command
            and not self.packages
        ):
            raise IncompleteDescriptorError(
                f"Platform '{self.name}' provision command expects packages but none are declared"
            )

    # Name parsing: "cisco-wrlinux-5-x86_64" -> ("cisco-wrlinux", "5", "x86_64")

    def _name_parts(self) -> tuple[str, str, str]:
        parts = self.name.rsplit("-", PLATFORM_NAME_MIN_PARTS - 1)
        if len(parts) < PLATFORM_NAME_MIN_PARTS or not all(parts):
            return self.name, "", ""
        return parts[0], parts[1], parts[2]

    @property
    def os_name(self) -> str:
        return self._name_parts()[0]

    @property
    def os_version(self) -> str:
        return self._name_parts()[1]

    @property
    def architecture(self) -> str:
        return self._name_parts()[2]

    def finalize(self) -> PlatformDescriptor:
        """Already frozen; returns ``self`` unchanged."""
        return self

    def render_provision_command(self) -> str | None:
        """Render the provision template with this platform's packages.

        Every ``%s`` in the template is replaced by the package names joined
        with single spaces. A template without the placeholder is returned
        verbatim.
        """
        if self.provision_command is None:
            return None
        if PACKAGES_PLACEHOLDER not in self.provision_command:
            return self.provision_command
        return self.provision_command.replace(PACKAGES_PLACEHOLDER, PACKAGE_SEPARATOR.join(self.packages))

    @property
    def provision_command_rendered(self) -> str | None:
        return self.render_provision_command()

    def render_build_dependencies_command(self, dependencies: Iterable[str] = ()) -> str | None:
        """Append build dependency names to the install command prefix."""
        if self.install_build_dependencies_command is None:
            return None
        deps = list(dependencies)
        if not deps:
            return self.install_build_dependencies_command
        return PACKAGE_SEPARATOR.join([self.install_build_dependencies_command, *deps])

    def to_record(self) -> dict[str, Any]:
        """Flat, JSON-serializable record of every stored field."""
        return {
            "name": self.name,
            "service_dir": self.service_dir,
            "default_dir": self.default_dir,
            "service_type": self.service_type,
            "build_repositories": list(self.build_repositories),
            "packages": list(self.packages),
            "provision_command": self.provision_command,
            "install_build_dependencies_command": self.install_build_dependencies_command,
            "vmpooler_template": self.vmpooler_template,
        }

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> PlatformDescriptor:
        """Rebuild a descriptor from a flat record, validating every field."""
        from buildplat.builder import builder_from_record

        return builder_from_record(record).finalize()


__all__ = ["PlatformDescriptor"]

# 🌶️📦🔚
