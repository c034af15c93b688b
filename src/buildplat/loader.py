#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Load platform declarations from TOML and JSON files."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
import tomllib
from typing import Any

from provide.foundation import logger
from provide.foundation.file.formats import read_json

from buildplat.builder import builder_from_record
from buildplat.config.defaults import DECLARATION_SUFFIXES, TOML_PLATFORM_TABLE
from buildplat.descriptor import PlatformDescriptor
from buildplat.exceptions import BuildplatError, PlatformLoadError
from buildplat.registry import PlatformRegistry

BUILTIN_PLATFORMS_DIR = Path(__file__).parent / "platforms"


def load_platform_file(path: Path, registry: PlatformRegistry) -> PlatformDescriptor:
    """Load a single declaration file into ``registry``.

    The platform name defaults to the file stem when the file does not set
    one, so ``el-7-x86_64.toml`` declares ``el-7-x86_64``.

    Raises:
        PlatformLoadError: The file cannot be read or parsed.
        DescriptorError: The declaration itself is invalid.
    """
    record = _read_declaration(path)
    logger.debug("Loading platform declaration", path=str(path))
    try:
        return builder_from_record(record, registry=registry, default_name=path.stem).finalize()
    except BuildplatError as e:
        e.add_note(f"while loading {path}")
        raise


def load_platforms(
    paths: Iterable[Path | str],
    registry: PlatformRegistry | None = None,
) -> PlatformRegistry:
    """Load every declaration found in ``paths``.

    Directories contribute their ``*.toml`` and ``*.json`` files in name
    order; files are loaded as given. The first error aborts the load.
    """
    if registry is None:
        registry = PlatformRegistry()

    for entry in paths:
        path = Path(entry)
        if path.is_dir():
            for file_path in _declaration_files(path):
                load_platform_file(file_path, registry)
        elif path.is_file():
            load_platform_file(path, registry)
        else:
            raise PlatformLoadError(f"Platform path does not exist: {path}")

    logger.info("Platforms loaded", count=len(registry))
    return registry


def load_builtin_platforms(registry: PlatformRegistry | None = None) -> PlatformRegistry:
    """Load the declarations shipped with buildplat."""
    return load_platforms([BUILTIN_PLATFORMS_DIR], registry)


def _declaration_files(directory: Path) -> list[Path]:
    return sorted(p for p in directory.iterdir() if p.is_file() and p.suffix in DECLARATION_SUFFIXES)


def _read_declaration(path: Path) -> dict[str, Any]:
    if path.suffix == ".toml":
        data = _read_toml(path)
    elif path.suffix == ".json":
        data = _read_json(path)
    else:
        raise PlatformLoadError(f"Unsupported declaration file type '{path.suffix}': {path}")

    if not isinstance(data, dict):
        raise PlatformLoadError(f"Platform declaration must be a table/object: {path}")

    # Both the flat form and a single [platform] table are accepted.
    nested = data.get(TOML_PLATFORM_TABLE)
    if isinstance(nested, dict):
        if len(data) > 1:
            raise PlatformLoadError(f"Unexpected keys next to [{TOML_PLATFORM_TABLE}] table: {path}")
        return nested
    return data


def _read_toml(path: Path) -> Any:
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except OSError as e:
        raise PlatformLoadError(f"Cannot read {path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise PlatformLoadError(f"Invalid TOML in {path}: {e}") from e


def _read_json(path: Path) -> Any:
    try:
        data = read_json(path)
    except (OSError, ValueError) as e:
        raise PlatformLoadError(f"Invalid JSON in {path}: {e}") from e
    if data is None:
        raise PlatformLoadError(f"Empty or unreadable JSON declaration: {path}")
    return data


# 🌶️📦🔚
