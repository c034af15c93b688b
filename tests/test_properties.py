#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Hypothesis-based properties of builders, descriptors and records."""

from __future__ import annotations

from hypothesis import HealthCheck, given, settings, strategies as st

from buildplat import DescriptorBuilder, PlatformDescriptor, PlatformRegistry

tokens = st.text(
    alphabet=st.characters(categories=("Ll", "Lu", "Nd"), include_characters="-_."),
    min_size=1,
    max_size=20,
).filter(lambda s: s.strip() != "")
absolute_paths = st.lists(tokens, min_size=1, max_size=4).map(lambda parts: "/" + "/".join(parts))
optional_paths = st.none() | absolute_paths
optional_tokens = st.none() | tokens

fixture_settings = settings(suppress_health_check=[HealthCheck.function_scoped_fixture], max_examples=75)


@st.composite
def records(draw: st.DrawFn) -> dict[str, object]:
    packages = draw(st.lists(tokens, unique=True, max_size=6))
    template = draw(st.none() | st.sampled_from(["install %s", "true", "yum install -y %s"]))
    if template is not None and "%s" in template and not packages:
        packages = ["make"]
    return {
        "name": draw(tokens),
        "service_dir": draw(optional_paths),
        "default_dir": draw(optional_paths),
        "service_type": draw(tokens),
        "build_repositories": draw(st.lists(tokens, max_size=3)),
        "packages": packages,
        "provision_command": template,
        "install_build_dependencies_command": draw(optional_tokens),
        "vmpooler_template": draw(optional_tokens),
    }


@fixture_settings
@given(record=records())
def test_record_round_trip(record: dict[str, object]) -> None:
    descriptor = PlatformDescriptor.from_record(record)
    assert descriptor.to_record() == record
    assert PlatformDescriptor.from_record(descriptor.to_record()) == descriptor


@fixture_settings
@given(name=tokens, service_type=tokens, service_dir=optional_paths, packages=st.lists(tokens, unique=True))
def test_finalize_keeps_what_was_set(
    name: str, service_type: str, service_dir: str | None, packages: list[str]
) -> None:
    builder = DescriptorBuilder(name).service_type(service_type).packages(*packages)
    if service_dir is not None:
        builder.service_dir(service_dir)
    descriptor = builder.finalize()

    assert descriptor.name == name
    assert descriptor.service_type == service_type
    assert descriptor.service_dir == service_dir
    assert descriptor.packages == tuple(packages)
    assert descriptor.finalize() is descriptor


@fixture_settings
@given(packages=st.lists(tokens, unique=True, min_size=1))
def test_rendered_command_lists_packages_in_order(packages: list[str]) -> None:
    descriptor = DescriptorBuilder("p").service_type("sysv").packages(*packages).provision_with("install %s").finalize()
    assert descriptor.render_provision_command() == "install " + " ".join(packages)


@fixture_settings
@given(names=st.lists(tokens, unique=True, max_size=8))
def test_registry_holds_each_name_once(names: list[str]) -> None:
    registry = PlatformRegistry()
    for name in names:
        registry.define(name).service_type("sysv").finalize()
    assert registry.names() == sorted(names)


# 🌶️📦🔚
