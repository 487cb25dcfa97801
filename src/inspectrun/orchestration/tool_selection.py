# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve the effective inspection set from configuration and host profiles."""

from __future__ import annotations

from ..config import Config
from ..errors import ConfigError
from ..host.profiles import ProfileStore
from ..host.registry import InspectionRegistry
from ..inspections.base import tool_kind_for
from ..logging import RunLogger
from ..models import ToolDescriptor
from ..severity import ProblemLevel


def _describe(descriptors: list[ToolDescriptor]) -> dict[str, str | None]:
    return {descriptor.id: str(descriptor.level) if descriptor.level else None for descriptor in descriptors}


def resolve_registered_tools(config: Config, registry: InspectionRegistry, logger: RunLogger) -> list[ToolDescriptor]:
    """Resolve every explicitly configured inspection name.

    Args:
        config: Configuration naming inspections per severity.
        registry: Registry of every inspection the host knows.
        logger: Logger receiving the configured groups.

    Returns:
        list[ToolDescriptor]: Descriptors in configuration order.

    Raises:
        ConfigError: If a configured name matches no registered inspection.
    """

    for level, group in config.groups():
        logger.info(f"{level.name.capitalize()} inspections: {list(group.inspections)}")
    descriptors: list[ToolDescriptor] = []
    for name, level in config.inspections_with_level().items():
        inspection_cls = registry.find(name)
        if inspection_cls is None:
            raise ConfigError(f"'{name}' is not found in registrar")
        descriptors.append(
            ToolDescriptor(
                id=inspection_cls.inspection_id(),
                name=name,
                language=inspection_cls.language,
                level=level,
                tool=tool_kind_for(inspection_cls()),
            ),
        )
    return descriptors


def resolve_inherited_tools(
    config: Config,
    registry: InspectionRegistry,
    profiles: ProfileStore,
    logger: RunLogger,
) -> list[ToolDescriptor]:
    """Convert the enabled entries of the host profile into descriptors.

    Entries naming inspections the registry does not know are skipped with a
    warning.
    """

    profile = profiles.load_profile(config.profile_name)
    logger.info(f"Profile = {profile.name}")
    descriptors: list[ToolDescriptor] = []
    for entry in profile.enabled_entries():
        inspection_cls = registry.find(entry.name)
        if inspection_cls is None:
            logger.warn(f"Profile '{profile.name}' enables unknown inspection '{entry.name}'; skipped")
            continue
        descriptors.append(
            ToolDescriptor(
                id=inspection_cls.inspection_id(),
                name=inspection_cls.display_name or entry.name,
                language=inspection_cls.language,
                level=ProblemLevel.from_profile_level(entry.level),
                tool=tool_kind_for(inspection_cls()),
            ),
        )
    return descriptors


def resolve_tools(
    config: Config,
    registry: InspectionRegistry,
    *,
    profiles: ProfileStore | None,
    logger: RunLogger,
) -> list[ToolDescriptor]:
    """Return the effective inspection set for a run.

    Inherited profile entries come first; an explicitly configured inspection
    replaces the inherited one with the same id. Each id appears once.

    Args:
        config: Run configuration.
        registry: Registry of every inspection the host knows.
        profiles: Profile store consulted when ``config.inherit_from_host`` is set.
        logger: Logger receiving the resolved sets.

    Returns:
        list[ToolDescriptor]: Effective descriptors keyed uniquely by id.

    Raises:
        ConfigError: If an explicitly configured inspection cannot be resolved,
            or inheritance is requested without a profile store.
    """

    logger.info(f"Inherit from host = {config.inherit_from_host}")
    registered = resolve_registered_tools(config, registry, logger)
    inherited: list[ToolDescriptor] = []
    if config.inherit_from_host:
        if profiles is None:
            raise ConfigError("Inheriting from the host profile requires a profile store")
        inherited = resolve_inherited_tools(config, registry, profiles, logger)
    logger.info(f"Registered inspections: {_describe(registered)}")
    logger.info(f"Inspections from host: {_describe(inherited)}")

    merged: dict[str, ToolDescriptor] = {descriptor.id: descriptor for descriptor in inherited}
    for descriptor in registered:
        merged[descriptor.id] = descriptor
    tools = list(merged.values())
    logger.info(f"Inspections: {_describe(tools)}")
    return tools


__all__ = ["resolve_inherited_tools", "resolve_registered_tools", "resolve_tools"]
