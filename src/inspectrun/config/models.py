# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models for an inspection run."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..severity import ProblemLevel
from ..workspace.discovery import DEFAULT_EXCLUDES


class InspectionSettings(BaseModel):
    """Per-inspection settings."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    quick_fix: bool = False


class InspectionGroup(BaseModel):
    """Inspections configured at one severity plus that severity's maximum."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    max: int | None = Field(default=None, ge=0)
    inspections: dict[str, InspectionSettings] = Field(default_factory=dict)

    @field_validator("inspections", mode="before")
    @classmethod
    def _coerce_inspections(cls, value: Any) -> Any:
        """Accept a plain list of inspection names as shorthand."""

        if isinstance(value, (list, tuple)):
            return {str(name): {} for name in value}
        return value

    def is_too_many(self, count: int) -> bool:
        """Return ``True`` when ``count`` exceeds the configured maximum."""

        return self.max is not None and count > self.max


class ReportConfig(BaseModel):
    """Console and report file output."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid", populate_by_name=True)

    quiet: bool = False
    xml: Path | None = None
    html: Path | None = None
    json_path: Path | None = Field(default=None, alias="json")


class DiscoveryConfig(BaseModel):
    """Where to look for source files."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    roots: list[Path] = Field(default_factory=lambda: [Path()])
    excludes: list[str] = Field(default_factory=lambda: list(DEFAULT_EXCLUDES))


class Config(BaseModel):
    """Top-level configuration consumed by the inspection engine."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    errors: InspectionGroup = Field(default_factory=InspectionGroup)
    warnings: InspectionGroup = Field(default_factory=InspectionGroup)
    info: InspectionGroup = Field(default_factory=InspectionGroup)
    inherit_from_host: bool = False
    profile_name: str | None = None
    fix_enabled: bool = False
    ignore_failures: bool = False
    reports: ReportConfig = Field(default_factory=ReportConfig)
    discovery: DiscoveryConfig = Field(default_factory=DiscoveryConfig)

    def groups(self) -> tuple[tuple[ProblemLevel, InspectionGroup], ...]:
        """Return ``(level, group)`` pairs in precedence order, lowest first."""

        return (
            (ProblemLevel.ERROR, self.errors),
            (ProblemLevel.WARNING, self.warnings),
            (ProblemLevel.INFO, self.info),
        )

    def inspections_with_level(self) -> dict[str, ProblemLevel]:
        """Return every explicitly named inspection with its configured level.

        A name listed in several groups takes the level of the last group.
        """

        resolved: dict[str, ProblemLevel] = {}
        for level, group in self.groups():
            for name in group.inspections:
                resolved[name] = level
        return resolved

    @property
    def inspections(self) -> dict[str, InspectionSettings]:
        """Return the merged name to settings mapping across all groups."""

        merged: dict[str, InspectionSettings] = {}
        for _level, group in self.groups():
            merged.update(group.inspections)
        return merged

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


__all__ = [
    "Config",
    "DiscoveryConfig",
    "InspectionGroup",
    "InspectionSettings",
    "ReportConfig",
]
