# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Host inspection profiles stored as TOML under ``.inspectrun/profiles``."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Final, Protocol

from ..errors import ConfigError

PROFILES_PATH: Final[Path] = Path(".inspectrun") / "profiles"
PROFILES_SETTINGS_FILE: Final[str] = "profiles_settings.toml"
DEFAULT_PROFILE_NAME: Final[str] = "default"
PROFILE_SUFFIX: Final[str] = ".toml"


@dataclass(frozen=True, slots=True)
class ProfileEntry:
    """One inspection listed in a profile, with the profile's own severity name."""

    name: str
    enabled: bool
    level: str | None


@dataclass(frozen=True, slots=True)
class Profile:
    """Named set of inspection entries."""

    name: str
    entries: tuple[ProfileEntry, ...]

    def enabled_entries(self) -> tuple[ProfileEntry, ...]:
        return tuple(entry for entry in self.entries if entry.enabled)


class ProfileStore(Protocol):
    """Source of host inspection profiles."""

    def load_profile(self, name: str | None = None) -> Profile:
        """Return the profile called ``name`` or the current profile when ``None``."""
        raise NotImplementedError


class TomlProfileStore:
    """Load profiles from ``<root>/.inspectrun/profiles/<name>.toml``.

    The current profile is named by ``current`` in ``profiles_settings.toml``
    and falls back to ``default``. A missing current profile is empty; a
    missing named profile is a configuration error.
    """

    def __init__(self, root: Path) -> None:
        self._directory = root / PROFILES_PATH

    @property
    def directory(self) -> Path:
        return self._directory

    def current_profile_name(self) -> str:
        settings = self._directory / PROFILES_SETTINGS_FILE
        if not settings.is_file():
            return DEFAULT_PROFILE_NAME
        data = self._read(settings)
        current = data.get("current")
        return str(current) if current else DEFAULT_PROFILE_NAME

    def load_profile(self, name: str | None = None) -> Profile:
        """Load a named profile, or the current one when ``name`` is ``None``.

        Raises:
            ConfigError: If a named profile does not exist or is malformed.
        """

        explicit = name is not None
        profile_name = name if name is not None else self.current_profile_name()
        path = self._directory / profile_name
        if path.suffix != PROFILE_SUFFIX:
            path = path.with_name(path.name + PROFILE_SUFFIX)
        if not path.is_file():
            if explicit:
                raise ConfigError(f"Inspection profile '{profile_name}' not found at {path}")
            return Profile(name=profile_name, entries=())
        data = self._read(path)
        return Profile(name=str(data.get("name", profile_name)), entries=self._parse_entries(data, path))

    @staticmethod
    def _read(path: Path) -> Mapping[str, Any]:
        try:
            with path.open("rb") as handle:
                return tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid profile {path}: {exc}") from exc

    @staticmethod
    def _parse_entries(data: Mapping[str, Any], path: Path) -> tuple[ProfileEntry, ...]:
        section = data.get("inspections", {})
        if not isinstance(section, Mapping):
            raise ConfigError(f"'inspections' in {path} must be a table")
        entries: list[ProfileEntry] = []
        for name, raw in section.items():
            if not isinstance(raw, Mapping):
                raise ConfigError(f"Profile entry '{name}' in {path} must be a table")
            level = raw.get("level")
            entries.append(
                ProfileEntry(
                    name=str(name),
                    enabled=bool(raw.get("enabled", True)),
                    level=str(level) if level is not None else None,
                ),
            )
        return tuple(entries)


__all__ = [
    "DEFAULT_PROFILE_NAME",
    "PROFILES_PATH",
    "Profile",
    "ProfileEntry",
    "ProfileStore",
    "TomlProfileStore",
]
