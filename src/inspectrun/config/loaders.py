# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Load :class:`Config` from ``inspectrun.toml`` or ``pyproject.toml``."""

from __future__ import annotations

import tomllib
from collections.abc import Iterable, Mapping, MutableMapping
from pathlib import Path
from typing import Any, Final

from pydantic import ValidationError

from ..errors import ConfigError
from .models import Config

CONFIG_FILENAME: Final[str] = "inspectrun.toml"
PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "inspectrun"
INCLUDE_KEY: Final[str] = "include"


def _deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    result: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], Mapping) and isinstance(value, Mapping):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


class TomlConfigSource:
    """Load configuration data from a TOML document with include support."""

    def __init__(self, path: Path, *, include_key: str = INCLUDE_KEY) -> None:
        self._root_path = path
        self._include_key = include_key

    def load(self) -> Mapping[str, Any]:
        return self._load(self._root_path, ())

    def _load(self, path: Path, stack: tuple[Path, ...]) -> Mapping[str, Any]:
        if not path.exists():
            if not stack:
                raise ConfigError(f"Configuration file {path} does not exist")
            raise ConfigError(f"Included configuration {path} does not exist")
        resolved = path.resolve()
        if resolved in stack:
            include_chain = " -> ".join(str(entry) for entry in (*stack, resolved))
            raise ConfigError(f"Circular include detected: {include_chain}")
        try:
            with resolved.open("rb") as handle:
                data = tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
        document = dict(self._select(data, path))
        includes = document.pop(self._include_key, None)
        merged: dict[str, Any] = {}
        for include_path in self._coerce_includes(includes, path.parent):
            fragment = self._load(include_path, stack + (resolved,))
            merged = _deep_merge(merged, fragment)
        return _deep_merge(merged, document)

    def _select(self, data: Mapping[str, Any], path: Path) -> Mapping[str, Any]:
        return data

    def _coerce_includes(self, raw: Any, base_dir: Path) -> Iterable[Path]:
        if raw is None:
            return []
        if isinstance(raw, (str, Path)):
            return [self._resolve_path(Path(raw), base_dir)]
        if isinstance(raw, MutableMapping):
            return [self._resolve_path(Path(value), base_dir) for value in raw.values()]
        if isinstance(raw, Iterable):
            return [self._resolve_path(Path(item), base_dir) for item in raw]
        raise ConfigError(f"Unsupported include declaration: {raw!r}")

    @staticmethod
    def _resolve_path(path: Path, base_dir: Path) -> Path:
        return path if path.is_absolute() else (base_dir / path)


class PyProjectConfigSource(TomlConfigSource):
    """Read configuration from ``[tool.inspectrun]`` within ``pyproject.toml``."""

    def _select(self, data: Mapping[str, Any], path: Path) -> Mapping[str, Any]:
        if path.name != PYPROJECT_FILENAME:
            return data
        tool_section = data.get(PYPROJECT_TOOL_KEY)
        if not isinstance(tool_section, Mapping):
            return {}
        section = tool_section.get(PYPROJECT_SECTION_KEY)
        if not isinstance(section, Mapping):
            return {}
        return section


def build_config(payload: Mapping[str, Any]) -> Config:
    """Validate ``payload`` into a :class:`Config`.

    Raises:
        ConfigError: If the payload does not describe a valid configuration.
    """

    try:
        return Config.model_validate(dict(payload))
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc


def load_config(path: Path) -> Config:
    """Load configuration from ``path``.

    ``pyproject.toml`` files are read from their ``[tool.inspectrun]`` table;
    any other file is read as a whole.

    Args:
        path: Configuration file to load.

    Returns:
        Config: Validated configuration.

    Raises:
        ConfigError: If the file is missing, malformed, or invalid.
    """

    source = PyProjectConfigSource(path) if path.name == PYPROJECT_FILENAME else TomlConfigSource(path)
    return build_config(source.load())


def find_config(root: Path) -> Path | None:
    """Return the configuration file that applies to ``root``, if any."""

    candidate = root / CONFIG_FILENAME
    if candidate.is_file():
        return candidate
    pyproject = root / PYPROJECT_FILENAME
    if pyproject.is_file():
        try:
            with pyproject.open("rb") as handle:
                data = tomllib.load(handle)
        except tomllib.TOMLDecodeError:
            return None
        tool_section = data.get(PYPROJECT_TOOL_KEY, {})
        if isinstance(tool_section, Mapping) and PYPROJECT_SECTION_KEY in tool_section:
            return pyproject
    return None


__all__ = [
    "CONFIG_FILENAME",
    "PyProjectConfigSource",
    "TomlConfigSource",
    "build_config",
    "find_config",
    "load_config",
]
