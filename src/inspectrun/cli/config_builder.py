# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Build the effective :class:`Config` from a configuration file and CLI flags."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..config import Config, find_config, load_config


@dataclass(slots=True)
class RunOptions:
    """Structured CLI inputs for the ``run`` command."""

    root: Path
    paths: list[Path] = field(default_factory=list)
    config_path: Path | None = None
    profile: str | None = None
    inherit: bool | None = None
    fix: bool | None = None
    quiet: bool | None = None
    xml: Path | None = None
    html: Path | None = None
    json_path: Path | None = None
    ignore_failures: bool | None = None


def build_config(options: RunOptions) -> Config:
    """Return the configuration for ``options``.

    The file named by ``--config`` wins over ``inspectrun.toml`` or
    ``[tool.inspectrun]`` discovered in the root; flags given on the command
    line override file values.

    Raises:
        ConfigError: If the configuration file is invalid.
    """

    path = options.config_path or find_config(options.root)
    config = load_config(path) if path is not None else Config()

    if options.paths:
        config.discovery = config.discovery.model_copy(update={"roots": list(options.paths)})
    if options.profile is not None:
        config.profile_name = options.profile
        config.inherit_from_host = True
    if options.inherit is not None:
        config.inherit_from_host = options.inherit
    if options.fix is not None:
        config.fix_enabled = options.fix
    if options.ignore_failures is not None:
        config.ignore_failures = options.ignore_failures

    report_updates: dict[str, object] = {}
    if options.quiet is not None:
        report_updates["quiet"] = options.quiet
    if options.xml is not None:
        report_updates["xml"] = options.xml
    if options.html is not None:
        report_updates["html"] = options.html
    if options.json_path is not None:
        report_updates["json_path"] = options.json_path
    if report_updates:
        config.reports = config.reports.model_copy(update=report_updates)
    return config


__all__ = ["RunOptions", "build_config"]
