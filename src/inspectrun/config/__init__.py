# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and loaders."""

from __future__ import annotations

from ..errors import ConfigError
from .loaders import build_config, find_config, load_config
from .models import Config, DiscoveryConfig, InspectionGroup, InspectionSettings, ReportConfig

__all__ = [
    "Config",
    "ConfigError",
    "DiscoveryConfig",
    "InspectionGroup",
    "InspectionSettings",
    "ReportConfig",
    "build_config",
    "find_config",
    "load_config",
]
