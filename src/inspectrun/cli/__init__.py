# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""inspectrun CLI package exports."""

from __future__ import annotations

from .app import app, main
from .config_builder import RunOptions, build_config

__all__ = ["RunOptions", "app", "build_config", "main"]
