# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Inspection plugin API and built-in inspections."""

from __future__ import annotations

from .base import (
    GlobalInspection,
    Inspection,
    LocalInspection,
    PerFileTool,
    ProblemsHolder,
    ToolKind,
    UnsupportedTool,
    tool_kind_for,
)
from .builtin import BUILTIN_INSPECTIONS

__all__ = [
    "BUILTIN_INSPECTIONS",
    "GlobalInspection",
    "Inspection",
    "LocalInspection",
    "PerFileTool",
    "ProblemsHolder",
    "ToolKind",
    "UnsupportedTool",
    "tool_kind_for",
]
