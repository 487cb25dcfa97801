# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Inspection orchestration: tool resolution, analysis, fixing."""

from __future__ import annotations

from .analysis import AnalysisLoop
from .applicability import applies
from .engine import InspectionEngine, RunOutcome
from .fixes import FixApplicator, FixBatch
from .threshold import ThresholdChecker
from .tool_selection import resolve_tools

__all__ = [
    "AnalysisLoop",
    "FixApplicator",
    "FixBatch",
    "InspectionEngine",
    "RunOutcome",
    "ThresholdChecker",
    "applies",
    "resolve_tools",
]
