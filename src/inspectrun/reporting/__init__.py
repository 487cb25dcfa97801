# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Finding ordering, console logging, and report renderers."""

from __future__ import annotations

from .renderers import HtmlReportRenderer, JsonReportRenderer, XmlReportRenderer, build_renderers
from .reporter import ReportRenderer, log_finding, report, sort_findings

__all__ = [
    "HtmlReportRenderer",
    "JsonReportRenderer",
    "ReportRenderer",
    "XmlReportRenderer",
    "build_renderers",
    "log_finding",
    "report",
    "sort_findings",
]
