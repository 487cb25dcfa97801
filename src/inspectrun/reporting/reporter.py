# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Order findings, log them to the console, and feed report renderers."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Protocol

from ..logging import RunLogger
from ..models import Finding, ToolResult


class ReportRenderer(Protocol):
    """Sink receiving findings one by one and finalised once."""

    def report(self, finding: Finding, tool_id: str) -> None:
        """Accept one finding produced by ``tool_id``."""

    def generate(self) -> None:
        """Write out everything accepted so far."""


def sort_findings(results: Mapping[str, ToolResult]) -> dict[str, list[tuple[str, Finding]]]:
    """Flatten, order by ``(line, row)``, and group by file name.

    Groups appear in the order their first finding occurs in the sorted
    sequence; within a group the sorted order is kept.

    Args:
        results: Analysis results keyed by tool id.

    Returns:
        dict[str, list[tuple[str, Finding]]]: ``(tool id, finding)`` pairs per file name.
    """

    pairs = [(tool_id, finding) for tool_id, result in results.items() for finding in result.findings]
    pairs.sort(key=lambda pair: pair[1].location_key)
    grouped: dict[str, list[tuple[str, Finding]]] = {}
    for tool_id, finding in pairs:
        grouped.setdefault(finding.file_name, []).append((tool_id, finding))
    return grouped


def log_finding(finding: Finding, logger: RunLogger) -> None:
    """Log ``finding`` on the console channel matching its level."""

    message = f"{finding.level}: {finding.render_with_location()}"
    match finding.level.channel:
        case "info":
            logger.info(message)
        case "warn":
            logger.warn(message)
        case "error":
            logger.error(message)


def report(
    results: Mapping[str, ToolResult],
    renderers: Sequence[ReportRenderer],
    *,
    quiet: bool,
    logger: RunLogger,
) -> None:
    """Log and render every finding, then finalise each renderer once.

    Args:
        results: Analysis results keyed by tool id.
        renderers: Report sinks fed with every ``(finding, tool id)`` pair.
        quiet: Suppress per-finding console lines when ``True``.
        logger: Logger receiving the summary and per-finding lines.
    """

    total = sum(len(result.findings) for result in results.values())
    logger.info(f"Total of {total} problem(s) found")
    for entries in sort_findings(results).values():
        for tool_id, finding in entries:
            if not quiet:
                log_finding(finding, logger)
            for renderer in renderers:
                renderer.report(finding, tool_id)
    for renderer in renderers:
        renderer.generate()


__all__ = ["ReportRenderer", "log_finding", "report", "sort_findings"]
