# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run each resolved inspection over each applicable file under threshold gating."""

from __future__ import annotations

import traceback
from collections.abc import Sequence

from ..config import Config
from ..errors import InspectionError
from ..host.environment import HostEnvironment
from ..inspections.base import PerFileTool, UnsupportedTool
from ..logging import RunLogger
from ..models import Finding, ToolDescriptor, ToolResult
from ..severity import ThresholdBucket
from ..workspace.documents import SourceDocument, SourceFile
from .applicability import applies
from .threshold import ThresholdChecker

SourcePair = tuple[SourceFile, SourceDocument]


class AnalysisLoop:
    """Drive inspections sequentially and stop globally on a threshold breach."""

    def __init__(self, host: HostEnvironment, logger: RunLogger) -> None:
        self._host = host
        self._logger = logger

    def run(
        self,
        tools: Sequence[ToolDescriptor],
        files: Sequence[SourcePair],
        config: Config,
        checker: ThresholdChecker,
    ) -> dict[str, ToolResult]:
        """Analyse ``files`` with every tool in ``tools``.

        Args:
            tools: Effective inspection set, in run order.
            files: ``(file, document)`` pairs to analyse.
            config: Configuration providing the thresholds.
            checker: Counter state shared across the whole run.

        Returns:
            dict[str, ToolResult]: Results keyed by tool id, for every tool that ran.
        """

        self._logger.info(f"Before inspections launched: total of {len(files)} files to analyze")
        results: dict[str, ToolResult] = {}
        for descriptor in tools:
            match descriptor.tool:
                case PerFileTool() as tool:
                    results[descriptor.id] = self._run_tool(descriptor, tool, files, config, checker)
                case UnsupportedTool(kind="global"):
                    self._logger.warn(f"Global inspection tools like {descriptor.id} are not yet supported")
                case UnsupportedTool():
                    self._logger.error(f"Unexpected {descriptor.id} which is neither local nor global")
            if checker.is_fail:
                break
        return results

    def _run_tool(
        self,
        descriptor: ToolDescriptor,
        tool: PerFileTool,
        files: Sequence[SourcePair],
        config: Config,
        checker: ThresholdChecker,
    ) -> ToolResult:
        display_name = tool.inspection.display_name or "<Unknown diagnostic>"
        prefix = f"({descriptor.level}) " if descriptor.level is not None else ""
        findings: list[Finding] = []
        with self._host.access.acquire_read():
            for file, document in files:
                if not applies(descriptor, file):
                    continue
                self._logger.info(f"{prefix}Inspection '{display_name}' analyzing started for {file.name}")
                try:
                    produced = tool.analyze(file, document, tool_name=display_name, level=descriptor.level)
                except InspectionError as exc:
                    self._log_failure(exc)
                    continue
                for finding in produced:
                    findings.append(finding)
                    checker.apply(finding.level, config, self._on_exceeded)
                    if checker.is_fail:
                        return ToolResult(descriptor=descriptor, findings=tuple(findings))
        return ToolResult(descriptor=descriptor, findings=tuple(findings))

    def _on_exceeded(self, bucket: ThresholdBucket, count: int) -> None:
        self._logger.error(f"Too many {bucket} found: {count}. Analysis stopped")

    def _log_failure(self, exc: InspectionError) -> None:
        self._logger.error(f"Exception during inspection running {exc}")
        cause = exc.cause
        self._logger.error(f"Caused by: {cause or type(cause).__name__}")
        frames = traceback.format_exception(type(cause), cause, cause.__traceback__)
        self._logger.debug("".join(frames).rstrip())


__all__ = ["AnalysisLoop", "SourcePair"]
