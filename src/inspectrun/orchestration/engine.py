# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""High level orchestration: resolve, analyse, report, fix."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from ..config import Config
from ..host.environment import HostEnvironment
from ..logging import RunLogger
from ..models import ToolResult
from ..reporting.renderers import build_renderers
from ..reporting.reporter import ReportRenderer, report
from ..workspace.discovery import discover_sources
from .analysis import AnalysisLoop, SourcePair
from .fixes import FixApplicator
from .threshold import ThresholdChecker
from .tool_selection import resolve_tools


@dataclass(slots=True)
class RunOutcome:
    """Everything a caller may want to inspect after a run."""

    success: bool
    results: dict[str, ToolResult]
    checker: ThresholdChecker
    fixed_files: list[str] = field(default_factory=list)

    @property
    def total_findings(self) -> int:
        return sum(len(result.findings) for result in self.results.values())


class InspectionEngine:
    """Coordinates tool resolution, analysis, reporting, and fixing."""

    def __init__(self, host: HostEnvironment, logger: RunLogger) -> None:
        self._host = host
        self._logger = logger
        self._analysis = AnalysisLoop(host, logger)
        self._fixes = FixApplicator(host, logger)

    def run(
        self,
        files: Sequence[SourcePair],
        config: Config,
        renderers: Sequence[ReportRenderer] | None = None,
    ) -> bool:
        """Run the full pipeline and return ``True`` unless a threshold was exceeded.

        Args:
            files: ``(file, document)`` pairs to analyse.
            config: Run configuration.
            renderers: Report sinks; defaults to those configured in ``config.reports``.

        Returns:
            bool: Overall success flag.

        Raises:
            ConfigError: If the configured inspection set cannot be resolved.
        """

        return self.execute(files, config, renderers).success

    def execute(
        self,
        files: Sequence[SourcePair],
        config: Config,
        renderers: Sequence[ReportRenderer] | None = None,
    ) -> RunOutcome:
        """Run the full pipeline and return the detailed :class:`RunOutcome`."""

        tools = resolve_tools(config, self._host.registry, profiles=self._host.profiles, logger=self._logger)
        checker = ThresholdChecker()
        results = self._analysis.run(tools, files, config, checker)
        sinks = list(renderers) if renderers is not None else build_renderers(config.reports, root=self._host.root)
        with self._host.access.acquire_read():
            report(results, sinks, quiet=config.reports.quiet, logger=self._logger)
        fixed = self._fixes.apply(results, config)
        return RunOutcome(
            success=checker.is_success,
            results=results,
            checker=checker,
            fixed_files=[file.name for file in fixed],
        )

    def discover(self, config: Config) -> list[SourcePair]:
        """Return the source files selected by ``config.discovery``."""

        roots = [root if root.is_absolute() else self._host.root / root for root in config.discovery.roots]
        return discover_sources(
            roots,
            documents=self._host.documents,
            excludes=config.discovery.excludes,
            base=self._host.root,
        )


__all__ = ["InspectionEngine", "RunOutcome"]
