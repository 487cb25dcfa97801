# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Apply single-candidate fixes in a write phase and a plain phase, then flush."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from ..config import Config
from ..host.environment import HostEnvironment
from ..logging import RunLogger
from ..models import Finding, Fix, ToolResult
from ..workspace.documents import SourceFile

FixEntry = tuple[Finding, Fix]


@dataclass(slots=True)
class FixBatch:
    """Eligible fixes split by whether they must run inside a write scope."""

    write_fixes: list[FixEntry] = field(default_factory=list)
    other_fixes: list[FixEntry] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.write_fixes) + len(self.other_fixes)


class FixApplicator:
    """Apply quick fixes for inspections that have fixing enabled."""

    def __init__(self, host: HostEnvironment, logger: RunLogger) -> None:
        self._host = host
        self._logger = logger

    def collect(self, results: Mapping[str, ToolResult], config: Config) -> FixBatch:
        """Partition eligible ``(finding, fix)`` pairs, preserving encounter order.

        Findings offering zero or several candidate fixes are logged as errors
        and skipped.
        """

        settings = config.inspections
        batch = FixBatch()
        for result in results.values():
            inspection_settings = settings.get(result.descriptor.name)
            if inspection_settings is None or not inspection_settings.quick_fix:
                continue
            for finding in result.findings:
                if len(finding.fixes) != 1:
                    self._logger.error(f"Can not apply problem fixes for '{finding.render_with_location()}'")
                    continue
                fix = finding.fixes[0]
                target = batch.write_fixes if fix.starts_in_write_scope else batch.other_fixes
                target.append((finding, fix))
        return batch

    def apply(self, results: Mapping[str, ToolResult], config: Config) -> list[SourceFile]:
        """Apply every eligible fix and persist the touched documents.

        Args:
            results: Analysis results keyed by tool id.
            config: Configuration holding the global and per-inspection fix flags.

        Returns:
            list[SourceFile]: Files touched by a fix, in application order.
        """

        if not config.fix_enabled:
            return []
        batch = self.collect(results, config)
        touched: list[SourceFile] = []
        with self._host.access.acquire_write():
            self._apply_all(batch.write_fixes, touched)
        self._apply_all(batch.other_fixes, touched)
        self.flush(touched)
        return touched

    def _apply_all(self, entries: Sequence[FixEntry], touched: list[SourceFile]) -> None:
        for finding, fix in entries:
            self._apply_with_checks(finding, fix)
            if finding.file not in touched:
                touched.append(finding.file)

    def _apply_with_checks(self, finding: Finding, fix: Fix) -> None:
        identifier = f"fix '{fix.name}' for '{finding.render_location()}'"
        document = self._host.documents.get_document(finding.file)
        before = document.text if document is not None else None
        self._apply(finding, fix, identifier)
        after = document.text if document is not None else None
        if after == before:
            self._logger.info(f"File hasn't changes after {identifier}")
        else:
            self._logger.info(f"File has changes after {identifier}")

    def _apply(self, finding: Finding, fix: Fix, identifier: str) -> None:
        element = finding.element
        if element is None:
            self._logger.info(f"Already applied {identifier}")
            return
        if not element.document.writable:
            self._logger.warn(f"Problem element cannot be prepared {identifier}")
            return
        try:
            fix.apply(finding)
        except Exception as exc:
            self._logger.error(f"Exception during applying quick {identifier}")
            self._logger.error(f"{type(exc).__name__}: {exc}")
            return
        self._logger.info(f"Applied {identifier}")

    def flush(self, files: Sequence[SourceFile]) -> None:
        """Commit pending document operations and save every modified document."""

        self._logger.info("Flush project documents")
        documents = self._host.documents
        documents.commit_all()
        for file in files:
            document = documents.get_document(file)
            if document is None:
                self._logger.warn(f"Document for file '{file.name}' not found.")
                continue
            documents.unblock(document)
            self._logger.info(f"File '{file.name}' is flushed")
        documents.save_all()


__all__ = ["FixApplicator", "FixBatch", "FixEntry"]
