# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Plugin primitives for inspections and the tool kinds the engine dispatches on."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import ClassVar

from ..errors import InspectionError
from ..models import Finding, Fix
from ..severity import ProblemLevel
from ..workspace.documents import SourceDocument, SourceFile


class ProblemsHolder:
    """Collect problems registered by an inspection for one file."""

    def __init__(
        self,
        file: SourceFile,
        document: SourceDocument,
        *,
        tool_name: str | None,
        level: ProblemLevel | None,
        default_level: ProblemLevel = ProblemLevel.WARNING,
    ) -> None:
        """Bind the holder to the file being analysed.

        Args:
            file: File under analysis.
            document: Live document of ``file``.
            tool_name: Display name stamped onto every finding.
            level: Configured level overriding whatever the inspection reports.
            default_level: Level used when neither configuration nor the
                inspection supplies one.
        """

        self._file = file
        self._document = document
        self._tool_name = tool_name
        self._level = level
        self._default_level = default_level
        self._results: list[Finding] = []

    @property
    def results(self) -> list[Finding]:
        return list(self._results)

    def _effective_level(self, reported: ProblemLevel | None) -> ProblemLevel:
        """Return the configured level, keeping weak warnings out of the error bucket."""

        actual = reported or self._default_level
        if self._level is None:
            return actual
        if self._level is ProblemLevel.ERROR and actual is ProblemLevel.WEAK_WARNING:
            return actual
        return self._level

    def register(
        self,
        start: int,
        end: int,
        message: str,
        *,
        fixes: Sequence[Fix] = (),
        level: ProblemLevel | None = None,
    ) -> Finding:
        """Register a problem covering ``document.text[start:end]``.

        Args:
            start: Start offset of the problem range.
            end: End offset of the problem range.
            message: Human-readable description.
            fixes: Candidate fixes offered for the problem.
            level: Level suggested by the inspection.

        Returns:
            Finding: The pinned finding appended to the results.
        """

        line, row = self._document.position(start)
        finding = Finding(
            file=self._file,
            line=line,
            row=row,
            level=self._effective_level(level),
            message=message,
            fixes=tuple(fixes),
            tool_name=self._tool_name,
            anchor=self._document.anchor(start, end),
        )
        self._results.append(finding)
        return finding


class Inspection(ABC):
    """Common metadata shared by every inspection kind."""

    display_name: ClassVar[str] = ""
    language: ClassVar[str | None] = None
    default_level: ClassVar[ProblemLevel] = ProblemLevel.WARNING

    @classmethod
    def inspection_id(cls) -> str:
        return f"{cls.__module__}.{cls.__qualname__}"

    @property
    def short_name(self) -> str:
        name = type(self).__name__
        return name.removesuffix("Inspection") or name


class LocalInspection(Inspection):
    """Per-file, stateless inspection."""

    @abstractmethod
    def check_file(self, file: SourceFile, document: SourceDocument, holder: ProblemsHolder) -> None:
        """Register every problem found in ``document`` with ``holder``."""


class GlobalInspection(Inspection):
    """Project-wide inspection; the engine does not run these."""

    @abstractmethod
    def check_project(self, files: Sequence[SourceFile]) -> None:
        """Analyse the project as a whole."""


@dataclass(frozen=True, slots=True)
class PerFileTool:
    """Tool kind wrapping a :class:`LocalInspection`."""

    inspection: LocalInspection

    def analyze(
        self,
        file: SourceFile,
        document: SourceDocument,
        *,
        tool_name: str | None,
        level: ProblemLevel | None,
    ) -> list[Finding]:
        """Run the inspection over one file and return its findings.

        Raises:
            InspectionError: If the inspection raised while visiting the file.
        """

        holder = ProblemsHolder(
            file,
            document,
            tool_name=tool_name,
            level=level,
            default_level=self.inspection.default_level,
        )
        try:
            self.inspection.check_file(file, document, holder)
        except Exception as exc:
            raise InspectionError(self.inspection.short_name, file.name, exc) from exc
        return holder.results


@dataclass(frozen=True, slots=True)
class UnsupportedTool:
    """Tool kind the engine cannot run (global or unknown inspections)."""

    inspection: object
    kind: str


ToolKind = PerFileTool | UnsupportedTool


def tool_kind_for(inspection: object) -> ToolKind:
    """Wrap ``inspection`` in the tool kind the engine dispatches on."""

    if isinstance(inspection, LocalInspection):
        return PerFileTool(inspection)
    if isinstance(inspection, GlobalInspection):
        return UnsupportedTool(inspection, kind="global")
    return UnsupportedTool(inspection, kind="unknown")


__all__ = [
    "GlobalInspection",
    "Inspection",
    "LocalInspection",
    "PerFileTool",
    "ProblemsHolder",
    "ToolKind",
    "UnsupportedTool",
    "tool_kind_for",
]
