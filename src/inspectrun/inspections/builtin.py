# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Text-level inspections shipped with inspectrun."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

from ..models import Finding
from ..severity import ProblemLevel
from ..workspace.documents import SourceDocument, SourceFile
from .base import LocalInspection, ProblemsHolder

_TODO_PATTERN: Final[re.Pattern[str]] = re.compile(r"\b(TODO|FIXME|XXX)\b")
_JAVA_WILDCARD_IMPORT: Final[re.Pattern[str]] = re.compile(r"^\s*import\s+(static\s+)?[\w.]+\.\*\s*;")


@dataclass(frozen=True, slots=True)
class RemoveTrailingWhitespaceFix:
    """Delete the whitespace range the finding is anchored to."""

    name: str = "Remove trailing whitespace"
    starts_in_write_scope: bool = True

    def apply(self, finding: Finding) -> None:
        anchor = finding.element
        if anchor is None:
            return
        anchor.document.replace(anchor.start, anchor.end, "")


@dataclass(frozen=True, slots=True)
class AddFinalNewlineFix:
    """Append a newline once pending document operations run."""

    name: str = "Add final newline"
    starts_in_write_scope: bool = False

    def apply(self, finding: Finding) -> None:
        anchor = finding.element
        if anchor is None:
            return
        anchor.document.postpone(_ensure_final_newline)
        anchor.invalidate()


def _ensure_final_newline(document: SourceDocument) -> None:
    if document.text and not document.text.endswith("\n"):
        document.replace(len(document.text), len(document.text), "\n")


class TrailingWhitespaceInspection(LocalInspection):
    display_name = "Trailing whitespace"
    default_level = ProblemLevel.WEAK_WARNING

    def check_file(self, file: SourceFile, document: SourceDocument, holder: ProblemsHolder) -> None:
        for offset, line in document.iter_lines():
            stripped = line.rstrip(" \t")
            if len(stripped) != len(line):
                holder.register(
                    offset + len(stripped),
                    offset + len(line),
                    "Trailing whitespace",
                    fixes=(RemoveTrailingWhitespaceFix(),),
                )


class MissingFinalNewlineInspection(LocalInspection):
    display_name = "Missing final newline"

    def check_file(self, file: SourceFile, document: SourceDocument, holder: ProblemsHolder) -> None:
        text = document.text
        if not text or text.endswith("\n"):
            return
        last_line_start = text.rfind("\n") + 1
        holder.register(
            last_line_start,
            last_line_start,
            "File does not end with a newline",
            fixes=(AddFinalNewlineFix(),),
        )


class TabIndentationInspection(LocalInspection):
    display_name = "Tab indentation"

    def check_file(self, file: SourceFile, document: SourceDocument, holder: ProblemsHolder) -> None:
        for offset, line in document.iter_lines():
            indent = len(line) - len(line.lstrip(" \t"))
            if "\t" in line[:indent]:
                holder.register(offset, offset + indent, "Indentation contains tab characters")


class LineTooLongInspection(LocalInspection):
    display_name = "Line too long"
    default_level = ProblemLevel.WEAK_WARNING
    max_length: int = 120

    def check_file(self, file: SourceFile, document: SourceDocument, holder: ProblemsHolder) -> None:
        for offset, line in document.iter_lines():
            if len(line) > self.max_length:
                holder.register(
                    offset + self.max_length,
                    offset + len(line),
                    f"Line is longer than {self.max_length} characters ({len(line)})",
                )


class TodoCommentInspection(LocalInspection):
    display_name = "TODO comment"
    default_level = ProblemLevel.INFO

    def check_file(self, file: SourceFile, document: SourceDocument, holder: ProblemsHolder) -> None:
        for match in _TODO_PATTERN.finditer(document.text):
            holder.register(match.start(), match.end(), f"{match.group(1)} marker")


class JavaWildcardImportInspection(LocalInspection):
    display_name = "Wildcard import"
    language = "java"

    def check_file(self, file: SourceFile, document: SourceDocument, holder: ProblemsHolder) -> None:
        for offset, line in document.iter_lines():
            if _JAVA_WILDCARD_IMPORT.match(line):
                holder.register(offset, offset + len(line), "Wildcard import should be replaced with explicit imports")


BUILTIN_INSPECTIONS: Final[tuple[type[LocalInspection], ...]] = (
    TrailingWhitespaceInspection,
    MissingFinalNewlineInspection,
    TabIndentationInspection,
    LineTooLongInspection,
    TodoCommentInspection,
    JavaWildcardImportInspection,
)

__all__ = [
    "AddFinalNewlineFix",
    "BUILTIN_INSPECTIONS",
    "JavaWildcardImportInspection",
    "LineTooLongInspection",
    "MissingFinalNewlineInspection",
    "RemoveTrailingWhitespaceFix",
    "TabIndentationInspection",
    "TodoCommentInspection",
    "TrailingWhitespaceInspection",
]
