# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Report renderers writing XML, HTML, and JSON documents."""

from __future__ import annotations

import io
import json
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Final

from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..config.models import ReportConfig
from ..models import Finding
from ..severity import ProblemLevel
from .reporter import ReportRenderer

CHECKSTYLE_VERSION: Final[str] = "8.0"

_CHECKSTYLE_SEVERITY: Final[dict[ProblemLevel, str]] = {
    ProblemLevel.ERROR: "error",
    ProblemLevel.WARNING: "warning",
    ProblemLevel.WEAK_WARNING: "warning",
    ProblemLevel.INFO: "info",
}

_LEVEL_STYLES: Final[dict[ProblemLevel, str]] = {
    ProblemLevel.ERROR: "bold red",
    ProblemLevel.WARNING: "yellow",
    ProblemLevel.WEAK_WARNING: "dim yellow",
    ProblemLevel.INFO: "cyan",
}


def _prepare_destination(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


class XmlReportRenderer:
    """Write a checkstyle-compatible XML report."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self._files: dict[str, list[tuple[str, Finding]]] = {}

    def report(self, finding: Finding, tool_id: str) -> None:
        self._files.setdefault(finding.file_name, []).append((tool_id, finding))

    def generate(self) -> None:
        root = ET.Element("checkstyle", version=CHECKSTYLE_VERSION)
        for file_name, entries in self._files.items():
            file_element = ET.SubElement(root, "file", name=file_name)
            for tool_id, finding in entries:
                ET.SubElement(
                    file_element,
                    "error",
                    line=str(finding.line),
                    column=str(finding.row),
                    severity=_CHECKSTYLE_SEVERITY[finding.level],
                    message=finding.message,
                    source=tool_id,
                )
        ET.indent(root)
        _prepare_destination(self.path)
        ET.ElementTree(root).write(self.path, encoding="utf-8", xml_declaration=True)


class HtmlReportRenderer:
    """Render findings as a Rich table and export it to HTML."""

    def __init__(self, path: Path, *, title: str = "Inspection results") -> None:
        self.path = path
        self.title = title
        self._rows: list[tuple[str, Finding]] = []

    def report(self, finding: Finding, tool_id: str) -> None:
        self._rows.append((tool_id, finding))

    def generate(self) -> None:
        table = Table(title=self.title)
        table.add_column("File")
        table.add_column("Line", justify="right")
        table.add_column("Column", justify="right")
        table.add_column("Severity")
        table.add_column("Inspection")
        table.add_column("Message")
        for tool_id, finding in self._rows:
            table.add_row(
                Text(finding.file_name),
                str(finding.line),
                str(finding.row),
                Text(str(finding.level), style=_LEVEL_STYLES[finding.level]),
                Text(finding.tool_name or tool_id),
                Text(finding.message),
            )
        console = Console(record=True, file=io.StringIO(), width=160, color_system="truecolor")
        console.print(table)
        _prepare_destination(self.path)
        console.save_html(str(self.path))


class JsonReportRenderer:
    """Write findings as a JSON document."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self._entries: list[dict[str, object]] = []

    def report(self, finding: Finding, tool_id: str) -> None:
        self._entries.append(
            {
                "file": finding.file_name,
                "line": finding.line,
                "column": finding.row,
                "severity": finding.level.value,
                "inspection": tool_id,
                "inspection_name": finding.tool_name,
                "message": finding.message,
                "fixes": [fix.name for fix in finding.fixes],
            },
        )

    def generate(self) -> None:
        payload = {"total": len(self._entries), "problems": self._entries}
        _prepare_destination(self.path)
        self.path.write_text(json.dumps(payload, indent=2), encoding="utf-8")


def build_renderers(reports: ReportConfig, *, root: Path | None = None) -> list[ReportRenderer]:
    """Return the renderers configured in ``reports``.

    Relative destinations are resolved against ``root`` when given.
    """

    def _resolve(path: Path) -> Path:
        return path if root is None or path.is_absolute() else root / path

    renderers: list[ReportRenderer] = []
    if reports.xml is not None:
        renderers.append(XmlReportRenderer(_resolve(reports.xml)))
    if reports.html is not None:
        renderers.append(HtmlReportRenderer(_resolve(reports.html)))
    if reports.json_path is not None:
        renderers.append(JsonReportRenderer(_resolve(reports.json_path)))
    return renderers


__all__ = [
    "HtmlReportRenderer",
    "JsonReportRenderer",
    "XmlReportRenderer",
    "build_renderers",
]
