# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the XML, HTML, and JSON report renderers."""

from __future__ import annotations

import json
import xml.etree.ElementTree as ET
from pathlib import Path

from inspectrun.config import ReportConfig
from inspectrun.models import Finding
from inspectrun.reporting import HtmlReportRenderer, JsonReportRenderer, XmlReportRenderer, build_renderers
from inspectrun.severity import ProblemLevel
from inspectrun.workspace import SourceFile


def _findings() -> list[Finding]:
    file = SourceFile(path=Path("src/Main.java"), name="src/Main.java", language="Java")
    return [
        Finding(file=file, line=3, row=4, level=ProblemLevel.ERROR, message="Broken <thing>", tool_name="Broken"),
        Finding(file=file, line=8, row=0, level=ProblemLevel.WEAK_WARNING, message="Soft", tool_name="Soft"),
    ]


def test_xml_renderer_writes_checkstyle_document(tmp_path: Path) -> None:
    destination = tmp_path / "reports" / "result.xml"
    renderer = XmlReportRenderer(destination)
    for finding in _findings():
        renderer.report(finding, "tests.SampleInspection")

    renderer.generate()

    root = ET.parse(destination).getroot()
    assert root.tag == "checkstyle"
    [file_element] = root.findall("file")
    assert file_element.get("name") == "src/Main.java"
    errors = file_element.findall("error")
    assert [(error.get("line"), error.get("column"), error.get("severity")) for error in errors] == [
        ("3", "4", "error"),
        ("8", "0", "warning"),
    ]
    assert errors[0].get("message") == "Broken <thing>"
    assert errors[0].get("source") == "tests.SampleInspection"


def test_json_renderer_writes_problem_list(tmp_path: Path) -> None:
    destination = tmp_path / "result.json"
    renderer = JsonReportRenderer(destination)
    for finding in _findings():
        renderer.report(finding, "tests.SampleInspection")

    renderer.generate()

    payload = json.loads(destination.read_text(encoding="utf-8"))
    assert payload["total"] == 2
    assert payload["problems"][0] == {
        "file": "src/Main.java",
        "line": 3,
        "column": 4,
        "severity": "error",
        "inspection": "tests.SampleInspection",
        "inspection_name": "Broken",
        "message": "Broken <thing>",
        "fixes": [],
    }


def test_html_renderer_exports_table(tmp_path: Path) -> None:
    destination = tmp_path / "result.html"
    renderer = HtmlReportRenderer(destination, title="Nightly")
    for finding in _findings():
        renderer.report(finding, "tests.SampleInspection")

    renderer.generate()

    html = destination.read_text(encoding="utf-8")
    assert "<html" in html.lower()
    assert "Nightly" in html
    assert "src/Main.java" in html
    assert "&lt;thing&gt;" in html


def test_build_renderers_resolves_relative_destinations(tmp_path: Path) -> None:
    reports = ReportConfig.model_validate({"xml": "out/a.xml", "json": "/abs/b.json"})

    renderers = build_renderers(reports, root=tmp_path)

    assert [type(renderer) for renderer in renderers] == [XmlReportRenderer, JsonReportRenderer]
    assert renderers[0].path == tmp_path / "out" / "a.xml"
    assert renderers[1].path == Path("/abs/b.json")


def test_build_renderers_without_destinations_is_empty() -> None:
    assert build_renderers(ReportConfig()) == []
