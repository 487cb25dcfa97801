# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""End-to-end tests for the inspection engine."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from inspectrun.config import Config, ConfigError
from inspectrun.inspections.builtin import TrailingWhitespaceInspection
from inspectrun.orchestration import InspectionEngine
from inspectrun.workspace import SourceFile


def test_warnings_without_maximum_succeed(make_host, make_source, marker, logger) -> None:
    inspection = marker("XInspection", "x")
    host = make_host(inspection)
    files = [make_source(host, "a.txt", "x\nx\nx\n")]
    config = Config.model_validate({"warnings": {"inspections": ["X"]}})

    success = InspectionEngine(host, logger).run(files, config)

    assert success is True
    assert logger.warnings == [
        "WARNING: a.txt:1:0: x found",
        "WARNING: a.txt:2:0: x found",
        "WARNING: a.txt:3:0: x found",
    ]
    assert "Total of 3 problem(s) found" in logger.infos


def test_findings_from_several_tools_are_interleaved_by_location(make_host, make_source, marker, logger) -> None:
    late = marker("LateInspection", "late")
    early = marker("EarlyInspection", "early")
    host = make_host(late, early)
    files = [make_source(host, "a.txt", "early\nlate early\nlate\n")]
    config = Config.model_validate({"info": {"inspections": ["Late", "Early"]}})

    outcome = InspectionEngine(host, logger).execute(files, config)

    finding_lines = [message for message in logger.infos if message.startswith("INFO: ")]
    assert finding_lines == [
        "INFO: a.txt:1:0: early found",
        "INFO: a.txt:2:0: late found",
        "INFO: a.txt:2:5: early found",
        "INFO: a.txt:3:0: late found",
    ]
    assert outcome.success
    assert outcome.total_findings == 4


def test_threshold_breach_fails_the_run(make_host, make_source, marker, logger) -> None:
    inspection = marker("XInspection", "x")
    host = make_host(inspection)
    files = [make_source(host, "a.txt", "x x x x")]
    config = Config.model_validate({"errors": {"max": 2, "inspections": ["X"]}})

    outcome = InspectionEngine(host, logger).execute(files, config)

    assert not outcome.success
    assert outcome.total_findings == 3
    assert outcome.checker.errors == 3
    assert "Too many errors found: 3. Analysis stopped" in logger.errors


def test_reports_are_written_even_when_thresholds_fail(make_host, make_source, marker, logger) -> None:
    inspection = marker("XInspection", "x")
    host = make_host(inspection)
    files = [make_source(host, "a.txt", "x x")]
    config = Config.model_validate(
        {"errors": {"max": 0, "inspections": ["X"]}, "reports": {"json": "out/report.json", "quiet": True}},
    )

    outcome = InspectionEngine(host, logger).execute(files, config)

    payload = json.loads((host.root / "out" / "report.json").read_text(encoding="utf-8"))
    assert not outcome.success
    assert payload["total"] == 1
    assert logger.errors == ["Too many errors found: 1. Analysis stopped"]


def test_fixes_run_after_reporting(make_host, make_source, logger) -> None:
    host = make_host(TrailingWhitespaceInspection)
    source, document = make_source(host, "a.txt", "one \ntwo\n")
    config = Config.model_validate(
        {"warnings": {"inspections": {"TrailingWhitespace": {"quick_fix": True}}}, "fix_enabled": True},
    )

    outcome = InspectionEngine(host, logger).execute([(source, document)], config)

    assert outcome.fixed_files == ["a.txt"]
    assert source.path.read_text(encoding="utf-8") == "one\ntwo\n"
    assert host.access.history == ["read", "read", "write"]


def test_unknown_inspection_aborts_before_analysis(make_host, make_source, marker, logger) -> None:
    host = make_host(marker("XInspection", "x"))
    files = [make_source(host, "a.txt", "x")]
    config = Config.model_validate({"warnings": {"inspections": ["Missing"]}})

    with pytest.raises(ConfigError):
        InspectionEngine(host, logger).run(files, config)
    assert host.access.history == []


def test_discover_resolves_roots_against_host_root(make_host, logger, tmp_path: Path) -> None:
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "Main.java").write_text("class Main {}\n", encoding="utf-8")
    (tmp_path / "node_modules").mkdir()
    (tmp_path / "node_modules" / "dep.js").write_text("x\n", encoding="utf-8")
    host = make_host()
    config = Config.model_validate({"discovery": {"roots": ["."]}})

    files = InspectionEngine(host, logger).discover(config)

    assert [(file.name, file.language) for file, _document in files] == [("src/Main.java", "Java")]


def test_fixes_keep_crlf_line_endings(make_host, logger, tmp_path: Path) -> None:
    host = make_host(TrailingWhitespaceInspection)
    path = tmp_path / "windows.txt"
    path.write_bytes(b"one \r\ntwo\r\nthree\t\r\n")
    source = SourceFile(path=path, name="windows.txt", language="Plain text")
    document = host.documents.open(source)
    config = Config.model_validate(
        {"warnings": {"inspections": {"TrailingWhitespace": {"quick_fix": True}}}, "fix_enabled": True},
    )

    outcome = InspectionEngine(host, logger).execute([(source, document)], config)

    [result] = outcome.results.values()
    assert [(finding.line, finding.row) for finding in result.findings] == [(1, 3), (3, 5)]
    assert outcome.fixed_files == ["windows.txt"]
    assert path.read_bytes() == b"one\r\ntwo\r\nthree\r\n"
