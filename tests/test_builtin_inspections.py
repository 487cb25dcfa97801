# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the built-in text inspections."""

from __future__ import annotations

import pytest

from inspectrun.errors import InspectionError
from inspectrun.inspections import (
    BUILTIN_INSPECTIONS,
    GlobalInspection,
    PerFileTool,
    UnsupportedTool,
    tool_kind_for,
)
from inspectrun.inspections.builtin import (
    JavaWildcardImportInspection,
    LineTooLongInspection,
    MissingFinalNewlineInspection,
    TabIndentationInspection,
    TodoCommentInspection,
    TrailingWhitespaceInspection,
)
from inspectrun.severity import ProblemLevel


def _analyze(inspection_cls, make_host, make_source, name: str, text: str, level: ProblemLevel | None = None):
    host = make_host(inspection_cls)
    source, document = make_source(host, name, text)
    tool = tool_kind_for(inspection_cls())
    assert isinstance(tool, PerFileTool)
    return tool.analyze(source, document, tool_name=inspection_cls.display_name, level=level)


def test_trailing_whitespace(make_host, make_source) -> None:
    findings = _analyze(TrailingWhitespaceInspection, make_host, make_source, "a.py", "x = 1  \ny = 2\n\t\n")

    assert [(finding.line, finding.row) for finding in findings] == [(1, 5), (3, 0)]
    assert findings[0].level is ProblemLevel.WEAK_WARNING
    assert findings[0].element is not None
    assert findings[0].element.text == "  "
    assert [fix.name for fix in findings[0].fixes] == ["Remove trailing whitespace"]


def test_missing_final_newline(make_host, make_source) -> None:
    assert _analyze(MissingFinalNewlineInspection, make_host, make_source, "a.txt", "ok\n") == []

    [finding] = _analyze(MissingFinalNewlineInspection, make_host, make_source, "b.txt", "one\ntwo")
    assert (finding.line, finding.row) == (2, 0)
    assert finding.level is ProblemLevel.WARNING


def test_tab_indentation(make_host, make_source) -> None:
    findings = _analyze(TabIndentationInspection, make_host, make_source, "a.py", "\tx\n  y\n \tz\na\tb\n")

    assert [finding.line for finding in findings] == [1, 3]


def test_line_too_long(make_host, make_source) -> None:
    text = "a" * 120 + "\n" + "b" * 121 + "\n"

    [finding] = _analyze(LineTooLongInspection, make_host, make_source, "a.txt", text)

    assert (finding.line, finding.row) == (2, 120)
    assert "(121)" in finding.message


def test_todo_comment_uses_configured_level(make_host, make_source) -> None:
    findings = _analyze(
        TodoCommentInspection,
        make_host,
        make_source,
        "a.py",
        "# TODO: one\n# FIXME two\n# todo lowercase\n",
        level=ProblemLevel.ERROR,
    )

    assert [finding.message for finding in findings] == ["TODO marker", "FIXME marker"]
    assert {finding.level for finding in findings} == {ProblemLevel.ERROR}
    assert findings[0].tool_name == "TODO comment"


def test_java_wildcard_import(make_host, make_source) -> None:
    text = "import java.util.*;\nimport java.io.File;\nimport static org.junit.Assert.*;\n"

    findings = _analyze(JavaWildcardImportInspection, make_host, make_source, "Main.java", text)

    assert [finding.line for finding in findings] == [1, 3]
    assert JavaWildcardImportInspection.language == "java"


def test_inspection_failure_is_wrapped(make_host, make_source, marker) -> None:
    broken = marker("BrokenInspection", "x", fail_on="a.txt")

    with pytest.raises(InspectionError, match="Exception during Broken analysis of a.txt") as excinfo:
        _analyze(broken, make_host, make_source, "a.txt", "x")
    assert isinstance(excinfo.value.cause, RuntimeError)


def test_tool_kinds() -> None:
    class Whole(GlobalInspection):
        def check_project(self, files) -> None:
            return None

    whole = tool_kind_for(Whole())
    unknown = tool_kind_for(object())

    assert isinstance(tool_kind_for(TodoCommentInspection()), PerFileTool)
    assert isinstance(whole, UnsupportedTool) and whole.kind == "global"
    assert isinstance(unknown, UnsupportedTool) and unknown.kind == "unknown"


def test_builtin_ids_are_unique() -> None:
    ids = [inspection.inspection_id() for inspection in BUILTIN_INSPECTIONS]

    assert len(ids) == len(set(ids))
    assert all(inspection.display_name for inspection in BUILTIN_INSPECTIONS)


def test_weak_warnings_stay_weak_under_error_level(make_host, make_source) -> None:
    findings = _analyze(
        TrailingWhitespaceInspection,
        make_host,
        make_source,
        "a.py",
        "x = 1  \n",
        level=ProblemLevel.ERROR,
    )

    assert [finding.level for finding in findings] == [ProblemLevel.WEAK_WARNING]
