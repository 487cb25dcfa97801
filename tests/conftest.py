# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from inspectrun.host import HostEnvironment, InspectionRegistry
from inspectrun.inspections import Inspection, LocalInspection, ProblemsHolder
from inspectrun.models import Fix
from inspectrun.severity import ProblemLevel
from inspectrun.workspace import SourceDocument, SourceFile, language_for


@dataclass
class RecordingLogger:
    """Logger capturing every message per channel."""

    infos: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    debugs: list[str] = field(default_factory=list)
    lines: list[tuple[str, str]] = field(default_factory=list)

    def info(self, message: str) -> None:
        self.infos.append(message)
        self.lines.append(("info", message))

    def warn(self, message: str) -> None:
        self.warnings.append(message)
        self.lines.append(("warn", message))

    def error(self, message: str) -> None:
        self.errors.append(message)
        self.lines.append(("error", message))

    def debug(self, message: str) -> None:
        self.debugs.append(message)
        self.lines.append(("debug", message))

    def ok(self, message: str) -> None:
        self.info(message)


def marker_inspection(
    class_name: str,
    token: str,
    *,
    display_name: str | None = None,
    language: str | None = None,
    default_level: ProblemLevel = ProblemLevel.WARNING,
    fixes: Callable[[], Sequence[Fix]] | None = None,
    fail_on: str | None = None,
) -> type[LocalInspection]:
    """Build an inspection that reports every occurrence of ``token``.

    When ``fail_on`` is set, the inspection raises on files whose name
    contains it.
    """

    pattern = re.compile(re.escape(token))

    def check_file(self: LocalInspection, file: SourceFile, document: SourceDocument, holder: ProblemsHolder) -> None:
        if fail_on is not None and fail_on in file.name:
            raise RuntimeError(f"cannot analyse {file.name}")
        for match in pattern.finditer(document.text):
            holder.register(
                match.start(),
                match.end(),
                f"{token} found",
                fixes=tuple(fixes()) if fixes is not None else (),
            )

    namespace = {
        "__module__": __name__,
        "__qualname__": class_name,
        "display_name": display_name or class_name.removesuffix("Inspection"),
        "language": language,
        "default_level": default_level,
        "check_file": check_file,
    }
    return type(class_name, (LocalInspection,), namespace)


@pytest.fixture
def logger() -> RecordingLogger:
    """Return a fresh recording logger."""
    return RecordingLogger()


@pytest.fixture
def make_host(tmp_path: Path) -> Callable[..., HostEnvironment]:
    """Return a factory building hosts rooted at ``tmp_path``."""

    def _make(*inspections: type[Inspection]) -> HostEnvironment:
        return HostEnvironment.create(tmp_path, registry=InspectionRegistry(inspections))

    return _make


@pytest.fixture
def make_source(tmp_path: Path) -> Callable[..., tuple[SourceFile, SourceDocument]]:
    """Return a factory writing a file and opening it through ``host.documents``."""

    def _make(
        host: HostEnvironment,
        name: str,
        text: str,
        *,
        language: str | None = None,
    ) -> tuple[SourceFile, SourceDocument]:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        source = SourceFile(path=path, name=name, language=language or language_for(path))
        return source, host.documents.open(source)

    return _make


@pytest.fixture
def marker() -> Callable[..., type[LocalInspection]]:
    """Return the :func:`marker_inspection` factory."""
    return marker_inspection
