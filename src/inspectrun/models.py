# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the inspection engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from .severity import ProblemLevel
from .workspace.documents import SourceAnchor, SourceFile

if TYPE_CHECKING:
    from .inspections.base import ToolKind


@runtime_checkable
class Fix(Protocol):
    """Automated transformation resolving one :class:`Finding`."""

    @property
    def name(self) -> str:
        """Return the human-readable fix name."""
        raise NotImplementedError

    @property
    def starts_in_write_scope(self) -> bool:
        """Return ``True`` when the fix must run inside a write scope."""
        raise NotImplementedError

    def apply(self, finding: Finding) -> None:
        """Apply the fix to the source behind ``finding``."""
        raise NotImplementedError


@dataclass(slots=True, eq=False)
class ToolDescriptor:
    """Inspection resolved for a run, identified by its ``id`` alone.

    Two descriptors sharing an ``id`` compare equal even when their levels or
    names differ, so an explicitly configured entry can replace an inherited one.
    """

    id: str
    name: str
    language: str | None
    level: ProblemLevel | None
    tool: ToolKind

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ToolDescriptor):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def short_name(self) -> str:
        return self.id.rsplit(".", 1)[-1]


@dataclass(slots=True, eq=False)
class Finding:
    """One reported problem pinned to a source location."""

    file: SourceFile
    line: int
    row: int
    level: ProblemLevel
    message: str
    fixes: tuple[Fix, ...] = ()
    tool_name: str | None = None
    anchor: SourceAnchor | None = field(default=None, repr=False)

    @property
    def file_name(self) -> str:
        return self.file.name

    @property
    def element(self) -> SourceAnchor | None:
        """Return the live source anchor, or ``None`` once it was consumed."""

        if self.anchor is None or not self.anchor.valid:
            return None
        return self.anchor

    @property
    def location_key(self) -> tuple[int, int]:
        return self.line, self.row

    def render_location(self) -> str:
        return f"{self.file_name}:{self.line}:{self.row}"

    def render_with_location(self) -> str:
        return f"{self.render_location()}: {self.message}"


@dataclass(frozen=True, slots=True)
class ToolResult:
    """Findings produced by one inspection over the whole run."""

    descriptor: ToolDescriptor
    findings: tuple[Finding, ...]


__all__ = ["Finding", "Fix", "ToolDescriptor", "ToolResult"]
