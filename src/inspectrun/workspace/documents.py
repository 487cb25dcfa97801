# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""In-memory source documents, range anchors, and the document manager."""

from __future__ import annotations

import os
from bisect import bisect_right
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(slots=True, eq=False)
class SourceAnchor:
    """Range marker inside a :class:`SourceDocument` that tracks edits.

    The anchor shifts when text before it changes and becomes invalid when an
    edit touches its range.
    """

    document: SourceDocument
    start: int
    end: int
    valid: bool = True

    @property
    def text(self) -> str:
        return self.document.text[self.start : self.end]

    def invalidate(self) -> None:
        self.valid = False


@dataclass(slots=True, eq=False)
class SourceDocument:
    """Editable text buffer backed by a file on disk."""

    path: Path
    text: str
    saved_text: str
    _anchors: list[SourceAnchor] = field(default_factory=list, repr=False)
    _postponed: list[Callable[[SourceDocument], None]] = field(default_factory=list, repr=False)
    _uncommitted: bool = field(default=False, repr=False)
    _line_starts: list[int] | None = field(default=None, repr=False)

    @classmethod
    def load(cls, path: Path) -> SourceDocument:
        with path.open(encoding="utf-8", newline="") as handle:
            text = handle.read()
        return cls(path=path, text=text, saved_text=text)

    @property
    def modified(self) -> bool:
        return self.text != self.saved_text

    @property
    def committed(self) -> bool:
        return not self._uncommitted

    @property
    def writable(self) -> bool:
        return os.access(self.path, os.W_OK)

    @property
    def line_starts(self) -> list[int]:
        """Return the offset of every line start; cached until the next edit."""

        if self._line_starts is None:
            starts = [0]
            index = self.text.find("\n")
            while index != -1:
                starts.append(index + 1)
                index = self.text.find("\n", index + 1)
            self._line_starts = starts
        return self._line_starts

    def position(self, offset: int) -> tuple[int, int]:
        """Return the 1-based line and 0-based column for ``offset``.

        Args:
            offset: Character offset into the document text.

        Returns:
            tuple[int, int]: ``(line, column)`` pair.
        """

        starts = self.line_starts
        index = bisect_right(starts, offset) - 1
        return index + 1, offset - starts[index]

    def iter_lines(self) -> Iterator[tuple[int, str]]:
        """Yield ``(start offset, line text without newline)`` for every line."""

        starts = self.line_starts
        size = len(self.text)
        for index, start in enumerate(starts):
            end = starts[index + 1] if index + 1 < len(starts) else size
            if start == end:
                break
            yield start, self.text[start:end].rstrip("\r\n")

    def anchor(self, start: int, end: int) -> SourceAnchor:
        """Create an anchor covering ``[start, end)``."""

        if not 0 <= start <= end <= len(self.text):
            raise ValueError(f"Range {start}..{end} outside of {self.path.name}")
        marker = SourceAnchor(document=self, start=start, end=end)
        self._anchors.append(marker)
        return marker

    def replace(self, start: int, end: int, replacement: str) -> None:
        """Replace ``text[start:end]`` with ``replacement`` and update anchors.

        Anchors overlapping the edited range are invalidated; anchors after
        it are shifted by the length delta.
        """

        if not 0 <= start <= end <= len(self.text):
            raise ValueError(f"Range {start}..{end} outside of {self.path.name}")
        delta = len(replacement) - (end - start)
        self.text = self.text[:start] + replacement + self.text[end:]
        self._line_starts = None
        self._uncommitted = True
        live: list[SourceAnchor] = []
        for marker in self._anchors:
            if not marker.valid:
                continue
            overlaps = marker.start < end and start < marker.end
            if marker.start == marker.end:
                overlaps = start <= marker.start <= end
            if overlaps:
                marker.invalidate()
                continue
            if marker.start >= end:
                marker.start += delta
                marker.end += delta
            live.append(marker)
        self._anchors = live

    def postpone(self, operation: Callable[[SourceDocument], None]) -> None:
        """Queue ``operation`` until the document is unblocked."""

        self._postponed.append(operation)

    def commit(self) -> None:
        self._uncommitted = False

    def run_postponed(self) -> None:
        """Run queued operations in order and clear the queue."""

        pending, self._postponed = self._postponed, []
        for operation in pending:
            operation(self)
        self._uncommitted = False

    def save(self) -> None:
        self.path.write_text(self.text, encoding="utf-8", newline="")
        self.saved_text = self.text


@dataclass(frozen=True, slots=True)
class SourceFile:
    """File handle exposing a stable display name and a host language."""

    path: Path
    name: str
    language: str


class DocumentManager:
    """Own the live documents of a run and persist their modifications."""

    def __init__(self) -> None:
        self._documents: dict[Path, SourceDocument] = {}

    def open(self, file: SourceFile) -> SourceDocument:
        """Return the live document for ``file``, loading it on first use."""

        key = file.path.resolve()
        document = self._documents.get(key)
        if document is None:
            document = SourceDocument.load(file.path)
            self._documents[key] = document
        return document

    def get_document(self, file: SourceFile) -> SourceDocument | None:
        """Return the already-open document for ``file`` or ``None``."""

        return self._documents.get(file.path.resolve())

    def forget(self, file: SourceFile) -> None:
        self._documents.pop(file.path.resolve(), None)

    def commit_all(self) -> None:
        for document in self._documents.values():
            document.commit()

    def unblock(self, document: SourceDocument) -> None:
        """Run postponed operations of ``document`` and mark it committed."""

        document.run_postponed()

    def save_all(self) -> list[Path]:
        """Write every modified document to disk.

        Returns:
            list[Path]: Paths that were written.
        """

        saved: list[Path] = []
        for document in self._documents.values():
            if document.modified:
                document.save()
                saved.append(document.path)
        return saved


__all__ = ["DocumentManager", "SourceAnchor", "SourceDocument", "SourceFile"]
