# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Discover source files beneath configured roots and tag their language."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from fnmatch import fnmatch
from pathlib import Path
from typing import Final

from .documents import DocumentManager, SourceDocument, SourceFile

PLAIN_TEXT: Final[str] = "Plain text"

LANGUAGE_EXTENSIONS: Final[dict[str, set[str]]] = {
    "Python": {".py", ".pyi"},
    "Java": {".java"},
    "Kotlin": {".kt", ".kts"},
    "JavaScript": {".js", ".jsx", ".mjs", ".cjs"},
    "TypeScript": {".ts", ".tsx"},
    "Go": {".go"},
    "Rust": {".rs"},
    "C/C++": {".c", ".cc", ".cpp", ".cxx", ".h", ".hpp", ".hh"},
    "Markdown": {".md", ".markdown"},
    "TOML": {".toml"},
    "YAML": {".yml", ".yaml"},
    "Shell Script": {".sh", ".bash"},
}

DEFAULT_EXCLUDES: Final[tuple[str, ...]] = (
    ".git",
    ".hg",
    ".venv",
    "venv",
    "__pycache__",
    "node_modules",
    "build",
    "dist",
    ".inspectrun",
)


def language_for(path: Path) -> str:
    """Return the language display name for ``path`` based on its suffix."""

    suffix = path.suffix.lower()
    for language, extensions in LANGUAGE_EXTENSIONS.items():
        if suffix in extensions:
            return language
    return PLAIN_TEXT


def _is_excluded(path: Path, root: Path, patterns: Sequence[str]) -> bool:
    try:
        relative = path.relative_to(root)
    except ValueError:
        relative = path
    parts = relative.parts
    for pattern in patterns:
        if any(fnmatch(part, pattern) for part in parts):
            return True
        if fnmatch(relative.as_posix(), pattern):
            return True
    return False


def iter_source_paths(roots: Iterable[Path], *, excludes: Sequence[str] = DEFAULT_EXCLUDES) -> list[Path]:
    """Return the sorted, de-duplicated list of files beneath ``roots``.

    Args:
        roots: Files or directories to scan.
        excludes: Glob patterns matched against path components and relative paths.

    Returns:
        list[Path]: Files in deterministic order.
    """

    seen: dict[Path, None] = {}
    for root in roots:
        if root.is_file():
            seen.setdefault(root, None)
            continue
        if not root.is_dir():
            continue
        for candidate in sorted(root.rglob("*")):
            if candidate.is_file() and not _is_excluded(candidate, root, excludes):
                seen.setdefault(candidate, None)
    return list(seen)


def discover_sources(
    roots: Iterable[Path],
    *,
    documents: DocumentManager,
    excludes: Sequence[str] = DEFAULT_EXCLUDES,
    base: Path | None = None,
) -> list[tuple[SourceFile, SourceDocument]]:
    """Return ``(file, document)`` pairs for every readable text file.

    Files that cannot be decoded as UTF-8 are skipped.

    Args:
        roots: Files or directories to scan.
        documents: Document manager that owns the loaded documents.
        excludes: Glob patterns excluded from discovery.
        base: Directory display names are made relative to.

    Returns:
        list[tuple[SourceFile, SourceDocument]]: Source files paired with their live documents.
    """

    pairs: list[tuple[SourceFile, SourceDocument]] = []
    for path in iter_source_paths(roots, excludes=excludes):
        display = path.name
        if base is not None:
            try:
                display = path.resolve().relative_to(base.resolve()).as_posix()
            except ValueError:
                display = path.name
        source = SourceFile(path=path, name=display, language=language_for(path))
        try:
            document = documents.open(source)
        except (UnicodeDecodeError, OSError):
            continue
        pairs.append((source, document))
    return pairs


__all__ = [
    "DEFAULT_EXCLUDES",
    "LANGUAGE_EXTENSIONS",
    "PLAIN_TEXT",
    "discover_sources",
    "iter_source_paths",
    "language_for",
]
