# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Source files, documents, and discovery."""

from __future__ import annotations

from .discovery import discover_sources, language_for
from .documents import DocumentManager, SourceAnchor, SourceDocument, SourceFile

__all__ = [
    "DocumentManager",
    "SourceAnchor",
    "SourceDocument",
    "SourceFile",
    "discover_sources",
    "language_for",
]
