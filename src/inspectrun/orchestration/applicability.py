# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Decide whether an inspection applies to a file's host language."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Final

from ..models import ToolDescriptor
from ..workspace.documents import SourceFile

SHARED_LAYER_LANGUAGE: Final[str] = "UAST"

# Inspection scopes are declared against internal language ids that do not
# line up with the file's display language for these layered languages.
LAYERED_LANGUAGE_SCOPES: Final[Mapping[str, frozenset[str | None]]] = {
    "Kotlin": frozenset({None, "kotlin", SHARED_LAYER_LANGUAGE}),
    "Java": frozenset({None, "java", SHARED_LAYER_LANGUAGE, "JAVA"}),
}


def applies(tool: ToolDescriptor, file: SourceFile) -> bool:
    """Return ``True`` when ``tool`` should analyse ``file``.

    Args:
        tool: Descriptor carrying the inspection's declared language scope.
        file: File whose host language is checked.

    Returns:
        bool: ``False`` only for layered languages whose accepted scopes do not
        include the tool's scope.
    """

    accepted = LAYERED_LANGUAGE_SCOPES.get(file.language)
    if accepted is None:
        return True
    return tool.language in accepted


__all__ = ["LAYERED_LANGUAGE_SCOPES", "SHARED_LAYER_LANGUAGE", "applies"]
