# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Process-lifetime host resources and exclusive access scopes."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import AbstractContextManager, contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from ..errors import AccessScopeError
from ..workspace.documents import DocumentManager
from .profiles import ProfileStore, TomlProfileStore
from .registry import InspectionRegistry

ScopeKind = Literal["read", "write"]


class AccessController:
    """Hand out mutually exclusive read and write scopes.

    Only one scope can be open at a time. Scopes are released on every exit
    path, including exceptions raised inside them.
    """

    def __init__(self) -> None:
        self._active: ScopeKind | None = None
        self.history: list[ScopeKind] = []

    @property
    def active(self) -> ScopeKind | None:
        return self._active

    @contextmanager
    def _acquire(self, kind: ScopeKind) -> Iterator[None]:
        if self._active is not None:
            raise AccessScopeError(f"Cannot open a {kind} scope while a {self._active} scope is active")
        self._active = kind
        self.history.append(kind)
        try:
            yield
        finally:
            self._active = None

    def acquire_read(self) -> AbstractContextManager[None]:
        """Return a context manager holding the read scope."""

        return self._acquire("read")

    def acquire_write(self) -> AbstractContextManager[None]:
        """Return a context manager holding the write scope."""

        return self._acquire("write")


@dataclass(slots=True)
class HostEnvironment:
    """Resources created once by the caller and threaded through every run."""

    root: Path
    registry: InspectionRegistry
    profiles: ProfileStore
    documents: DocumentManager = field(default_factory=DocumentManager)
    access: AccessController = field(default_factory=AccessController)

    @classmethod
    def create(
        cls,
        root: Path,
        *,
        registry: InspectionRegistry | None = None,
        profiles: ProfileStore | None = None,
    ) -> HostEnvironment:
        """Build a host rooted at ``root`` with the built-in inspections by default."""

        return cls(
            root=root,
            registry=registry if registry is not None else InspectionRegistry.with_builtins(),
            profiles=profiles if profiles is not None else TomlProfileStore(root),
        )


__all__ = ["AccessController", "HostEnvironment", "ScopeKind"]
