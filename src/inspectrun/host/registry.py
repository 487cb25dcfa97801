# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Registry of every inspection the host knows about."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from ..inspections.base import Inspection
from ..inspections.builtin import BUILTIN_INSPECTIONS

INSPECTION_SUFFIX = "Inspection"


class InspectionRegistry(Mapping[str, type[Inspection]]):
    """Central registry for inspection classes keyed by their fully qualified id.

    ``InspectionRegistry`` behaves like a read-only mapping whose keys are
    inspection ids and whose values are inspection classes. Registration
    order is preserved.
    """

    def __init__(self, inspections: Iterable[type[Inspection]] = ()) -> None:
        self._inspections: dict[str, type[Inspection]] = {}
        for inspection in inspections:
            self.register(inspection)

    @classmethod
    def with_builtins(cls) -> InspectionRegistry:
        return cls(BUILTIN_INSPECTIONS)

    def register(self, inspection: type[Inspection]) -> None:
        """Register ``inspection`` enforcing uniqueness by id.

        Args:
            inspection: Inspection class to insert into the registry.

        Raises:
            ValueError: If an inspection with the same id is already registered.
        """

        inspection_id = inspection.inspection_id()
        if inspection_id in self._inspections:
            raise ValueError(f"Inspection '{inspection_id}' already registered")
        self._inspections[inspection_id] = inspection

    def find(self, name: str) -> type[Inspection] | None:
        """Resolve a user-supplied inspection name.

        ``name`` matches an inspection when it equals the fully qualified id,
        when ``name + "Inspection"`` equals the last segment of the id, or when
        it equals the display name.

        Args:
            name: Name as written in configuration or a profile.

        Returns:
            type[Inspection] | None: Matching inspection class, if any.
        """

        long_name = name + INSPECTION_SUFFIX
        for inspection_id, inspection in self._inspections.items():
            if (
                inspection_id == name
                or inspection_id.rsplit(".", 1)[-1] == long_name
                or inspection.display_name == name
            ):
                return inspection
        return None

    def create_tools(self) -> list[Inspection]:
        """Return fresh instances of every registered inspection."""

        return [inspection() for inspection in self._inspections.values()]

    def __len__(self) -> int:
        return len(self._inspections)

    def __iter__(self) -> Iterator[str]:
        return iter(self._inspections)

    def __getitem__(self, inspection_id: str) -> type[Inspection]:
        return self._inspections[inspection_id]


__all__ = ["InspectionRegistry"]
