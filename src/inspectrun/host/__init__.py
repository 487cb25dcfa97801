# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Host-side collaborators: inspection registry, profiles, and access scopes."""

from __future__ import annotations

from .environment import AccessController, HostEnvironment
from .profiles import Profile, ProfileEntry, ProfileStore, TomlProfileStore
from .registry import InspectionRegistry

__all__ = [
    "AccessController",
    "HostEnvironment",
    "InspectionRegistry",
    "Profile",
    "ProfileEntry",
    "ProfileStore",
    "TomlProfileStore",
]
