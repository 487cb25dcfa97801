# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity levels reported by inspections and their console/threshold mappings."""

from __future__ import annotations

from enum import Enum
from typing import Final, Literal

ConsoleChannel = Literal["info", "warn", "error"]
ThresholdBucket = Literal["errors", "warnings", "info"]


class ProblemLevel(str, Enum):
    """Severity attached to a finding or configured for an inspection."""

    ERROR = "error"
    WARNING = "warning"
    WEAK_WARNING = "weak_warning"
    INFO = "info"

    def __str__(self) -> str:
        return self.name

    @property
    def channel(self) -> ConsoleChannel:
        """Return the console channel used when logging findings of this level."""

        return _CHANNELS[self]

    @property
    def bucket(self) -> ThresholdBucket:
        """Return the threshold counter incremented by findings of this level."""

        return _BUCKETS[self]

    @classmethod
    def from_profile_level(cls, raw: str | None) -> ProblemLevel | None:
        """Translate a host profile severity name into a :class:`ProblemLevel`.

        Args:
            raw: Severity name as written in a host profile, e.g. ``"WEAK WARNING"``.

        Returns:
            ProblemLevel | None: Matching level, or ``None`` for severities
            without a counterpart (``"TYPO"``, ``"SERVER PROBLEM"``, ...).
        """

        if raw is None:
            return None
        key = raw.strip().upper().replace(" ", "_")
        return _PROFILE_LEVELS.get(key)


_CHANNELS: Final[dict[ProblemLevel, ConsoleChannel]] = {
    ProblemLevel.INFO: "info",
    ProblemLevel.WARNING: "warn",
    ProblemLevel.WEAK_WARNING: "warn",
    ProblemLevel.ERROR: "error",
}

_BUCKETS: Final[dict[ProblemLevel, ThresholdBucket]] = {
    ProblemLevel.ERROR: "errors",
    ProblemLevel.WARNING: "warnings",
    ProblemLevel.WEAK_WARNING: "warnings",
    ProblemLevel.INFO: "info",
}

_PROFILE_LEVELS: Final[dict[str, ProblemLevel]] = {
    "ERROR": ProblemLevel.ERROR,
    "WARNING": ProblemLevel.WARNING,
    "WEAK_WARNING": ProblemLevel.WEAK_WARNING,
    "INFO": ProblemLevel.INFO,
    "INFORMATION": ProblemLevel.INFO,
}

__all__ = ["ConsoleChannel", "ProblemLevel", "ThresholdBucket"]
