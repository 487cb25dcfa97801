# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Per-severity finding counters that latch failure once a maximum is exceeded."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Final

from ..config import Config
from ..severity import ProblemLevel, ThresholdBucket

ExceededListener = Callable[[ThresholdBucket, int], None]

_BUCKET_ORDER: Final[tuple[ThresholdBucket, ...]] = ("errors", "warnings", "info")


@dataclass(slots=True)
class ThresholdChecker:
    """Tally findings by severity bucket and latch failure on the first breach."""

    errors: int = 0
    warnings: int = 0
    info: int = 0
    _success: bool = field(default=True, repr=False)

    @property
    def is_success(self) -> bool:
        return self._success

    @property
    def is_fail(self) -> bool:
        return not self._success

    def count(self, bucket: ThresholdBucket) -> int:
        return getattr(self, bucket)

    def apply(self, level: ProblemLevel, config: Config, on_exceeded: ExceededListener | None = None) -> None:
        """Count one finding of ``level`` and latch failure if a maximum is exceeded.

        Buckets are checked in the order errors, warnings, info; only the first
        exceeded bucket is reported. Once failed the checker stays failed.

        Args:
            level: Severity of the finding just produced.
            config: Configuration supplying the per-severity maximums.
            on_exceeded: Called with the bucket name and its count on a breach.
        """

        bucket = level.bucket
        setattr(self, bucket, self.count(bucket) + 1)
        for name in _BUCKET_ORDER:
            value = self.count(name)
            if getattr(config, name).is_too_many(value):
                if on_exceeded is not None:
                    on_exceeded(name, value)
                self._success = False
                return


__all__ = ["ExceededListener", "ThresholdChecker"]
