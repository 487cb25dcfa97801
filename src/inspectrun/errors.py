# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception types shared across the inspection engine."""

from __future__ import annotations


class ConfigError(Exception):
    """Raised when configuration input is invalid or names unknown inspections."""


class InspectionError(Exception):
    """Raised when an inspection fails while analysing a single file."""

    def __init__(self, tool_name: str, file_name: str, cause: BaseException) -> None:
        """Record the failing inspection, file, and original cause.

        Args:
            tool_name: Short name of the inspection that failed.
            file_name: Display name of the file being analysed.
            cause: Exception raised by the inspection.
        """

        super().__init__(f"Exception during {tool_name} analysis of {file_name}")
        self.tool_name = tool_name
        self.file_name = file_name
        self.cause = cause


class AccessScopeError(RuntimeError):
    """Raised when an exclusive access scope is opened while another is active."""


__all__ = ["AccessScopeError", "ConfigError", "InspectionError"]
